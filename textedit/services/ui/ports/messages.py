from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class CloseChoice(Enum):
    """Answer to "save changes before closing?" (maps to QMessageBox buttons)."""

    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def info(self, parent: Any | None, title: str, text: str) -> None: ...
    def warning(self, parent: Any | None, title: str, text: str) -> None: ...
    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def confirm_close(self, parent: Any | None, title: str, text: str) -> CloseChoice:
        """
        Offer Save / Discard / Cancel for a document with unsaved changes.
        Dismissing the box counts as CANCEL.
        """
        ...
