from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from textedit.utils.constants import TEXT_FILE_FILTER


@runtime_checkable
class IFileDialogService(Protocol):
    """
    Native file choosers for Open and Save As. Both return None when the user
    dismisses the dialog; that is a cancellation, never an error.
    """

    def choose_open_path(
        self,
        parent: Any | None,
        *,
        start_dir: Path | None = None,
        filter_str: str = TEXT_FILE_FILTER,
    ) -> Path | None: ...

    def choose_save_path(
        self,
        parent: Any | None,
        *,
        suggested: Path | None = None,
        filter_str: str = TEXT_FILE_FILTER,
    ) -> Path | None: ...
