from __future__ import annotations

from pathlib import Path


class DocumentError(Exception):
    """Base class for recoverable document session failures.

    Attributes:
        path: File the failing operation targeted, if any.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DecodeError(DocumentError):
    """File bytes are not valid text in the session encoding."""


class NoPathError(DocumentError):
    """Save requested for a document that has never been saved or opened."""


class IOReadError(DocumentError):
    """The filesystem refused to hand over a file's bytes."""


class IOWriteError(DocumentError):
    """The filesystem refused to store the document."""


class OperationInFlightError(DocumentError):
    """A load or save is still outstanding on this session."""
