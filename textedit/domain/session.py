from __future__ import annotations

import codecs
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path

from textedit.domain.errors import (
    DecodeError,
    IOReadError,
    IOWriteError,
    NoPathError,
    OperationInFlightError,
)
from textedit.domain.interfaces import IFileService

_LOGGER = logging.getLogger(__name__)

# Codecs that drop a BOM on decode and write one back on encode; bytes would not
# survive an open/save round trip. Use the -le/-be variants instead.
_BOM_CODECS = frozenset({"utf-8-sig", "utf-16", "utf-32"})


class CloseDecision(Enum):
    """Answer to a close request; the shell decides how to ask the user."""

    PROCEED_IMMEDIATELY = "proceed"
    CONFIRMATION_REQUIRED = "confirm"


class DocumentSession:
    """
    In-memory state of the one document shown in a window.

    Dirty policy: any edit marks the document dirty, even one that restores the
    previous text. Only a successful open/load or save/save-as clears it.
    Failed operations leave content, path and the dirty flag untouched.
    """

    def __init__(self, files: IFileService, *, encoding: str = "utf-8") -> None:
        # Fail at construction rather than on the first save.
        name = codecs.lookup(encoding).name
        if name in _BOM_CODECS:
            raise LookupError(f"{encoding!r} rewrites byte order marks; not usable for editing")
        self._encoding = name
        self._files = files
        self._content = ""
        self._path: Path | None = None
        self._dirty = False
        self._in_flight: str | None = None

    # ---------- read-only state ----------

    @property
    def content(self) -> str:
        return self._content

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def filename(self) -> str | None:
        return self._path.name if self._path is not None else None

    @property
    def busy(self) -> bool:
        return self._in_flight is not None

    # ---------- lifecycle ----------

    def new(self) -> None:
        """Drop the current document and start an empty, clean, unnamed one."""
        self._check_idle("new")
        self._content = ""
        self._path = None
        self._dirty = False
        _LOGGER.debug("New empty document")

    def edit(self, new_content: str) -> None:
        self._check_idle("edit")
        self._content = new_content
        self._dirty = True

    def open(self, path: Path, data: bytes) -> None:
        """Adopt `data` read from `path` as the current document."""
        self._check_idle("open")
        try:
            text = data.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise DecodeError(
                f"{path} is not valid {self._encoding} text: {exc.reason}", path
            ) from exc
        self._content = text
        self._path = path
        self._dirty = False
        _LOGGER.debug("Opened %s (%d bytes)", path, len(data))

    def load(self, path: Path) -> None:
        """Read `path` through the file service, then open it."""
        with self._operation("load"):
            try:
                data = self._files.read_bytes(path)
            except OSError as exc:
                raise IOReadError(f"Cannot read {path}: {exc}", path) from exc
        self.open(path, data)

    def save(self) -> None:
        self._check_idle("save")
        if self._path is None:
            raise NoPathError("Document has no file path; use Save As.")
        self._write(self._path)

    def save_as(self, new_path: Path) -> None:
        self._write(new_path)
        self._path = new_path

    def request_close(self) -> CloseDecision:
        if self._dirty:
            return CloseDecision.CONFIRMATION_REQUIRED
        return CloseDecision.PROCEED_IMMEDIATELY

    # ---------- internals ----------

    def _write(self, path: Path) -> None:
        with self._operation("save"):
            snapshot = self._content
            try:
                data = snapshot.encode(self._encoding)
            except UnicodeEncodeError as exc:
                raise IOWriteError(
                    f"Text cannot be stored as {self._encoding}: {exc.reason}", path
                ) from exc
            try:
                self._files.write_bytes_atomic(path, data)
            except OSError as exc:
                raise IOWriteError(f"Cannot write {path}: {exc}", path) from exc
            self._dirty = False
            _LOGGER.debug("Saved %s (%d bytes)", path, len(data))

    def _check_idle(self, op: str) -> None:
        if self._in_flight is not None:
            raise OperationInFlightError(
                f"Cannot {op} while {self._in_flight} is in progress.", self._path
            )

    @contextmanager
    def _operation(self, op: str) -> Iterator[None]:
        self._check_idle(op)
        self._in_flight = op
        try:
            yield
        finally:
            self._in_flight = None
