from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from textedit.domain.errors import DocumentError, OperationInFlightError
from textedit.domain.interfaces import ISettingsService
from textedit.domain.session import CloseDecision, DocumentSession
from textedit.services.ui.ports.dialogs import IFileDialogService
from textedit.services.ui.ports.messages import CloseChoice, IMessageService
from textedit.utils.constants import APP_NAME, MAX_RECENTS, STATUS_TIMEOUT_MS

_LOGGER = logging.getLogger(__name__)


class ActionResult(Enum):
    """What came of a user command, for the shell to react to."""

    DONE = "done"
    CANCELLED = "cancelled"  # dialog dismissed or Cancel chosen; not an error
    FAILED = "failed"  # error already reported to the user


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...

    # window chrome
    def set_modified(self, modified: bool) -> None: ...
    def set_title(self, title: str) -> None: ...

    # recents
    def set_recents(self, items: list[str]) -> None: ...

    # status
    def show_status(self, text: str, msec: int = STATUS_TIMEOUT_MS) -> None: ...


class MainPresenter:
    """
    Event handlers for the main window. Each handler drives the DocumentSession,
    reports problems through the message port, and returns an ActionResult.

    New, Open and Close all go through the same confirmation protocol
    (on_close_requested) before the current document is dropped.
    """

    def __init__(
        self,
        view: IMainView,
        session: DocumentSession,
        settings: ISettingsService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        app_title: str = APP_NAME,
    ) -> None:
        self.view = view
        self.session = session
        self.settings = settings
        self.messages = messages
        self.dialogs = dialogs
        self.app_title = app_title
        self.recents: list[str] = settings.get_recent()

    # ---------- startup ----------

    def start(self, path: Path | None = None) -> ActionResult:
        self.view.set_editor_text(self.session.content)
        self.view.set_recents(list(self.recents))
        self.refresh()
        if path is None:
            return ActionResult.DONE
        return self.on_open(path)

    # ---------- commands ----------

    def on_new(self) -> ActionResult:
        if not self.on_close_requested():
            return ActionResult.CANCELLED
        try:
            self.session.new()
        except OperationInFlightError as e:
            return self._fail("New Document", "Could not start a new document!", e)
        self.view.set_editor_text("")
        self.refresh()
        return ActionResult.DONE

    def on_open(self, path: Path | None = None) -> ActionResult:
        if not self.on_close_requested():
            return ActionResult.CANCELLED
        if path is None:
            start_dir = self.session.path.parent if self.session.path else None
            path = self.dialogs.choose_open_path(self.view, start_dir=start_dir)
            if path is None:
                return ActionResult.CANCELLED

        self.view.show_status("Opening file…", 0)
        try:
            self.session.load(path)
        except DocumentError as e:
            return self._fail("Open Error", f'Could not open file: "{path}"!', e)

        self.view.set_editor_text(self.session.content)
        self._add_recent(path)
        self.refresh()
        self.view.show_status(f'Opened: "{path}"')
        _LOGGER.info("Opened %s", path)
        return ActionResult.DONE

    def on_save(self) -> ActionResult:
        path = self.session.path
        if path is None:
            return self.on_save_as()
        return self._write(path, self.session.save)

    def on_save_as(self) -> ActionResult:
        path = self.dialogs.choose_save_path(self.view, suggested=self.session.path)
        if path is None:
            return ActionResult.CANCELLED
        result = self._write(path, lambda: self.session.save_as(path))
        if result is ActionResult.DONE:
            self._add_recent(path)
        return result

    def on_text_edited(self, text: str) -> None:
        was_dirty = self.session.dirty
        try:
            self.session.edit(text)
        except OperationInFlightError as e:
            _LOGGER.warning("Edit rejected: %s", e)
            return
        if not was_dirty:
            self.refresh()

    def on_close_requested(self) -> bool:
        """
        Close-confirmation protocol. True means the current document may be
        dropped (it was clean, saved just now, or discarded by the user).
        """
        if self.session.request_close() is CloseDecision.PROCEED_IMMEDIATELY:
            return True

        name = self.session.filename or "Untitled"
        choice = self.messages.confirm_close(
            self.view,
            "Unsaved changes",
            f"Save changes to “{name}” before closing?",
        )
        if choice is CloseChoice.SAVE:
            return self.on_save() is ActionResult.DONE
        if choice is CloseChoice.DISCARD:
            _LOGGER.info("Discarded unsaved changes to %s", name)
            return True
        return False

    # ---------- view sync ----------

    def window_title(self) -> str:
        name = self.session.filename or "Untitled"
        star = "*" if self.session.dirty else ""
        return f"{name}{star} — {self.app_title}"

    def refresh(self) -> None:
        self.view.set_title(self.window_title())
        self.view.set_modified(self.session.dirty)

    # ---------- helpers ----------

    def _write(self, path: Path, op: Callable[[], None]) -> ActionResult:
        self.view.show_status("Saving file…", 0)
        try:
            op()
        except DocumentError as e:
            return self._fail("Save Error", f'Could not save file: "{path}"!', e)
        self.refresh()
        self.view.show_status(f'File saved to: "{path}"')
        _LOGGER.info("Saved %s", path)
        return ActionResult.DONE

    def _fail(self, title: str, status: str, exc: DocumentError) -> ActionResult:
        _LOGGER.warning("%s: %s", title, exc)
        self.view.show_status(status)
        self.messages.error(self.view, title, str(exc))
        self.refresh()
        return ActionResult.FAILED

    def _add_recent(self, path: Path) -> None:
        s = str(path)
        if s in self.recents:
            self.recents.remove(s)
        self.recents.insert(0, s)
        self.recents = self.recents[:MAX_RECENTS]
        self.settings.set_recent(self.recents)
        self.view.set_recents(list(self.recents))
