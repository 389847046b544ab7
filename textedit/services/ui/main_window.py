from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QFontDatabase, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow,
    QMenu,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
)

from textedit.domain.interfaces import ISettingsService
from textedit.services.ui.about import AboutDialog
from textedit.services.ui.presenters.main_presenter import MainPresenter
from textedit.utils.constants import APP_NAME, MAX_RECENTS, STATUS_TIMEOUT_MS

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Thin PyQt window. Menu actions, edits and close requests are forwarded to
    an attached MainPresenter; the presenter pushes title, text and status back
    through the IMainView methods below.
    """

    def __init__(
        self,
        settings: ISettingsService,
        *,
        app_title: str = APP_NAME,
        version: str = "0.0.0",
        wrap: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 650)

        self.settings = settings
        self._version = version
        self._presenter: MainPresenter | None = None
        self.about_dialog: AboutDialog | None = None

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        # File drops go to the window (open), not into the buffer as text
        self.editor.setAcceptDrops(False)
        self.setCentralWidget(self.editor)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))
        self.act_toggle_wrap.setChecked(wrap)
        self._toggle_wrap(wrap)

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        # DnD
        self.setAcceptDrops(True)

    # ---------- presenter wiring ----------

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self._presenter = presenter

    @property
    def presenter(self) -> MainPresenter:
        if self._presenter is None:
            raise RuntimeError("MainWindow used before a presenter was attached.")
        return self._presenter

    # ---------- UI creation ----------

    def _build_actions(self):
        self.act_new = QAction(
            "&New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "&Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "&Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save &As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )
        self.act_quit = QAction(
            "&Quit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )
        self.act_quit.setStatusTip("Exit application")

        self.act_toggle_wrap = QAction(
            "Toggle Wrap",
            self,
            checkable=True,
            checked=True,
            triggered=self._toggle_wrap,
        )
        self.act_about = QAction("&About", self, triggered=self._show_about)

        self.recent_menu = QMenu("Open &Recent", self)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save, self.act_save_as):
            tb.addAction(a)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_quit)
        self.set_recents([])

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_toggle_wrap)

        helpm = m.addMenu("&Help")
        helpm.addAction(self.act_about)

    # ---------- IMainView ----------

    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        # Loading a file is not an edit: keep textChanged quiet.
        was_blocked = self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(was_blocked)

    def set_modified(self, modified: bool) -> None:
        # The title carries the "*" marker; here only Save follows the dirty flag.
        self.act_save.setEnabled(modified)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_recents(self, items: list[str]) -> None:
        self.recent_menu.clear()
        if not items:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in items[:MAX_RECENTS]:
            self.recent_menu.addAction(
                QAction(p, self, triggered=lambda chk=False, x=p: self._open_path(Path(x)))
            )

    def show_status(self, text: str, msec: int = STATUS_TIMEOUT_MS) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Actions ----------

    def _new_file(self):
        self.presenter.on_new()

    def _open_dialog(self):
        self.presenter.on_open()

    def _open_path(self, path: Path):
        self.presenter.on_open(path)

    def _save(self):
        self.presenter.on_save()

    def _save_as(self):
        self.presenter.on_save_as()

    def _toggle_wrap(self, on: bool):
        mode = (
            QPlainTextEdit.LineWrapMode.WidgetWidth if on else QPlainTextEdit.LineWrapMode.NoWrap
        )
        self.editor.setLineWrapMode(mode)

    def _show_about(self):
        if self.about_dialog is None:
            self.about_dialog = AboutDialog(version=self._version, parent=self)
        self.about_dialog.show()

    def _on_text_changed(self):
        self.presenter.on_text_edited(self.editor.toPlainText())

    # ---------- DnD ----------

    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        urls = e.mimeData().urls()
        if not urls:
            return
        local = urls[0].toLocalFile()
        if local:
            self._open_path(Path(local))

    # ---------- Close ----------

    def closeEvent(self, event):
        if self._presenter is not None and not self._presenter.on_close_requested():
            _LOGGER.debug("Close cancelled by user")
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
