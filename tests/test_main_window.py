from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import QMimeData, QPoint, QPointF, QSettings, Qt, QUrl
from PyQt6.QtGui import QCloseEvent, QDropEvent
from PyQt6.QtWidgets import QMessageBox, QPlainTextEdit

from textedit.di.container import Container
from textedit.services.config.app_config import AppConfig
from textedit.services.config.ini_config_service import IniConfigService
from textedit.services.file_service import FileService
from textedit.services.settings_service import SettingsService
from textedit.services.ui.main_window import MainWindow

# ------------------------------
# Fixtures
# ------------------------------


@pytest.fixture()
def config(monkeypatch, tmp_path) -> AppConfig:
    monkeypatch.setattr(
        "textedit.services.config.ini_config_service.user_config_dir",
        lambda app: str(tmp_path / "no-user-config"),
    )
    return AppConfig(ini=IniConfigService(), project_root=tmp_path)


@pytest.fixture()
def container(tmp_path, config) -> Container:
    qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return Container(files=FileService(), qsettings=qs, config=config)


@pytest.fixture()
def window(qapp, container: Container) -> MainWindow:
    """
    Fully wired MainWindow (real session, presenter, file service, QSettings
    backed by a per-test INI file).
    """
    w = container.build_main_window(app_title="Test")
    w.show()
    qapp.processEvents()
    yield w
    # Skip the unsaved-changes prompt during teardown.
    w.presenter.session.new()
    w.close()


def _type(window: MainWindow, text: str) -> None:
    """Simulate user typing at the end of the buffer."""
    c = window.editor.textCursor()
    c.movePosition(c.MoveOperation.End)
    window.editor.setTextCursor(c)
    window.editor.insertPlainText(text)


# ------------------------------
# Core window behavior tests
# ------------------------------


def test_window_initial_state(window: MainWindow):
    session = window.presenter.session
    assert session.path is None
    assert session.dirty is False
    assert window.windowTitle() == "Untitled — Test"
    assert isinstance(window.editor, QPlainTextEdit)


def test_typing_marks_dirty_and_title(window: MainWindow):
    _type(window, "hello")
    assert window.presenter.session.content == "hello"
    assert window.presenter.session.dirty is True
    assert window.windowTitle() == "Untitled* — Test"
    assert window.act_save.isEnabled() is True


def test_save_action_follows_dirty_flag(window: MainWindow, tmp_path: Path):
    assert window.act_save.isEnabled() is False
    _type(window, "x")
    assert window.act_save.isEnabled() is True
    window.presenter.session.save_as(tmp_path / "x.txt")
    window.presenter.refresh()
    assert window.act_save.isEnabled() is False
    assert window.act_save_as.isEnabled() is True


def test_dirty_transitions_log_no_qt_warnings(window: MainWindow, qtlog):
    _type(window, "x")
    window.presenter.session.new()
    window.presenter.refresh()
    assert not [r for r in qtlog.records if "[*]" in r.message]


def test_window_open_save_cycle(tmp_path: Path, window: MainWindow):
    src = tmp_path / "a.txt"
    src.write_text("Hello", encoding="utf-8")

    window._open_path(src)
    session = window.presenter.session
    assert session.path == src
    assert session.dirty is False
    assert window.editor.toPlainText() == "Hello"
    assert window.windowTitle() == "a.txt — Test"

    _type(window, "\nWorld")
    assert session.dirty is True

    window.act_save.trigger()
    assert src.read_text(encoding="utf-8") == "Hello\nWorld"
    assert session.dirty is False
    assert window.windowTitle() == "a.txt — Test"


def test_save_as_action_uses_file_dialog(monkeypatch, tmp_path: Path, window: MainWindow):
    dest = tmp_path / "out.txt"
    monkeypatch.setattr(
        "textedit.services.ui.adapters.qt_dialogs.QFileDialog.getSaveFileName",
        lambda *a, **k: (str(dest), ""),
    )
    _type(window, "saved text")
    window.act_save_as.trigger()
    assert dest.read_bytes() == b"saved text"
    assert window.presenter.session.path == dest


def test_open_action_cancelled_dialog_changes_nothing(monkeypatch, window: MainWindow):
    monkeypatch.setattr(
        "textedit.services.ui.adapters.qt_dialogs.QFileDialog.getOpenFileName",
        lambda *a, **k: ("", ""),
    )
    window.act_open.trigger()
    assert window.presenter.session.path is None
    assert window.windowTitle() == "Untitled — Test"


def test_window_write_failure_shows_error(monkeypatch, tmp_path: Path, window: MainWindow):
    shown = {"n": 0}

    def fake_critical(*a, **k):
        shown["n"] += 1

    monkeypatch.setattr(QMessageBox, "critical", fake_critical)

    def boom(self, path: Path, data: bytes) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(FileService, "write_bytes_atomic", boom)
    monkeypatch.setattr(
        "textedit.services.ui.adapters.qt_dialogs.QFileDialog.getSaveFileName",
        lambda *a, **k: (str(tmp_path / "bad.txt"), ""),
    )
    _type(window, "x")
    window.act_save.trigger()
    assert shown["n"] == 1
    assert window.presenter.session.dirty is True
    assert window.statusBar().currentMessage().startswith("Could not save file")


def test_open_non_text_file_shows_error(monkeypatch, tmp_path: Path, window: MainWindow):
    monkeypatch.setattr(QMessageBox, "critical", lambda *a, **k: None)
    blob = tmp_path / "image.bin"
    blob.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
    window._open_path(blob)
    assert window.presenter.session.path is None
    assert window.editor.toPlainText() == ""


def test_new_after_open_clears_buffer(tmp_path: Path, window: MainWindow):
    src = tmp_path / "a.txt"
    src.write_text("text", encoding="utf-8")
    window._open_path(src)
    window.act_new.trigger()
    assert window.editor.toPlainText() == ""
    assert window.presenter.session.path is None
    assert window.presenter.session.dirty is False


# ------------------------------
# Close confirmation
# ------------------------------


def test_close_clean_window_accepts_without_prompt(window: MainWindow, monkeypatch):
    called = {"n": 0}

    def spy(*a, **k):
        called["n"] += 1
        return QMessageBox.StandardButton.Cancel

    monkeypatch.setattr(QMessageBox, "question", spy)
    ev = QCloseEvent()
    window.closeEvent(ev)
    assert ev.isAccepted() is True
    assert called["n"] == 0


def test_close_dirty_cancel_ignores_event(window: MainWindow, monkeypatch):
    monkeypatch.setattr(
        QMessageBox, "question", lambda *a, **k: QMessageBox.StandardButton.Cancel
    )
    _type(window, "unsaved")
    ev = QCloseEvent()
    window.closeEvent(ev)
    assert ev.isAccepted() is False
    assert window.presenter.session.dirty is True


def test_close_dirty_discard_accepts_event(window: MainWindow, monkeypatch):
    monkeypatch.setattr(
        QMessageBox, "question", lambda *a, **k: QMessageBox.StandardButton.Discard
    )
    _type(window, "unsaved")
    ev = QCloseEvent()
    window.closeEvent(ev)
    assert ev.isAccepted() is True


def test_close_dirty_save_writes_then_accepts(window: MainWindow, monkeypatch, tmp_path: Path):
    src = tmp_path / "a.txt"
    src.write_text("v1", encoding="utf-8")
    window._open_path(src)
    _type(window, "+v2")
    monkeypatch.setattr(QMessageBox, "question", lambda *a, **k: QMessageBox.StandardButton.Save)
    ev = QCloseEvent()
    window.closeEvent(ev)
    assert ev.isAccepted() is True
    assert src.read_text(encoding="utf-8") == "v1+v2"


# ------------------------------
# Recents, geometry, toggles, DnD
# ------------------------------


def test_window_recents_persist_roundtrip(window: MainWindow, container: Container, tmp_path: Path, qapp):
    p = tmp_path / "r.txt"
    p.write_text("ok", encoding="utf-8")
    window._open_path(p)
    assert window.presenter.recents[:1] == [str(p)]

    actions = [a.text() for a in window.recent_menu.actions()]
    assert actions == [str(p)]

    w2 = container.build_main_window(app_title="Test2")
    assert w2.presenter.recents[:1] == [str(p)]
    w2.close()


def test_recent_menu_empty_placeholder(window: MainWindow):
    acts = window.recent_menu.actions()
    assert len(acts) == 1
    assert acts[0].text() == "(empty)"
    assert acts[0].isEnabled() is False


def test_close_persists_geometry(window: MainWindow, container: Container, qapp):
    window.close()
    qapp.processEvents()
    assert container.settings_service.get_geometry()


def test_window_toggle_wrap(window: MainWindow):
    window._toggle_wrap(False)
    assert window.editor.lineWrapMode() == QPlainTextEdit.LineWrapMode.NoWrap
    window._toggle_wrap(True)
    assert window.editor.lineWrapMode() == QPlainTextEdit.LineWrapMode.WidgetWidth


def test_about_action_shows_version(window: MainWindow, qapp):
    window.act_about.trigger()
    qapp.processEvents()
    assert window.about_dialog is not None
    assert window.about_dialog.isVisible()
    assert window.about_dialog.version_label.text().startswith("Version ")
    window.about_dialog.close()


def test_drop_file_opens_it(window: MainWindow, tmp_path: Path):
    p = tmp_path / "dropped.txt"
    p.write_text("dropped", encoding="utf-8")
    mime = QMimeData()
    mime.setUrls([QUrl.fromLocalFile(str(p))])
    ev = QDropEvent(
        QPointF(QPoint(10, 10)),
        Qt.DropAction.CopyAction,
        mime,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )
    window.dropEvent(ev)
    assert window.presenter.session.path == p
    assert window.editor.toPlainText() == "dropped"


def test_start_path_opens_file(qapp, container: Container, tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("from argv", encoding="utf-8")
    w = container.build_main_window(start_path=p, app_title="Test")
    assert w.editor.toPlainText() == "from argv"
    assert w.presenter.session.dirty is False
    w.close()
