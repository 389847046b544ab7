from __future__ import annotations

import os
from pathlib import Path

# Headless Qt for CI; must be set before the first QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from textedit.domain.session import DocumentSession
from textedit.services.file_service import FileService
from textedit.services.settings_service import SettingsService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- In-memory filesystem collaborator ---


class MemoryFileService:
    """Dict-backed IFileService; failures are switched on per path."""

    def __init__(self) -> None:
        self.files: dict[Path, bytes] = {}
        self.writes: list[Path] = []
        self.fail_reads: set[Path] = set()
        self.fail_writes: set[Path] = set()

    def read_bytes(self, path: Path) -> bytes:
        if path in self.fail_reads:
            raise PermissionError(13, "Permission denied", str(path))
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        if path in self.fail_writes:
            raise OSError(28, "No space left on device", str(path))
        self.files[path] = bytes(data)
        self.writes.append(path)


# --- Other common fixtures ---


@pytest.fixture()
def memory_files() -> MemoryFileService:
    return MemoryFileService()


@pytest.fixture()
def session(memory_files: MemoryFileService) -> DocumentSession:
    return DocumentSession(memory_files)


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()
