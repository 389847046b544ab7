from __future__ import annotations
from typing import Iterable
from PyQt6.QtCore import QSettings, QByteArray

from textedit.domain.interfaces import ISettingsService
from textedit.utils.constants import MAX_RECENTS, SETTINGS_GEOMETRY, SETTINGS_RECENTS

class SettingsService(ISettingsService):
    """Persist small UI bits like window geometry and recent files."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_recent(self) -> list[str]:
        v = self._s.value(SETTINGS_RECENTS, [])
        # INI backends hand back a bare str for one-element lists
        if isinstance(v, str):
            v = [v] if v else []
        return [str(x) for x in v][:MAX_RECENTS] if isinstance(v, list) else []

    def set_recent(self, recent: Iterable[str]) -> None:
        self._s.setValue(SETTINGS_RECENTS, list(recent)[:MAX_RECENTS])
