from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from textedit.domain.interfaces import IAppConfig
from textedit.services.config.ini_config_service import IniConfigService

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """Repository root for a source checkout or editable install (holds `version` and `config/`)."""
    # textedit/services/config/app_config.py -> parents[3]
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None

    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService and adds get_version() from <root>/version.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini [app] version
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    def editor_encoding(self) -> str:
        return self.ini.editor_encoding()

    def editor_wrap(self) -> bool:
        return self.ini.editor_wrap()

    def log_level(self) -> str:
        return self.ini.log_level()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
