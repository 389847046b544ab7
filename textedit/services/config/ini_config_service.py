# textedit/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional, Mapping, Dict

from platformdirs import user_config_dir

from textedit.domain.interfaces import IConfigService
from textedit.utils.constants import DEFAULT_ENCODING

_LOGGER = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/TextEdit/config.ini or %APPDATA%\TextEdit\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)
    """

    DEFAULT_APP_DIR = "TextEdit"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)

        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)

        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            parser = configparser.ConfigParser()
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, UnicodeDecodeError, configparser.Error) as exc:
                _LOGGER.warning("Ignoring unreadable config %s: %s", path, exc)
                continue
            self._parser = parser
            self._loaded_from = path
            _LOGGER.debug("Loaded config from %s", path)
            break

        for section in ("app", "editor", "logging"):
            if section not in self._parser:
                self._parser[section] = {}
        self._parser["app"].setdefault("version", "0.0.0")
        self._parser["editor"].setdefault("encoding", DEFAULT_ENCODING)
        self._parser["editor"].setdefault("wrap", "true")
        self._parser["logging"].setdefault("level", "WARNING")

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        val = self.get(section, key, None)
        if val is None:
            return default
        return self._parser.BOOLEAN_STATES.get(val.strip().lower(), default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        snap: Dict[str, Dict[str, str]] = {}
        for sect in self._parser.sections():
            snap[sect] = dict(self._parser[sect])
        return snap

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    # ----- Editor settings -----

    def editor_encoding(self) -> str:
        return (self.get("editor", "encoding") or "").strip() or DEFAULT_ENCODING

    def editor_wrap(self) -> bool:
        return bool(self.get_bool("editor", "wrap", True))

    def log_level(self) -> str:
        return (self.get("logging", "level") or "").strip() or "WARNING"

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics/About dialog."""
        return self._loaded_from
