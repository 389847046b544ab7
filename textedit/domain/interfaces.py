from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, Protocol


class IFileService(Protocol):
    """Read/write raw file bytes. Writes should be atomic when possible."""

    def read_bytes(self, path: Path) -> bytes: ...
    def write_bytes_atomic(self, path: Path, data: bytes) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_recent(self) -> list[str]: ...
    def set_recent(self, recent: Iterable[str]) -> None: ...


class IConfigService(Protocol):
    """Read-only access to the user's INI configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    """Config plus the resolved application version."""

    def get_version(self) -> str: ...
