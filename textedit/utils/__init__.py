"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_ENCODING,
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_RECENTS,
    STATUS_TIMEOUT_MS,
    TEXT_FILE_FILTER,
)
from .log import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "DEFAULT_ENCODING",
    "TEXT_FILE_FILTER",
    "SETTINGS_GEOMETRY",
    "SETTINGS_RECENTS",
    "MAX_RECENTS",
    "STATUS_TIMEOUT_MS",
    "configure_logging",
]
