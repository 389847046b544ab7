"""Domain layer: interfaces, errors and the document session."""

from .errors import (
    DecodeError,
    DocumentError,
    IOReadError,
    IOWriteError,
    NoPathError,
    OperationInFlightError,
)
from .interfaces import IAppConfig, IConfigService, IFileService, ISettingsService
from .session import CloseDecision, DocumentSession

__all__ = [
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "IAppConfig",
    "CloseDecision",
    "DocumentSession",
    "DocumentError",
    "DecodeError",
    "NoPathError",
    "IOReadError",
    "IOWriteError",
    "OperationInFlightError",
]
