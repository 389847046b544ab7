from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def resolve_level(name: str | None, default: int = logging.WARNING) -> int:
    """Map a level name from config ("debug", "INFO", ...) to a logging level."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: str | None = None) -> None:
    """
    Install one stderr handler on the root logger. Safe to call repeatedly:
    later calls only adjust the level.
    """
    root = logging.getLogger()
    root.setLevel(resolve_level(level))
    if any(getattr(h, "_textedit_handler", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._textedit_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
