from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from textedit.di.container import Container
from textedit.services.config.app_config import build_app_config
from textedit.utils.constants import APP_NAME, APP_ORG
from textedit.utils.log import configure_logging

_LOGGER = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    configure_logging(config.log_level())
    _LOGGER.info("%s %s", APP_NAME, config.get_version())
    if config.loaded_from is not None:
        _LOGGER.info("Config: %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
