from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QSettings

from textedit.domain.interfaces import IFileService, ISettingsService
from textedit.domain.session import DocumentSession
from textedit.services.config.app_config import AppConfig, build_app_config
from textedit.services.file_service import FileService
from textedit.services.settings_service import SettingsService
from textedit.services.ui.adapters import QtFileDialogService, QtMessageService
from textedit.services.ui.main_window import MainWindow
from textedit.services.ui.ports import IFileDialogService, IMessageService
from textedit.services.ui.presenters import MainPresenter
from textedit.utils.constants import APP_NAME, APP_ORG, DEFAULT_ENCODING

_LOGGER = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds one DocumentSession + MainPresenter per window
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: AppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- Factories ----------

    def build_session(self) -> DocumentSession:
        encoding = self.config.editor_encoding()
        try:
            return DocumentSession(self.file_service, encoding=encoding)
        except LookupError as e:
            _LOGGER.warning(
                "Encoding %r from config rejected (%s); using %s", encoding, e, DEFAULT_ENCODING
            )
            return DocumentSession(self.file_service, encoding=DEFAULT_ENCODING)

    def build_main_presenter(self, view: MainWindow, *, app_title: str = APP_NAME) -> MainPresenter:
        return MainPresenter(
            view=view,
            session=self.build_session(),
            settings=self.settings_service,
            messages=self.messages,
            dialogs=self.dialogs,
            app_title=app_title,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """
        Create the Qt MainWindow, attach its presenter (which owns the window's
        DocumentSession) and load the optional start file.
        """
        window = MainWindow(
            settings=self.settings_service,
            app_title=app_title,
            version=self.config.get_version(),
            wrap=self.config.editor_wrap(),
        )
        presenter = self.build_main_presenter(window, app_title=app_title)
        window.attach_presenter(presenter)
        presenter.start(start_path)
        return window


def build_main_window(
    qsettings: QSettings | None = None,
    *,
    start_path: Path | None = None,
    app_title: str = APP_NAME,
    organization: str = APP_ORG,
    application: str = APP_NAME,
) -> MainWindow:
    """One-call convenience for a ready-to-use window."""
    container = Container.default(
        qsettings=qsettings,
        organization=organization,
        application=application,
    )
    return container.build_main_window(start_path=start_path, app_title=app_title)
