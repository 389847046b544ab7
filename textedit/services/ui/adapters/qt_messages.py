from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from textedit.services.ui.ports.messages import CloseChoice, IMessageService


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def info(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.information(parent, title, text)

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.warning(parent, title, text)

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def confirm_close(self, parent: Any | None, title: str, text: str) -> CloseChoice:
        Btn = QMessageBox.StandardButton
        resp = QMessageBox.question(
            parent,
            title,
            text,
            Btn.Save | Btn.Discard | Btn.Cancel,
            Btn.Save,
        )
        if resp == Btn.Save:
            return CloseChoice.SAVE
        if resp == Btn.Discard:
            return CloseChoice.DISCARD
        return CloseChoice.CANCEL
