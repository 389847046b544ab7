from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from textedit.services.ui.ports.dialogs import IFileDialogService
from textedit.utils.constants import TEXT_FILE_FILTER


def _chosen(result: tuple[str, str]) -> Path | None:
    path_str, _selected_filter = result
    return Path(path_str) if path_str else None


class QtFileDialogService(IFileDialogService):
    """QFileDialog static helpers behind IFileDialogService."""

    open_caption = "Open File"
    save_caption = "Save As"

    def choose_open_path(
        self,
        parent: Any | None,
        *,
        start_dir: Path | None = None,
        filter_str: str = TEXT_FILE_FILTER,
    ) -> Path | None:
        directory = str(start_dir) if start_dir is not None else ""
        return _chosen(
            QFileDialog.getOpenFileName(parent, self.open_caption, directory, filter_str)
        )

    def choose_save_path(
        self,
        parent: Any | None,
        *,
        suggested: Path | None = None,
        filter_str: str = TEXT_FILE_FILTER,
    ) -> Path | None:
        directory = str(suggested) if suggested is not None else ""
        return _chosen(
            QFileDialog.getSaveFileName(parent, self.save_caption, directory, filter_str)
        )
