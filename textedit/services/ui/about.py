# textedit/services/ui/about.py
from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from textedit.utils.constants import APP_NAME


class AboutDialog(QDialog):
    def __init__(self, version: str = "0.0.0", parent=None):
        super().__init__(parent)
        self.setWindowTitle("About")
        self.setModal(False)

        # Widgets
        self.close_btn = QPushButton("OK")

        self.name_label = QLabel(APP_NAME)
        self.version_label = QLabel(f"Version {version}")
        blurb = QLabel("A minimal plain-text editor.")
        blurb.setWordWrap(True)

        # Layouts
        form = QGridLayout()
        form.addWidget(self.name_label, 0, 0)
        form.addWidget(self.version_label, 1, 0)
        form.addWidget(blurb, 2, 0)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.close_btn)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addLayout(buttons)

        # Signals
        self.close_btn.clicked.connect(self.close)
