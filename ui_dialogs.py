# ui_dialogs.py
from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QDialogButtonBox,
)

from models import Entry


class ConfirmDeleteDialog(QDialog):
    """
    Modal shown between "Delete" and the actual removal.
    Accept confirms, Reject (Cancel / Esc / close) keeps the entry.
    """

    def __init__(self, parent=None, entry: Entry | None = None):
        super().__init__(parent)
        self.setWindowTitle("Delete gratitude")
        self.setModal(True)
        self.setMinimumWidth(420)

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(12)

        question = QLabel("Are you sure you want to delete this gratitude?")
        question.setStyleSheet("font-weight: 600;")
        root.addWidget(question)

        if entry is not None:
            detail = QLabel(f"{entry.date.isoformat()}  {entry.title}")
            detail.setWordWrap(True)
            detail.setStyleSheet("color: #bdbdbd;")
            root.addWidget(detail)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Yes
            | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.button(QDialogButtonBox.StandardButton.Yes).setText("Delete")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        root.addWidget(buttons)

        buttons.button(QDialogButtonBox.StandardButton.Cancel).setFocus()
