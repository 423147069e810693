# main.py
from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import Qt, QDate
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDialog,
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QLabel,
    QFrame,
    QLineEdit,
    QDateEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QMessageBox,
    QScrollArea,
)

from accordion import Accordion
from journal import GratitudeList
from ui_styles import DARK_QSS
from ui_dialogs import ConfirmDeleteDialog

import storage

logger = logging.getLogger(__name__)

SECTION_TITLES = ["New gratitude", "My gratitudes", "About"]


def _to_qdate(d) -> QDate:
    return QDate(d.year, d.month, d.day)


# -----------------------------
# Main Window
# -----------------------------

class GratitudeWindow(QMainWindow):
    def __init__(self, journal: GratitudeList, store_path: str = ""):
        super().__init__()
        self.setWindowTitle("Gratitude Journal")
        self.setMinimumSize(720, 600)

        self.journal = journal
        self.store_path = store_path
        self.accordion = Accordion(len(SECTION_TITLES))

        self.section_headers: list[QPushButton] = []
        self.section_bodies: list[QFrame] = []

        self._build_actions_and_menu()
        self._build_ui()

        self._refresh_sections()
        self._load_draft_into_form()
        self._refresh_table()
        self._show_count()

    # ---------------- Menu ----------------

    def _build_actions_and_menu(self) -> None:
        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut(QKeySequence("Ctrl+Q"))
        self.act_exit.triggered.connect(self.close)

        self.act_delete = QAction("Delete Selected", self)
        self.act_delete.setShortcut(QKeySequence(Qt.Key.Key_Delete))
        self.act_delete.triggered.connect(self.delete_selected)

        mb = self.menuBar()
        m_file = mb.addMenu("File")
        m_file.addAction(self.act_exit)

        m_edit = mb.addMenu("Edit")
        m_edit.addAction(self.act_delete)

    # ---------------- UI ----------------

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        central_layout = QVBoxLayout(central)
        central_layout.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        central_layout.addWidget(scroll)

        content = QWidget()
        scroll.setWidget(content)

        root = QVBoxLayout(content)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(8)

        # -------- Header --------
        title = QLabel("Gratitude Journal")
        title.setStyleSheet("font-size: 22px; font-weight: 700;")
        subtitle = QLabel("One small good thing a day. Enter adds, Delete removes the selected row.")
        subtitle.setStyleSheet("color: #bdbdbd;")
        root.addWidget(title)
        root.addWidget(subtitle)
        root.addSpacing(8)

        # -------- Sections --------
        bodies = [self._build_form(), self._build_list(), self._build_about()]
        for i, (name, body) in enumerate(zip(SECTION_TITLES, bodies)):
            header = QPushButton(name)
            header.setObjectName("sectionHeader")
            header.setCheckable(True)
            header.clicked.connect(lambda _checked, idx=i: self.toggle_section(idx))

            frame = QFrame()
            frame.setObjectName("sectionBody")
            QVBoxLayout(frame).addWidget(body)

            self.section_headers.append(header)
            self.section_bodies.append(frame)
            root.addWidget(header)
            root.addWidget(frame)

        root.addStretch(1)

    def _build_form(self) -> QWidget:
        w = QWidget()
        grid = QGridLayout(w)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setHorizontalSpacing(10)
        grid.setVerticalSpacing(6)

        grid.addWidget(QLabel("I am grateful for:"), 0, 0)
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Something good that happened... (Enter adds)")
        self.title_edit.setClearButtonEnabled(True)
        self.title_edit.returnPressed.connect(self.add_gratitude)
        grid.addWidget(self.title_edit, 0, 1, 1, 2)

        grid.addWidget(QLabel("Date:"), 1, 0)
        self.date_edit = QDateEdit()
        self.date_edit.setDisplayFormat("yyyy-MM-dd")
        self.date_edit.setCalendarPopup(True)
        grid.addWidget(self.date_edit, 1, 1)

        self.btn_add = QPushButton("Add")
        self.btn_add.setObjectName("addButton")
        self.btn_add.setFixedWidth(110)
        self.btn_add.clicked.connect(self.add_gratitude)
        grid.addWidget(self.btn_add, 1, 2)

        grid.setColumnStretch(1, 1)
        return w

    def _build_list(self) -> QWidget:
        w = QWidget()
        layout = QVBoxLayout(w)
        layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["Date", "Gratitude"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.verticalHeader().setVisible(False)
        self.table.setWordWrap(True)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.table.setMinimumHeight(220)
        layout.addWidget(self.table, 1)

        actions = QHBoxLayout()
        actions.addStretch(1)
        btn_del = QPushButton("Delete Selected")
        btn_del.clicked.connect(self.delete_selected)
        actions.addWidget(btn_del)
        layout.addLayout(actions)
        return w

    def _build_about(self) -> QWidget:
        where = self.store_path or "(not persisted)"
        lbl = QLabel(
            "Write down one thing you are grateful for each day.\n\n"
            f"Entries are saved automatically to:\n{where}"
        )
        lbl.setWordWrap(True)
        lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        return lbl

    # ---------------- Accordion ----------------

    def toggle_section(self, index: int) -> None:
        self.accordion.toggle(index)
        self._refresh_sections()

    def _refresh_sections(self) -> None:
        for i, (header, body) in enumerate(zip(self.section_headers, self.section_bodies)):
            is_open = self.accordion.is_open(i)
            header.setChecked(is_open)
            body.setVisible(is_open)

    # ---------------- Form ----------------

    def _load_draft_into_form(self) -> None:
        draft = self.journal.draft
        self.title_edit.setText(draft.title)
        if draft.date is not None:
            self.date_edit.setDate(_to_qdate(draft.date))

    def add_gratitude(self) -> None:
        self.journal.draft.title = self.title_edit.text()
        self.journal.draft.date = self.date_edit.date().toPyDate()

        e = self.journal.add_gratitude()
        if e is None:
            self.statusBar().showMessage("Write something first.", 4000)
            self.title_edit.setFocus()
            return

        self._load_draft_into_form()
        self._refresh_table()
        self._show_count(f"Added: {e.title.strip()}")
        self.title_edit.setFocus()

    # ---------------- List ----------------

    def _refresh_table(self) -> None:
        self.table.setRowCount(0)
        for e in self.journal.entries:
            row = self.table.rowCount()
            self.table.insertRow(row)

            it_date = QTableWidgetItem(e.date.isoformat())
            it_date.setData(Qt.ItemDataRole.UserRole, e.id)
            it_title = QTableWidgetItem(e.title)
            it_title.setToolTip(e.title)

            for it in (it_date, it_title):
                it.setFlags(it.flags() & ~Qt.ItemFlag.ItemIsEditable)

            self.table.setItem(row, 0, it_date)
            self.table.setItem(row, 1, it_title)

        self.table.resizeRowsToContents()

    def delete_selected(self) -> None:
        row = self.table.currentRow()
        if row < 0:
            return

        self.journal.delete_gratitude(row)
        entry = self.journal.entries[row] if row < len(self.journal.entries) else None

        dlg = ConfirmDeleteDialog(self, entry=entry)
        if dlg.exec() != QDialog.DialogCode.Accepted:
            self.journal.close_delete_modal()
            self.statusBar().showMessage("Delete cancelled.", 4000)
            return

        removed = self.journal.confirm_delete()
        self._refresh_table()
        self._show_count("Deleted." if removed else "")

    # ---------------- Status ----------------

    def _show_count(self, prefix: str = "") -> None:
        n = len(self.journal.entries)
        msg = f"{n} gratitude{'s' if n != 1 else ''}"
        self.statusBar().showMessage(f"{prefix}  {msg}" if prefix else msg)


# -----------------------------
# Entry point
# -----------------------------

def main() -> None:
    logging.basicConfig(
        level=storage.log_level_from_env(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication([])
    app.setStyleSheet(DARK_QSS)

    store_path = storage.get_store_path()
    journal = GratitudeList(storage.open_default_store())
    try:
        journal.init()
    except Exception as ex:
        logger.exception("could not load journal from %s", store_path)
        QMessageBox.critical(None, "Load failed", f"Could not read the journal:\n{store_path}\n\n{ex}")
        sys.exit(1)

    w = GratitudeWindow(journal, store_path=store_path)
    w.show()
    app.exec()


if __name__ == "__main__":
    main()
