# -*- coding: utf-8 -*-

# Dark theme with a warm accent for section headers and the add button
DARK_QSS = r"""
QWidget {
    background: #1e1e1e;
    color: #e6e6e6;
    font-family: "Segoe UI";
    font-size: 10pt;
}

QLabel {
    color: #e6e6e6;
}

QFrame#sectionBody {
    border: 1px solid #3a3a3a;
    border-top: none;
    border-bottom-left-radius: 8px;
    border-bottom-right-radius: 8px;
    padding: 10px;
}

QPushButton#sectionHeader {
    text-align: left;
    background: #2b2b2b;
    border: 1px solid #3a3a3a;
    border-radius: 8px;
    padding: 10px 12px;
    font-weight: 600;
    color: #f0c674;
}

QPushButton#sectionHeader:checked {
    border-bottom-left-radius: 0px;
    border-bottom-right-radius: 0px;
}

QLineEdit, QDateEdit {
    background: #252526;
    border: 1px solid #3a3a3a;
    border-radius: 6px;
    padding: 6px 8px;
    selection-background-color: #7a5c1e;
    selection-color: #ffffff;
}

QDateEdit::drop-down {
    border: none;
    width: 26px;
}

QPushButton {
    background: #333333;
    border: 1px solid #444444;
    border-radius: 8px;
    padding: 8px 12px;
}

QPushButton:hover {
    background: #3a3a3a;
}

QPushButton:pressed {
    background: #2a2a2a;
}

QPushButton#addButton {
    background: #7a5c1e;
    border: 1px solid #9a7a36;
}

QHeaderView::section {
    background: #2b2b2b;
    border: 1px solid #3a3a3a;
    padding: 6px 8px;
    font-weight: 600;
}

QTableWidget {
    background: #252526;
    border: 1px solid #3a3a3a;
    gridline-color: #333333;
}

QTableWidget::item:selected {
    background: #7a5c1e;
    color: #ffffff;
}

QStatusBar {
    background: #1e1e1e;
    color: #bdbdbd;
}
"""
