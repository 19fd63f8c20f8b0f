"""QSS stylesheet constants for the flop coach GUI."""

APP_STYLESHEET = """
QMainWindow {
    background: #0f172a;
}

QWidget {
    color: #e2e8f0;
}

QGroupBox {
    font-weight: bold;
    font-size: 12px;
    color: #e2e8f0;
    border: 1px solid #334155;
    border-radius: 8px;
    margin-top: 12px;
    padding-top: 14px;
}

QGroupBox::title {
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 6px;
    color: #94a3b8;
}

QLabel {
    font-size: 12px;
}

QPushButton {
    padding: 4px 12px;
    border: 1px solid #475569;
    border-radius: 4px;
    background: #1e293b;
}

QPushButton:hover {
    background: #334155;
}

QTableWidget {
    background: #1e293b;
    alternate-background-color: #172033;
    gridline-color: #334155;
    border: 1px solid #334155;
    border-radius: 4px;
}

QHeaderView::section {
    background: #0f172a;
    color: #94a3b8;
    border: none;
    padding: 4px;
}

QDialog {
    background: #f8fafc;
}
"""
