"""Hand history panel: table of graded decisions with export and clear."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from flop_coach.gui.widgets.card_picker import card_label
from flop_coach.interface.history import HistoryRow


def _pretty(cards: str) -> str:
    return " ".join(card_label(c) for c in cards.split())


_COLUMNS = ["Hole", "Flop", "You had", "Better", "Worse", "Tie", "Rec", "You", "OK"]


class HistoryPanel(QWidget):
    """Bottom section: the most recent decisions, newest first."""

    export_requested = Signal()
    clear_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 8)

        header = QHBoxLayout()
        self._title = QLabel("Hand History")
        self._title.setStyleSheet("QLabel { font-weight: bold; font-size: 13px; color: #e2e8f0; }")
        header.addWidget(self._title)
        header.addStretch()

        export_btn = QPushButton("Export CSV")
        export_btn.clicked.connect(self.export_requested.emit)
        header.addWidget(export_btn)

        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self.clear_requested.emit)
        header.addWidget(clear_btn)
        layout.addLayout(header)

        self._table = QTableWidget(0, len(_COLUMNS))
        self._table.setHorizontalHeaderLabels(_COLUMNS)
        self._table.verticalHeader().setVisible(False)
        self._table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self._table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        layout.addWidget(self._table)

    def show_rows(self, rows: list[HistoryRow], accuracy: float) -> None:
        self._title.setText(
            f"Hand History ({len(rows)} hands, {accuracy:.0%} correct)"
            if rows else "Hand History"
        )
        self._table.setRowCount(len(rows))
        for i, row in enumerate(reversed(rows)):
            values = [
                _pretty(row.hole), _pretty(row.flop), row.hero_category,
                str(row.better), str(row.worse), str(row.tie),
                row.recommendation, row.decision,
                "yes" if row.correct else "no",
            ]
            for col, text in enumerate(values):
                item = QTableWidgetItem(text)
                if col == len(values) - 1:
                    item.setForeground(QColor("#059669" if row.correct else "#e11d48"))
                self._table.setItem(i, col, item)
