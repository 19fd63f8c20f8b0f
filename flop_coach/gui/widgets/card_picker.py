"""Card picker popup and card slot buttons.

The picker lays the deck out as one row per suit (spades, hearts,
diamonds, clubs) with ranks running A down to 2. Cards sitting in
another slot are disabled, so a scenario can never hold duplicates.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QDialog,
    QGridLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flop_coach.utils.constants import Rank, Suit

SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}
_RED = "#dc2626"
_BLACK = "#0f172a"


def suit_color(suit: str) -> str:
    return _RED if suit in (Suit.HEARTS, Suit.DIAMONDS) else _BLACK


def card_label(card_str: str) -> str:
    """'Ah' -> 'A♥'."""
    rank, suit = card_str[0], card_str[1]
    return f"{rank}{SUIT_SYMBOLS.get(suit, suit)}"


class CardPickerPopup(QDialog):
    """Suit-by-rank grid for choosing one card.

    Emits card_selected(str) with the 2-char card text (e.g. 'Ah'), or
    card_cleared() when the user empties the slot instead.
    """

    card_selected = Signal(str)
    card_cleared = Signal()

    def __init__(
        self,
        used_cards: set[str] | None = None,
        current: str = "",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Pick a Card")
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)
        self._used = used_cards or set()
        self._current = current
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout(self)
        grid = QGridLayout()
        grid.setSpacing(3)

        ranks = list(reversed(Rank))
        for row, suit in enumerate(Suit):
            header = QLabel(SUIT_SYMBOLS[suit])
            header.setStyleSheet(f"QLabel {{ font-size: 20px; color: {suit_color(suit)}; }}")
            grid.addWidget(header, row, 0, Qt.AlignCenter)
            for col, rank in enumerate(ranks, start=1):
                grid.addWidget(self._card_button(f"{rank}{suit}"), row, col)
        outer.addLayout(grid)

        clear_btn = QPushButton("Clear slot")
        clear_btn.setEnabled(bool(self._current))
        clear_btn.clicked.connect(self._clear)
        outer.addWidget(clear_btn, alignment=Qt.AlignRight)

    def _card_button(self, card_str: str) -> QPushButton:
        btn = QPushButton(card_str[0])
        btn.setFixedSize(34, 42)
        border = "#2563eb" if card_str == self._current else "#cbd5e1"
        btn.setStyleSheet(
            f"QPushButton {{ color: {suit_color(card_str[1])}; font-weight: bold;"
            f" font-size: 14px; border: 2px solid {border}; border-radius: 5px;"
            f" background: #ffffff; }}"
            f"QPushButton:hover {{ background: #fef3c7; }}"
            f"QPushButton:disabled {{ color: #cbd5e1; background: #e2e8f0; }}"
        )
        if card_str in self._used:
            btn.setEnabled(False)
        else:
            btn.clicked.connect(lambda checked=False, c=card_str: self._pick(c))
        return btn

    def _pick(self, card_str: str) -> None:
        self.card_selected.emit(card_str)
        self.accept()

    def _clear(self) -> None:
        self.card_cleared.emit()
        self.accept()


class CardSlotButton(QPushButton):
    """Large playing-card face for one hero or flop card.

    Empty slots show '?'. Right-click empties the slot.
    """

    card_changed = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._card = ""
        self.setFixedSize(72, 100)
        self.setCursor(Qt.PointingHandCursor)
        self._refresh()

    @property
    def card(self) -> str:
        return self._card

    @card.setter
    def card(self, value: str) -> None:
        if value == self._card:
            return
        self._card = value
        self._refresh()
        self.card_changed.emit()

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.RightButton:
            self.card = ""
        else:
            super().mousePressEvent(event)

    def _refresh(self) -> None:
        if not self._card:
            self.setText("?")
            self.setStyleSheet(
                "QPushButton { font-size: 26px; font-weight: bold; color: #94a3b8;"
                " border: 2px dashed #475569; border-radius: 12px; background: #1e293b; }"
                "QPushButton:hover { border-color: #cbd5e1; }"
            )
            return
        rank, suit = self._card[0], self._card[1]
        self.setText(f"{rank}\n{SUIT_SYMBOLS.get(suit, suit)}")
        self.setStyleSheet(
            f"QPushButton {{ font-size: 24px; font-weight: 900; color: {suit_color(suit)};"
            f" border: 1px solid #e2e8f0; border-radius: 12px; background: #fff; }}"
            f"QPushButton:hover {{ background: #f1f5f9; }}"
        )
