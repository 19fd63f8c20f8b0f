"""Input panel widget for the flop coach GUI.

Contains the two hero card slots, the three flop card slots, a RANDOM
button that deals a new scenario, and the CALL / FOLD choice buttons.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flop_coach.gui.widgets.card_picker import CardPickerPopup, CardSlotButton
from flop_coach.utils.constants import FLOP_CARD_COUNT, HERO_CARD_COUNT

_BUTTON_STYLE = (
    "QPushButton {{ background: {bg}; color: white; font-weight: bold;"
    " font-size: 16px; border-radius: 8px; padding: 0 24px; }}"
    "QPushButton:hover {{ background: {hover}; }}"
    "QPushButton:disabled {{ background: #475569; color: #94a3b8; }}"
)


class InputPanel(QWidget):
    """Top input section: card slots, RANDOM, CALL and FOLD buttons."""

    call_requested = Signal()
    fold_requested = Signal()
    random_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._hero_slots: list[CardSlotButton] = []
        self._flop_slots: list[CardSlotButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- Row 1: Cards ---
        cards_row = QHBoxLayout()

        hero_group = QGroupBox("Your Hand")
        hero_layout = QHBoxLayout(hero_group)
        for _ in range(HERO_CARD_COUNT):
            slot = CardSlotButton()
            slot.clicked.connect(lambda checked=False, s=slot: self._open_picker(s))
            self._hero_slots.append(slot)
            hero_layout.addWidget(slot)
        cards_row.addWidget(hero_group)

        flop_group = QGroupBox("Flop")
        flop_layout = QHBoxLayout(flop_group)
        for _ in range(FLOP_CARD_COUNT):
            slot = CardSlotButton()
            slot.clicked.connect(lambda checked=False, s=slot: self._open_picker(s))
            self._flop_slots.append(slot)
            flop_layout.addWidget(slot)
        cards_row.addWidget(flop_group)

        main_layout.addLayout(cards_row)

        # --- Row 2: Buttons ---
        buttons_row = QHBoxLayout()

        self._random_btn = QPushButton("RANDOM")
        self._random_btn.setFixedHeight(40)
        self._random_btn.setStyleSheet(_BUTTON_STYLE.format(bg="#475569", hover="#334155"))
        self._random_btn.clicked.connect(self.random_requested.emit)
        buttons_row.addWidget(self._random_btn)

        buttons_row.addStretch()

        self._call_btn = QPushButton("CALL")
        self._call_btn.setFixedHeight(40)
        self._call_btn.setMinimumWidth(110)
        self._call_btn.setStyleSheet(_BUTTON_STYLE.format(bg="#059669", hover="#047857"))
        self._call_btn.clicked.connect(self.call_requested.emit)
        buttons_row.addWidget(self._call_btn)

        self._fold_btn = QPushButton("FOLD")
        self._fold_btn.setFixedHeight(40)
        self._fold_btn.setMinimumWidth(110)
        self._fold_btn.setStyleSheet(_BUTTON_STYLE.format(bg="#e11d48", hover="#be123c"))
        self._fold_btn.clicked.connect(self.fold_requested.emit)
        buttons_row.addWidget(self._fold_btn)

        main_layout.addLayout(buttons_row)

    def _open_picker(self, slot: CardSlotButton) -> None:
        """Let the user choose a card for one slot."""
        used = {
            s.card for s in self._hero_slots + self._flop_slots
            if s.card and s is not slot
        }
        popup = CardPickerPopup(used_cards=used, current=slot.card, parent=self)
        popup.card_selected.connect(lambda c: setattr(slot, "card", c))
        popup.card_cleared.connect(lambda: setattr(slot, "card", ""))
        popup.exec()

    # --- Public accessors for the main window ---

    def get_hero_cards(self) -> list[str]:
        return [s.card for s in self._hero_slots if s.card]

    def get_flop_cards(self) -> list[str]:
        return [s.card for s in self._flop_slots if s.card]

    def set_cards(self, hero_cards: list[str], flop_cards: list[str]) -> None:
        for slot, card in zip(self._hero_slots, hero_cards):
            slot.card = card
        for slot, card in zip(self._flop_slots, flop_cards):
            slot.card = card

    def set_busy(self, busy: bool) -> None:
        """Disable the choice buttons while an analysis is running."""
        for btn in (self._call_btn, self._fold_btn, self._random_btn):
            btn.setEnabled(not busy)
