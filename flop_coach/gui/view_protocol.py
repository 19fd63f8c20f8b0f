"""Abstract view interface for the flop coach GUI.

The FlopView Protocol defines the contract between the FlopPresenter
and any concrete UI framework (PySide6, PyQt6, etc.). The presenter
depends only on this protocol, never on framework-specific imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from flop_coach.core.equity_calculator import EquityResult
from flop_coach.interface.history import HistoryRow
from flop_coach.strategy.decision_rule import Verdict


class FlopView(Protocol):
    """Interface that any GUI framework must implement."""

    # --- Input reading ---

    def get_hero_cards(self) -> list[str]:
        """Return hero's hole cards as 2-char strings, e.g. ['Ah', 'Ks']."""
        ...

    def get_flop_cards(self) -> list[str]:
        """Return the flop cards as 2-char strings."""
        ...

    def ask_export_path(self) -> Path | None:
        """Ask where to save the CSV export; None if cancelled."""
        ...

    def confirm_clear_history(self) -> bool:
        """Ask the user to confirm clearing all saved hands."""
        ...

    # --- Output display ---

    def set_scenario(self, hero_cards: list[str], flop_cards: list[str]) -> None:
        """Fill the card slots with a new scenario."""
        ...

    def show_analyzing(self) -> None:
        """Show a 'Counting...' indicator."""
        ...

    def show_result(self, result: EquityResult, verdict: Verdict) -> None:
        """Display the analysis and the grade of the user's choice."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_history(self, rows: list[HistoryRow], accuracy: float) -> None:
        """Replace the history table contents."""
        ...

    def show_status(self, message: str) -> None:
        """Show a short informational message."""
        ...

    def clear_result(self) -> None:
        """Clear the analysis output panel."""
        ...
