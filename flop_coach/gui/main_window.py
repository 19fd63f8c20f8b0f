"""Main window assembling all panels, implementing the FlopView protocol."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QFrame,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from flop_coach.core.equity_calculator import EquityResult
from flop_coach.gui.widgets.analysis_output import AnalysisOutputPanel
from flop_coach.gui.widgets.history_panel import HistoryPanel
from flop_coach.gui.widgets.input_panel import InputPanel
from flop_coach.interface.history import HistoryRow
from flop_coach.strategy.decision_rule import Verdict


class MainWindow(QMainWindow):
    """Top-level window implementing the FlopView protocol.

    Layout:
      - InputPanel (top)
      - AnalysisOutputPanel (middle)
      - HistoryPanel (bottom)
    """

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Flop Coach - Call or Fold")
        self.setMinimumSize(760, 720)
        self.resize(900, 800)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self._input_panel = InputPanel()
        layout.addWidget(self._input_panel)

        layout.addWidget(self._divider())

        self._output_panel = AnalysisOutputPanel()
        layout.addWidget(self._output_panel, stretch=1)

        layout.addWidget(self._divider())

        self._history_panel = HistoryPanel()
        layout.addWidget(self._history_panel)

    @staticmethod
    def _divider() -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setStyleSheet("color: #334155;")
        return line

    # --- FlopView protocol implementation ---

    def get_hero_cards(self) -> list[str]:
        return self._input_panel.get_hero_cards()

    def get_flop_cards(self) -> list[str]:
        return self._input_panel.get_flop_cards()

    def ask_export_path(self) -> Path | None:
        path, _ = QFileDialog.getSaveFileName(
            self, "Export history", "flop_trainer_history.csv", "CSV files (*.csv)",
        )
        return Path(path) if path else None

    def confirm_clear_history(self) -> bool:
        answer = QMessageBox.question(self, "Clear history", "Clear all saved hands?")
        return answer == QMessageBox.Yes

    def set_scenario(self, hero_cards: list[str], flop_cards: list[str]) -> None:
        self._input_panel.set_cards(hero_cards, flop_cards)

    def show_analyzing(self) -> None:
        self._input_panel.set_busy(True)
        self._output_panel.show_analyzing()

    def show_result(self, result: EquityResult, verdict: Verdict) -> None:
        self._input_panel.set_busy(False)
        self._output_panel.show_result(result, verdict)

    def show_error(self, message: str) -> None:
        self._input_panel.set_busy(False)
        self._output_panel.show_error(message)

    def show_history(self, rows: list[HistoryRow], accuracy: float) -> None:
        self._history_panel.show_rows(rows, accuracy)

    def show_status(self, message: str) -> None:
        self._output_panel.show_status(message)

    def clear_result(self) -> None:
        self._output_panel.clear()

    # --- Signal accessors for wiring ---

    @property
    def input_panel(self) -> InputPanel:
        return self._input_panel

    @property
    def history_panel(self) -> HistoryPanel:
        return self._history_panel
