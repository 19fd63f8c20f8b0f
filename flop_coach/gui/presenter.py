"""Framework-agnostic presenter for the flop coach GUI.

FlopPresenter mediates between the FlopView (UI), the analysis engine
and the decision history. It has NO Qt/PySide6 imports and depends
only on the FlopView Protocol and engine types.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from flop_coach.core.config import CoachConfig
from flop_coach.core.equity_calculator import validate_scenario
from flop_coach.interface.history import DecisionHistory, HistoryRow
from flop_coach.strategy.decision_rule import grade_choice
from flop_coach.utils.card import parse_card_set, random_scenario
from flop_coach.utils.constants import FLOP_CARD_COUNT, HERO_CARD_COUNT, Recommendation
from flop_coach.utils.errors import InputError

if TYPE_CHECKING:
    from flop_coach.gui.engine_adapter import AnalysisResponse, EngineAdapter
    from flop_coach.gui.view_protocol import FlopView

logger = logging.getLogger("flop_coach.gui")


class FlopPresenter:
    """Coordinates view inputs, background analysis, grading and history.

    Framework-agnostic: depends only on the FlopView Protocol.
    """

    def __init__(
        self,
        view: FlopView,
        engine: EngineAdapter,
        history: DecisionHistory,
        config: CoachConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._view = view
        self._engine = engine
        self._history = history
        self._config = config or CoachConfig()
        self._rng = rng or random.Random()

        # Connect engine signals
        self._engine.analysis_started.connect(self._on_analysis_started)
        self._engine.analysis_finished.connect(self._on_analysis_finished)
        self._engine.analysis_error.connect(self._on_analysis_error)

    def on_call_clicked(self) -> None:
        self.on_choice(Recommendation.CALL)

    def on_fold_clicked(self) -> None:
        self.on_choice(Recommendation.FOLD)

    def on_choice(self, choice: Recommendation) -> None:
        """Validate the cards on screen and start the analysis."""
        from flop_coach.gui.engine_adapter import AnalysisRequest

        try:
            hero_card_strs = self._view.get_hero_cards()
            if len(hero_card_strs) != HERO_CARD_COUNT or not all(hero_card_strs):
                self._view.show_error("Please select both hero cards.")
                return
            flop_card_strs = self._view.get_flop_cards()
            if len(flop_card_strs) != FLOP_CARD_COUNT or not all(flop_card_strs):
                self._view.show_error("Please select all three flop cards.")
                return

            hero_cards = parse_card_set(" ".join(hero_card_strs), HERO_CARD_COUNT)
            flop_cards = parse_card_set(" ".join(flop_card_strs), FLOP_CARD_COUNT)
            validate_scenario(hero_cards, flop_cards)
        except InputError as e:
            self._view.show_error(str(e))
            return

        self._engine.request_analysis(AnalysisRequest(
            hero_cards=hero_cards,
            flop_cards=flop_cards,
            choice=choice,
            sample_limit=self._config.sample_limit,
            parallel_workers=self._config.parallel_workers,
        ))

    def on_random_clicked(self) -> None:
        """Deal a fresh random scenario into the card slots."""
        hero, flop = random_scenario(self._rng)
        self._view.set_scenario([str(c) for c in hero], [str(c) for c in flop])
        self._view.clear_result()

    def on_export_clicked(self) -> None:
        path = self._view.ask_export_path()
        if path is None:
            return
        try:
            count = self._history.export_csv(path)
        except OSError as e:
            self._view.show_error(f"Export failed: {e}")
            return
        self._view.show_status(f"Exported {count} hands to {path}")

    def on_clear_clicked(self) -> None:
        if not self._view.confirm_clear_history():
            return
        self._history.clear()
        self.refresh_history()

    def refresh_history(self) -> None:
        self._view.show_history(self._history.rows(), self._history.accuracy())

    def _on_analysis_started(self) -> None:
        self._view.show_analyzing()

    def _on_analysis_finished(self, response: AnalysisResponse) -> None:
        result = response.result
        verdict = grade_choice(response.choice, result)
        self._history.record(HistoryRow.from_result(result, verdict))
        logger.debug("Graded %s: correct=%s", verdict.choice, verdict.correct)
        self._view.show_result(result, verdict)
        self.refresh_history()

    def _on_analysis_error(self, message: str) -> None:
        self._view.show_error(f"Analysis error: {message}")
