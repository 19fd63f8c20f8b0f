"""Background analysis execution using QThread + signals/slots.

AnalysisWorker runs the flop enumeration on a background QThread so
the UI never freezes. EngineAdapter is the main-thread interface that
manages the worker lifecycle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtCore import QObject, QThread, Signal

from flop_coach.core.equity_calculator import EquityCalculator, EquityResult
from flop_coach.utils.card import Card
from flop_coach.utils.constants import DEFAULT_SAMPLE_LIMIT, Recommendation

logger = logging.getLogger("flop_coach.gui")


@dataclass
class AnalysisRequest:
    """All parameters needed for a single analysis."""

    hero_cards: list[Card]
    flop_cards: list[Card]
    choice: Recommendation
    sample_limit: int = DEFAULT_SAMPLE_LIMIT
    parallel_workers: int = 1


@dataclass
class AnalysisResponse:
    """Result returned from the background worker."""

    result: EquityResult
    choice: Recommendation


class AnalysisWorker(QObject):
    """Runs analyses on a background thread.

    Communicate via signals only; never call methods directly
    from the main thread after moveToThread().
    """

    analysis_requested = Signal(object)  # AnalysisRequest
    finished = Signal(object)  # AnalysisResponse
    error = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self.analysis_requested.connect(self._do_analysis)

    def _do_analysis(self, request: AnalysisRequest) -> None:
        """Execute the analysis on the worker thread."""
        try:
            if request.parallel_workers > 1:
                result = EquityCalculator.parallel_analyze(
                    request.hero_cards,
                    request.flop_cards,
                    max_workers=request.parallel_workers,
                    sample_limit=request.sample_limit,
                )
            else:
                result = EquityCalculator.analyze(
                    request.hero_cards,
                    request.flop_cards,
                    sample_limit=request.sample_limit,
                )
            self.finished.emit(AnalysisResponse(result, request.choice))
        except Exception as e:
            logger.exception("Analysis failed")
            self.error.emit(str(e))


class EngineAdapter(QObject):
    """Main-thread adapter that manages the background analysis worker.

    Usage:
        adapter = EngineAdapter()
        adapter.analysis_started.connect(on_start)
        adapter.analysis_finished.connect(on_result)
        adapter.analysis_error.connect(on_error)
        adapter.request_analysis(request)
    """

    analysis_started = Signal()
    analysis_finished = Signal(object)  # AnalysisResponse
    analysis_error = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self._thread = QThread()
        self._worker = AnalysisWorker()
        self._worker.moveToThread(self._thread)
        self._worker.finished.connect(self._on_finished)
        self._worker.error.connect(self._on_error)
        self._thread.start()

    def request_analysis(self, request: AnalysisRequest) -> None:
        """Submit an analysis request to the background thread."""
        self.analysis_started.emit()
        self._worker.analysis_requested.emit(request)

    def _on_finished(self, response: AnalysisResponse) -> None:
        self.analysis_finished.emit(response)

    def _on_error(self, message: str) -> None:
        self.analysis_error.emit(message)

    def shutdown(self) -> None:
        """Stop the worker thread."""
        self._thread.quit()
        self._thread.wait()
