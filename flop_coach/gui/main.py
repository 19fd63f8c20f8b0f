"""Entry point for the flop coach GUI.

Usage:
    python -m flop_coach.gui.main
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from flop_coach.core.config import configure_logging, load_coach_config
from flop_coach.gui.engine_adapter import EngineAdapter
from flop_coach.gui.main_window import MainWindow
from flop_coach.gui.presenter import FlopPresenter
from flop_coach.gui.styles import APP_STYLESHEET
from flop_coach.interface.history import DecisionHistory


def main() -> None:
    config = load_coach_config()
    configure_logging(config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Flop Coach")
    app.setStyleSheet(APP_STYLESHEET)

    window = MainWindow()
    adapter = EngineAdapter()
    history = DecisionHistory(config.history_path, limit=config.history_limit)
    presenter = FlopPresenter(view=window, engine=adapter, history=history, config=config)

    # Wire UI signals to presenter
    window.input_panel.call_requested.connect(presenter.on_call_clicked)
    window.input_panel.fold_requested.connect(presenter.on_fold_clicked)
    window.input_panel.random_requested.connect(presenter.on_random_clicked)
    window.history_panel.export_requested.connect(presenter.on_export_clicked)
    window.history_panel.clear_requested.connect(presenter.on_clear_clicked)

    presenter.refresh_history()
    presenter.on_random_clicked()

    window.show()
    exit_code = app.exec()

    # Cleanup
    adapter.shutdown()
    history.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
