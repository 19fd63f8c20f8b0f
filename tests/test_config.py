"""Tests for JSON config loading and logging setup."""

import json
import logging
from pathlib import Path

import pytest

from flop_coach.core.config import (
    DEFAULT_HISTORY_PATH,
    CoachConfig,
    configure_logging,
    load_coach_config,
)


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return path


class TestLoadCoachConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_coach_config(tmp_path / "absent.json")
        assert config == CoachConfig()
        assert config.sample_limit == 3
        assert config.history_limit == 200
        assert config.history_path == DEFAULT_HISTORY_PATH

    def test_values_loaded(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {
            "sample_limit": 5,
            "history_limit": 50,
            "history_path": str(tmp_path / "h.db"),
            "parallel_workers": 2,
            "log_level": "info",
        })
        config = load_coach_config(path)
        assert config.sample_limit == 5
        assert config.history_limit == 50
        assert config.history_path == tmp_path / "h.db"
        assert config.parallel_workers == 2
        assert config.log_level == "INFO"

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path) -> None:
        config = load_coach_config(_write(tmp_path, {"sample_limit": 1}))
        assert config.sample_limit == 1
        assert config.history_limit == 200

    def test_home_is_expanded(self, tmp_path: Path) -> None:
        config = load_coach_config(_write(tmp_path, {"history_path": "~/coach.db"}))
        assert "~" not in str(config.history_path)

    def test_invalid_json_warns(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="flop_coach.config"):
            config = load_coach_config(path)
        assert config == CoachConfig()
        assert any("Failed to read config" in r.message for r in caplog.records)

    def test_non_object_warns(self, tmp_path: Path, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="flop_coach.config"):
            config = load_coach_config(_write(tmp_path, [1, 2, 3]))
        assert config == CoachConfig()
        assert caplog.records

    def test_bad_values_fall_back(self, tmp_path: Path, caplog) -> None:
        path = _write(tmp_path, {
            "sample_limit": -2,
            "history_limit": "lots",
            "parallel_workers": True,
            "log_level": "LOUD",
        })
        with caplog.at_level(logging.WARNING, logger="flop_coach.config"):
            config = load_coach_config(path)
        assert config.sample_limit == 3
        assert config.history_limit == 200
        assert config.parallel_workers == 1
        assert config.log_level == "WARNING"
        assert len(caplog.records) == 4


    @pytest.mark.parametrize("value", [5, ["a.db"], {"path": "a.db"}, True, ""])
    def test_bad_history_path_falls_back(self, tmp_path: Path, caplog, value) -> None:
        with caplog.at_level(logging.WARNING, logger="flop_coach.config"):
            config = load_coach_config(_write(tmp_path, {"history_path": value}))
        assert config.history_path == DEFAULT_HISTORY_PATH
        assert any("history_path" in r.message for r in caplog.records)


class TestConfigureLogging:
    def test_sets_package_level(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger("flop_coach").level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger("flop_coach").level == logging.WARNING
