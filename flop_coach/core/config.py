"""User configuration for the flop coach.

Settings live in a small JSON file (default ~/.flop_coach/config.json).
A missing file means defaults; a broken file is logged and ignored so
the coach always starts.

Expected JSON format (every key optional):
    {
        "sample_limit": 3,
        "history_limit": 200,
        "history_path": "~/.flop_coach/history.db",
        "parallel_workers": 1,
        "log_level": "WARNING"
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from flop_coach.utils.constants import DEFAULT_SAMPLE_LIMIT

logger = logging.getLogger("flop_coach.config")

DATA_DIR = Path.home() / ".flop_coach"
DEFAULT_CONFIG_PATH = DATA_DIR / "config.json"
DEFAULT_HISTORY_PATH = DATA_DIR / "history.db"
DEFAULT_HISTORY_LIMIT = 200

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@dataclass(frozen=True)
class CoachConfig:
    """Runtime settings for analysis, history, and logging."""

    sample_limit: int = DEFAULT_SAMPLE_LIMIT
    history_limit: int = DEFAULT_HISTORY_LIMIT
    history_path: Path = field(default=DEFAULT_HISTORY_PATH)
    parallel_workers: int = 1
    log_level: str = "WARNING"


def _positive_int(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        logger.warning("Config key %s must be a positive integer, got %r", key, value)
        return default
    return value


def _path_value(data: dict, key: str, default: Path) -> Path:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        logger.warning("Config key %s must be a non-empty path string, got %r", key, value)
        return default
    return Path(value).expanduser()


def load_coach_config(config_path: Path | None = None) -> CoachConfig:
    """Load configuration from JSON, falling back to defaults.

    Returns CoachConfig() if the file does not exist or cannot be parsed.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return CoachConfig()

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read config at %s: %s", path, e)
        return CoachConfig()

    if not isinstance(data, dict):
        logger.warning("Config at %s must be a JSON object", path)
        return CoachConfig()

    defaults = CoachConfig()
    log_level = str(data.get("log_level", defaults.log_level)).upper()
    if log_level not in logging.getLevelNamesMapping():
        logger.warning("Unknown log level in config: %s", log_level)
        log_level = defaults.log_level

    history_path = _path_value(data, "history_path", defaults.history_path)
    return CoachConfig(
        sample_limit=_positive_int(data, "sample_limit", defaults.sample_limit),
        history_limit=_positive_int(data, "history_limit", defaults.history_limit),
        history_path=history_path,
        parallel_workers=_positive_int(data, "parallel_workers", defaults.parallel_workers),
        log_level=log_level,
    )


def configure_logging(level: str | int = "WARNING") -> None:
    """Route flop_coach log records to stderr at the given level."""
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger("flop_coach").setLevel(level)
