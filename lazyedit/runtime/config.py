"""Read-only JSON config for editor settings.

Holds tab width, quit-guard count, message timeout, and log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyedit"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_TAB_STOP = 8
DEFAULT_QUIT_TIMES = 3
DEFAULT_MESSAGE_TIMEOUT_SECONDS = 5.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class EditorSettings:
    """Resolved runtime settings with every value already validated."""

    tab_stop: int = DEFAULT_TAB_STOP
    quit_times: int = DEFAULT_QUIT_TIMES
    message_timeout_seconds: float = DEFAULT_MESSAGE_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _bounded_int(value: object, low: int, high: int, default: int) -> int:
    """Accept plain ints inside ``[low, high]``; booleans count as invalid."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < low or value > high:
        return default
    return value


def _positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0:
        return default
    return float(value)


def _log_level_name(value: object) -> str:
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def load_settings() -> EditorSettings:
    data = load_config()
    return EditorSettings(
        tab_stop=_bounded_int(data.get("tab_stop"), 1, 32, DEFAULT_TAB_STOP),
        quit_times=_bounded_int(data.get("quit_times"), 0, 10, DEFAULT_QUIT_TIMES),
        message_timeout_seconds=_positive_float(
            data.get("message_timeout_seconds"), DEFAULT_MESSAGE_TIMEOUT_SECONDS
        ),
        log_level=_log_level_name(data.get("log_level")),
    )

