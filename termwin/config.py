"""Persistent JSON config helpers.

Stores the event-wait timeout, log level, and theme name. All access is
defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "termwin"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_EVENT_TIMEOUT_MS = 50
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_THEME_NAME = "default"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored; a read-only config directory must not end
    the session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_event_timeout_ms() -> int:
    """Return the main-loop wait timeout; non-negative integers only."""
    value = load_config().get("event_timeout_ms")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_EVENT_TIMEOUT_MS
    return value


def save_event_timeout_ms(timeout_ms: int) -> None:
    if timeout_ms < 0:
        return
    config = load_config()
    config["event_timeout_ms"] = int(timeout_ms)
    save_config(config)


def load_log_level() -> str:
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    candidate = value.strip().upper()
    return candidate if candidate in _LOG_LEVELS else DEFAULT_LOG_LEVEL


def load_theme_name() -> str:
    """Load persisted theme name, or the default when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return DEFAULT_THEME_NAME
    stripped = value.strip()
    return stripped if stripped else DEFAULT_THEME_NAME


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_EVENT_TIMEOUT_MS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_THEME_NAME",
    "load_config",
    "load_event_timeout_ms",
    "load_log_level",
    "load_theme_name",
    "save_config",
    "save_event_timeout_ms",
    "save_theme_name",
]
