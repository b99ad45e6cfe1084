"""Persistent JSON config helpers.

Stores the input read timeout and optional diagnostic log settings.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

CONFIG_PATH = Path.home() / ".config" / "kilo.json"
LOG_ENV_VAR = "KILO_LOG"

DEFAULT_READ_TIMEOUT_MS = 100
MIN_READ_TIMEOUT_MS = 100
# VTIME is a single byte counted in tenths of a second.
MAX_READ_TIMEOUT_MS = 255 * 100
DEFAULT_LOG_LEVEL = "INFO"


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


def load_read_timeout_ms(config: dict[str, object] | None = None) -> int:
    """Return the per-read timeout rounded down to whole tenths of a second.

    Booleans, non-integers, and out-of-range values are clamped or replaced by
    the default so the value always fits the terminal's ``VTIME`` slot.
    """
    if config is None:
        config = load_config()
    value = config.get("read_timeout_ms")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_READ_TIMEOUT_MS
    clamped = max(MIN_READ_TIMEOUT_MS, min(MAX_READ_TIMEOUT_MS, value))
    return (clamped // 100) * 100


def load_log_file(config: dict[str, object] | None = None) -> Path | None:
    """Return the diagnostic log path; ``KILO_LOG`` wins over the config file."""
    env_value = os.environ.get(LOG_ENV_VAR, "")
    if env_value:
        return Path(env_value).expanduser()
    if config is None:
        config = load_config()
    value = config.get("log_file")
    if not isinstance(value, str) or not value:
        return None
    return Path(value).expanduser()


def load_log_level(config: dict[str, object] | None = None) -> int:
    if config is None:
        config = load_config()
    value = config.get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(value, str):
        value = DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO
