"""Configuration loader — reads notification, cache and logging settings from environment variables.

Each setting comes from COURSECAST_{SUFFIX}, falling back to a built-in default.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, TypeVar

from models import DEFAULT_NOTIFICATION_DURATION_MS

T = TypeVar("T")

DEFAULT_CACHE_TTL_SECONDS = 600.0
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigError(Exception):
    """Raised when an environment variable holds a malformed value."""


def _env(key: str) -> str:
    """Return COURSECAST_{key} stripped, or an empty string."""
    return os.environ.get(f"COURSECAST_{key}", "").strip()


def _env_number(key: str, cast: Callable[[str], T], default: T) -> T:
    raw = _env(key)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"COURSECAST_{key} must be a number, got {raw!r}") from exc


def _env_log_level() -> str:
    level = (_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"COURSECAST_LOG_LEVEL must be a logging level name, got {level!r}")
    return level


def load_config() -> dict:
    """Build the settings dict from environment variables.

    Environment variables:
        COURSECAST_NOTIFICATION_DURATION_MS — default toast lifetime (int, 4000)
        COURSECAST_CACHE_TTL                — resolution cache TTL in seconds (float, 600)
        COURSECAST_LOG_LEVEL                — logging level name (WARNING)

    Blank values fall back to the defaults.

    Raises:
        ConfigError: If a numeric variable cannot be parsed or the log level
            is not a known level name.
    """
    return {
        "notification_duration_ms": _env_number(
            "NOTIFICATION_DURATION_MS", int, DEFAULT_NOTIFICATION_DURATION_MS
        ),
        "cache_ttl": _env_number("CACHE_TTL", float, DEFAULT_CACHE_TTL_SECONDS),
        "log_level": _env_log_level(),
    }
