"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

from exprcalc.exceptions import ConfigurationError

ENV_LOG_LEVEL = "EXPRCALC_LOG_LEVEL"
ENV_PRECISION = "EXPRCALC_PRECISION"
ENV_HISTORY_LIMIT = "EXPRCALC_HISTORY_LIMIT"

# Same number of significant digits as a default C++ output stream
DEFAULT_PRECISION = 6
MAX_PRECISION = 17

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """
    Display and logging settings for the outer layer.

    ``history_limit`` of 0 keeps every entry.
    """

    log_level: str = "WARNING"
    precision: int = DEFAULT_PRECISION
    history_limit: int = 0

    def __post_init__(self) -> None:
        validate_log_level(self.log_level)
        validate_precision(self.precision)
        validate_history_limit(self.history_limit)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def validate_log_level(level: str) -> str:
    if level not in LOG_LEVELS:
        raise ConfigurationError(ENV_LOG_LEVEL, level, f"expected one of {', '.join(LOG_LEVELS)}")
    return level


def validate_precision(precision: int) -> int:
    if not 1 <= precision <= MAX_PRECISION:
        raise ConfigurationError(ENV_PRECISION, precision, f"expected 1..{MAX_PRECISION}")
    return precision


def validate_history_limit(limit: int) -> int:
    if limit < 0:
        raise ConfigurationError(ENV_HISTORY_LIMIT, limit, "must not be negative")
    return limit


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(name, raw, "expected an integer") from e


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        environ: Variables to read (default ``os.environ``)

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    return Settings(
        log_level=environ.get(ENV_LOG_LEVEL, "WARNING").strip().upper() or "WARNING",
        precision=_read_int(environ, ENV_PRECISION, DEFAULT_PRECISION),
        history_limit=_read_int(environ, ENV_HISTORY_LIMIT, 0),
    )
