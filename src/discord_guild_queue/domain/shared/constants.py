"""Centralized constants for limits and other shared values."""

from __future__ import annotations


class LogLevels:
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    ALL = frozenset({DEBUG, INFO, WARNING, ERROR, CRITICAL})


class LimitConstants:
    """Numeric limits and constraints."""

    # Volume limits (percent)
    MIN_VOLUME = 0
    MAX_VOLUME = 100
    DEFAULT_VOLUME = 100
    BASSBOOST_VOLUME_BOOST = 50

    # Discord limits
    MAX_DISCORD_SNOWFLAKE = 2**64
