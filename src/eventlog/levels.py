# src/eventlog/levels.py
"""
Log levels and the severity rules built on them.

Levels form a total order ``debug < info < warn < error``. The pseudo-level
``"off"`` is only meaningful as an echo threshold and means "never echo";
it is never the level of an event and must not be passed to
:func:`compare_levels`.

Usage:
    >>> from eventlog.levels import LogLevel, meets_threshold
    >>> LogLevel.WARN > LogLevel.INFO
    True
    >>> meets_threshold("error", "warn")
    True
    >>> meets_threshold("error", "off")
    False
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final, Literal, Optional, Union

from .exceptions import InvalidLevelError

# Threshold value that disables echoing
OFF: Final = "off"


class LogLevel(str, Enum):
    """Event severity levels, ordered from least to most severe."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @classmethod
    def coerce(cls, value: Any) -> LogLevel:
        """Parse a level from a member or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidLevelError(value)

    @property
    def rank(self) -> int:
        """Position in the severity order (debug=0 ... error=3)."""
        return LOG_LEVELS.index(self)

    def __ge__(self, other: Any) -> bool:
        """Compare severity levels."""
        return compare_levels(self, other) >= 0

    def __gt__(self, other: Any) -> bool:
        """Compare severity levels."""
        return compare_levels(self, other) > 0

    def __le__(self, other: Any) -> bool:
        """Compare severity levels."""
        return compare_levels(self, other) <= 0

    def __lt__(self, other: Any) -> bool:
        """Compare severity levels."""
        return compare_levels(self, other) < 0


class EchoDetail(str, Enum):
    """How much of an event is sent to the sink when it is echoed."""

    MESSAGE = "message"  # "<Level>: <message>" only
    EVENT = "event"  # message plus id/data lines


LOG_LEVELS: tuple[LogLevel, ...] = tuple(LogLevel)

EchoLevel = Union[LogLevel, Literal["off"]]


def coerce_echo_level(value: Any) -> Optional[EchoLevel]:
    """Parse an echo threshold; ``None`` passes through unchanged."""
    if value is None:
        return None
    if isinstance(value, str) and not isinstance(value, LogLevel) and value.lower() == OFF:
        return OFF
    return LogLevel.coerce(value)


def compare_levels(a: LogLevel | str, b: LogLevel | str) -> int:
    """
    Compare two levels by severity.

    Returns:
        A positive number if ``a`` is more severe than ``b``, a negative
        number if it is less severe, 0 if they are equal.
    """
    return LogLevel.coerce(a).rank - LogLevel.coerce(b).rank


def meets_threshold(
    level: Optional[LogLevel | str],
    threshold: Optional[EchoLevel | str],
) -> bool:
    """
    Return True if ``level`` is at least as severe as ``threshold``.

    Always False when either value is missing or the threshold is ``"off"``.
    """
    threshold = coerce_echo_level(threshold)
    if level is None or threshold is None or threshold == OFF:
        return False
    return compare_levels(level, threshold) >= 0


__all__ = [
    "OFF",
    "LOG_LEVELS",
    "LogLevel",
    "EchoLevel",
    "EchoDetail",
    "coerce_echo_level",
    "compare_levels",
    "meets_threshold",
]
