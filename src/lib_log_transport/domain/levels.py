"""Severity levels ordered by importance.

Purpose
-------
Provide the ordered severity scale used for every filtering decision in the
pipeline together with the display names rendered by formatters.

Contents
--------
* :class:`LogLevel` enum with comparison operators and conversion helpers.
* :data:`LEVEL_NAMES` mapping levels to their display names.
* :func:`coerce_level` accepting either a member or a name.

System Role
-----------
Loggers and transports compare ranks (``entry.level >= threshold``); nothing
else decides whether an entry is emitted.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Enumerated severities from least to most important.

    Examples
    --------
    >>> LogLevel.WARNING >= LogLevel.INFO
    True
    >>> sorted([LogLevel.ERROR, LogLevel.VERBOSE])[0] is LogLevel.VERBOSE
    True
    """

    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def rank(self) -> int:
        """Return the integer rank used for ordering."""

        return self.value

    @property
    def display_name(self) -> str:
        """Return the human-readable name rendered in log lines."""

        return LEVEL_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose rank equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


LEVEL_NAMES: dict[LogLevel, str] = {
    LogLevel.VERBOSE: "VERBOSE",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
}
# Display names; the default formatter pads them to seven characters.


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


__all__ = ["LEVEL_NAMES", "LogLevel", "coerce_level"]
