"""Immutable record of one accepted log call.

Purpose
-------
Carry the severity, rendered message, timestamp, originating context and
optional metadata from the logger to every transport.

Contents
--------
* :class:`LogEntry` dataclass.
* ``_ensure_aware`` timestamp validation helper.

System Role
-----------
Created once per accepted call inside :meth:`Logger.log`, shared read-only by
all transports, then discarded.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEntry:
    """One log event travelling through the transports.

    Attributes
    ----------
    level:
        :class:`LogLevel` of the call.
    message:
        Message payload already rendered to text.
    timestamp:
        Creation time in timezone-aware UTC.
    context:
        Label of the originating logger, ``None`` when it has none.
    meta:
        Shallow copy of caller-supplied metadata, ``None`` when absent.
    """

    level: LogLevel
    message: str
    timestamp: datetime
    context: str | None = None
    meta: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be a LogLevel member")
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if self.meta is not None:
            if not isinstance(self.meta, Mapping):
                raise TypeError("meta must be a mapping")
            object.__setattr__(self, "meta", dict(self.meta))

    def iso_timestamp(self) -> str:
        """Return the timestamp as ISO-8601 UTC with millisecond precision.

        Examples
        --------
        >>> entry = LogEntry(LogLevel.INFO, "hi", datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        >>> entry.iso_timestamp()
        '2024-01-15T10:30:00.000Z'
        """

        return self.timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def to_dict(self) -> dict[str, Any]:
        """Return the structured payload; ``context``/``meta`` only when present."""

        data: dict[str, Any] = {
            "timestamp": self.iso_timestamp(),
            "level": self.level.display_name,
            "message": self.message,
        }
        if self.context:
            data["context"] = self.context
        if self.meta:
            data["meta"] = self.meta
        return data


__all__ = ["LogEntry"]
