"""JSON formatter for machine-readable output.

Purpose
-------
Emit one JSON object per entry so log shippers and tests can parse lines back
into structured data.

Contents
--------
* :class:`JsonFormatter` – compact or indented rendering.
"""

from __future__ import annotations

from lib_log_transport.application.ports.formatter import FormatterPort
from lib_log_transport.domain.entry import LogEntry
from lib_log_transport.domain.serialization import to_json


class JsonFormatter(FormatterPort):
    """Render entries as JSON objects.

    Keys appear in a fixed order: ``timestamp``, ``level``, ``message`` and,
    only when set on the entry, ``context`` and ``meta``.

    Parameters
    ----------
    pretty:
        Indent the object by two spaces instead of emitting a single line.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_transport.domain.levels import LogLevel
    >>> entry = LogEntry(LogLevel.ERROR, "boom", datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
    >>> JsonFormatter().format(entry)
    '{"timestamp":"2024-01-15T10:30:00.000Z","level":"ERROR","message":"boom"}'
    >>> print(JsonFormatter(pretty=True).format(entry))
    {
      "timestamp": "2024-01-15T10:30:00.000Z",
      "level": "ERROR",
      "message": "boom"
    }
    """

    def __init__(self, pretty: bool = False) -> None:
        self._pretty = pretty

    @property
    def pretty(self) -> bool:
        return self._pretty

    def format(self, entry: LogEntry) -> str:
        return to_json(entry.to_dict(), pretty=self._pretty)

    def __repr__(self) -> str:
        return f"JsonFormatter(pretty={self._pretty})"


__all__ = ["JsonFormatter"]
