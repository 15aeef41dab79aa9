"""Human-readable single-line formatter.

Purpose
-------
Render entries as ``[timestamp] [LEVEL  ] [context] message {meta}`` for
consoles and plain log files.

Contents
--------
* :data:`LEVEL_WIDTH` – padding applied to level names.
* :class:`DefaultFormatter` – implementation of :class:`FormatterPort`.
"""

from __future__ import annotations

from lib_log_transport.application.ports.formatter import FormatterPort
from lib_log_transport.domain.entry import LogEntry
from lib_log_transport.domain.serialization import to_json

LEVEL_WIDTH = 7


class DefaultFormatter(FormatterPort):
    """Format entries as one readable line.

    The context segment and the metadata segment disappear entirely when the
    entry has no context or no metadata.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_transport.domain.levels import LogLevel
    >>> entry = LogEntry(
    ...     LogLevel.INFO,
    ...     "hello",
    ...     datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
    ...     context="Auth",
    ...     meta={"a": 1},
    ... )
    >>> DefaultFormatter().format(entry)
    '[2024-01-15T10:30:00.000Z] [INFO   ] [Auth] hello {"a":1}'
    """

    def format(self, entry: LogEntry) -> str:
        level = entry.level.display_name.ljust(LEVEL_WIDTH)
        context = f"[{entry.context}] " if entry.context else ""
        meta = f" {to_json(entry.meta)}" if entry.meta else ""
        return f"[{entry.iso_timestamp()}] [{level}] {context}{entry.message}{meta}"

    def __repr__(self) -> str:
        return "DefaultFormatter()"


__all__ = ["DefaultFormatter", "LEVEL_WIDTH"]
