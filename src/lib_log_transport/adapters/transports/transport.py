"""Generic transport composing a threshold, a formatter, and a writer.

Purpose
-------
Hold the behaviour every destination shares (severity gate, formatter
delegation) so concrete destinations only implement ``write``.

Contents
--------
* :class:`Transport` – concrete :class:`TransportPort` built around a
  :class:`WriterPort`.

System Role
-----------
Console and file transports are thin constructors around this class; custom
destinations can be plugged in by passing any object with a ``write`` method.
"""

from __future__ import annotations

from lib_log_transport.adapters.formatters import DefaultFormatter
from lib_log_transport.application.ports import FormatterPort, TransportPort, WriterPort
from lib_log_transport.domain.entry import LogEntry
from lib_log_transport.domain.levels import LogLevel, coerce_level


class Transport(TransportPort):
    """Filter by severity, format, then hand the text to a writer.

    Parameters
    ----------
    writer:
        Destination receiving ``(text, entry)`` for every accepted entry.
    formatter:
        Formatter rendering entries; defaults to :class:`DefaultFormatter`.
    min_level:
        Threshold of this transport, independent of any logger threshold.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class Lines:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def write(self, text, entry):
    ...         self.lines.append(text)
    >>> lines = Lines()
    >>> transport = Transport(lines, min_level="error")
    >>> stamp = datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> transport.log(LogEntry(LogLevel.INFO, "skipped", stamp))
    >>> transport.log(LogEntry(LogLevel.ERROR, "kept", stamp))
    >>> lines.lines
    ['[2025-01-01T00:00:00.000Z] [ERROR  ] kept']
    """

    def __init__(
        self,
        writer: WriterPort,
        *,
        formatter: FormatterPort | None = None,
        min_level: LogLevel | str = LogLevel.VERBOSE,
    ) -> None:
        self._writer = writer
        self._formatter: FormatterPort = formatter if formatter is not None else DefaultFormatter()
        self._min_level = coerce_level(min_level)

    @property
    def writer(self) -> WriterPort:
        return self._writer

    @property
    def formatter(self) -> FormatterPort:
        return self._formatter

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    def set_formatter(self, formatter: FormatterPort) -> None:
        """Use ``formatter`` for every entry logged from now on."""
        self._formatter = formatter

    def should_log(self, level: LogLevel) -> bool:
        return level >= self._min_level

    def log(self, entry: LogEntry) -> None:
        """Format and write ``entry`` unless it is below ``min_level``."""
        if not self.should_log(entry.level):
            return
        text = self._formatter.format(entry)
        self._writer.write(text, entry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_level={self._min_level.name}, formatter={self._formatter!r})"


__all__ = ["Transport"]
