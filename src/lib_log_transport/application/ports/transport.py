"""Transport ports describing output destinations.

Purpose
-------
Separate what the logger needs from a transport (gate, format, write) from the
one capability each destination must implement (``write``).

Contents
--------
* :class:`WriterPort` – destination-specific ``write(text, entry)``.
* :class:`TransportPort` – what :class:`lib_log_transport.Logger` fans out to.

System Role
-----------
Concrete transports compose a writer with a formatter and a threshold; tests
and host applications may supply their own implementations of either port.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_transport.domain.entry import LogEntry
from lib_log_transport.domain.levels import LogLevel

from .formatter import FormatterPort


@runtime_checkable
class WriterPort(Protocol):
    """Deliver formatted text to a concrete target."""

    def write(self, text: str, entry: LogEntry) -> None:
        """Write ``text``; ``entry`` is available for routing decisions."""


@runtime_checkable
class TransportPort(Protocol):
    """Filter, format, and write log entries."""

    def log(self, entry: LogEntry) -> None:
        """Emit ``entry`` when it passes this transport's threshold."""

    def should_log(self, level: LogLevel) -> bool:
        """Return ``True`` when ``level`` passes this transport's threshold."""

    def set_formatter(self, formatter: FormatterPort) -> None:
        """Replace the formatter used for subsequent entries."""


__all__ = ["TransportPort", "WriterPort"]
