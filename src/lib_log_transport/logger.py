"""Logger façade: severity gate, message serialization, and fan-out.

Purpose
-------
Expose the ergonomic API host applications call (``verbose``/``info``/
``warning``/``error``) and wire it to the transports configured on the
logger.

Contents
--------
* :class:`Logger` – configuration plus dispatch object.
* :class:`SystemClock` – default :class:`ClockPort`.
* :data:`CONTEXT_SEPARATOR` – joins parent and child context labels.

System Role
-----------
Outer shell of the pipeline. Filtering happens here before any serialization
work; accepted entries are handed to the fan-out use case which isolates
transport failures from the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from threading import RLock
from typing import Any

from .adapters.transports import ConsoleTransport
from .application.ports import ClockPort, DiagnosticHook, TransportPort
from .application.use_cases.dispatch import create_fan_out
from .domain.entry import LogEntry
from .domain.levels import LogLevel, coerce_level
from .domain.serialization import MISSING, serialize_message

CONTEXT_SEPARATOR = ":"

LOGGER = logging.getLogger(__name__)


def _coerce_meta(meta: Any) -> Mapping[str, Any] | None:
    if meta is None or isinstance(meta, Mapping):
        return meta
    LOGGER.warning("Log metadata must be a mapping, got %s; stored under 'value'", type(meta).__name__)
    return {"value": meta}


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class Logger:
    """Leveled logger fanning entries out to its transports.

    A new logger always starts with one :class:`ConsoleTransport`, so it is
    usable without configuration. ``context`` and ``min_level`` are fixed at
    construction; the transport list can be changed with
    :meth:`add_transport`, :meth:`clear_transports` and :meth:`set_transport`.

    Parameters
    ----------
    context:
        Label attached to every entry and used to qualify child contexts.
    min_level:
        Lowest severity that is processed; defaults to ``VERBOSE`` (nothing
        filtered). Level names are accepted.
    clock:
        Source of entry timestamps; defaults to :class:`SystemClock`.
    diagnostic:
        Optional hook receiving ``("transport_error", payload)`` whenever a
        transport raises.

    Examples
    --------
    >>> class Recording:
    ...     def __init__(self):
    ...         self.entries = []
    ...     def log(self, entry):
    ...         self.entries.append(entry)
    ...     def should_log(self, level):
    ...         return True
    ...     def set_formatter(self, formatter):
    ...         pass
    >>> sink = Recording()
    >>> app = Logger(context="Server", min_level="info").set_transport(sink)
    >>> app.verbose("dropped")
    >>> app.child("Database").info({"connected": True})
    >>> [(entry.context, entry.message) for entry in sink.entries]
    [('Server:Database', '{"connected":true}')]
    """

    def __init__(
        self,
        *,
        context: str | None = None,
        min_level: LogLevel | str = LogLevel.VERBOSE,
        clock: ClockPort | None = None,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._context = context
        self._min_level = coerce_level(min_level)
        self._clock: ClockPort = clock if clock is not None else SystemClock()
        self._diagnostic = diagnostic
        self._fan_out = create_fan_out(diagnostic=diagnostic)
        self._lock = RLock()
        self._transports: tuple[TransportPort, ...] = (ConsoleTransport(),)

    @property
    def context(self) -> str | None:
        return self._context

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    @property
    def transports(self) -> tuple[TransportPort, ...]:
        """Snapshot of the transports in dispatch order."""
        return self._transports

    def add_transport(self, transport: TransportPort) -> "Logger":
        """Append ``transport``; returns ``self`` for chaining."""
        with self._lock:
            self._transports = self._transports + (transport,)
        return self

    def clear_transports(self) -> "Logger":
        """Remove every transport, including the default console transport."""
        with self._lock:
            self._transports = ()
        return self

    def set_transport(self, transport: TransportPort) -> "Logger":
        """Replace all transports with ``transport``."""
        with self._lock:
            self._transports = (transport,)
        return self

    def _replace_transports(self, transports: Iterable[TransportPort]) -> None:
        with self._lock:
            self._transports = tuple(transports)

    def verbose(self, message: Any = MISSING, meta: Mapping[str, Any] | None = None) -> None:
        """Log ``message`` at ``VERBOSE``."""
        self.log(LogLevel.VERBOSE, message, meta)

    def info(self, message: Any = MISSING, meta: Mapping[str, Any] | None = None) -> None:
        """Log ``message`` at ``INFO``."""
        self.log(LogLevel.INFO, message, meta)

    def warning(self, message: Any = MISSING, meta: Mapping[str, Any] | None = None) -> None:
        """Log ``message`` at ``WARNING``."""
        self.log(LogLevel.WARNING, message, meta)

    def error(self, message: Any = MISSING, meta: Mapping[str, Any] | None = None) -> None:
        """Log ``message`` at ``ERROR``."""
        self.log(LogLevel.ERROR, message, meta)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self._min_level

    def log(self, level: LogLevel | str, message: Any = MISSING, meta: Mapping[str, Any] | None = None) -> None:
        """Process one log call.

        ``level`` may be a :class:`LogLevel` or a level name; an unknown name
        raises :class:`ValueError`. Calls below ``min_level`` return
        immediately without serializing ``message``. Accepted calls build a
        :class:`LogEntry` and deliver it to every transport; transport failures
        are reported through the diagnostic channel and never raised here.
        Metadata that is not a mapping is kept under the ``"value"`` key and a
        warning is logged.
        """
        level = coerce_level(level)
        if not self.is_enabled_for(level):
            return
        entry = LogEntry(
            level=level,
            message=serialize_message(message),
            timestamp=self._clock.now(),
            context=self._context,
            meta=_coerce_meta(meta),
        )
        self._fan_out(entry, self._transports)

    def child(self, context: str) -> "Logger":
        """Return a logger sharing this logger's transports under a qualified context.

        The child's context is ``"<parent>:<context>"`` (or just ``context``
        when this logger has none) and its threshold equals this logger's.
        The child holds the same transport instances in its own sequence, so
        later changes to either logger's transport list stay local while
        writes still reach the same destinations.
        """
        qualified = f"{self._context}{CONTEXT_SEPARATOR}{context}" if self._context else context
        child_logger = Logger(
            context=qualified,
            min_level=self._min_level,
            clock=self._clock,
            diagnostic=self._diagnostic,
        )
        child_logger._replace_transports(self._transports)
        return child_logger

    def __repr__(self) -> str:
        return f"Logger(context={self._context!r}, min_level={self._min_level.name}, transports={len(self._transports)})"


__all__ = ["CONTEXT_SEPARATOR", "Logger", "SystemClock"]
