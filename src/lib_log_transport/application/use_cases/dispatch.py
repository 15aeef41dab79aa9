"""Use case delivering one entry to every transport with failure isolation.

Purpose
-------
Guarantee that a failing transport neither stops the remaining transports nor
raises into the code that is logging.

Contents
--------
* :func:`build_diagnostic_emitter` – wraps the optional diagnostic hook.
* :func:`create_fan_out` – factory returning the fan-out callable.

System Role
-----------
Invoked by :class:`lib_log_transport.Logger` after an entry passed the logger's
threshold. Failures go to this module's stdlib logger (with traceback) and to
the ``transport_error`` diagnostic event.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypedDict

from lib_log_transport.application.ports import DiagnosticHook, TransportPort
from lib_log_transport.domain.entry import LogEntry

logger = logging.getLogger(__name__)


class FanOutResult(TypedDict):
    ok: bool
    delivered: int
    failed: int


FanOutCallable = Callable[[LogEntry, Sequence[TransportPort]], FanOutResult]


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    """Return a callable that forwards to ``diagnostic`` and never raises.

    Examples
    --------
    >>> seen = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: seen.append(name))
    >>> emit("transport_error", {})
    >>> seen
    ['transport_error']
    >>> build_diagnostic_emitter(None)("ignored", {})
    """

    if diagnostic is None:

        def _noop(name: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def _emit(name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(name, payload)
        except Exception as exc:  # noqa: BLE001
            logger.error("Diagnostic hook raised while reporting %s", name, exc_info=exc)

    return _emit


def create_fan_out(*, diagnostic: DiagnosticHook = None) -> FanOutCallable:
    """Build the fan-out callable used by loggers.

    Parameters
    ----------
    diagnostic:
        Optional hook receiving ``("transport_error", payload)`` for every
        transport that raised.

    Returns
    -------
    Callable[[LogEntry, Sequence[TransportPort]], FanOutResult]
        Function delivering the entry to each transport in order and
        reporting how many succeeded.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_transport.domain.levels import LogLevel
    >>> class Broken:
    ...     def log(self, entry):
    ...         raise OSError("disk full")
    >>> class Recording:
    ...     def __init__(self):
    ...         self.entries = []
    ...     def log(self, entry):
    ...         self.entries.append(entry)
    >>> recording = Recording()
    >>> entry = LogEntry(LogLevel.INFO, "hello", datetime(2025, 1, 1, tzinfo=timezone.utc))
    >>> fan_out = create_fan_out()
    >>> fan_out(entry, [Broken(), recording])
    {'ok': False, 'delivered': 1, 'failed': 1}
    >>> len(recording.entries)
    1
    """

    emit = build_diagnostic_emitter(diagnostic)

    def _fan_out(entry: LogEntry, transports: Sequence[TransportPort]) -> FanOutResult:
        delivered = 0
        failed = 0
        for transport in transports:
            try:
                transport.log(entry)
            except Exception as exc:  # noqa: BLE001
                failed += 1
                logger.error("Transport %s raised an exception; continuing", type(transport).__name__, exc_info=exc)
                emit(
                    "transport_error",
                    {
                        "transport": type(transport).__name__,
                        "level": entry.level.display_name,
                        "context": entry.context,
                        "exception": repr(exc),
                    },
                )
            else:
                delivered += 1
        return {"ok": failed == 0, "delivered": delivered, "failed": failed}

    return _fan_out


__all__ = ["FanOutCallable", "FanOutResult", "build_diagnostic_emitter", "create_fan_out"]
