"""Formatter port turning log entries into text.

Purpose
-------
Define the single capability every formatter offers so transports can swap
renderings (human-readable line, JSON) without knowing their details.

Contents
--------
* :class:`FormatterPort` – runtime-checkable protocol with ``format``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_transport.domain.entry import LogEntry


@runtime_checkable
class FormatterPort(Protocol):
    """Render a :class:`LogEntry` as a string."""

    def format(self, entry: LogEntry) -> str:
        """Return the textual representation of ``entry``."""


__all__ = ["FormatterPort"]
