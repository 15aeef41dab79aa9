"""Domain value objects and rendering rules used by the logging pipeline."""

from __future__ import annotations

from .entry import LogEntry
from .levels import LEVEL_NAMES, LogLevel, coerce_level
from .serialization import MISSING, serialize_message, to_json

__all__ = [
    "LEVEL_NAMES",
    "LogEntry",
    "LogLevel",
    "MISSING",
    "coerce_level",
    "serialize_message",
    "to_json",
]
