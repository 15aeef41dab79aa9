"""Leveled logging with pluggable formatters and transports.

Typical use::

    from lib_log_transport import FileTransport, JsonFormatter, Logger, LogLevel

    log = Logger(context="App", min_level=LogLevel.INFO)
    log.add_transport(FileTransport("app.log", formatter=JsonFormatter()))
    log.child("Db").warning("slow query", {"ms": 812})

The package root re-exports the logger, the level enum, the concrete
formatters and transports, the ports they implement, and the environment
configuration helpers.
"""

from __future__ import annotations

from .adapters import (
    ConsoleTransport,
    ConsoleWriter,
    DefaultFormatter,
    FileTransport,
    FileWriter,
    JsonFormatter,
    LocalFileSystem,
    Transport,
)
from .application.ports import (
    ClockPort,
    DiagnosticHook,
    FileSystemPort,
    FormatterPort,
    TransportPort,
    WriterPort,
)
from .config import LoggerSettings, create_logger, load_settings
from .domain import LEVEL_NAMES, MISSING, LogEntry, LogLevel, serialize_message
from .logger import Logger, SystemClock

__all__ = [
    "ClockPort",
    "ConsoleTransport",
    "ConsoleWriter",
    "DefaultFormatter",
    "DiagnosticHook",
    "FileSystemPort",
    "FileTransport",
    "FileWriter",
    "FormatterPort",
    "JsonFormatter",
    "LEVEL_NAMES",
    "LocalFileSystem",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerSettings",
    "MISSING",
    "SystemClock",
    "Transport",
    "TransportPort",
    "WriterPort",
    "create_logger",
    "load_settings",
    "serialize_message",
]
