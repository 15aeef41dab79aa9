"""Concrete formatters, transports, and I/O adapters."""

from __future__ import annotations

from .file_system import LocalFileSystem
from .formatters import DefaultFormatter, JsonFormatter
from .transports import ConsoleTransport, ConsoleWriter, FileTransport, FileWriter, Transport

__all__ = [
    "ConsoleTransport",
    "ConsoleWriter",
    "DefaultFormatter",
    "FileTransport",
    "FileWriter",
    "JsonFormatter",
    "LocalFileSystem",
    "Transport",
]
