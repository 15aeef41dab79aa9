"""Transports delivering formatted entries to their destinations."""

from __future__ import annotations

from .console import ConsoleTransport, ConsoleWriter
from .file import FileTransport, FileWriter
from .transport import Transport

__all__ = ["ConsoleTransport", "ConsoleWriter", "FileTransport", "FileWriter", "Transport"]
