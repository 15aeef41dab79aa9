"""Protocols separating the logger from formatters, transports, and I/O."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from .file_system import FileSystemPort
from .formatter import FormatterPort
from .time import ClockPort
from .transport import TransportPort, WriterPort

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]
"""Optional callback receiving pipeline events such as ``transport_error``."""

__all__ = [
    "ClockPort",
    "DiagnosticHook",
    "FileSystemPort",
    "FormatterPort",
    "TransportPort",
    "WriterPort",
]
