"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_transport"
title = "Leveled logging with pluggable formatters and transports"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_transport"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Emit the metadata banner one line at a time through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_transport:\\n'
    """

    emit = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")


__all__ = ["author", "name", "print_info", "shell_command", "title", "version"]
