"""Rich-powered console transport.

Purpose
-------
Print formatted entries to the terminal, routing warnings and errors to
standard error and colouring lines by severity.

Contents
--------
* :data:`_STYLE_MAP` – default level-to-style mapping.
* :class:`ConsoleWriter` – :class:`WriterPort` printing through Rich consoles.
* :class:`ConsoleTransport` – transport created by default for every logger.

System Role
-----------
Human-facing destination. Rich renders the colour as ANSI codes when the
stream is a terminal (or when ``force_color`` is set); markup, highlighting
and wrapping are disabled so the formatted text is printed verbatim.
"""

from __future__ import annotations

import logging
from typing import Mapping

from rich.console import Console

from lib_log_transport.application.ports import FormatterPort, WriterPort
from lib_log_transport.domain.entry import LogEntry
from lib_log_transport.domain.levels import LogLevel

from .transport import Transport

LOGGER = logging.getLogger(__name__)

_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.VERBOSE: "bright_black",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}
#: Default Rich styles keyed by :class:`LogLevel`.

_FALLBACK_STYLE = "white"

_STDERR_LEVELS = frozenset({LogLevel.WARNING, LogLevel.ERROR})


class ConsoleWriter(WriterPort):
    """Write lines to stdout/stderr through Rich.

    Parameters
    ----------
    colorize:
        Apply the severity style to each line.
    force_color:
        Emit colour codes even when the stream is not a terminal.
    stdout, stderr:
        Consoles to use instead of the process streams (handy for tests).
    styles:
        Per-level style overrides merged over :data:`_STYLE_MAP`.
    """

    def __init__(
        self,
        *,
        colorize: bool = True,
        force_color: bool = False,
        stdout: Console | None = None,
        stderr: Console | None = None,
        styles: Mapping[LogLevel, str] | None = None,
    ) -> None:
        force_terminal = True if force_color else None
        self._stdout = stdout if stdout is not None else Console(force_terminal=force_terminal)
        self._stderr = stderr if stderr is not None else Console(stderr=True, force_terminal=force_terminal)
        self._colorize = colorize
        self._style_map = dict(_STYLE_MAP)
        if styles:
            self._style_map.update(styles)

    @property
    def colorize(self) -> bool:
        return self._colorize

    def console_for(self, level: LogLevel) -> Console:
        """Return the console receiving entries of ``level``."""
        return self._stderr if level in _STDERR_LEVELS else self._stdout

    def style_for(self, level: LogLevel) -> str:
        return self._style_map.get(level, _FALLBACK_STYLE)

    def write(self, text: str, entry: LogEntry) -> None:
        style = self.style_for(entry.level) if self._colorize else None
        try:
            self.console_for(entry.level).print(
                text,
                style=style,
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        except OSError as exc:
            LOGGER.warning("Console write failed for %s entry", entry.level.display_name, exc_info=exc)


class ConsoleTransport(Transport):
    """Transport printing to the terminal.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from io import StringIO
    >>> out, err = Console(file=StringIO()), Console(file=StringIO())
    >>> transport = ConsoleTransport(colorize=False, stdout=out, stderr=err)
    >>> stamp = datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> transport.log(LogEntry(LogLevel.WARNING, "careful", stamp))
    >>> err.file.getvalue()
    '[2025-01-01T00:00:00.000Z] [WARNING] careful\\n'
    >>> out.file.getvalue()
    ''
    """

    def __init__(
        self,
        *,
        colorize: bool = True,
        min_level: LogLevel | str = LogLevel.VERBOSE,
        formatter: FormatterPort | None = None,
        force_color: bool = False,
        stdout: Console | None = None,
        stderr: Console | None = None,
        styles: Mapping[LogLevel, str] | None = None,
    ) -> None:
        writer = ConsoleWriter(
            colorize=colorize,
            force_color=force_color,
            stdout=stdout,
            stderr=stderr,
            styles=styles,
        )
        super().__init__(writer, formatter=formatter, min_level=min_level)

    @property
    def colorize(self) -> bool:
        return self._writer.colorize


__all__ = ["ConsoleTransport", "ConsoleWriter"]
