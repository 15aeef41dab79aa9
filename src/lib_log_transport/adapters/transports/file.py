"""File transport with append and overwrite-once modes.

Purpose
-------
Persist formatted entries line by line through an injected file-system
capability.

Contents
--------
* :class:`FileWriter` – :class:`WriterPort` tracking the first write.
* :class:`FileTransport` – transport wrapping a :class:`FileWriter`.

System Role
-----------
In overwrite mode (``append=False``) the very first write of an instance
replaces the target; every later write appends. I/O errors propagate to the
caller of :meth:`FileTransport.log`, which inside a logger is the isolated
fan-out loop.
"""

from __future__ import annotations

import os
import threading

from lib_log_transport.adapters.file_system import LocalFileSystem
from lib_log_transport.application.ports import FileSystemPort, FormatterPort, WriterPort
from lib_log_transport.domain.entry import LogEntry
from lib_log_transport.domain.levels import LogLevel

from .transport import Transport

LINE_TERMINATOR = "\n"


def _normalise_path(file_path: str | os.PathLike[str] | None) -> str:
    if file_path is None:
        raise ValueError("file_path is required for file transports")
    path = os.fspath(file_path)
    if not path.strip():
        raise ValueError("file_path must not be empty")
    return path


class FileWriter(WriterPort):
    """Write lines to ``file_path`` using ``file_system``."""

    def __init__(
        self,
        file_path: str | os.PathLike[str],
        *,
        append: bool = True,
        file_system: FileSystemPort | None = None,
    ) -> None:
        self._file_path = _normalise_path(file_path)
        self._append = append
        self._file_system: FileSystemPort = file_system if file_system is not None else LocalFileSystem()
        self._is_first_write = True
        self._lock = threading.Lock()

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def append(self) -> bool:
        return self._append

    @property
    def is_first_write(self) -> bool:
        return self._is_first_write

    def write(self, text: str, entry: LogEntry) -> None:
        line = text + LINE_TERMINATOR
        with self._lock:
            if self._append or not self._is_first_write:
                self._file_system.append(self._file_path, line)
            else:
                self._file_system.overwrite(self._file_path, line)
            self._is_first_write = False


class FileTransport(Transport):
    """Transport writing each accepted entry as a line in a file.

    Parameters
    ----------
    file_path:
        Target resource; required.
    append:
        ``True`` (default) always appends. ``False`` overwrites on the first
        write of this instance and appends afterwards.
    min_level, formatter:
        See :class:`Transport`.
    file_system:
        Capability performing the I/O; defaults to :class:`LocalFileSystem`.

    Raises
    ------
    ValueError
        When ``file_path`` is missing or blank.

    Examples
    --------
    >>> FileTransport("")
    Traceback (most recent call last):
    ...
    ValueError: file_path must not be empty
    """

    def __init__(
        self,
        file_path: str | os.PathLike[str],
        *,
        append: bool = True,
        min_level: LogLevel | str = LogLevel.VERBOSE,
        formatter: FormatterPort | None = None,
        file_system: FileSystemPort | None = None,
    ) -> None:
        writer = FileWriter(file_path, append=append, file_system=file_system)
        super().__init__(writer, formatter=formatter, min_level=min_level)

    @property
    def file_path(self) -> str:
        return self._writer.file_path

    @property
    def append(self) -> bool:
        return self._writer.append


__all__ = ["FileTransport", "FileWriter", "LINE_TERMINATOR"]
