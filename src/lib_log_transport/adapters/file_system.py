"""Local file-system adapter implementing :class:`FileSystemPort`."""

from __future__ import annotations

from pathlib import Path

from lib_log_transport.application.ports.file_system import FileSystemPort


class LocalFileSystem(FileSystemPort):
    """Append to or overwrite UTF-8 text files, creating parent directories."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def append(self, target: str, text: str) -> None:
        path = self._prepare(target)
        with path.open("a", encoding=self._encoding) as handle:
            handle.write(text)

    def overwrite(self, target: str, text: str) -> None:
        path = self._prepare(target)
        path.write_text(text, encoding=self._encoding)

    @staticmethod
    def _prepare(target: str) -> Path:
        path = Path(target)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path


__all__ = ["LocalFileSystem"]
