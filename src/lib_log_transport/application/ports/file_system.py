"""Port for the byte-level file operations used by file transports."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    """Append to or overwrite a named resource."""

    def append(self, target: str, text: str) -> None:
        """Append ``text`` to ``target``, creating it when missing."""

    def overwrite(self, target: str, text: str) -> None:
        """Replace the content of ``target`` with ``text``."""


__all__ = ["FileSystemPort"]
