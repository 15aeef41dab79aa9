from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from lib_log_transport.application.ports import ClockPort, FileSystemPort, FormatterPort, TransportPort
from lib_log_transport.domain.entry import LogEntry
from lib_log_transport.domain.levels import LogLevel

FIXED_TIME = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
FIXED_ISO = "2024-01-15T10:30:00.000Z"


class FixedClock(ClockPort):
    def __init__(self, moment: datetime = FIXED_TIME) -> None:
        self.moment = moment
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self.moment


class RecordingFileSystem(FileSystemPort):
    """In-memory file system remembering every operation in order."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self.operations: list[tuple[str, str, str]] = []

    def append(self, target: str, text: str) -> None:
        self.operations.append(("append", target, text))
        self.files[target] = self.files.get(target, "") + text

    def overwrite(self, target: str, text: str) -> None:
        self.operations.append(("overwrite", target, text))
        self.files[target] = text


class RecordingTransport(TransportPort):
    """Transport keeping accepted entries in memory."""

    def __init__(self, min_level: LogLevel = LogLevel.VERBOSE) -> None:
        self.min_level = min_level
        self.entries: list[LogEntry] = []
        self.formatter: FormatterPort | None = None

    def should_log(self, level: LogLevel) -> bool:
        return level >= self.min_level

    def log(self, entry: LogEntry) -> None:
        if self.should_log(entry.level):
            self.entries.append(entry)

    def set_formatter(self, formatter: FormatterPort) -> None:
        self.formatter = formatter


class FailingTransport(RecordingTransport):
    def log(self, entry: LogEntry) -> None:
        raise OSError("destination unavailable")


def make_entry(
    level: LogLevel = LogLevel.INFO,
    message: str = "hello",
    *,
    context: str | None = None,
    meta: dict[str, Any] | None = None,
) -> LogEntry:
    return LogEntry(level=level, message=message, timestamp=FIXED_TIME, context=context, meta=meta)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def entry_factory() -> Callable[..., LogEntry]:
    return make_entry


@pytest.fixture
def record_console() -> Console:
    """Plain-text Rich console capturing output for assertions."""

    return Console(file=StringIO(), record=True, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def colour_console() -> Console:
    """Rich console that always emits ANSI colour codes."""

    return Console(file=StringIO(), force_terminal=True, color_system="standard", no_color=False, width=200)


@pytest.fixture
def failing_transport() -> FailingTransport:
    return FailingTransport()
