from __future__ import annotations

import logging
from io import StringIO

import pytest
from rich.console import Console

from lib_log_transport import ConsoleTransport, FileTransport, JsonFormatter, Logger, LogLevel
from lib_log_transport.adapters.formatters import DefaultFormatter

ISO = "2024-01-15T10:30:00.000Z"


def _logger(clock, transport, **kwargs) -> Logger:
    return Logger(clock=clock, **kwargs).set_transport(transport)


def test_new_logger_starts_with_one_console_transport() -> None:
    logger = Logger()
    assert len(logger.transports) == 1
    assert isinstance(logger.transports[0], ConsoleTransport)
    assert logger.context is None
    assert logger.min_level is LogLevel.VERBOSE


def test_transport_management_methods_chain(recording_transport) -> None:
    other = type(recording_transport)()
    logger = Logger().clear_transports().add_transport(recording_transport).add_transport(other)
    assert logger.transports == (recording_transport, other)

    assert logger.set_transport(other).transports == (other,)
    assert logger.clear_transports().transports == ()


def test_clear_transports_silences_output(fixed_clock) -> None:
    logger = Logger(clock=fixed_clock).clear_transports()
    logger.error("nobody hears this")
    assert fixed_clock.calls == 1


@pytest.mark.parametrize(
    "method, level",
    [("verbose", LogLevel.VERBOSE), ("info", LogLevel.INFO), ("warning", LogLevel.WARNING), ("error", LogLevel.ERROR)],
)
def test_level_methods_produce_matching_entries(method: str, level: LogLevel, fixed_clock, recording_transport) -> None:
    logger = _logger(fixed_clock, recording_transport, context="App")

    getattr(logger, method)("message", {"k": 1})

    (entry,) = recording_transport.entries
    assert entry.level is level
    assert entry.message == "message"
    assert entry.context == "App"
    assert entry.meta == {"k": 1}
    assert entry.iso_timestamp() == ISO


def test_logger_threshold_filters_lower_levels(fixed_clock, recording_transport) -> None:
    logger = _logger(fixed_clock, recording_transport, min_level=LogLevel.WARNING)

    logger.verbose("v")
    logger.info("i")
    logger.warning("w")
    logger.error("e")

    assert [entry.message for entry in recording_transport.entries] == ["w", "e"]


def test_entries_pass_both_logger_and_transport_thresholds(fixed_clock, recording_transport) -> None:
    recording_transport.min_level = LogLevel.ERROR
    logger = _logger(fixed_clock, recording_transport, min_level=LogLevel.INFO)

    logger.verbose("blocked by logger")
    logger.warning("blocked by transport")
    logger.error("delivered")

    assert [entry.message for entry in recording_transport.entries] == ["delivered"]


def test_filtered_calls_do_no_serialization_work(fixed_clock, recording_transport) -> None:
    rendered: list[str] = []

    class _Expensive:
        def __str__(self) -> str:
            rendered.append("called")
            return "expensive"

    logger = _logger(fixed_clock, recording_transport, min_level=LogLevel.ERROR)
    logger.info(_Expensive())

    assert rendered == []
    assert fixed_clock.calls == 0
    assert recording_transport.entries == []

    logger.error(_Expensive())
    assert rendered == ["called"]
    assert recording_transport.entries[0].message == "expensive"


def test_failing_transport_does_not_stop_others(fixed_clock, failing_transport, recording_transport, caplog) -> None:
    logger = Logger(clock=fixed_clock).set_transport(failing_transport).add_transport(recording_transport)

    with caplog.at_level(logging.ERROR):
        logger.error("still delivered")

    assert [entry.message for entry in recording_transport.entries] == ["still delivered"]
    assert "FailingTransport" in caplog.text


def test_diagnostic_hook_receives_transport_errors(fixed_clock, failing_transport) -> None:
    events: list[str] = []
    logger = Logger(clock=fixed_clock, diagnostic=lambda name, payload: events.append(name))
    logger.set_transport(failing_transport)

    logger.info("x")
    logger.child("Sub").info("y")

    assert events == ["transport_error", "transport_error"]


@pytest.mark.parametrize(
    "message, expected",
    [
        ("text", "text"),
        (12345, "12345"),
        (True, "true"),
        (None, "null"),
        ({"name": "Test", "value": 100}, '{"name":"Test","value":100}'),
    ],
)
def test_messages_are_serialized(message: object, expected: str, fixed_clock, recording_transport) -> None:
    _logger(fixed_clock, recording_transport).info(message)
    assert recording_transport.entries[0].message == expected


def test_omitted_message_renders_as_undefined(fixed_clock, recording_transport) -> None:
    _logger(fixed_clock, recording_transport).info()
    assert recording_transport.entries[0].message == "undefined"


def test_empty_meta_is_treated_as_absent(fixed_clock) -> None:
    console = Console(file=StringIO(), force_terminal=False, color_system=None, width=200)
    transport = ConsoleTransport(colorize=False, stdout=console, stderr=console)
    _logger(fixed_clock, transport).info("no meta", {})
    assert console.file.getvalue() == f"[{ISO}] [INFO   ] no meta\n"


@pytest.mark.parametrize(
    "parent, child, expected",
    [("Root", "X", "Root:X"), (None, "X", "X"), ("", "X", "X"), ("A:B", "C", "A:B:C")],
)
def test_child_context_is_qualified(parent, child: str, expected: str) -> None:
    assert Logger(context=parent).child(child).context == expected


def test_child_inherits_threshold_and_clock(fixed_clock, recording_transport) -> None:
    parent = _logger(fixed_clock, recording_transport, context="Server", min_level=LogLevel.WARNING)
    child = parent.child("Database")

    child.info("dropped")
    child.warning("kept")

    assert child.min_level is LogLevel.WARNING
    (entry,) = recording_transport.entries
    assert (entry.context, entry.message, entry.iso_timestamp()) == ("Server:Database", "kept", ISO)


def test_child_shares_transport_instances_but_not_the_list(fixed_clock, recording_transport) -> None:
    parent = _logger(fixed_clock, recording_transport, context="Root")
    child = parent.child("X")

    assert child.transports == parent.transports
    assert child.transports[0] is recording_transport

    extra = type(recording_transport)()
    parent.add_transport(extra)
    child.clear_transports()

    assert len(parent.transports) == 2
    assert child.transports == ()


def test_formatter_change_on_shared_transport_affects_parent_and_child(tmp_path, fixed_clock) -> None:
    target = tmp_path / "shared.log"
    parent = Logger(context="Root", clock=fixed_clock).set_transport(FileTransport(target))
    child = parent.child("X")

    child.transports[0].set_formatter(JsonFormatter())
    parent.info("from parent")
    child.info("from child")

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == [
        f'{{"timestamp":"{ISO}","level":"INFO","message":"from parent","context":"Root"}}',
        f'{{"timestamp":"{ISO}","level":"INFO","message":"from child","context":"Root:X"}}',
    ]


def test_is_enabled_for_reflects_threshold() -> None:
    logger = Logger(min_level="info")
    assert not logger.is_enabled_for(LogLevel.VERBOSE)
    assert logger.is_enabled_for(LogLevel.INFO)


def test_repr_mentions_context_level_and_transport_count() -> None:
    assert repr(Logger(context="App", min_level=LogLevel.ERROR)) == "Logger(context='App', min_level=ERROR, transports=1)"


def test_default_formatter_is_used_when_none_given(tmp_path, fixed_clock) -> None:
    transport = FileTransport(tmp_path / "x.log")
    assert isinstance(transport.formatter, DefaultFormatter)


def test_message_whose_text_raises_is_logged_with_placeholder(fixed_clock, recording_transport) -> None:
    class _BrokenText:
        def __str__(self) -> str:
            raise RuntimeError("cannot render")

    _logger(fixed_clock, recording_transport).error(_BrokenText())

    assert recording_transport.entries[0].message == "[Unserializable: _BrokenText]"


def test_non_mapping_meta_is_kept_under_value_key(fixed_clock, recording_transport, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="lib_log_transport.logger"):
        _logger(fixed_clock, recording_transport).info("x", ["a"])  # type: ignore[arg-type]

    assert recording_transport.entries[0].meta == {"value": ["a"]}
    assert "Log metadata must be a mapping, got list" in caplog.text


def test_log_accepts_level_names(fixed_clock, recording_transport) -> None:
    logger = _logger(fixed_clock, recording_transport, min_level=LogLevel.INFO)

    logger.log("verbose", "dropped")
    logger.log("Warning", "kept")

    (entry,) = recording_transport.entries
    assert entry.level is LogLevel.WARNING


def test_log_rejects_unknown_level_names(fixed_clock, recording_transport) -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        _logger(fixed_clock, recording_transport).log("loud", "x")
