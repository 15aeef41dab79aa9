from __future__ import annotations

import logging

import pytest

from lib_log_transport.application.use_cases import build_diagnostic_emitter, create_fan_out
from lib_log_transport.domain.levels import LogLevel


def test_fan_out_delivers_to_every_transport_in_order(entry_factory, recording_transport) -> None:
    order: list[str] = []

    class _Tagged:
        def __init__(self, tag: str) -> None:
            self.tag = tag

        def log(self, entry) -> None:
            order.append(self.tag)

    fan_out = create_fan_out()
    result = fan_out(entry_factory(), [_Tagged("first"), recording_transport, _Tagged("last")])

    assert result == {"ok": True, "delivered": 3, "failed": 0}
    assert order == ["first", "last"]
    assert len(recording_transport.entries) == 1


def test_fan_out_isolates_failures(entry_factory, failing_transport, recording_transport, caplog: pytest.LogCaptureFixture) -> None:
    fan_out = create_fan_out()

    with caplog.at_level(logging.ERROR, logger="lib_log_transport.application.use_cases.dispatch"):
        result = fan_out(entry_factory(), [failing_transport, recording_transport])

    assert result == {"ok": False, "delivered": 1, "failed": 1}
    assert recording_transport.entries[0].message == "hello"
    assert "FailingTransport raised an exception" in caplog.text
    assert caplog.records[0].exc_info is not None


def test_fan_out_reports_transport_errors_to_diagnostic_hook(entry_factory, failing_transport) -> None:
    events: list[tuple[str, dict]] = []
    fan_out = create_fan_out(diagnostic=lambda name, payload: events.append((name, payload)))

    fan_out(entry_factory(LogLevel.ERROR, "boom", context="Api"), [failing_transport])

    assert events == [
        (
            "transport_error",
            {
                "transport": "FailingTransport",
                "level": "ERROR",
                "context": "Api",
                "exception": "OSError('destination unavailable')",
            },
        )
    ]


def test_fan_out_with_no_transports_is_a_no_op(entry_factory) -> None:
    assert create_fan_out()(entry_factory(), []) == {"ok": True, "delivered": 0, "failed": 0}


def test_diagnostic_emitter_swallows_hook_errors(caplog: pytest.LogCaptureFixture) -> None:
    def broken(name: str, payload: dict) -> None:
        raise RuntimeError("hook down")

    emit = build_diagnostic_emitter(broken)

    with caplog.at_level(logging.ERROR):
        emit("transport_error", {})

    assert "Diagnostic hook raised while reporting transport_error" in caplog.text
