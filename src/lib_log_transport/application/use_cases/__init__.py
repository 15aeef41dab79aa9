"""Use cases orchestrating the logging pipeline."""

from __future__ import annotations

from .dispatch import FanOutCallable, FanOutResult, build_diagnostic_emitter, create_fan_out

__all__ = ["FanOutCallable", "FanOutResult", "build_diagnostic_emitter", "create_fan_out"]
