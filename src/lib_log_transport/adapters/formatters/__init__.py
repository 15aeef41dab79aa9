"""Formatters converting log entries to text."""

from __future__ import annotations

from .default_formatter import DefaultFormatter
from .json_formatter import JsonFormatter

__all__ = ["DefaultFormatter", "JsonFormatter"]
