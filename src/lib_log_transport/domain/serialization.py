"""Text and JSON rendering rules shared by loggers and formatters.

Purpose
-------
Turn arbitrary message payloads into text and metadata mappings into JSON
without ever raising on awkward input.

Contents
--------
* :data:`MISSING` – sentinel for an omitted message argument.
* :func:`serialize_message` – message payload → text.
* :func:`to_json` – best-effort JSON encoding for metadata.

System Role
-----------
Called by :class:`lib_log_transport.Logger` for accepted entries only, and by
both formatters when rendering metadata. Values without a JSON form are
stringified and cyclic references become ``"[Circular]"`` so a log call can
never fail because of its payload.
"""

from __future__ import annotations

import dataclasses
import json
import math
from collections.abc import Mapping, Set
from typing import Any

CIRCULAR_MARKER = "[Circular]"


class _Missing:
    """Marker type for "no message was passed"."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _number_text(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _has_custom_text(value: object) -> bool:
    kind = type(value)
    return kind.__str__ is not object.__str__ or kind.__repr__ is not object.__repr__


def _safe_text(value: object) -> str:
    """Return ``str(value)``, or a placeholder naming the type when that raises."""
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return f"[Unserializable: {type(value).__name__}]"


def _attributes(value: object) -> dict[str, Any]:
    """Collect instance attributes from ``__dict__`` and every ``__slots__`` in the MRO."""
    found: dict[str, Any] = {}
    for kind in reversed(type(value).__mro__):
        slots = kind.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or not hasattr(value, name):
                continue
            found[name] = getattr(value, name)
    found.update(getattr(value, "__dict__", {}))
    return found


def _is_plain_data(value: object) -> bool:
    if isinstance(value, (Mapping, list, tuple, Set)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _sanitize(value: Any, active: tuple[int, ...]) -> Any:
    """Return a JSON-safe copy of ``value``; ``active`` holds container ids on the current path."""
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else _number_text(value)
    marker = id(value)
    if marker in active:
        return CIRCULAR_MARKER
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        path = active + (marker,)
        return {_safe_text(key): _sanitize(item, path) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        path = active + (marker,)
        return [_sanitize(item, path) for item in value]
    if isinstance(value, Set):
        path = active + (marker,)
        return [_sanitize(item, path) for item in sorted(value, key=_safe_text)]
    if _has_custom_text(value):
        return _safe_text(value)
    path = active + (marker,)
    return {str(key): _sanitize(item, path) for key, item in _attributes(value).items()}


def to_json(value: Any, *, pretty: bool = False) -> str:
    """Encode ``value`` as JSON, degrading gracefully for unsupported input.

    Compact output uses no whitespace (``{"a":1}``); pretty output indents by
    two spaces. Non-ASCII characters are kept as-is.

    Examples
    --------
    >>> to_json({"a": 1, "b": [True, None]})
    '{"a":1,"b":[true,null]}'
    >>> loop = {"name": "root"}
    >>> loop["self"] = loop
    >>> to_json(loop)
    '{"name":"root","self":"[Circular]"}'
    >>> to_json({"ratio": float("nan")})
    '{"ratio":"NaN"}'
    """

    payload = _sanitize(value, ())
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def serialize_message(message: Any) -> str:
    """Render a message payload as text.

    Order of precedence: ``None``/:data:`MISSING`, strings, booleans and
    numbers, plain data (JSON), objects with their own ``__str__`` or
    ``__repr__``, and finally a JSON rendering of the object's attributes
    (``__dict__`` and ``__slots__``). When an object's own ``__str__`` raises,
    the result is ``"[Unserializable: <TypeName>]"``.

    Examples
    --------
    >>> serialize_message(None), serialize_message(MISSING)
    ('null', 'undefined')
    >>> serialize_message(True), serialize_message(3), serialize_message(2.0)
    ('true', '3', '2')
    >>> serialize_message({"a": 1})
    '{"a":1}'
    >>> class NotFound:
    ...     def __str__(self) -> str:
    ...         return "404: Not Found"
    >>> serialize_message(NotFound())
    '404: Not Found'
    """

    if message is None:
        return "null"
    if message is MISSING:
        return "undefined"
    if isinstance(message, str):
        return message
    if isinstance(message, bool):
        return "true" if message else "false"
    if isinstance(message, (int, float)):
        return _number_text(message)
    if _is_plain_data(message):
        return to_json(message)
    if _has_custom_text(message):
        return _safe_text(message)
    return to_json(message)


__all__ = ["CIRCULAR_MARKER", "MISSING", "serialize_message", "to_json"]
