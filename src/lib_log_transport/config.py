"""Environment-driven configuration and ``.env`` support.

Purpose
-------
Let host applications and the CLI build a fully configured :class:`Logger`
from ``LOG_*`` environment variables, optionally seeded from the nearest
``.env`` file.

Contents
--------
* :class:`LoggerSettings` – resolved settings.
* :func:`load_settings` / :func:`create_logger` – environment → settings → logger.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – ``.env`` toggling.

Recognised variables
--------------------
``LOG_CONTEXT``, ``LOG_MIN_LEVEL``, ``LOG_COLOR``, ``LOG_FORCE_COLOR``,
``LOG_FORMAT`` (``text``, ``json``, ``json-pretty``), ``LOG_FILE``,
``LOG_FILE_APPEND``, ``LOG_FILE_MIN_LEVEL`` and ``LOG_USE_DOTENV``.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .adapters import ConsoleTransport, DefaultFormatter, FileTransport, JsonFormatter
from .application.ports import ClockPort, DiagnosticHook, FileSystemPort, FormatterPort
from .domain.levels import LogLevel, coerce_level
from .logger import Logger

DOTENV_ENV_VAR = "LOG_USE_DOTENV"
OUTPUT_FORMATS = ("text", "json", "json-pretty")
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOCK = threading.Lock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


@dataclass(frozen=True)
class LoggerSettings:
    """Resolved configuration for :func:`create_logger`."""

    context: str | None = None
    min_level: LogLevel = LogLevel.VERBOSE
    colorize: bool = True
    force_color: bool = False
    output_format: str = "text"
    file_path: str | None = None
    file_append: bool = True
    file_min_level: LogLevel = LogLevel.VERBOSE

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}; got {self.output_format!r}")


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    """Return the boolean value of ``environ[name]`` with fallback.

    Examples
    --------
    >>> _env_bool({}, "LOG_COLOR", default=True)
    True
    >>> _env_bool({"LOG_COLOR": "off"}, "LOG_COLOR", default=True)
    False
    """
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false, yes/no, on/off); got {value!r}")


def _env_str(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_level(environ: Mapping[str, str], name: str, default: LogLevel) -> LogLevel:
    value = _env_str(environ, name)
    return default if value is None else coerce_level(value)


def load_settings(environ: Mapping[str, str] | None = None) -> LoggerSettings:
    """Read :class:`LoggerSettings` from ``environ`` (defaults to ``os.environ``).

    Raises
    ------
    ValueError
        When a variable holds an unknown level, format, or boolean.

    Examples
    --------
    >>> settings = load_settings({"LOG_CONTEXT": "Api", "LOG_MIN_LEVEL": "warning", "LOG_FORMAT": "json"})
    >>> settings.context, settings.min_level.name, settings.output_format
    ('Api', 'WARNING', 'json')
    """

    env = os.environ if environ is None else environ
    output_format = (_env_str(env, "LOG_FORMAT") or "text").lower()
    return LoggerSettings(
        context=_env_str(env, "LOG_CONTEXT"),
        min_level=_env_level(env, "LOG_MIN_LEVEL", LogLevel.VERBOSE),
        colorize=_env_bool(env, "LOG_COLOR", True),
        force_color=_env_bool(env, "LOG_FORCE_COLOR", False),
        output_format=output_format,
        file_path=_env_str(env, "LOG_FILE"),
        file_append=_env_bool(env, "LOG_FILE_APPEND", True),
        file_min_level=_env_level(env, "LOG_FILE_MIN_LEVEL", LogLevel.VERBOSE),
    )


def formatter_for(output_format: str) -> FormatterPort:
    """Return the formatter matching an ``OUTPUT_FORMATS`` name."""
    if output_format == "json":
        return JsonFormatter()
    if output_format == "json-pretty":
        return JsonFormatter(pretty=True)
    if output_format == "text":
        return DefaultFormatter()
    raise ValueError(f"Unknown output format: {output_format!r}")


def create_logger(
    settings: LoggerSettings | None = None,
    *,
    clock: ClockPort | None = None,
    diagnostic: DiagnosticHook = None,
    file_system: FileSystemPort | None = None,
) -> Logger:
    """Compose a :class:`Logger` from ``settings`` (defaults to the environment).

    The logger gets one console transport honouring the colour and format
    settings, plus a file transport when ``file_path`` is set.
    """

    resolved = settings if settings is not None else load_settings()
    logger = Logger(
        context=resolved.context,
        min_level=resolved.min_level,
        clock=clock,
        diagnostic=diagnostic,
    )
    logger.set_transport(
        ConsoleTransport(
            colorize=resolved.colorize,
            force_color=resolved.force_color,
            formatter=formatter_for(resolved.output_format),
        )
    )
    if resolved.file_path:
        logger.add_transport(
            FileTransport(
                resolved.file_path,
                append=resolved.file_append,
                min_level=resolved.file_min_level,
                formatter=formatter_for(resolved.output_format),
                file_system=file_system,
            )
        )
    return logger


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested; an explicit flag wins.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` above the working directory once per process.

    Existing environment variables keep precedence over ``.env`` entries.
    Returns the loaded file or ``None`` when no file was found.
    """

    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        found = find_dotenv(usecwd=True)
        if found:
            load_dotenv(found, override=False)
            _DOTENV_PATH = Path(found).resolve()
        _DOTENV_LOADED = True
        return _DOTENV_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "LoggerSettings",
    "OUTPUT_FORMATS",
    "create_logger",
    "enable_dotenv",
    "formatter_for",
    "load_settings",
    "should_use_dotenv",
]
