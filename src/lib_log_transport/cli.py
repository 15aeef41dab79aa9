"""Click command line interface.

Purpose
-------
Offer a small operator surface: print package metadata, emit a single log
entry configured from flags and ``LOG_*`` variables, and walk through the
library features with ``logdemo``.

Contents
--------
* :func:`cli` – command group with ``--use-dotenv`` and ``--traceback``.
* ``info``, ``emit``, ``logdemo`` sub-commands.
* :func:`main` – entry point delegating exit-code handling to
  :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

import dataclasses
import json
import os
from typing import Any, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters import ConsoleTransport, FileTransport, JsonFormatter
from .domain.levels import LEVEL_NAMES, LogLevel
from .logger import Logger

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICES = [name.lower() for name in LEVEL_NAMES.values()]


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _explicit(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return ``value`` when the user passed the flag, ``None`` for the default."""
    if ctx.get_parameter_source(name) is click.core.ParameterSource.DEFAULT:
        return None
    return value


def _parse_meta(pairs: Sequence[str]) -> dict[str, Any] | None:
    """Turn ``KEY=VALUE`` strings into metadata; values are JSON-decoded when possible.

    Examples
    --------
    >>> _parse_meta(["user=alice", "attempts=3"])
    {'user': 'alice', 'attempts': 3}
    >>> _parse_meta([]) is None
    True
    """
    if not pairs:
        return None
    meta: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--meta")
        try:
            meta[key] = json.loads(raw)
        except json.JSONDecodeError:
            meta[key] = raw
    return meta


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load the nearest .env before reading LOG_* variables (default: ${config_module.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Leveled logging with pluggable formatters and transports."""

    if _explicit(ctx, "traceback", traceback) is not None:
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback

    wanted = config_module.should_use_dotenv(
        explicit=_explicit(ctx, "use_dotenv", use_dotenv),
        env_value=os.getenv(config_module.DOTENV_ENV_VAR),
    )
    if wanted:
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("emit", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.option("--level", type=click.Choice(_LEVEL_CHOICES, case_sensitive=False), default="info", show_default=True)
@click.option("--context", default=None, help="Context label (default: $LOG_CONTEXT).")
@click.option("--meta", "meta_pairs", multiple=True, metavar="KEY=VALUE", help="Metadata entry; repeatable.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(config_module.OUTPUT_FORMATS),
    default=None,
    help="Output format (default: $LOG_FORMAT or text).",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable coloured console output.")
@click.option("--file", "file_path", type=click.Path(dir_okay=False), default=None, help="Also write to this file.")
@click.option("--overwrite", is_flag=True, default=False, help="Overwrite the file on the first write instead of appending.")
def cli_emit(
    message: str,
    level: str,
    context: str | None,
    meta_pairs: tuple[str, ...],
    output_format: str | None,
    no_color: bool,
    file_path: str | None,
    overwrite: bool,
) -> None:
    """Log MESSAGE once using settings from flags and LOG_* variables."""

    meta = _parse_meta(meta_pairs)
    settings = config_module.load_settings()
    overrides: dict[str, Any] = {}
    if context is not None:
        overrides["context"] = context
    if output_format is not None:
        overrides["output_format"] = output_format
    if no_color:
        overrides["colorize"] = False
    if file_path is not None:
        overrides["file_path"] = file_path
    if overwrite:
        overrides["file_append"] = False
    settings = dataclasses.replace(settings, **overrides)

    logger = config_module.create_logger(settings)
    logger.log(LogLevel.from_name(level), message, meta)


class _NotFoundError:
    """Error-like value with its own ``__str__``, used by the message-types section."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"Error[{self.code}]: {self.message}"


def _section(title: str) -> None:
    click.echo(f"\n=== {title} ===\n")


def run_logdemo(*, colorize: bool = True, file_path: str | None = None) -> None:
    """Walk through the main features, printing each section to the console."""

    def console() -> ConsoleTransport:
        return ConsoleTransport(colorize=colorize)

    _section("Basic usage")
    app = Logger(context="MyApp").set_transport(console())
    app.verbose("verbose diagnostics")
    app.info("application started")
    app.warning("memory usage is high")
    app.error("database connection failed")

    _section("Metadata")
    app.info("user logged in", {"userId": 12345, "username": "john_doe", "ip": "192.168.1.100"})
    app.error("API request failed", {"endpoint": "/api/users", "statusCode": 500, "duration": 1234})

    _section("Minimum level")
    production = Logger(context="Production", min_level=LogLevel.WARNING).set_transport(console())
    production.verbose("not shown")
    production.info("not shown either")
    production.warning("shown")
    production.error("shown as well")

    _section("Child loggers")
    server = Logger(context="Server").set_transport(console())
    server.info("server starting")
    server.child("Database").info("database connected")
    server.child("Auth").warning("suspicious login attempt detected")

    if file_path:
        _section("File transport")
        file_logger = Logger(context="FileExample").set_transport(console())
        file_logger.add_transport(FileTransport(file_path, min_level=LogLevel.INFO))
        file_logger.info("written to the console and to the file")
        file_logger.error("errors go to the file too")
        click.echo(f"(appended to {file_path})")

    _section("JSON formatter")
    json_transport = ConsoleTransport(colorize=False)
    json_transport.set_formatter(JsonFormatter(pretty=True))
    Logger(context="JsonExample").set_transport(json_transport).info(
        "structured output",
        {"requestId": "abc-123", "duration": 45},
    )

    _section("Message types")
    data = Logger(context="DataTypes").set_transport(console())
    data.info("plain string")
    data.info(12345)
    data.info(True)
    data.info({"name": "Test", "value": 100})
    data.error(_NotFoundError(404, "Not Found"))

    _section("Done")


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--no-color", is_flag=True, default=False, help="Disable coloured console output.")
@click.option("--file-path", type=click.Path(dir_okay=False), default=None, help="Include the file transport section.")
def cli_logdemo(no_color: bool, file_path: str | None) -> None:
    """Demonstrate levels, metadata, thresholds, child loggers, and formatters."""

    run_logdemo(colorize=not no_color, file_path=file_path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code, restoring traceback preferences afterwards."""

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "run_logdemo", "summary_info"]
