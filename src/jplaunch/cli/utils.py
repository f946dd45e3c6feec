# src/jplaunch/cli/utils.py

"""
Logging options shared by the jplaunch commands.
"""

import logging
from collections.abc import Callable
from typing import Any

import click
import structlog

from jplaunch.telemetry.logger import setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)

# Keys of the per-invocation logging settings stored on the click context.
CTX_LOG_LEVEL = "LOG_LEVEL"
CTX_LOG_FILE = "LOG_FILE"
CTX_JSON_LOGS = "JSON_LOGS"

_LOGGING_OPTIONS: tuple[Callable[[Any], Any], ...] = (
    click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="JPLAUNCH_JSON_LOGS",
        help="Output console logs as JSON.",
    ),
    click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="JPLAUNCH_LOG_FILE",
        help="Also write JSON logs to this file.",
    ),
    click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="JPLAUNCH_LOG_LEVEL",
        help="Set the logging level (overrides the config file).",
    ),
)


def logging_options(f):
    """Adds --log-level, --log-file and --json-logs to a command."""
    for option in _LOGGING_OPTIONS:
        f = option(f)
    return f


def _numeric_level(name: str) -> int | None:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def setup_logging_from_context(
    ctx: click.Context,
    options: dict[str, Any] | None = None,
    config_log_level: str | None = None,
    default_log_level: str = "INFO",
) -> None:
    """
    Configures logging for a command from its options and the group's context.

    Level precedence: command option > group option > config file > default.
    """
    options = options or {}
    group = ctx.obj or {}

    level_name = next(
        (
            name
            for name in (options.get("log_level"), group.get(CTX_LOG_LEVEL), config_log_level)
            if name and _numeric_level(name) is not None
        ),
        default_log_level,
    )
    log_file = options.get("log_file") or group.get(CTX_LOG_FILE)
    json_logs = options.get("json_logs")
    if json_logs is None:
        json_logs = bool(group.get(CTX_JSON_LOGS, False))

    setup_logging(
        level=_numeric_level(level_name) or logging.INFO,
        json_logs=json_logs,
        log_file=log_file,
    )
    log.debug(
        "CLI logging configured",
        level=level_name,
        file=log_file or "console",
        json=json_logs,
        command=ctx.info_name,
    )

# ⚙️🛠️
