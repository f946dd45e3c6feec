# src/jplaunch/cli/main.py

"""
Main CLI entry point for jplaunch using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from jplaunch.cli.config_cmds import config_cli
from jplaunch.cli.launch_cmds import launch_cli
from jplaunch.cli.utils import (
    CTX_JSON_LOGS,
    CTX_LOG_FILE,
    CTX_LOG_LEVEL,
    logging_options,
    setup_logging_from_context,
)
from jplaunch.telemetry import StructLogger

try:
    __version__ = version("jplaunch")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="jplaunch")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    jplaunch: JUnit Platform console launcher starter.

    Runs the test suite of a Java build in a separate process.
    Configuration precedence: CLI options > Environment Variables > Config File > Defaults.
    """
    ctx.ensure_object(dict)

    ctx.obj[CTX_LOG_LEVEL] = log_level
    ctx.obj[CTX_LOG_FILE] = log_file
    ctx.obj[CTX_JSON_LOGS] = json_logs if json_logs is not None else False

    setup_logging_from_context(ctx, default_log_level="WARNING")
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(config_cli)
cli.add_command(launch_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
