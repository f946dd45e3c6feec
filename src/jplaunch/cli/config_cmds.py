# src/jplaunch/cli/config_cmds.py

from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from jplaunch.cli.utils import logging_options, setup_logging_from_context
from jplaunch.config import load_config
from jplaunch.exceptions import ConfigurationError
from jplaunch.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting and validating configuration."""
    pass


@config_cli.command(name="show")
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=Path("jplaunch.toml"),
    show_default=True,
    envvar="JPLAUNCH_CONF",
    help="Path to the jplaunch configuration file (env var JPLAUNCH_CONF).",
    show_envvar=True,
)
@logging_options
@click.pass_context
def show_config(ctx: click.Context, config_path: Path, **kwargs):
    """Load, validate, and display the configuration."""
    setup_logging_from_context(ctx, kwargs)
    log.info("Executing 'config show' command", config_path=str(config_path))

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e), exc_info=True)
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)

    click.echo(pretty_repr(config, expand_all=True))

    launch = config.launch
    if launch.test_output_directory is not None and not launch.test_output_directory.exists():
        log.warning(
            "Test output directory does not exist; launches will be skipped.",
            path=str(launch.test_output_directory),
        )

# 🔼⚙️
