# src/jplaunch/cli/launch_cmds.py

import asyncio
import sys
from pathlib import Path

import attrs
import click
import structlog

from jplaunch.cli.utils import logging_options, setup_logging_from_context
from jplaunch.config import JPLaunchConfig, load_config
from jplaunch.context import LaunchContext
from jplaunch.exceptions import ConfigurationError, ResolutionError
from jplaunch.starter import ConsoleStarter
from jplaunch.telemetry import StructLogger
from jplaunch.world import StaticWorld

log: StructLogger = structlog.get_logger("cli.launch")

EXIT_TESTS_FAILED = 1
EXIT_USAGE_ERROR = 2


def _apply_overrides(config: JPLaunchConfig, overrides: dict) -> JPLaunchConfig:
    """Returns `config` with the non-empty CLI overrides applied to [launch]."""
    changes = {key: value for key, value in overrides.items() if value not in (None, ())}
    if not changes:
        return config
    return attrs.evolve(config, launch=attrs.evolve(config.launch, **changes))


def _run_starter(starter: ConsoleStarter) -> int:
    """
    Runs the starter in a fresh event loop and returns its integer result.
    """
    try:
        return asyncio.run(starter.run())
    except KeyboardInterrupt:
        log.warning("Launch interrupted by KeyboardInterrupt (CTRL-C).")
        return 130


@click.command(name="launch")
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
@click.option(
    "--build-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Build output directory receiving the console launcher output files.",
)
@click.option("--timeout", type=click.IntRange(min=1), default=None, help="Global timeout in seconds.")
@click.option("--strict/--no-strict", default=None, help="Fail if no tests are found.")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag expression, repeatable.")
@click.option(
    "--reports-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the XML test reports.",
)
@click.option("--module", "test_module_name", default=None, help="Name of the test module.")
@click.option("--skip", is_flag=True, default=None, help="Skip the test execution.")
@logging_options
@click.pass_context
def launch_cli(
    ctx: click.Context,
    config_path: Path,
    build_dir: Path | None,
    timeout: int | None,
    strict: bool | None,
    tags: tuple[str, ...],
    reports_dir: Path | None,
    test_module_name: str | None,
    skip: bool | None,
    **kwargs,
):
    """Run the JUnit Platform console launcher in a separate process."""
    try:
        config = load_config(config_path)
        config = _apply_overrides(
            config,
            {
                "build_directory": build_dir,
                "timeout_seconds": timeout,
                "strict": strict,
                "tags": tags,
                "reports_path": reports_dir,
                "test_module_name": test_module_name,
                "skip": skip,
            },
        )
    except (ConfigurationError, ValueError) as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(EXIT_USAGE_ERROR)

    setup_logging_from_context(ctx, kwargs, config_log_level=config.global_config.log_level)
    log.info("Executing 'launch' command", config_path=str(config_path))

    context = LaunchContext(log=structlog.get_logger("jplaunch"))
    starter = ConsoleStarter(
        configuration=config.launch,
        world=StaticWorld(config.world, context),
        context=context,
    )

    try:
        code = _run_starter(starter)
    except (ConfigurationError, ResolutionError) as e:
        log.error("Launch aborted before the process was started", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_USAGE_ERROR)

    click.echo(f"Console launcher finished with code {code}")
    if code != 0:
        sys.exit(code if code > 0 else EXIT_TESTS_FAILED)

# 🔼⚙️
