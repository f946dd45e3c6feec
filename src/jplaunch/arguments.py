# src/jplaunch/arguments.py

"""
Synthesizes the console launcher command line.

See https://junit.org/junit5/docs/current/user-guide/#running-tests-console-launcher-options
"""

import os
import shutil
from pathlib import Path
from typing import assert_never

from jplaunch.config.models import ClasspathMode, LaunchConfiguration, ModuleMode
from jplaunch.context import LaunchContext
from jplaunch.exceptions import ConfigurationError

CONSOLE_LAUNCHER_CLASS = "org.junit.platform.console.ConsoleLauncher"
CONSOLE_LAUNCHER_MODULE = "org.junit.platform.console"
ADD_MODULES = "ALL-MODULE-PATH,ALL-DEFAULT"

JAVA_EXECUTABLE_NAME = "java.exe" if os.name == "nt" else "java"


def find_java_executable(configured: Path | None = None) -> Path:
    """
    Locates the Java interpreter as an absolute, normalized path.

    Lookup order: explicit configuration, `$JAVA_HOME/bin`, then `PATH`.
    """
    if configured is not None:
        return Path(os.path.abspath(configured))

    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        candidate = Path(java_home) / "bin" / JAVA_EXECUTABLE_NAME
        if candidate.is_file():
            return Path(os.path.abspath(candidate))

    found = shutil.which("java")
    if found:
        return Path(os.path.abspath(found))

    raise ConfigurationError(
        "No Java executable found: set 'java_executable', JAVA_HOME or add 'java' to PATH"
    )


def create_config_argument(key: str, value: str) -> str:
    # Embedded double quotes are not escaped.
    return f'--config="{key}"="{value}"'


class ArgumentBuilder:
    """Builds the ordered argument vector for one console launcher run."""

    def __init__(self, context: LaunchContext) -> None:
        self._log = context.log.bind(component="arguments")

    def build(self, config: LaunchConfiguration, resolved_path: str) -> list[str]:
        """
        Returns the command line for `config` using the already resolved path.

        Building twice from the same inputs yields identical token lists.
        """
        command = [str(find_java_executable(config.java_executable))]

        mode = config.execution_mode(resolved_path)
        match mode:
            case ClasspathMode(path=path):
                command += ["--class-path", path, CONSOLE_LAUNCHER_CLASS]
            case ModuleMode(path=path):
                command += [
                    "--module-path",
                    path,
                    "--add-modules",
                    ADD_MODULES,
                    "--module",
                    CONSOLE_LAUNCHER_MODULE,
                ]
            case _:
                assert_never(mode)

        # Console launcher options; the child never runs on a terminal.
        command.append("--disable-ansi-colors")
        if config.strict:
            command.append("--fail-if-no-tests")
        command.extend(config.tags)
        command.extend(create_config_argument(key, value) for key, value in config.parameters.items())
        if config.reports_path is not None:
            command += ["--reports-dir", str(config.reports_path)]

        match mode:
            case ClasspathMode():
                command.append("--scan-class-path")
            case ModuleMode(module_name=module_name):
                command += ["--select-module", module_name]
            case _:
                assert_never(mode)

        self._log.debug("Command line built", mode=type(mode).__name__, tokens=len(command))
        return command

# 🔼⚙️
