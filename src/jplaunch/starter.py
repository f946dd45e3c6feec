# src/jplaunch/starter.py

"""
Glue between the world, the command line synthesis and the launcher.
"""

import attrs

from jplaunch.arguments import ArgumentBuilder
from jplaunch.config.models import LaunchConfiguration
from jplaunch.context import LaunchContext
from jplaunch.launcher import ProcessLauncher
from jplaunch.resolver import PathResolver
from jplaunch.versions import Version, build_version_map, detect_versions
from jplaunch.world import ProjectWorld


class ConsoleStarter:
    """
    Runs the JUnit Platform console launcher for one configuration.
    """

    def __init__(
        self,
        configuration: LaunchConfiguration,
        world: ProjectWorld,
        context: LaunchContext | None = None,
        launcher: ProcessLauncher | None = None,
    ) -> None:
        self._configuration = configuration
        self._world = world
        self._context = context or LaunchContext()
        self._launcher = launcher
        self._log = self._context.log.bind(component="starter")

    async def run(self) -> int:
        """
        Launches the tests and returns the integer result.

        Non-negative values are the child's exit code, -1 is a launcher
        failure and -2 a timeout.

        Raises:
            ResolutionError: If the class-path elements cannot be obtained.
        """
        config = self._configuration
        self._log.debug("Executing console starter...")

        if config.skip:
            self._log.info("JUnit Platform execution skipped.")
            return 0

        if config.test_output_directory is not None and not config.test_output_directory.exists():
            self._log.info(
                "Test output directory does not exist.",
                path=str(config.test_output_directory),
                emoji_key="path",
            )
            return 0

        if config.test_module_name is None:
            module_name = self._world.test_module_name()
            if module_name:
                config = attrs.evolve(config, test_module_name=module_name)

        elements = self._world.classpath_elements()
        context = self._context.with_versions(
            build_version_map(custom=config.versions, detected=detect_versions(elements))
        )
        self._log.info(f"Launching JUnit Platform {context.version(Version.JUNIT_PLATFORM)}...")

        resolved_path = PathResolver(context).resolve(elements)
        command_line = ArgumentBuilder(context).build(config, resolved_path)

        launcher = self._launcher or ProcessLauncher(context)
        result = await launcher.launch(command_line, config.build_directory, config.timeout_seconds)
        self._log.debug("Console launcher returned", result=repr(result), code=result.code)
        return result.code

# 🔼⚙️
