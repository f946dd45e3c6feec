# src/jplaunch/world.py

"""
Supplies the test class-path elements and the optional test module.
"""

import os
import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from jplaunch.config.models import WorldConfig
from jplaunch.context import LaunchContext
from jplaunch.exceptions import ResolutionError

MODULE_DESCRIPTOR = "module-info.java"

_COMMENT_PATTERN = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)
_MODULE_PATTERN = re.compile(r"^\s*(?:@\S+\s+)*(?:open\s+)?module\s+([\w.]+)\s*\{", re.MULTILINE)


@runtime_checkable
class ProjectWorld(Protocol):
    """
    Protocol for the build tool side of a launch.
    """

    def classpath_elements(self) -> list[str]:
        """
        Returns the raw test class-path elements in resolution order.

        Raises:
            ResolutionError: If the elements are not available yet.
        """
        ...

    def test_module_name(self) -> str | None:
        """Returns the name of the test module, if the tests are modular."""
        ...


def parse_module_name(source: str) -> str | None:
    """Extracts the module name from the text of a module descriptor."""
    match = _MODULE_PATTERN.search(_COMMENT_PATTERN.sub("", source))
    return match.group(1) if match else None


class StaticWorld(ProjectWorld):
    """
    A world described up front by the configuration.

    Elements come from the inline list followed by the contents of the
    class-path file, which holds entries separated by the platform path
    separator and/or newlines.
    """

    def __init__(
        self,
        config: WorldConfig,
        context: LaunchContext,
        test_module_name: str | None = None,
    ) -> None:
        self._config = config
        self._explicit_module = test_module_name
        self._log = context.log.bind(component="world")

    def classpath_elements(self) -> list[str]:
        elements = list(self._config.classpath)
        classpath_file = self._config.classpath_file
        if classpath_file is not None:
            try:
                text = classpath_file.read_text(encoding="utf-8")
            except OSError as e:
                raise ResolutionError(
                    f"Reading class-path file '{classpath_file}' failed", details=e
                ) from e
            base_dir = classpath_file.parent
            for line in text.splitlines():
                for element in line.split(os.pathsep):
                    element = element.strip()
                    if element:
                        path = Path(element)
                        elements.append(str(path if path.is_absolute() else base_dir / path))
        self._log.debug("Class-path elements collected", count=len(elements))
        return elements

    def test_module_name(self) -> str | None:
        if self._explicit_module:
            return self._explicit_module
        source_dir = self._config.test_source_directory
        if source_dir is None:
            return None
        descriptor = source_dir / MODULE_DESCRIPTOR
        if not descriptor.is_file():
            self._log.debug("No test module descriptor found", path=str(descriptor))
            return None
        name = parse_module_name(descriptor.read_text(encoding="utf-8"))
        self._log.debug("Test module descriptor parsed", path=str(descriptor), module=name)
        return name

# 🔼⚙️
