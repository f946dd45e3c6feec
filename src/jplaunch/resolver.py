# src/jplaunch/resolver.py

"""
Turns raw test class-path elements into a platform path string.
"""

import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeAlias

from jplaunch.context import LaunchContext
from jplaunch.exceptions import ResolutionError

ClasspathSource: TypeAlias = Iterable[str] | Callable[[], Iterable[str]]


class PathResolver:
    """
    Resolves class-path elements into absolute, existing, de-duplicated paths.

    Nothing is cached: the class-path may change between two test phases
    running in the same process.
    """

    def __init__(self, context: LaunchContext) -> None:
        self._log = context.log.bind(component="resolver")

    def entries(self, raw_elements: ClasspathSource) -> list[Path]:
        """Returns the surviving entries in the order they were supplied."""
        try:
            elements = raw_elements() if callable(raw_elements) else raw_elements
            elements = list(elements)
        except OSError as e:
            raise ResolutionError("Resolving test class-path elements failed", details=e) from e

        seen: set[Path] = set()
        entries: list[Path] = []
        for element in elements:
            if not element or not element.strip():
                continue
            try:
                path = Path(element).resolve()
                exists = path.exists()
            except (OSError, RuntimeError):
                self._log.debug(f"   X {element} // unresolvable")
                continue
            if not exists:
                self._log.debug(f"   X {path} // doesn't exist")
                continue
            if path in seen:
                self._log.debug(f"   = {path} // duplicate")
                continue
            self._log.debug(f"  -> {path}")
            seen.add(path)
            entries.append(path)
        return entries

    def resolve(self, raw_elements: ClasspathSource) -> str:
        """Joins the surviving entries with the platform path separator."""
        return os.pathsep.join(str(path) for path in self.entries(raw_elements))

# 🔼⚙️
