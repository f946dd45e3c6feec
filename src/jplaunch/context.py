# src/jplaunch/context.py

"""
Explicit per-run context shared by the launcher components.
"""

from collections.abc import Mapping

import structlog
from attrs import define, field

from jplaunch.versions import Version, build_version_map


@define(frozen=True, slots=True)
class LaunchContext:
    """
    Holds the logger and the version lookup map for one launch.

    Constructed once by the caller and passed into every component that
    needs to log or look up versions.
    """

    log: structlog.stdlib.BoundLogger = field(factory=lambda: structlog.get_logger("jplaunch"))
    versions: Mapping[str, str] = field(factory=build_version_map)

    def version(self, version: Version) -> str:
        return self.versions.get(version.key, version.default)

    def with_versions(self, versions: Mapping[str, str]) -> "LaunchContext":
        return LaunchContext(log=self.log, versions=dict(versions))

# 🔼⚙️
