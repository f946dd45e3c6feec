# src/jplaunch/versions.py

"""
Version detection for the JUnit artifacts found on the test class-path.
"""

import re
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import PurePath


class Version(Enum):
    """Well-known version keys with their built-in defaults."""

    JUNIT_PLATFORM = ("junit.platform.version", "1.3.1", "junit-platform-")
    JUNIT_JUPITER = ("junit.jupiter.version", "5.3.1", "junit-jupiter-")
    JUNIT_VINTAGE = ("junit.vintage.version", "5.3.1", "junit-vintage-")

    def __init__(self, key: str, default: str, artifact_prefix: str):
        self.key = key
        self.default = default
        self.artifact_prefix = artifact_prefix


# e.g. "junit-platform-console-standalone-1.3.1.jar" -> "1.3.1"
_JAR_VERSION_PATTERN = re.compile(r"-(\d+(?:\.\d+)*(?:[-.][A-Za-z0-9]+)*)\.jar$")


def detect_versions(elements: Iterable[str]) -> dict[str, str]:
    """
    Scans class-path element file names for JUnit artifact versions.

    The first matching element wins for each key.
    """
    detected: dict[str, str] = {}
    for element in elements:
        name = PurePath(element).name
        match = _JAR_VERSION_PATTERN.search(name)
        if not match:
            continue
        for version in Version:
            if version.key not in detected and name.startswith(version.artifact_prefix):
                detected[version.key] = match.group(1)
    return detected


def build_version_map(
    custom: Mapping[str, str] | None = None,
    detected: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Merges defaults, detected and custom versions; later sources win."""
    versions = {version.key: version.default for version in Version}
    versions.update(detected or {})
    versions.update(custom or {})
    return versions

# 🔼⚙️
