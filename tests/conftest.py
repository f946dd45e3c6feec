from pathlib import Path

import pytest
import structlog

from jplaunch.config import LaunchConfiguration
from jplaunch.context import LaunchContext


@pytest.fixture
def context() -> LaunchContext:
    return LaunchContext(log=structlog.get_logger("jplaunch.tests"))


@pytest.fixture
def fake_java(tmp_path: Path) -> Path:
    """A plain file standing in for the Java interpreter path."""
    java = tmp_path / "jdk" / "bin" / "java"
    java.parent.mkdir(parents=True)
    java.write_text("")
    return java


@pytest.fixture
def classpath_dirs(tmp_path: Path) -> list[Path]:
    """Existing test-classes, classes and a dependency jar, in class-path order."""
    test_classes = tmp_path / "target" / "test-classes"
    classes = tmp_path / "target" / "classes"
    test_classes.mkdir(parents=True)
    classes.mkdir(parents=True)
    jar = tmp_path / "repo" / "junit-platform-console-standalone-1.3.2.jar"
    jar.parent.mkdir()
    jar.write_bytes(b"PK")
    return [test_classes, classes, jar]


@pytest.fixture
def launch_config(tmp_path: Path, fake_java: Path) -> LaunchConfiguration:
    return LaunchConfiguration(
        build_directory=tmp_path / "target",
        timeout_seconds=30,
        java_executable=fake_java,
    )

