#
# config/models.py
#
"""
Attrs-based data models for the jplaunch configuration structure.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeAlias

from attrs import define, field

DEFAULT_TIMEOUT_SECONDS = 300


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_positive_int(inst: Any, attr: Any, value: int) -> None:
    """Validator ensures integer is positive."""
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"Field '{attr.name}' must be positive integer, got {value}")


def _validate_string_mapping(inst: Any, attr: Any, value: Mapping[str, str]) -> None:
    for key, item in value.items():
        if not isinstance(key, str) or not isinstance(item, str):
            raise ValueError(
                f"Field '{attr.name}' must map strings to strings, got {key!r} = {item!r}"
            )


def _to_optional_path(value: str | Path | None) -> Path | None:
    if value is None or value == "":
        return None
    return Path(value)


# --- Execution modes ---
@define(frozen=True, slots=True)
class ClasspathMode:
    """Unnamed-module mode: everything on a single flat class-path."""
    path: str


@define(frozen=True, slots=True)
class ModuleMode:
    """Module-path mode, selecting the named test module."""
    path: str
    module_name: str


ExecutionMode: TypeAlias = ClasspathMode | ModuleMode


# --- Launch and Global Config Models ---
@define(frozen=True, slots=True)
class LaunchConfiguration:
    """
    Immutable description of a single console launcher run.

    Built once by the caller before launching; every component treats it
    as read-only.
    """
    build_directory: Path = field(converter=Path)
    timeout_seconds: int = field(default=DEFAULT_TIMEOUT_SECONDS, validator=_validate_positive_int)
    reports_path: Path | None = field(default=None, converter=_to_optional_path)
    strict: bool = field(default=False)
    tags: tuple[str, ...] = field(factory=tuple, converter=tuple)
    parameters: Mapping[str, str] = field(factory=dict, validator=_validate_string_mapping)
    test_module_name: str | None = field(default=None)

    # Plugin level switches
    skip: bool = field(default=False)
    test_output_directory: Path | None = field(default=None, converter=_to_optional_path)
    java_executable: Path | None = field(default=None, converter=_to_optional_path)
    versions: Mapping[str, str] = field(factory=dict, validator=_validate_string_mapping)

    def execution_mode(self, resolved_path: str) -> ExecutionMode:
        """Selects the execution mode for an already resolved path string."""
        if self.test_module_name:
            return ModuleMode(path=resolved_path, module_name=self.test_module_name)
        return ClasspathMode(path=resolved_path)


@define(frozen=True, slots=True)
class WorldConfig:
    """Where the class-path elements and the test module come from."""
    classpath: tuple[str, ...] = field(factory=tuple, converter=tuple)
    classpath_file: Path | None = field(default=None, converter=_to_optional_path)
    test_source_directory: Path | None = field(default=None, converter=_to_optional_path)


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for jplaunch."""
    log_level: str = field(default="INFO", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@define(frozen=True, slots=True)
class JPLaunchConfig:
    """Root configuration object for the jplaunch application."""
    launch: LaunchConfiguration = field()
    world: WorldConfig = field(factory=WorldConfig)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})


# 🔼⚙️
