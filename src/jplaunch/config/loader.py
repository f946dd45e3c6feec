#
# config/loader.py
#
"""
Loads, validates and converts a jplaunch TOML configuration file.
"""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from jplaunch.config.models import (
    DEFAULT_TIMEOUT_SECONDS,
    GlobalConfig,
    JPLaunchConfig,
    LaunchConfiguration,
    WorldConfig,
)
from jplaunch.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

ENV_LOG_LEVEL = "JPLAUNCH_LOG_LEVEL"

_LAUNCH_KEYS = {
    "build_directory",
    "timeout",
    "reports_dir",
    "strict",
    "tags",
    "parameters",
    "test_module",
    "skip",
    "test_output_directory",
    "java_executable",
    "versions",
}
_WORLD_KEYS = {"classpath", "classpath_file", "test_source_directory"}


def _resolve_relative(base_dir: Path, value: str | None) -> Path | None:
    """Paths in the config file are relative to the file's own directory."""
    if value is None:
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def _check_unknown_keys(table: Mapping[str, Any], known: set[str], name: str, config_path: Path) -> None:
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigurationError(f"Unknown key(s) in [{name}]: {', '.join(unknown)}", str(config_path))


def _string_table(table: Any, name: str, config_path: Path) -> dict[str, str]:
    if not isinstance(table, Mapping):
        raise ConfigurationError(f"[{name}] must be a table", str(config_path))
    result: dict[str, str] = {}
    for key, value in table.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, int | float):
            value = str(value)
        if not isinstance(value, str):
            raise ConfigurationError(f"[{name}] value for '{key}' must be a string", str(config_path))
        result[key] = value
    return result


def _convert_launch(data: Mapping[str, Any], base_dir: Path, config_path: Path) -> LaunchConfiguration:
    _check_unknown_keys(data, _LAUNCH_KEYS, "launch", config_path)
    if "build_directory" not in data:
        raise ConfigurationError("[launch] requires 'build_directory'", str(config_path))

    tags = data.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise ConfigurationError("[launch] 'tags' must be a list of strings", str(config_path))

    return LaunchConfiguration(
        build_directory=_resolve_relative(base_dir, data["build_directory"]),
        timeout_seconds=data.get("timeout", DEFAULT_TIMEOUT_SECONDS),
        reports_path=_resolve_relative(base_dir, data.get("reports_dir")),
        strict=bool(data.get("strict", False)),
        tags=tags,
        parameters=_string_table(data.get("parameters", {}), "launch.parameters", config_path),
        test_module_name=data.get("test_module") or None,
        skip=bool(data.get("skip", False)),
        test_output_directory=_resolve_relative(base_dir, data.get("test_output_directory")),
        java_executable=_resolve_relative(base_dir, data.get("java_executable")),
        versions=_string_table(data.get("versions", {}), "launch.versions", config_path),
    )


def _convert_world(data: Mapping[str, Any], base_dir: Path, config_path: Path) -> WorldConfig:
    _check_unknown_keys(data, _WORLD_KEYS, "world", config_path)
    classpath = data.get("classpath", [])
    if not isinstance(classpath, list) or not all(isinstance(e, str) for e in classpath):
        raise ConfigurationError("[world] 'classpath' must be a list of strings", str(config_path))
    return WorldConfig(
        classpath=[str(_resolve_relative(base_dir, element)) for element in classpath],
        classpath_file=_resolve_relative(base_dir, data.get("classpath_file")),
        test_source_directory=_resolve_relative(base_dir, data.get("test_source_directory")),
    )


def _convert_global(data: Mapping[str, Any]) -> GlobalConfig:
    log_level = os.environ.get(ENV_LOG_LEVEL) or data.get("log_level", "INFO")
    return GlobalConfig(log_level=log_level)


def load_config(config_path: Path) -> JPLaunchConfig:
    """
    Loads the configuration file at `config_path`.

    Environment variables override global defaults found in the file.

    Raises:
        ConfigurationError: If the file cannot be read or fails validation.
    """
    config_path = Path(config_path)
    load_log = log.bind(config_path=str(config_path))
    load_log.debug("Loading configuration")

    try:
        with config_path.open("rb") as handle:
            raw = tomllib.load(handle)
    except FileNotFoundError as e:
        raise ConfigurationError("Configuration file not found", str(config_path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML: {e}", str(config_path)) from e
    except OSError as e:
        raise ConfigurationError(f"Unable to read configuration file: {e}", str(config_path)) from e

    if "launch" not in raw:
        raise ConfigurationError("Missing [launch] table", str(config_path))

    base_dir = config_path.resolve().parent
    try:
        config = JPLaunchConfig(
            launch=_convert_launch(raw["launch"], base_dir, config_path),
            world=_convert_world(raw.get("world", {}), base_dir, config_path),
            global_config=_convert_global(raw.get("global", {})),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration value: {e}", str(config_path)) from e

    load_log.debug(
        "Configuration loaded",
        build_directory=str(config.launch.build_directory),
        timeout=config.launch.timeout_seconds,
        module=config.launch.test_module_name,
    )
    return config


# 🔼⚙️
