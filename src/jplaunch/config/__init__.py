#
# config/__init__.py
#
"""
Configuration handling sub-package for jplaunch.

Exports the loading function and core configuration models.
"""

from .loader import load_config
from .models import (
    ClasspathMode,
    ExecutionMode,
    GlobalConfig,
    JPLaunchConfig,
    LaunchConfiguration,
    ModuleMode,
    WorldConfig,
)

__all__ = [
    "ClasspathMode",
    "ExecutionMode",
    "GlobalConfig",
    "JPLaunchConfig",
    "LaunchConfiguration",
    "ModuleMode",
    "WorldConfig",
    "load_config",
]

# 🔼⚙️
