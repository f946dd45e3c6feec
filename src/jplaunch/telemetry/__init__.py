#
# src/jplaunch/telemetry/__init__.py
#
"""
Logging setup for jplaunch.
"""
from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️
