#
# src/jplaunch/__init__.py
#
"""
jplaunch: launches the JUnit Platform console launcher from a build's test phase.
"""
from jplaunch.arguments import ArgumentBuilder
from jplaunch.context import LaunchContext
from jplaunch.launcher import ProcessLauncher
from jplaunch.resolver import PathResolver
from jplaunch.results import ExitCode, LaunchResult, ProcessError, TimedOut
from jplaunch.starter import ConsoleStarter

__all__ = [
    "ArgumentBuilder",
    "ConsoleStarter",
    "ExitCode",
    "LaunchContext",
    "LaunchResult",
    "PathResolver",
    "ProcessError",
    "ProcessLauncher",
    "TimedOut",
]

# 🔼⚙️
