# src/jplaunch/exceptions.py

"""
Custom exceptions for jplaunch.
"""


class JPLaunchError(Exception):
    """Base class for all jplaunch errors."""

    pass


class ConfigurationError(JPLaunchError):
    """Raised when the launch configuration is missing, malformed or invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        full_message = message
        if path:
            full_message += f" (Config: '{path}')"
        super().__init__(full_message)


class ResolutionError(JPLaunchError):
    """Raised when the test class-path elements cannot be obtained."""

    def __init__(self, message: str, details: Exception | None = None):
        self.details = details
        super().__init__(f"[Resolver] {message}")
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


# 🔼⚙️
