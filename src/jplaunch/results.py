# src/jplaunch/results.py

"""
Outcome of a single console launcher run.
"""

from typing import TypeAlias

from attrs import define, field

PROCESS_ERROR_CODE = -1
TIMED_OUT_CODE = -2


@define(frozen=True, slots=True)
class ExitCode:
    """The child terminated in time; its exit status is passed through."""
    value: int

    @property
    def code(self) -> int:
        return self.value


@define(frozen=True, slots=True)
class TimedOut:
    """
    The child did not terminate within the timeout.

    `terminated` reports whether the child was stopped afterwards.
    """
    timeout_seconds: float
    terminated: bool

    @property
    def code(self) -> int:
        return TIMED_OUT_CODE


@define(frozen=True, slots=True)
class ProcessError:
    """The child could not be started, or waiting for it was interrupted."""
    cause: BaseException = field(eq=False)

    @property
    def code(self) -> int:
        return PROCESS_ERROR_CODE


LaunchResult: TypeAlias = ExitCode | TimedOut | ProcessError

# 🔼⚙️
