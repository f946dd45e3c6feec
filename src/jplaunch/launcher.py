# src/jplaunch/launcher.py

"""
Runs the console launcher as a child process with a bounded wait.
"""

import asyncio
from collections.abc import Sequence
from pathlib import Path

from jplaunch.context import LaunchContext
from jplaunch.results import ExitCode, LaunchResult, ProcessError, TimedOut
from jplaunch.telemetry import StructLogger

OUT_FILE_NAME = "junit-console-launcher.out.txt"
ERR_FILE_NAME = "junit-console-launcher.err.txt"

DEFAULT_GRACE_PERIOD = 5.0


class ProcessLauncher:
    """
    Starts one child process per `launch` call.

    Standard output and error go to fixed files in the target directory,
    so at most one launch per target directory may run at a time.
    """

    def __init__(self, context: LaunchContext, grace_period: float = DEFAULT_GRACE_PERIOD) -> None:
        self._log = context.log.bind(component="launcher")
        self._grace_period = grace_period

    async def launch(
        self,
        command_line: Sequence[str],
        target: Path,
        timeout_seconds: float,
    ) -> LaunchResult:
        """
        Executes `command_line` and waits at most `timeout_seconds` for it.

        Never raises for process level failures; they are mapped onto the
        returned LaunchResult.
        """
        target = Path(target)
        run_log = self._log.bind(executable=command_line[0], target=str(target))
        run_log.debug(f"Starting process (timeout={timeout_seconds})...", emoji_key="launch")
        for token in command_line:
            run_log.debug(token)

        try:
            target.mkdir(parents=True, exist_ok=True)
            with (
                (target / OUT_FILE_NAME).open("wb") as stdout_file,
                (target / ERR_FILE_NAME).open("wb") as stderr_file,
            ):
                process = await asyncio.create_subprocess_exec(
                    *command_line,
                    stdout=stdout_file,
                    stderr=stderr_file,
                )
                run_log = run_log.bind(pid=process.pid)
                try:
                    exit_code = await asyncio.wait_for(process.wait(), timeout=timeout_seconds)
                except TimeoutError:
                    run_log.error(
                        f"Global timeout reached: {timeout_seconds} second(s)", emoji_key="time"
                    )
                    terminated = await self._terminate(process, run_log)
                    return TimedOut(timeout_seconds=timeout_seconds, terminated=terminated)
                except asyncio.CancelledError as e:
                    run_log.error("Waiting for process was interrupted")
                    await self._terminate(process, run_log)
                    return ProcessError(cause=e)
        except OSError as e:
            run_log.error("Executing process failed", error=str(e), exc_info=True)
            return ProcessError(cause=e)

        run_log.debug("Process finished", exit_code=exit_code)
        return ExitCode(exit_code)

    async def _terminate(self, process: asyncio.subprocess.Process, run_log: StructLogger) -> bool:
        """Sends SIGTERM, waits the grace period, then SIGKILL. Returns success."""
        if process.returncode is not None:
            return True
        try:
            process.terminate()
            try:
                await asyncio.wait_for(process.wait(), timeout=self._grace_period)
                run_log.info("Process terminated", exit_code=process.returncode)
                return True
            except TimeoutError:
                run_log.warning(
                    "Process still alive after grace period, killing it",
                    grace_period=self._grace_period,
                )
            process.kill()
            await asyncio.wait_for(process.wait(), timeout=self._grace_period)
            run_log.info("Process killed", exit_code=process.returncode)
            return True
        except ProcessLookupError:
            # Exited between the check and the signal.
            return True
        except (OSError, TimeoutError) as e:
            run_log.error("Failed to terminate process", error=str(e), emoji_key="fail")
            return False

# 🔼⚙️
