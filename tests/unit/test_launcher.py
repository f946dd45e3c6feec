#
# tests/unit/test_launcher.py
#
"""
Tests for the process launcher, using real child processes.
"""

import asyncio
import sys
import time
from pathlib import Path

import pytest

from jplaunch.context import LaunchContext
from jplaunch.launcher import ERR_FILE_NAME, OUT_FILE_NAME, ProcessLauncher
from jplaunch.results import ExitCode, ProcessError, TimedOut


def python_command(code: str) -> list[str]:
    return [sys.executable, "-c", code]


@pytest.fixture
def launcher(context: LaunchContext) -> ProcessLauncher:
    return ProcessLauncher(context, grace_period=2.0)


@pytest.mark.asyncio
class TestProcessLauncher:
    """Test ProcessLauncher functionality."""

    async def test_exit_code_passthrough(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        result = await launcher.launch(python_command("import sys; sys.exit(7)"), tmp_path, 30)

        assert result == ExitCode(7)
        assert result.code == 7

    async def test_success(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        result = await launcher.launch(python_command("pass"), tmp_path, 30)
        assert result.code == 0

    async def test_streams_are_redirected_to_files(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        code = "import sys; print('hello out'); print('hello err', file=sys.stderr)"

        await launcher.launch(python_command(code), tmp_path, 30)

        assert (tmp_path / OUT_FILE_NAME).read_text().strip() == "hello out"
        assert (tmp_path / ERR_FILE_NAME).read_text().strip() == "hello err"

    async def test_output_files_are_truncated(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        (tmp_path / OUT_FILE_NAME).write_text("stale output from an earlier run\n" * 10)
        (tmp_path / ERR_FILE_NAME).write_text("stale errors\n")

        await launcher.launch(python_command("print('fresh')"), tmp_path, 30)

        assert (tmp_path / OUT_FILE_NAME).read_text().strip() == "fresh"
        assert (tmp_path / ERR_FILE_NAME).read_text() == ""

    async def test_target_directory_is_created(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        target = tmp_path / "build" / "output"

        result = await launcher.launch(python_command("pass"), target, 30)

        assert result.code == 0
        assert (target / OUT_FILE_NAME).exists()
        assert (target / ERR_FILE_NAME).exists()

    async def test_missing_executable_is_process_error(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        result = await launcher.launch([str(tmp_path / "no-such-java")], tmp_path, 30)

        assert isinstance(result, ProcessError)
        assert isinstance(result.cause, FileNotFoundError)
        assert result.code == -1

    async def test_timeout_terminates_child(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        started = time.monotonic()

        result = await launcher.launch(python_command("import time; time.sleep(10)"), tmp_path, 1)

        elapsed = time.monotonic() - started
        assert isinstance(result, TimedOut)
        assert result.terminated is True
        assert result.code == -2
        assert elapsed < 8

    @pytest.mark.slow
    @pytest.mark.skipif(sys.platform == "win32", reason="SIGTERM cannot be ignored on Windows")
    async def test_timeout_kills_child_ignoring_terminate(self, context: LaunchContext, tmp_path: Path) -> None:
        launcher = ProcessLauncher(context, grace_period=0.5)
        code = (
            "import signal, time\n"
            "signal.signal(signal.SIGTERM, signal.SIG_IGN)\n"
            "time.sleep(30)\n"
        )
        started = time.monotonic()

        result = await launcher.launch(python_command(code), tmp_path, 1)

        assert isinstance(result, TimedOut)
        assert result.terminated is True
        assert time.monotonic() - started < 15

    async def test_cancelled_wait_is_process_error(self, launcher: ProcessLauncher, tmp_path: Path) -> None:
        task = asyncio.create_task(
            launcher.launch(python_command("import time; time.sleep(10)"), tmp_path, 30)
        )
        await asyncio.sleep(1.0)
        task.cancel()

        result = await task

        assert isinstance(result, ProcessError)
        assert isinstance(result.cause, asyncio.CancelledError)
        assert result.code == -1
