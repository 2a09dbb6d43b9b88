"""
FFMPEG command execution module.

Provides an asyncio subprocess executor that tears down the running process
when the batch cancellation event fires.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from ffmpeg_batch.exceptions import ConversionError

logger = logging.getLogger(__name__)

# Exit code reported for a process killed by cancellation
CANCELLED_EXIT_CODE = -15

# Number of trailing stderr lines carried into an error message
STDERR_TAIL_LINES = 3


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class ExecutionResult:
    """Result of an ffmpeg execution."""
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.exit_code == 0 and not self.cancelled


def stderr_tail(stderr: str, lines: int = STDERR_TAIL_LINES) -> str:
    """Return the last non-blank stderr lines joined with ' | '."""
    tail = [line.strip() for line in stderr.splitlines() if line.strip()]
    return " | ".join(tail[-lines:])


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------

class FFMPEGExecutor:
    """Runs one ffmpeg command, killing it if the cancel event is set.

    With ``quiet`` the tool's stdout and stderr are captured instead of
    being inherited from the parent process.
    """

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self._process: Optional[asyncio.subprocess.Process] = None

    def kill(self) -> None:
        """Kill the running process, if any."""
        proc = self._process
        if proc is None or proc.returncode is not None:
            return
        try:
            proc.kill()
        except ProcessLookupError:
            pass

    async def run(
        self,
        command: List[str],
        cancel: Optional[asyncio.Event] = None,
    ) -> ExecutionResult:
        """Run an ffmpeg command.

        Args:
            command: Command as a list of strings (e.g. ["ffmpeg", "-i", ...])
            cancel: Event that, once set, kills the process.

        Returns:
            ExecutionResult with captured output (quiet mode only) and exit code.

        Raises:
            ValueError: If command is empty.
            OSError: If the process cannot be spawned.
        """
        if not command:
            raise ValueError("Command list must not be empty")

        if cancel is not None and cancel.is_set():
            return ExecutionResult(exit_code=CANCELLED_EXIT_CODE, cancelled=True)

        stream = asyncio.subprocess.PIPE if self.quiet else None
        self._process = await asyncio.create_subprocess_exec(
            *command,
            stdout=stream,
            stderr=stream,
        )

        communicate = asyncio.ensure_future(self._process.communicate())
        waiters = {communicate}
        cancel_waiter = None
        if cancel is not None:
            cancel_waiter = asyncio.ensure_future(cancel.wait())
            waiters.add(cancel_waiter)

        cancelled = False
        try:
            done, _ = await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
            if communicate not in done:
                cancelled = True
                self.kill()
            stdout, stderr = await communicate
        except asyncio.CancelledError:
            self.kill()
            communicate.cancel()
            # Reap the child before the loop goes away
            await asyncio.shield(self._process.wait())
            raise
        finally:
            if cancel_waiter is not None:
                cancel_waiter.cancel()

        exit_code = self._process.returncode
        return ExecutionResult(
            stdout=stdout.decode(errors="replace") if stdout else "",
            stderr=stderr.decode(errors="replace") if stderr else "",
            exit_code=CANCELLED_EXIT_CODE if cancelled else exit_code,
            cancelled=cancelled,
        )


async def run_command(
    command: List[str],
    cancel: Optional[asyncio.Event] = None,
    quiet: bool = False,
    label: Optional[str] = None,
) -> ExecutionResult:
    """Run a command and raise on any failure.

    Raises:
        ConversionError: On spawn failure, non-zero exit, or cancellation.
            The message starts with ``label`` (defaults to the binary name).
    """
    label = label or command[0]
    executor = FFMPEGExecutor(quiet=quiet)
    try:
        result = await executor.run(command, cancel=cancel)
    except OSError as e:
        raise ConversionError(f"{label}: {e}") from e

    if result.cancelled:
        raise ConversionError(f"{label}: interrupted")
    if result.exit_code != 0:
        msg = f"{label}: exit status {result.exit_code}"
        tail = stderr_tail(result.stderr)
        if tail:
            msg = f"{msg}: {tail}"
        raise ConversionError(msg)
    return result
