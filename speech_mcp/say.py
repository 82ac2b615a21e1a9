"""
Process invocation for the macOS `say` command.

The SpeechBackend protocol is the seam between the MCP tools and the
operating system: SayBackend runs the real command, and tests inject a fake.
"""

import asyncio
import logging
import os
import shlex
import shutil
import signal
from dataclasses import dataclass
from typing import List, Optional, Protocol

from . import config
from .models import CommandResult, SpeakRequest

logger = logging.getLogger("speech-mcp")


@dataclass(frozen=True)
class CommandAction:
    """How an invocation is named in user-facing messages.

    Attributes:
        subject: Used as "<subject> cancelled: <reason>".
        verb_phrase: Used as "Failed to <verb_phrase>: <error>".
    """

    subject: str
    verb_phrase: str


SPEAK_ACTION = CommandAction("Speech synthesis", "execute speech synthesis")
LIST_VOICES_ACTION = CommandAction("Voice listing", "retrieve voice list")


def format_failure(action: CommandAction, error: str, output: str = "") -> str:
    """Build the message for a command that failed for reasons other than cancellation."""
    message = f"Failed to {action.verb_phrase}: {error}"
    if output:
        message = f"{message}\nOutput: {output}"

    if "permission denied" in error:
        message += config.PERMISSION_GUIDANCE

    return message


def _describe_start_error(path: str, error: OSError) -> str:
    reason = error.strerror or str(error)
    return f"{path}: {reason.lower()}"


def _describe_exit(returncode: int) -> str:
    if returncode < 0:
        name = signal.strsignal(-returncode) or f"signal {-returncode}"
        return f"signal: {name.lower()}"
    return f"exit status {returncode}"


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill a child process and reap it."""
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        pass
    await process.wait()


async def run_command(
    argv: List[str],
    *,
    action: CommandAction,
    timeout: Optional[float] = None,
) -> CommandResult:
    """Run a command and capture its combined output.

    Args:
        argv: Executable followed by its arguments, passed without a shell.
        action: Names the operation in failure messages.
        timeout: Deadline in seconds. None or <= 0 means no deadline.

    Returns:
        CommandResult. When the deadline expires the child is killed and the
        result is marked cancelled, whatever the child's exit status was.

    Raises:
        asyncio.CancelledError: If the calling task is cancelled. The child
            is killed and reaped first.
    """
    deadline = timeout if timeout and timeout > 0 else None
    logger.debug(f"Running: {shlex.join(argv)}")

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
    except OSError as e:
        error = _describe_start_error(argv[0], e)
        logger.warning(f"{action.subject} could not start: {error}")
        return CommandResult(success=False, error=format_failure(action, error))

    try:
        raw_output, _ = await asyncio.wait_for(process.communicate(), timeout=deadline)
    except asyncio.TimeoutError:
        await _kill(process)
        logger.warning(f"{action.subject} exceeded its {deadline}s deadline")
        return CommandResult(
            success=False,
            cancelled=True,
            error=f"{action.subject} cancelled: deadline exceeded",
        )
    except asyncio.CancelledError:
        await _kill(process)
        logger.info(f"{action.subject} cancelled by caller")
        raise

    output = raw_output.decode("utf-8", errors="replace") if raw_output else ""

    if process.returncode != 0:
        error = _describe_exit(process.returncode)
        logger.warning(f"{action.subject} failed: {error}")
        return CommandResult(
            success=False,
            output=output,
            error=format_failure(action, error, output),
        )

    return CommandResult(success=True, output=output)


class SpeechBackend(Protocol):
    """Interface to a speech engine.

    The default implementation shells out to say, but a fake can be
    injected for testing without touching a real subprocess.
    """

    async def synthesize(self, request: SpeakRequest) -> CommandResult:
        """Speak a validated request aloud."""
        ...

    async def list_voices(self) -> CommandResult:
        """Return the raw voice catalog in CommandResult.output."""
        ...


class SayBackend:
    """SpeechBackend that runs the say command."""

    def __init__(
        self,
        command: Optional[str] = None,
        speak_timeout: Optional[float] = None,
        list_timeout: Optional[float] = None,
    ):
        self.command = command or config.SAY_COMMAND
        self.speak_timeout = speak_timeout if speak_timeout is not None else config.SPEAK_TIMEOUT
        self.list_timeout = list_timeout if list_timeout is not None else config.LIST_VOICES_TIMEOUT

    async def synthesize(self, request: SpeakRequest) -> CommandResult:
        args = request.to_args()
        return await run_command(
            [self.command, *args],
            action=SPEAK_ACTION,
            timeout=self.speak_timeout,
        )

    async def list_voices(self) -> CommandResult:
        return await run_command(
            [self.command, "-v", "?"],
            action=LIST_VOICES_ACTION,
            timeout=self.list_timeout,
        )


# Global backend instance
_backend: Optional[SpeechBackend] = None


def get_backend() -> SpeechBackend:
    """Get or create the backend used by the MCP tools."""
    global _backend
    if _backend is None:
        _backend = SayBackend()
    return _backend


def set_backend(backend: Optional[SpeechBackend]) -> None:
    """Replace the global backend. Passing None resets to the default."""
    global _backend
    _backend = backend


def check_say_available(command: Optional[str] = None) -> bool:
    """Check whether the say command exists and is executable."""
    command = command or config.SAY_COMMAND
    if os.sep not in command:
        return shutil.which(command) is not None
    return os.path.isfile(command) and os.access(command, os.X_OK)
