"""Shared test fixtures and configuration for speech-mcp tests."""

import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add speech_mcp to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent))

from speech_mcp.models import CommandResult, SpeakRequest


# Commands that should never run in tests - they would talk out loud
BLOCKED_COMMANDS = {
    "say",
}


def _safe_create_subprocess_exec(original):
    """Wrapper that blocks the real speech command during tests."""
    async def wrapper(program, *args, **kwargs):
        if os.path.basename(str(program)) in BLOCKED_COMMANDS:
            mock_proc = MagicMock()
            mock_proc.pid = 99999
            mock_proc.returncode = 0
            mock_proc.communicate = AsyncMock(return_value=(b"", None))
            mock_proc.wait = AsyncMock(return_value=0)
            return mock_proc

        return await original(program, *args, **kwargs)
    return wrapper


@pytest.fixture(autouse=True)
def block_speech_command(monkeypatch):
    """
    Automatically block the say command in all tests.

    Tests that need to verify how say is invoked should use a FakeBackend
    or patch run_command explicitly.
    """
    original = asyncio.create_subprocess_exec
    monkeypatch.setattr(
        "asyncio.create_subprocess_exec", _safe_create_subprocess_exec(original)
    )


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Remove SPEECH_MCP_ variables so tests see default configuration."""
    for key in list(os.environ.keys()):
        if key.startswith("SPEECH_MCP_"):
            monkeypatch.delenv(key)


class FakeBackend:
    """SpeechBackend that records calls instead of running say."""

    def __init__(
        self,
        speak_result: Optional[CommandResult] = None,
        voices_result: Optional[CommandResult] = None,
    ):
        self.speak_result = speak_result or CommandResult(success=True)
        self.voices_result = voices_result or CommandResult(success=True, output="")
        self.requests: List[SpeakRequest] = []
        self.argv: List[List[str]] = []
        self.list_calls = 0

    async def synthesize(self, request: SpeakRequest) -> CommandResult:
        self.requests.append(request)
        self.argv.append(request.to_args())
        return self.speak_result

    async def list_voices(self) -> CommandResult:
        self.list_calls += 1
        return self.voices_result


@pytest.fixture
def fake_backend():
    """Install a FakeBackend as the global backend for the duration of a test."""
    from speech_mcp.say import set_backend

    backend = FakeBackend()
    set_backend(backend)
    yield backend
    set_backend(None)


SAMPLE_CATALOG = """\
Albert              en_US    # Hello! My name is Albert.
Alice               it_IT    # Ciao! Mi chiamo Alice.
Bad News            en_US    # Hello! My name is Bad News.
"""


@pytest.fixture
def sample_catalog():
    """Voice catalog text in the shape say -v ? prints it."""
    return SAMPLE_CATALOG
