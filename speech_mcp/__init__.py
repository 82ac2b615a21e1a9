"""
speech-mcp - Text-to-speech for Model Context Protocol (MCP) clients

This package provides an MCP server that speaks text aloud and lists the
available voices using the macOS `say` command.
"""

from .version import __version__

from .models import (
    SpeakRequest,
    Voice,
    VoicesResult,
    CommandResult,
    SpeechError,
    InvalidRequestError,
)
from .voices import parse_voice_list
from .say import SayBackend, SpeechBackend, run_command

__all__ = [
    "__version__",
    # Models
    "SpeakRequest",
    "Voice",
    "VoicesResult",
    "CommandResult",
    # Errors
    "SpeechError",
    "InvalidRequestError",
    # Process invocation
    "SayBackend",
    "SpeechBackend",
    "run_command",
    # Parsing
    "parse_voice_list",
]
