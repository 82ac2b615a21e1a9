"""MCP tools for speech-mcp."""

from . import speech

__all__ = ["speech"]
