"""MCP resources for speech-mcp."""

from . import configuration

__all__ = ["configuration"]
