#!/usr/bin/env python
"""speech-mcp MCP Server - text-to-speech via the macOS say command."""

import logging

from fastmcp import FastMCP

logger = logging.getLogger("speech-mcp")

mcp = FastMCP("speech-mcp")

# Import shared configuration and utilities
from . import config

# Auto-import all tools and resources
# The __init__.py files in each directory handle the imports
from . import tools
from . import resources


def main():
    """Run the speech-mcp MCP server."""
    from .config import setup_logging
    from .say import check_say_available
    from .version import __version__

    logger = setup_logging()
    logger.info(f"Starting speech-mcp v{__version__}")

    # A missing command is not fatal: the tools report it to the agent
    if check_say_available(config.SAY_COMMAND):
        logger.info(f"Using speech command {config.SAY_COMMAND}")
    else:
        logger.warning(f"Speech command not found or not executable: {config.SAY_COMMAND}")
        logger.warning("speak and list_voices will fail with descriptive errors")

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
