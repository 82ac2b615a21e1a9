"""
Configuration for speech-mcp.

Settings come from environment variables with the SPEECH_MCP_ prefix.
Values can also be placed in ~/.speech-mcp/speech-mcp.env; variables already
set in the environment take precedence over the file.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional


def _parse_env_lines(lines) -> Dict[str, str]:
    """Parse KEY=VALUE lines, supporting comments and quoted multiline values."""
    values: Dict[str, str] = {}
    i = 0
    while i < len(lines):
        line = lines[i].strip()

        # Skip comments and empty lines
        if not line or line.startswith('#') or '=' not in line:
            i += 1
            continue

        key, value = line.split('=', 1)
        key = key.strip()
        value = value.strip()

        if value and value[0] in ('"', "'"):
            quote_char = value[0]
            if len(value) > 1 and value[-1] == quote_char:
                value = value[1:-1]
            else:
                # Collect lines until the closing quote
                value_parts = [value[1:]]
                i += 1
                while i < len(lines):
                    next_line = lines[i].rstrip('\n')
                    if next_line.endswith(quote_char):
                        value_parts.append(next_line[:-1])
                        break
                    value_parts.append(next_line)
                    i += 1
                value = '\n'.join(value_parts)

        if key:
            values[key] = value
        i += 1

    return values


def load_env_file(path: Path) -> Dict[str, str]:
    """Load a speech-mcp env file into os.environ.

    Keys already present in the environment are left alone.

    Returns:
        The values that were applied.
    """
    if not path.is_file():
        return {}

    with open(path, 'r') as f:
        parsed = _parse_env_lines(f.readlines())

    applied = {}
    for key, value in parsed.items():
        if key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied


def env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('true', '1', 'yes', 'on')


def env_float(name: str, default: Optional[float]) -> Optional[float]:
    """Read a float environment variable, falling back to default on bad input."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logging.getLogger("speech-mcp").warning(
            f"Ignoring invalid value for {name}: {value!r}"
        )
        return default


CONFIG_FILE = Path(
    os.path.expanduser(
        os.getenv("SPEECH_MCP_CONFIG_FILE", "~/.speech-mcp/speech-mcp.env")
    )
)
load_env_file(CONFIG_FILE)

# ==================== CORE CONFIGURATION ====================

DEBUG = env_bool("SPEECH_MCP_DEBUG")
LOG_LEVEL = os.getenv("SPEECH_MCP_LOG_LEVEL", "INFO").upper()

# ==================== SAY COMMAND ====================

SAY_COMMAND = os.getenv("SPEECH_MCP_SAY_COMMAND", "/usr/bin/say")

# Deadlines in seconds; zero or negative disables the deadline
SPEAK_TIMEOUT = env_float("SPEECH_MCP_SPEAK_TIMEOUT", 300.0)
LIST_VOICES_TIMEOUT = env_float("SPEECH_MCP_LIST_TIMEOUT", 30.0)

# Words per minute accepted by say
MIN_RATE = 90
MAX_RATE = 500

PERMISSION_GUIDANCE = """

Permission denied. Please ensure:
1. The application has accessibility permissions in System Preferences
2. You are running in a user session with audio output available
3. You are not running in an SSH session without audio forwarding"""


# ==================== LOGGING ====================

def setup_logging() -> logging.Logger:
    """Configure logging for speech-mcp.

    Logs go to stderr because stdout carries the MCP stdio transport.
    """
    level = logging.DEBUG if DEBUG else getattr(logging, LOG_LEVEL, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    logger = logging.getLogger("speech-mcp")
    logger.setLevel(level)
    return logger
