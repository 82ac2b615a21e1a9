"""Parsing of the `say -v ?` voice catalog."""

import logging
import re
from typing import List

from .models import Voice

logger = logging.getLogger("speech-mcp")

# Example line:
#   Albert              en_US    # Hello! My name is Albert.
# Multi-word names are matched lazily, so the locale is the last
# non-whitespace run before the '#'.
VOICE_LINE_PATTERN = re.compile(r'^(.+?)\s+(\S+)\s+#\s*(.*)$')


def parse_voice_line(line: str):
    """Parse a single catalog line, returning None if it doesn't match."""
    match = VOICE_LINE_PATTERN.match(line.strip())
    if not match:
        return None
    name, locale, description = match.groups()
    return Voice(
        name=name.strip(),
        locale=locale.strip(),
        description=description.strip(),
    )


def parse_voice_list(output: str) -> List[Voice]:
    """Parse say's voice catalog into Voice records.

    Blank lines and lines that don't have the
    ``<name> <locale> # <description>`` shape are skipped.
    """
    voices = []
    skipped = 0

    for line in output.split("\n"):
        line = line.strip()
        if not line:
            continue

        voice = parse_voice_line(line)
        if voice is None:
            skipped += 1
            continue
        voices.append(voice)

    if skipped:
        logger.debug(f"Skipped {skipped} unrecognised voice catalog line(s)")

    return voices
