"""MCP resources for speech-mcp configuration."""

from speech_mcp.server import mcp
from speech_mcp import config
from speech_mcp.say import check_say_available


def _format_timeout(value) -> str:
    if value is None or value <= 0:
        return "none"
    return f"{value:g} s"


@mcp.resource("speech://config")
async def speech_configuration() -> str:
    """
    Current speech-mcp configuration.

    Shows the say command in use, its deadlines, the accepted speech
    rate range and logging settings.
    """
    available = "yes" if check_say_available(config.SAY_COMMAND) else "no"

    lines = []
    lines.append("speech-mcp Configuration")
    lines.append("=" * 40)
    lines.append("")
    lines.append("Say Command:")
    lines.append(f"  Path: {config.SAY_COMMAND}")
    lines.append(f"  Available: {available}")
    lines.append(f"  Speak Timeout: {_format_timeout(config.SPEAK_TIMEOUT)}")
    lines.append(f"  List Voices Timeout: {_format_timeout(config.LIST_VOICES_TIMEOUT)}")
    lines.append(f"  Rate Range: {config.MIN_RATE}-{config.MAX_RATE} words per minute")
    lines.append("")
    lines.append("Logging:")
    lines.append(f"  Debug: {config.DEBUG}")
    lines.append(f"  Level: {config.LOG_LEVEL}")
    lines.append(f"  Config File: {config.CONFIG_FILE}")

    return "\n".join(lines)
