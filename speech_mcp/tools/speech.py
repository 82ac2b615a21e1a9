"""Text-to-speech tools: speak and list_voices."""

import logging
from typing import Any

from fastmcp.exceptions import ToolError

from speech_mcp.server import mcp
from speech_mcp.models import InvalidRequestError, SpeakRequest, VoicesResult
from speech_mcp.say import get_backend
from speech_mcp.voices import parse_voice_list

logger = logging.getLogger("speech-mcp")


async def speak_text(request: SpeakRequest) -> str:
    """Validate and speak a request, returning the confirmation message.

    Raises:
        ToolError: On validation, cancellation, or execution failure.
    """
    try:
        request = request.validate()
        result = await get_backend().synthesize(request)
    except InvalidRequestError as e:
        logger.warning(f"Rejected speak request: {e}")
        raise ToolError(str(e)) from e

    if not result.success:
        raise ToolError(result.error or "Speech synthesis failed")

    logger.info(f"Spoke {len(request.text)} characters")
    return f"Successfully spoke: {request.text}"


async def fetch_voices() -> VoicesResult:
    """Run the catalog listing and parse it.

    Raises:
        ToolError: On cancellation or execution failure.
    """
    result = await get_backend().list_voices()
    if not result.success:
        raise ToolError(result.error or "Failed to retrieve voice list")

    voices = parse_voice_list(result.output)
    logger.info(f"Found {len(voices)} voices")
    return VoicesResult(voices=voices)


@mcp.tool()
async def speak(
    text: str,
    voice: Any = None,
    rate: Any = None,
) -> str:
    """Converts text to audible speech using macOS text-to-speech.

    Args:
        text: The text to be spoken aloud
        voice: Voice name to use for speech synthesis (optional, uses system default if not specified)
        rate: Speech rate as a number of words per minute, 90-500 (optional, uses system default if not specified)
    """
    # Wrong-typed optional arguments fall back to the system default
    return await speak_text(SpeakRequest.from_arguments(text, voice=voice, rate=rate))


@mcp.tool()
async def list_voices() -> str:
    """List all available text-to-speech voices on the system with their locales and descriptions."""
    result = await fetch_voices()

    try:
        return result.to_json()
    except (TypeError, ValueError) as e:
        raise ToolError(f"Failed to format voice list: {e}") from e
