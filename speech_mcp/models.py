"""
Data models for speech-mcp.

These dataclasses carry a speech request from the MCP boundary to the say
command, and carry parsed voice catalog entries back out.
"""

import json
import logging
from dataclasses import asdict, dataclass, field, replace
from numbers import Real
from typing import Any, List, Optional

from .config import MAX_RATE, MIN_RATE

logger = logging.getLogger("speech-mcp")


class SpeechError(Exception):
    """Base class for speech-mcp errors."""


class InvalidRequestError(SpeechError):
    """Raised when a request fails validation before any process is started."""


@dataclass
class CommandResult:
    """Outcome of a say invocation.

    Attributes:
        success: Whether the command exited cleanly.
        output: Combined stdout and stderr of the command.
        error: User-facing failure message, None on success.
        cancelled: True if the deadline expired before the command finished.
    """

    success: bool
    output: str = ""
    error: Optional[str] = None
    cancelled: bool = False


@dataclass(frozen=True)
class SpeakRequest:
    """A request to speak text aloud.

    Attributes:
        text: Text to speak. Must be non-empty after trimming.
        voice: Voice name passed to say. Not checked against the catalog.
        rate: Words per minute. Values <= 0 mean the system default.
    """

    text: str
    voice: Optional[str] = None
    rate: Optional[float] = None

    @classmethod
    def from_arguments(cls, text: Any, voice: Any = None, rate: Any = None) -> "SpeakRequest":
        """Build a request from untyped tool arguments.

        A voice that is not a string, or a rate that is not a number, is
        dropped so say falls back to its default. Bad text is left for
        validate() to reject.
        """
        if voice is not None and not isinstance(voice, str):
            logger.debug(f"Ignoring voice of type {type(voice).__name__}")
            voice = None

        if rate is not None and (isinstance(rate, bool) or not isinstance(rate, Real)):
            logger.debug(f"Ignoring rate of type {type(rate).__name__}")
            rate = None

        return cls(text=text, voice=voice, rate=rate)

    def validate(self) -> "SpeakRequest":
        """Return a copy with trimmed text, raising InvalidRequestError if invalid."""
        if not isinstance(self.text, str):
            raise InvalidRequestError("Invalid parameter 'text': argument is not a string")

        text = self.text.strip()
        if not text:
            raise InvalidRequestError("Parameter 'text' cannot be empty")

        self._check_rate()
        return replace(self, text=text)

    def _check_rate(self) -> None:
        if self.rate is not None and self.rate > 0:
            if self.rate < MIN_RATE or self.rate > MAX_RATE:
                raise InvalidRequestError(
                    f"Rate {self.rate:.0f} is outside acceptable range "
                    f"({MIN_RATE}-{MAX_RATE} words per minute)"
                )

    def to_args(self) -> List[str]:
        """Build the say arguments: [-v voice] [-r rate] text.

        Each value is its own token, so nothing is ever shell-interpreted.
        """
        args: List[str] = []

        if self.voice:
            args.extend(["-v", self.voice])

        if self.rate is not None and self.rate > 0:
            self._check_rate()
            args.extend(["-r", f"{self.rate:.0f}"])

        args.append(self.text)
        return args


@dataclass
class Voice:
    """A voice from the say catalog."""

    name: str
    locale: str
    description: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class VoicesResult:
    """The voice catalog in the order say listed it."""

    voices: List[Voice] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(
            {"voices": [voice.to_dict() for voice in self.voices]},
            indent=2,
            ensure_ascii=False,
        )
