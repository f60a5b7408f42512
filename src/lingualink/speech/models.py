"""
Data models for the speech bridge.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


class VoiceSettings(BaseModel):
    """Playback parameters applied to a synthesized utterance."""

    speed: float = Field(default=1.0, gt=0.0, le=10.0, description="Speaking rate")
    pitch: float = Field(default=1.0, ge=0.0, le=2.0, description="Voice pitch")
    volume: float = Field(default=1.0, ge=0.0, le=1.0, description="Playback volume")
    voice: str | None = Field(default=None, description="Preferred voice name")


@dataclass(frozen=True)
class SpeechSupport:
    """Speech capabilities negotiated once at startup."""

    recognition: bool
    synthesis: bool

    @property
    def notice(self) -> str | None:
        """User-facing notice when any capability is missing."""
        if self.recognition and self.synthesis:
            return None
        if not self.recognition and not self.synthesis:
            return "Voice input and speech output are not supported in this environment."
        if not self.recognition:
            return "Voice input is not supported, but speech output is available."
        return "Voice input is available, but speech output is not supported."


@dataclass(frozen=True)
class Voice:
    """A voice offered by a synthesis engine."""

    name: str
    lang: str
    default: bool = False
