"""
Pydantic data models for the Translation pipeline.

Defines the typed result contract, the failure taxonomy surfaced to callers,
and the tunables of the completion requests.
"""

from enum import Enum

from pydantic import BaseModel, Field

# Confidence attached to provider translations. The completion API exposes no
# calibrated signal, so this is a fixed value rather than a computed score.
DEFAULT_CONFIDENCE = 0.95

# Confidence for same-language requests answered without a provider call
IDENTITY_CONFIDENCE = 1.0

UNKNOWN_LANGUAGE = "Unknown"

# -----------------------------------------------------------------------------
# Error Codes
# -----------------------------------------------------------------------------


class TranslationErrorCode(str, Enum):
    """Classification of translation failures surfaced to callers.

    None of these are retried automatically; the caller must resubmit.
    """

    # Configuration errors
    MISSING_API_KEY = "MISSING_API_KEY"
    INVALID_API_KEY = "INVALID_API_KEY"

    # Provider errors
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    RATE_LIMITED = "RATE_LIMITED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"

    # Anything else
    TRANSLATION_FAILED = "TRANSLATION_FAILED"

    @property
    def is_configuration_error(self) -> bool:
        """Whether the failure comes from service configuration."""
        return self in CONFIGURATION_ERRORS

    @property
    def default_message(self) -> str:
        """Human-readable message for this error code."""
        return ERROR_MESSAGES.get(self, ERROR_MESSAGES[TranslationErrorCode.TRANSLATION_FAILED])


CONFIGURATION_ERRORS: set[TranslationErrorCode] = {
    TranslationErrorCode.MISSING_API_KEY,
    TranslationErrorCode.INVALID_API_KEY,
}

ERROR_MESSAGES: dict[TranslationErrorCode, str] = {
    TranslationErrorCode.MISSING_API_KEY: (
        "OpenAI API key is missing. Please configure your API key in environment variables."
    ),
    TranslationErrorCode.INVALID_API_KEY: (
        "OpenAI API key is malformed. API keys must start with 'sk-'."
    ),
    TranslationErrorCode.AUTHENTICATION_FAILED: (
        "Invalid OpenAI API key. Please check your API key configuration."
    ),
    TranslationErrorCode.RATE_LIMITED: (
        "OpenAI API rate limit exceeded. Please try again in a moment."
    ),
    TranslationErrorCode.SERVICE_UNAVAILABLE: (
        "OpenAI service is temporarily unavailable. Please try again later."
    ),
    TranslationErrorCode.TIMEOUT: "The translation request timed out. Please try again.",
    TranslationErrorCode.NETWORK_ERROR: (
        "Could not reach the translation service. Please check your network connection."
    ),
    TranslationErrorCode.EMPTY_RESPONSE: "No translation received from OpenAI",
    TranslationErrorCode.TRANSLATION_FAILED: "Failed to translate text. Please try again.",
}

# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------


class TranslationConfig(BaseModel):
    """Tunables for the translation pipeline."""

    max_text_length: int = Field(default=5000, ge=1, description="Maximum input length")

    # Translation request
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1000, ge=1)
    confidence: float = Field(default=DEFAULT_CONFIDENCE, ge=0.0, le=1.0)

    # Detection request
    detection_temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    detection_max_tokens: int = Field(default=50, ge=1)
    detection_min_length: int = Field(
        default=3,
        ge=0,
        description="Stripped texts shorter than this are reported as Unknown without a call",
    )
    auto_detect_threshold: int = Field(
        default=10,
        ge=0,
        description="Auto-detect only runs for texts longer than this",
    )

    # Alternatives request
    alternatives_temperature: float = Field(default=0.5, ge=0.0, le=2.0)
    alternatives_max_tokens: int = Field(default=500, ge=1)
    max_alternatives: int = Field(default=3, ge=0)


# -----------------------------------------------------------------------------
# Output Model
# -----------------------------------------------------------------------------


class TranslationResult(BaseModel):
    """Outcome of a successful translation."""

    translated_text: str = Field(..., description="Final translated output")
    source_language: str = Field(..., description="Source language actually used")
    target_language: str = Field(..., description="Target language")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Static confidence score")
    alternatives: list[str] = Field(default_factory=list, description="Alternative phrasings")
    detected_language: str | None = Field(
        default=None,
        description="Set only when auto-detect replaced the requested source language",
    )
