"""
Request and response bodies for the HTTP API.

The wire format is camelCase; models accept either camelCase or snake_case
field names and serialize with aliases.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lingualink.translation import TranslationResult


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TranslateRequest(CamelModel):
    """POST /translate body.

    Every field is optional here so that missing values surface as the
    pipeline's validation messages (HTTP 400) rather than schema errors.
    """

    text: str | None = None
    source_language: str | None = None
    target_language: str | None = None
    auto_detect: bool = False


class TranslateResponse(CamelModel):
    """POST /translate success body."""

    translated_text: str
    source_language: str
    target_language: str
    confidence: float
    alternatives: list[str] = Field(default_factory=list)
    detected_language: str | None = None

    @classmethod
    def from_result(cls, result: TranslationResult) -> "TranslateResponse":
        return cls(
            translated_text=result.translated_text,
            source_language=result.source_language,
            target_language=result.target_language,
            confidence=result.confidence,
            alternatives=list(result.alternatives),
            detected_language=result.detected_language,
        )


class ServiceStatusResponse(CamelModel):
    """GET /translate body."""

    status: str
    configured: bool
    message: str


class ErrorResponse(CamelModel):
    """Error body shared by every endpoint."""

    error: str
    code: str | None = None
