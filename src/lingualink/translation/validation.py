"""
Input validation for translation requests.

Validation runs before any provider request is made.
"""

from dataclasses import dataclass

from .errors import TranslationValidationError

MAX_TEXT_LENGTH = 5000

EMPTY_TEXT_MESSAGE = "Please enter text to translate"
TEXT_TOO_LONG_MESSAGE = f"Text must be less than {MAX_TEXT_LENGTH} characters"
MISSING_LANGUAGES_MESSAGE = "Source and target languages are required"


@dataclass
class ValidationResult:
    """Outcome of validating a translation input."""

    is_valid: bool
    error: str | None = None


def validate_translation_input(
    text: str | None, max_length: int = MAX_TEXT_LENGTH
) -> ValidationResult:
    """Validate the text of a translation request.

    Args:
        text: Text to translate
        max_length: Longest accepted text, in characters

    Returns:
        ValidationResult with the failure message when invalid
    """
    if not text or not text.strip():
        return ValidationResult(is_valid=False, error=EMPTY_TEXT_MESSAGE)

    if len(text) > max_length:
        return ValidationResult(
            is_valid=False, error=f"Text must be less than {max_length} characters"
        )

    return ValidationResult(is_valid=True)


def validate_language_pair(
    source_language: str | None, target_language: str | None
) -> ValidationResult:
    """Both language names must be non-empty."""
    if not source_language or not target_language:
        return ValidationResult(is_valid=False, error=MISSING_LANGUAGES_MESSAGE)
    return ValidationResult(is_valid=True)


def ensure_valid_request(
    text: str | None,
    source_language: str | None,
    target_language: str | None,
    max_length: int = MAX_TEXT_LENGTH,
) -> None:
    """Raise TranslationValidationError if the request is invalid."""
    for result in (
        validate_translation_input(text, max_length),
        validate_language_pair(source_language, target_language),
    ):
        if not result.is_valid:
            raise TranslationValidationError(result.error or "Invalid input")
