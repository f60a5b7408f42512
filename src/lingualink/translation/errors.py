"""
Error classification and handling for the Translation pipeline.

Maps Python and OpenAI SDK exceptions to TranslationErrorCode values, each
with its own user-facing message. No error is retried automatically.
"""

import openai

from .models import TranslationErrorCode

__all__ = [
    "TranslationErrorCode",
    "TranslationError",
    "TranslationValidationError",
    "classify_error",
    "is_retryable",
    "create_translation_error",
]


class TranslationValidationError(ValueError):
    """Invalid caller input, rejected before any provider request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TranslationError(Exception):
    """Configuration or provider failure surfaced to the caller."""

    def __init__(
        self,
        code: TranslationErrorCode,
        message: str | None = None,
        details: dict[str, str] | None = None,
    ):
        self.code = code
        self.message = message or code.default_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        return is_retryable(self.code)

    def to_dict(self) -> dict[str, str]:
        """Serialize to the API error body."""
        return {"error": self.message, "code": self.code.value}


def _classify_status(status_code: int) -> TranslationErrorCode:
    if status_code == 401:
        return TranslationErrorCode.AUTHENTICATION_FAILED
    if status_code == 429:
        return TranslationErrorCode.RATE_LIMITED
    if status_code == 408:
        return TranslationErrorCode.TIMEOUT
    if status_code >= 500:
        return TranslationErrorCode.SERVICE_UNAVAILABLE
    return TranslationErrorCode.TRANSLATION_FAILED


def classify_error(exception: Exception) -> TranslationErrorCode:
    """Classify an exception raised while talking to the completion API.

    Args:
        exception: The exception to classify

    Returns:
        The corresponding TranslationErrorCode
    """
    if isinstance(exception, TranslationError):
        return exception.code

    # OpenAI SDK exceptions. APITimeoutError subclasses APIConnectionError,
    # so it must be checked first.
    if isinstance(exception, openai.APITimeoutError):
        return TranslationErrorCode.TIMEOUT
    if isinstance(exception, openai.APIConnectionError):
        return TranslationErrorCode.NETWORK_ERROR
    if isinstance(exception, openai.AuthenticationError):
        return TranslationErrorCode.AUTHENTICATION_FAILED
    if isinstance(exception, openai.RateLimitError):
        return TranslationErrorCode.RATE_LIMITED
    if isinstance(exception, openai.APIStatusError):
        return _classify_status(exception.status_code)

    # Standard Python exceptions
    if isinstance(exception, TimeoutError):
        return TranslationErrorCode.TIMEOUT
    elif isinstance(exception, ConnectionError):
        return TranslationErrorCode.NETWORK_ERROR
    else:
        return TranslationErrorCode.TRANSLATION_FAILED


def is_retryable(error_code: TranslationErrorCode) -> bool:
    """Determine if an error should be retried automatically.

    Always False: every failure is reported to the caller, who decides
    whether to resubmit.
    """
    return False


def create_translation_error(exception: Exception) -> TranslationError:
    """Create a TranslationError from a Python exception.

    Args:
        exception: The exception to convert

    Returns:
        TranslationError with the classified code and its default message
    """
    if isinstance(exception, TranslationError):
        return exception

    code = classify_error(exception)
    return TranslationError(
        code=code,
        details={"exception_type": type(exception).__name__},
    )
