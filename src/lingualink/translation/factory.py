"""
Factory function for creating completion clients.
"""

from lingualink.config import OPENAI_KEY_PREFIX, Settings

from .errors import TranslationError
from .interface import CompletionClient
from .mock import MockCompletionClient
from .models import TranslationErrorCode


def check_api_key(api_key: str | None) -> TranslationErrorCode | None:
    """Return the configuration error for a credential, None if it looks usable."""
    if not api_key:
        return TranslationErrorCode.MISSING_API_KEY
    if not api_key.startswith(OPENAI_KEY_PREFIX):
        return TranslationErrorCode.INVALID_API_KEY
    return None


def create_completion_client(settings: Settings, mock: bool = False) -> CompletionClient:
    """Create a completion client instance.

    Args:
        settings: Service settings holding the credential and model
        mock: If True, return MockCompletionClient instead of the real client

    Returns:
        CompletionClient instance (either OpenAICompletionClient or MockCompletionClient)

    Raises:
        TranslationError: MISSING_API_KEY or INVALID_API_KEY when the
            credential is absent or malformed
    """
    if mock:
        return MockCompletionClient()

    error_code = check_api_key(settings.openai_api_key)
    if error_code is not None:
        raise TranslationError(error_code)

    # Import here to avoid loading the SDK client when not needed
    from .openai_provider import OpenAICompletionClient

    return OpenAICompletionClient(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout_seconds=settings.openai_timeout_seconds,
    )
