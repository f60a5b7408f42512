"""
Translation pipeline for the LinguaLink service.

Validates input, optionally auto-detects the source language, and requests a
translation from an external completion API through an injected client.

Exports:
    - TranslationService: The translation pipeline
    - create_completion_client: Factory for completion clients
    - CompletionClient: Protocol interface
    - BaseCompletionClient: Abstract base class
    - TranslationResult: Pipeline output model
    - TranslationConfig: Pipeline configuration
    - TranslationError: Configuration/provider failure
    - TranslationErrorCode: Failure taxonomy
    - TranslationValidationError: Invalid caller input
"""

from .errors import TranslationError, TranslationValidationError
from .factory import check_api_key, create_completion_client
from .interface import BaseCompletionClient, CompletionClient
from .models import (
    DEFAULT_CONFIDENCE,
    IDENTITY_CONFIDENCE,
    UNKNOWN_LANGUAGE,
    TranslationConfig,
    TranslationErrorCode,
    TranslationResult,
)
from .service import TranslationService
from .validation import MAX_TEXT_LENGTH, validate_translation_input

__all__ = [
    # Pipeline
    "TranslationService",
    # Factory
    "create_completion_client",
    "check_api_key",
    # Interface
    "CompletionClient",
    "BaseCompletionClient",
    # Models
    "TranslationResult",
    "TranslationConfig",
    "TranslationErrorCode",
    "DEFAULT_CONFIDENCE",
    "IDENTITY_CONFIDENCE",
    "UNKNOWN_LANGUAGE",
    # Errors
    "TranslationError",
    "TranslationValidationError",
    # Validation
    "MAX_TEXT_LENGTH",
    "validate_translation_input",
]
