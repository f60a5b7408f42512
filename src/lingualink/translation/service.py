"""
Translation pipeline.

Validates input, optionally detects the source language, then requests a
translation from the completion API. Detect and translate are awaited
sequentially, never concurrently within one request.
"""

import logging
import time

from lingualink.observability import metrics

from .errors import (
    TranslationError,
    TranslationValidationError,
    create_translation_error,
)
from .interface import CompletionClient
from .models import (
    IDENTITY_CONFIDENCE,
    UNKNOWN_LANGUAGE,
    TranslationConfig,
    TranslationErrorCode,
    TranslationResult,
)
from .prompts import (
    build_alternatives_prompt,
    build_context_prompt,
    build_detection_prompt,
    build_translation_prompt,
    clean_language_name,
    parse_alternatives,
)
from .validation import ensure_valid_request

logger = logging.getLogger(__name__)


class TranslationService:
    """Translation pipeline over an injected completion client.

    The client may be None when the service is not configured; in that case
    ``client_error`` is raised the first time a provider call is needed.
    Requests that never reach the provider (validation failures,
    same-language requests) still work.
    """

    def __init__(
        self,
        client: CompletionClient | None,
        config: TranslationConfig | None = None,
        client_error: TranslationError | None = None,
    ):
        """Initialize the pipeline.

        Args:
            client: Completion client, or None if unavailable
            config: Pipeline tunables
            client_error: Error to raise when a call needs the missing client
        """
        self._client = client
        self._config = config or TranslationConfig()
        self._client_error = client_error or TranslationError(TranslationErrorCode.MISSING_API_KEY)

    @property
    def client(self) -> CompletionClient | None:
        return self._client

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    @property
    def configuration_error(self) -> TranslationError | None:
        """Why the service cannot reach the provider, None when configured."""
        return None if self._client is not None else self._client_error

    @property
    def config(self) -> TranslationConfig:
        return self._config

    def _require_client(self) -> CompletionClient:
        if self._client is None:
            raise self._client_error
        return self._client

    # -------------------------------------------------------------------------
    # Detection
    # -------------------------------------------------------------------------

    async def detect_language(self, text: str) -> str:
        """Detect the language of a text.

        Never raises: every failure yields "Unknown".

        Args:
            text: Text to inspect

        Returns:
            Language name in English, or "Unknown"
        """
        if not text or len(text.strip()) < self._config.detection_min_length:
            return UNKNOWN_LANGUAGE

        try:
            client = self._require_client()
            content = await client.complete(
                build_detection_prompt(text),
                temperature=self._config.detection_temperature,
                max_tokens=self._config.detection_max_tokens,
            )
        except Exception as e:
            logger.warning(f"Language detection failed: {e}")
            return UNKNOWN_LANGUAGE

        detected = clean_language_name(content)
        return detected or UNKNOWN_LANGUAGE

    # -------------------------------------------------------------------------
    # Translation
    # -------------------------------------------------------------------------

    async def translate_text(
        self,
        text: str,
        source_language: str,
        target_language: str,
    ) -> TranslationResult:
        """Translate text between two named languages.

        Args:
            text: Text to translate
            source_language: Source language name (e.g., "English")
            target_language: Target language name (e.g., "Spanish")

        Returns:
            TranslationResult with the static confidence score

        Raises:
            TranslationValidationError: Invalid input (no request made)
            TranslationError: Configuration or provider failure
        """
        ensure_valid_request(text, source_language, target_language, self._config.max_text_length)

        if source_language == target_language:
            metrics.record_translation("identity")
            return TranslationResult(
                translated_text=text,
                source_language=source_language,
                target_language=target_language,
                confidence=IDENTITY_CONFIDENCE,
                alternatives=[],
            )

        start_time = time.monotonic()
        translated_text = await self._complete_or_raise(
            build_translation_prompt(text, source_language, target_language),
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )
        metrics.record_translation("success", time.monotonic() - start_time)

        return TranslationResult(
            translated_text=translated_text,
            source_language=source_language,
            target_language=target_language,
            confidence=self._config.confidence,
            alternatives=[],
        )

    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        auto_detect: bool = False,
    ) -> TranslationResult:
        """Full pipeline: validate, optionally auto-detect, translate.

        Detection only runs when requested and the text is longer than the
        auto-detect threshold. A failed or "Unknown" detection silently keeps
        the caller's source language.

        Returns:
            TranslationResult; ``detected_language`` is set only when
            detection replaced the requested source language.
        """
        ensure_valid_request(text, source_language, target_language, self._config.max_text_length)

        actual_source = source_language
        if auto_detect and len(text) > self._config.auto_detect_threshold:
            detected = await self.detect_language(text)
            if detected and detected.lower() != UNKNOWN_LANGUAGE.lower():
                actual_source = detected
            else:
                metrics.record_detection_fallback()
                logger.info("Language detection inconclusive, keeping requested source language")

        result = await self.translate_text(text, actual_source, target_language)
        if actual_source != source_language:
            result.detected_language = actual_source
        return result

    async def translate_with_context(
        self,
        text: str,
        source_language: str,
        target_language: str,
        context: str | None = None,
    ) -> TranslationResult:
        """Translate with an optional context hint and alternative phrasings.

        Issues two sequential requests: the translation, then up to three
        alternatives.
        """
        ensure_valid_request(text, source_language, target_language, self._config.max_text_length)

        translated_text = await self._complete_or_raise(
            build_context_prompt(text, source_language, target_language, context),
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

        alternatives_content = await self._complete_or_raise(
            build_alternatives_prompt(text, source_language, target_language),
            temperature=self._config.alternatives_temperature,
            max_tokens=self._config.alternatives_max_tokens,
            allow_empty=True,
        )

        return TranslationResult(
            translated_text=translated_text,
            source_language=source_language,
            target_language=target_language,
            confidence=self._config.confidence,
            alternatives=parse_alternatives(alternatives_content, self._config.max_alternatives),
        )

    async def batch_translate(
        self,
        texts: list[str],
        source_language: str,
        target_language: str,
    ) -> list[str]:
        """Translate several texts in order, one request at a time.

        Fails on the first error; no partial result is returned.
        """
        translations: list[str] = []
        for text in texts:
            result = await self.translate_text(text, source_language, target_language)
            translations.append(result.translated_text)
        return translations

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _complete_or_raise(
        self,
        prompt: str,
        *,
        temperature: float,
        max_tokens: int,
        allow_empty: bool = False,
    ) -> str:
        """Call the provider and convert any failure to TranslationError."""
        try:
            client = self._require_client()
            content = await client.complete(prompt, temperature=temperature, max_tokens=max_tokens)
        except TranslationValidationError:
            raise
        except Exception as e:
            error = create_translation_error(e)
            metrics.record_translation("error")
            metrics.record_translation_error(error.code.value)
            logger.error(f"Translation request failed ({error.code.value}): {e}")
            if error is e:
                raise
            raise error from e

        if not content and not allow_empty:
            metrics.record_translation("error")
            metrics.record_translation_error(TranslationErrorCode.EMPTY_RESPONSE.value)
            raise TranslationError(TranslationErrorCode.EMPTY_RESPONSE)

        return content
