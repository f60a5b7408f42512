"""
Interactive translation input.

Holds the state of a single source/target text pair and drives translation
from typed or dictated input: typed text is debounced, a new change replaces
any pending request, and results of superseded requests are discarded.
"""

import asyncio
import logging
from collections.abc import Callable

from lingualink.persistence import PersistenceError, TranslationMethod, TranslationRepository
from lingualink.speech import RECOGNITION_NOT_SUPPORTED, SpeechRecognizer
from lingualink.translation import (
    TranslationError,
    TranslationResult,
    TranslationService,
    TranslationValidationError,
)

from .debounce import Debouncer

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 1.0

ResultHandler = Callable[[TranslationResult], None]
ErrorHandler = Callable[[str], None]


class TranslationInputController:
    """State and behavior behind the translate-as-you-type view."""

    def __init__(
        self,
        service: TranslationService,
        repository: TranslationRepository | None = None,
        source_language: str = "English",
        target_language: str = "Spanish",
        auto_detect: bool = False,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        recognizer: SpeechRecognizer | None = None,
        user_id: str | None = None,
        on_result: ResultHandler | None = None,
        on_error: ErrorHandler | None = None,
    ):
        self._service = service
        self._repository = repository
        self._recognizer = recognizer
        self._user_id = user_id
        self._on_result = on_result
        self._on_error = on_error
        self._debouncer = Debouncer(debounce_seconds, self._translate)
        self._generation = 0
        self._loop: asyncio.AbstractEventLoop | None = None

        self.source_language = source_language
        self.target_language = target_language
        self.auto_detect = auto_detect
        self.source_text = ""
        self.translated_text = ""
        self.confidence = 0.0
        self.alternatives: list[str] = []
        self.is_translating = False
        self.is_listening = False

    @property
    def has_pending_request(self) -> bool:
        return self._debouncer.pending

    # -------------------------------------------------------------------------
    # Text input
    # -------------------------------------------------------------------------

    def on_text_changed(self, text: str) -> None:
        """Handle an edit of the source text.

        Ignored while dictation is active. Empty text clears the result and
        drops any pending request.
        """
        if self.is_listening:
            return
        self._set_source_text(text, TranslationMethod.TEXT)

    def clear(self) -> None:
        """Reset both texts and the translation details."""
        self._generation += 1
        self._debouncer.cancel()
        self.source_text = ""
        self._clear_result()

    def swap_languages(self) -> None:
        """Swap the language pair and re-translate the previous output."""
        new_source_text = self.translated_text
        self.source_language, self.target_language = self.target_language, self.source_language
        self.translated_text = self.source_text
        self.source_text = new_source_text

        if new_source_text.strip():
            self._schedule(new_source_text, TranslationMethod.TEXT)

    async def flush(self) -> None:
        """Translate pending input immediately."""
        await self._debouncer.flush()

    async def wait_idle(self) -> None:
        """Wait until no translation is pending or running."""
        # Let callbacks scheduled from recognition threads run first
        await asyncio.sleep(0)
        await self._debouncer.drain()

    # -------------------------------------------------------------------------
    # Voice input
    # -------------------------------------------------------------------------

    def start_listening(self) -> None:
        """Start dictation in the current source language.

        Manual edits are ignored until the final transcript arrives; the
        final transcript is then translated like typed text.
        """
        if self._recognizer is None or not self._recognizer.is_supported:
            self._report_error(RECOGNITION_NOT_SUPPORTED)
            return

        self._loop = asyncio.get_running_loop()
        self.is_listening = True
        self._recognizer.start_listening(
            self.source_language,
            self._handle_transcript,
            self._handle_recognition_error,
        )

    def stop_listening(self) -> None:
        if self._recognizer is not None:
            self._recognizer.stop_listening()
        self.is_listening = False

    def _handle_transcript(self, transcript: str, is_final: bool) -> None:
        self.source_text = transcript
        if not is_final:
            return
        self.is_listening = False
        self._loop.call_soon_threadsafe(self._set_source_text, transcript, TranslationMethod.VOICE)

    def _handle_recognition_error(self, message: str) -> None:
        self.is_listening = False
        self._report_error(f"Speech recognition error: {message}")

    async def close(self) -> None:
        """Stop dictation and drop pending work."""
        if self.is_listening:
            self.stop_listening()
        self._generation += 1
        self._debouncer.cancel()
        self.is_translating = False

    # -------------------------------------------------------------------------
    # Translation
    # -------------------------------------------------------------------------

    def _set_source_text(self, text: str, method: TranslationMethod) -> None:
        self.source_text = text
        if text.strip():
            self._schedule(text, method)
        else:
            self._generation += 1
            self._debouncer.cancel()
            self._clear_result()

    def _schedule(self, text: str, method: TranslationMethod) -> None:
        self._generation += 1
        self._debouncer.trigger(
            text, self.source_language, self.target_language, method, self._generation
        )

    async def _translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        method: TranslationMethod,
        generation: int,
    ) -> None:
        self.is_translating = True
        try:
            result = await self._service.translate(
                text, source_language, target_language, auto_detect=self.auto_detect
            )
        except (TranslationValidationError, TranslationError) as e:
            if generation == self._generation:
                self._report_error(e.message)
            return
        finally:
            if generation == self._generation:
                self.is_translating = False

        if generation != self._generation:
            logger.debug("Discarding result of superseded translation request")
            return

        if result.detected_language:
            self.source_language = result.detected_language
        self.translated_text = result.translated_text
        self.confidence = result.confidence
        self.alternatives = list(result.alternatives)
        if self._on_result is not None:
            self._on_result(result)

        await self._save(text, result, method)

    async def _save(self, text: str, result: TranslationResult, method: TranslationMethod) -> None:
        if self._repository is None:
            return
        try:
            await self._repository.save_translation(
                source_text=text,
                translated_text=result.translated_text,
                source_language=result.source_language,
                target_language=result.target_language,
                method=method,
                user_id=self._user_id,
                confidence=result.confidence,
            )
        except PersistenceError as e:
            # The translation stays visible even though history was not updated
            self._report_error(e.message)

    def _clear_result(self) -> None:
        self.translated_text = ""
        self.confidence = 0.0
        self.alternatives = []
        self.is_translating = False

    def _report_error(self, message: str) -> None:
        logger.warning(message)
        if self._on_error is not None:
            self._on_error(message)
