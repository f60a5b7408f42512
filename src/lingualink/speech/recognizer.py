"""
Speech recognition adapter.

Wraps a RecognitionEngine so that consumers get a single active session at a
time, interim results followed by exactly one final transcript, and errors
reported through a callback rather than raised.
"""

import logging

from .interface import ErrorCallback, RecognitionEngine, ResultCallback
from .locales import get_locale_code

logger = logging.getLogger(__name__)

RECOGNITION_NOT_SUPPORTED = "Speech recognition not supported"


class SpeechRecognizer:
    """Single-session speech recognizer."""

    def __init__(self, engine: RecognitionEngine | None = None):
        self._engine = engine
        self._session_id = 0
        self._active = False

    @property
    def is_supported(self) -> bool:
        return self._engine is not None and self._engine.is_available

    @property
    def is_listening(self) -> bool:
        return self._active

    def start_listening(
        self,
        language: str,
        on_result: ResultCallback,
        on_error: ErrorCallback,
    ) -> None:
        """Start a listening session for a language name.

        A session that is already running is stopped first; its late
        callbacks are dropped.

        Args:
            language: Language name (e.g., "Spanish"); unmapped names use en-US
            on_result: Called with (transcript, is_final)
            on_error: Called with an error message
        """
        if not self.is_supported:
            on_error(RECOGNITION_NOT_SUPPORTED)
            return

        if self._active:
            self.stop_listening()

        self._session_id += 1
        session_id = self._session_id
        self._active = True

        def handle_result(transcript: str, is_final: bool) -> None:
            if session_id != self._session_id or not self._active:
                return
            if is_final:
                self._active = False
            on_result(transcript, is_final)

        def handle_error(message: str) -> None:
            if session_id != self._session_id or not self._active:
                return
            self._active = False
            logger.warning(f"Speech recognition error: {message}")
            on_error(message)

        locale = get_locale_code(language)
        try:
            self._engine.start(locale, handle_result, handle_error)
        except Exception as e:
            self._active = False
            logger.error(f"Failed to start speech recognition for {locale}: {e}")
            on_error(str(e) or RECOGNITION_NOT_SUPPORTED)

    def stop_listening(self) -> None:
        """Stop the current session. Safe to call when idle."""
        if self._engine is None:
            return
        # Invalidate callbacks from the session being stopped
        self._session_id += 1
        self._active = False
        self._engine.stop()
