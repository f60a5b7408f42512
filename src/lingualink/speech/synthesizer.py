"""
Speech synthesis adapter.

Turns the callback-driven SynthesisEngine into an awaitable ``speak`` that
resolves when playback ends or after a fixed timeout, whichever comes first.
"""

import asyncio
import logging

from .interface import SynthesisEngine
from .locales import get_locale_code, locale_prefix
from .models import Voice, VoiceSettings

logger = logging.getLogger(__name__)

DEFAULT_SPEECH_TIMEOUT_SECONDS = 10.0


class SpeechSynthesisError(Exception):
    """The engine reported a playback failure."""


class SpeechNotSupportedError(SpeechSynthesisError):
    """Synthesis is not available in this environment."""

    def __init__(self, message: str = "Speech synthesis not supported"):
        super().__init__(message)


class SpeechSynthesizer:
    """Awaitable speech synthesis over a SynthesisEngine."""

    def __init__(
        self,
        engine: SynthesisEngine | None = None,
        timeout_seconds: float = DEFAULT_SPEECH_TIMEOUT_SECONDS,
    ):
        self._engine = engine
        self._timeout_seconds = timeout_seconds

    @property
    def is_supported(self) -> bool:
        return self._engine is not None and self._engine.is_available

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    async def speak(
        self,
        text: str,
        language: str,
        settings: VoiceSettings | None = None,
    ) -> None:
        """Speak text in the given language.

        Resolves when the engine reports the end of playback, or after the
        timeout if it never does. The timeout is not an error.

        Raises:
            SpeechNotSupportedError: Synthesis is unavailable
            SpeechSynthesisError: The engine reported an error before finishing
        """
        if not self.is_supported:
            raise SpeechNotSupportedError()

        loop = asyncio.get_running_loop()
        done: asyncio.Future[None] = loop.create_future()

        def settle(error: Exception | None = None) -> None:
            if done.done():
                return
            if error is None:
                done.set_result(None)
            else:
                done.set_exception(error)

        def on_end() -> None:
            loop.call_soon_threadsafe(settle)

        def on_error(message: str) -> None:
            error = SpeechSynthesisError(f"Speech synthesis error: {message or 'Unknown error'}")
            loop.call_soon_threadsafe(settle, error)

        locale = get_locale_code(language)
        self._engine.speak(text, locale, settings or VoiceSettings(), on_end, on_error)

        try:
            await asyncio.wait_for(done, timeout=self._timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                f"Speech playback did not finish within {self._timeout_seconds}s ({locale})"
            )

    def stop(self) -> None:
        """Cancel any queued or in-progress speech."""
        if self.is_supported:
            self._engine.cancel()

    def get_voices(self, language: str | None = None) -> list[Voice]:
        """List available voices, optionally only those matching a language."""
        if not self.is_supported:
            return []

        voices = self._engine.get_voices()
        if not language:
            return voices

        prefix = locale_prefix(get_locale_code(language))
        return [voice for voice in voices if voice.lang.lower().startswith(prefix)]
