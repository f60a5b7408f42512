"""
Mock speech engines for testing.

Stand in for platform recognition and synthesis engines with scripted,
synchronous behavior.

Mock Implementations:
- MockRecognitionEngine: Captures callbacks; tests push results with emit()
- MockSynthesisEngine: Completes, errors or never finishes, per ``mode``
"""

from dataclasses import dataclass, field
from typing import Literal

from .interface import EndCallback, ErrorCallback, ResultCallback
from .models import Voice, VoiceSettings


class MockRecognitionEngine:
    """Recognition engine driven by the test.

    ``start`` stores the callbacks of the current session; ``emit`` and
    ``fail`` deliver results or errors through them.
    """

    def __init__(self, available: bool = True, start_error: Exception | None = None):
        self._available = available
        self._start_error = start_error
        self._on_result: ResultCallback | None = None
        self._on_error: ErrorCallback | None = None
        self.started_locales: list[str] = []
        self.stop_count = 0

    @property
    def is_available(self) -> bool:
        return self._available

    def start(self, locale: str, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        if self._start_error is not None:
            raise self._start_error
        self.started_locales.append(locale)
        self._on_result = on_result
        self._on_error = on_error

    def stop(self) -> None:
        self.stop_count += 1

    def emit(self, transcript: str, is_final: bool = False) -> None:
        if self._on_result is not None:
            self._on_result(transcript, is_final)

    def fail(self, message: str = "network") -> None:
        if self._on_error is not None:
            self._on_error(message)


@dataclass
class SpokenUtterance:
    """An utterance handed to a mock synthesis engine."""

    text: str
    locale: str
    settings: VoiceSettings = field(default_factory=VoiceSettings)


DEFAULT_MOCK_VOICES = [
    Voice(name="Mock English", lang="en-US", default=True),
    Voice(name="Mock British", lang="en-GB"),
    Voice(name="Mock Spanish", lang="es-ES"),
    Voice(name="Mock Mexican Spanish", lang="es-MX"),
    Voice(name="Mock French", lang="fr-FR"),
]


class MockSynthesisEngine:
    """Synthesis engine with scripted completion.

    Modes:
        complete: on_end fires as soon as the utterance is queued
        never: neither callback ever fires
        error: on_error fires with ``error_message``
    """

    def __init__(
        self,
        available: bool = True,
        mode: Literal["complete", "never", "error"] = "complete",
        voices: list[Voice] | None = None,
        error_message: str = "synthesis-failed",
    ):
        self._available = available
        self._mode = mode
        self._voices = list(DEFAULT_MOCK_VOICES if voices is None else voices)
        self._error_message = error_message
        self.utterances: list[SpokenUtterance] = []
        self.cancel_count = 0

    @property
    def is_available(self) -> bool:
        return self._available

    def speak(
        self,
        text: str,
        locale: str,
        settings: VoiceSettings,
        on_end: EndCallback,
        on_error: ErrorCallback,
    ) -> None:
        self.utterances.append(SpokenUtterance(text, locale, settings))
        if self._mode == "complete":
            on_end()
        elif self._mode == "error":
            on_error(self._error_message)

    def cancel(self) -> None:
        self.cancel_count += 1

    def get_voices(self) -> list[Voice]:
        return list(self._voices)
