"""
Speech engine interface contract.

Recognition and synthesis are provided by the host platform. Engines are
callback driven: they report results, completion and errors through the
callables passed to ``start``/``speak``, possibly from another thread.
SpeechRecognizer and SpeechSynthesizer adapt them for the rest of the service.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from .models import Voice, VoiceSettings

# (transcript, is_final)
ResultCallback = Callable[[str, bool], None]
ErrorCallback = Callable[[str], None]
EndCallback = Callable[[], None]


@runtime_checkable
class RecognitionEngine(Protocol):
    """Protocol for platform speech recognition engines."""

    @property
    def is_available(self) -> bool:
        """Whether recognition can be used in this environment."""
        ...

    def start(self, locale: str, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        """Begin one listening session for the given locale tag.

        The engine reports interim transcripts with ``is_final=False`` and
        the final transcript with ``is_final=True``.
        """
        ...

    def stop(self) -> None:
        """Stop the current listening session, if any."""
        ...


@runtime_checkable
class SynthesisEngine(Protocol):
    """Protocol for platform speech synthesis engines."""

    @property
    def is_available(self) -> bool:
        """Whether synthesis can be used in this environment."""
        ...

    def speak(
        self,
        text: str,
        locale: str,
        settings: VoiceSettings,
        on_end: EndCallback,
        on_error: ErrorCallback,
    ) -> None:
        """Queue an utterance. ``on_end`` fires when playback finishes."""
        ...

    def cancel(self) -> None:
        """Cancel queued and in-progress utterances."""
        ...

    def get_voices(self) -> list[Voice]:
        """Return every voice the engine offers."""
        ...
