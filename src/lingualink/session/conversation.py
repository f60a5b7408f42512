"""
Two-person conversation mode.

Each participant speaks their own language; every message is translated into
the other participant's language, recorded, and optionally read aloud.
"""

import asyncio
import logging
import secrets
import string
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Literal

from lingualink.persistence import (
    ConversationMessage,
    ConversationParticipants,
    ConversationRecord,
    SessionStatus,
    TranslationRepository,
)
from lingualink.speech import (
    RECOGNITION_NOT_SUPPORTED,
    SpeechNotSupportedError,
    SpeechRecognizer,
    SpeechSynthesisError,
    SpeechSynthesizer,
)
from lingualink.translation import TranslationError, TranslationService

logger = logging.getLogger(__name__)

Sender = Literal["user_1", "user_2"]

DEFAULT_SPEAK_DELAY_SECONDS = 0.5

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_session_id() -> str:
    """Short random id with a time component, unique enough for session and message ids."""
    random_part = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{random_part}{int(time.time() * 1000):x}"


class ConversationSession:
    """A conversation between two participants with different languages."""

    def __init__(
        self,
        service: TranslationService,
        repository: TranslationRepository | None = None,
        user_1_language: str = "English",
        user_2_language: str = "Spanish",
        synthesizer: SpeechSynthesizer | None = None,
        recognizer: SpeechRecognizer | None = None,
        auto_speak: bool = True,
        speak_delay_seconds: float = DEFAULT_SPEAK_DELAY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._service = service
        self._repository = repository
        self._synthesizer = synthesizer
        self._recognizer = recognizer
        self._speak_delay_seconds = speak_delay_seconds
        self._clock = clock
        self._started_at = clock()
        self._tasks: set[asyncio.Task] = set()

        self.session_id = generate_session_id()
        self.user_1_language = user_1_language
        self.user_2_language = user_2_language
        self.auto_speak = auto_speak
        self.messages: list[ConversationMessage] = []
        self.current_speaker: Sender | None = None
        self.status = SessionStatus.ACTIVE

    def language_of(self, sender: Sender) -> str:
        return self.user_1_language if sender == "user_1" else self.user_2_language

    def partner_language_of(self, sender: Sender) -> str:
        return self.user_2_language if sender == "user_1" else self.user_1_language

    @property
    def duration_minutes(self) -> int:
        """Elapsed time in whole minutes, half a minute rounding up."""
        elapsed = max(0.0, self._clock() - self._started_at)
        return int(elapsed / 60 + 0.5)

    async def handle_message(self, text: str, sender: Sender) -> ConversationMessage:
        """Translate a message into the partner's language and record it.

        Raises:
            TranslationValidationError: Invalid text
            TranslationError: Translation failed; no message is recorded
        """
        source_language = self.language_of(sender)
        target_language = self.partner_language_of(sender)

        result = await self._service.translate_text(text, source_language, target_language)

        message = ConversationMessage(
            id=generate_session_id(),
            text=text,
            translation=result.translated_text,
            sender=sender,
            timestamp=datetime.now(timezone.utc),
        )
        self.messages.append(message)

        if self.auto_speak and self._synthesizer is not None and self._synthesizer.is_supported:
            self._spawn(self._speak_later(result.translated_text, target_language))

        return message

    async def speak_message(self, text: str, language: str) -> None:
        """Read a message aloud.

        Raises:
            SpeechNotSupportedError: No synthesis available
        """
        if self._synthesizer is None:
            raise SpeechNotSupportedError()
        await self._synthesizer.speak(text, language)

    def start_listening(self, sender: Sender, on_error: Callable[[str], None]) -> None:
        """Dictate the next message for a participant.

        The final transcript is passed to ``handle_message``; failures are
        reported through ``on_error``.
        """
        if self._recognizer is None or not self._recognizer.is_supported:
            on_error(RECOGNITION_NOT_SUPPORTED)
            return

        loop = asyncio.get_running_loop()
        self.current_speaker = sender

        def handle_transcript(transcript: str, is_final: bool) -> None:
            if not is_final:
                return
            self.current_speaker = None
            loop.call_soon_threadsafe(
                lambda: self._spawn(self._handle_dictated(transcript, sender, on_error))
            )

        def handle_error(message: str) -> None:
            self.current_speaker = None
            on_error(f"Speech recognition error: {message}")

        self._recognizer.start_listening(self.language_of(sender), handle_transcript, handle_error)

    def stop_listening(self) -> None:
        if self._recognizer is not None:
            self._recognizer.stop_listening()
        self.current_speaker = None

    def clear_messages(self) -> None:
        self.messages = []

    async def save(self) -> ConversationRecord:
        """Persist the session as completed.

        Raises:
            ValueError: The session has no messages
            PersistenceError: The store rejected the session
        """
        if not self.messages:
            raise ValueError("No messages to save")
        if self._repository is None:
            raise RuntimeError("No repository configured for conversation sessions")

        record = await self._repository.save_conversation_session(
            participants=ConversationParticipants(
                user_1_language=self.user_1_language,
                user_2_language=self.user_2_language,
            ),
            messages=list(self.messages),
            status=SessionStatus.COMPLETED,
            duration=self.duration_minutes,
        )
        self.status = SessionStatus.COMPLETED
        logger.info(f"Saved conversation {self.session_id} with {len(self.messages)} messages")
        return record

    async def wait_idle(self) -> None:
        """Wait for background speech and dictation tasks."""
        await asyncio.sleep(0)
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        self.stop_listening()
        for task in list(self._tasks):
            task.cancel()
        if self._synthesizer is not None:
            self._synthesizer.stop()

    async def _handle_dictated(
        self, transcript: str, sender: Sender, on_error: Callable[[str], None]
    ) -> None:
        try:
            await self.handle_message(transcript, sender)
        except (TranslationError, ValueError) as e:
            on_error(str(e))

    async def _speak_later(self, text: str, language: str) -> None:
        await asyncio.sleep(self._speak_delay_seconds)
        try:
            await self._synthesizer.speak(text, language)
        except SpeechSynthesisError as e:
            logger.warning(f"Failed to speak translation: {e}")

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task
