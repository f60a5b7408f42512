"""
Translation repository.

Typed operations over an injected ObjectStore. A 404 from the store is an
expected outcome (empty collection, missing profile, already deleted record);
any other failure is logged and surfaced as PersistenceError.
"""

import logging
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import ValidationError

from lingualink.observability import metrics
from lingualink.speech.models import VoiceSettings

from .errors import ObjectStoreError, PersistenceError
from .interface import ObjectStore
from .models import (
    ConversationMessage,
    ConversationParticipants,
    ConversationRecord,
    CosmicObject,
    Language,
    ObjectType,
    SessionStatus,
    Theme,
    Translation,
    TranslationMethod,
    UserProfile,
)

logger = logging.getLogger(__name__)

LANGUAGE_PROPS = ["id", "title", "slug", "metadata"]
TRANSLATION_PROPS = ["id", "title", "slug", "metadata", "created_at"]


ModelT = TypeVar("ModelT", bound=CosmicObject)


def _parse_objects(model: type[ModelT], objects: list[dict[str, Any]]) -> list[ModelT]:
    """Validate store objects one by one, skipping malformed records."""
    parsed: list[ModelT] = []
    for obj in objects:
        try:
            parsed.append(model.model_validate(obj))
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed {model.__name__} object {obj.get('id', '?')}: "
                f"{e.error_count()} validation error(s)"
            )
    return parsed


class TranslationRepository:
    """Persistence operations for languages, translations, profiles and conversations."""

    def __init__(self, store: ObjectStore):
        self._store = store

    @property
    def store(self) -> ObjectStore:
        return self._store

    async def get_languages(self) -> list[Language]:
        """Fetch all language descriptors; empty when the store has none."""
        try:
            objects = await self._store.find(ObjectType.LANGUAGES.value, props=LANGUAGE_PROPS)
        except ObjectStoreError as e:
            if e.is_not_found:
                metrics.record_store_operation("get_languages", True)
                return []
            self._log_failure("get_languages", e)
            raise PersistenceError("Failed to fetch languages") from e

        languages = _parse_objects(Language, objects)

        metrics.record_store_operation("get_languages", True)
        return languages

    async def get_translation_history(self, user_id: str | None = None) -> list[Translation]:
        """Fetch translation records, newest first.

        Args:
            user_id: Restrict to one user's records when given
        """
        query: dict[str, Any] = {}
        if user_id:
            query["metadata.user_id"] = user_id

        try:
            objects = await self._store.find(
                ObjectType.TRANSLATIONS.value, query, props=TRANSLATION_PROPS
            )
        except ObjectStoreError as e:
            if e.is_not_found:
                metrics.record_store_operation("get_translation_history", True)
                return []
            self._log_failure("get_translation_history", e)
            raise PersistenceError("Failed to fetch translation history") from e

        translations = _parse_objects(Translation, objects)

        metrics.record_store_operation("get_translation_history", True)
        return sorted(translations, key=lambda t: t.sort_key, reverse=True)

    async def save_translation(
        self,
        source_text: str,
        translated_text: str,
        source_language: str,
        target_language: str,
        method: TranslationMethod = TranslationMethod.TEXT,
        user_id: str | None = None,
        session_id: str | None = None,
        confidence: float | None = None,
    ) -> Translation:
        """Store a completed translation."""
        data = {
            "title": f"{source_language} → {target_language} Translation",
            "type": ObjectType.TRANSLATIONS.value,
            "metadata": {
                "source_text": source_text,
                "translated_text": translated_text,
                "source_language": source_language,
                "target_language": target_language,
                "translation_method": TranslationMethod(method).value,
                "user_id": user_id or "",
                "session_id": session_id or "",
                "confidence_score": confidence or 0,
                "created_at": datetime.now(timezone.utc).isoformat(),
            },
        }

        try:
            obj = await self._store.insert_one(data)
            translation = Translation.model_validate(obj)
        except (ObjectStoreError, ValidationError) as e:
            self._log_failure("save_translation", e)
            raise PersistenceError("Failed to save translation") from e

        metrics.record_store_operation("save_translation", True)
        return translation

    async def delete_translation(self, translation_id: str) -> None:
        """Delete a translation record. Deleting a missing record succeeds."""
        try:
            await self._store.delete_one(translation_id)
        except ObjectStoreError as e:
            if e.is_not_found:
                logger.info(f"Translation {translation_id} already deleted")
                metrics.record_store_operation("delete_translation", True)
                return
            self._log_failure("delete_translation", e)
            raise PersistenceError("Failed to delete translation") from e

        metrics.record_store_operation("delete_translation", True)

    async def get_user_profile(self, user_id: str) -> UserProfile | None:
        """Fetch a user profile by its slug, None when it does not exist."""
        try:
            obj = await self._store.find_one(ObjectType.USERS.value, user_id)
            profile = UserProfile.model_validate(obj)
        except ObjectStoreError as e:
            if e.is_not_found:
                return None
            self._log_failure("get_user_profile", e)
            raise PersistenceError("Failed to fetch user profile") from e
        except ValidationError as e:
            self._log_failure("get_user_profile", e)
            raise PersistenceError("Failed to fetch user profile") from e

        metrics.record_store_operation("get_user_profile", True)
        return profile

    async def save_user_profile(
        self,
        user_id: str,
        email: str,
        preferred_languages: list[str] | None = None,
        voice_settings: VoiceSettings | None = None,
        theme: Theme = Theme.SYSTEM,
        auto_detect: bool = False,
        save_history: bool = True,
    ) -> UserProfile:
        """Create or update a user profile (upsert keyed by user id)."""
        metadata = {
            "email": email,
            "preferred_languages": list(preferred_languages or []),
            "voice_settings": (voice_settings or VoiceSettings()).model_dump(),
            "theme": Theme(theme).value,
            "auto_detect": auto_detect,
            "save_history": save_history,
        }

        try:
            existing = await self.get_user_profile(user_id)
            if existing is not None:
                obj = await self._store.update_one(existing.id, {"metadata": metadata})
            else:
                obj = await self._store.insert_one(
                    {
                        "title": f"User Profile - {email}",
                        "slug": user_id,
                        "type": ObjectType.USERS.value,
                        "metadata": metadata,
                    }
                )
            profile = UserProfile.model_validate(obj)
        except (ObjectStoreError, ValidationError, PersistenceError) as e:
            self._log_failure("save_user_profile", e)
            raise PersistenceError("Failed to save user profile") from e

        metrics.record_store_operation("save_user_profile", True)
        return profile

    async def save_conversation_session(
        self,
        participants: ConversationParticipants,
        messages: list[ConversationMessage],
        status: SessionStatus = SessionStatus.COMPLETED,
        duration: int = 0,
    ) -> ConversationRecord:
        """Store a conversation session.

        Args:
            participants: Language pair
            messages: Ordered message records
            status: Session status
            duration: Session length in whole minutes
        """
        data = {
            "title": (
                f"Conversation: {participants.user_1_language} ↔ "
                f"{participants.user_2_language}"
            ),
            "type": ObjectType.CONVERSATIONS.value,
            "metadata": {
                "participants": participants.model_dump(),
                "messages": [message.model_dump(mode="json") for message in messages],
                "session_duration": duration or 0,
                "status": SessionStatus(status).value,
            },
        }

        try:
            obj = await self._store.insert_one(data)
            record = ConversationRecord.model_validate(obj)
        except (ObjectStoreError, ValidationError) as e:
            self._log_failure("save_conversation_session", e)
            raise PersistenceError("Failed to save conversation") from e

        metrics.record_store_operation("save_conversation_session", True)
        return record

    def _log_failure(self, operation: str, error: Exception) -> None:
        metrics.record_store_operation(operation, False)
        logger.error(f"Store operation {operation} failed: {error}")
