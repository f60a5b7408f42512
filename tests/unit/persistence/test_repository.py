"""
Tests for TranslationRepository over the in-memory store.
"""

from datetime import datetime, timezone

import pytest

from lingualink.persistence import (
    ConversationMessage,
    ConversationParticipants,
    InMemoryObjectStore,
    ObjectStoreError,
    PersistenceError,
    SessionStatus,
    Theme,
    TranslationMethod,
    TranslationRepository,
)
from lingualink.speech import VoiceSettings


class FailingStore(InMemoryObjectStore):
    """Store whose every operation fails with a server error."""

    def __init__(self, status: int = 500):
        super().__init__()
        self._error = ObjectStoreError("Internal error", status=status)

    async def find(self, *args, **kwargs):
        raise self._error

    async def find_one(self, *args, **kwargs):
        raise self._error

    async def insert_one(self, data):
        raise self._error

    async def update_one(self, object_id, data):
        raise self._error

    async def delete_one(self, object_id):
        raise self._error


class TestGetLanguages:
    """Tests for get_languages."""

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, repository):
        assert await repository.get_languages() == []

    @pytest.mark.asyncio
    async def test_returns_languages(self, language_object_factory):
        store = InMemoryObjectStore(
            [
                language_object_factory("1", "English", "en", "English"),
                language_object_factory("2", "French", "fr", "Français"),
            ]
        )
        repository = TranslationRepository(store)

        languages = await repository.get_languages()

        assert [language.name for language in languages] == ["English", "French"]
        assert languages[1].metadata.native_name == "Français"

    @pytest.mark.asyncio
    async def test_skips_malformed_language(self, language_object_factory):
        broken = language_object_factory("2", "French", "fr", "Français")
        del broken["metadata"]["code"]
        store = InMemoryObjectStore(
            [language_object_factory("1", "English", "en", "English"), broken]
        )
        repository = TranslationRepository(store)

        languages = await repository.get_languages()

        assert [language.name for language in languages] == ["English"]

    @pytest.mark.asyncio
    async def test_store_failure(self):
        repository = TranslationRepository(FailingStore())

        with pytest.raises(PersistenceError) as exc_info:
            await repository.get_languages()

        assert exc_info.value.message == "Failed to fetch languages"


class TestTranslationHistory:
    """Tests for get_translation_history."""

    @pytest.mark.asyncio
    async def test_empty_history(self, repository):
        assert await repository.get_translation_history() == []

    @pytest.mark.asyncio
    async def test_newest_first(self, history_objects):
        repository = TranslationRepository(InMemoryObjectStore(history_objects))

        translations = await repository.get_translation_history()

        assert [t.id for t in translations] == ["t3", "t2", "t1"]

    @pytest.mark.asyncio
    async def test_skips_malformed_translation(self, translation_object_factory):
        broken = translation_object_factory("t2", user_id="alice")
        broken["metadata"]["confidence_score"] = None
        store = InMemoryObjectStore([translation_object_factory("t1", user_id="alice"), broken])
        repository = TranslationRepository(store)

        translations = await repository.get_translation_history("alice")

        assert [t.id for t in translations] == ["t1"]

    @pytest.mark.asyncio
    async def test_filters_by_user(self, history_objects):
        repository = TranslationRepository(InMemoryObjectStore(history_objects))

        translations = await repository.get_translation_history("alice")

        assert [t.id for t in translations] == ["t3", "t1"]

    @pytest.mark.asyncio
    async def test_unknown_user_is_empty(self, history_objects):
        repository = TranslationRepository(InMemoryObjectStore(history_objects))

        assert await repository.get_translation_history("carol") == []

    @pytest.mark.asyncio
    async def test_store_failure(self):
        repository = TranslationRepository(FailingStore())

        with pytest.raises(PersistenceError) as exc_info:
            await repository.get_translation_history("alice")

        assert exc_info.value.message == "Failed to fetch translation history"


class TestSaveTranslation:
    """Tests for save_translation."""

    @pytest.mark.asyncio
    async def test_saves_record(self, repository, store):
        translation = await repository.save_translation(
            source_text="Hello",
            translated_text="Hola",
            source_language="English",
            target_language="Spanish",
            method=TranslationMethod.VOICE,
            user_id="alice",
            confidence=0.95,
        )

        assert translation.title == "English → Spanish Translation"
        assert translation.metadata.translated_text == "Hola"
        assert translation.metadata.translation_method == TranslationMethod.VOICE
        assert translation.metadata.user_id == "alice"
        assert translation.metadata.session_id == ""
        assert translation.metadata.confidence_score == 0.95
        assert translation.metadata.created_at is not None
        assert len(store.objects) == 1

    @pytest.mark.asyncio
    async def test_defaults(self, repository):
        translation = await repository.save_translation("Hi", "Salut", "English", "French")

        assert translation.metadata.translation_method == TranslationMethod.TEXT
        assert translation.metadata.user_id == ""
        assert translation.metadata.confidence_score == 0

    @pytest.mark.asyncio
    async def test_saved_record_appears_in_history(self, repository):
        await repository.save_translation("Hello", "Hola", "English", "Spanish", user_id="alice")

        history = await repository.get_translation_history("alice")

        assert len(history) == 1

    @pytest.mark.asyncio
    async def test_store_failure(self):
        repository = TranslationRepository(FailingStore())

        with pytest.raises(PersistenceError) as exc_info:
            await repository.save_translation("Hello", "Hola", "English", "Spanish")

        assert exc_info.value.message == "Failed to save translation"


class TestDeleteTranslation:
    """Tests for delete_translation."""

    @pytest.mark.asyncio
    async def test_deletes_record(self, repository, store):
        translation = await repository.save_translation("Hello", "Hola", "English", "Spanish")

        await repository.delete_translation(translation.id)

        assert store.objects == []

    @pytest.mark.asyncio
    async def test_missing_record_succeeds(self, repository):
        await repository.delete_translation("does-not-exist")

    @pytest.mark.asyncio
    async def test_store_failure(self):
        repository = TranslationRepository(FailingStore())

        with pytest.raises(PersistenceError) as exc_info:
            await repository.delete_translation("abc")

        assert exc_info.value.message == "Failed to delete translation"

    @pytest.mark.asyncio
    async def test_not_found_from_failing_store_succeeds(self):
        repository = TranslationRepository(FailingStore(status=404))

        await repository.delete_translation("abc")


class TestUserProfiles:
    """Tests for get_user_profile and save_user_profile."""

    @pytest.mark.asyncio
    async def test_missing_profile_is_none(self, repository):
        assert await repository.get_user_profile("nobody") is None

    @pytest.mark.asyncio
    async def test_creates_profile(self, repository):
        profile = await repository.save_user_profile(
            user_id="user-1",
            email="user@example.com",
            preferred_languages=["English", "Japanese"],
            voice_settings=VoiceSettings(speed=1.2),
            theme=Theme.DARK,
        )

        assert profile.slug == "user-1"
        assert profile.title == "User Profile - user@example.com"
        assert profile.metadata.preferred_languages == ["English", "Japanese"]
        assert profile.metadata.voice_settings.speed == 1.2
        assert profile.metadata.theme == Theme.DARK

    @pytest.mark.asyncio
    async def test_updates_existing_profile(self, repository, store):
        created = await repository.save_user_profile(user_id="user-1", email="old@example.com")

        updated = await repository.save_user_profile(
            user_id="user-1", email="new@example.com", auto_detect=True
        )

        assert updated.id == created.id
        assert updated.metadata.email == "new@example.com"
        assert updated.metadata.auto_detect is True
        assert len(store.objects) == 1

    @pytest.mark.asyncio
    async def test_get_profile(self, repository):
        await repository.save_user_profile(user_id="user-1", email="user@example.com")

        profile = await repository.get_user_profile("user-1")

        assert profile is not None
        assert profile.metadata.email == "user@example.com"
        assert profile.metadata.save_history is True

    @pytest.mark.asyncio
    async def test_store_failure(self):
        repository = TranslationRepository(FailingStore())

        with pytest.raises(PersistenceError) as exc_info:
            await repository.save_user_profile(user_id="user-1", email="user@example.com")

        assert exc_info.value.message == "Failed to save user profile"


class TestConversationSessions:
    """Tests for save_conversation_session."""

    @pytest.mark.asyncio
    async def test_saves_session(self, repository):
        message = ConversationMessage(
            id="m1",
            text="Hello",
            translation="Hola",
            sender="user_1",
            timestamp=datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        )

        record = await repository.save_conversation_session(
            participants=ConversationParticipants(
                user_1_language="English", user_2_language="Spanish"
            ),
            messages=[message],
            status=SessionStatus.COMPLETED,
            duration=5,
        )

        assert record.title == "Conversation: English ↔ Spanish"
        assert record.metadata.status == SessionStatus.COMPLETED
        assert record.metadata.session_duration == 5
        assert record.metadata.messages[0].translation == "Hola"

    @pytest.mark.asyncio
    async def test_store_failure(self):
        repository = TranslationRepository(FailingStore())

        with pytest.raises(PersistenceError) as exc_info:
            await repository.save_conversation_session(
                participants=ConversationParticipants(
                    user_1_language="English", user_2_language="Spanish"
                ),
                messages=[],
            )

        assert exc_info.value.message == "Failed to save conversation"
