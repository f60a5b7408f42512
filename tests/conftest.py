"""Shared test fixtures for LinguaLink tests.

Provides settings that ignore the developer's environment, mock completion
clients, and an in-memory object store.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from lingualink.config import Settings
from lingualink.persistence import InMemoryObjectStore, ObjectStoreError, TranslationRepository
from lingualink.translation import TranslationService
from lingualink.translation.mock import MockCompletionClient


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: tests that exercise the HTTP application end to end"
    )


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from the environment and any local .env file."""
    values: dict[str, Any] = {
        "openai_api_key": None,
        "cosmic_bucket_slug": None,
        "cosmic_read_key": None,
        "cosmic_write_key": None,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_translation_object(
    object_id: str,
    user_id: str = "",
    created_at: datetime | None = None,
    source_language: str = "English",
    target_language: str = "Spanish",
) -> dict[str, Any]:
    """A translation object as the store returns it."""
    created_at = created_at or datetime(2024, 1, 1, tzinfo=timezone.utc)
    return {
        "id": object_id,
        "slug": f"translation-{object_id}",
        "title": f"{source_language} → {target_language} Translation",
        "type": "translations",
        "created_at": created_at.isoformat(),
        "metadata": {
            "source_text": "Hello",
            "translated_text": "Hola",
            "source_language": source_language,
            "target_language": target_language,
            "translation_method": "text",
            "user_id": user_id,
            "session_id": "",
            "confidence_score": 0.95,
            "created_at": created_at.isoformat(),
        },
    }


def make_language_object(object_id: str, name: str, code: str, native_name: str) -> dict[str, Any]:
    return {
        "id": object_id,
        "slug": name.lower(),
        "title": name,
        "type": "languages",
        "metadata": {
            "code": code,
            "native_name": native_name,
            "voice_supported": True,
            "translation_quality": "high",
        },
    }


@pytest.fixture
def settings_factory():
    """Build isolated Settings with overrides."""
    return make_settings


@pytest.fixture
def translation_object_factory():
    return make_translation_object


@pytest.fixture
def language_object_factory():
    return make_language_object


@pytest.fixture
def settings() -> Settings:
    return make_settings(openai_api_key="sk-test-key")


@pytest.fixture
def mock_client() -> MockCompletionClient:
    return MockCompletionClient(default_response="Hola")


@pytest.fixture
def service(mock_client: MockCompletionClient) -> TranslationService:
    return TranslationService(mock_client)


@pytest.fixture
def store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture
def repository(store: InMemoryObjectStore) -> TranslationRepository:
    return TranslationRepository(store)


@pytest.fixture
def history_objects() -> list[dict[str, Any]]:
    """Three translations for two users, created a day apart."""
    base = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    return [
        make_translation_object("t1", user_id="alice", created_at=base),
        make_translation_object("t2", user_id="bob", created_at=base + timedelta(days=1)),
        make_translation_object("t3", user_id="alice", created_at=base + timedelta(days=2)),
    ]


class FailingObjectStore(InMemoryObjectStore):
    """Store that reads normally but rejects every write."""

    async def insert_one(self, data):
        raise ObjectStoreError("Bucket unavailable", status=503)

    async def update_one(self, object_id, data):
        raise ObjectStoreError("Bucket unavailable", status=503)


@pytest.fixture
def failing_repository() -> TranslationRepository:
    return TranslationRepository(FailingObjectStore())
