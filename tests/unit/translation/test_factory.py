"""
Tests for completion client factory.
"""

import pytest

from lingualink.translation import (
    CompletionClient,
    TranslationError,
    TranslationErrorCode,
    check_api_key,
    create_completion_client,
)
from lingualink.translation.mock import MockCompletionClient
from lingualink.translation.openai_provider import OpenAICompletionClient


class TestCheckApiKey:
    """Tests for check_api_key."""

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_missing(self, api_key):
        assert check_api_key(api_key) == TranslationErrorCode.MISSING_API_KEY

    def test_malformed(self):
        assert check_api_key("pk-not-a-secret") == TranslationErrorCode.INVALID_API_KEY

    def test_well_formed(self):
        assert check_api_key("sk-abc123") is None


class TestCreateCompletionClient:
    """Tests for create_completion_client."""

    def test_mock_client(self, settings_factory):
        client = create_completion_client(settings_factory(), mock=True)

        assert isinstance(client, MockCompletionClient)
        assert isinstance(client, CompletionClient)

    def test_missing_key_raises(self, settings_factory):
        with pytest.raises(TranslationError) as exc_info:
            create_completion_client(settings_factory())

        assert exc_info.value.code == TranslationErrorCode.MISSING_API_KEY

    def test_invalid_key_raises(self, settings_factory):
        with pytest.raises(TranslationError) as exc_info:
            create_completion_client(settings_factory(openai_api_key="not-a-key"))

        assert exc_info.value.code == TranslationErrorCode.INVALID_API_KEY

    @pytest.mark.asyncio
    async def test_openai_client(self, settings_factory):
        settings = settings_factory(openai_api_key="sk-test", openai_model="gpt-4o-mini")

        client = create_completion_client(settings)

        assert isinstance(client, OpenAICompletionClient)
        assert client.model == "gpt-4o-mini"
        assert client.client_name == "openai-gpt-4o-mini"
        await client.close()
