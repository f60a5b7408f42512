"""
Tests for environment-based settings.
"""

import pytest

from lingualink.config import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, settings_factory):
        settings = settings_factory()

        assert settings.openai_model == "gpt-3.5-turbo"
        assert settings.openai_timeout_seconds == 30.0
        assert settings.cosmic_api_url == "https://api.cosmicjs.com/v3"
        assert settings.debounce_seconds == 1.0
        assert settings.speech_timeout_seconds == 10.0
        assert settings.openai_configured is False
        assert settings.cosmic_configured is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("COSMIC_BUCKET_SLUG", "bucket")
        monkeypatch.setenv("COSMIC_READ_KEY", "read")
        monkeypatch.setenv("DEBOUNCE_SECONDS", "0.5")

        settings = Settings(_env_file=None)

        assert settings.openai_api_key == "sk-from-env"
        assert settings.openai_model == "gpt-4o-mini"
        assert settings.openai_configured is True
        assert settings.cosmic_configured is True
        assert settings.debounce_seconds == 0.5

    def test_malformed_key_is_not_configured(self, settings_factory):
        assert settings_factory(openai_api_key="abc").openai_configured is False

    def test_origins(self, settings_factory):
        settings = settings_factory(allowed_origins="http://a.test, http://b.test ,")

        assert settings.origins == ["http://a.test", "http://b.test"]

    def test_invalid_port_rejected(self, settings_factory):
        with pytest.raises(ValueError):
            settings_factory(port=0)


def test_get_settings_is_cached():
    reset_settings()
    try:
        assert get_settings() is get_settings()
    finally:
        reset_settings()
