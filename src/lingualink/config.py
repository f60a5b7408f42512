"""
Environment-based configuration for the LinguaLink translation service.

All settings are read from environment variables (or a local ``.env`` file)
with defaults suitable for local development. A missing completion-API
credential is not fatal at startup: the translate endpoint degrades to a
configuration error instead.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

# Every OpenAI secret key starts with this prefix
OPENAI_KEY_PREFIX = "sk-"

DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"
DEFAULT_COSMIC_API_URL = "https://api.cosmicjs.com/v3"


class Settings(BaseSettings):
    """Service configuration loaded from environment variables.

    Attributes:
        openai_api_key: Credential for the completion API. Required for
            translation; must start with ``sk-``.
        openai_model: Chat completion model used for translation and detection.
        openai_timeout_seconds: Request timeout enforced by the API client.
        cosmic_bucket_slug: Object store bucket identifier.
        cosmic_read_key: Object store read key.
        cosmic_write_key: Object store write key (needed for save/delete).
        debounce_seconds: Delay before typed text triggers a translation.
        speech_timeout_seconds: Upper bound on waiting for speech playback.
    """

    # Completion API
    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    openai_model: str = Field(default=DEFAULT_OPENAI_MODEL, description="Chat model name")
    openai_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Completion request timeout in seconds",
    )

    # Object store
    cosmic_bucket_slug: str | None = Field(default=None, description="Cosmic bucket slug")
    cosmic_read_key: str | None = Field(default=None, description="Cosmic read key")
    cosmic_write_key: str | None = Field(default=None, description="Cosmic write key")
    cosmic_api_url: str = Field(default=DEFAULT_COSMIC_API_URL, description="Cosmic REST base URL")
    cosmic_timeout_seconds: float = Field(default=10.0, gt=0)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of CORS origins",
    )
    log_level: str = Field(default="INFO")

    # Client-side behaviour
    debounce_seconds: float = Field(default=1.0, ge=0.0, le=10.0)
    speech_timeout_seconds: float = Field(default=10.0, gt=0.0, le=120.0)

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def openai_configured(self) -> bool:
        """Whether a well-formed completion-API credential is present."""
        return bool(self.openai_api_key) and self.openai_api_key.startswith(OPENAI_KEY_PREFIX)

    @property
    def cosmic_configured(self) -> bool:
        """Whether the object store can at least be read."""
        return bool(self.cosmic_bucket_slug and self.cosmic_read_key)

    @property
    def origins(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


# Global settings instance, created lazily
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (for testing)."""
    global _settings
    _settings = None
