"""
Pydantic data models for records held in the object store.

Every record is a Cosmic object: a typed envelope (id, slug, title, type,
timestamps) around a free-form ``metadata`` document. Language names are used
as informal join keys between records; nothing enforces them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from lingualink.speech.models import VoiceSettings

# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class ObjectType(str, Enum):
    """Object types stored in the bucket."""

    LANGUAGES = "languages"
    TRANSLATIONS = "translations"
    USERS = "users"
    CONVERSATIONS = "conversations"


class TranslationMethod(str, Enum):
    """How the source text was captured."""

    TEXT = "text"
    VOICE = "voice"
    DOCUMENT = "document"


class TranslationQuality(str, Enum):
    """Quality tier advertised for a language."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SessionStatus(str, Enum):
    """Lifecycle state of a conversation session."""

    ACTIVE = "active"
    COMPLETED = "completed"


class Theme(str, Enum):
    """UI theme preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


# -----------------------------------------------------------------------------
# Base Object
# -----------------------------------------------------------------------------

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class CosmicObject(BaseModel):
    """Envelope shared by every object in the store."""

    model_config = ConfigDict(extra="allow")

    id: str
    slug: str = ""
    title: str = ""
    type: str
    content: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    modified_at: datetime | None = None

    @property
    def sort_key(self) -> datetime:
        """Creation time normalized to UTC, epoch when unknown."""
        created = self.created_at
        if created is None:
            return _EPOCH
        if created.tzinfo is None:
            return created.replace(tzinfo=timezone.utc)
        return created


# -----------------------------------------------------------------------------
# Languages
# -----------------------------------------------------------------------------


class LanguageMetadata(BaseModel):
    """Static reference data describing a language."""

    model_config = ConfigDict(extra="allow")

    code: str
    native_name: str
    flag_emoji: str | None = None
    rtl: bool = False
    voice_supported: bool = False
    translation_quality: TranslationQuality = TranslationQuality.MEDIUM
    region: str | None = None


class Language(CosmicObject):
    """Language descriptor (display name is the object title)."""

    type: Literal["languages"] = "languages"
    metadata: LanguageMetadata

    @property
    def name(self) -> str:
        return self.title


# -----------------------------------------------------------------------------
# Translations
# -----------------------------------------------------------------------------


class TranslationMetadata(BaseModel):
    """Persisted translation result."""

    model_config = ConfigDict(extra="allow")

    source_text: str
    translated_text: str
    source_language: str
    target_language: str
    user_id: str = ""
    translation_method: TranslationMethod = TranslationMethod.TEXT
    confidence_score: float = 0.0
    created_at: datetime | None = None
    session_id: str = ""


class Translation(CosmicObject):
    """Translation record. Immutable once created except for deletion."""

    type: Literal["translations"] = "translations"
    metadata: TranslationMetadata

    @property
    def sort_key(self) -> datetime:
        if self.created_at is None and self.metadata.created_at is not None:
            created = self.metadata.created_at
            return created if created.tzinfo else created.replace(tzinfo=timezone.utc)
        return super().sort_key


# -----------------------------------------------------------------------------
# Conversations
# -----------------------------------------------------------------------------


class ConversationParticipants(BaseModel):
    """Language pair of a two-person conversation."""

    user_1_language: str
    user_2_language: str


class ConversationMessage(BaseModel):
    """One translated utterance within a conversation."""

    id: str
    text: str
    translation: str
    sender: Literal["user_1", "user_2"]
    timestamp: datetime


class ConversationMetadata(BaseModel):
    """Persisted conversation session."""

    model_config = ConfigDict(extra="allow")

    participants: ConversationParticipants
    messages: list[ConversationMessage] = Field(default_factory=list)
    session_duration: int = Field(default=0, ge=0, description="Duration in minutes")
    status: SessionStatus = SessionStatus.ACTIVE


class ConversationRecord(CosmicObject):
    """Conversation session as stored in the bucket."""

    type: Literal["conversations"] = "conversations"
    metadata: ConversationMetadata


# -----------------------------------------------------------------------------
# User Profiles
# -----------------------------------------------------------------------------


class UserProfileMetadata(BaseModel):
    """User preferences."""

    model_config = ConfigDict(extra="allow")

    email: str
    preferred_languages: list[str] = Field(default_factory=list)
    voice_settings: VoiceSettings = Field(default_factory=VoiceSettings)
    theme: Theme = Theme.SYSTEM
    auto_detect: bool = False
    save_history: bool = True


class UserProfile(CosmicObject):
    """User profile keyed by slug (the opaque user id)."""

    type: Literal["users"] = "users"
    metadata: UserProfileMetadata
