"""
Persistence adapter for the LinguaLink service.

Stores languages, translations, user profiles and conversation sessions as
objects in a Cosmic bucket (or an in-memory store when none is configured).
"""

from .cosmic_client import CosmicClient
from .errors import ObjectStoreError, PersistenceError
from .factory import create_object_store
from .interface import ObjectStore
from .memory import InMemoryObjectStore
from .models import (
    ConversationMessage,
    ConversationParticipants,
    ConversationRecord,
    Language,
    ObjectType,
    SessionStatus,
    Theme,
    Translation,
    TranslationMethod,
    UserProfile,
)
from .repository import TranslationRepository

__all__ = [
    # Repository
    "TranslationRepository",
    # Stores
    "ObjectStore",
    "CosmicClient",
    "InMemoryObjectStore",
    "create_object_store",
    # Errors
    "ObjectStoreError",
    "PersistenceError",
    # Models
    "ConversationMessage",
    "ConversationParticipants",
    "ConversationRecord",
    "Language",
    "ObjectType",
    "SessionStatus",
    "Theme",
    "Translation",
    "TranslationMethod",
    "UserProfile",
]
