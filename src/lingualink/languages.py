"""
Static language reference data.

Provides the fallback language list served when the object store holds no
languages, display flags, and the popular language pairs offered for quick
access.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from lingualink.persistence.models import Language, LanguageMetadata, TranslationQuality

DEFAULT_FLAG = "\U0001F310"  # globe with meridians

LANGUAGE_FLAGS: dict[str, str] = {
    "English": "\U0001F1FA\U0001F1F8",
    "Spanish": "\U0001F1EA\U0001F1F8",
    "French": "\U0001F1EB\U0001F1F7",
    "German": "\U0001F1E9\U0001F1EA",
    "Italian": "\U0001F1EE\U0001F1F9",
    "Portuguese": "\U0001F1F5\U0001F1F9",
    "Russian": "\U0001F1F7\U0001F1FA",
    "Chinese": "\U0001F1E8\U0001F1F3",
    "Japanese": "\U0001F1EF\U0001F1F5",
    "Korean": "\U0001F1F0\U0001F1F7",
    "Arabic": "\U0001F1F8\U0001F1E6",
    "Hindi": "\U0001F1EE\U0001F1F3",
    "Dutch": "\U0001F1F3\U0001F1F1",
    "Swedish": "\U0001F1F8\U0001F1EA",
    "Norwegian": "\U0001F1F3\U0001F1F4",
    "Danish": "\U0001F1E9\U0001F1F0",
    "Finnish": "\U0001F1EB\U0001F1EE",
    "Polish": "\U0001F1F5\U0001F1F1",
    "Czech": "\U0001F1E8\U0001F1FF",
    "Hungarian": "\U0001F1ED\U0001F1FA",
    "Romanian": "\U0001F1F7\U0001F1F4",
    "Bulgarian": "\U0001F1E7\U0001F1EC",
    "Croatian": "\U0001F1ED\U0001F1F7",
    "Serbian": "\U0001F1F7\U0001F1F8",
    "Slovak": "\U0001F1F8\U0001F1F0",
    "Slovenian": "\U0001F1F8\U0001F1EE",
    "Estonian": "\U0001F1EA\U0001F1EA",
    "Latvian": "\U0001F1F1\U0001F1FB",
    "Lithuanian": "\U0001F1F1\U0001F1F9",
    "Greek": "\U0001F1EC\U0001F1F7",
    "Turkish": "\U0001F1F9\U0001F1F7",
    "Hebrew": "\U0001F1EE\U0001F1F1",
    "Thai": "\U0001F1F9\U0001F1ED",
    "Vietnamese": "\U0001F1FB\U0001F1F3",
    "Indonesian": "\U0001F1EE\U0001F1E9",
    "Malay": "\U0001F1F2\U0001F1FE",
    "Tagalog": "\U0001F1F5\U0001F1ED",
}

# (display name, code, native name) served when the store has no languages
_FALLBACK_LANGUAGES: list[tuple[str, str, str]] = [
    ("English", "en", "English"),
    ("Spanish", "es", "Español"),
    ("French", "fr", "Français"),
    ("German", "de", "Deutsch"),
    ("Chinese", "zh", "中文"),
    ("Japanese", "ja", "日本語"),
]


@dataclass(frozen=True)
class LanguagePair:
    """A source/target pair offered for quick selection."""

    source: str
    target: str
    label: str


POPULAR_LANGUAGE_PAIRS: list[LanguagePair] = [
    LanguagePair("English", "Spanish", "EN → ES"),
    LanguagePair("English", "French", "EN → FR"),
    LanguagePair("English", "German", "EN → DE"),
    LanguagePair("English", "Chinese", "EN → ZH"),
    LanguagePair("Spanish", "English", "ES → EN"),
    LanguagePair("French", "English", "FR → EN"),
    LanguagePair("German", "English", "DE → EN"),
    LanguagePair("Chinese", "English", "ZH → EN"),
]


def get_language_flag(language: str) -> str:
    """Return the flag glyph for a language name, a globe if unknown."""
    return LANGUAGE_FLAGS.get(language, DEFAULT_FLAG)


def get_popular_language_pairs() -> list[LanguagePair]:
    return list(POPULAR_LANGUAGE_PAIRS)


def fallback_languages() -> list[Language]:
    """Build the hardcoded language list used when the store is empty."""
    now = datetime.now(timezone.utc)
    return [
        Language(
            id=str(index),
            slug=name.lower(),
            title=name,
            created_at=now,
            modified_at=now,
            metadata=LanguageMetadata(
                code=code,
                native_name=native_name,
                flag_emoji=get_language_flag(name),
                voice_supported=True,
                translation_quality=TranslationQuality.HIGH,
            ),
        )
        for index, (name, code, native_name) in enumerate(_FALLBACK_LANGUAGES, start=1)
    ]
