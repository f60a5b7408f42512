"""
Language name to speech locale mapping.

Recognition and synthesis engines expect BCP 47 locale tags; the rest of the
service speaks in display names ("English", "Spanish"). Unmapped names fall
back to DEFAULT_LOCALE.
"""

DEFAULT_LOCALE = "en-US"

SPEECH_LOCALES: dict[str, str] = {
    "English": "en-US",
    "Spanish": "es-ES",
    "French": "fr-FR",
    "German": "de-DE",
    "Italian": "it-IT",
    "Portuguese": "pt-BR",
    "Russian": "ru-RU",
    "Chinese": "zh-CN",
    "Japanese": "ja-JP",
    "Korean": "ko-KR",
    "Arabic": "ar-SA",
    "Hindi": "hi-IN",
}


def get_locale_code(language: str) -> str:
    """Return the locale tag for a language name, DEFAULT_LOCALE if unknown."""
    return SPEECH_LOCALES.get(language, DEFAULT_LOCALE)


def locale_prefix(locale: str) -> str:
    """Return the primary language subtag ("en" for "en-US")."""
    return locale.split("-", 1)[0].lower()
