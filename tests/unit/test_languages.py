"""
Tests for static language reference data.
"""

from lingualink.languages import (
    DEFAULT_FLAG,
    fallback_languages,
    get_language_flag,
    get_popular_language_pairs,
)


def test_known_flag():
    assert get_language_flag("Japanese") == "\U0001F1EF\U0001F1F5"


def test_unknown_flag_is_globe():
    assert get_language_flag("Klingon") == DEFAULT_FLAG


def test_popular_pairs():
    pairs = get_popular_language_pairs()

    assert len(pairs) == 8
    assert (pairs[0].source, pairs[0].target, pairs[0].label) == ("English", "Spanish", "EN → ES")


def test_popular_pairs_returns_copy():
    get_popular_language_pairs().clear()

    assert len(get_popular_language_pairs()) == 8


def test_fallback_languages():
    languages = fallback_languages()

    assert [language.name for language in languages] == [
        "English",
        "Spanish",
        "French",
        "German",
        "Chinese",
        "Japanese",
    ]
    assert languages[1].metadata.code == "es"
    assert languages[1].metadata.native_name == "Español"
    assert all(language.type == "languages" for language in languages)
