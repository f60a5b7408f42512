"""
Speech bridge for the LinguaLink service.

Adapts platform speech recognition and synthesis engines: one recognition
session at a time, awaitable synthesis with a completion timeout, and
capability negotiation at startup.
"""

from .capabilities import get_speech_support
from .interface import RecognitionEngine, SynthesisEngine
from .locales import DEFAULT_LOCALE, SPEECH_LOCALES, get_locale_code
from .models import SpeechSupport, Voice, VoiceSettings
from .recognizer import RECOGNITION_NOT_SUPPORTED, SpeechRecognizer
from .synthesizer import SpeechNotSupportedError, SpeechSynthesisError, SpeechSynthesizer

__all__ = [
    # Adapters
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "get_speech_support",
    # Interface
    "RecognitionEngine",
    "SynthesisEngine",
    # Models
    "SpeechSupport",
    "Voice",
    "VoiceSettings",
    # Locales
    "DEFAULT_LOCALE",
    "SPEECH_LOCALES",
    "get_locale_code",
    # Errors
    "RECOGNITION_NOT_SUPPORTED",
    "SpeechNotSupportedError",
    "SpeechSynthesisError",
]
