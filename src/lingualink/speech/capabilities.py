"""
Speech capability negotiation.
"""

from .interface import RecognitionEngine, SynthesisEngine
from .models import SpeechSupport


def get_speech_support(
    recognition_engine: RecognitionEngine | None = None,
    synthesis_engine: SynthesisEngine | None = None,
) -> SpeechSupport:
    """Report which speech features the environment provides.

    Computed once at startup; features whose flag is False are disabled by
    callers rather than attempted.
    """
    return SpeechSupport(
        recognition=recognition_engine is not None and recognition_engine.is_available,
        synthesis=synthesis_engine is not None and synthesis_engine.is_available,
    )
