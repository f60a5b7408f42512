"""
Input acquisition and conversation sessions.

Exports:
    - Debouncer: Trailing-edge debounce for async callbacks
    - TranslationInputController: Translate-as-you-type state machine
    - ConversationSession: Two-person translated conversation
"""

from .conversation import ConversationSession, generate_session_id
from .debounce import Debouncer
from .input_controller import TranslationInputController

__all__ = [
    "ConversationSession",
    "Debouncer",
    "TranslationInputController",
    "generate_session_id",
]
