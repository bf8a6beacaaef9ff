"""
Domain Layer

Business entities, pure text rules and the text-generation port.
"""

from .entities import (
    Attempt,
    ConversationMessage,
    FeedbackHistory,
    LLMMessage,
    PreviousAttempt,
)
from .notes import ImageAttachment, TextOnly, TextWithImages, UserNotes, normalize_notes
from .segments import LockMatch, Segment, compute_segments
from .services import GenerationRequest, LLMService
from .tweets import TWEET_MAX_CHARS, TargetOperation, enforce_tweet_length

__all__ = [
    "Attempt",
    "ConversationMessage",
    "FeedbackHistory",
    "GenerationRequest",
    "ImageAttachment",
    "LLMMessage",
    "LLMService",
    "LockMatch",
    "PreviousAttempt",
    "Segment",
    "TWEET_MAX_CHARS",
    "TargetOperation",
    "TextOnly",
    "TextWithImages",
    "UserNotes",
    "compute_segments",
    "enforce_tweet_length",
    "normalize_notes",
]
