"""
Name: Domain Entities

Responsibilities:
  - Define the messages exchanged with the text-generation port
  - Define tutor conversation turns and graded attempts
  - Keep the attempt history helper used to build re-analysis payloads

Collaborators:
  - domain.services.LLMService: consumes LLMMessage
  - application.tutor_prompts: renders PreviousAttempt / ConversationMessage
  - application.use_cases: build LLMMessage lists for multimodal calls

Constraints:
  - Pure Python dataclasses (no framework dependencies)
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Literal

from .notes import ImageAttachment, UserNotes, normalize_notes

Role = Literal["system", "user", "assistant"]
ConversationRole = Literal["user", "assistant"]


@dataclass(frozen=True)
class LLMMessage:
    """
    R: One message in a chat-style generation request.

    Attributes:
        role: system | user | assistant
        text: Text content (may be empty when only images are sent)
        images: Inline images (user messages only)
    """

    role: Role
    text: str = ""
    images: list[ImageAttachment] = field(default_factory=list)


@dataclass(frozen=True)
class ConversationMessage:
    role: ConversationRole
    content: str


@dataclass(frozen=True)
class PreviousAttempt:
    """R: What the re-analysis prompt needs from an earlier submission."""

    notes: str
    score: float
    feedback: str


@dataclass(frozen=True)
class Attempt:
    """R: A graded submission in the tutor loop."""

    notes: UserNotes
    score: float
    feedback: str
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    timestamp: float = 0.0

    def as_previous(self) -> PreviousAttempt:
        return PreviousAttempt(
            notes=normalize_notes(self.notes).text,
            score=self.score,
            feedback=self.feedback,
        )


class FeedbackHistory:
    """
    R: Ordered log of graded attempts for one reading session.

    Client-side helper: the API is stateless, so a caller keeps one of these
    per session and sends previous_attempts() with each re-analysis. The
    server rebuilds the same payload from the request through
    Attempt.as_previous(). In-memory only; discarded with the session.
    """

    def __init__(self, clock=time.time) -> None:
        self._attempts: list[Attempt] = []
        self._clock = clock

    @property
    def attempts(self) -> list[Attempt]:
        return list(self._attempts)

    def add(self, attempt: Attempt) -> Attempt:
        stamped = replace(attempt, timestamp=self._clock() * 1000)
        self._attempts.append(stamped)
        return stamped

    def clear(self) -> None:
        self._attempts.clear()

    def latest(self) -> Attempt | None:
        return self._attempts[-1] if self._attempts else None

    def previous_attempts(self) -> list[PreviousAttempt]:
        return [attempt.as_previous() for attempt in self._attempts]

    def __len__(self) -> int:
        return len(self._attempts)
