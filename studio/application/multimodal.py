"""
Name: Multimodal Message Assembly

Responsibilities:
  - Turn a tutor prompt plus image-bearing notes into chat messages
  - Keep the text-only path as a single prompt string

Collaborators:
  - application.use_cases (analyze, reanalyze, answer)
  - domain.entities.LLMMessage
"""

from __future__ import annotations

from typing import Sequence

from ..domain.entities import ConversationMessage, LLMMessage
from ..domain.notes import TextWithImages


def system_and_user(
    system_prompt: str, user_text: str, notes: TextWithImages
) -> list[LLMMessage]:
    """R: [system prompt, user text + every image from the notes]."""
    return [
        LLMMessage(role="system", text=system_prompt),
        LLMMessage(role="user", text=user_text, images=list(notes.images)),
    ]


def with_history(
    system_prompt: str,
    history: Sequence[ConversationMessage],
    question: str,
    notes: TextWithImages,
) -> list[LLMMessage]:
    """R: System prompt, prior turns, then the question carrying the note images."""
    return [
        LLMMessage(role="system", text=system_prompt),
        *(LLMMessage(role=turn.role, text=turn.content) for turn in history),
        LLMMessage(role="user", text=question, images=list(notes.images)),
    ]
