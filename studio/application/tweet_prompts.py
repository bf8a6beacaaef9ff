"""
Name: Tweet Prompt Builders

Responsibilities:
  - Assemble generation instructions for the tweet creator
  - Carry user-locked substrings into the prompt as "preserve verbatim" rules
  - Scope rephrase/condense operations to a single target span

Collaborators:
  - application.use_cases (create_tweet, edit_with_locks, operate_on_target, create_thread)
  - domain.tweets.TargetOperation

Notes:
  - Pure string assembly; the model's compliance is never verified
  - Sections are joined with a blank line; empty sections are dropped
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..domain.tweets import TargetOperation

TWEET_RULES = (
    "Write a concise, engaging tweet under 280 characters. "
    "No emojis. No hashtags unless essential."
)

LOCKS_HEADER = (
    "Preserve the following substrings exactly as written. "
    "Do not modify, remove, or reorder them:"
)

SINGLE_TWEET_INSTRUCTION = "Return a single tweet under 280 characters."

TARGET_SCOPE_INSTRUCTION = (
    "Modify only the first exact occurrence of the TARGET within the current draft. "
    "Return the FULL tweet with the modified target in place. "
    "Do not change any other text besides the target. Keep under 280 characters."
)

OP_INSTRUCTIONS: dict[TargetOperation, str] = {
    TargetOperation.REPHRASE: (
        "Rephrase the following target substring while preserving its meaning:"
    ),
    TargetOperation.CONDENSE: (
        "Condense the following target substring to be shorter while preserving its meaning:"
    ),
}


def with_topic(idea: Optional[str]) -> Optional[str]:
    if idea and idea.strip():
        return "Topic: " + idea
    return None


def with_previous(previous: str) -> str:
    return "Start from this current draft:\n" + previous


def with_locks(locked: Optional[Sequence[str]]) -> Optional[str]:
    if not locked:
        return None
    return "\n".join([LOCKS_HEADER, *("- " + lock for lock in locked)])


def _join(parts: Sequence[Optional[str]]) -> str:
    return "\n\n".join(part for part in parts if part)


def build_initial_tweet(idea: str) -> str:
    """R: Rules + topic."""
    return _join([TWEET_RULES, with_topic(idea)])


def build_edit_with_locks(
    previous: str, locked: Sequence[str], idea: Optional[str] = None
) -> str:
    """R: Regenerate the draft while keeping every locked substring verbatim."""
    return _join(
        [
            TWEET_RULES,
            with_topic(idea),
            with_previous(previous),
            with_locks(locked),
            SINGLE_TWEET_INSTRUCTION,
        ]
    )


def build_target_operation(
    previous: str,
    target: str,
    operation: TargetOperation,
    locked: Optional[Sequence[str]] = None,
    idea: Optional[str] = None,
) -> str:
    """
    R: Rewrite only the first occurrence of `target` inside `previous`.

    The model is asked for the full tweet back, not just the rewritten span.
    """
    return _join(
        [
            TWEET_RULES,
            with_topic(idea),
            with_previous(previous),
            with_locks(locked),
            OP_INSTRUCTIONS[TargetOperation(operation)],
            "TARGET:\n" + target,
            TARGET_SCOPE_INSTRUCTION,
        ]
    )


def build_thread_prompt(idea: str, count: int, style: Optional[str] = None) -> str:
    lines = [
        "Write a Twitter/X thread.",
        "Rules:",
        "- Return ONLY valid JSON matching the provided schema.",
        "- Each tweet MUST be under 280 characters.",
        "- Avoid emojis.",
        "- Avoid hashtags unless essential.",
        f"- Create exactly {count} tweets that flow logically as a thread.",
    ]
    if style and style.strip():
        lines.append("Style: " + style)
    lines.append("Topic: " + idea)
    return "\n".join(lines)
