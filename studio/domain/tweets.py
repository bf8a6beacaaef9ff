"""
Name: Tweet Rules

Responsibilities:
  - Hold the tweet length limit shared by prompts and post-processing
  - Truncate generated text that exceeds the limit
  - Name the single-target operations (rephrase, condense)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

TWEET_MAX_CHARS = 280

DEFAULT_THREAD_COUNT = 5
MIN_THREAD_COUNT = 2
MAX_THREAD_COUNT = 20


class TargetOperation(str, Enum):
    """User-requested edit scoped to one substring of the draft."""

    REPHRASE = "rephrase"
    CONDENSE = "condense"


def enforce_tweet_length(text: str, limit: int = TWEET_MAX_CHARS) -> str:
    """R: Hard cut at `limit` characters; shorter text is returned untouched."""
    return text[:limit] if len(text) > limit else text


@dataclass(frozen=True)
class TweetResult:
    tweet: str
    truncated: bool = False


@dataclass(frozen=True)
class ThreadResult:
    tweets: list[str] = field(default_factory=list)
