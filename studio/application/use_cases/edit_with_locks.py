"""
Name: Edit With Locks Use Case

Responsibilities:
  - Regenerate the current draft while keeping locked substrings verbatim
  - Enforce the 280-character limit on the result

Collaborators:
  - application.tweet_prompts.build_edit_with_locks
  - domain.services.LLMService

Notes:
  - Lock preservation is requested, not verified; output is accepted as-is
    apart from truncation
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.services import LLMService
from ...domain.tweets import TweetResult, enforce_tweet_length
from ...logger import logger
from ..tweet_prompts import build_edit_with_locks


@dataclass
class EditWithLocksInput:
    """
    R: Input data for EditWithLocks use case.

    Attributes:
        previous: Current full draft
        locked: Substrings that must survive verbatim
        idea: Optional topic to keep the regeneration on track
    """

    previous: str
    locked: List[str] = field(default_factory=list)
    idea: Optional[str] = None


class EditWithLocksUseCase:
    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    def execute(self, input_data: EditWithLocksInput) -> TweetResult:
        prompt = build_edit_with_locks(
            previous=input_data.previous,
            locked=input_data.locked,
            idea=input_data.idea,
        )
        text = self.llm_service.generate_text(prompt)
        tweet = enforce_tweet_length(text)

        logger.info(
            "tweet regenerated with locks",
            extra={"lock_count": len(input_data.locked), "truncated": tweet != text},
        )
        return TweetResult(tweet=tweet, truncated=tweet != text)
