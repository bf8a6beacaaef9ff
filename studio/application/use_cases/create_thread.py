"""
Name: Create Thread Use Case

Responsibilities:
  - Draft a multi-tweet thread as structured JSON
  - Truncate every tweet to the 280-character limit

Collaborators:
  - application.tweet_prompts.build_thread_prompt
  - application.schemas.Thread
  - domain.services.LLMService.generate_structured

Constraints:
  - count must be within MIN_THREAD_COUNT..MAX_THREAD_COUNT
  - The model may return a different number of tweets; they are kept as-is
"""

from dataclasses import dataclass
from typing import Optional

from ...domain.services import LLMService
from ...domain.tweets import (
    DEFAULT_THREAD_COUNT,
    MAX_THREAD_COUNT,
    MIN_THREAD_COUNT,
    ThreadResult,
    enforce_tweet_length,
)
from ...logger import logger
from ..schemas import Thread
from ..tweet_prompts import build_thread_prompt


@dataclass
class CreateThreadInput:
    idea: str
    count: int = DEFAULT_THREAD_COUNT
    style: Optional[str] = None


class CreateThreadUseCase:
    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    def execute(self, input_data: CreateThreadInput) -> ThreadResult:
        """
        R: Generate a thread of `count` tweets.

        Raises:
            ValueError: If count is outside the allowed range
        """
        if not MIN_THREAD_COUNT <= input_data.count <= MAX_THREAD_COUNT:
            raise ValueError(
                f"count must be between {MIN_THREAD_COUNT} and {MAX_THREAD_COUNT}"
            )

        prompt = build_thread_prompt(
            idea=input_data.idea, count=input_data.count, style=input_data.style
        )
        thread = self.llm_service.generate_structured(prompt, Thread)
        tweets = [enforce_tweet_length(item.text) for item in thread.tweets]

        logger.info(
            "thread created",
            extra={"requested": input_data.count, "returned": len(tweets)},
        )
        return ThreadResult(tweets=tweets)
