"""
Name: Operate On Target Use Case

Responsibilities:
  - Rephrase or condense one selected span of the draft
  - Keep the other locked substrings in the prompt
  - Enforce the 280-character limit on the returned full tweet

Collaborators:
  - application.tweet_prompts.build_target_operation
  - domain.services.LLMService
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.services import LLMService
from ...domain.tweets import TargetOperation, TweetResult, enforce_tweet_length
from ...logger import logger
from ..tweet_prompts import build_target_operation


@dataclass
class OperateOnTargetInput:
    previous: str
    target: str
    operation: TargetOperation
    locked: List[str] = field(default_factory=list)
    idea: Optional[str] = None


class OperateOnTargetUseCase:
    """R: Scoped rewrite of a single target substring."""

    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    def execute(self, input_data: OperateOnTargetInput) -> TweetResult:
        # R: the span being rewritten cannot also be locked
        locked = [lock for lock in input_data.locked if lock != input_data.target]

        prompt = build_target_operation(
            previous=input_data.previous,
            target=input_data.target,
            operation=input_data.operation,
            locked=locked,
            idea=input_data.idea,
        )
        text = self.llm_service.generate_text(prompt)
        tweet = enforce_tweet_length(text)

        logger.info(
            "target operation applied",
            extra={
                "operation": TargetOperation(input_data.operation).value,
                "lock_count": len(locked),
                "truncated": tweet != text,
            },
        )
        return TweetResult(tweet=tweet, truncated=tweet != text)
