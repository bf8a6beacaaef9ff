"""
Name: Create Tweet Use Case

Responsibilities:
  - Draft a first tweet from the user's idea
  - Enforce the 280-character limit on whatever the model returns

Collaborators:
  - application.tweet_prompts.build_initial_tweet
  - domain.services.LLMService
  - domain.tweets.enforce_tweet_length
"""

from dataclasses import dataclass

from ...domain.services import LLMService
from ...domain.tweets import TweetResult, enforce_tweet_length
from ...logger import logger
from ..tweet_prompts import build_initial_tweet


@dataclass
class CreateTweetInput:
    idea: str


class CreateTweetUseCase:
    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    def execute(self, input_data: CreateTweetInput) -> TweetResult:
        prompt = build_initial_tweet(input_data.idea)
        text = self.llm_service.generate_text(prompt)
        tweet = enforce_tweet_length(text)

        logger.info(
            "tweet created",
            extra={"raw_chars": len(text), "truncated": tweet != text},
        )
        return TweetResult(tweet=tweet, truncated=tweet != text)
