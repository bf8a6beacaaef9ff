"""
Name: Generate Ideal Summary Use Case

Responsibilities:
  - Produce an example summary the reader can compare against
  - Offer three variants: concise bullets, extended (structured) and
    extended as plain text

Collaborators:
  - application.tutor_prompts.TutorPrompts
  - application.schemas.IdealSummary
  - domain.services.LLMService

Notes:
  - extended raises the output token budget (long answers get cut otherwise)
  - extended_text skips JSON mode and appends a do-not-truncate instruction
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ...domain.services import LLMService
from ...logger import logger
from ..schemas import IdealSummary
from ..tutor_prompts import TutorPrompts

DEFAULT_EXTENDED_MAX_TOKENS = 8192


class IdealSummaryVariant(str, Enum):
    CONCISE = "concise"
    EXTENDED = "extended"
    EXTENDED_TEXT = "extended_text"


@dataclass
class GenerateIdealSummaryInput:
    chapter_text: str
    user_attempts: List[str] = field(default_factory=list)
    variant: IdealSummaryVariant = IdealSummaryVariant.CONCISE


class GenerateIdealSummaryUseCase:
    def __init__(
        self,
        llm_service: LLMService,
        prompts: TutorPrompts,
        extended_max_tokens: int = DEFAULT_EXTENDED_MAX_TOKENS,
    ):
        self.llm_service = llm_service
        self.prompts = prompts
        self.extended_max_tokens = extended_max_tokens

    def execute(self, input_data: GenerateIdealSummaryInput) -> IdealSummary:
        variant = IdealSummaryVariant(input_data.variant)
        chapter_text = input_data.chapter_text
        attempts = input_data.user_attempts

        if variant is IdealSummaryVariant.CONCISE:
            prompt = self.prompts.build_ideal_summary_prompt_concise(chapter_text, attempts)
            result = self.llm_service.generate_structured(prompt, IdealSummary)
        elif variant is IdealSummaryVariant.EXTENDED:
            prompt = self.prompts.build_ideal_summary_prompt_extended(chapter_text, attempts)
            result = self.llm_service.generate_structured(
                prompt, IdealSummary, max_output_tokens=self.extended_max_tokens
            )
        else:
            prompt = self.prompts.build_extended_text_prompt(chapter_text, attempts)
            text = self.llm_service.generate_text(prompt)
            result = IdealSummary(ideal_summary=text)

        logger.info(
            "ideal summary generated",
            extra={
                "variant": variant.value,
                "attempts": len(attempts),
                "summary_chars": len(result.ideal_summary),
            },
        )
        return result
