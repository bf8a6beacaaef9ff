"""
Name: Reanalyze Summary Use Case

Responsibilities:
  - Re-grade an improved summary with the earlier attempts as context
  - Produce a progress note comparing against previous attempts

Collaborators:
  - application.tutor_prompts.TutorPrompts.build_reanalysis_prompt
  - application.schemas.Reanalysis
  - domain.entities.PreviousAttempt (notes already flattened to text)
"""

from dataclasses import dataclass, field
from typing import List

from ...domain.entities import PreviousAttempt
from ...domain.notes import UserNotes, normalize_notes
from ...domain.services import LLMService
from ...logger import logger
from ..multimodal import system_and_user
from ..schemas import Reanalysis
from ..tutor_prompts import TutorPrompts


@dataclass
class ReanalyzeSummaryInput:
    chapter_text: str
    user_notes: UserNotes
    previous_attempts: List[PreviousAttempt] = field(default_factory=list)


class ReanalyzeSummaryUseCase:
    def __init__(self, llm_service: LLMService, prompts: TutorPrompts):
        self.llm_service = llm_service
        self.prompts = prompts

    def execute(self, input_data: ReanalyzeSummaryInput) -> Reanalysis:
        notes = normalize_notes(input_data.user_notes)
        prompt = self.prompts.build_reanalysis_prompt(
            chapter_text=input_data.chapter_text,
            user_notes=notes.text,
            previous_attempts=input_data.previous_attempts,
        )

        if notes.has_images:
            request = system_and_user(prompt, notes.text, notes)
        else:
            request = prompt

        result = self.llm_service.generate_structured(request, Reanalysis)

        logger.info(
            "summary reanalyzed",
            extra={
                "score": result.score,
                "previous_attempts": len(input_data.previous_attempts),
                "image_count": len(notes.images),
            },
        )
        return result
