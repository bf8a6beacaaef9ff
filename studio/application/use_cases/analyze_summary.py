"""
Name: Analyze Summary Use Case

Responsibilities:
  - Grade the reader's chapter summary against the rubric
  - Send note images alongside the prompt when present

Collaborators:
  - application.tutor_prompts.TutorPrompts.build_analysis_prompt
  - application.schemas.Analysis
  - domain.services.LLMService.generate_structured

Notes:
  - Text-only notes use a single prompt string
  - Notes with images use [system: prompt, user: text + images]
"""

from dataclasses import dataclass

from ...domain.notes import UserNotes, normalize_notes
from ...domain.services import LLMService
from ...logger import logger
from ..multimodal import system_and_user
from ..schemas import Analysis
from ..tutor_prompts import TutorPrompts


@dataclass
class AnalyzeSummaryInput:
    chapter_text: str
    user_notes: UserNotes


class AnalyzeSummaryUseCase:
    """R: First-pass grading of a chapter summary."""

    def __init__(self, llm_service: LLMService, prompts: TutorPrompts):
        self.llm_service = llm_service
        self.prompts = prompts

    def execute(self, input_data: AnalyzeSummaryInput) -> Analysis:
        notes = normalize_notes(input_data.user_notes)
        prompt = self.prompts.build_analysis_prompt(
            chapter_text=input_data.chapter_text, user_notes=notes.text
        )

        if notes.has_images:
            request = system_and_user(prompt, notes.text, notes)
        else:
            request = prompt

        analysis = self.llm_service.generate_structured(request, Analysis)

        logger.info(
            "summary analyzed",
            extra={
                "score": analysis.score,
                "image_count": len(notes.images),
                "strengths": len(analysis.strengths),
                "improvements": len(analysis.improvements),
            },
        )
        return analysis
