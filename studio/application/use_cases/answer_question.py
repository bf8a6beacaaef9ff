"""
Name: Answer Question Use Case

Responsibilities:
  - Answer a follow-up question about the chapter in the tutor's voice
  - Replay the conversation so far as chat turns when images are attached

Collaborators:
  - application.tutor_prompts.TutorPrompts.build_conversation_prompt
  - domain.services.LLMService.generate_text
"""

from dataclasses import dataclass, field
from typing import List

from ...domain.entities import ConversationMessage
from ...domain.notes import UserNotes, normalize_notes
from ...domain.services import LLMService
from ...logger import logger
from ..multimodal import with_history
from ..tutor_prompts import TutorPrompts


@dataclass
class AnswerQuestionInput:
    """
    R: Input data for AnswerQuestion use case.

    Attributes:
        chapter_text: Chapter being studied
        user_notes: The reader's current summary (text or text + images)
        question: The new question
        conversation_history: Earlier student/tutor turns, oldest first
    """

    chapter_text: str
    user_notes: UserNotes
    question: str
    conversation_history: List[ConversationMessage] = field(default_factory=list)


class AnswerQuestionUseCase:
    def __init__(self, llm_service: LLMService, prompts: TutorPrompts):
        self.llm_service = llm_service
        self.prompts = prompts

    def execute(self, input_data: AnswerQuestionInput) -> str:
        notes = normalize_notes(input_data.user_notes)
        prompt = self.prompts.build_conversation_prompt(
            chapter_text=input_data.chapter_text,
            user_notes=notes.text,
            history=input_data.conversation_history,
            question=input_data.question,
        )

        if notes.has_images:
            request = with_history(
                prompt, input_data.conversation_history, input_data.question, notes
            )
        else:
            request = prompt

        answer = self.llm_service.generate_text(request)

        logger.info(
            "question answered",
            extra={
                "history_turns": len(input_data.conversation_history),
                "image_count": len(notes.images),
                "answer_chars": len(answer),
            },
        )
        return answer
