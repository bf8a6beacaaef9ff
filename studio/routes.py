"""
Name: Writing Studio API Controllers

Responsibilities:
  - Expose HTTP endpoints for the tweet creator and the reading tutor
  - Delegate business logic to application use cases (Clean Architecture)
  - Validate requests and serialize responses using Pydantic models
  - Lift the notes payload (plain string or {text, images}) into domain notes

Collaborators:
  - application.use_cases: tweet and tutor use cases
  - container: Dependency providers for use cases
  - domain.segments.compute_segments: lock highlighting

Constraints:
  - Synchronous endpoints (FastAPI runs them in its threadpool)
  - Limits come from Settings at import time

Notes:
  - This module stays thin (controllers only)
  - Business logic lives in application/use_cases
"""

from typing import Literal, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from .application.schemas import Analysis, IdealSummary, Reanalysis
from .application.use_cases import (
    AnalyzeSummaryInput,
    AnalyzeSummaryUseCase,
    AnswerQuestionInput,
    AnswerQuestionUseCase,
    CreateThreadInput,
    CreateThreadUseCase,
    CreateTweetInput,
    CreateTweetUseCase,
    EditWithLocksInput,
    EditWithLocksUseCase,
    GenerateIdealSummaryInput,
    GenerateIdealSummaryUseCase,
    IdealSummaryVariant,
    OperateOnTargetInput,
    OperateOnTargetUseCase,
    ReanalyzeSummaryInput,
    ReanalyzeSummaryUseCase,
)
from .config import get_settings
from .container import (
    get_analyze_summary_use_case,
    get_answer_question_use_case,
    get_create_thread_use_case,
    get_create_tweet_use_case,
    get_edit_with_locks_use_case,
    get_generate_ideal_summary_use_case,
    get_operate_on_target_use_case,
    get_reanalyze_summary_use_case,
)
from .domain.entities import Attempt, ConversationMessage
from .domain.notes import (
    ImageAttachment,
    TextOnly,
    TextWithImages,
    UserNotes,
    parse_data_url,
)
from .domain.segments import compute_segments
from .domain.tweets import (
    DEFAULT_THREAD_COUNT,
    MAX_THREAD_COUNT,
    MIN_THREAD_COUNT,
    TargetOperation,
)
from .error_responses import OPENAPI_ERROR_RESPONSES

# R: Create API router for studio endpoints
router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

# R: Limits are loaded from Settings at module load time for Pydantic schema
_settings = get_settings()


# =============================================================================
# Tweet creator
# =============================================================================


class SegmentsReq(BaseModel):
    text: str = Field(..., max_length=_settings.max_draft_chars)
    locks: list[str] = Field(default_factory=list)


class SegmentRes(BaseModel):
    text: str
    locked: bool


class SegmentsRes(BaseModel):
    segments: list[SegmentRes]


@router.post("/tweets/segments", response_model=SegmentsRes, tags=["tweets"])
def tweet_segments(req: SegmentsReq):
    """R: Split the draft into locked/unlocked runs for highlighting."""
    segments = compute_segments(req.text, req.locks)
    return SegmentsRes(
        segments=[SegmentRes(text=s.text, locked=s.locked) for s in segments]
    )


class CreateTweetReq(BaseModel):
    idea: str = Field(..., min_length=1, max_length=_settings.max_idea_chars)


class TweetRes(BaseModel):
    tweet: str  # R: Generated tweet, at most 280 characters


@router.post("/tweets", response_model=TweetRes, tags=["tweets"])
def create_tweet(
    req: CreateTweetReq,
    use_case: CreateTweetUseCase = Depends(get_create_tweet_use_case),
):
    result = use_case.execute(CreateTweetInput(idea=req.idea))
    return TweetRes(tweet=result.tweet)


class EditWithLocksReq(BaseModel):
    previous: str = Field(..., min_length=1, max_length=_settings.max_draft_chars)
    locked: list[str] = Field(default_factory=list)
    idea: Optional[str] = Field(default=None, max_length=_settings.max_idea_chars)


@router.post("/tweets/edit", response_model=TweetRes, tags=["tweets"])
def edit_with_locks(
    req: EditWithLocksReq,
    use_case: EditWithLocksUseCase = Depends(get_edit_with_locks_use_case),
):
    result = use_case.execute(
        EditWithLocksInput(previous=req.previous, locked=req.locked, idea=req.idea)
    )
    return TweetRes(tweet=result.tweet)


class OperateOnTargetReq(BaseModel):
    previous: str = Field(..., min_length=1, max_length=_settings.max_draft_chars)
    target: str = Field(..., min_length=1, max_length=_settings.max_draft_chars)
    operation: TargetOperation
    locked: list[str] = Field(default_factory=list)
    idea: Optional[str] = Field(default=None, max_length=_settings.max_idea_chars)


@router.post("/tweets/target", response_model=TweetRes, tags=["tweets"])
def operate_on_target(
    req: OperateOnTargetReq,
    use_case: OperateOnTargetUseCase = Depends(get_operate_on_target_use_case),
):
    result = use_case.execute(
        OperateOnTargetInput(
            previous=req.previous,
            target=req.target,
            operation=req.operation,
            locked=req.locked,
            idea=req.idea,
        )
    )
    return TweetRes(tweet=result.tweet)


class ThreadReq(BaseModel):
    idea: str = Field(..., min_length=1, max_length=_settings.max_idea_chars)
    count: int = Field(
        default=DEFAULT_THREAD_COUNT, ge=MIN_THREAD_COUNT, le=MAX_THREAD_COUNT
    )
    style: Optional[str] = Field(default=None, max_length=_settings.max_idea_chars)


class ThreadTweetRes(BaseModel):
    text: str


class ThreadRes(BaseModel):
    tweets: list[ThreadTweetRes]


@router.post("/tweets/thread", response_model=ThreadRes, tags=["tweets"])
def create_thread(
    req: ThreadReq,
    use_case: CreateThreadUseCase = Depends(get_create_thread_use_case),
):
    result = use_case.execute(
        CreateThreadInput(idea=req.idea, count=req.count, style=req.style)
    )
    return ThreadRes(tweets=[ThreadTweetRes(text=text) for text in result.tweets])


# =============================================================================
# Reading tutor
# =============================================================================


class ImageReq(BaseModel):
    id: str = Field(..., min_length=1)
    data: str = Field(..., description="Base64 data URL of the image")
    name: Optional[str] = None
    size: Optional[int] = Field(default=None, ge=0)

    @field_validator("data")
    @classmethod
    def must_be_data_url(cls, v: str) -> str:
        parse_data_url(v)
        return v


class NotesReq(BaseModel):
    text: str = Field(..., max_length=_settings.max_notes_chars)
    images: list[ImageReq] = Field(default_factory=list, max_length=_settings.max_images)


# R: plain string or {text, images}
NotesField = Union[str, NotesReq]


def _to_notes(notes: NotesField) -> UserNotes:
    """R: Plain string -> TextOnly, object -> TextWithImages."""
    if isinstance(notes, str):
        return TextOnly(text=notes)
    return TextWithImages(
        text=notes.text,
        images=[
            ImageAttachment(id=img.id, data=img.data, name=img.name, size=img.size)
            for img in notes.images
        ],
    )


class AnalyzeReq(BaseModel):
    chapter_text: str = Field(..., min_length=1, max_length=_settings.max_chapter_chars)
    user_notes: NotesField

    @field_validator("user_notes")
    @classmethod
    def notes_within_limit(cls, v: NotesField) -> NotesField:
        if isinstance(v, str) and len(v) > _settings.max_notes_chars:
            raise ValueError(f"user_notes must be at most {_settings.max_notes_chars} characters")
        return v


@router.post("/tutor/analyze", response_model=Analysis, tags=["tutor"])
def analyze_summary(
    req: AnalyzeReq,
    use_case: AnalyzeSummaryUseCase = Depends(get_analyze_summary_use_case),
):
    return use_case.execute(
        AnalyzeSummaryInput(
            chapter_text=req.chapter_text, user_notes=_to_notes(req.user_notes)
        )
    )


class PreviousAttemptReq(BaseModel):
    notes: NotesField
    score: float
    feedback: str


class ReanalyzeReq(AnalyzeReq):
    previous_attempts: list[PreviousAttemptReq] = Field(default_factory=list)


@router.post("/tutor/reanalyze", response_model=Reanalysis, tags=["tutor"])
def reanalyze_summary(
    req: ReanalyzeReq,
    use_case: ReanalyzeSummaryUseCase = Depends(get_reanalyze_summary_use_case),
):
    # R: earlier attempts only contribute their text to the prompt
    previous = [
        Attempt(
            notes=_to_notes(attempt.notes),
            score=attempt.score,
            feedback=attempt.feedback,
        ).as_previous()
        for attempt in req.previous_attempts
    ]
    return use_case.execute(
        ReanalyzeSummaryInput(
            chapter_text=req.chapter_text,
            user_notes=_to_notes(req.user_notes),
            previous_attempts=previous,
        )
    )


class IdealSummaryReq(BaseModel):
    chapter_text: str = Field(..., min_length=1, max_length=_settings.max_chapter_chars)
    user_attempts: list[str] = Field(default_factory=list)
    variant: IdealSummaryVariant = IdealSummaryVariant.CONCISE


@router.post("/tutor/ideal-summary", response_model=IdealSummary, tags=["tutor"])
def generate_ideal_summary(
    req: IdealSummaryReq,
    use_case: GenerateIdealSummaryUseCase = Depends(get_generate_ideal_summary_use_case),
):
    return use_case.execute(
        GenerateIdealSummaryInput(
            chapter_text=req.chapter_text,
            user_attempts=req.user_attempts,
            variant=req.variant,
        )
    )


class ConversationMessageReq(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class AnswerReq(AnalyzeReq):
    conversation_history: list[ConversationMessageReq] = Field(default_factory=list)
    question: str = Field(..., min_length=1, max_length=_settings.max_notes_chars)


class AnswerRes(BaseModel):
    answer: str


@router.post("/tutor/answer", response_model=AnswerRes, tags=["tutor"])
def answer_question(
    req: AnswerReq,
    use_case: AnswerQuestionUseCase = Depends(get_answer_question_use_case),
):
    answer = use_case.execute(
        AnswerQuestionInput(
            chapter_text=req.chapter_text,
            user_notes=_to_notes(req.user_notes),
            question=req.question,
            conversation_history=[
                ConversationMessage(role=m.role, content=m.content)
                for m in req.conversation_history
            ],
        )
    )
    return AnswerRes(answer=answer)
