"""
Name: Dependency Injection Container

Responsibilities:
  - Wire up dependencies for the application
  - Provide factory functions for use cases
  - Manage singleton instances of the LLM service and prompt library
  - Enable dependency injection in FastAPI endpoints

Collaborators:
  - infrastructure.services: GoogleLLMService, FakeLLMService
  - infrastructure.prompts: PromptLibrary
  - application.use_cases: tweet and tutor use cases
  - FastAPI Depends(): Dependency injection mechanism

Constraints:
  - Manual DI (no library like dependency-injector)
  - Singletons via functools.lru_cache
  - Environment-based configuration

Notes:
  - This is the composition root (where dependencies are wired)
  - The Gemini client is created once here and shared by every request
"""

from functools import lru_cache

from .application.tutor_prompts import TutorPrompts
from .application.use_cases import (
    AnalyzeSummaryUseCase,
    AnswerQuestionUseCase,
    CreateThreadUseCase,
    CreateTweetUseCase,
    EditWithLocksUseCase,
    GenerateIdealSummaryUseCase,
    OperateOnTargetUseCase,
    ReanalyzeSummaryUseCase,
)
from .config import get_settings
from .domain.services import LLMService
from .infrastructure.prompts import get_prompt_library
from .infrastructure.services import FakeLLMService, GoogleLLMService


# R: LLM service factory (singleton)
@lru_cache
def get_llm_service() -> LLMService:
    """
    R: Get singleton instance of LLM service.

    Returns:
        FakeLLMService when FAKE_LLM=1, otherwise GoogleLLMService
    """
    settings = get_settings()
    if settings.fake_llm:
        return FakeLLMService()
    return GoogleLLMService(
        api_key=settings.google_api_key,
        model_id=settings.gemini_model_id,
    )


@lru_cache
def get_tutor_prompts() -> TutorPrompts:
    return TutorPrompts(get_prompt_library())


# R: Tweet use case factories (new instance per request)
def get_create_tweet_use_case() -> CreateTweetUseCase:
    return CreateTweetUseCase(llm_service=get_llm_service())


def get_edit_with_locks_use_case() -> EditWithLocksUseCase:
    return EditWithLocksUseCase(llm_service=get_llm_service())


def get_operate_on_target_use_case() -> OperateOnTargetUseCase:
    return OperateOnTargetUseCase(llm_service=get_llm_service())


def get_create_thread_use_case() -> CreateThreadUseCase:
    return CreateThreadUseCase(llm_service=get_llm_service())


# R: Tutor use case factories
def get_analyze_summary_use_case() -> AnalyzeSummaryUseCase:
    return AnalyzeSummaryUseCase(
        llm_service=get_llm_service(), prompts=get_tutor_prompts()
    )


def get_reanalyze_summary_use_case() -> ReanalyzeSummaryUseCase:
    return ReanalyzeSummaryUseCase(
        llm_service=get_llm_service(), prompts=get_tutor_prompts()
    )


def get_generate_ideal_summary_use_case() -> GenerateIdealSummaryUseCase:
    """
    R: Create GenerateIdealSummaryUseCase.

    Notes:
        - Extended variant token budget comes from EXTENDED_SUMMARY_MAX_TOKENS
    """
    return GenerateIdealSummaryUseCase(
        llm_service=get_llm_service(),
        prompts=get_tutor_prompts(),
        extended_max_tokens=get_settings().extended_summary_max_tokens,
    )


def get_answer_question_use_case() -> AnswerQuestionUseCase:
    return AnswerQuestionUseCase(
        llm_service=get_llm_service(), prompts=get_tutor_prompts()
    )
