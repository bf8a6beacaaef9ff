"""Application use cases"""

from .analyze_summary import AnalyzeSummaryInput, AnalyzeSummaryUseCase
from .answer_question import AnswerQuestionInput, AnswerQuestionUseCase
from .create_thread import CreateThreadInput, CreateThreadUseCase
from .create_tweet import CreateTweetInput, CreateTweetUseCase
from .edit_with_locks import EditWithLocksInput, EditWithLocksUseCase
from .generate_ideal_summary import (
    GenerateIdealSummaryInput,
    GenerateIdealSummaryUseCase,
    IdealSummaryVariant,
)
from .operate_on_target import OperateOnTargetInput, OperateOnTargetUseCase
from .reanalyze_summary import ReanalyzeSummaryInput, ReanalyzeSummaryUseCase

__all__ = [
    "AnalyzeSummaryInput",
    "AnalyzeSummaryUseCase",
    "AnswerQuestionInput",
    "AnswerQuestionUseCase",
    "CreateThreadInput",
    "CreateThreadUseCase",
    "CreateTweetInput",
    "CreateTweetUseCase",
    "EditWithLocksInput",
    "EditWithLocksUseCase",
    "GenerateIdealSummaryInput",
    "GenerateIdealSummaryUseCase",
    "IdealSummaryVariant",
    "OperateOnTargetInput",
    "OperateOnTargetUseCase",
    "ReanalyzeSummaryInput",
    "ReanalyzeSummaryUseCase",
]
