"""Data models for quiz sessions."""

from .quiz import (
    AnswerMap,
    Question,
    QuestionResult,
    QuizData,
    # Service response models
    QuizResponse,
    ScoreBand,
    ScoreReport,
    SummaryResponse,
)

__all__ = [
    "AnswerMap",
    "Question",
    "QuizData",
    "QuestionResult",
    "ScoreBand",
    "ScoreReport",
    "SummaryResponse",
    "QuizResponse",
]
