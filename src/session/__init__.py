"""Quiz session state: store, controller, scoring and flow."""

from .controller import QuestionStatus, QuizSessionController, SessionState
from .flow import generate_quiz, restart_quiz, score_session, summarize_document
from .scoring import compute_score_report, score_band, score_message
from .store import SessionStore

__all__ = [
    "SessionStore",
    "QuizSessionController",
    "SessionState",
    "QuestionStatus",
    "compute_score_report",
    "score_band",
    "score_message",
    "summarize_document",
    "generate_quiz",
    "restart_quiz",
    "score_session",
]
