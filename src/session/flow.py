"""Session flow - runs the external calls against the session store."""

import logging
from pathlib import Path

from src.api.client import QuizServiceClient
from src.errors import GenerationFailedError, QuizNotLoadedError, RequestInProgressError
from src.models.quiz import QuizData, ScoreReport
from src.session.controller import QuizSessionController
from src.session.scoring import compute_score_report
from src.session.store import SessionStore

logger = logging.getLogger(__name__)


def summarize_document(
    store: SessionStore, client: QuizServiceClient, path: Path
) -> str:
    """
    Upload a document and store its summary in the session.

    The document is validated before the loading flag is touched, so a
    rejected file leaves the session unchanged. The loading flag is always
    cleared again, whatever the outcome of the call.

    Args:
        store: Session store to update
        client: Quiz service client
        path: Document to summarize

    Returns:
        The summary text

    Raises:
        DocumentRejectedError: If the document is rejected or unreadable
        RequestInProgressError: If another request is in flight
        GenerationFailedError: If summarization fails
    """
    mime_type = client.validate_document(path)
    _begin_request(store)
    try:
        response = client.upload_document(path, mime_type)
        store.set_summary(response.summary)
    finally:
        store.set_loading(False)

    logger.info("Stored summary of %s (%d characters)", path.name, len(response.summary))
    return response.summary


def generate_quiz(store: SessionStore, client: QuizServiceClient) -> QuizSessionController:
    """
    Generate a quiz over the stored summary and start an attempt at it.

    On failure any previously stored quiz stays in place.

    Args:
        store: Session store to update
        client: Quiz service client

    Returns:
        Controller for a fresh attempt at the new quiz

    Raises:
        RequestInProgressError: If another request is in flight
        GenerationFailedError: If generation fails or yields no questions
    """
    _begin_request(store)
    try:
        response = client.generate_quiz()
        if not response.questions:
            raise GenerationFailedError("The quiz service generated no questions")
        store.set_quiz_data(
            QuizData(questions=response.questions, summary=store.summary or None)
        )
    finally:
        store.set_loading(False)

    return QuizSessionController(store)


def restart_quiz(store: SessionStore) -> QuizSessionController:
    """
    Start a new attempt at the loaded quiz.

    Equivalent to loading the same quiz data afresh: committed answers are
    cleared and the controller starts at the first question.
    """
    quiz_data = store.quiz_data
    if quiz_data is None:
        raise QuizNotLoadedError("No quiz to restart")
    store.set_quiz_data(quiz_data)
    return QuizSessionController(store)


def score_session(store: SessionStore) -> ScoreReport:
    """Score the committed answers of the session."""
    quiz_data = store.quiz_data
    if quiz_data is None:
        raise QuizNotLoadedError("No quiz to score")
    return compute_score_report(quiz_data, store.answers)


def _begin_request(store: SessionStore) -> None:
    if store.loading:
        raise RequestInProgressError("A request to the quiz service is already running")
    store.set_loading(True)
