"""Session Store - single source of truth for quiz-related state."""

import logging
from typing import Callable, Optional

from src.models.quiz import AnswerMap, Question, QuizData

logger = logging.getLogger(__name__)

# Observer signature: callback(event, store)
SessionListener = Callable[[str, "SessionStore"], None]


class SessionStore:
    """
    Holder of the one active quiz session.

    The store is a plain state container: it performs no validation and has no
    failure modes. Data arrives already validated from the controller or the
    quiz service models. Every mutation notifies the subscribed listeners
    synchronously so a presentation layer can re-render.
    """

    def __init__(self) -> None:
        self._quiz_data: Optional[QuizData] = None
        self._answers: AnswerMap = {}
        self._summary: str = ""
        self._loading: bool = False
        self._listeners: list[SessionListener] = []

    # Reads

    @property
    def quiz_data(self) -> Optional[QuizData]:
        return self._quiz_data

    @property
    def questions(self) -> list[Question]:
        """Questions of the loaded quiz, empty when none is loaded."""
        if self._quiz_data is None:
            return []
        return list(self._quiz_data.questions)

    @property
    def has_quiz(self) -> bool:
        """True when a quiz with at least one question is loaded."""
        return self._quiz_data is not None and self._quiz_data.question_count > 0

    @property
    def answers(self) -> AnswerMap:
        """Copy of the committed answers."""
        return dict(self._answers)

    @property
    def summary(self) -> str:
        return self._summary

    @property
    def loading(self) -> bool:
        return self._loading

    # Mutations

    def set_summary(self, text: str) -> None:
        """Store the document summary, overwriting any previous one."""
        self._summary = text
        self._notify("summary")

    def set_quiz_data(self, data: QuizData) -> None:
        """Store a new quiz; answers from any previous quiz are discarded."""
        self._quiz_data = data
        self._answers = {}
        self._notify("quiz_data")

    def record_answers(self, answers: AnswerMap) -> None:
        """Replace the committed answers wholesale."""
        self._answers = dict(answers)
        self._notify("answers")

    def set_loading(self, loading: bool) -> None:
        self._loading = loading
        self._notify("loading")

    def reset(self) -> None:
        """Return the session to its initial empty state."""
        self._quiz_data = None
        self._answers = {}
        self._summary = ""
        self._loading = False
        self._notify("reset")

    # Observers

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener called after every mutation.

        Args:
            listener: Callable receiving the event name and this store

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: str) -> None:
        logger.debug("Session updated: %s", event)
        for listener in list(self._listeners):
            listener(event, self)
