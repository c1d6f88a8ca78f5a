"""Quiz Session Controller - navigation, answer recording and submission."""

import logging
from enum import Enum
from typing import Optional

from src.errors import (
    IncompleteQuizError,
    InvalidAnswerError,
    InvalidNavigationError,
    QuizAlreadySubmittedError,
    QuizNotLoadedError,
)
from src.models.quiz import AnswerMap, Question, QuizData
from src.session.store import SessionStore

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle of a single quiz attempt."""

    ACTIVE = "active"
    SUBMITTED = "submitted"


class QuestionStatus(str, Enum):
    """Status of a question in the overview grid."""

    CURRENT = "current"
    ANSWERED = "answered"
    UNANSWERED = "unanswered"


class QuizSessionController:
    """
    Drive one attempt at the quiz currently loaded in the session store.

    Answers are kept locally while the user navigates and only committed to the
    store by a successful submit(). Once submitted the controller is done; a
    new attempt needs a new controller (see src.session.flow.restart_quiz).
    """

    def __init__(self, store: SessionStore):
        quiz_data = store.quiz_data
        if quiz_data is None or quiz_data.question_count == 0:
            raise QuizNotLoadedError("No quiz with questions is loaded")

        self._store = store
        self._quiz_data: QuizData = quiz_data
        self._state = SessionState.ACTIVE
        self._current_index = 0
        self._local_answers: AnswerMap = {}

    # State

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def local_answers(self) -> AnswerMap:
        """Copy of the answers recorded so far in this attempt."""
        return dict(self._local_answers)

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._quiz_data.questions

    @property
    def question_count(self) -> int:
        return self._quiz_data.question_count

    @property
    def current_question(self) -> Question:
        return self._quiz_data.questions[self._current_index]

    @property
    def is_first(self) -> bool:
        return self._current_index == 0

    @property
    def is_last(self) -> bool:
        return self._current_index == self.question_count - 1

    @property
    def answered_count(self) -> int:
        return len(self._local_answers)

    @property
    def remaining_count(self) -> int:
        return self.question_count - self.answered_count

    @property
    def progress(self) -> float:
        """Position in the quiz as a percentage, counting the current question."""
        return (self._current_index + 1) / self.question_count * 100

    # Answers

    def select_answer(self, question_id: int, option_index: int) -> None:
        """
        Record (or overwrite) the answer for a question.

        Args:
            question_id: Id of a question in the loaded quiz
            option_index: Index of the chosen option

        Raises:
            QuizAlreadySubmittedError: If the quiz was already submitted
            InvalidAnswerError: If the question or option does not exist
            QuizNotLoadedError: If the store has moved on to another quiz
        """
        if self._state is SessionState.SUBMITTED:
            raise QuizAlreadySubmittedError("Answers cannot change after submission")
        self._ensure_quiz_still_loaded()

        question = self._quiz_data.get_question(question_id)
        if question is None:
            raise InvalidAnswerError(f"Unknown question id: {question_id}")
        if not question.is_valid_option(option_index):
            raise InvalidAnswerError(
                f"Option {option_index} does not exist for question {question_id}"
            )

        self._local_answers[question_id] = option_index
        logger.debug("Question %s answered with option %s", question_id, option_index)

    def selected_option(self, question_id: int) -> Optional[int]:
        """Locally recorded option for a question, None if unanswered."""
        return self._local_answers.get(question_id)

    def question_index(self, question_id: int) -> int:
        """Position of a question in the quiz."""
        for index, question in enumerate(self._quiz_data.questions):
            if question.id == question_id:
                return index
        raise InvalidAnswerError(f"Unknown question id: {question_id}")

    def can_advance(self) -> bool:
        """True iff the current question has a recorded answer."""
        return self.current_question.id in self._local_answers

    def all_answered(self) -> bool:
        return all(q.id in self._local_answers for q in self._quiz_data.questions)

    def unanswered_question_ids(self) -> list[int]:
        """Ids of unanswered questions in presentation order."""
        return [
            q.id for q in self._quiz_data.questions if q.id not in self._local_answers
        ]

    # Navigation

    def go_to_question(self, index: int) -> None:
        """
        Jump to the question at the given position.

        Raises:
            InvalidNavigationError: If index is outside the quiz; the current
                position is left unchanged
        """
        if not 0 <= index < self.question_count:
            raise InvalidNavigationError(index, self.question_count)
        self._current_index = index

    def next(self) -> bool:
        """Move forward one question. Returns False at the last question."""
        if self.is_last:
            return False
        self.go_to_question(self._current_index + 1)
        return True

    def previous(self) -> bool:
        """Move back one question. Returns False at the first question."""
        if self.is_first:
            return False
        self.go_to_question(self._current_index - 1)
        return True

    def overview(self) -> list[QuestionStatus]:
        """Status of every question, in presentation order."""
        statuses = []
        for index, question in enumerate(self._quiz_data.questions):
            if index == self._current_index:
                statuses.append(QuestionStatus.CURRENT)
            elif question.id in self._local_answers:
                statuses.append(QuestionStatus.ANSWERED)
            else:
                statuses.append(QuestionStatus.UNANSWERED)
        return statuses

    # Submission

    def submit(self) -> None:
        """
        Commit the local answers to the session store.

        Raises:
            QuizAlreadySubmittedError: If called a second time
            IncompleteQuizError: If any question is unanswered; nothing is
                committed and the local answers are kept
            QuizNotLoadedError: If the store has moved on to another quiz
        """
        if self._state is SessionState.SUBMITTED:
            raise QuizAlreadySubmittedError("Quiz has already been submitted")
        self._ensure_quiz_still_loaded()

        missing = self.unanswered_question_ids()
        if missing:
            raise IncompleteQuizError(missing)

        self._store.record_answers(self._local_answers)
        self._state = SessionState.SUBMITTED
        logger.info("Quiz submitted with %d answers", len(self._local_answers))

    def _ensure_quiz_still_loaded(self) -> None:
        # Loading or resetting a quiz invalidates every attempt at the old one
        if self._store.quiz_data is not self._quiz_data:
            raise QuizNotLoadedError("The quiz for this attempt is no longer loaded")
