"""Exception hierarchy for the quiz client."""

from typing import Sequence


class QuizClientError(Exception):
    """Base class for all errors raised by the quiz client."""


class DocumentRejectedError(QuizClientError):
    """The document was refused before any call to the quiz service."""


class InvalidFileTypeError(DocumentRejectedError):
    """The document is not of an accepted MIME type."""

    def __init__(self, filename: str, mime_type: str | None):
        self.filename = filename
        self.mime_type = mime_type
        super().__init__(
            f"Invalid file type for '{filename}' ({mime_type or 'unknown'}). "
            "Please select a PDF file."
        )


class FileTooLargeError(DocumentRejectedError):
    """The document exceeds the upload size limit."""

    def __init__(self, filename: str, size: int, limit: int):
        self.filename = filename
        self.size = size
        self.limit = limit
        super().__init__(
            f"'{filename}' is {size} bytes, the upload limit is {limit} bytes"
        )


class UnreadableDocumentError(DocumentRejectedError):
    """The document is missing or cannot be read."""

    def __init__(self, filename: str, reason: OSError):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Cannot read '{filename}': {reason.strerror or reason}")


class GenerationFailedError(QuizClientError):
    """Summarization or quiz generation failed at the quiz service."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RequestInProgressError(QuizClientError):
    """A summarization or generation request is already in flight."""


class QuizSessionError(QuizClientError):
    """Base class for errors raised by the quiz session controller."""


class QuizNotLoadedError(QuizSessionError):
    """No (non-empty) quiz data is loaded in the session."""


class IncompleteQuizError(QuizSessionError):
    """Submission attempted while some questions are unanswered."""

    def __init__(self, missing_question_ids: Sequence[int]):
        self.missing_question_ids = list(missing_question_ids)
        count = len(self.missing_question_ids)
        super().__init__(
            f"{count} question{'s' if count != 1 else ''} still unanswered"
        )


class InvalidNavigationError(QuizSessionError):
    """Navigation to a question index outside the quiz."""

    def __init__(self, index: int, question_count: int):
        self.index = index
        self.question_count = question_count
        super().__init__(
            f"Question index {index} is out of range (0..{question_count - 1})"
        )


class InvalidAnswerError(QuizSessionError):
    """Unknown question id or option index."""


class QuizAlreadySubmittedError(QuizSessionError):
    """The quiz has already been submitted; answers can no longer change."""


class EmptyQuizScoringError(QuizClientError):
    """A score report was requested for a quiz without questions.

    Upstream guarantees make this unreachable; seeing it indicates a bug.
    """
