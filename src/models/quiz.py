"""Pydantic models for quiz data structures."""

from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

# Mapping of question id -> chosen option index
AnswerMap = dict[int, int]


class Question(BaseModel):
    """A single multiple choice question as produced by the quiz service."""

    id: int = Field(..., description="Unique identifier for the question")
    text: str = Field(
        ...,
        min_length=1,
        alias="question",
        description="The question prompt",
    )
    options: list[str] = Field(
        ...,
        min_length=2,
        description="Answer options; the list index identifies an option",
    )
    correct_option_index: int = Field(
        ...,
        ge=0,
        alias="correct_answer",
        description="Index into options marking the correct choice",
    )

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[str]) -> list[str]:
        """Ensure no option is blank."""
        for index, option in enumerate(v):
            if not option or not option.strip():
                raise ValueError(f"Option {index} cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_correct_option(self) -> "Question":
        """Ensure the correct option points at an existing option."""
        if self.correct_option_index >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_option_index} is out of range "
                f"for {len(self.options)} options"
            )
        return self

    def is_valid_option(self, option_index: int) -> bool:
        """Check whether an option index exists for this question."""
        return 0 <= option_index < len(self.options)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": 1,
                "question": "What is the main topic of the document?",
                "options": ["Biology", "History", "Physics", "Art"],
                "correct_answer": 2,
            }
        },
    }


def ensure_unique_question_ids(questions: Sequence[Question]) -> None:
    """Raise ValueError if two questions share an id."""
    seen: set[int] = set()
    for question in questions:
        if question.id in seen:
            raise ValueError(f"Duplicate question id: {question.id}")
        seen.add(question.id)


class QuizData(BaseModel):
    """The generated questions plus the summary they were derived from."""

    questions: tuple[Question, ...] = Field(
        default_factory=tuple,
        description="Questions in presentation order",
    )
    summary: Optional[str] = Field(
        None,
        description="Summary of the document the quiz was generated from",
    )

    @field_validator("questions")
    @classmethod
    def validate_unique_ids(cls, v: tuple[Question, ...]) -> tuple[Question, ...]:
        """Ensure question ids are unique within a quiz."""
        ensure_unique_question_ids(v)
        return v

    @property
    def question_count(self) -> int:
        """Get the number of questions in the quiz."""
        return len(self.questions)

    @property
    def question_ids(self) -> list[int]:
        """Question ids in presentation order."""
        return [q.id for q in self.questions]

    def get_question(self, question_id: int) -> Optional[Question]:
        """Look up a question by id."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    model_config = {"frozen": True}


class QuestionResult(BaseModel):
    """Scoring outcome for one question."""

    question_id: int
    selected_option: Optional[int] = Field(
        None,
        description="Chosen option index, None when unanswered",
    )
    correct_option_index: int
    is_correct: bool

    @property
    def answered(self) -> bool:
        return self.selected_option is not None


class ScoreBand(str, Enum):
    """Coarse grading of a percentage score."""

    EXCELLENT = "excellent"
    FAIR = "fair"
    POOR = "poor"


class ScoreReport(BaseModel):
    """Derived summary of correctness per question and overall percentage."""

    correct_count: int = Field(..., ge=0)
    total_count: int = Field(..., ge=1)
    percentage: int = Field(..., ge=0, le=100)
    per_question: list[QuestionResult] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_counts(self) -> "ScoreReport":
        """Ensure correct_count never exceeds total_count."""
        if self.correct_count > self.total_count:
            raise ValueError("correct_count cannot exceed total_count")
        return self

    @property
    def incorrect_count(self) -> int:
        """Questions answered wrongly or left unanswered."""
        return self.total_count - self.correct_count

    @property
    def unanswered_count(self) -> int:
        return sum(1 for result in self.per_question if not result.answered)


# Wire models for the quiz service responses


class SummaryResponse(BaseModel):
    """Response of the document summarization call."""

    summary: str = Field(..., description="Summary of the uploaded document")


class QuizResponse(BaseModel):
    """Response of the quiz generation call."""

    questions: list[Question] = Field(
        default_factory=list,
        description="Generated questions",
    )

    @field_validator("questions")
    @classmethod
    def validate_unique_ids(cls, v: list[Question]) -> list[Question]:
        """Reject responses that reuse a question id."""
        ensure_unique_question_ids(v)
        return v
