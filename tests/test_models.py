"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from src.models.quiz import (
    Question,
    QuestionResult,
    QuizData,
    QuizResponse,
    ScoreReport,
)


class TestQuestion:
    """Test Question model."""

    def test_create_valid_question(self, sample_question: Question):
        """Test creating a valid question."""
        assert sample_question.text == "What is the capital of France?"
        assert sample_question.correct_option_index == 1
        assert sample_question.options[1] == "Paris"

    def test_parses_wire_field_names(self):
        """Test that the service's field names are accepted."""
        question = Question.model_validate(
            {
                "id": 7,
                "question": "Pick one",
                "options": ["a", "b"],
                "correct_answer": 1,
            }
        )

        assert question.id == 7
        assert question.text == "Pick one"
        assert question.correct_option_index == 1

    def test_question_requires_two_options(self):
        """Test that a single option is rejected."""
        with pytest.raises(ValidationError):
            Question(id=1, text="Test?", options=["Only"], correct_option_index=0)

    def test_question_rejects_blank_option(self):
        """Test that blank options are rejected."""
        with pytest.raises(ValidationError):
            Question(id=1, text="Test?", options=["A", "  "], correct_option_index=0)

    def test_correct_option_must_be_in_range(self):
        """Test that correct_option_index must point at an option."""
        with pytest.raises(ValidationError):
            Question(id=1, text="Test?", options=["A", "B"], correct_option_index=2)

        with pytest.raises(ValidationError):
            Question(id=1, text="Test?", options=["A", "B"], correct_option_index=-1)

    def test_is_valid_option(self, sample_question: Question):
        """Test option index checking."""
        assert sample_question.is_valid_option(0)
        assert sample_question.is_valid_option(3)
        assert not sample_question.is_valid_option(4)
        assert not sample_question.is_valid_option(-1)

    def test_question_is_frozen(self, sample_question: Question):
        """Test that questions cannot be modified."""
        with pytest.raises(ValidationError):
            sample_question.correct_option_index = 0


class TestQuizData:
    """Test QuizData model."""

    def test_keeps_question_order(self, sample_quiz_data: QuizData):
        """Test that questions keep presentation order."""
        assert sample_quiz_data.question_ids == [0, 1, 2]
        assert sample_quiz_data.question_count == 3

    def test_rejects_duplicate_ids(self, sample_question: Question):
        """Test that question ids must be unique."""
        with pytest.raises(ValidationError):
            QuizData(questions=[sample_question, sample_question])

    def test_get_question(self, sample_quiz_data: QuizData):
        """Test looking up questions by id."""
        assert sample_quiz_data.get_question(2).text == "Who wrote '1984'?"
        assert sample_quiz_data.get_question(99) is None

    def test_summary_is_optional(self, sample_questions):
        """Test that summary defaults to None."""
        assert QuizData(questions=sample_questions).summary is None

    def test_questions_are_immutable(self, sample_quiz_data: QuizData):
        """Test that the question sequence cannot be replaced."""
        assert isinstance(sample_quiz_data.questions, tuple)
        with pytest.raises(ValidationError):
            sample_quiz_data.questions = ()


class TestScoreReport:
    """Test ScoreReport model."""

    def test_derived_counts(self):
        """Test incorrect and unanswered counts."""
        report = ScoreReport(
            correct_count=1,
            total_count=3,
            percentage=33,
            per_question=[
                QuestionResult(
                    question_id=0, selected_option=1, correct_option_index=1, is_correct=True
                ),
                QuestionResult(
                    question_id=1, selected_option=1, correct_option_index=0, is_correct=False
                ),
                QuestionResult(
                    question_id=2, selected_option=None, correct_option_index=2, is_correct=False
                ),
            ],
        )

        assert report.incorrect_count == 2
        assert report.unanswered_count == 1
        assert not report.per_question[2].answered

    def test_correct_count_cannot_exceed_total(self):
        """Test the count invariant."""
        with pytest.raises(ValidationError):
            ScoreReport(correct_count=4, total_count=3, percentage=100)

    def test_total_count_must_be_positive(self):
        """Test that an empty quiz cannot produce a report."""
        with pytest.raises(ValidationError):
            ScoreReport(correct_count=0, total_count=0, percentage=0)


class TestQuizResponse:
    """Test the quiz generation response model."""

    def test_parses_payload(self, sample_quiz_payload):
        """Test parsing a generation response."""
        response = QuizResponse.model_validate(sample_quiz_payload)

        assert len(response.questions) == 2
        assert response.questions[1].options == ["Blue", "Green"]

    def test_rejects_invalid_question(self):
        """Test that an invalid question fails the whole response."""
        with pytest.raises(ValidationError):
            QuizResponse.model_validate(
                {"questions": [{"id": 0, "question": "Q", "options": ["a", "b"], "correct_answer": 5}]}
            )

    def test_rejects_duplicate_ids(self):
        """Test that a response reusing a question id is refused."""
        question = {"id": 1, "question": "Q", "options": ["a", "b"], "correct_answer": 0}

        with pytest.raises(ValidationError):
            QuizResponse.model_validate({"questions": [question, dict(question)]})
