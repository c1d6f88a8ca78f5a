"""Shared test fixtures and configuration for pytest."""

from typing import Any

import pytest

from src.config.settings import Settings
from src.models.quiz import Question, QuizData
from src.session.controller import QuizSessionController
from src.session.store import SessionStore


@pytest.fixture
def sample_question() -> Question:
    """Create a sample Question for testing."""
    return Question(
        id=0,
        text="What is the capital of France?",
        options=["London", "Paris", "Berlin", "Madrid"],
        correct_option_index=1,
    )


@pytest.fixture
def sample_questions() -> list[Question]:
    """Three questions whose correct indices are [1, 0, 2]."""
    return [
        Question(
            id=0,
            text="What is 2 + 2?",
            options=["3", "4", "5", "6"],
            correct_option_index=1,
        ),
        Question(
            id=1,
            text="What is the speed of light?",
            options=[
                "299,792,458 m/s",
                "300,000,000 m/s",
                "150,000,000 m/s",
                "500,000,000 m/s",
            ],
            correct_option_index=0,
        ),
        Question(
            id=2,
            text="Who wrote '1984'?",
            options=["Aldous Huxley", "Ray Bradbury", "George Orwell", "Philip K. Dick"],
            correct_option_index=2,
        ),
    ]


@pytest.fixture
def sample_quiz_data(sample_questions: list[Question]) -> QuizData:
    """Create a sample QuizData for testing."""
    return QuizData(
        questions=sample_questions,
        summary="A short document about arithmetic, physics and literature.",
    )


@pytest.fixture
def single_question_quiz(sample_question: Question) -> QuizData:
    """A quiz with exactly one question, correct index 1."""
    return QuizData(questions=[sample_question])


@pytest.fixture
def store() -> SessionStore:
    """An empty session store."""
    return SessionStore()


@pytest.fixture
def loaded_store(store: SessionStore, sample_quiz_data: QuizData) -> SessionStore:
    """A session store holding the sample quiz."""
    store.set_summary(sample_quiz_data.summary)
    store.set_quiz_data(sample_quiz_data)
    return store


@pytest.fixture
def controller(loaded_store: SessionStore) -> QuizSessionController:
    """A controller for a fresh attempt at the sample quiz."""
    return QuizSessionController(loaded_store)


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake quiz service."""
    return Settings(
        QUIZ_API_BASE_URL="http://quiz.test",
        QUIZ_API_TIMEOUT=5.0,
        MAX_UPLOAD_MB=1,
    )


@pytest.fixture
def sample_quiz_payload() -> dict[str, Any]:
    """Quiz generation response as sent over the wire."""
    return {
        "questions": [
            {
                "id": 0,
                "question": "What is 2 + 2?",
                "options": ["3", "4", "5", "6"],
                "correct_answer": 1,
            },
            {
                "id": 1,
                "question": "What colour is the sky?",
                "options": ["Blue", "Green"],
                "correct_answer": 0,
            },
        ]
    }


@pytest.fixture
def pdf_file(tmp_path):
    """A small file with a .pdf name."""
    path = tmp_path / "notes.pdf"
    path.write_bytes(b"%PDF-1.4\n%fake test document\n")
    return path
