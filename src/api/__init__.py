"""Client for the external summarization and quiz generation service."""

from .client import QuizServiceClient, extract_error_message

__all__ = ["QuizServiceClient", "extract_error_message"]
