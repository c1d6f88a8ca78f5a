"""HTTP client for the document summarization and quiz generation service."""

import logging
import mimetypes
from pathlib import Path
from typing import Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.config.settings import Settings, get_settings
from src.errors import (
    FileTooLargeError,
    GenerationFailedError,
    InvalidFileTypeError,
    UnreadableDocumentError,
)
from src.models.quiz import QuizResponse, SummaryResponse

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)

UPLOAD_ENDPOINT = "/upload-pdf"
GENERATE_ENDPOINT = "/generate-quiz"

NETWORK_ERROR_MESSAGE = "Network error occurred"
INVALID_RESPONSE_MESSAGE = "Received an invalid response from the quiz service"


class QuizServiceClient:
    """
    Synchronous client for the quiz service.

    Example:
        with QuizServiceClient() as client:
            summary = client.upload_document(Path("notes.pdf")).summary
            questions = client.generate_quiz().questions
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._http = httpx.Client(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=transport,
        )

    def __enter__(self) -> "QuizServiceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def validate_document(self, path: Path) -> str:
        """
        Check a document against the upload rules before any network call.

        Args:
            path: Path of the document to upload

        Returns:
            The document's MIME type

        Raises:
            InvalidFileTypeError: If the MIME type is not accepted
            UnreadableDocumentError: If the file is missing or cannot be read
            FileTooLargeError: If the file exceeds the upload limit
        """
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type not in self.settings.allowed_mime_types:
            raise InvalidFileTypeError(path.name, mime_type)

        try:
            size = path.stat().st_size
        except OSError as exc:
            raise UnreadableDocumentError(path.name, exc) from exc
        if size > self.settings.max_upload_bytes:
            raise FileTooLargeError(path.name, size, self.settings.max_upload_bytes)

        return mime_type

    def upload_document(
        self, path: Path, mime_type: Optional[str] = None
    ) -> SummaryResponse:
        """
        Upload a document and receive its summary.

        Args:
            path: Document to upload
            mime_type: Type returned by an earlier validate_document call;
                when omitted the document is validated here

        Raises:
            DocumentRejectedError: Before any network call
            GenerationFailedError: If the service call fails
        """
        if mime_type is None:
            mime_type = self.validate_document(path)
        logger.info("Uploading %s (%s) for summarization", path.name, mime_type)

        try:
            content = path.read_bytes()
        except OSError as exc:
            raise UnreadableDocumentError(path.name, exc) from exc

        files = {"file": (path.name, content, mime_type)}
        payload = self._post(UPLOAD_ENDPOINT, "Failed to upload PDF", files=files)
        return self._parse(SummaryResponse, payload)

    def generate_quiz(self) -> QuizResponse:
        """
        Ask the service for questions over the last uploaded document.

        Raises:
            GenerationFailedError: If the service call fails
        """
        logger.info("Requesting quiz generation")
        payload = self._post(GENERATE_ENDPOINT, "Failed to generate quiz")
        response = self._parse(QuizResponse, payload)
        logger.info("Received %d questions", len(response.questions))
        return response

    def _post(self, endpoint: str, failure_message: str, **kwargs) -> object:
        try:
            response = self._http.post(endpoint, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = extract_error_message(exc.response) or failure_message
            logger.error(
                "Quiz service call failed: endpoint=%s status=%s message=%s",
                endpoint,
                exc.response.status_code,
                message,
            )
            raise GenerationFailedError(message, exc.response.status_code) from exc
        except httpx.RequestError as exc:
            logger.error("Quiz service unreachable: endpoint=%s error=%s", endpoint, exc)
            raise GenerationFailedError(NETWORK_ERROR_MESSAGE) from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Quiz service returned non-JSON body: endpoint=%s", endpoint)
            raise GenerationFailedError(INVALID_RESPONSE_MESSAGE) from exc

    @staticmethod
    def _parse(model: type[ResponseModel], payload: object) -> ResponseModel:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            logger.error("Quiz service response failed validation: %s", exc)
            raise GenerationFailedError(INVALID_RESPONSE_MESSAGE) from exc


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """
    Pull a human-readable message out of an error response body.

    Args:
        response: Failed HTTP response

    Returns:
        The server's message, or None when the body carries none
    """
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    for key in ("message", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None
