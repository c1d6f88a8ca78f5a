"""Application settings and configuration."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Quiz service
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the summarization / quiz generation service",
        validation_alias="QUIZ_API_BASE_URL",
    )

    request_timeout: float = Field(
        default=30.0,  # uploads of large PDFs are slow to summarize
        gt=0.0,
        description="Timeout in seconds for calls to the quiz service",
        validation_alias="QUIZ_API_TIMEOUT",
    )

    # Upload limits
    max_upload_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Largest document accepted for upload, in megabytes",
        validation_alias="MAX_UPLOAD_MB",
    )

    allowed_mime_types: list[str] = Field(
        default_factory=lambda: ["application/pdf"],
        description="Document MIME types accepted for upload",
        validation_alias="ALLOWED_MIME_TYPES",
    )

    # Output Settings
    default_output_dir: str = Field(
        default="output",
        description="Directory for exported score reports",
        validation_alias="DEFAULT_OUTPUT_DIR",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the client",
        validation_alias="LOG_LEVEL",
    )

    @property
    def max_upload_bytes(self) -> int:
        """Upload limit in bytes."""
        return self.max_upload_mb * 1024 * 1024

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Loaded the first time and then cached for the rest of the process
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
