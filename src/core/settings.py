"""Application settings."""
from typing import List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("json", "text", "structured")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    """Application settings."""

    # Environment
    ENVIRONMENT: str = "development"

    # Project
    PROJECT_NAME: str = "chat-completion-decoder"
    VERSION: str = "0.1.0"

    # Decoding diagnostics
    DIAGNOSTIC_PREVIEW_LIMIT: int = 2000  # chars of a raw element quoted in logs, 0 = no limit

    @field_validator("DIAGNOSTIC_PREVIEW_LIMIT")
    @classmethod
    def validate_preview_limit(cls, v: int) -> int:
        """Validate diagnostic preview limit."""
        if v < 0:
            raise ValueError("DIAGNOSTIC_PREVIEW_LIMIT must be >= 0")
        return v

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # Available formats: json, text, structured
    LOG_EXTRA_FIELDS: List[str] = []  # Additional fields for logs

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format name."""
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")
        return v

    @field_validator("LOG_EXTRA_FIELDS", mode="before")
    @classmethod
    def assemble_extra_fields(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """Accept a comma-separated string of extra log fields."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)
