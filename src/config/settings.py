"""Application-level configuration for Job-Match."""

from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutputFormat(str, Enum):
    """How the CLI renders results."""

    TEXT = "text"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Engine tunables live in ``MatchingConfig`` and ``RecommendationConfig``.
    This class only covers the CLI surface: where inputs come from, how output
    is rendered and how noisy logging is.
    """

    model_config = SettingsConfigDict(
        env_prefix="JOB_MATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    profile_path: Path = Field(
        default=Path("profiles/profile.yaml"),
        description="Default candidate profile (YAML or JSON)",
    )
    jobs_path: Path | None = Field(
        default=None,
        description="Default job corpus file or directory",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="CLI output format: 'text' or 'json'",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, v: str | OutputFormat) -> OutputFormat:
        """Accept output format names case-insensitively."""
        if isinstance(v, OutputFormat):
            return v
        if isinstance(v, str):
            try:
                return OutputFormat(v.lower().strip())
            except ValueError:
                raise ValueError(
                    f"Invalid output format: {v}. Must be 'text' or 'json'"
                ) from None
        raise ValueError(f"Invalid output format type: {type(v)}")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
