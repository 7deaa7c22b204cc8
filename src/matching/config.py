"""Configuration settings for the Matcher."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fit score weights per dimension. Exposed so callers can audit them and so
# ``MatchingConfig`` has a single source for its defaults.
WEIGHT_SKILLS = 0.30
WEIGHT_EXPERIENCE = 0.25
WEIGHT_LOCATION = 0.15
WEIGHT_SALARY = 0.15
WEIGHT_EDUCATION = 0.10
WEIGHT_INDUSTRY = 0.05

DEFAULT_WEIGHTS: dict[str, float] = {
    "skills": WEIGHT_SKILLS,
    "experience": WEIGHT_EXPERIENCE,
    "location": WEIGHT_LOCATION,
    "salary": WEIGHT_SALARY,
    "education": WEIGHT_EDUCATION,
    "industry": WEIGHT_INDUSTRY,
}


class MatchingConfig(BaseSettings):
    """Matcher configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Scoring weights (must sum to 1.0)
    weight_skills: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=WEIGHT_SKILLS,
        description="Weight for required skills match",
    )
    weight_experience: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=WEIGHT_EXPERIENCE,
        description="Weight for experience match",
    )
    weight_location: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=WEIGHT_LOCATION,
        description="Weight for location match",
    )
    weight_salary: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=WEIGHT_SALARY,
        description="Weight for salary match",
    )
    weight_education: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=WEIGHT_EDUCATION,
        description="Weight for education match",
    )
    weight_industry: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=WEIGHT_INDUSTRY,
        description="Weight for industry match",
    )

    # Skill matching settings
    skill_fuzzy_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.7,
        description="Similarity a skill pair must exceed to count as a fuzzy match",
    )
    skill_fuzzy_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.7,
        description="Credit given to a fuzzy-only skill match",
    )
    skill_aliases: bool = Field(
        default=True,
        description="Canonicalize common skill aliases (js -> javascript)",
    )

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> MatchingConfig:
        """Ensure scoring weights sum to 1.0 (within tolerance)."""
        weight_sum = sum(self.weights.values())
        if abs(weight_sum - 1.0) > 1e-6:
            details = ", ".join(f"{k}={v}" for k, v in self.weights.items())
            raise ValueError(
                f"Scoring weights must sum to 1.0. Got {weight_sum:.6f} ({details})."
            )
        return self

    @property
    def weights(self) -> dict[str, float]:
        """Dimension weights keyed like ``DEFAULT_WEIGHTS``."""
        return {
            "skills": self.weight_skills,
            "experience": self.weight_experience,
            "location": self.weight_location,
            "salary": self.weight_salary,
            "education": self.weight_education,
            "industry": self.weight_industry,
        }


_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
