"""Configuration settings for the Recommender."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommendationConfig(BaseSettings):
    """Recommender configuration settings.

    Thresholds decide which matches survive; the weights only feed the
    priority used for ordering and never change a match's fit score.
    Override via environment variables with `RECOMMEND_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECOMMEND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output size and retention thresholds
    max_recommendations: Annotated[int, Field(ge=0)] = Field(
        default=20,
        description="Maximum recommendations returned",
    )
    min_fit_score: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.3,
        description="Matches below this fit score are dropped",
    )
    min_confidence: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.4,
        description="Matches below this confidence are dropped",
    )

    # Priority boosts
    diversity_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.2,
        description="Uniform diversity term (0.1x this value) added to every priority",
    )
    recency_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.1,
        description="Priority boost for recently posted jobs",
    )
    salary_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.15,
        description="Priority boost when salary expectations match",
    )
    location_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.1,
        description="Priority boost when location matches",
    )
    recent_days: Annotated[float, Field(ge=0.0)] = Field(
        default=7,
        description="Postings at most this many days old get the recency boost",
    )

    # Diversity re-rank
    company_diversity_bonus: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.05,
        description="Bump for the first recommendation from an unseen company",
    )
    industry_diversity_bonus: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.03,
        description="Bump for the first recommendation from an unseen industry",
    )

    # Parallelism
    max_workers: Annotated[int, Field(gt=0)] | None = Field(
        default=None,
        description="Worker threads for per-job scoring (None = CPU count)",
    )


_recommendation_config: RecommendationConfig | None = None


def get_recommendation_config() -> RecommendationConfig:
    """Get the recommendation configuration singleton."""
    global _recommendation_config
    if _recommendation_config is None:
        _recommendation_config = RecommendationConfig()
    return _recommendation_config


def reset_recommendation_config() -> None:
    """Reset the recommendation configuration singleton (useful for testing)."""
    global _recommendation_config
    _recommendation_config = None
