"""Data models for the Recommender."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum

from src.matching.models import Job, JobMatch


class RecommendationType(str, Enum):
    """Recommendation tier, decided jointly by fit and confidence."""

    PERFECT_MATCH = "perfect_match"
    GOOD_MATCH = "good_match"
    EXPLORE = "explore"
    STRETCH = "stretch"


@dataclass
class JobRecommendation:
    """A JobMatch enriched with tier, priority and presentation hints."""

    match: JobMatch
    recommendation_type: RecommendationType
    priority: float
    tags: list[str] = field(default_factory=list)
    estimated_response_rate: float = 0.0
    time_to_apply: str = "Unknown"

    def __post_init__(self) -> None:
        for name in ("priority", "estimated_response_rate"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} must be between 0.0 and 1.0 (got {value})")

    @property
    def job(self) -> Job:
        return self.match.job

    @property
    def fit_score(self) -> float:
        return self.match.fit_score

    @property
    def confidence(self) -> float:
        return self.match.confidence

    @property
    def reasons(self) -> list[str]:
        return self.match.reasons

    @property
    def improvements(self) -> list[str]:
        return self.match.improvements

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        data = self.match.to_dict()
        data.update(
            {
                "recommendation_type": self.recommendation_type.value,
                "priority": self.priority,
                "tags": list(self.tags),
                "estimated_response_rate": self.estimated_response_rate,
                "time_to_apply": self.time_to_apply,
            }
        )
        return data


@dataclass
class SalaryInsights:
    average: int = 0
    minimum: int = 0
    maximum: int = 0


@dataclass
class LocationInsights:
    remote_percentage: float = 0.0
    top_locations: list[str] = field(default_factory=list)


@dataclass
class RecommendationInsights:
    """Aggregate view over a final recommendation list."""

    total_jobs: int = 0
    perfect_matches: int = 0
    good_matches: int = 0
    explore_opportunities: int = 0
    stretch_goals: int = 0
    average_fit_score: float = 0.0
    top_skills: list[str] = field(default_factory=list)
    top_industries: list[str] = field(default_factory=list)
    salary: SalaryInsights = field(default_factory=SalaryInsights)
    location: LocationInsights = field(default_factory=LocationInsights)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ScenarioRecommendations:
    """Named slices over one recommendation list."""

    quick_wins: list[JobRecommendation] = field(default_factory=list)
    career_growth: list[JobRecommendation] = field(default_factory=list)
    salary_boost: list[JobRecommendation] = field(default_factory=list)
    remote_work: list[JobRecommendation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "quick_wins": [r.to_dict() for r in self.quick_wins],
            "career_growth": [r.to_dict() for r in self.career_growth],
            "salary_boost": [r.to_dict() for r in self.salary_boost],
            "remote_work": [r.to_dict() for r in self.remote_work],
        }
