"""Data models for the Matcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


def _clean_strings(values: Any) -> list[str]:
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    return [str(v).strip() for v in values if str(v).strip()]


def _check_salary_range(
    salary_range: tuple[int, int] | None,
) -> tuple[int, int] | None:
    if salary_range is None:
        return None
    low, high = salary_range
    if low < 0 or high < 0:
        raise ValueError("salary_range values must be non-negative")
    if low > high:
        raise ValueError(f"salary_range minimum exceeds maximum ({low} > {high})")
    return salary_range


class Job(BaseModel):
    """A job posting as supplied by the external job store.

    Only ``id`` and ``title`` are required. Every other field may be missing;
    the Matcher treats absent data as a neutral signal. Fields are accepted in
    snake_case or in the job store's camelCase (``salaryMin``, ``postedAt``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., description="Job identifier")
    title: str = Field(..., description="Job title")
    company: str | None = Field(default=None, description="Hiring company")
    industry: str | None = Field(default=None, description="Industry label")
    location: str | None = Field(
        default=None, description="Location, e.g. 'Austin, TX'"
    )
    remote: bool = Field(default=False, description="Whether the job is remote")
    salary_min: float | None = Field(default=None, ge=0, description="Salary floor")
    salary_max: float | None = Field(default=None, ge=0, description="Salary ceiling")
    required_skills: list[str] = Field(
        default_factory=list, description="Must-have skills (order irrelevant)"
    )
    experience_required: float | None = Field(
        default=None, ge=0, description="Required years of experience"
    )
    education_required: list[str] = Field(
        default_factory=list, description="Required credentials"
    )
    job_type: str | None = Field(
        default=None, description="Employment type, e.g. 'full-time'"
    )
    posted_at: datetime | None = Field(default=None, description="Posting time")

    @field_validator("required_skills", "education_required", mode="before")
    @classmethod
    def clean_string_lists(cls, v: Any) -> list[str]:
        """Drop blank entries and accept a single string."""
        return _clean_strings(v)

    @model_validator(mode="after")
    def validate_salary_range(self) -> Job:
        """Reject a salary floor above the ceiling."""
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_min > self.salary_max
        ):
            raise ValueError(
                f"salary_min exceeds salary_max ({self.salary_min} > {self.salary_max})"
            )
        return self

    @property
    def has_salary_range(self) -> bool:
        return self.salary_min is not None and self.salary_max is not None

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> Job:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class JobPreferences(BaseModel):
    """What the candidate is looking for."""

    salary_range: tuple[int, int] | None = Field(
        default=None, description="Desired (min, max) salary"
    )
    job_types: list[str] = Field(
        default_factory=list, description="Acceptable employment types"
    )
    industries: list[str] = Field(
        default_factory=list, description="Acceptable industries"
    )
    remote: bool = Field(default=False, description="Open to remote work")

    @field_validator("job_types", "industries", mode="before")
    @classmethod
    def clean_string_lists(cls, v: Any) -> list[str]:
        return _clean_strings(v)

    @field_validator("salary_range")
    @classmethod
    def validate_salary_range(
        cls, v: tuple[int, int] | None
    ) -> tuple[int, int] | None:
        return _check_salary_range(v)


class UserProfile(BaseModel):
    """Candidate profile used to derive matching criteria."""

    name: str = Field(..., description="Candidate full name")
    email: str | None = Field(default=None, description="Contact email")
    location: str | None = Field(default=None, description="Current location")
    skills: list[str] = Field(default_factory=list, description="Skills")
    years_of_experience: float | None = Field(
        default=None, ge=0, description="Total years of experience"
    )
    education: list[str] = Field(
        default_factory=list, description="Degrees and credentials"
    )
    preferences: JobPreferences = Field(default_factory=JobPreferences)

    @field_validator("skills", "education", mode="before")
    @classmethod
    def clean_string_lists(cls, v: Any) -> list[str]:
        return _clean_strings(v)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> UserProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class MatchingCriteria(BaseModel):
    """Immutable candidate-side input for one matching run.

    Usually built with :meth:`from_profile`, which lets a single search
    override any profile-derived value (e.g. widen industries or force
    remote-only).
    """

    model_config = ConfigDict(frozen=True)

    skills: list[str] = Field(default_factory=list)
    experience: float | None = Field(default=None, ge=0)
    education: list[str] = Field(default_factory=list)
    location: str | None = None
    salary_range: tuple[int, int] | None = None
    job_types: list[str] = Field(default_factory=list)
    industries: list[str] = Field(default_factory=list)
    remote: bool = False

    @field_validator("skills", "education", "job_types", "industries", mode="before")
    @classmethod
    def clean_string_lists(cls, v: Any) -> list[str]:
        return _clean_strings(v)

    @field_validator("salary_range")
    @classmethod
    def validate_salary_range(
        cls, v: tuple[int, int] | None
    ) -> tuple[int, int] | None:
        return _check_salary_range(v)

    @classmethod
    def from_profile(cls, profile: UserProfile, **overrides: Any) -> MatchingCriteria:
        """Build criteria from a profile, applying per-search overrides."""
        data: dict[str, Any] = {
            "skills": profile.skills,
            "experience": profile.years_of_experience,
            "education": profile.education,
            "location": profile.location,
            "salary_range": profile.preferences.salary_range,
            "job_types": profile.preferences.job_types,
            "industries": profile.preferences.industries,
            "remote": profile.preferences.remote,
        }
        unknown = set(overrides) - set(data)
        if unknown:
            raise ValueError(f"Unknown criteria override(s): {', '.join(sorted(unknown))}")
        data.update(overrides)
        return cls.model_validate(data)


def _check_unit_range(owner: object, names: tuple[str, ...]) -> None:
    for name in names:
        value = getattr(owner, name)
        if not (0.0 <= value <= 1.0):
            raise ValueError(f"{name} must be between 0.0 and 1.0 (got {value})")


@dataclass(frozen=True)
class DimensionScores:
    """Per-dimension scores behind a fit score, each in [0, 1]."""

    skills: float
    experience: float
    location: float
    salary: float
    education: float
    industry: float

    def __post_init__(self) -> None:
        _check_unit_range(
            self,
            ("skills", "experience", "location", "salary", "education", "industry"),
        )

    def as_dict(self) -> dict[str, float]:
        return {
            "skills": self.skills,
            "experience": self.experience,
            "location": self.location,
            "salary": self.salary,
            "education": self.education,
            "industry": self.industry,
        }


@dataclass
class JobMatch:
    """Matcher output for one (job, criteria) pair."""

    job: Job
    fit_score: float
    confidence: float
    dimensions: DimensionScores
    reasons: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    salary_match: bool = False
    location_match: bool = False
    matched_skills: list[str] = field(default_factory=list)
    fuzzy_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_unit_range(self, ("fit_score", "confidence"))

    @property
    def skill_match(self) -> float:
        return self.dimensions.skills

    @property
    def experience_match(self) -> float:
        return self.dimensions.experience

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "job": self.job.to_dict(),
            "fit_score": self.fit_score,
            "confidence": self.confidence,
            "dimensions": self.dimensions.as_dict(),
            "reasons": list(self.reasons),
            "improvements": list(self.improvements),
            "salary_match": self.salary_match,
            "location_match": self.location_match,
            "matched_skills": list(self.matched_skills),
            "fuzzy_skills": list(self.fuzzy_skills),
            "missing_skills": list(self.missing_skills),
        }
