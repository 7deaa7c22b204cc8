"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

# Fixed "now" so posting-age logic is reproducible.
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Keep logging and config singletons from leaking between tests."""
    yield

    from src.config.settings import reset_settings
    from src.matching.config import reset_matching_config
    from src.recommend.config import reset_recommendation_config
    from src.utils.logging import reset_logging

    reset_logging()
    reset_settings()
    reset_matching_config()
    reset_recommendation_config()


@pytest.fixture
def now() -> datetime:
    """Reference time used for recency calculations."""
    return NOW


@pytest.fixture
def make_job():
    """Factory for Job records with minimal boilerplate."""
    from src.matching.models import Job

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "id": f"job-{counter['n']}",
            "title": "Software Engineer",
            "company": f"Company {counter['n']}",
        }
        data.update(overrides)
        return Job(**data)

    return _make


@pytest.fixture
def make_criteria():
    """Factory for MatchingCriteria."""
    from src.matching.models import MatchingCriteria

    def _make(**overrides):
        return MatchingCriteria(**overrides)

    return _make


@pytest.fixture
def matcher():
    """JobMatcher with default weights, isolated from the environment."""
    from src.matching.config import MatchingConfig
    from src.matching.service import JobMatcher

    return JobMatcher(config=MatchingConfig(_env_file=None))  # type: ignore[call-arg]


@pytest.fixture
def engine(matcher):
    """RecommendationEngine with default config, isolated from the environment."""
    from src.recommend.config import RecommendationConfig
    from src.recommend.service import RecommendationEngine

    config = RecommendationConfig(_env_file=None)  # type: ignore[call-arg]
    return RecommendationEngine(config=config, matcher=matcher)


@pytest.fixture
def strong_job(make_job):
    """A fully-populated job that a Go/SQL candidate matches very well."""

    def _make(**overrides):
        data = {
            "title": "Backend Engineer",
            "industry": "Technology",
            "location": "Austin, TX",
            "remote": True,
            "salary_min": 100000,
            "salary_max": 130000,
            "required_skills": ["Go", "SQL"],
            "experience_required": 3,
            "education_required": ["Bachelor"],
            "job_type": "full-time",
            "posted_at": datetime(2026, 2, 28, 12, 0, tzinfo=UTC),
        }
        data.update(overrides)
        return make_job(**data)

    return _make


@pytest.fixture
def go_criteria(make_criteria):
    """Candidate criteria matching ``strong_job`` on every dimension."""
    return make_criteria(
        skills=["go", "sql", "python"],
        experience=3,
        education=["Bachelor of Science"],
        location="Austin, TX",
        salary_range=(110000, 140000),
        industries=["Technology"],
        remote=True,
    )
