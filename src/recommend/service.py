"""Recommender: ranks a job corpus for one candidate."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import UTC, datetime

from src.matching.models import Job, JobMatch, MatchingCriteria
from src.matching.service import JobMatcher
from src.recommend.config import RecommendationConfig, get_recommendation_config
from src.recommend.insights import build_insights
from src.recommend.models import (
    JobRecommendation,
    RecommendationInsights,
    RecommendationType,
    ScenarioRecommendations,
)
from src.utils.logging import get_logger

logger = get_logger(__name__)

# (minimum fit, minimum confidence, tier); both bars must be cleared.
TIER_RULES: tuple[tuple[float, float, RecommendationType], ...] = (
    (0.9, 0.8, RecommendationType.PERFECT_MATCH),
    (0.7, 0.6, RecommendationType.GOOD_MATCH),
    (0.5, 0.5, RecommendationType.EXPLORE),
)

PRIORITY_FIT_WEIGHT = 0.4
PRIORITY_CONFIDENCE_WEIGHT = 0.3
UNIFORM_DIVERSITY_FACTOR = 0.1

HIGH_MATCH_FIT = 0.9
HIGH_CONFIDENCE = 0.8
JUST_POSTED_DAYS = 3

RESPONSE_RATE_BASE = 0.10
RESPONSE_RATE_FIT_WEIGHT = 0.3
RESPONSE_RATE_CONFIDENCE_WEIGHT = 0.2
RESPONSE_RATE_HIGH_MATCH_BONUS = 0.2
RESPONSE_RATE_FRESH_BONUS = 0.1
RESPONSE_RATE_CAP = 0.8

# (max days since posting, hint)
TIME_TO_APPLY_STEPS: tuple[tuple[float, str], ...] = (
    (1, "Apply today"),
    (3, "Apply within 2 days"),
    (7, "Apply within a week"),
    (14, "Apply within 2 weeks"),
)
TIME_TO_APPLY_LATE = "Apply soon"
TIME_TO_APPLY_UNKNOWN = "Unknown"

SCENARIO_SIZE = 5

# Timestamps up to this far ahead of `now` are clock skew and read as age 0;
# anything later is treated as having no timestamp.
FUTURE_SKEW_DAYS = 1


def days_since_posted(job: Job, now: datetime) -> float | None:
    """Age of a posting in days, or None without a usable timestamp.

    Naive timestamps are read as UTC. Postings dated more than a day in the
    future are treated as undated.
    """
    if job.posted_at is None:
        return None
    posted = job.posted_at
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    age = (now - posted).total_seconds() / 86400
    if age < -FUTURE_SKEW_DAYS:
        return None
    return max(age, 0.0)


class RecommendationEngine:
    """Runs the Matcher over a corpus and turns matches into recommendations.

    Holds only configuration and a Matcher; every ``recommend`` call keeps its
    working state local, so one engine can serve concurrent requests.
    """

    def __init__(
        self,
        config: RecommendationConfig | None = None,
        matcher: JobMatcher | None = None,
    ) -> None:
        self.config = config or get_recommendation_config()
        self.matcher = matcher or JobMatcher()

    def match_all(
        self,
        jobs: list[Job],
        criteria: MatchingCriteria,
        config: RecommendationConfig | None = None,
    ) -> list[JobMatch]:
        """Match every job, in corpus order, on a bounded thread pool."""
        config = config or self.config
        workers = config.max_workers or os.cpu_count() or 1
        workers = min(workers, len(jobs))

        if workers <= 1:
            return [self.matcher.match(job, criteria) for job in jobs]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda job: self.matcher.match(job, criteria), jobs))

    def classify(self, match: JobMatch) -> RecommendationType:
        for min_fit, min_confidence, tier in TIER_RULES:
            if match.fit_score >= min_fit and match.confidence >= min_confidence:
                return tier
        return RecommendationType.STRETCH

    def calculate_priority(
        self,
        match: JobMatch,
        now: datetime,
        config: RecommendationConfig | None = None,
    ) -> float:
        """Ordering score from fit, confidence and contextual boosts."""
        config = config or self.config
        priority = (
            PRIORITY_FIT_WEIGHT * match.fit_score
            + PRIORITY_CONFIDENCE_WEIGHT * match.confidence
        )

        if match.salary_match:
            priority += config.salary_weight
        if match.location_match:
            priority += config.location_weight

        age = days_since_posted(match.job, now)
        if age is not None and age <= config.recent_days:
            priority += config.recency_weight

        priority += config.diversity_weight * UNIFORM_DIVERSITY_FACTOR
        return min(priority, 1.0)

    def generate_tags(
        self,
        match: JobMatch,
        now: datetime,
        config: RecommendationConfig | None = None,
    ) -> list[str]:
        config = config or self.config
        job = match.job
        tags: list[str] = []

        if match.fit_score >= HIGH_MATCH_FIT:
            tags.append("High Match")
        if match.confidence >= HIGH_CONFIDENCE:
            tags.append("High Confidence")
        if match.salary_match:
            tags.append("Salary Match")
        if match.location_match:
            tags.append("Location Match")
        if job.remote:
            tags.append("Remote")

        age = days_since_posted(job, now)
        if age is not None:
            if age <= JUST_POSTED_DAYS:
                tags.append("Just Posted")
            elif age <= config.recent_days:
                tags.append("Recent")

        if job.industry:
            tags.append(job.industry)
        if job.job_type:
            tags.append(job.job_type)
        return tags

    def estimate_response_rate(self, match: JobMatch, now: datetime) -> float:
        rate = (
            RESPONSE_RATE_BASE
            + RESPONSE_RATE_FIT_WEIGHT * match.fit_score
            + RESPONSE_RATE_CONFIDENCE_WEIGHT * match.confidence
        )
        if match.fit_score >= HIGH_MATCH_FIT:
            rate += RESPONSE_RATE_HIGH_MATCH_BONUS

        age = days_since_posted(match.job, now)
        if age is not None and age <= JUST_POSTED_DAYS:
            rate += RESPONSE_RATE_FRESH_BONUS
        return min(rate, RESPONSE_RATE_CAP)

    def time_to_apply(self, job: Job, now: datetime) -> str:
        age = days_since_posted(job, now)
        if age is None:
            return TIME_TO_APPLY_UNKNOWN
        for max_days, hint in TIME_TO_APPLY_STEPS:
            if age <= max_days:
                return hint
        return TIME_TO_APPLY_LATE

    def create_recommendation(
        self,
        match: JobMatch,
        now: datetime,
        config: RecommendationConfig | None = None,
    ) -> JobRecommendation:
        config = config or self.config
        return JobRecommendation(
            match=match,
            recommendation_type=self.classify(match),
            priority=self.calculate_priority(match, now, config),
            tags=self.generate_tags(match, now, config),
            estimated_response_rate=self.estimate_response_rate(match, now),
            time_to_apply=self.time_to_apply(match.job, now),
        )

    def rank(
        self,
        recommendations: list[JobRecommendation],
        config: RecommendationConfig | None = None,
    ) -> list[JobRecommendation]:
        """Sort by priority, then bump the first of each company and industry.

        One pass in priority order; ties keep corpus order, so the earlier of
        two equal-priority postings is the one treated as first seen.
        """
        config = config or self.config
        ranked = sorted(recommendations, key=lambda r: r.priority, reverse=True)

        seen_companies: set[str] = set()
        seen_industries: set[str] = set()
        bumped: list[JobRecommendation] = []

        for rec in ranked:
            boost = 0.0
            company = (rec.job.company or "").strip().casefold()
            if company and company not in seen_companies:
                seen_companies.add(company)
                boost += config.company_diversity_bonus
            industry = (rec.job.industry or "").strip().casefold()
            if industry and industry not in seen_industries:
                seen_industries.add(industry)
                boost += config.industry_diversity_bonus

            if boost:
                rec = replace(rec, priority=min(rec.priority + boost, 1.0))
            bumped.append(rec)

        return sorted(bumped, key=lambda r: r.priority, reverse=True)

    def recommend(
        self,
        jobs: list[Job],
        criteria: MatchingCriteria,
        config: RecommendationConfig | None = None,
        now: datetime | None = None,
    ) -> list[JobRecommendation]:
        """Return ranked recommendations for ``criteria`` over ``jobs``."""
        config = config or self.config
        now = now or datetime.now(UTC)

        if not jobs:
            logger.warning("Empty job corpus; no recommendations to make")
            return []

        matches = self.match_all(jobs, criteria, config)
        retained = [
            m
            for m in matches
            if m.fit_score >= config.min_fit_score
            and m.confidence >= config.min_confidence
        ]
        logger.debug(
            "Retained %d of %d matches (min_fit=%.2f, min_confidence=%.2f)",
            len(retained),
            len(matches),
            config.min_fit_score,
            config.min_confidence,
        )

        recommendations = [
            self.create_recommendation(m, now, config) for m in retained
        ]
        ranked = self.rank(recommendations, config)
        result = ranked[: config.max_recommendations]

        logger.info(
            "Recommended %d job(s) from a corpus of %d", len(result), len(jobs)
        )
        return result

    def insights(
        self, recommendations: list[JobRecommendation]
    ) -> RecommendationInsights:
        return build_insights(recommendations)

    def scenarios(
        self,
        recommendations: list[JobRecommendation],
        criteria: MatchingCriteria,
    ) -> ScenarioRecommendations:
        """Slice a recommendation list into quick wins, growth, salary and remote."""
        experience = criteria.experience or 0
        salary_ceiling = criteria.salary_range[1] if criteria.salary_range else None
        quick_tiers = {RecommendationType.PERFECT_MATCH, RecommendationType.GOOD_MATCH}

        return ScenarioRecommendations(
            quick_wins=[
                r for r in recommendations if r.recommendation_type in quick_tiers
            ][:SCENARIO_SIZE],
            career_growth=[
                r
                for r in recommendations
                if r.job.experience_required
                and r.job.experience_required > experience
            ][:SCENARIO_SIZE],
            salary_boost=[
                r
                for r in recommendations
                if salary_ceiling is not None
                and r.job.salary_min is not None
                and r.job.salary_min > salary_ceiling
            ][:SCENARIO_SIZE],
            remote_work=[r for r in recommendations if r.job.remote][:SCENARIO_SIZE],
        )

    def get_scenario_recommendations(
        self,
        jobs: list[Job],
        criteria: MatchingCriteria,
        config: RecommendationConfig | None = None,
        now: datetime | None = None,
    ) -> ScenarioRecommendations:
        """Run ``recommend`` and slice the result into scenario views."""
        recommendations = self.recommend(jobs, criteria, config=config, now=now)
        return self.scenarios(recommendations, criteria)

    def format_recommendation(self, rec: JobRecommendation) -> str:
        """Format a JobRecommendation for CLI output."""
        lines: list[str] = []
        lines.append(
            f"[{rec.recommendation_type.value.upper()}] "
            f"priority={rec.priority:.2f} "
            f"response_rate={rec.estimated_response_rate:.0%} "
            f"({rec.time_to_apply})"
        )
        lines.append(self.matcher.format_match(rec.match))
        if rec.tags:
            lines.append(f"Tags: {', '.join(rec.tags)}")
        return "\n".join(lines)
