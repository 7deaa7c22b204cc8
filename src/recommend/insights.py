"""Aggregate insights over a recommendation list."""

from __future__ import annotations

from collections import Counter

from src.matching.similarity import normalize_skill
from src.recommend.models import (
    JobRecommendation,
    LocationInsights,
    RecommendationInsights,
    RecommendationType,
    SalaryInsights,
)

TOP_SKILLS = 10
TOP_INDUSTRIES = 5
TOP_LOCATIONS = 5


def _top(counts: Counter[str], n: int) -> list[str]:
    # Counter.most_common keeps first-seen order among equal counts.
    return [name for name, _count in counts.most_common(n)]


def build_insights(recommendations: list[JobRecommendation]) -> RecommendationInsights:
    """Summarize tiers, skills, industries, salary and location.

    Reports on whatever the ranking stage surfaced; applies no thresholds of
    its own. An empty list yields zeroed aggregates.
    """
    total = len(recommendations)
    if total == 0:
        return RecommendationInsights()

    tiers: Counter[RecommendationType] = Counter(
        r.recommendation_type for r in recommendations
    )

    skill_counts: Counter[str] = Counter()
    industry_counts: Counter[str] = Counter()
    location_counts: Counter[str] = Counter()
    salaries: list[float] = []
    skill_names: dict[str, str] = {}
    remote_jobs = 0

    for rec in recommendations:
        job = rec.job
        for skill in job.required_skills:
            key = normalize_skill(skill)
            skill_names.setdefault(key, skill)
            skill_counts[key] += 1
        if job.industry:
            industry_counts[job.industry] += 1
        if job.has_salary_range:
            salaries.append((job.salary_min + job.salary_max) / 2)
        if job.remote:
            remote_jobs += 1
        elif job.location:
            city = job.location.split(",")[0].strip()
            if city:
                location_counts[city] += 1

    salary = SalaryInsights()
    if salaries:
        salary = SalaryInsights(
            average=round(sum(salaries) / len(salaries)),
            minimum=round(min(salaries)),
            maximum=round(max(salaries)),
        )

    return RecommendationInsights(
        total_jobs=total,
        perfect_matches=tiers[RecommendationType.PERFECT_MATCH],
        good_matches=tiers[RecommendationType.GOOD_MATCH],
        explore_opportunities=tiers[RecommendationType.EXPLORE],
        stretch_goals=tiers[RecommendationType.STRETCH],
        average_fit_score=round(sum(r.fit_score for r in recommendations) / total, 2),
        top_skills=[skill_names[key] for key in _top(skill_counts, TOP_SKILLS)],
        top_industries=_top(industry_counts, TOP_INDUSTRIES),
        salary=salary,
        location=LocationInsights(
            remote_percentage=round(remote_jobs / total * 100, 2),
            top_locations=_top(location_counts, TOP_LOCATIONS),
        ),
    )
