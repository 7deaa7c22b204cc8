"""Matcher implementation: scores one job against one set of criteria."""

from __future__ import annotations

from src.matching.config import MatchingConfig, get_matching_config
from src.matching.models import DimensionScores, Job, JobMatch, MatchingCriteria
from src.matching.similarity import compare_skills, text_contains_either

# Neutral / lenient scores used when a dimension has nothing to compare.
NEUTRAL_SCORE = 0.5
NO_SKILLS_SCORE = NEUTRAL_SCORE
NO_EXPERIENCE_REQUIREMENT_SCORE = 0.8
NO_EDUCATION_REQUIREMENT_SCORE = 0.8

# (max |candidate - required| years, score); anything beyond the table scores
# EXPERIENCE_FLOOR.
EXPERIENCE_STEPS: tuple[tuple[float, float], ...] = (
    (0, 1.0),
    (1, 0.9),
    (2, 0.7),
    (3, 0.5),
    (5, 0.3),
)
EXPERIENCE_FLOOR = 0.1

REMOTE_ACCEPTED_SCORE = 1.0
REMOTE_NOT_ACCEPTED_SCORE = 0.6
LOCATION_EXACT_SCORE = 1.0
LOCATION_CONTAINS_SCORE = 0.8
LOCATION_REGION_SCORE = 0.6
LOCATION_MISMATCH_SCORE = 0.2

SALARY_OVERLAP_SCORE = 1.0
# (max relative midpoint difference, score)
SALARY_STEPS: tuple[tuple[float, float], ...] = (
    (0.2, 0.8),
    (0.4, 0.6),
    (0.6, 0.4),
)
SALARY_FLOOR = 0.2

INDUSTRY_MATCH_SCORE = 1.0
INDUSTRY_MISMATCH_SCORE = 0.3

# Confidence grows with data completeness and never claims certainty.
CONFIDENCE_BASE = 0.5
CONFIDENCE_MAJOR_FIELD = 0.1
CONFIDENCE_MINOR_FIELD = 0.05
CONFIDENCE_MIN = 0.3
CONFIDENCE_MAX = 0.9

# Thresholds for reasons / improvements and the boolean match flags.
STRONG_DIMENSION = 0.8
CLOSE_DIMENSION = 0.6
WEAK_DIMENSION = 0.6
MATCH_FLAG_THRESHOLD = 0.7

FALLBACK_REASON = "Potential match based on available criteria"
UNKNOWN_COMPANY = "Unknown company"


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _region(location: str) -> str | None:
    """Trailing comma-separated token of a location, e.g. 'tx' for 'Austin, TX'."""
    parts = [part.strip() for part in location.split(",")]
    if len(parts) > 1 and parts[-1]:
        return parts[-1].lower()
    return None


class JobMatcher:
    """Deterministic, rule-based Matcher.

    ``match`` holds no state between calls and touches no I/O, so one
    instance can serve any number of threads.
    """

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()

    def score_skills(
        self, job: Job, criteria: MatchingCriteria
    ) -> tuple[float, list[str], list[str], list[str]]:
        """Score required skills against the candidate's skills.

        Returns:
            score, exact-matched skills, fuzzy-only skills, missing skills
        """
        if not job.required_skills:
            return NO_SKILLS_SCORE, [], [], []

        comparison = compare_skills(
            required=job.required_skills,
            available=criteria.skills,
            threshold=self.config.skill_fuzzy_threshold,
            aliases=self.config.skill_aliases,
        )
        if comparison.total == 0:
            return NO_SKILLS_SCORE, [], [], []

        credit = len(comparison.exact) + self.config.skill_fuzzy_weight * len(
            comparison.fuzzy
        )
        score = _clamp(credit / comparison.total)
        return score, comparison.exact, comparison.fuzzy, comparison.missing

    def score_experience(self, job: Job, criteria: MatchingCriteria) -> float:
        """Step function over the absolute gap in years."""
        if not job.experience_required:
            return NO_EXPERIENCE_REQUIREMENT_SCORE

        diff = abs((criteria.experience or 0) - job.experience_required)
        for max_diff, score in EXPERIENCE_STEPS:
            if diff <= max_diff:
                return score
        return EXPERIENCE_FLOOR

    def score_location(self, job: Job, criteria: MatchingCriteria) -> float:
        """Score location fit, treating remote jobs separately."""
        if job.remote:
            return REMOTE_ACCEPTED_SCORE if criteria.remote else REMOTE_NOT_ACCEPTED_SCORE

        job_location = (job.location or "").strip().lower()
        user_location = (criteria.location or "").strip().lower()
        if not job_location or not user_location:
            return NEUTRAL_SCORE

        if job_location == user_location:
            return LOCATION_EXACT_SCORE
        if text_contains_either(job_location, user_location):
            return LOCATION_CONTAINS_SCORE

        job_region = _region(job_location)
        if job_region is not None and job_region == _region(user_location):
            return LOCATION_REGION_SCORE
        return LOCATION_MISMATCH_SCORE

    def score_salary(self, job: Job, criteria: MatchingCriteria) -> float:
        """Overlap scores full marks; otherwise compare range midpoints."""
        if not job.has_salary_range or criteria.salary_range is None:
            return NEUTRAL_SCORE

        user_min, user_max = criteria.salary_range
        job_min, job_max = job.salary_min, job.salary_max
        if user_min <= job_max and user_max >= job_min:
            return SALARY_OVERLAP_SCORE

        user_mid = (user_min + user_max) / 2
        job_mid = (job_min + job_max) / 2
        if user_mid <= 0:
            return SALARY_FLOOR

        diff = abs(user_mid - job_mid) / user_mid
        for max_diff, score in SALARY_STEPS:
            if diff <= max_diff:
                return score
        return SALARY_FLOOR

    def score_education(self, job: Job, criteria: MatchingCriteria) -> float:
        """Fraction of required credentials the candidate holds."""
        required = job.education_required
        if not required:
            return NO_EDUCATION_REQUIREMENT_SCORE

        matched = sum(
            1
            for credential in required
            if any(text_contains_either(credential, own) for own in criteria.education)
        )
        return matched / len(required)

    def score_industry(self, job: Job, criteria: MatchingCriteria) -> float:
        if not job.industry or not criteria.industries:
            return NEUTRAL_SCORE
        if any(text_contains_either(job.industry, pref) for pref in criteria.industries):
            return INDUSTRY_MATCH_SCORE
        return INDUSTRY_MISMATCH_SCORE

    def calculate_confidence(self, job: Job, criteria: MatchingCriteria) -> float:
        """Estimate how much of the fit score is backed by real data."""
        major = CONFIDENCE_MAJOR_FIELD
        minor = CONFIDENCE_MINOR_FIELD
        populated = (
            (bool(job.required_skills), major),
            (job.experience_required is not None, major),
            (job.has_salary_range, major),
            (bool(job.location), minor),
            (bool(job.education_required), minor),
            (bool(criteria.skills), major),
            (criteria.experience is not None, major),
            (criteria.salary_range is not None, major),
        )
        confidence = CONFIDENCE_BASE + sum(inc for present, inc in populated if present)
        return _clamp(confidence, CONFIDENCE_MIN, CONFIDENCE_MAX)

    def calculate_fit_score(self, dimensions: DimensionScores) -> float:
        """Weighted sum of the dimension scores."""
        weights = self.config.weights
        scores = dimensions.as_dict()
        return _clamp(sum(weights[name] * scores[name] for name in weights))

    def score_dimensions(
        self, job: Job, criteria: MatchingCriteria
    ) -> tuple[DimensionScores, list[str], list[str], list[str]]:
        skills, exact, fuzzy, missing = self.score_skills(job, criteria)
        dimensions = DimensionScores(
            skills=skills,
            experience=self.score_experience(job, criteria),
            location=self.score_location(job, criteria),
            salary=self.score_salary(job, criteria),
            education=self.score_education(job, criteria),
            industry=self.score_industry(job, criteria),
        )
        return dimensions, exact, fuzzy, missing

    def generate_reasons(self, dimensions: DimensionScores) -> list[str]:
        """Positive reasons for strong dimensions; never empty."""
        reasons: list[str] = []

        if dimensions.skills > STRONG_DIMENSION:
            reasons.append("Strong skill alignment with required qualifications")
        elif dimensions.skills > CLOSE_DIMENSION:
            reasons.append("Good skill match with some gaps")

        if dimensions.experience > STRONG_DIMENSION:
            reasons.append("Experience level matches requirements")
        elif dimensions.experience > CLOSE_DIMENSION:
            reasons.append("Experience level is close to requirements")

        if dimensions.location > STRONG_DIMENSION:
            reasons.append("Location preferences align well")
        if dimensions.salary > STRONG_DIMENSION:
            reasons.append("Salary expectations are well-aligned")
        if dimensions.education > STRONG_DIMENSION:
            reasons.append("Educational background meets requirements")
        if dimensions.industry > STRONG_DIMENSION:
            reasons.append("Industry matches your preferences")

        if not reasons:
            reasons.append(FALLBACK_REASON)
        return reasons

    def generate_improvements(
        self,
        job: Job,
        criteria: MatchingCriteria,
        dimensions: DimensionScores,
        missing_skills: list[str],
    ) -> list[str]:
        """Targeted suggestions for weak dimensions."""
        improvements: list[str] = []

        if dimensions.skills < WEAK_DIMENSION:
            focus = missing_skills[:3] or job.required_skills[:3]
            if focus:
                improvements.append(f"Consider developing skills in: {', '.join(focus)}")
            else:
                improvements.append("Consider developing skills in the required areas")

        if dimensions.experience < WEAK_DIMENSION and job.experience_required:
            gap = job.experience_required - (criteria.experience or 0)
            if gap > 0:
                improvements.append(
                    f"Gain {gap:g} more year(s) of experience in this field"
                )
            else:
                improvements.append(
                    "Highlight how your broader experience fits this role's level"
                )

        if dimensions.salary < WEAK_DIMENSION:
            improvements.append("Consider adjusting salary expectations or negotiating")

        if dimensions.education < WEAK_DIMENSION:
            improvements.append("Consider additional education or certifications")

        if dimensions.location < WEAK_DIMENSION and not job.remote:
            improvements.append(
                "Consider relocating or looking for remote opportunities"
            )

        if dimensions.industry < WEAK_DIMENSION and job.industry:
            improvements.append(
                f"Highlight experience transferable to the {job.industry} industry"
            )

        return improvements

    def match(self, job: Job, criteria: MatchingCriteria) -> JobMatch:
        """Score one job against the criteria."""
        dimensions, exact, fuzzy, missing = self.score_dimensions(job, criteria)

        return JobMatch(
            job=job,
            fit_score=self.calculate_fit_score(dimensions),
            confidence=self.calculate_confidence(job, criteria),
            dimensions=dimensions,
            reasons=self.generate_reasons(dimensions),
            improvements=self.generate_improvements(job, criteria, dimensions, missing),
            salary_match=dimensions.salary > MATCH_FLAG_THRESHOLD,
            location_match=dimensions.location > MATCH_FLAG_THRESHOLD,
            matched_skills=exact,
            fuzzy_skills=fuzzy,
            missing_skills=missing,
        )

    def find_matches(
        self, jobs: list[Job], criteria: MatchingCriteria, limit: int = 10
    ) -> list[JobMatch]:
        """Score every job and return the best ``limit`` by fit, then confidence."""
        matches = [self.match(job, criteria) for job in jobs]
        matches.sort(key=lambda m: (m.fit_score, m.confidence), reverse=True)
        return matches[: max(0, limit)]

    def format_match(self, match: JobMatch) -> str:
        """Format a JobMatch for CLI output."""
        job = match.job
        dims = match.dimensions
        lines: list[str] = []
        lines.append(f"{job.company or UNKNOWN_COMPANY} - {job.title} [{job.id}]")
        lines.append(
            f"Fit: {match.fit_score:.2f} (confidence={match.confidence:.2f})"
        )
        lines.append(
            "Scores: "
            f"skills={dims.skills:.2f} "
            f"experience={dims.experience:.2f} "
            f"location={dims.location:.2f} "
            f"salary={dims.salary:.2f} "
            f"education={dims.education:.2f} "
            f"industry={dims.industry:.2f}"
        )
        if match.matched_skills:
            lines.append(f"Skills matched: {', '.join(match.matched_skills)}")
        if match.fuzzy_skills:
            lines.append(f"Skills (similar): {', '.join(match.fuzzy_skills)}")
        if match.missing_skills:
            lines.append(f"Skills missing: {', '.join(match.missing_skills)}")
        lines.append(f"Reasons: {'; '.join(match.reasons)}")
        if match.improvements:
            lines.append(f"Improvements: {'; '.join(match.improvements)}")
        return "\n".join(lines)
