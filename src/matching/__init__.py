"""Job matching.

Scores a single job posting against a candidate's matching criteria across six
weighted dimensions, with a confidence estimate based on data completeness.

Public API:
    - JobMatcher: The Matcher (``match(job, criteria) -> JobMatch``)
    - Job, UserProfile, MatchingCriteria: Input models
    - JobMatch, DimensionScores: Output models
    - MatchingConfig: Weights and skill-matching settings
    - ProfileService, load_jobs, parse_jobs: Input loading
"""

from src.matching.config import (
    DEFAULT_WEIGHTS,
    MatchingConfig,
    get_matching_config,
    reset_matching_config,
)
from src.matching.corpus import CorpusError, load_jobs, parse_jobs
from src.matching.models import (
    DimensionScores,
    Job,
    JobMatch,
    JobPreferences,
    MatchingCriteria,
    UserProfile,
)
from src.matching.profile import ProfileService
from src.matching.service import JobMatcher

__all__ = [
    "JobMatcher",
    "Job",
    "JobPreferences",
    "UserProfile",
    "MatchingCriteria",
    "JobMatch",
    "DimensionScores",
    "MatchingConfig",
    "DEFAULT_WEIGHTS",
    "get_matching_config",
    "reset_matching_config",
    "ProfileService",
    "CorpusError",
    "load_jobs",
    "parse_jobs",
]
