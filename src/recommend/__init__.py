"""Job recommendations.

Runs the Matcher across a job corpus, keeps matches that clear the fit and
confidence thresholds, assigns tiers and ranks them with recency, salary,
location and diversity boosts.

Public API:
    - RecommendationEngine: ``recommend``, ``insights`` and scenario views
    - JobRecommendation, RecommendationType: Output models
    - RecommendationInsights, ScenarioRecommendations: Aggregates
    - RecommendationConfig: Thresholds and priority weights
"""

from src.recommend.config import (
    RecommendationConfig,
    get_recommendation_config,
    reset_recommendation_config,
)
from src.recommend.insights import build_insights
from src.recommend.models import (
    JobRecommendation,
    LocationInsights,
    RecommendationInsights,
    RecommendationType,
    SalaryInsights,
    ScenarioRecommendations,
)
from src.recommend.service import RecommendationEngine

__all__ = [
    "RecommendationEngine",
    "JobRecommendation",
    "RecommendationType",
    "RecommendationInsights",
    "SalaryInsights",
    "LocationInsights",
    "ScenarioRecommendations",
    "RecommendationConfig",
    "get_recommendation_config",
    "reset_recommendation_config",
    "build_insights",
]
