"""
Game recommendation: play history -> preference profile -> constraint
relaxation search over IGDB, with a popularity fallback.
"""

from gamematch.services.recommendation.engine import RecommendationService, get_recommendation_service
from gamematch.services.recommendation.history import PlayHistoryAggregator
from gamematch.services.recommendation.profile import PreferenceProfileBuilder, SkipReason
from gamematch.services.recommendation.search import ConstraintRelaxationSearch

__all__ = [
    "ConstraintRelaxationSearch",
    "PlayHistoryAggregator",
    "PreferenceProfileBuilder",
    "RecommendationService",
    "SkipReason",
    "get_recommendation_service",
]
