from workout_engine.strategy.ranking import (
    filter_by_confidence,
    priority_for_confidence,
    sort_recommendations,
)
from workout_engine.strategy.recommendation_strategy import (
    DOMAINS,
    DomainSpec,
    RecommendationStrategy,
)

__all__ = [
    "DOMAINS",
    "DomainSpec",
    "RecommendationStrategy",
    "filter_by_confidence",
    "priority_for_confidence",
    "sort_recommendations",
]
