"""Ranking helpers shared by the strategy, engine and selector."""

from __future__ import annotations

from collections.abc import Iterable

from workout_engine.models.recommendation import Recommendation, priority_for_confidence

__all__ = ["filter_by_confidence", "priority_for_confidence", "sort_recommendations"]


def sort_recommendations(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    """Priority weight descending, then confidence descending.

    ``sorted`` is stable, so ties keep their input order.
    """
    return sorted(recommendations, key=lambda r: (-r.priority, -r.confidence))


def filter_by_confidence(
    recommendations: Iterable[Recommendation], threshold: float
) -> list[Recommendation]:
    return [r for r in recommendations if r.confidence >= threshold]
