"""Soreness evaluator: load management for sore muscle groups.

Only runs when the workout carries soreness data. A rating of 7 or more
produces a high-confidence recovery insight, which the prompt selector
treats as a recovery trigger.
"""

from __future__ import annotations

from workout_engine.evaluators.base import DomainEvaluator
from workout_engine.models.context import GlobalAnalysisContext, Soreness
from workout_engine.models.enums import SORENESS_NOTE_RATING
from workout_engine.models.recommendation import Insight

_MODERATE_RATING = 4


class SorenessEvaluator(DomainEvaluator):
    """Adjusts load and focus around reported soreness."""

    domain = "soreness"

    def analyze(
        self, domain_input: Soreness | None, global_context: GlobalAnalysisContext
    ) -> list[Insight]:
        if domain_input is None:
            return []

        rating = domain_input.rating
        areas = ", ".join(a.replace("_", " ") for a in domain_input.areas)
        metadata = {"rating": rating, "areas": domain_input.areas}

        if rating >= SORENESS_NOTE_RATING:
            return [
                Insight(
                    recommendation=(
                        "Prioritize recovery: swap heavy loading for mobility "
                        "and light movement"
                    ),
                    confidence=0.9,
                    metadata=metadata,
                )
            ]
        if rating >= _MODERATE_RATING:
            target = areas or "sore muscle groups"
            return [
                Insight(
                    recommendation=f"Reduce load on areas that are sore: {target}",
                    confidence=0.8,
                    metadata=metadata,
                )
            ]
        if rating > 0 or domain_input.areas:
            return [
                Insight(
                    message="Include light mobility work for minor soreness",
                    confidence=0.7,
                    metadata=metadata,
                )
            ]
        return []
