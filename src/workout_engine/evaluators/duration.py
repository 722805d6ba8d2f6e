"""Duration evaluator: session format for the time available.

Every insight names the session length as "N min" so that context
analysis can read a suggested duration back out of the text.
"""

from __future__ import annotations

from workout_engine.context.transformers import coerce_number, experience_tier
from workout_engine.evaluators.base import DomainEvaluator
from workout_engine.models.context import GlobalAnalysisContext
from workout_engine.models.enums import DEFAULT_DURATION_MIN
from workout_engine.models.recommendation import Insight


class DurationEvaluator(DomainEvaluator):
    """Suggests a session format for the selected duration."""

    domain = "duration"

    def analyze(
        self, domain_input: object, global_context: GlobalAnalysisContext
    ) -> list[Insight]:
        minutes = int(coerce_number(domain_input, DEFAULT_DURATION_MIN))
        if minutes <= 0:
            return []
        metadata = {"duration": minutes}

        if minutes <= 15:
            text, confidence = (
                f"Use a short circuit format to make the most of {minutes} min",
                0.8,
            )
        elif minutes <= 30:
            text, confidence = (
                f"Keep rest periods tight to fit a full session into {minutes} min",
                0.75,
            )
        elif minutes <= 60:
            text, confidence = (
                f"Plan for about {minutes} min including warm-up and cool-down",
                0.75,
            )
        elif experience_tier(global_context.experience_level) == "beginner":
            text, confidence = (
                f"Split the {minutes} min session into two shorter blocks with a break",
                0.85,
            )
        else:
            text, confidence = (
                f"Plan for about {minutes} min with easy spells between main blocks",
                0.75,
            )
        return [Insight(recommendation=text, confidence=confidence, metadata=metadata)]
