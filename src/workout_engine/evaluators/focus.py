"""Focus evaluator: session structure for the chosen workout focus."""

from __future__ import annotations

from workout_engine.context.transformers import experience_tier
from workout_engine.evaluators.base import DomainEvaluator
from workout_engine.models.context import GlobalAnalysisContext
from workout_engine.models.recommendation import Insight

_FOCUS_GUIDANCE: dict[str, tuple[str, float]] = {
    "strength": ("Emphasize compound lifts with a controlled tempo", 0.8),
    "cardio": ("Hold a steady aerobic effort with short tempo bursts", 0.8),
    "hiit": ("Alternate hard work intervals with equal or longer easy intervals", 0.8),
    "flexibility": (
        "Use slow controlled stretching to aid recovery and range of motion",
        0.75,
    ),
    "recovery": ("Keep the session restorative to support recovery", 0.85),
}


class FocusEvaluator(DomainEvaluator):
    """Structures the session around focus and experience."""

    domain = "focus"

    def analyze(
        self, domain_input: str | None, global_context: GlobalAnalysisContext
    ) -> list[Insight]:
        focus = (domain_input or "").strip().lower()
        if not focus:
            return []

        insights: list[Insight] = []
        text, confidence = _FOCUS_GUIDANCE.get(
            focus, (f"Structure the session around {focus.replace('_', ' ')} goals", 0.7)
        )
        insights.append(
            Insight(recommendation=text, confidence=confidence, metadata={"focus": focus})
        )

        if experience_tier(global_context.experience_level) == "beginner":
            insights.append(
                Insight(
                    recommendation="Focus on fundamental movement patterns before adding load",
                    confidence=0.85,
                    metadata={"focus": focus},
                )
            )
        return insights
