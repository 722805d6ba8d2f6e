"""Cross-component evaluator: interactions between selections.

Looks at combinations no single-domain evaluator can see, e.g. low energy
paired with a long session, or high soreness paired with a strength focus.
The domain input is the ``customization_*`` selections mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from workout_engine.context.transformers import coerce_number
from workout_engine.evaluators.base import DomainEvaluator
from workout_engine.models.context import GlobalAnalysisContext, Soreness
from workout_engine.models.enums import (
    DEFAULT_DURATION_MIN,
    DEFAULT_ENERGY_RATING,
    SORENESS_NOTE_RATING,
)
from workout_engine.models.recommendation import Insight

_LOW_ENERGY = 3
_HIGH_ENERGY = 8
_LONG_SESSION_MIN = 45
_SHORT_SESSION_MIN = 20


class CrossComponentEvaluator(DomainEvaluator):
    """Flags conflicting or reinforcing combinations of selections."""

    domain = "cross_component"

    def analyze(
        self, domain_input: Mapping[str, Any] | None, global_context: GlobalAnalysisContext
    ) -> list[Insight]:
        selections = domain_input or {}
        energy = coerce_number(selections.get("customization_energy"), DEFAULT_ENERGY_RATING)
        duration = coerce_number(selections.get("customization_duration"), DEFAULT_DURATION_MIN)
        focus = str(selections.get("customization_focus") or "")
        soreness = selections.get("customization_soreness")
        soreness_rating = soreness.rating if isinstance(soreness, Soreness) else 0

        insights: list[Insight] = []
        if energy <= _LOW_ENERGY and duration >= _LONG_SESSION_MIN:
            insights.append(
                Insight(
                    recommendation=(
                        "Low energy with a long session: front-load the key work "
                        "and taper intensity"
                    ),
                    confidence=0.85,
                    metadata={"energy": energy, "duration": duration},
                )
            )
        if soreness_rating >= SORENESS_NOTE_RATING and focus == "strength":
            insights.append(
                Insight(
                    recommendation=(
                        "High soreness with a strength focus: reduce volume and "
                        "avoid maximal loads"
                    ),
                    confidence=0.9,
                    metadata={"soreness": soreness_rating, "focus": focus},
                )
            )
        if energy >= _HIGH_ENERGY and duration <= _SHORT_SESSION_MIN:
            insights.append(
                Insight(
                    recommendation=(
                        "High energy in a short window: use intervals to raise intensity"
                    ),
                    confidence=0.8,
                    metadata={"energy": energy, "duration": duration},
                )
            )
        if global_context.injuries:
            injuries = ", ".join(i.replace("_", " ") for i in global_context.injuries)
            insights.append(
                Insight(
                    recommendation=f"Avoid movements that aggravate: {injuries}",
                    confidence=0.9,
                    metadata={"injuries": global_context.injuries},
                )
            )
        return insights
