"""Energy evaluator: session intensity from the self-reported 1-10 energy rating.

Five bands: rest (<=2), light (<=4), balanced (<=6), ready (<=8), high (>8).
Each insight carries the suggested session intensity in its metadata so
context analysis can pick it up without parsing text.
"""

from __future__ import annotations

from workout_engine.context.transformers import coerce_number
from workout_engine.evaluators.base import DomainEvaluator
from workout_engine.models.context import GlobalAnalysisContext
from workout_engine.models.enums import DEFAULT_ENERGY_RATING, SessionIntensity
from workout_engine.models.recommendation import Insight

_BANDS: tuple[tuple[float, str, float, SessionIntensity], ...] = (
    (2, "Consider resting or limiting to light mobility work today", 0.95, SessionIntensity.LIGHT),
    (4, "Keep intensity light and take longer rest between sets", 0.85, SessionIntensity.LIGHT),
    (6, "A balanced moderate-intensity session suits your current energy", 0.75, SessionIntensity.MODERATE),
    (8, "Ready for a moderate to high-intensity workout", 0.85, SessionIntensity.MODERATE),
)
_HIGH = (
    "Energy is high: include challenging intervals or heavier working sets",
    0.9,
    SessionIntensity.INTENSE,
)


class EnergyEvaluator(DomainEvaluator):
    """Maps the energy rating onto an intensity suggestion."""

    domain = "energy"

    def analyze(
        self, domain_input: object, global_context: GlobalAnalysisContext
    ) -> list[Insight]:
        rating = coerce_number(domain_input, DEFAULT_ENERGY_RATING)

        text, confidence, intensity = _HIGH
        for upper, band_text, band_confidence, band_intensity in _BANDS:
            if rating <= upper:
                text, confidence, intensity = band_text, band_confidence, band_intensity
                break

        return [
            Insight(
                recommendation=text,
                confidence=confidence,
                metadata={"intensity": intensity.value, "energy": rating},
            )
        ]
