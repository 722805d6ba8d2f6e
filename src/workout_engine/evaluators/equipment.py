"""Equipment evaluator: how to use the selected equipment.

Three or more pieces produce two high-confidence equipment insights,
enough for the prompt selector to pick the equipment-focused template.
"""

from __future__ import annotations

from collections.abc import Sequence

from workout_engine.evaluators.base import DomainEvaluator
from workout_engine.models.context import GlobalAnalysisContext
from workout_engine.models.recommendation import Insight

BODYWEIGHT_TOKENS = frozenset({"body_weight", "bodyweight", "none", "no_equipment"})


def _label(token: str) -> str:
    return token.replace("_", " ")


class EquipmentEvaluator(DomainEvaluator):
    domain = "equipment"

    def analyze(
        self, domain_input: Sequence[str] | None, global_context: GlobalAnalysisContext
    ) -> list[Insight]:
        pieces = [e for e in (domain_input or ()) if e not in BODYWEIGHT_TOKENS]
        metadata = {"equipment": tuple(pieces)}

        if not pieces:
            return [
                Insight(
                    recommendation="Use bodyweight progressions such as tempo and pause reps",
                    confidence=0.8,
                    metadata=metadata,
                )
            ]

        labels = [_label(p) for p in pieces]
        if len(pieces) >= 3:
            return [
                Insight(
                    recommendation=(
                        f"Rotate between {', '.join(labels[:-1])} and {labels[-1]} for variety"
                    ),
                    confidence=0.8,
                    metadata=metadata,
                ),
                Insight(
                    recommendation="Pair different equipment in supersets to keep transitions short",
                    confidence=0.8,
                    metadata=metadata,
                ),
            ]
        return [
            Insight(
                recommendation=f"Build the main sets around {' and '.join(labels)}",
                confidence=0.75,
                metadata=metadata,
            )
        ]
