"""PromptSelector — picks and enhances a generation template.

Selection precedence:
    1. recovery          a high-priority focus insight mentions recovery
    2. equipment         two or more confident equipment insights
    3. experience tier   beginner / intermediate / advanced
    4. intermediate      fallback

The chosen template's ``{recommendations}`` placeholder is replaced with a
bullet list of the confident recommendations, and its confidence is
averaged with the mean recommendation confidence.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from workout_engine.config import EngineConfig
from workout_engine.context.transformers import experience_tier
from workout_engine.exceptions import ValidationError
from workout_engine.models.context import Context
from workout_engine.models.enums import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    EXERCISE_RECOMMENDATION_CONFIDENCE,
    Priority,
    RecommendationType,
)
from workout_engine.models.prompt import PromptTemplate
from workout_engine.models.recommendation import Recommendation
from workout_engine.prompts.templates import (
    EQUIPMENT_FOCUSED,
    INTERMEDIATE,
    RECOMMENDATIONS_PLACEHOLDER,
    RECOVERY,
    TEMPLATES,
)
from workout_engine.strategy.ranking import sort_recommendations
from workout_engine.validation.service import ValidationService

RECOVERY_CONFIDENCE = 0.8
EQUIPMENT_CONFIDENCE = 0.7
MIN_EQUIPMENT_RECOMMENDATIONS = 2

_COMPLEXITY_BY_TIER = {"advanced": "high", "intermediate": "moderate"}
_COMPLEXITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "high": ("advanced", "complex", "challenging"),
    "moderate": ("intermediate", "moderate", "standard"),
    "low": ("basic", "simple", "beginner"),
}


@dataclass(frozen=True)
class SelectionFactors:
    recovery_needed: bool
    equipment_focused: bool
    experience_level: str | None
    focus_type: str
    intensity_level: str | None
    complexity_level: str


def determine_complexity_level(
    experience_level: str | None, recommendations: Sequence[Recommendation]
) -> str:
    """Complexity from the experience tier, nudged by exercise insights.

    Keyword counts over confident exercise recommendations suggest a level.
    An advanced tier accepts any suggestion; an intermediate tier accepts
    anything but "high"; a beginner tier stays "low".
    """
    base = _COMPLEXITY_BY_TIER.get(experience_tier(experience_level) or "", "low")

    counts = dict.fromkeys(_COMPLEXITY_KEYWORDS, 0)
    for rec in recommendations:
        if (
            rec.type != RecommendationType.EXERCISE
            or rec.confidence < EXERCISE_RECOMMENDATION_CONFIDENCE
        ):
            continue
        text = rec.content.lower()
        for level, keywords in _COMPLEXITY_KEYWORDS.items():
            counts[level] += sum(1 for k in keywords if k in text)

    top = max(counts.values())
    if top == 0:
        return base
    suggested = next(level for level, count in counts.items() if count == top)

    if base == "high" or (base == "moderate" and suggested != "high"):
        return suggested
    return base


class PromptSelector:
    """Chooses one of the built-in templates for a context.

    Args:
        validator: Optional ValidationService (one is created if omitted).
        logger: Optional injected logger.
    """

    def __init__(
        self,
        validator: ValidationService | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.validator = validator or ValidationService(logger=self.logger)

    def select_prompt_template(
        self,
        context: Context,
        recommendations: Sequence[Recommendation],
        config: EngineConfig | None = None,
    ) -> PromptTemplate:
        """Pick and enhance a template.

        Args:
            context: Complete pipeline context.
            recommendations: Ranked recommendations; never mutated.
            config: Range-checked alongside the context when given.

        Returns:
            A new PromptTemplate with ``{recommendations}`` filled in.

        Raises:
            ValidationError: If the context or the recommendations are invalid.
        """
        context_result = self.validator.validate_context(context, config)
        if not context_result.is_valid:
            raise ValidationError("Invalid context for template selection", context_result)
        recs_result = self.validator.validate_recommendations(recommendations)
        if not recs_result.is_valid:
            raise ValidationError(
                "Invalid recommendations for template selection", recs_result
            )

        factors = self.analyze_factors(context, recommendations)
        name = self._choose(factors)
        template = self._enhance(TEMPLATES[name], recommendations)
        self.logger.info(
            "Selected %s template (confidence %.2f)", template.use_case, template.confidence
        )
        return template

    def analyze_factors(
        self, context: Context, recommendations: Sequence[Recommendation]
    ) -> SelectionFactors:
        profile = context.profile
        workout = context.workout
        experience = profile.experience_level if profile else None
        return SelectionFactors(
            recovery_needed=any(
                r.priority == Priority.HIGH
                and r.confidence >= RECOVERY_CONFIDENCE
                and r.type == RecommendationType.FOCUS
                and "recovery" in r.content.lower()
                for r in recommendations
            ),
            equipment_focused=self._is_equipment_focused(recommendations),
            experience_level=experience,
            focus_type=workout.focus if workout else "general",
            intensity_level=(
                workout.intensity.value if workout and workout.intensity else None
            ),
            complexity_level=determine_complexity_level(experience, recommendations),
        )

    @staticmethod
    def _is_equipment_focused(recommendations: Sequence[Recommendation]) -> bool:
        equipment = [r for r in recommendations if r.type == RecommendationType.EQUIPMENT]
        return len(equipment) >= MIN_EQUIPMENT_RECOMMENDATIONS and all(
            r.confidence >= EQUIPMENT_CONFIDENCE for r in equipment
        )

    @staticmethod
    def _choose(factors: SelectionFactors) -> str:
        if factors.recovery_needed:
            return RECOVERY
        if factors.equipment_focused:
            return EQUIPMENT_FOCUSED
        tier = experience_tier(factors.experience_level)
        if tier in TEMPLATES:
            return tier
        return INTERMEDIATE

    @staticmethod
    def _enhance(
        base: PromptTemplate, recommendations: Sequence[Recommendation]
    ) -> PromptTemplate:
        confident = [
            r
            for r in sort_recommendations(recommendations)
            if r.confidence >= DEFAULT_CONFIDENCE_THRESHOLD
        ]
        if confident:
            block = "Additional considerations:\n" + "\n".join(f"- {r.content}" for r in confident)
        else:
            block = ""
        mean_confidence = float(np.mean([r.confidence for r in recommendations]))
        return PromptTemplate(
            template=base.template.replace(RECOMMENDATIONS_PLACEHOLDER, block),
            use_case=base.use_case,
            confidence=(base.confidence + mean_confidence) / 2,
        )
