"""FallbackWorkoutGenerator — deterministic workout synthesis without a model.

Given a context, ranked recommendations and a rendered prompt, builds a
complete WorkoutTemplate:

1. Exercise count from duration, capped by experience tier
2. Confident exercise recommendations parsed into exercises first
3. Remaining slots filled from the per-focus exercise library
4. Rest periods from tier and session intensity
5. Warm-up / cool-down from duration
6. Safety, soreness, recommendation and beginner notes

With a seeded ``random.Random`` the output is fully reproducible.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence

from workout_engine.config import EngineConfig
from workout_engine.context.transformers import experience_tier, session_intensity_for_energy
from workout_engine.exceptions import ValidationError
from workout_engine.fallback.exercise_library import available_exercises, exercises_for_focus
from workout_engine.fallback.exercise_parser import parse_exercise_recommendation
from workout_engine.models.context import Context, WorkoutSelection
from workout_engine.models.enums import (
    BASE_REST_SECONDS,
    BETWEEN_SETS_FRACTION,
    COOLDOWN_FRACTION,
    EXERCISE_RECOMMENDATION_CONFIDENCE,
    MAX_EXERCISES_BY_TIER,
    MAX_EXERCISES_DEFAULT,
    MIN_EXERCISES,
    MIN_WARMUP_COOLDOWN_MIN,
    MINUTES_PER_EXERCISE,
    NOTE_RECOMMENDATION_CONFIDENCE,
    REST_INTENSITY_SCALE,
    REST_SECONDS_BY_TIER,
    SORENESS_NOTE_RATING,
    WARMUP_FRACTION,
    Priority,
    RecommendationType,
    SessionIntensity,
    WorkoutType,
)
from workout_engine.models.recommendation import Recommendation
from workout_engine.models.workout import (
    Exercise,
    GenerationProvenance,
    RestPeriods,
    WorkoutTemplate,
)
from workout_engine.prompts.renderer import render_prompt
from workout_engine.prompts.selector import PromptSelector
from workout_engine.strategy.recommendation_strategy import RecommendationStrategy
from workout_engine.validation.service import ValidationService

INJURY_NOTES = (
    "Please modify exercises as needed based on your injuries.",
    "Stop any exercise that causes pain.",
)
SORENESS_NOTES = (
    "High soreness detected - focus on proper form and reduced intensity.",
    "Take extra time to warm up affected areas.",
)
BEGINNER_NOTES = (
    "Focus on proper form rather than speed or weight.",
    "Take breaks as needed between exercises.",
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (``round`` is banker's)."""
    return int(math.floor(value + 0.5))


def target_exercise_count(duration: int, tier: str | None) -> int:
    cap = MAX_EXERCISES_BY_TIER.get(tier or "", MAX_EXERCISES_DEFAULT)
    return max(MIN_EXERCISES, min(duration // MINUTES_PER_EXERCISE, cap))


def rest_periods(tier: str | None, intensity: SessionIntensity | None) -> RestPeriods:
    base = REST_SECONDS_BY_TIER.get(tier or "", BASE_REST_SECONDS)
    base *= REST_INTENSITY_SCALE.get(intensity, 1.0)
    return RestPeriods(
        between_sets=round_half_up(base * BETWEEN_SETS_FRACTION),
        between_exercises=round_half_up(base),
    )


def workout_type(workout: WorkoutSelection) -> WorkoutType:
    if workout.focus == "cardio":
        return WorkoutType.CARDIO
    if workout.focus == "flexibility":
        return WorkoutType.FLEXIBILITY
    if workout.intensity == SessionIntensity.INTENSE:
        return WorkoutType.HIIT
    return WorkoutType.STRENGTH


class FallbackWorkoutGenerator:
    """Builds a workout plan from recommendations alone.

    Usage::

        generator = FallbackWorkoutGenerator(rng=random.Random(7))
        workout = await generator.generate_workout(context, config)

    Args:
        strategy: Recommendation strategy for ``generate_workout``.
        selector: Prompt selector for ``generate_workout``.
        validator: Validation service for the context gate.
        rng: Random source for library picks; seed it for reproducible output.
        logger: Optional injected logger.
    """

    def __init__(
        self,
        strategy: RecommendationStrategy | None = None,
        selector: PromptSelector | None = None,
        validator: ValidationService | None = None,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.validator = validator or ValidationService(logger=self.logger)
        self.strategy = strategy or RecommendationStrategy(logger=self.logger)
        self.selector = selector or PromptSelector(validator=self.validator, logger=self.logger)
        self.rng = rng or random.Random()

    async def generate_workout(
        self, context: Context, config: EngineConfig | None = None
    ) -> WorkoutTemplate:
        """Validate, recommend, select, render and build in one call.

        Raises:
            ValidationError: If the context is invalid or no usable
                recommendations remain for template selection.
        """
        config = config or EngineConfig()
        result = self.validator.validate_context(context, config)
        if not result.is_valid:
            raise ValidationError("Invalid context for workout generation", result)

        recommendations = await self.strategy.generate_recommendations(context, config)
        template = self.selector.select_prompt_template(context, recommendations, config)
        prompt = render_prompt(template, context, recommendations, config)
        return self.build_workout(context, recommendations, prompt, config)

    def build_workout(
        self,
        context: Context,
        recommendations: Sequence[Recommendation],
        prompt: str,
        config: EngineConfig | None = None,
    ) -> WorkoutTemplate:
        """Assemble the WorkoutTemplate.

        Args:
            context: Complete pipeline context.
            recommendations: Ranked recommendations.
            prompt: The rendered prompt, kept for provenance.
            config: ``safety_checks`` gates safety notes and
                ``prioritize_user_preferences`` restricts library picks.

        Returns:
            A frozen WorkoutTemplate.
        """
        config = config or EngineConfig()
        profile, workout = context.profile, context.workout
        if profile is None or workout is None:
            raise ValidationError("Workout generation requires profile and workout context")

        tier = experience_tier(profile.experience_level)
        intensity = workout.intensity or session_intensity_for_energy(workout.energy_level)
        target = target_exercise_count(workout.duration, tier)

        exercises = self._select_exercises(workout, recommendations, target, config)
        template = WorkoutTemplate(
            type=workout_type(workout),
            focus=workout.focus,
            duration=workout.duration,
            intensity=intensity,
            warmup_duration=max(
                MIN_WARMUP_COOLDOWN_MIN, round_half_up(workout.duration * WARMUP_FRACTION)
            ),
            cooldown_duration=max(
                MIN_WARMUP_COOLDOWN_MIN, round_half_up(workout.duration * COOLDOWN_FRACTION)
            ),
            exercises=tuple(exercises),
            rest_periods=rest_periods(tier, intensity),
            equipment=workout.equipment,
            notes=tuple(self._build_notes(context, recommendations, tier, config)),
            generated_from=GenerationProvenance(
                prompt=prompt,
                recommendations=tuple(r.content for r in recommendations),
            ),
        )
        self.logger.info(
            "Built %s workout: %d exercises, %d minutes",
            template.type.value,
            len(template.exercises),
            template.duration,
        )
        return template

    # ------------------------------------------------------------------

    def _select_exercises(
        self,
        workout: WorkoutSelection,
        recommendations: Sequence[Recommendation],
        target: int,
        config: EngineConfig,
    ) -> list[Exercise]:
        exercises: list[Exercise] = []
        used: set[str] = set()

        for rec in recommendations:
            if len(exercises) >= target:
                break
            if (
                rec.type != RecommendationType.EXERCISE
                or rec.confidence < EXERCISE_RECOMMENDATION_CONFIDENCE
            ):
                continue
            exercise = parse_exercise_recommendation(rec.content)
            if exercise is None:
                self.logger.warning("Could not parse exercise recommendation: %r", rec.content)
                continue
            if exercise.name.lower() in used:
                continue
            exercises.append(exercise)
            used.add(exercise.name.lower())

        pool = exercises_for_focus(workout.focus)
        if config.prioritize_user_preferences:
            pool = available_exercises(pool, workout.equipment) or pool

        while len(exercises) < target:
            unused = [e for e in pool if e.name.lower() not in used]
            # Library exhausted: repeat the first entry.
            pick = self.rng.choice(unused) if unused else pool[0]
            exercises.append(pick)
            used.add(pick.name.lower())
        return exercises

    @staticmethod
    def _build_notes(
        context: Context,
        recommendations: Sequence[Recommendation],
        tier: str | None,
        config: EngineConfig,
    ) -> list[str]:
        profile, workout = context.profile, context.workout
        notes: list[str] = []

        if config.safety_checks and profile is not None and profile.injuries:
            notes.extend(INJURY_NOTES)
        if (
            config.safety_checks
            and workout is not None
            and workout.soreness is not None
            and workout.soreness.rating >= SORENESS_NOTE_RATING
        ):
            notes.extend(SORENESS_NOTES)
        notes.extend(
            r.content
            for r in recommendations
            if r.priority == Priority.HIGH and r.confidence >= NOTE_RECOMMENDATION_CONFIDENCE
        )
        if tier == "beginner":
            notes.extend(BEGINNER_NOTES)
        return notes
