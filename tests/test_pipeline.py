"""End-to-end tests for WorkoutPipeline."""

from __future__ import annotations

import random
from typing import Any

import pytest

from workout_engine.config import EngineConfig
from workout_engine.exceptions import AnalysisTimeoutError, ValidationError
from workout_engine.models.enums import WorkoutType
from workout_engine.pipeline import WorkoutPipeline
from workout_engine.strategy.recommendation_strategy import RecommendationStrategy


class TestWorkoutPipeline:
    async def test_intermediate_strength_session(
        self, intermediate_profile: dict[str, Any], strength_workout: dict[str, Any]
    ) -> None:
        pipeline = WorkoutPipeline(rng=random.Random(42))
        result = await pipeline.run(intermediate_profile, strength_workout)

        assert result.template.use_case == "intermediate_workout"
        assert result.recommendations
        assert all(r.confidence >= 0.7 for r in result.recommendations)
        assert "Personalized Context:" in result.prompt

        workout = result.workout
        assert workout.type == WorkoutType.STRENGTH
        assert 4 <= len(workout.exercises) <= 9
        assert workout.warmup_duration == 5
        assert workout.rest_periods.between_exercises == 60
        assert workout.generated_from.prompt == result.prompt

    async def test_sore_user_gets_recovery_template(
        self, intermediate_profile: dict[str, Any], sore_workout: dict[str, Any]
    ) -> None:
        result = await WorkoutPipeline(rng=random.Random(1)).run(intermediate_profile, sore_workout)
        assert result.template.use_case == "recovery_workout"
        assert any("High soreness detected" in note for note in result.workout.notes)

    async def test_seeded_runs_match(
        self, intermediate_profile: dict[str, Any], strength_workout: dict[str, Any]
    ) -> None:
        first = await WorkoutPipeline(rng=random.Random(5)).run(intermediate_profile, strength_workout)
        second = await WorkoutPipeline(rng=random.Random(5)).run(intermediate_profile, strength_workout)
        assert first.workout == second.workout
        assert first.prompt == second.prompt

    async def test_invalid_profile_raises(self, strength_workout: dict[str, Any]) -> None:
        with pytest.raises(ValidationError, match="Invalid profile data"):
            await WorkoutPipeline().run(None, strength_workout)

    async def test_timeout_propagates(
        self,
        intermediate_profile: dict[str, Any],
        strength_workout: dict[str, Any],
        hanging_evaluators: dict[str, Any],
    ) -> None:
        pipeline = WorkoutPipeline(
            config=EngineConfig(analysis_timeout=50),
            strategy=RecommendationStrategy(hanging_evaluators),
        )
        with pytest.raises(AnalysisTimeoutError):
            await pipeline.run(intermediate_profile, strength_workout)

    async def test_analyze_context(
        self, intermediate_profile: dict[str, Any], strength_workout: dict[str, Any]
    ) -> None:
        pipeline = WorkoutPipeline(rng=random.Random(0))
        result = await pipeline.run(intermediate_profile, strength_workout)
        analysis = pipeline.analyze_context(result.engine_result)
        assert analysis.intensity.value == "moderate"
        assert analysis.duration.value == 45
        assert analysis.focus_areas[0] == "strength"
