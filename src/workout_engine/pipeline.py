"""WorkoutPipeline — raw payloads in, rendered prompt and workout plan out."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Any

from workout_engine.analysis import analyze_context
from workout_engine.config import EngineConfig
from workout_engine.engine import PromptEngine
from workout_engine.exceptions import ValidationError
from workout_engine.fallback.generator import FallbackWorkoutGenerator
from workout_engine.models.result import ContextAnalysis, EngineResult, PipelineResult
from workout_engine.prompts.renderer import render_prompt
from workout_engine.prompts.selector import PromptSelector
from workout_engine.strategy.recommendation_strategy import RecommendationStrategy
from workout_engine.validation.service import ValidationService


class WorkoutPipeline:
    """Chains engine, selector, renderer and fallback generator.

    Usage:
        pipeline = WorkoutPipeline(rng=random.Random(42))
        result = await pipeline.run(raw_profile, raw_workout)
        result.workout.exercises

    A new PromptEngine is created per run, so one pipeline can serve
    sequential requests.

    Args:
        config: Engine options shared by every stage.
        strategy: Recommendation strategy (auto-discovered evaluators by default).
        rng: Random source for the fallback generator's library picks.
        logger: Optional injected logger passed to every stage.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        strategy: RecommendationStrategy | None = None,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.config = config or EngineConfig()
        self.validator = ValidationService(logger=self.logger)
        self.strategy = strategy or RecommendationStrategy(logger=self.logger)
        self.selector = PromptSelector(validator=self.validator, logger=self.logger)
        self.generator = FallbackWorkoutGenerator(
            strategy=self.strategy,
            selector=self.selector,
            validator=self.validator,
            rng=rng,
            logger=self.logger,
        )

    def create_engine(self) -> PromptEngine:
        return PromptEngine(
            config=self.config,
            strategy=self.strategy,
            validator=self.validator,
            logger=self.logger,
        )

    async def run(
        self, profile: Mapping[str, Any] | None, workout: Mapping[str, Any] | None
    ) -> PipelineResult:
        """Generate recommendations, a prompt and a workout for one request.

        Args:
            profile: Raw UI profile payload.
            workout: Raw UI workout payload.

        Returns:
            A PipelineResult bundling every stage's output.

        Raises:
            ValidationError: If either payload is rejected or a later
                stage fails validation.
            AnalysisTimeoutError: If the evaluator fan-out times out.
        """
        engine = self.create_engine()
        if not engine.initialize(profile, workout):
            errors = engine.get_errors()
            raise ValidationError(
                errors[-1].message if errors else "Engine initialization failed",
                errors[-1].details if errors else None,
            )

        engine_result = await engine.generate_recommendations()
        context = engine_result.context
        recommendations = engine_result.recommendations

        template = self.selector.select_prompt_template(context, recommendations, self.config)
        prompt = render_prompt(template, context, recommendations, self.config)
        plan = self.generator.build_workout(context, recommendations, prompt, self.config)

        self.logger.info(
            "Pipeline complete: template=%s exercises=%d",
            template.use_case,
            len(plan.exercises),
        )
        return PipelineResult(
            engine_result=engine_result,
            template=template,
            prompt=prompt,
            workout=plan,
        )

    def analyze_context(self, engine_result: EngineResult) -> ContextAnalysis:
        """Suggested adjustments for an engine result's context."""
        return analyze_context(engine_result.context, engine_result.recommendations)
