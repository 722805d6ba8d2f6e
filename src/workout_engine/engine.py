"""PromptEngine — the stateful orchestrator for one recommendation run.

States::

    idle -> analyzing_profile -> analyzing_workout
         -> generating_recommendations -> validating -> complete

``error`` is reachable from any state. An instance holds one context at a
time and is reusable after ``reset()``, but must not be shared between
concurrent runs.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from workout_engine.config import EngineConfig
from workout_engine.context.builders import ProfileContextBuilder, WorkoutContextBuilder
from workout_engine.exceptions import (
    AnalysisTimeoutError,
    InvalidContextError,
    ValidationError,
    WorkoutEngineError,
)
from workout_engine.models.context import Context
from workout_engine.models.enums import (
    SCORE_WEIGHTS,
    EngineStatus,
    RecommendationSource,
)
from workout_engine.models.recommendation import Recommendation
from workout_engine.models.result import AnalysisMetrics, EngineResult
from workout_engine.strategy.ranking import filter_by_confidence, sort_recommendations
from workout_engine.strategy.recommendation_strategy import RecommendationStrategy
from workout_engine.validation.service import ValidationService


def source_score(recommendations: Sequence[Recommendation], source: RecommendationSource) -> float:
    """Mean of confidence x priority weight over one source bucket (0 if empty)."""
    bucket = [r for r in recommendations if r.source == source]
    if not bucket:
        return 0.0
    return float(np.mean([r.confidence * SCORE_WEIGHTS[r.priority] for r in bucket]))


def confidence_level(recommendations: Sequence[Recommendation]) -> float:
    if not recommendations:
        return 0.0
    return float(np.mean([r.confidence for r in recommendations]))


class PromptEngine:
    """Builds a context, runs the strategy under a timeout and scores the output.

    Usage:
        engine = PromptEngine()
        if engine.initialize(raw_profile, raw_workout):
            result = await engine.generate_recommendations()

    Args:
        config: Engine options; defaults to ``EngineConfig()``.
        strategy: Recommendation strategy (auto-discovered evaluators by default).
        validator: Validation service used on strategy output.
        logger: Optional injected logger, shared with the default collaborators.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        strategy: RecommendationStrategy | None = None,
        validator: ValidationService | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.config = config or EngineConfig()
        self.strategy = strategy or RecommendationStrategy(logger=self.logger)
        self.validator = validator or ValidationService(logger=self.logger)
        self.profile_builder = ProfileContextBuilder(logger=self.logger)
        self.workout_builder = WorkoutContextBuilder(logger=self.logger)

        self._context: Context | None = None
        self._errors: list[WorkoutEngineError] = []
        self._status = EngineStatus.IDLE
        self._started_at = 0.0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def context(self) -> Context | None:
        return self._context

    def initialize(
        self, profile: Mapping[str, Any] | None, workout: Mapping[str, Any] | None
    ) -> bool:
        """Build and merge the profile and workout contexts.

        Returns:
            True on success. On failure the error is recorded, status
            becomes ``error``, any previous context is cleared and False
            is returned.
        """
        self._started_at = time.monotonic()
        self._context = None
        self._status = EngineStatus.ANALYZING_PROFILE

        profile_context = self.profile_builder.build_context(profile)
        if not self.profile_builder.validate():
            self._record(
                ValidationError(
                    "Invalid profile data", {"errors": self.profile_builder.get_errors()}
                )
            )
            return False

        self._status = EngineStatus.ANALYZING_WORKOUT

        workout_context = self.workout_builder.build_context(workout)
        if not self.workout_builder.validate():
            self._record(
                ValidationError(
                    "Invalid workout data", {"errors": self.workout_builder.get_errors()}
                )
            )
            return False

        self._context = profile_context.merge(workout_context)
        self.logger.debug(
            "Engine initialized: focus=%s experience=%s",
            self._context.workout.focus if self._context.workout else None,
            self._context.profile.experience_level if self._context.profile else None,
        )
        return True

    async def generate_recommendations(self) -> EngineResult:
        """Run the strategy under ``analysis_timeout`` and score the result.

        Raises:
            InvalidContextError: If called before a successful ``initialize``.
            AnalysisTimeoutError: If the strategy does not finish in time.
            ValidationError: If the strategy output fails validation.
        """
        context = self._context
        if context is None:
            error = InvalidContextError("Context not initialized")
            self._record(error)
            raise error

        config = self.config
        try:
            self._status = EngineStatus.GENERATING_RECOMMENDATIONS
            try:
                recommendations = await asyncio.wait_for(
                    self.strategy.generate_recommendations(context, config),
                    timeout=config.analysis_timeout / 1000,
                )
            except asyncio.TimeoutError:
                raise AnalysisTimeoutError(
                    details={"timeout_ms": config.analysis_timeout}
                ) from None

            self._status = EngineStatus.VALIDATING
            result = self.validator.validate_recommendations(recommendations)
            if not result.is_valid:
                raise ValidationError("Invalid recommendations generated", result)

            prioritized = sort_recommendations(recommendations)[: config.max_recommendations]
            final = filter_by_confidence(prioritized, config.confidence_threshold)
        except WorkoutEngineError as exc:
            self._record(exc)
            raise
        except Exception:
            self._status = EngineStatus.ERROR
            self.logger.exception(
                "Recommendation generation failed",
                extra={
                    "component": "PromptEngine",
                    "severity": "high",
                    "user_impact": True,
                },
            )
            raise

        self._status = EngineStatus.COMPLETE
        analysis = AnalysisMetrics(
            profile_score=source_score(final, RecommendationSource.PROFILE),
            workout_score=source_score(final, RecommendationSource.WORKOUT),
            combined_score=source_score(final, RecommendationSource.COMBINED),
            confidence_level=confidence_level(final),
            processing_time=int((time.monotonic() - self._started_at) * 1000),
        )
        self.logger.info(
            "Generated %d recommendations in %d ms (confidence %.2f)",
            len(final),
            analysis.processing_time,
            analysis.confidence_level,
        )
        return EngineResult(
            recommendations=tuple(final),
            analysis=analysis,
            context=context,
            variables=self.profile_builder.build_variables(context),
            config=config,
        )

    def get_status(self) -> EngineStatus:
        return self._status

    def get_errors(self) -> list[WorkoutEngineError]:
        """Recorded errors, oldest first."""
        return list(self._errors)

    def reset(self) -> None:
        """Clear context, errors, status and the timer baseline."""
        self._context = None
        self._errors = []
        self._status = EngineStatus.IDLE
        self._started_at = 0.0

    def update_config(self, **changes: Any) -> EngineConfig:
        """Merge *changes* into the current config and return the new one."""
        self.config = self.config.with_updates(**changes)
        return self.config

    # ------------------------------------------------------------------

    def _record(self, error: WorkoutEngineError) -> None:
        self._errors.append(error)
        self._status = EngineStatus.ERROR
        self.logger.error(
            "%s: %s",
            error.type.value,
            error.message,
            extra={
                "component": "PromptEngine",
                "severity": "medium",
                "user_impact": True,
            },
        )
