"""Validation service — itemized checks that return results and never raise.

Four entry points:
    validate_context         frozen Context (+ optional EngineConfig)
    validate_recommendations ranked Recommendation list
    validate_profile_data    raw profile payload from the UI
    validate_workout_data    raw workout payload from the UI

Every finding is a ``ValidationIssue`` with a severity. Only ERROR issues
make a result invalid; warnings and info are advisory.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from workout_engine.config import EngineConfig
from workout_engine.context.transformers import NO_INJURIES, coerce_number
from workout_engine.models.context import Context
from workout_engine.models.enums import (
    HIGH_SORENESS_WARNING,
    LOW_ENERGY_WARNING,
    SHORT_DURATION_WARNING_MIN,
    Priority,
    RecommendationSource,
    RecommendationType,
    Severity,
)
from workout_engine.models.validation import ValidationIssue, ValidationResult

_PROFILE_REQUIRED = (
    "fitness_level",
    "experience_level",
    "primary_goal",
    "preferred_activities",
    "available_equipment",
)
_WORKOUT_REQUIRED = ("focus", "duration", "energy_level", "equipment")
_PREFERENCES_REQUIRED = ("workout_style", "intensity_preference", "ai_assistance_level")

_RAW_PROFILE_REQUIRED = (
    "experienceLevel",
    "primaryGoal",
    "preferredActivities",
    "availableEquipment",
    "injuries",
)
_RAW_WORKOUT_REQUIRED = ("focus", "duration", "energyLevel")

_RECOMMENDATION_FIELDS = ("type", "content", "confidence", "source", "priority")


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _in_enum(enum_cls, value: Any) -> bool:
    if isinstance(value, enum_cls):
        return True
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True


def _attr(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _error(field: str, message: str, context: str = "") -> ValidationIssue:
    return ValidationIssue(field=field, message=message, severity=Severity.ERROR, context=context)


class ValidationService:
    """Runs structural and soft checks over contexts, payloads and outputs.

    Args:
        logger: Optional injected logger; defaults to the module logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    def validate_context(
        self, context: Context | None, config: EngineConfig | None = None
    ) -> ValidationResult:
        """Check that *context* is complete and in range.

        Args:
            context: The merged pipeline context.
            config: When given, its numeric options are range-checked too.

        Returns:
            A ValidationResult; ``is_valid`` is False on any ERROR issue.
        """
        issues: list[ValidationIssue] = []

        if context is None:
            issues.append(_error("context", "Context is missing"))
            return self._finish("context", issues)

        if context.profile is None:
            issues.append(_error("profile", "Profile data is missing"))
        else:
            for name in _PROFILE_REQUIRED:
                if _is_missing(getattr(context.profile, name)):
                    issues.append(
                        _error(f"profile.{name}", f"Required profile field missing: {name}")
                    )

        if context.workout is None:
            issues.append(_error("workout", "Workout data is missing"))
        else:
            workout = context.workout
            for name in _WORKOUT_REQUIRED:
                if _is_missing(getattr(workout, name)):
                    issues.append(
                        _error(f"workout.{name}", f"Required workout field missing: {name}")
                    )
            if workout.duration is not None and workout.duration <= 0:
                issues.append(_error("workout.duration", "Duration must be positive"))
            if workout.energy_level is not None and not 1 <= workout.energy_level <= 10:
                issues.append(
                    _error("workout.energy_level", "Energy level must be between 1 and 10")
                )
            issues.extend(
                self._soft_workout_checks(
                    workout.duration,
                    workout.energy_level,
                    workout.soreness.rating if workout.soreness else None,
                    prefix="workout.",
                )
            )

        if context.preferences is None:
            issues.append(_error("preferences", "Preferences data is missing"))
        else:
            for name in _PREFERENCES_REQUIRED:
                if _is_missing(getattr(context.preferences, name)):
                    issues.append(
                        _error(
                            f"preferences.{name}",
                            f"Required preferences field missing: {name}",
                        )
                    )

        if config is not None:
            issues.extend(self._config_checks(config))

        return self._finish("context", issues)

    @staticmethod
    def _config_checks(config: EngineConfig) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        if not 0 <= config.confidence_threshold <= 1:
            issues.append(
                _error(
                    "config.confidence_threshold",
                    "Confidence threshold must be between 0 and 1",
                    context=str(config.confidence_threshold),
                )
            )
        if config.max_recommendations < 1:
            issues.append(
                _error(
                    "config.max_recommendations",
                    "Max recommendations must be at least 1",
                    context=str(config.max_recommendations),
                )
            )
        if config.analysis_timeout <= 0:
            issues.append(
                _error(
                    "config.analysis_timeout",
                    "Analysis timeout must be positive",
                    context=str(config.analysis_timeout),
                )
            )
        return issues

    @staticmethod
    def _soft_workout_checks(
        duration: float | None,
        energy: float | None,
        soreness: float | None,
        prefix: str = "",
    ) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        if duration is not None and 0 < duration < SHORT_DURATION_WARNING_MIN:
            issues.append(
                ValidationIssue(
                    field=f"{prefix}duration",
                    message="Duration is very short",
                    severity=Severity.WARNING,
                    context=f"{duration:g} minutes",
                    recommendation="Consider a longer session for a complete workout",
                )
            )
        if energy is not None and 0 < energy <= LOW_ENERGY_WARNING:
            issues.append(
                ValidationIssue(
                    field=f"{prefix}energy_level",
                    message="Low energy level reported",
                    severity=Severity.WARNING,
                    context=f"{energy:g}/10",
                    recommendation="Consider a lighter or shorter session",
                )
            )
        if soreness is not None and soreness > HIGH_SORENESS_WARNING:
            issues.append(
                ValidationIssue(
                    field=f"{prefix}soreness",
                    message="High soreness level reported",
                    severity=Severity.WARNING,
                    context=f"{soreness:g}/10",
                    recommendation="Consider a recovery-focused session",
                )
            )
        return issues

    # ------------------------------------------------------------------
    # Recommendations
    # ------------------------------------------------------------------

    def validate_recommendations(self, recommendations: Sequence[Any] | None) -> ValidationResult:
        """Structural check of strategy output.

        An empty list is an error. Each entry needs every field, a
        confidence in [0, 1] and type/source/priority values from their
        closed sets.
        """
        issues: list[ValidationIssue] = []
        if not recommendations:
            issues.append(_error("recommendations", "No recommendations generated"))
            return self._finish("recommendations", issues)

        for index, rec in enumerate(recommendations):
            field = f"recommendations[{index}]"
            if any(_is_missing(_attr(rec, name)) for name in _RECOMMENDATION_FIELDS):
                issues.append(_error(field, "Missing required fields"))
                continue
            if not _in_enum(RecommendationType, _attr(rec, "type")):
                issues.append(_error(f"{field}.type", "Invalid recommendation type"))
            confidence = _attr(rec, "confidence")
            if (
                isinstance(confidence, bool)
                or not isinstance(confidence, (int, float))
                or not 0 <= confidence <= 1
            ):
                issues.append(
                    _error(f"{field}.confidence", "Invalid confidence value", str(confidence))
                )
            if not _in_enum(RecommendationSource, _attr(rec, "source")):
                issues.append(_error(f"{field}.source", "Invalid recommendation source"))
            if not _in_enum(Priority, _attr(rec, "priority")):
                issues.append(_error(f"{field}.priority", "Invalid recommendation priority"))

        return self._finish("recommendations", issues)

    # ------------------------------------------------------------------
    # Raw payloads
    # ------------------------------------------------------------------

    def validate_profile_data(self, raw: Mapping[str, Any] | None) -> ValidationResult:
        """Check a raw UI profile payload before it is transformed."""
        issues: list[ValidationIssue] = []
        if not raw:
            issues.append(_error("profile", "Profile data is missing"))
            return self._finish("profile data", issues)

        for key in _RAW_PROFILE_REQUIRED:
            value = raw.get(key)
            if value is None or (key != "injuries" and not value):
                issues.append(_error(key, f"Required field missing: {key}"))

        if raw.get("experienceLevel") == "Advanced Athlete" and not raw.get(
            "calculatedFitnessLevel"
        ):
            issues.append(
                ValidationIssue(
                    field="calculatedFitnessLevel",
                    message="Advanced athlete without a calculated fitness level",
                    severity=Severity.WARNING,
                    recommendation="Fitness level will be derived from experience and activity",
                )
            )

        injuries = [i for i in raw.get("injuries") or () if i and i != NO_INJURIES]
        if injuries:
            issues.append(
                ValidationIssue(
                    field="injuries",
                    message="Injuries reported",
                    severity=Severity.INFO,
                    context=", ".join(injuries),
                    recommendation="Exercises will be adapted around reported injuries",
                )
            )

        return self._finish("profile data", issues)

    def validate_workout_data(self, raw: Mapping[str, Any] | None) -> ValidationResult:
        """Check a raw UI workout payload before it is transformed."""
        issues: list[ValidationIssue] = []
        if not raw:
            issues.append(_error("workout", "Workout data is missing"))
            return self._finish("workout data", issues)

        for key in _RAW_WORKOUT_REQUIRED:
            if _is_missing(raw.get(key)):
                issues.append(_error(key, f"Required field missing: {key}"))

        duration = raw.get("duration")
        energy = raw.get("energyLevel")
        soreness = raw.get("soreness")
        issues.extend(
            self._soft_workout_checks(
                coerce_number(duration, 0) if duration is not None else None,
                coerce_number(energy, 0) if energy is not None else None,
                coerce_number(soreness, 0) if soreness is not None else None,
            )
        )
        return self._finish("workout data", issues)

    # ------------------------------------------------------------------

    def _finish(self, target: str, issues: list[ValidationIssue]) -> ValidationResult:
        result = ValidationResult(issues=tuple(issues))
        summary = result.summary
        self.logger.debug(
            "Validated %s: %d errors, %d warnings, %d info",
            target,
            summary.errors,
            summary.warnings,
            summary.info,
        )
        return result
