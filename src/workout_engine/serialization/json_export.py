"""JSON export for workout plans and engine results.

Converts the frozen internal models to camelCase dicts matching the shape
the UI layer consumes. Optional exercise fields are omitted when unset.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from workout_engine.models.recommendation import Recommendation
from workout_engine.models.result import EngineResult, PipelineResult
from workout_engine.models.workout import Exercise, WorkoutTemplate


def to_dict(workout: WorkoutTemplate) -> dict:
    """Convert a WorkoutTemplate to a camelCase dict."""
    return {
        "type": workout.type.value,
        "focus": workout.focus,
        "duration": workout.duration,
        "intensity": workout.intensity.value,
        "warmupDuration": workout.warmup_duration,
        "cooldownDuration": workout.cooldown_duration,
        "exercises": [_exercise(e) for e in workout.exercises],
        "restPeriods": {
            "betweenSets": workout.rest_periods.between_sets,
            "betweenExercises": workout.rest_periods.between_exercises,
        },
        "equipment": list(workout.equipment),
        "notes": list(workout.notes),
        "generatedFrom": {
            "prompt": workout.generated_from.prompt,
            "recommendations": list(workout.generated_from.recommendations),
        },
    }


def to_json_string(workout: WorkoutTemplate, indent: int = 2) -> str:
    """Convert a WorkoutTemplate to a JSON string."""
    return json.dumps(to_dict(workout), indent=indent)


def result_to_dict(result: EngineResult) -> dict:
    """Convert an EngineResult to a camelCase dict (context omitted)."""
    analysis = result.analysis
    return {
        "recommendations": [recommendation_to_dict(r) for r in result.recommendations],
        "analysis": {
            "profileScore": analysis.profile_score,
            "workoutScore": analysis.workout_score,
            "combinedScore": analysis.combined_score,
            "confidenceLevel": analysis.confidence_level,
            "processingTime": analysis.processing_time,
        },
        "config": {
            "enableDetailedAnalysis": result.config.enable_detailed_analysis,
            "prioritizeUserPreferences": result.config.prioritize_user_preferences,
            "safetyChecks": result.config.safety_checks,
            "maxRecommendations": result.config.max_recommendations,
            "confidenceThreshold": result.config.confidence_threshold,
            "analysisTimeout": result.config.analysis_timeout,
        },
    }


def pipeline_result_to_dict(result: PipelineResult) -> dict:
    return {
        **result_to_dict(result.engine_result),
        "template": {
            "useCase": result.template.use_case,
            "confidence": result.template.confidence,
        },
        "prompt": result.prompt,
        "workout": to_dict(result.workout),
    }


def recommendation_to_dict(rec: Recommendation) -> dict:
    return {
        "type": rec.type.value,
        "content": rec.content,
        "confidence": rec.confidence,
        "source": rec.source.value,
        "priority": rec.priority.name.lower(),
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _exercise(exercise: Exercise) -> dict:
    result: dict = {
        "name": exercise.name,
        "sets": exercise.sets,
        "reps": exercise.reps,
    }
    if exercise.duration is not None:
        result["duration"] = exercise.duration  # seconds
    if exercise.equipment:
        result["equipment"] = list(exercise.equipment)
    if exercise.notes:
        result["notes"] = list(exercise.notes)
    return result
