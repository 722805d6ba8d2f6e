"""Workout recommendation pipeline: evaluators, ranking, prompts and fallback plans."""

from workout_engine.config import EngineConfig
from workout_engine.engine import PromptEngine
from workout_engine.exceptions import (
    AnalysisTimeoutError,
    InvalidContextError,
    ValidationError,
    WorkoutEngineError,
)
from workout_engine.pipeline import WorkoutPipeline

__all__ = [
    "AnalysisTimeoutError",
    "EngineConfig",
    "InvalidContextError",
    "PromptEngine",
    "ValidationError",
    "WorkoutEngineError",
    "WorkoutPipeline",
]
