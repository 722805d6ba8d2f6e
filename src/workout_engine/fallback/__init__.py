from workout_engine.fallback.exercise_library import EXERCISE_LIBRARY, exercises_for_focus
from workout_engine.fallback.exercise_parser import parse_exercise_recommendation
from workout_engine.fallback.generator import FallbackWorkoutGenerator

__all__ = [
    "EXERCISE_LIBRARY",
    "FallbackWorkoutGenerator",
    "exercises_for_focus",
    "parse_exercise_recommendation",
]
