"""Raw UI payloads -> normalized, frozen pipeline context."""

from workout_engine.context.builders import (
    ProfileContextBuilder,
    WorkoutContextBuilder,
    build_prompt_variables,
)

__all__ = [
    "ProfileContextBuilder",
    "WorkoutContextBuilder",
    "build_prompt_variables",
]
