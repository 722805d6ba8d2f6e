"""Frozen pipeline context — the immutable unit of work for one engine run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from workout_engine.models.enums import (
    AssistanceLevel,
    FitnessLevel,
    SessionIntensity,
    WorkoutIntensity,
)


@dataclass(frozen=True)
class Profile:
    """Normalized user profile.

    All list-like fields are tuples of snake_case tokens produced by the
    context transformers.
    """

    fitness_level: FitnessLevel | None
    experience_level: str  # tier token: beginner / intermediate / advanced
    primary_goal: str
    injuries: tuple[str, ...] = field(default_factory=tuple)
    preferred_activities: tuple[str, ...] = field(default_factory=tuple)
    available_equipment: tuple[str, ...] = field(default_factory=tuple)
    available_locations: tuple[str, ...] = field(default_factory=tuple)
    calculated_workout_intensity: WorkoutIntensity = WorkoutIntensity.MODERATE
    activity_level: str = "moderate"


@dataclass(frozen=True)
class Soreness:
    rating: float
    areas: tuple[str, ...] = field(default_factory=tuple)
    category: str = "none"


@dataclass(frozen=True)
class WorkoutSelection:
    """Per-workout customization choices."""

    focus: str
    duration: int  # minutes, > 0
    energy_level: int  # 1-10
    equipment: tuple[str, ...] = field(default_factory=tuple)
    intensity: SessionIntensity | None = None
    target_areas: tuple[str, ...] = field(default_factory=tuple)
    soreness: Soreness | None = None
    duration_category: str = "standard"
    energy_category: str = "moderate"


@dataclass(frozen=True)
class Preferences:
    workout_style: tuple[str, ...]
    time_preference: str
    intensity_preference: WorkoutIntensity
    advanced_features: bool = False
    ai_assistance_level: AssistanceLevel = AssistanceLevel.MODERATE


@dataclass(frozen=True)
class Context:
    """Bundle of profile + workout + preferences passed through the pipeline.

    Builders return partial contexts (some parts ``None``); the engine
    merges them. Only a context with all three parts can pass validation.
    """

    profile: Profile | None = None
    workout: WorkoutSelection | None = None
    preferences: Preferences | None = None

    def merge(self, other: Context) -> Context:
        """Combine two partial contexts; parts set on *other* win."""
        return Context(
            profile=other.profile or self.profile,
            workout=other.workout or self.workout,
            preferences=other.preferences or self.preferences,
        )

    @property
    def is_complete(self) -> bool:
        return (
            self.profile is not None
            and self.workout is not None
            and self.preferences is not None
        )


@dataclass(frozen=True)
class GlobalAnalysisContext:
    """Read-only snapshot every evaluator receives during one fan-out.

    Flattens the user-profile slice and the current workout selections so
    evaluators never see the mutable-looking nested context.
    """

    fitness_level: FitnessLevel | None
    experience_level: str
    primary_goal: str
    injuries: tuple[str, ...]
    preferred_activities: tuple[str, ...]
    available_equipment: tuple[str, ...]
    intensity_preference: WorkoutIntensity
    focus: str
    duration: int
    energy_level: int
    equipment: tuple[str, ...] = field(default_factory=tuple)
    soreness: Soreness | None = None

    @property
    def selections(self) -> Mapping[str, Any]:
        """Current selections keyed the way the UI names them."""
        return MappingProxyType(
            {
                "customization_focus": self.focus,
                "customization_duration": self.duration,
                "customization_energy": self.energy_level,
                "customization_equipment": self.equipment,
                "customization_soreness": self.soreness,
            }
        )

    @classmethod
    def from_context(cls, context: Context) -> GlobalAnalysisContext:
        profile, workout, preferences = context.profile, context.workout, context.preferences
        if profile is None or workout is None or preferences is None:
            raise ValueError("Global analysis context requires a complete context")
        return cls(
            fitness_level=profile.fitness_level,
            experience_level=profile.experience_level,
            primary_goal=profile.primary_goal,
            injuries=profile.injuries,
            preferred_activities=profile.preferred_activities,
            available_equipment=profile.available_equipment,
            intensity_preference=preferences.intensity_preference,
            focus=workout.focus,
            duration=workout.duration,
            energy_level=workout.energy_level,
            equipment=workout.equipment,
            soreness=workout.soreness,
        )
