"""Profile and workout context builders.

Each builder turns one raw UI payload (a JSON-like mapping) into a partial
``Context`` and keeps its own validation errors. The engine merges the
two partial contexts after both builders accept their slice.

Raw payloads use the UI's camelCase keys; snake_case and legacy
``customization_*`` keys are accepted as aliases.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from workout_engine.context.transformers import (
    calculate_fitness_level,
    calculate_workout_intensity,
    coerce_number,
    normalize_tokens,
    session_intensity_for_energy,
    to_token,
    transform_duration,
    transform_energy,
    transform_experience_level,
    transform_injuries,
    transform_physical_activity,
    transform_soreness,
)
from workout_engine.models.context import (
    Context,
    Preferences,
    Profile,
    Soreness,
    WorkoutSelection,
)
from workout_engine.models.enums import (
    AssistanceLevel,
    FitnessLevel,
    SessionIntensity,
    WorkoutIntensity,
)
from workout_engine.models.prompt import (
    FitnessVariables,
    PreferenceVariables,
    PromptVariables,
    WorkoutVariables,
)

_MISSING = object()


def _field(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """First present key wins."""
    for key in keys:
        value = raw.get(key, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def _enum_or(enum_cls, value: Any, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


def build_prompt_variables(context: Context) -> PromptVariables:
    """Flatten a complete context into prompt variables."""
    profile = context.profile
    workout = context.workout
    preferences = context.preferences
    if profile is None or workout is None or preferences is None:
        raise ValueError("Prompt variables require a complete context")

    intensity = workout.intensity.value if workout.intensity else (
        profile.calculated_workout_intensity.value
    )
    return PromptVariables(
        fitness_context=FitnessVariables(
            level=profile.fitness_level.value if profile.fitness_level else None,
            experience=profile.experience_level,
            goal=profile.primary_goal,
            limitations=profile.injuries,
        ),
        workout_context=WorkoutVariables(
            focus=workout.focus,
            duration=workout.duration,
            energy=workout.energy_level,
            intensity=intensity,
            equipment=workout.equipment,
            target_areas=workout.target_areas,
        ),
        user_preferences=PreferenceVariables(
            style=preferences.workout_style,
            time=preferences.time_preference,
            intensity=preferences.intensity_preference.value,
            advanced=preferences.advanced_features,
            assistance=preferences.ai_assistance_level.value,
        ),
    )


class ContextBuilder(ABC):
    """Base class for the two context builders.

    Subclasses implement ``build_context`` (which must reset ``_errors``)
    and ``validate``.
    """

    component: str

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._errors: list[str] = []
        self._context: Context | None = None

    @abstractmethod
    def build_context(self, raw: Mapping[str, Any] | None) -> Context:
        ...

    @abstractmethod
    def validate(self) -> bool:
        ...

    def get_errors(self) -> list[str]:
        return list(self._errors)

    def build_variables(self, context: Context) -> PromptVariables:
        return build_prompt_variables(context)

    def _reject(self, message: str) -> Context:
        self._errors.append(message)
        self._context = None
        self.logger.debug("%s rejected input: %s", self.component, message)
        return Context()


class ProfileContextBuilder(ContextBuilder):
    """Builds the ``profile`` and ``preferences`` parts of a context."""

    component = "ProfileContextBuilder"

    _REQUIRED_RAW = (
        ("experienceLevel", "experience_level"),
        ("primaryGoal", "primary_goal"),
        ("preferredActivities", "preferred_activities"),
        ("availableEquipment", "available_equipment"),
        ("injuries",),
    )

    def build_context(self, raw: Mapping[str, Any] | None) -> Context:
        self._errors = []
        if not raw:
            return self._reject("Profile data is missing")

        for keys in self._REQUIRED_RAW:
            if _field(raw, *keys) is None:
                return self._reject(f"Required field missing: {keys[0]}")

        activities = normalize_tokens(_field(raw, "preferredActivities", "preferred_activities"))
        if not activities:
            return self._reject("No preferred activities specified")
        equipment = normalize_tokens(_field(raw, "availableEquipment", "available_equipment"))
        if not equipment:
            return self._reject("No available equipment specified")

        experience = _field(raw, "experienceLevel", "experience_level")
        activity = _field(raw, "physicalActivity", "physical_activity")

        fitness_level = _enum_or(
            FitnessLevel, _field(raw, "calculatedFitnessLevel", "calculated_fitness_level"), None
        ) or calculate_fitness_level(experience, activity)

        intensity = _enum_or(
            WorkoutIntensity,
            _field(raw, "calculatedWorkoutIntensity", "calculated_workout_intensity"),
            None,
        ) or calculate_workout_intensity(
            _field(raw, "intensityLevel", "intensity_level"),
            _field(raw, "timeCommitment", "time_commitment"),
        )

        profile = Profile(
            fitness_level=fitness_level,
            experience_level=transform_experience_level(experience),
            primary_goal=str(_field(raw, "primaryGoal", "primary_goal")).strip(),
            injuries=transform_injuries(_field(raw, "injuries", default=())),
            preferred_activities=activities,
            available_equipment=equipment,
            available_locations=normalize_tokens(
                _field(raw, "availableLocations", "available_locations")
            ),
            calculated_workout_intensity=intensity,
            activity_level=transform_physical_activity(activity),
        )
        preferences = Preferences(
            workout_style=activities,
            time_preference=str(_field(raw, "timePreference", "time_preference", default="morning")),
            intensity_preference=intensity,
            advanced_features=bool(_field(raw, "advancedFeatures", "advanced_features", default=False)),
            ai_assistance_level=_enum_or(
                AssistanceLevel,
                _field(raw, "aiAssistanceLevel", "ai_assistance_level"),
                AssistanceLevel.MODERATE,
            ),
        )

        self._context = Context(profile=profile, preferences=preferences)
        self.logger.debug(
            "Profile context built: fitness_level=%s experience=%s",
            profile.fitness_level.value if profile.fitness_level else None,
            profile.experience_level,
        )
        return self._context

    def validate(self) -> bool:
        if self._context is None:
            if not self._errors:
                self._errors.append("No context available")
            return False
        profile = self._context.profile
        preferences = self._context.preferences
        if profile is None:
            self._errors.append("Profile data is missing")
            return False
        if preferences is None:
            self._errors.append("Preferences data is missing")
            return False

        for name in (
            "fitness_level",
            "experience_level",
            "primary_goal",
            "preferred_activities",
            "available_equipment",
        ):
            if not getattr(profile, name):
                self._errors.append(f"Required profile field missing: {name}")
                return False
        for name in ("workout_style", "intensity_preference", "ai_assistance_level"):
            if not getattr(preferences, name):
                self._errors.append(f"Required preferences field missing: {name}")
                return False
        return True


class WorkoutContextBuilder(ContextBuilder):
    """Builds the ``workout`` part of a context."""

    component = "WorkoutContextBuilder"

    def build_context(self, raw: Mapping[str, Any] | None) -> Context:
        self._errors = []
        if not raw:
            return self._reject("No workout data provided")

        focus_raw = _field(raw, "focus", "customization_focus")
        if isinstance(focus_raw, Mapping):
            focus_raw = focus_raw.get("focus") or "general"
        if not focus_raw:
            self._errors.append("Missing workout focus")

        duration_raw = _field(raw, "duration", "customization_duration")
        duration = coerce_number(duration_raw, 0)
        if duration <= 0:
            self._errors.append("Invalid workout duration")

        energy_raw = _field(raw, "energyLevel", "energy_level", "customization_energy")
        energy = coerce_number(energy_raw, 0)
        if not energy:
            self._errors.append("Missing energy level")

        if self._errors:
            self._context = None
            self.logger.debug("%s rejected input: %s", self.component, self._errors)
            return Context()

        focus = to_token(str(focus_raw))
        equipment = normalize_tokens(_field(raw, "equipment", "customization_equipment", default=()))
        intensity = _enum_or(
            SessionIntensity, _field(raw, "intensity"), None
        ) or session_intensity_for_energy(energy)

        workout = WorkoutSelection(
            focus=focus,
            duration=int(duration),
            energy_level=int(energy),
            equipment=equipment,
            intensity=intensity,
            target_areas=normalize_tokens(_field(raw, "targetAreas", "target_areas")) or (focus,),
            soreness=self._build_soreness(_field(raw, "soreness", "customization_soreness")),
            duration_category=transform_duration(duration),
            energy_category=transform_energy(energy),
        )
        self._context = Context(workout=workout)
        self.logger.debug(
            "Workout context built: focus=%s duration=%d energy=%d soreness=%s",
            workout.focus,
            workout.duration,
            workout.energy_level,
            workout.soreness is not None,
        )
        return self._context

    def validate(self) -> bool:
        if self._context is None:
            if not self._errors:
                self._errors.append("No context built yet")
            return False
        workout = self._context.workout
        if workout is None:
            self._errors.append("Missing workout data in context")
            return False
        if not workout.focus:
            self._errors.append("Missing workout focus")
        if workout.duration <= 0:
            self._errors.append("Invalid workout duration")
        if not 1 <= workout.energy_level <= 10:
            self._errors.append("Invalid energy level")
        return not self._errors

    @staticmethod
    def _build_soreness(raw: Any) -> Soreness | None:
        if not raw:
            return None
        if isinstance(raw, Mapping):
            rating = coerce_number(raw.get("rating"), 0)
            areas = normalize_tokens(raw.get("areas") or raw.get("categories"))
        elif isinstance(raw, (list, tuple)):
            rating = 0.0
            areas = normalize_tokens(raw)
        else:
            rating = coerce_number(raw, 0)
            areas = ()
        return Soreness(rating=rating, areas=areas, category=transform_soreness(rating))
