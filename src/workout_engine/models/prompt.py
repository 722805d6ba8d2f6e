"""Prompt template and prompt-variable models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PromptTemplate:
    """A selectable generation template.

    ``template`` carries ``{focus} {duration} {energy} {equipment}
    {recommendations}`` placeholders. Selected fresh per run, never persisted.
    """

    template: str
    use_case: str
    confidence: float


@dataclass(frozen=True)
class FitnessVariables:
    level: str | None
    experience: str
    goal: str
    limitations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutVariables:
    focus: str
    duration: int
    energy: int
    intensity: str
    equipment: tuple[str, ...] = field(default_factory=tuple)
    target_areas: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PreferenceVariables:
    style: tuple[str, ...]
    time: str
    intensity: str
    advanced: bool
    assistance: str


@dataclass(frozen=True)
class PromptVariables:
    """Flattened view of a context for prompt interpolation."""

    fitness_context: FitnessVariables
    workout_context: WorkoutVariables
    user_preferences: PreferenceVariables
