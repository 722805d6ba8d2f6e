"""Fallback-path workout plan output."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_engine.models.enums import SessionIntensity, WorkoutType


@dataclass(frozen=True)
class Exercise:
    """A single exercise entry.

    ``duration`` is in seconds and only set for timed movements.
    """

    name: str
    sets: int
    reps: int
    duration: int | None = None
    equipment: tuple[str, ...] | None = None
    notes: tuple[str, ...] | None = None


@dataclass(frozen=True)
class RestPeriods:
    between_sets: int  # seconds
    between_exercises: int  # seconds


@dataclass(frozen=True)
class GenerationProvenance:
    prompt: str
    recommendations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutTemplate:
    """A complete, deterministic, non-ML workout plan."""

    type: WorkoutType
    focus: str
    duration: int  # minutes
    intensity: SessionIntensity
    warmup_duration: int  # minutes
    cooldown_duration: int  # minutes
    exercises: tuple[Exercise, ...]
    rest_periods: RestPeriods
    equipment: tuple[str, ...]
    notes: tuple[str, ...]
    generated_from: GenerationProvenance
