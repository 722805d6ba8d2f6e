"""Exercise library — the catalogue the fallback generator draws from.

Entries are grouped by focus. Equipment uses the same snake_case tokens the
context transformers produce, so availability checks are plain set
operations. ``body_weight`` entries are always available.
"""

from __future__ import annotations

from collections.abc import Iterable

from workout_engine.models.workout import Exercise

BODY_WEIGHT = "body_weight"
DEFAULT_FOCUS = "strength"


def _ex(
    name: str,
    sets: int,
    reps: int,
    equipment: tuple[str, ...] = (BODY_WEIGHT,),
    duration: int | None = None,
) -> Exercise:
    return Exercise(name=name, sets=sets, reps=reps, duration=duration, equipment=equipment)


# ---------------------------------------------------------------------------
# Library definitions
# ---------------------------------------------------------------------------

EXERCISE_LIBRARY: dict[str, tuple[Exercise, ...]] = {
    "strength": (
        _ex("Push-ups", 3, 12),
        _ex("Bodyweight Squats", 3, 15),
        _ex("Dumbbell Rows", 3, 10, ("dumbbells",)),
        _ex("Goblet Squats", 3, 12, ("dumbbells",)),
        _ex("Dumbbell Shoulder Press", 3, 10, ("dumbbells",)),
        _ex("Romanian Deadlifts", 3, 10, ("dumbbells",)),
        _ex("Walking Lunges", 3, 12),
        _ex("Glute Bridges", 3, 15),
        _ex("Plank", 3, 1, duration=45),
        _ex("Kettlebell Swings", 3, 15, ("kettlebells",)),
        _ex("Banded Pull-aparts", 3, 15, ("resistance_bands",)),
        _ex("Barbell Back Squat", 4, 8, ("barbell",)),
    ),
    "cardio": (
        _ex("Jumping Jacks", 3, 1, duration=45),
        _ex("High Knees", 3, 1, duration=30),
        _ex("Mountain Climbers", 3, 1, duration=30),
        _ex("Burpees", 3, 10),
        _ex("Skater Hops", 3, 16),
        _ex("Butt Kicks", 3, 1, duration=30),
        _ex("Jump Rope", 3, 1, ("jump_rope",), duration=60),
        _ex("Kettlebell Swings", 3, 20, ("kettlebells",)),
        _ex("Squat Jumps", 3, 12),
        _ex("Shadow Boxing", 3, 1, duration=60),
        _ex("Stationary Bike Sprints", 4, 1, ("stationary_bike",), duration=30),
    ),
    "flexibility": (
        _ex("Cat-Cow Stretch", 2, 10),
        _ex("World's Greatest Stretch", 2, 6),
        _ex("Hamstring Stretch", 2, 1, duration=30),
        _ex("Hip Flexor Stretch", 2, 1, duration=30),
        _ex("Child's Pose", 2, 1, duration=45),
        _ex("Thread the Needle", 2, 8),
        _ex("Pigeon Pose", 2, 1, duration=45),
        _ex("Thoracic Rotations", 2, 10),
        _ex("Banded Shoulder Dislocates", 2, 12, ("resistance_bands",)),
        _ex("Foam Roller Quad Release", 2, 1, ("foam_roller",), duration=60),
        _ex("Downward Dog", 2, 1, duration=30),
    ),
}


def exercises_for_focus(focus: str) -> tuple[Exercise, ...]:
    """Library entries for *focus*, falling back to strength."""
    return EXERCISE_LIBRARY.get(focus, EXERCISE_LIBRARY[DEFAULT_FOCUS])


def available_exercises(
    exercises: Iterable[Exercise], equipment: Iterable[str]
) -> tuple[Exercise, ...]:
    """Entries whose equipment is covered by *equipment* plus body weight."""
    allowed = set(equipment) | {BODY_WEIGHT}
    return tuple(e for e in exercises if set(e.equipment or ()) <= allowed)
