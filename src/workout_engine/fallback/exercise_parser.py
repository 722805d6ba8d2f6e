"""Free-text exercise recommendation parsing.

Accepts phrasing such as::

    "Goblet Squat 3 sets of 10 reps using dumbbell (keep chest up)"
    "Plank: 3 sets, 45 seconds"
    "Push-ups 4x12"

Name is the leading text before the first digit, "(", ":", "," or the
word "using". Sets default to 3 and reps to 12 when absent.
"""

from __future__ import annotations

import re

from workout_engine.context.transformers import to_token
from workout_engine.models.enums import DEFAULT_REPS, DEFAULT_SETS
from workout_engine.models.workout import Exercise

_NAME = re.compile(r"^\s*([A-Za-z][A-Za-z\s\-'/]*?)\s*(?=\d|\(|:|,|\busing\b|$)", re.IGNORECASE)
_SETS = re.compile(r"(\d+)\s*sets?\b", re.IGNORECASE)
_REPS = re.compile(r"(\d+)\s*reps?\b", re.IGNORECASE)
_SETS_X_REPS = re.compile(r"(\d+)\s*[x×]\s*(\d+)", re.IGNORECASE)
_DURATION = re.compile(r"(\d+)\s*(?:seconds?|secs?|s)\b", re.IGNORECASE)
_EQUIPMENT = re.compile(r"\busing\s+([^()\n.;]+)", re.IGNORECASE)
_NOTES = re.compile(r"\(([^)]*)\)")
_EQUIPMENT_SPLIT = re.compile(r"\s*(?:,|\band\b)\s*", re.IGNORECASE)


def parse_exercise_recommendation(content: str) -> Exercise | None:
    """Parse one exercise recommendation, or None if no name can be found."""
    if not content or not content.strip():
        return None

    name_match = _NAME.match(content)
    if name_match is None:
        return None
    name = name_match.group(1).strip(" -")
    if not name:
        return None

    sets, reps = DEFAULT_SETS, DEFAULT_REPS
    compact = _SETS_X_REPS.search(content)
    if compact:
        sets, reps = int(compact.group(1)), int(compact.group(2))
    sets_match = _SETS.search(content)
    if sets_match:
        sets = int(sets_match.group(1))
    reps_match = _REPS.search(content)
    if reps_match:
        reps = int(reps_match.group(1))

    duration_match = _DURATION.search(content)
    equipment_match = _EQUIPMENT.search(content)
    equipment = None
    if equipment_match:
        equipment = tuple(
            to_token(piece) for piece in _EQUIPMENT_SPLIT.split(equipment_match.group(1)) if piece.strip()
        ) or None
    notes = tuple(n.strip() for n in _NOTES.findall(content) if n.strip()) or None

    return Exercise(
        name=name,
        sets=sets,
        reps=reps,
        duration=int(duration_match.group(1)) if duration_match else None,
        equipment=equipment,
        notes=notes,
    )
