"""Context transformers — raw UI vocabulary to normalized pipeline tokens.

Every function here is pure. Malformed numeric input (None, NaN,
non-numeric strings) degrades to a documented default instead of raising:

    duration  -> DEFAULT_DURATION_MIN (45)
    energy    -> DEFAULT_ENERGY_RATING (5)
    soreness  -> DEFAULT_SORENESS_RATING (0)
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from workout_engine.models.enums import (
    DEFAULT_DURATION_MIN,
    DEFAULT_ENERGY_RATING,
    DEFAULT_SORENESS_RATING,
    DURATION_BUCKET_OVERFLOW,
    DURATION_BUCKETS,
    ENERGY_BUCKET_OVERFLOW,
    ENERGY_BUCKETS,
    SORENESS_BUCKET_OVERFLOW,
    SORENESS_BUCKETS,
    FitnessLevel,
    SessionIntensity,
    WorkoutIntensity,
)

logger = logging.getLogger(__name__)

_NON_TOKEN = re.compile(r"[^a-z0-9]")

NO_INJURIES = "No Injuries"

# Presentation-layer experience strings (lower-cased) -> tier token.
_EXPERIENCE_TIERS: dict[str, str] = {
    "new to exercise": "beginner",
    "beginner": "beginner",  # legacy alias
    "some experience": "intermediate",
    "intermediate": "intermediate",
    "advanced athlete": "advanced",
    "advanced": "advanced",
}

_PHYSICAL_ACTIVITY: dict[str, str] = {
    "sedentary": "low",
    "light": "low_moderate",
    "moderate": "moderate",
    "very": "moderate_high",
    "extremely": "high",
}

_TIER_FITNESS: dict[str, FitnessLevel] = {
    "beginner": FitnessLevel.BEGINNER,
    "intermediate": FitnessLevel.INTERMEDIATE,
    "advanced": FitnessLevel.ADVANCED,
}


# ---------------------------------------------------------------------------
# Experience / fitness level
# ---------------------------------------------------------------------------


def experience_tier(value: str | None) -> str | None:
    """Normalize either experience vocabulary to beginner/intermediate/advanced.

    Returns None for unknown or missing values.
    """
    if not value:
        return None
    return _EXPERIENCE_TIERS.get(value.strip().lower())


def transform_experience_level(level: str | None) -> str:
    """Map a UI experience level to its tier token (default intermediate)."""
    tier = experience_tier(level)
    if tier is None:
        logger.warning("Unknown experience level %r, defaulting to intermediate", level)
        return "intermediate"
    return tier


def transform_physical_activity(activity: str | None) -> str:
    if not activity:
        return "moderate"
    return _PHYSICAL_ACTIVITY.get(activity.strip().lower(), "moderate")


def calculate_fitness_level(
    experience_level: str | None, activity_level: str | None
) -> FitnessLevel:
    """Five-level fitness model combining experience and current activity.

    "varies" activity always yields ADAPTIVE. Without an activity level the
    experience tier maps straight onto its fitness level.
    """
    activity = (activity_level or "").strip().lower()
    tier = experience_tier(experience_level)

    if activity == "varies":
        return FitnessLevel.ADAPTIVE
    if not activity:
        return _TIER_FITNESS.get(tier or "", FitnessLevel.INTERMEDIATE)

    if tier == "beginner":
        if activity in ("sedentary", "light"):
            return FitnessLevel.BEGINNER
        if activity == "moderate":
            return FitnessLevel.NOVICE
    if tier == "intermediate":
        if activity in ("sedentary", "light"):
            return FitnessLevel.NOVICE
        if activity in ("moderate", "very"):
            return FitnessLevel.INTERMEDIATE
        if activity == "extremely":
            return FitnessLevel.ADVANCED
    if tier == "advanced":
        return FitnessLevel.ADVANCED
    return FitnessLevel.INTERMEDIATE


def calculate_workout_intensity(
    intensity_level: str | None, time_commitment: str | None
) -> WorkoutIntensity:
    """Profile intensity from self-reported activity and weekly commitment."""
    if intensity_level in ("extremely", "very") or time_commitment == "6-7":
        return WorkoutIntensity.HIGH
    if intensity_level in ("lightly", "light-moderate") or time_commitment == "2-3":
        return WorkoutIntensity.LOW
    return WorkoutIntensity.MODERATE


# ---------------------------------------------------------------------------
# Free-text tokens
# ---------------------------------------------------------------------------


def to_token(value: str) -> str:
    """'Resistance Bands' -> 'resistance_bands'."""
    return _NON_TOKEN.sub("_", value.strip().lower())


def normalize_tokens(values: Iterable[str] | None) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(to_token(v) for v in values if v and v.strip())


def transform_injuries(injuries: Iterable[str] | None) -> tuple[str, ...]:
    """Normalize injuries, dropping the "No Injuries" sentinel."""
    if not injuries:
        return ()
    return normalize_tokens(i for i in injuries if i != NO_INJURIES)


# ---------------------------------------------------------------------------
# Numeric buckets
# ---------------------------------------------------------------------------


def coerce_number(value: Any, default: float) -> float:
    """Best-effort float conversion; NaN / junk -> *default*."""
    if isinstance(value, Mapping):
        value = value.get("rating", value.get("duration", value.get("minutes")))
    if isinstance(value, bool) or value is None:
        return float(default)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(default)
    if math.isnan(number) or math.isinf(number):
        return float(default)
    return number


def _bucket(value: float, buckets: tuple[tuple[float, str], ...], overflow: str) -> str:
    for upper, label in buckets:
        if value <= upper:
            return label
    return overflow


def transform_duration(minutes: Any) -> str:
    """short <=15, moderate <=30, standard <=45, extended <=60, long >60."""
    value = coerce_number(minutes, DEFAULT_DURATION_MIN)
    return _bucket(value, DURATION_BUCKETS, DURATION_BUCKET_OVERFLOW)


def transform_soreness(rating: Any) -> str:
    """none =0, minimal <=2, mild <=4, moderate <=6, significant <=8, severe >8."""
    value = coerce_number(rating, DEFAULT_SORENESS_RATING)
    return _bucket(value, SORENESS_BUCKETS, SORENESS_BUCKET_OVERFLOW)


def transform_energy(rating: Any) -> str:
    """low <=3, moderate_low <=5, moderate <=7, moderate_high <=8, high >8."""
    value = coerce_number(rating, DEFAULT_ENERGY_RATING)
    return _bucket(value, ENERGY_BUCKETS, ENERGY_BUCKET_OVERFLOW)


def session_intensity_for_energy(rating: Any) -> SessionIntensity:
    value = coerce_number(rating, DEFAULT_ENERGY_RATING)
    if value <= 3:
        return SessionIntensity.LIGHT
    if value <= 7:
        return SessionIntensity.MODERATE
    return SessionIntensity.INTENSE
