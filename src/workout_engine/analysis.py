"""Context analysis — suggested adjustments read back out of recommendations.

Summarizes ranked recommendations into a suggested intensity, complexity,
duration and set of focus areas, each with a confidence in [0, 1]. Only
recommendations at or above the default confidence threshold count.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

import numpy as np

from workout_engine.models.context import Context
from workout_engine.models.enums import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_INSIGHT_CONFIDENCE,
    RecommendationType,
)
from workout_engine.models.recommendation import Recommendation
from workout_engine.models.result import ContextAnalysis, SuggestedValue
from workout_engine.prompts.selector import determine_complexity_level

_MINUTES = re.compile(r"(\d+)\s*(?:minutes?|min)\b")
_FOCUS_ON = re.compile(r"focus\s+on\s+([\w\s,]+)(?:\.|$)")
_AREA_SPLIT = re.compile(r",|\sand\s")
_COMPLEXITY_WORDS = (
    "advanced", "complex", "challenging",
    "intermediate", "moderate", "standard",
    "basic", "simple", "beginner",
)


def _of_type(
    recommendations: Sequence[Recommendation], rec_type: RecommendationType
) -> list[Recommendation]:
    return [
        r
        for r in recommendations
        if r.type == rec_type and r.confidence >= DEFAULT_CONFIDENCE_THRESHOLD
    ]


def suggest_intensity(context: Context, recommendations: Sequence[Recommendation]) -> SuggestedValue:
    """Highest-confidence intensity recommendation wins (first on ties)."""
    candidates = _of_type(recommendations, RecommendationType.INTENSITY)
    if not candidates:
        workout = context.workout
        current = workout.intensity.value if workout and workout.intensity else "moderate"
        return SuggestedValue(value=current, confidence=0.0)
    best = max(candidates, key=lambda r: r.confidence)
    return SuggestedValue(
        value=best.context.get("intensity", best.content),
        confidence=min(1.0, best.confidence),
    )


def suggest_complexity(context: Context, recommendations: Sequence[Recommendation]) -> SuggestedValue:
    experience = context.profile.experience_level if context.profile else None
    level = determine_complexity_level(experience, recommendations)
    signals = [
        r.confidence
        for r in _of_type(recommendations, RecommendationType.EXERCISE)
        if any(word in r.content.lower() for word in _COMPLEXITY_WORDS)
    ]
    confidence = float(np.mean(signals)) if signals else DEFAULT_INSIGHT_CONFIDENCE
    return SuggestedValue(value=level, confidence=min(1.0, confidence))


def suggest_duration(context: Context, recommendations: Sequence[Recommendation]) -> SuggestedValue:
    """Confidence-weighted mean of every "N min" mention in duration insights."""
    current = context.workout.duration if context.workout else 0
    values: list[int] = []
    weights: list[float] = []
    for rec in _of_type(recommendations, RecommendationType.DURATION):
        match = _MINUTES.search(rec.content)
        if match:
            values.append(int(match.group(1)))
            weights.append(rec.confidence)
    if not values:
        return SuggestedValue(value=current, confidence=DEFAULT_INSIGHT_CONFIDENCE)
    suggested = int(np.floor(np.average(values, weights=weights) + 0.5))
    return SuggestedValue(value=suggested, confidence=min(1.0, float(np.mean(weights))))


def suggest_focus_areas(
    context: Context, recommendations: Sequence[Recommendation]
) -> tuple[tuple[str, ...], float]:
    """Workout focus plus any "focus on X, Y" areas, in first-seen order."""
    areas: list[str] = [context.workout.focus] if context.workout else []
    candidates = _of_type(recommendations, RecommendationType.FOCUS)
    total = DEFAULT_INSIGHT_CONFIDENCE
    for rec in candidates:
        match = _FOCUS_ON.search(rec.content.lower())
        if not match:
            continue
        for area in _AREA_SPLIT.split(match.group(1)):
            area = area.strip()
            if area and area not in areas:
                areas.append(area)
        total += rec.confidence
    if candidates:
        total /= len(candidates) + 1
    return tuple(areas), min(1.0, total)


def analyze_context(context: Context, recommendations: Sequence[Recommendation]) -> ContextAnalysis:
    """Summarize *recommendations* into suggested session adjustments."""
    areas, focus_confidence = suggest_focus_areas(context, recommendations)
    return ContextAnalysis(
        intensity=suggest_intensity(context, recommendations),
        complexity=suggest_complexity(context, recommendations),
        duration=suggest_duration(context, recommendations),
        focus_areas=areas,
        focus_confidence=focus_confidence,
    )
