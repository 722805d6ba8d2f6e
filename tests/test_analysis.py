"""Tests for analyze_context suggested adjustments."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from workout_engine.analysis import (
    analyze_context,
    suggest_duration,
    suggest_focus_areas,
    suggest_intensity,
)
from workout_engine.models.context import Context
from workout_engine.models.enums import RecommendationSource, RecommendationType
from workout_engine.models.recommendation import Recommendation


def _intensity_rec(confidence: float, intensity: str) -> Recommendation:
    return Recommendation.create(
        RecommendationType.INTENSITY,
        f"Go {intensity}",
        confidence,
        RecommendationSource.PROFILE,
        context={"domain": "energy", "intensity": intensity},
    )


class TestSuggestIntensity:
    def test_highest_confidence_wins(self, intermediate_context: Context) -> None:
        recs = [_intensity_rec(0.75, "moderate"), _intensity_rec(0.9, "intense")]
        suggestion = suggest_intensity(intermediate_context, recs)
        assert suggestion.value == "intense"
        assert suggestion.confidence == 0.9

    def test_falls_back_to_current(self, intermediate_context: Context) -> None:
        suggestion = suggest_intensity(intermediate_context, [_intensity_rec(0.5, "light")])
        assert suggestion.value == "moderate"
        assert suggestion.confidence == 0.0


class TestSuggestDuration:
    def test_weighted_mean(
        self, intermediate_context: Context, make_rec: Callable[..., Recommendation]
    ) -> None:
        recs = [
            make_rec("Plan for about 45 min", 0.75, RecommendationType.DURATION),
            make_rec("Keep it to 30 minutes", 0.75, RecommendationType.DURATION),
        ]
        suggestion = suggest_duration(intermediate_context, recs)
        assert suggestion.value == 38
        assert suggestion.confidence == pytest.approx(0.75)

    def test_no_mentions_keeps_current(
        self, intermediate_context: Context, make_rec: Callable[..., Recommendation]
    ) -> None:
        recs = [make_rec("Pace yourself", 0.9, RecommendationType.DURATION)]
        suggestion = suggest_duration(intermediate_context, recs)
        assert suggestion.value == 45
        assert suggestion.confidence == 0.7


class TestSuggestFocusAreas:
    def test_extracts_areas(
        self, intermediate_context: Context, make_rec: Callable[..., Recommendation]
    ) -> None:
        recs = [make_rec("Focus on core, glutes and hips.", 0.9, RecommendationType.FOCUS)]
        areas, confidence = suggest_focus_areas(intermediate_context, recs)
        assert areas == ("strength", "core", "glutes", "hips")
        assert confidence == pytest.approx(0.8)

    def test_workout_focus_only(self, intermediate_context: Context) -> None:
        areas, confidence = suggest_focus_areas(intermediate_context, [])
        assert areas == ("strength",)
        assert confidence == 0.7


class TestAnalyzeContext:
    def test_bundle(self, intermediate_context: Context, make_rec: Callable[..., Recommendation]) -> None:
        recs: list[Any] = [
            _intensity_rec(0.85, "moderate"),
            make_rec("Plan for about 45 min including warm-up", 0.75, RecommendationType.DURATION),
        ]
        analysis = analyze_context(intermediate_context, recs)
        assert analysis.intensity.value == "moderate"
        assert analysis.complexity.value == "moderate"
        assert analysis.complexity.confidence == 0.7
        assert analysis.duration.value == 45
        assert analysis.focus_areas == ("strength",)
