"""Tests for priority derivation, sorting and threshold filtering."""

from __future__ import annotations

from typing import Callable

import pytest

from workout_engine.models.enums import Priority
from workout_engine.models.recommendation import Recommendation
from workout_engine.strategy.ranking import (
    filter_by_confidence,
    priority_for_confidence,
    sort_recommendations,
)


class TestPriorityForConfidence:
    @pytest.mark.parametrize(
        "confidence, priority",
        [
            (1.0, Priority.HIGH),
            (0.8, Priority.HIGH),
            (0.79, Priority.MEDIUM),
            (0.6, Priority.MEDIUM),
            (0.59, Priority.LOW),
            (0.0, Priority.LOW),
        ],
    )
    def test_boundaries(self, confidence: float, priority: Priority) -> None:
        assert priority_for_confidence(confidence) == priority

    def test_create_derives_priority(self, make_rec: Callable[..., Recommendation]) -> None:
        for confidence in (0.1, 0.6, 0.75, 0.8, 0.99):
            rec = make_rec(confidence=confidence)
            assert rec.priority == priority_for_confidence(confidence)

    def test_create_defaults_missing_confidence(self, make_rec: Callable[..., Recommendation]) -> None:
        rec = make_rec(confidence=None)
        assert rec.confidence == 0.7
        assert rec.priority == Priority.MEDIUM

    def test_create_parses_numeric_string(self, make_rec: Callable[..., Recommendation]) -> None:
        rec = make_rec(confidence="0.9")
        assert rec.confidence == 0.9
        assert rec.priority == Priority.HIGH

    @pytest.mark.parametrize("confidence", ["high", float("nan"), [0.9]])
    def test_create_defaults_unusable_confidence(
        self, make_rec: Callable[..., Recommendation], confidence: object
    ) -> None:
        assert make_rec(confidence=confidence).confidence == 0.7


class TestSortRecommendations:
    def test_priority_before_confidence(self, make_rec: Callable[..., Recommendation]) -> None:
        a = make_rec("a", 0.9)
        b = make_rec("b", 0.95)
        c = make_rec("c", 0.79)
        ordered = sort_recommendations([a, b, c])
        assert [r.content for r in ordered] == ["b", "a", "c"]

    def test_high_medium_ordering_independent_of_confidence(
        self, make_rec: Callable[..., Recommendation]
    ) -> None:
        medium = make_rec("medium", 0.79)
        high = make_rec("high", 0.8)
        assert sort_recommendations([medium, high])[0] is high

    def test_stable_for_ties(self, make_rec: Callable[..., Recommendation]) -> None:
        first = make_rec("first", 0.85)
        second = make_rec("second", 0.85)
        assert sort_recommendations([first, second]) == [first, second]
        assert sort_recommendations([second, first]) == [second, first]

    def test_does_not_mutate_input(self, make_rec: Callable[..., Recommendation]) -> None:
        recs = [make_rec("low", 0.3), make_rec("high", 0.9)]
        sort_recommendations(recs)
        assert recs[0].content == "low"


class TestFilterByConfidence:
    def test_inclusive_threshold(self, make_rec: Callable[..., Recommendation]) -> None:
        recs = [make_rec("keep", 0.7), make_rec("drop", 0.69)]
        assert [r.content for r in filter_by_confidence(recs, 0.7)] == ["keep"]

    def test_zero_confidence_dropped_by_default_threshold(
        self, make_rec: Callable[..., Recommendation]
    ) -> None:
        assert filter_by_confidence([make_rec(confidence=0.0)], 0.7) == []
