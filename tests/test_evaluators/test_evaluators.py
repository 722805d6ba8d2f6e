"""Tests for the default domain evaluators."""

from __future__ import annotations

import dataclasses

import pytest

from workout_engine.evaluators.cross_component import CrossComponentEvaluator
from workout_engine.evaluators.duration import DurationEvaluator
from workout_engine.evaluators.energy import EnergyEvaluator
from workout_engine.evaluators.equipment import EquipmentEvaluator
from workout_engine.evaluators.focus import FocusEvaluator
from workout_engine.evaluators.soreness import SorenessEvaluator
from workout_engine.models.context import Context, GlobalAnalysisContext, Soreness


@pytest.fixture
def snapshot(intermediate_context: Context) -> GlobalAnalysisContext:
    return GlobalAnalysisContext.from_context(intermediate_context)


class TestEnergyEvaluator:
    @pytest.mark.parametrize(
        "energy, confidence, intensity",
        [(1, 0.95, "light"), (4, 0.85, "light"), (5, 0.75, "moderate"), (7, 0.85, "moderate"), (10, 0.9, "intense")],
    )
    def test_bands(
        self, snapshot: GlobalAnalysisContext, energy: int, confidence: float, intensity: str
    ) -> None:
        (insight,) = EnergyEvaluator().analyze(energy, snapshot)
        assert insight.confidence == confidence
        assert insight.metadata["intensity"] == intensity

    def test_very_low_energy_suggests_rest(self, snapshot: GlobalAnalysisContext) -> None:
        (insight,) = EnergyEvaluator().analyze(2, snapshot)
        assert "resting" in insight.text


class TestSorenessEvaluator:
    def test_none_returns_nothing(self, snapshot: GlobalAnalysisContext) -> None:
        assert SorenessEvaluator().analyze(None, snapshot) == []

    def test_high_soreness_mentions_recovery(self, snapshot: GlobalAnalysisContext) -> None:
        (insight,) = SorenessEvaluator().analyze(Soreness(rating=8), snapshot)
        assert insight.confidence == 0.9
        assert "recovery" in insight.text.lower()

    def test_moderate_soreness_names_areas(self, snapshot: GlobalAnalysisContext) -> None:
        (insight,) = SorenessEvaluator().analyze(
            Soreness(rating=5, areas=("lower_back",)), snapshot
        )
        assert "lower back" in insight.text
        assert insight.confidence == 0.8

    def test_minor_soreness_is_mobility_message(self, snapshot: GlobalAnalysisContext) -> None:
        (insight,) = SorenessEvaluator().analyze(Soreness(rating=2), snapshot)
        assert insight.recommendation is None
        assert "mobility" in insight.text


class TestFocusEvaluator:
    def test_strength_focus(self, snapshot: GlobalAnalysisContext) -> None:
        insights = FocusEvaluator().analyze("strength", snapshot)
        assert len(insights) == 1
        assert "compound" in insights[0].text

    def test_beginner_gets_fundamentals(self, beginner_context: Context) -> None:
        snapshot = GlobalAnalysisContext.from_context(beginner_context)
        insights = FocusEvaluator().analyze("strength", snapshot)
        assert len(insights) == 2
        assert insights[1].confidence == 0.85

    def test_unknown_focus_uses_generic_text(self, snapshot: GlobalAnalysisContext) -> None:
        (insight,) = FocusEvaluator().analyze("upper_body", snapshot)
        assert "upper body" in insight.text
        assert insight.confidence == 0.7


class TestDurationEvaluator:
    @pytest.mark.parametrize("minutes, confidence", [(10, 0.8), (25, 0.75), (45, 0.75), (90, 0.75)])
    def test_confidence_by_length(
        self, snapshot: GlobalAnalysisContext, minutes: int, confidence: float
    ) -> None:
        (insight,) = DurationEvaluator().analyze(minutes, snapshot)
        assert insight.confidence == confidence
        assert f"{minutes} min" in insight.text

    def test_long_beginner_session_is_split(self, beginner_context: Context) -> None:
        snapshot = GlobalAnalysisContext.from_context(beginner_context)
        (insight,) = DurationEvaluator().analyze(90, snapshot)
        assert "Split" in insight.text
        assert insight.confidence == 0.85


class TestEquipmentEvaluator:
    def test_bodyweight_only(self, snapshot: GlobalAnalysisContext) -> None:
        (insight,) = EquipmentEvaluator().analyze(("body_weight",), snapshot)
        assert "bodyweight" in insight.text

    def test_single_piece(self, snapshot: GlobalAnalysisContext) -> None:
        (insight,) = EquipmentEvaluator().analyze(("dumbbells",), snapshot)
        assert insight.confidence == 0.75

    def test_three_pieces_give_two_confident_insights(self, snapshot: GlobalAnalysisContext) -> None:
        insights = EquipmentEvaluator().analyze(("barbell", "dumbbells", "kettlebells"), snapshot)
        assert len(insights) == 2
        assert all(i.confidence == 0.8 for i in insights)


class TestCrossComponentEvaluator:
    def test_nothing_for_balanced_selection(self, snapshot: GlobalAnalysisContext) -> None:
        assert CrossComponentEvaluator().analyze(snapshot.selections, snapshot) == []

    def test_low_energy_long_session(self, snapshot: GlobalAnalysisContext) -> None:
        low = dataclasses.replace(snapshot, energy_level=2, duration=60)
        (insight,) = CrossComponentEvaluator().analyze(low.selections, low)
        assert insight.confidence == 0.85

    def test_soreness_with_strength(self, snapshot: GlobalAnalysisContext) -> None:
        sore = dataclasses.replace(snapshot, soreness=Soreness(rating=8))
        insights = CrossComponentEvaluator().analyze(sore.selections, sore)
        assert any("reduce volume" in i.text for i in insights)

    def test_injuries(self, snapshot: GlobalAnalysisContext) -> None:
        injured = dataclasses.replace(snapshot, injuries=("knee",))
        (insight,) = CrossComponentEvaluator().analyze(injured.selections, injured)
        assert "knee" in insight.text
        assert insight.confidence == 0.9
