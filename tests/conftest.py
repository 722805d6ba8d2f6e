"""Shared test fixtures: raw UI payloads, built contexts, stub evaluators."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest

from workout_engine.context.builders import ProfileContextBuilder, WorkoutContextBuilder
from workout_engine.models.context import Context
from workout_engine.models.enums import RecommendationSource, RecommendationType
from workout_engine.models.recommendation import Insight, Recommendation


def build_context(profile: dict[str, Any], workout: dict[str, Any]) -> Context:
    profile_context = ProfileContextBuilder().build_context(profile)
    workout_context = WorkoutContextBuilder().build_context(workout)
    return profile_context.merge(workout_context)


# ---------------------------------------------------------------------------
# Raw payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def intermediate_profile() -> dict[str, Any]:
    """Some Experience, strength goal, dumbbells only, no injuries."""
    return {
        "experienceLevel": "Some Experience",
        "primaryGoal": "strength",
        "preferredActivities": ["weightlifting"],
        "availableEquipment": ["dumbbells"],
        "injuries": ["No Injuries"],
    }


@pytest.fixture
def beginner_profile() -> dict[str, Any]:
    return {
        "experienceLevel": "New to Exercise",
        "physicalActivity": "light",
        "primaryGoal": "general fitness",
        "preferredActivities": ["walking", "yoga"],
        "availableEquipment": ["Body Weight"],
        "injuries": ["Lower Back"],
    }


@pytest.fixture
def advanced_profile() -> dict[str, Any]:
    return {
        "experienceLevel": "Advanced Athlete",
        "physicalActivity": "extremely",
        "calculatedFitnessLevel": "advanced",
        "primaryGoal": "performance",
        "preferredActivities": ["crossfit"],
        "availableEquipment": ["Barbell", "Dumbbells", "Kettlebells"],
        "injuries": [],
        "intensityLevel": "extremely",
    }


@pytest.fixture
def strength_workout() -> dict[str, Any]:
    """45 min strength session at energy 7 with dumbbells."""
    return {
        "focus": "strength",
        "duration": 45,
        "energyLevel": 7,
        "equipment": ["dumbbells"],
    }


@pytest.fixture
def sore_workout() -> dict[str, Any]:
    return {
        "focus": "strength",
        "duration": 30,
        "energyLevel": 4,
        "equipment": ["dumbbells"],
        "soreness": {"rating": 8, "areas": ["Quads", "Lower Back"]},
    }


# ---------------------------------------------------------------------------
# Built contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def intermediate_context(
    intermediate_profile: dict[str, Any], strength_workout: dict[str, Any]
) -> Context:
    return build_context(intermediate_profile, strength_workout)


@pytest.fixture
def beginner_context(beginner_profile: dict[str, Any], strength_workout: dict[str, Any]) -> Context:
    return build_context(beginner_profile, strength_workout)


@pytest.fixture
def sore_context(intermediate_profile: dict[str, Any], sore_workout: dict[str, Any]) -> Context:
    return build_context(intermediate_profile, sore_workout)


@pytest.fixture
def beginner_sore_context(beginner_profile: dict[str, Any], sore_workout: dict[str, Any]) -> Context:
    """Injured beginner reporting significant soreness."""
    return build_context(beginner_profile, sore_workout)


# ---------------------------------------------------------------------------
# Recommendations and evaluator stubs
# ---------------------------------------------------------------------------


@pytest.fixture
def make_rec() -> Callable[..., Recommendation]:
    """Factory for Recommendations with sensible defaults."""

    def _make(
        content: str = "Stay hydrated",
        confidence: float = 0.85,
        type: RecommendationType = RecommendationType.GENERAL,
        source: RecommendationSource = RecommendationSource.COMBINED,
    ) -> Recommendation:
        return Recommendation.create(type, content, confidence, source)

    return _make


class StaticEvaluator:
    """Sync evaluator returning a fixed list of insights."""

    def __init__(self, domain: str, insights: list[Insight | dict[str, Any]]) -> None:
        self.domain = domain
        self.insights = insights
        self.calls: list[Any] = []

    def analyze(self, domain_input: Any, global_context: Any) -> list[Insight | dict[str, Any]]:
        self.calls.append(domain_input)
        return list(self.insights)


class FailingEvaluator:
    def __init__(self, domain: str) -> None:
        self.domain = domain

    def analyze(self, domain_input: Any, global_context: Any) -> list[Insight]:
        raise RuntimeError(f"{self.domain} evaluator exploded")


class HangingEvaluator:
    """Async evaluator that never returns."""

    def __init__(self, domain: str) -> None:
        self.domain = domain

    async def analyze(self, domain_input: Any, global_context: Any) -> list[Insight]:
        await asyncio.Event().wait()
        return []


@pytest.fixture
def static_evaluators() -> dict[str, StaticEvaluator]:
    """One fixed insight per domain, spanning all three priority tiers."""
    return {
        "energy": StaticEvaluator("energy", [Insight(recommendation="Go moderate", confidence=0.75)]),
        "soreness": StaticEvaluator("soreness", [Insight(recommendation="Ease sore quads", confidence=0.8)]),
        "focus": StaticEvaluator("focus", [{"recommendation": "Compound lifts first", "confidence": 0.9}]),
        "duration": StaticEvaluator("duration", [{"message": "Plan for 45 min"}]),
        "equipment": StaticEvaluator("equipment", [Insight(recommendation="Use dumbbells", confidence=0.5)]),
        "cross_component": StaticEvaluator("cross_component", []),
    }


@pytest.fixture
def failing_evaluator() -> FailingEvaluator:
    return FailingEvaluator("equipment")


@pytest.fixture
def hanging_evaluators() -> dict[str, HangingEvaluator]:
    domains = ("energy", "soreness", "focus", "duration", "equipment", "cross_component")
    return {domain: HangingEvaluator(domain) for domain in domains}
