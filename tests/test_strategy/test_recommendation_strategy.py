"""Tests for RecommendationStrategy — fan-out, isolation, filtering, ranking."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import pytest

from workout_engine.config import EngineConfig
from workout_engine.exceptions import ValidationError
from workout_engine.models.context import Context
from workout_engine.models.enums import Priority, RecommendationSource, RecommendationType
from workout_engine.models.recommendation import Insight
from workout_engine.strategy.recommendation_strategy import RecommendationStrategy


class TestGenerateRecommendations:
    async def test_threshold_and_default_confidence(
        self, intermediate_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        strategy = RecommendationStrategy(static_evaluators)
        recs = await strategy.generate_recommendations(intermediate_context, EngineConfig())
        contents = [r.content for r in recs]
        assert "Use dumbbells" not in contents
        assert "Plan for 45 min" in contents
        assert all(r.confidence >= 0.7 for r in recs)

    async def test_ranked_by_priority_then_confidence(
        self, intermediate_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        recs = await RecommendationStrategy(static_evaluators).generate_recommendations(intermediate_context)
        assert [r.content for r in recs] == ["Compound lifts first", "Go moderate", "Plan for 45 min"]
        assert recs[0].priority == Priority.HIGH

    async def test_soreness_skipped_without_soreness(
        self, intermediate_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        await RecommendationStrategy(static_evaluators).generate_recommendations(intermediate_context)
        assert static_evaluators["soreness"].calls == []
        assert static_evaluators["energy"].calls == [7]

    async def test_soreness_included_when_reported(
        self, sore_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        recs = await RecommendationStrategy(static_evaluators).generate_recommendations(sore_context)
        sore = [r for r in recs if r.content == "Ease sore quads"]
        assert len(sore) == 1
        assert sore[0].type == RecommendationType.FOCUS
        assert sore[0].source == RecommendationSource.WORKOUT

    async def test_type_and_source_per_domain(
        self, intermediate_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        recs = await RecommendationStrategy(static_evaluators).generate_recommendations(intermediate_context)
        by_domain = {r.context["domain"]: r for r in recs}
        assert by_domain["energy"].type == RecommendationType.INTENSITY
        assert by_domain["energy"].source == RecommendationSource.PROFILE
        assert by_domain["focus"].source == RecommendationSource.COMBINED
        assert by_domain["duration"].type == RecommendationType.DURATION

    async def test_failing_evaluator_is_isolated(
        self,
        intermediate_context: Context,
        static_evaluators: dict[str, Any],
        failing_evaluator: Any,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        static_evaluators["equipment"] = failing_evaluator
        strategy = RecommendationStrategy(static_evaluators)
        with caplog.at_level(logging.ERROR):
            recs = await strategy.generate_recommendations(intermediate_context)
        assert len(recs) == 3
        assert any("equipment" in record.getMessage() for record in caplog.records)
        assert caplog.records[0].component == "RecommendationStrategy"
        assert caplog.records[0].user_impact is True

    async def test_idempotent(self, intermediate_context: Context) -> None:
        strategy = RecommendationStrategy()
        first = await strategy.generate_recommendations(intermediate_context)
        second = await strategy.generate_recommendations(intermediate_context)
        assert first == second

    async def test_async_evaluator_supported(self, intermediate_context: Context) -> None:
        class AsyncFocus:
            domain = "focus"

            async def analyze(self, domain_input: Any, global_context: Any) -> list[Insight]:
                return [Insight(recommendation=f"Async {domain_input}", confidence=0.95)]

        recs = await RecommendationStrategy({"focus": AsyncFocus()}).generate_recommendations(
            intermediate_context
        )
        assert [r.content for r in recs] == ["Async strength"]

    async def test_empty_insights_dropped(self, intermediate_context: Context) -> None:
        class Blank:
            def analyze(self, domain_input: Any, global_context: Any) -> list[dict[str, Any]]:
                return [{"confidence": 0.9}]

        recs = await RecommendationStrategy({"focus": Blank()}).generate_recommendations(intermediate_context)
        assert recs == []

    async def test_incomplete_context_raises(self, static_evaluators: dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            await RecommendationStrategy(static_evaluators).generate_recommendations(Context())

    async def test_default_evaluators_no_recovery_for_fresh_user(
        self, intermediate_context: Context
    ) -> None:
        recs = await RecommendationStrategy().generate_recommendations(intermediate_context)
        assert recs
        assert not any("recovery" in r.content.lower() for r in recs)
        assert all(r.confidence >= 0.7 for r in recs)

    async def test_default_evaluators_flag_recovery_when_sore(self, sore_context: Context) -> None:
        recs = await RecommendationStrategy().generate_recommendations(sore_context)
        assert any("recovery" in r.content.lower() for r in recs)


class _FixedOutput:
    """Returns whatever it was built with, unvalidated."""

    def __init__(self, domain: str, output: list[Any]) -> None:
        self.domain = domain
        self.output = output

    def analyze(self, domain_input: Any, global_context: Any) -> list[Any]:
        return list(self.output)


class _SleepyEvaluator:
    """Async evaluator that takes a fixed time to answer."""

    def __init__(self, domain: str, delay: float) -> None:
        self.domain = domain
        self.delay = delay

    async def analyze(self, domain_input: Any, global_context: Any) -> list[Insight]:
        await asyncio.sleep(self.delay)
        return [Insight(recommendation=f"{self.domain} done", confidence=0.9)]


class TestEvaluatorOutputIsolation:
    async def test_bare_string_insight_accepted(
        self, intermediate_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        static_evaluators["equipment"] = _FixedOutput("equipment", ["Use both dumbbells"])
        recs = await RecommendationStrategy(static_evaluators).generate_recommendations(
            intermediate_context
        )
        equipment = [r for r in recs if r.context["domain"] == "equipment"]
        assert [r.content for r in equipment] == ["Use both dumbbells"]
        assert equipment[0].confidence == 0.7

    async def test_string_confidence_is_coerced(
        self, intermediate_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        static_evaluators["equipment"] = _FixedOutput(
            "equipment", [{"recommendation": "Use dumbbells", "confidence": "0.9"}]
        )
        recs = await RecommendationStrategy(static_evaluators).generate_recommendations(
            intermediate_context
        )
        equipment = [r for r in recs if r.context["domain"] == "equipment"]
        assert equipment[0].confidence == 0.9
        assert equipment[0].priority == Priority.HIGH

    async def test_junk_confidence_falls_back_to_default(
        self, intermediate_context: Context, static_evaluators: dict[str, Any]
    ) -> None:
        static_evaluators["equipment"] = _FixedOutput(
            "equipment", [{"recommendation": "Use dumbbells", "confidence": "very"}]
        )
        recs = await RecommendationStrategy(static_evaluators).generate_recommendations(
            intermediate_context
        )
        equipment = [r for r in recs if r.context["domain"] == "equipment"]
        assert equipment[0].confidence == 0.7

    async def test_unconvertible_output_only_drops_its_domain(
        self,
        intermediate_context: Context,
        static_evaluators: dict[str, Any],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        static_evaluators["equipment"] = _FixedOutput("equipment", [42])
        strategy = RecommendationStrategy(static_evaluators)
        with caplog.at_level(logging.ERROR):
            recs = await strategy.generate_recommendations(intermediate_context)
        assert [r.content for r in recs] == ["Compound lifts first", "Go moderate", "Plan for 45 min"]
        (record,) = caplog.records
        assert "equipment" in record.getMessage()
        assert record.user_impact is True
        assert record.severity == "medium"


class TestConcurrency:
    async def test_evaluators_run_concurrently(self, intermediate_context: Context) -> None:
        domains = ("energy", "focus", "duration", "equipment", "cross_component")
        evaluators = {domain: _SleepyEvaluator(domain, 0.2) for domain in domains}
        started = time.monotonic()
        recs = await RecommendationStrategy(evaluators).generate_recommendations(intermediate_context)
        elapsed = time.monotonic() - started
        assert len(recs) == len(domains)
        assert elapsed < 0.2 * len(domains) / 2
