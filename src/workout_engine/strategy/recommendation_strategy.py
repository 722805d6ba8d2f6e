"""RecommendationStrategy — parallel fan-out over the domain evaluators.

One call runs every applicable evaluator concurrently against the same
frozen GlobalAnalysisContext, settles all of them, and merges whatever
succeeded into a filtered, ranked list of Recommendations. A failing
evaluator is logged and contributes nothing; the others are unaffected.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from workout_engine.config import EngineConfig
from workout_engine.exceptions import ValidationError
from workout_engine.models.context import Context, GlobalAnalysisContext
from workout_engine.models.enums import RecommendationSource, RecommendationType
from workout_engine.models.recommendation import Insight, Recommendation
from workout_engine.registry import EvaluatorRegistry
from workout_engine.strategy.ranking import filter_by_confidence, sort_recommendations


@dataclass(frozen=True)
class DomainSpec:
    """How one domain is fed and how its insights are typed."""

    name: str
    type: RecommendationType
    source: RecommendationSource
    select_input: Callable[[GlobalAnalysisContext], Any]
    optional: bool = False  # skipped when select_input returns None


DOMAINS: tuple[DomainSpec, ...] = (
    DomainSpec(
        "energy",
        RecommendationType.INTENSITY,
        RecommendationSource.PROFILE,
        lambda g: g.energy_level,
    ),
    DomainSpec(
        "soreness",
        RecommendationType.FOCUS,
        RecommendationSource.WORKOUT,
        lambda g: g.soreness,
        optional=True,
    ),
    DomainSpec(
        "focus",
        RecommendationType.FOCUS,
        RecommendationSource.COMBINED,
        lambda g: g.focus,
    ),
    DomainSpec(
        "duration",
        RecommendationType.DURATION,
        RecommendationSource.WORKOUT,
        lambda g: g.duration,
    ),
    DomainSpec(
        "equipment",
        RecommendationType.EQUIPMENT,
        RecommendationSource.PROFILE,
        lambda g: g.equipment,
    ),
    DomainSpec(
        "cross_component",
        RecommendationType.GENERAL,
        RecommendationSource.COMBINED,
        lambda g: g.selections,
    ),
)


def _default_evaluators() -> Mapping[str, Any]:
    registry = EvaluatorRegistry()
    registry.discover_evaluators()
    return registry.as_mapping()


class RecommendationStrategy:
    """Runs the evaluator fan-out and ranks the merged output.

    Usage:
        strategy = RecommendationStrategy()
        recommendations = await strategy.generate_recommendations(context, config)

    Args:
        evaluators: Domain name -> evaluator, or a populated registry.
            Defaults to auto-discovered evaluators. Domains without an
            evaluator are skipped.
        logger: Optional injected logger.
    """

    def __init__(
        self,
        evaluators: Mapping[str, Any] | EvaluatorRegistry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if evaluators is None:
            evaluators = _default_evaluators()
        elif isinstance(evaluators, EvaluatorRegistry):
            evaluators = evaluators.as_mapping()
        self._evaluators: Mapping[str, Any] = dict(evaluators)
        self.logger = logger or logging.getLogger(__name__)

    async def generate_recommendations(
        self, context: Context, config: EngineConfig | None = None
    ) -> list[Recommendation]:
        """Fan out, merge, filter by threshold and rank.

        Args:
            context: A complete pipeline context.
            config: Threshold source; defaults to ``EngineConfig()``.

        Returns:
            Recommendations with confidence >= threshold, sorted by
            priority then confidence (stable).

        Raises:
            ValidationError: If the context is incomplete.
        """
        config = config or EngineConfig()
        if not context.is_complete:
            raise ValidationError("Recommendation strategy requires a complete context")
        global_context = GlobalAnalysisContext.from_context(context)

        planned: list[tuple[DomainSpec, Any, Any]] = []
        for domain in DOMAINS:
            evaluator = self._evaluators.get(domain.name)
            if evaluator is None:
                self.logger.debug("No evaluator registered for domain %s", domain.name)
                continue
            domain_input = domain.select_input(global_context)
            if domain.optional and domain_input is None:
                continue
            planned.append((domain, evaluator, domain_input))

        outcomes = await asyncio.gather(
            *(
                self._evaluate(domain, evaluator, domain_input, global_context)
                for domain, evaluator, domain_input in planned
            ),
            return_exceptions=True,
        )

        merged: list[Recommendation] = []
        for (domain, _, _), outcome in zip(planned, outcomes):
            if isinstance(outcome, Exception):
                self.logger.error(
                    "Evaluator %s failed, no %s recommendations for this session: %s",
                    domain.name,
                    domain.name,
                    outcome,
                    extra={
                        "component": "RecommendationStrategy",
                        "severity": "medium",
                        "user_impact": True,
                    },
                )
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            merged.extend(outcome)

        ranked = sort_recommendations(filter_by_confidence(merged, config.confidence_threshold))
        self.logger.debug(
            "Strategy produced %d recommendations (%d before threshold %.2f)",
            len(ranked),
            len(merged),
            config.confidence_threshold,
        )
        return ranked

    async def _evaluate(
        self,
        domain: DomainSpec,
        evaluator: Any,
        domain_input: Any,
        global_context: GlobalAnalysisContext,
    ) -> list[Recommendation]:
        """Run one evaluator and convert its output; failures stay per domain."""
        insights = await self._run(evaluator, domain_input, global_context)
        return self._to_recommendations(domain, insights)

    @staticmethod
    async def _run(evaluator: Any, domain_input: Any, global_context: GlobalAnalysisContext) -> Any:
        if inspect.iscoroutinefunction(evaluator.analyze):
            return await evaluator.analyze(domain_input, global_context)
        result = await asyncio.to_thread(evaluator.analyze, domain_input, global_context)
        if inspect.isawaitable(result):
            result = await result
        return result

    def _to_recommendations(
        self,
        domain: DomainSpec,
        insights: Sequence[Insight | Mapping[str, Any] | str] | Insight | Mapping[str, Any] | str | None,
    ) -> list[Recommendation]:
        if isinstance(insights, (str, Insight, Mapping)):
            insights = [insights]
        recommendations: list[Recommendation] = []
        for raw in insights or ():
            insight = Insight.coerce(raw)
            if not insight.text:
                self.logger.debug("Dropping empty %s insight", domain.name)
                continue
            recommendations.append(
                Recommendation.create(
                    type=domain.type,
                    content=insight.text,
                    confidence=insight.confidence,
                    source=domain.source,
                    context={"domain": domain.name, **dict(insight.metadata)},
                )
            )
        return recommendations
