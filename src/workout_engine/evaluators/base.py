"""Abstract base class for the domain evaluators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from workout_engine.models.context import GlobalAnalysisContext
from workout_engine.models.recommendation import Insight


class DomainEvaluator(ABC):
    """Base class for one domain of the recommendation fan-out.

    Each evaluator encapsulates the heuristics for a single domain (energy,
    soreness, focus, duration, equipment or cross-component). Evaluators
    are discovered automatically by the EvaluatorRegistry and run in
    parallel by the RecommendationStrategy.

    Subclasses must define:
        domain: registry key (e.g. "energy")
        analyze(): the domain logic

    The strategy decides what ``domain_input`` is for each domain and how
    the returned insights are typed; an evaluator only produces text and a
    confidence. Anything with a compatible ``analyze`` method, sync or
    async, can stand in for a subclass.
    """

    domain: str

    @abstractmethod
    def analyze(
        self, domain_input: Any, global_context: GlobalAnalysisContext
    ) -> list[Insight]:
        """Analyze one domain.

        Args:
            domain_input: The slice of the context this domain looks at.
            global_context: Frozen snapshot of the whole context.

        Returns:
            Zero or more insights. An empty list means "nothing to say".
        """
        ...
