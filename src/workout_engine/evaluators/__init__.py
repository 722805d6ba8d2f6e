"""Default domain evaluators, auto-discovered by the EvaluatorRegistry."""

from workout_engine.evaluators.base import DomainEvaluator

__all__ = ["DomainEvaluator"]
