"""Recommendation output — the atomic unit the pipeline ranks and renders."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from workout_engine.models.enums import (
    DEFAULT_INSIGHT_CONFIDENCE,
    HIGH_PRIORITY_CONFIDENCE,
    MEDIUM_PRIORITY_CONFIDENCE,
    Priority,
    RecommendationSource,
    RecommendationType,
)


def _freeze(metadata: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(metadata or {}))


def _confidence(value: Any) -> float:
    """Float confidence; None, junk and NaN fall back to the default."""
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return DEFAULT_INSIGHT_CONFIDENCE
    if math.isnan(confidence):
        return DEFAULT_INSIGHT_CONFIDENCE
    return confidence


def priority_for_confidence(confidence: float) -> Priority:
    """Map confidence to its priority tier (high >= 0.8, medium >= 0.6)."""
    if confidence >= HIGH_PRIORITY_CONFIDENCE:
        return Priority.HIGH
    if confidence >= MEDIUM_PRIORITY_CONFIDENCE:
        return Priority.MEDIUM
    return Priority.LOW


@dataclass(frozen=True)
class Insight:
    """Raw output of a domain evaluator.

    Evaluators may return these directly, plain mappings with the same
    keys, or bare strings; ``Insight.coerce`` accepts all three.
    """

    recommendation: str | None = None
    message: str | None = None
    confidence: float | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)
    priority: str | None = None

    @property
    def text(self) -> str:
        return self.recommendation or self.message or ""

    @classmethod
    def coerce(cls, raw: Insight | Mapping[str, Any] | str) -> Insight:
        """Normalize one evaluator output item.

        Raises:
            TypeError: If *raw* is none of the accepted shapes.
        """
        if isinstance(raw, Insight):
            return raw
        if isinstance(raw, str):
            return cls(recommendation=raw)
        if not isinstance(raw, Mapping):
            raise TypeError(f"Unsupported insight type: {type(raw).__name__}")
        return cls(
            recommendation=raw.get("recommendation"),
            message=raw.get("message"),
            confidence=raw.get("confidence"),
            metadata=raw.get("metadata") or {},
            priority=raw.get("priority"),
        )


@dataclass(frozen=True)
class Recommendation:
    """A scored, typed, prioritized suggestion.

    Build through ``Recommendation.create`` so that ``priority`` always
    agrees with ``confidence``.
    """

    type: RecommendationType
    content: str
    confidence: float  # 0.0-1.0
    source: RecommendationSource
    priority: Priority
    context: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def create(
        cls,
        type: RecommendationType,
        content: str,
        confidence: float | None,
        source: RecommendationSource,
        context: Mapping[str, Any] | None = None,
    ) -> Recommendation:
        """Build a recommendation, defaulting confidence and deriving priority."""
        value = _confidence(confidence)
        return cls(
            type=type,
            content=content,
            confidence=value,
            source=source,
            priority=priority_for_confidence(value),
            context=_freeze(context),
        )
