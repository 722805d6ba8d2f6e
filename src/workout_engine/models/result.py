"""Engine and pipeline outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from workout_engine.models.context import Context
from workout_engine.models.prompt import PromptTemplate, PromptVariables
from workout_engine.models.recommendation import Recommendation
from workout_engine.models.workout import WorkoutTemplate

if TYPE_CHECKING:
    from workout_engine.config import EngineConfig


@dataclass(frozen=True)
class AnalysisMetrics:
    profile_score: float
    workout_score: float
    combined_score: float
    confidence_level: float  # mean confidence across the final set
    processing_time: int  # milliseconds since initialize()


@dataclass(frozen=True)
class EngineResult:
    """Created once per successful ``generate_recommendations`` call."""

    recommendations: tuple[Recommendation, ...]
    analysis: AnalysisMetrics
    context: Context
    variables: PromptVariables
    config: EngineConfig


@dataclass(frozen=True)
class PipelineResult:
    """Everything one end-to-end run produced."""

    engine_result: EngineResult
    template: PromptTemplate
    prompt: str
    workout: WorkoutTemplate

    @property
    def recommendations(self) -> tuple[Recommendation, ...]:
        return self.engine_result.recommendations


@dataclass(frozen=True)
class SuggestedValue:
    value: object
    confidence: float


@dataclass(frozen=True)
class ContextAnalysis:
    """Suggested adjustments derived from ranked recommendations."""

    intensity: SuggestedValue
    complexity: SuggestedValue
    duration: SuggestedValue
    focus_areas: tuple[str, ...] = field(default_factory=tuple)
    focus_confidence: float = 0.7
