"""Data models for the workout engine."""

from workout_engine.models.context import (
    Context,
    GlobalAnalysisContext,
    Preferences,
    Profile,
    Soreness,
    WorkoutSelection,
)
from workout_engine.models.enums import (
    AssistanceLevel,
    EngineStatus,
    ErrorType,
    FitnessLevel,
    Priority,
    RecommendationSource,
    RecommendationType,
    SessionIntensity,
    Severity,
    WorkoutIntensity,
    WorkoutType,
)
from workout_engine.models.prompt import PromptTemplate, PromptVariables
from workout_engine.models.recommendation import (
    Insight,
    Recommendation,
    priority_for_confidence,
)
from workout_engine.models.result import (
    AnalysisMetrics,
    ContextAnalysis,
    EngineResult,
    PipelineResult,
    SuggestedValue,
)
from workout_engine.models.validation import (
    ValidationIssue,
    ValidationResult,
    ValidationSummary,
)
from workout_engine.models.workout import (
    Exercise,
    GenerationProvenance,
    RestPeriods,
    WorkoutTemplate,
)

__all__ = [
    "AnalysisMetrics",
    "AssistanceLevel",
    "Context",
    "ContextAnalysis",
    "EngineResult",
    "EngineStatus",
    "ErrorType",
    "Exercise",
    "FitnessLevel",
    "GenerationProvenance",
    "GlobalAnalysisContext",
    "Insight",
    "PipelineResult",
    "Preferences",
    "Priority",
    "Profile",
    "PromptTemplate",
    "PromptVariables",
    "Recommendation",
    "RecommendationSource",
    "RecommendationType",
    "RestPeriods",
    "SessionIntensity",
    "Severity",
    "Soreness",
    "SuggestedValue",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSummary",
    "WorkoutIntensity",
    "WorkoutSelection",
    "WorkoutTemplate",
    "WorkoutType",
    "priority_for_confidence",
]
