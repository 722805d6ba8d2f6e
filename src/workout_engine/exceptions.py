"""Custom exception hierarchy for the workout engine."""

from __future__ import annotations

from typing import Any

from workout_engine.models.enums import ErrorType


class WorkoutEngineError(Exception):
    """Base exception for all pipeline-level errors.

    Carries the structured ``{type, message, details}`` shape the engine
    records in its error list.
    """

    error_type: ErrorType = ErrorType.VALIDATION_ERROR

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def type(self) -> ErrorType:
        return self.error_type


class ValidationError(WorkoutEngineError):
    """Context, recommendations or configuration failed validation."""

    error_type = ErrorType.VALIDATION_ERROR


class InvalidContextError(WorkoutEngineError):
    """An engine method was called before ``initialize``."""

    error_type = ErrorType.INVALID_CONTEXT


class AnalysisTimeoutError(WorkoutEngineError):
    """Recommendation generation exceeded ``analysis_timeout``."""

    error_type = ErrorType.TIMEOUT

    def __init__(self, message: str = "Analysis timeout exceeded", details: Any = None) -> None:
        super().__init__(message, details)
