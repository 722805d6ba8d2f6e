"""Validation result types returned (never raised) by the ValidationService."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_engine.models.enums import Severity


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str
    severity: Severity
    context: str = ""
    recommendation: str | None = None


@dataclass(frozen=True)
class ValidationSummary:
    errors: int = 0
    warnings: int = 0
    info: int = 0


@dataclass(frozen=True)
class ValidationResult:
    """Itemized validation outcome.

    ``is_valid`` is True iff no ERROR-severity issue exists; warnings and
    info never block.
    """

    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def summary(self) -> ValidationSummary:
        return ValidationSummary(
            errors=sum(1 for i in self.issues if i.severity == Severity.ERROR),
            warnings=sum(1 for i in self.issues if i.severity == Severity.WARNING),
            info=sum(1 for i in self.issues if i.severity == Severity.INFO),
        )

    @property
    def is_valid(self) -> bool:
        return self.summary.errors == 0

    @property
    def errors(self) -> tuple[ValidationIssue, ...]:
        return tuple(i for i in self.issues if i.severity == Severity.ERROR)
