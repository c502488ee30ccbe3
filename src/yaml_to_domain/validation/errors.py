"""Validation error types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationLocation:
    """Location in the YAML where an issue was found."""

    path: str
    """Dotted path to the issue (e.g., 'aggregates.Order.entities.OrderItem.audit')."""

    line: int | None = None
    """Line number in the source file (if available)."""

    column: int | None = None
    """Column number in the source file (if available)."""

    def __str__(self) -> str:
        """Format location as string."""
        if self.line is not None:
            if self.column is not None:
                return f"{self.path} (line {self.line}, col {self.column})"
            return f"{self.path} (line {self.line})"
        return self.path


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""

    code: str
    """Unique error code (e.g., 'E001', 'W001')."""

    message: str
    """Human-readable error message."""

    severity: ValidationSeverity
    """Severity level."""

    location: ValidationLocation | None = None
    """Location in the YAML file."""

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validation containing all issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return len(self.errors) == 0

    def add(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def add_error(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add an error issue."""
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=ValidationSeverity.ERROR,
                location=ValidationLocation(path=path),
                suggestion=suggestion,
                context=context,
            )
        )

    def add_warning(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add a warning issue."""
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=ValidationSeverity.WARNING,
                location=ValidationLocation(path=path),
                suggestion=suggestion,
                context=context,
            )
        )

    def merge(self, other: ValidationResult) -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)


class ErrorCodes:
    """Standard validation error codes."""

    # E0xx - Structural errors
    E001_MISSING_ROOT = "E001"
    E002_MULTIPLE_ROOTS = "E002"
    E003_MISSING_RELATIONSHIP_TARGET = "E003"
    E004_TRACK_USER_WITHOUT_AUDIT = "E004"
    E005_UNDEFINED_ENUM_STATE = "E005"
    E006_VALUE_OBJECT_REFERENCES_ENTITY = "E006"

    # E1xx - Duplicate errors
    E100_DUPLICATE_AGGREGATE = "E100"
    E101_DUPLICATE_ENTITY = "E101"
    E102_DUPLICATE_ENUM_VALUE = "E102"
    E103_DUPLICATE_FIELD = "E103"

    # E3xx - Format errors
    E300_SCHEMA_ERROR = "E300"
    E301_MISSING_AGGREGATES = "E301"

    # W0xx - Warnings
    W001_UNRESOLVED_TYPE = "W001"
    W002_UNKNOWN_RELATIONSHIP_TARGET = "W002"
    W003_UNSUPPORTED_MAPPED_BY = "W003"
    W004_DEPRECATED_FEATURE = "W004"


class StructuralError(Exception):
    """Raised when a document cannot be compiled.

    Carries the full :class:`ValidationResult` so callers can format every
    issue, not only the first one.
    """

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Structural validation failed: {', '.join(parts)}"
        if result.issues:
            message = f"{message}\n{self.format_issues()}"
        super().__init__(message)

    @classmethod
    def single(
        cls,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
    ) -> StructuralError:
        """Build an error carrying one error-level issue."""
        result = ValidationResult()
        result.add_error(code=code, message=message, path=path, suggestion=suggestion)
        return cls(result)

    def format_issues(self) -> str:
        """Format all issues as a string.

        Returns
        -------
            Formatted string with all issues.

        """
        lines = []

        for issue in self.result.errors:
            lines.append(f"ERROR: {issue}")

        for issue in self.result.warnings:
            lines.append(f"WARNING: {issue}")

        return "\n".join(lines)

    @property
    def errors_only(self) -> list[str]:
        """Get only error messages.

        Returns
        -------
            List of error message strings.

        """
        return [
            str(issue) for issue in self.result.issues if issue.severity == ValidationSeverity.ERROR
        ]


class ConfigurationError(StructuralError):
    """A single declaration is unusable, e.g. a relationship without target."""
