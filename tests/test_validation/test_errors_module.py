"""Tests for validation error types."""

from __future__ import annotations

from yaml_to_domain.validation import (
    ConfigurationError,
    ErrorCodes,
    StructuralError,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)


class TestValidationLocation:
    """Tests for ValidationLocation."""

    def test_path_only(self) -> None:
        """Should print the bare path."""
        assert str(ValidationLocation("aggregates.Order")) == "aggregates.Order"

    def test_with_line_and_column(self) -> None:
        """Should append line and column."""
        location = ValidationLocation("aggregates.Order", line=3, column=7)
        assert str(location) == "aggregates.Order (line 3, col 7)"


class TestValidationIssue:
    """Tests for ValidationIssue."""

    def test_str(self) -> None:
        """Should include code, severity, location and hint."""
        issue = ValidationIssue(
            code="E001",
            message="Missing root",
            severity=ValidationSeverity.ERROR,
            location=ValidationLocation("aggregates.Order.entities"),
            suggestion="Add isRoot",
        )
        assert str(issue) == (
            "[E001] ERROR Missing root at aggregates.Order.entities (hint: Add isRoot)"
        )


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_warnings_keep_result_valid(self) -> None:
        """Should stay valid with only warnings."""
        result = ValidationResult()
        result.add_warning(ErrorCodes.W001_UNRESOLVED_TYPE, "Unknown type", "x")

        assert result.is_valid
        assert len(result.warnings) == 1
        assert result.errors == []

    def test_errors_invalidate(self) -> None:
        """Should become invalid with an error and keep context."""
        result = ValidationResult()
        result.add_error(ErrorCodes.E001_MISSING_ROOT, "Missing root", "x", roots=[])

        assert not result.is_valid
        assert result.errors[0].context == {"roots": []}

    def test_merge(self) -> None:
        """Should append the other result's issues."""
        first = ValidationResult()
        second = ValidationResult()
        first.add_error("E001", "a", "x")
        second.add_warning("W001", "b", "y")

        first.merge(second)

        assert [i.code for i in first.issues] == ["E001", "W001"]


class TestStructuralError:
    """Tests for StructuralError."""

    def test_message_counts(self) -> None:
        """Should summarize error and warning counts."""
        result = ValidationResult()
        result.add_error("E001", "Missing root", "x")
        result.add_warning("W001", "Unknown type", "y")

        error = StructuralError(result)

        assert "1 error(s), 1 warning(s)" in str(error)
        assert error.errors_only == ["[E001] ERROR Missing root at x"]
        assert error.format_issues().splitlines() == [
            "ERROR: [E001] ERROR Missing root at x",
            "WARNING: [W001] WARNING Unknown type at y",
        ]

    def test_single(self) -> None:
        """Should build an error carrying one issue."""
        error = StructuralError.single("E301", "No aggregates", "aggregates", "Add them")

        (issue,) = error.result.issues
        assert issue.code == "E301"
        assert issue.suggestion == "Add them"

    def test_configuration_error_is_structural(self) -> None:
        """Should be catchable as StructuralError."""
        error = ConfigurationError.single("E003", "No target", "entities.order")

        assert isinstance(error, StructuralError)
        assert isinstance(error, ConfigurationError)
