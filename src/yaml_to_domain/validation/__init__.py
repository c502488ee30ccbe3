"""Validation module for domain descriptions."""

from yaml_to_domain.validation.errors import (
    ConfigurationError,
    ErrorCodes,
    StructuralError,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)
from yaml_to_domain.validation.validator import DomainValidator

__all__ = [
    "ConfigurationError",
    "DomainValidator",
    "ErrorCodes",
    "StructuralError",
    "ValidationIssue",
    "ValidationLocation",
    "ValidationResult",
    "ValidationSeverity",
]
