"""Main validator combining all validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yaml_to_domain.validation.base import CompositeValidator
from yaml_to_domain.validation.consistency_validators import (
    AuditConfigValidator,
    EnumStateValidator,
    RootEntityValidator,
    UniqueAggregateNameValidator,
    UniqueEntityNameValidator,
    UniqueEnumValueValidator,
    UniqueFieldNameValidator,
)
from yaml_to_domain.validation.errors import StructuralError, ValidationResult
from yaml_to_domain.validation.reference_validators import (
    MappedByValidator,
    RelationshipTargetValidator,
    TypeReferenceValidator,
    ValueObjectReferenceValidator,
)

if TYPE_CHECKING:
    from yaml_to_domain.models.root import DomainDescription


class DomainValidator:
    """Main validator for domain descriptions.

    Combines consistency validators (aggregate structure, audit settings,
    enum state machines, uniqueness) and reference validators
    (relationship targets, type linking).
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                # Consistency validators
                UniqueAggregateNameValidator(),
                RootEntityValidator(),
                UniqueEntityNameValidator(),
                UniqueFieldNameValidator(),
                AuditConfigValidator(),
                EnumStateValidator(),
                UniqueEnumValueValidator(),
                # Reference validators
                RelationshipTargetValidator(),
                MappedByValidator(),
                ValueObjectReferenceValidator(),
                TypeReferenceValidator(),
            ]
        )

    def validate(self, doc: DomainDescription) -> ValidationResult:
        """Validate a domain description.

        Args:
        ----
            doc: The document to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(doc, result)
        return result

    def validate_and_raise(self, doc: DomainDescription) -> ValidationResult:
        """Validate and raise if the document cannot be compiled.

        Args:
        ----
            doc: The document to validate.

        Returns:
        -------
            The result, which may still carry warnings.

        Raises:
        ------
            StructuralError: If there are errors, or warnings in strict mode.

        """
        result = self.validate(doc)

        if not result.is_valid:
            raise StructuralError(result)

        if self.strict and result.warnings:
            raise StructuralError(result)

        return result
