"""Validators for aggregate structure and data consistency checks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from yaml_to_domain.ir.domain import AUDIT_TIMESTAMP_FIELDS, AUDIT_USER_FIELDS
from yaml_to_domain.naming import to_camel_case, to_pascal_case
from yaml_to_domain.validation.base import BaseValidator
from yaml_to_domain.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from yaml_to_domain.models.entities import EntityDefinition
    from yaml_to_domain.models.root import DomainDescription


def _duplicates(names: Iterable[str]) -> list[str]:
    """Return names seen more than once, in first-duplicate order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in names:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return duplicates


class RootEntityValidator(BaseValidator):
    """Validates that every aggregate has exactly one root entity."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Count root entities per aggregate."""
        for aggregate in doc.aggregates:
            roots = [e.name for e in aggregate.entities if e.is_root]
            path = f"aggregates.{aggregate.name}.entities"

            if not roots:
                result.add_error(
                    code=ErrorCodes.E001_MISSING_ROOT,
                    message=f"Aggregate '{aggregate.name}' must have one entity with isRoot: true",
                    path=path,
                    suggestion="Mark the aggregate root entity with 'isRoot: true'",
                )
            elif len(roots) > 1:
                result.add_error(
                    code=ErrorCodes.E002_MULTIPLE_ROOTS,
                    message=(
                        f"Aggregate '{aggregate.name}' has {len(roots)} root entities "
                        f"({', '.join(roots)}); exactly one is allowed"
                    ),
                    path=path,
                    suggestion="Keep 'isRoot: true' on a single entity",
                    roots=roots,
                )


class AuditConfigValidator(BaseValidator):
    """Validates audit settings and flags the legacy ``auditable`` flag."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check audit blocks of every entity."""
        for aggregate in doc.aggregates:
            for entity in aggregate.entities:
                path = f"aggregates.{aggregate.name}.entities.{entity.name}"

                if entity.audit_track_user and not entity.audit_enabled:
                    result.add_error(
                        code=ErrorCodes.E004_TRACK_USER_WITHOUT_AUDIT,
                        message=(
                            f"Entity '{entity.name}': audit.trackUser requires "
                            "audit.enabled to be true"
                        ),
                        path=f"{path}.audit",
                        suggestion="Set 'audit.enabled: true' or remove 'trackUser'",
                    )

                if entity.auditable is True:
                    result.add_warning(
                        code=ErrorCodes.W004_DEPRECATED_FEATURE,
                        message=(
                            f"Entity '{entity.name}': 'auditable: true' is deprecated. "
                            "Use 'audit: { enabled: true }' instead."
                        ),
                        path=f"{path}.auditable",
                        suggestion="Replace with 'audit: { enabled: true }'",
                    )


class EnumStateValidator(BaseValidator):
    """Validates that transitions and initial values name declared enum values."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check every state referenced by an enum state machine."""
        for aggregate in doc.aggregates:
            for enum_def in aggregate.enums:
                values = set(enum_def.values)
                path = f"aggregates.{aggregate.name}.enums.{enum_def.name}"

                if enum_def.initial_value is not None and enum_def.initial_value not in values:
                    result.add_error(
                        code=ErrorCodes.E005_UNDEFINED_ENUM_STATE,
                        message=(
                            f"Enum '{enum_def.name}' initialValue '{enum_def.initial_value}' "
                            "is not one of its values"
                        ),
                        path=f"{path}.initialValue",
                        suggestion=f"Use one of: {', '.join(enum_def.values)}",
                    )

                for index, transition in enumerate(enum_def.transitions or []):
                    for state in (*transition.from_states, transition.to):
                        if state in values:
                            continue
                        result.add_error(
                            code=ErrorCodes.E005_UNDEFINED_ENUM_STATE,
                            message=(
                                f"Enum '{enum_def.name}' transition references undefined "
                                f"state '{state}'"
                            ),
                            path=f"{path}.transitions[{index}]",
                            suggestion=f"Use one of: {', '.join(enum_def.values)}",
                            state=state,
                        )


class UniqueAggregateNameValidator(BaseValidator):
    """Validates that aggregate names are unique in the document."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate aggregate names."""
        for name in _duplicates(to_pascal_case(a.name) for a in doc.aggregates):
            result.add_error(
                code=ErrorCodes.E100_DUPLICATE_AGGREGATE,
                message=f"Aggregate '{name}' is declared more than once",
                path=f"aggregates.{name}",
                suggestion="Each aggregate must have a unique name",
            )


class UniqueEntityNameValidator(BaseValidator):
    """Validates that entity names are unique within an aggregate."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate entity names."""
        for aggregate in doc.aggregates:
            for name in _duplicates(to_pascal_case(e.name) for e in aggregate.entities):
                result.add_error(
                    code=ErrorCodes.E101_DUPLICATE_ENTITY,
                    message=f"Aggregate '{aggregate.name}' declares entity '{name}' more than once",
                    path=f"aggregates.{aggregate.name}.entities.{name}",
                    suggestion="Each entity must have a unique name within its aggregate",
                )


class UniqueEnumValueValidator(BaseValidator):
    """Validates that enum values are unique, for named and inline enums."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate enum values."""
        for aggregate in doc.aggregates:
            base = f"aggregates.{aggregate.name}"

            for enum_def in aggregate.enums:
                self._check(enum_def.name, enum_def.values, f"{base}.enums.{enum_def.name}", result)

            owners = [*aggregate.entities, *aggregate.value_objects]
            for owner in owners:
                for f in owner.fields:
                    if f.enum_values is not None:
                        self._check(
                            to_pascal_case(f.type),
                            f.enum_values,
                            f"{base}.{owner.name}.fields.{f.name}.enumValues",
                            result,
                        )

    def _check(
        self,
        enum_name: str,
        values: list[str],
        path: str,
        result: ValidationResult,
    ) -> None:
        for value in _duplicates(values):
            result.add_error(
                code=ErrorCodes.E102_DUPLICATE_ENUM_VALUE,
                message=f"Enum '{enum_name}' declares value '{value}' more than once",
                path=path,
                suggestion="Enum values must be unique",
            )


class UniqueFieldNameValidator(BaseValidator):
    """Validates that field names are unique within an entity or value object.

    Fields injected by audit settings count as declared on the entity.
    """

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate field names after camelCase conversion."""
        for aggregate in doc.aggregates:
            owners = [*aggregate.entities, *aggregate.value_objects]
            for owner in owners:
                names = [to_camel_case(f.name) for f in owner.fields]
                for name in _duplicates(names):
                    result.add_error(
                        code=ErrorCodes.E103_DUPLICATE_FIELD,
                        message=f"'{owner.name}' declares field '{name}' more than once",
                        path=f"aggregates.{aggregate.name}.{owner.name}.fields.{name}",
                        suggestion="Rename or remove one of the fields",
                    )

            for entity in aggregate.entities:
                declared = {to_camel_case(f.name) for f in entity.fields}
                for name in _audit_field_names(entity):
                    if name in declared:
                        result.add_error(
                            code=ErrorCodes.E103_DUPLICATE_FIELD,
                            message=(
                                f"'{entity.name}' declares field '{name}', "
                                "which audit settings already add"
                            ),
                            path=f"aggregates.{aggregate.name}.{entity.name}.fields.{name}",
                            suggestion="Remove the field or disable audit",
                        )


def _audit_field_names(entity: EntityDefinition) -> tuple[str, ...]:
    if not entity.audit_enabled:
        return ()
    if entity.audit_track_user:
        return AUDIT_TIMESTAMP_FIELDS + AUDIT_USER_FIELDS
    return AUDIT_TIMESTAMP_FIELDS
