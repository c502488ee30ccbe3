"""Validators for cross-references between declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yaml_to_domain.ir.types import CollectionType, ResolvedType, UserDefinedType
from yaml_to_domain.models.relationships import RelationshipType
from yaml_to_domain.naming import to_pascal_case
from yaml_to_domain.transform.imports import TYPE_IMPORTS
from yaml_to_domain.transform.type_mapper import resolve_type
from yaml_to_domain.validation.base import BaseValidator
from yaml_to_domain.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from yaml_to_domain.models.fields import FieldDefinition
    from yaml_to_domain.models.root import AggregateDefinition, DomainDescription


def _user_defined_name(resolved: ResolvedType) -> str | None:
    """Return the innermost user-defined type name, if any."""
    while isinstance(resolved, CollectionType):
        resolved = resolved.element
    if isinstance(resolved, UserDefinedType) and not resolved.inline_enum:
        return resolved.name
    return None


def _entity_names(aggregate: AggregateDefinition) -> set[str]:
    return {to_pascal_case(e.name) for e in aggregate.entities}


class RelationshipTargetValidator(BaseValidator):
    """Validates that relationships name a target entity of their aggregate."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check relationship targets."""
        for aggregate in doc.aggregates:
            entity_names = _entity_names(aggregate)

            for entity in aggregate.entities:
                path = f"aggregates.{aggregate.name}.entities.{entity.name}.relationships"

                for index, rel in enumerate(entity.relationships):
                    if not rel.target:
                        result.add_error(
                            code=ErrorCodes.E003_MISSING_RELATIONSHIP_TARGET,
                            message=(
                                f"Relationship in entity '{entity.name}' is missing "
                                "'target' or 'targetEntity' field"
                            ),
                            path=f"{path}[{index}]",
                            suggestion="Name the target entity with 'target: <EntityName>'",
                        )
                    elif to_pascal_case(rel.target) not in entity_names:
                        result.add_warning(
                            code=ErrorCodes.W002_UNKNOWN_RELATIONSHIP_TARGET,
                            message=(
                                f"Relationship '{rel.type.value}' in entity '{entity.name}' "
                                f"targets '{rel.target}', which is not an entity of "
                                f"aggregate '{aggregate.name}'"
                            ),
                            path=f"{path}[{index}].target",
                            suggestion=f"Declare '{rel.target}' in aggregate '{aggregate.name}'",
                            available_entities=sorted(entity_names),
                        )


class MappedByValidator(BaseValidator):
    """Flags ``mappedBy`` on kinds that get no inverse side."""

    UNSUPPORTED = frozenset({RelationshipType.MANY_TO_MANY, RelationshipType.MANY_TO_ONE})

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Warn on ``mappedBy`` declared on ManyToOne or ManyToMany."""
        for aggregate in doc.aggregates:
            for entity in aggregate.entities:
                for index, rel in enumerate(entity.relationships):
                    if rel.mapped_by and rel.type in self.UNSUPPORTED:
                        result.add_warning(
                            code=ErrorCodes.W003_UNSUPPORTED_MAPPED_BY,
                            message=(
                                f"'mappedBy' on {rel.type.value} relationship in entity "
                                f"'{entity.name}' is ignored; no inverse side is generated"
                            ),
                            path=(
                                f"aggregates.{aggregate.name}.entities.{entity.name}"
                                f".relationships[{index}].mappedBy"
                            ),
                            suggestion="Declare the other side explicitly",
                        )


class TypeReferenceValidator(BaseValidator):
    """Reports field types that resolve to nothing declared in the document.

    Unknown type names are accepted by the type mapper and become class
    references; this is the linking step that makes typos visible.
    """

    # Names that need no declaration besides the built-in scalars
    BUILTIN_TYPES = frozenset(TYPE_IMPORTS)

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check field types of entities and value objects."""
        known = set(self.BUILTIN_TYPES)
        for aggregate in doc.aggregates:
            known |= _entity_names(aggregate)
            known |= {to_pascal_case(vo.name) for vo in aggregate.value_objects}
            known |= {to_pascal_case(e.name) for e in aggregate.enums}
            for owner in (*aggregate.entities, *aggregate.value_objects):
                known |= {to_pascal_case(f.type) for f in owner.fields if f.enum_values is not None}

        for aggregate in doc.aggregates:
            for owner in (*aggregate.entities, *aggregate.value_objects):
                for f in owner.fields:
                    self._check_field(aggregate.name, owner.name, f, known, result)

    def _check_field(
        self,
        aggregate_name: str,
        owner_name: str,
        field_def: FieldDefinition,
        known: set[str],
        result: ValidationResult,
    ) -> None:
        name = _user_defined_name(resolve_type(field_def.type, field_def.enum_values))
        if name is None or name in known:
            return

        result.add_warning(
            code=ErrorCodes.W001_UNRESOLVED_TYPE,
            message=(
                f"Field '{field_def.name}' of '{owner_name}' has type '{field_def.type}', "
                "which matches no scalar, entity, value object or enum"
            ),
            path=f"aggregates.{aggregate_name}.{owner_name}.fields.{field_def.name}.type",
            suggestion=f"Declare '{name}' or fix the type name",
            referenced_type=name,
        )


class ValueObjectReferenceValidator(BaseValidator):
    """Validates that value objects never reference entities."""

    def validate(
        self,
        doc: DomainDescription,
        result: ValidationResult,
    ) -> None:
        """Check value object field types against entity names."""
        for aggregate in doc.aggregates:
            entity_names = _entity_names(aggregate)

            for vo in aggregate.value_objects:
                for f in vo.fields:
                    name = _user_defined_name(resolve_type(f.type, f.enum_values))
                    if name is None or name not in entity_names:
                        continue
                    result.add_error(
                        code=ErrorCodes.E006_VALUE_OBJECT_REFERENCES_ENTITY,
                        message=(
                            f"Value object '{vo.name}' field '{f.name}' references "
                            f"entity '{name}'"
                        ),
                        path=f"aggregates.{aggregate.name}.valueObjects.{vo.name}.fields.{f.name}",
                        suggestion="Value objects may only hold scalars, enums or value objects",
                    )
