"""Resolve entity declarations into entity descriptors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from yaml_to_domain.config import CompilerOptions
from yaml_to_domain.ir.domain import (
    AUDIT_TIMESTAMP_FIELDS,
    AUDIT_USER_FIELDS,
    AuditConfig,
    EntityDescriptor,
    EnumDescriptor,
    FieldDescriptor,
)
from yaml_to_domain.models.entities import EntityDefinition
from yaml_to_domain.models.fields import FieldDefinition
from yaml_to_domain.naming import pluralize, to_camel_case, to_pascal_case, to_snake_case
from yaml_to_domain.transform.imports import resolve_entity_imports, resolve_validation_imports
from yaml_to_domain.transform.property_resolver import resolve_field
from yaml_to_domain.transform.relationship_resolver import (
    InverseRelationships,
    merge_relationships,
    resolve_relationship,
)
from yaml_to_domain.validation.errors import ErrorCodes, StructuralError

AUDIT_FIELD_TYPES: dict[str, str] = {
    "createdAt": "LocalDateTime",
    "updatedAt": "LocalDateTime",
    "createdBy": "String",
    "updatedBy": "String",
}


def resolve_audit_config(raw: EntityDefinition) -> AuditConfig:
    """Combine the legacy ``auditable`` flag and the ``audit`` block.

    An explicit ``audit.enabled`` wins over ``auditable``; otherwise
    ``auditable: true`` enables audit.

    Raises
    ------
        StructuralError: If ``trackUser`` is set without effective audit.

    """
    enabled = raw.audit_enabled
    track_user = raw.audit_track_user

    if track_user and not enabled:
        raise StructuralError.single(
            code=ErrorCodes.E004_TRACK_USER_WITHOUT_AUDIT,
            message=f"Entity '{raw.name}': audit.trackUser requires audit.enabled to be true",
            path=f"entities.{raw.name}.audit",
            suggestion="Set 'audit.enabled: true' or remove 'trackUser'",
        )

    return AuditConfig(enabled=enabled, track_user=track_user)


def audit_field_definitions(audit: AuditConfig) -> list[FieldDefinition]:
    """Return the fields injected by an audit configuration, in order."""
    if not audit.enabled:
        return []

    names = list(AUDIT_TIMESTAMP_FIELDS)
    if audit.track_user:
        names.extend(AUDIT_USER_FIELDS)
    return [FieldDefinition(name=name, type=AUDIT_FIELD_TYPES[name]) for name in names]


def inline_enums(raw_fields: Sequence[FieldDefinition]) -> tuple[EnumDescriptor, ...]:
    """Return the enums declared inline through ``enumValues``."""
    return tuple(
        EnumDescriptor(name=to_pascal_case(f.type), values=tuple(f.enum_values))
        for f in raw_fields
        if f.enum_values is not None
    )


def resolve_entity(
    raw: EntityDefinition,
    value_object_names: Sequence[str],
    aggregate_enums: Sequence[EnumDescriptor],
    inverse_relationships: InverseRelationships,
    options: CompilerOptions,
) -> EntityDescriptor:
    """Resolve one entity.

    Args:
    ----
        raw: The entity as declared.
        value_object_names: Value object names of the aggregate.
        aggregate_enums: Enums of the aggregate.
        inverse_relationships: Inverse sides collected over the whole aggregate.
        options: Compiler options.

    Returns:
    -------
        The resolved entity.

    """
    audit = resolve_audit_config(raw)
    class_name = to_pascal_case(raw.name)
    suffix = options.persistence_suffix

    fields: list[FieldDescriptor] = [
        resolve_field(f, value_object_names, aggregate_enums, suffix) for f in raw.fields
    ]
    fields.extend(
        resolve_field(f, value_object_names, aggregate_enums, suffix, synthetic=True)
        for f in audit_field_definitions(audit)
    )

    declared = [resolve_relationship(rel, class_name, suffix) for rel in raw.relationships]
    relationships = merge_relationships(declared, inverse_relationships.get(class_name, ()))

    entity_enums = inline_enums(raw.fields)

    entity = EntityDescriptor(
        name=class_name,
        field_name=to_camel_case(raw.name),
        table_name=raw.table_name or to_snake_case(pluralize(raw.name)),
        is_root=raw.is_root,
        audit=audit,
        fields=tuple(fields),
        relationships=relationships,
        enums=entity_enums,
        required_imports=resolve_entity_imports(
            fields,
            relationships,
            (*entity_enums, *aggregate_enums),
            options,
        ),
        auditable=raw.auditable is True,
    )

    # Constraint imports only concern input projections
    return replace(entity, validation_imports=resolve_validation_imports(entity.command_fields))
