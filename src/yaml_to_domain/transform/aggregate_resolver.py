"""Resolve aggregate declarations into aggregate descriptors."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from yaml_to_domain.config import CompilerOptions
from yaml_to_domain.ir.domain import (
    AggregateDescriptor,
    EntityDescriptor,
    EnumDescriptor,
    TransitionEdge,
    ValueObjectDescriptor,
    ValueObjectMethod,
)
from yaml_to_domain.models.enums import EnumDefinition
from yaml_to_domain.models.root import AggregateDefinition
from yaml_to_domain.models.value_objects import ValueObjectDefinition
from yaml_to_domain.naming import to_pascal_case
from yaml_to_domain.transform.entity_resolver import inline_enums, resolve_entity
from yaml_to_domain.transform.imports import resolve_method_imports, resolve_value_object_imports
from yaml_to_domain.transform.method_generator import generate_aggregate_methods
from yaml_to_domain.transform.property_resolver import resolve_field
from yaml_to_domain.transform.relationship_resolver import collect_inverse_relationships
from yaml_to_domain.validation.errors import ErrorCodes, StructuralError

logger = logging.getLogger(__name__)


def freeze(value: Any) -> Any:
    """Convert opaque YAML data into nested tuples so the IR stays hashable.

    Mappings become tuples of (key, value) pairs in insertion order.
    """
    if isinstance(value, dict):
        return tuple((key, freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def resolve_enum(raw: EnumDefinition) -> EnumDescriptor:
    """Resolve an aggregate-scoped enum."""
    transitions = None
    if raw.transitions is not None:
        transitions = tuple(
            TransitionEdge(from_states=t.from_states, to=t.to) for t in raw.transitions
        )

    return EnumDescriptor(
        name=to_pascal_case(raw.name),
        values=tuple(raw.values),
        transitions=transitions,
        initial_value=raw.initial_value,
    )


def resolve_value_object(
    raw: ValueObjectDefinition,
    aggregate_enums: tuple[EnumDescriptor, ...],
    options: CompilerOptions,
) -> ValueObjectDescriptor:
    """Resolve a value object.

    Value object fields are resolved without value-object detection; a
    value object nesting another one must flag it with ``isValueObject``.
    """
    fields = tuple(
        resolve_field(f, (), aggregate_enums, options.persistence_suffix) for f in raw.fields
    )
    enums = inline_enums(raw.fields)

    return ValueObjectDescriptor(
        name=to_pascal_case(raw.name),
        fields=fields,
        methods=tuple(
            ValueObjectMethod(
                name=m.name,
                return_type=m.return_type,
                parameters=freeze(m.parameters),
                body=m.body,
            )
            for m in raw.methods
        ),
        validation=freeze(raw.validation),
        enums=enums,
        required_imports=resolve_value_object_imports(fields, (*enums, *aggregate_enums), options),
    )


def _check_single_root(raw: AggregateDefinition) -> None:
    roots = [e.name for e in raw.entities if e.is_root]
    if len(roots) == 1:
        return

    path = f"aggregates.{raw.name}.entities"
    if not roots:
        raise StructuralError.single(
            code=ErrorCodes.E001_MISSING_ROOT,
            message=f"Aggregate '{raw.name}' must have one entity with isRoot: true",
            path=path,
            suggestion="Mark the aggregate root entity with 'isRoot: true'",
        )
    raise StructuralError.single(
        code=ErrorCodes.E002_MULTIPLE_ROOTS,
        message=(
            f"Aggregate '{raw.name}' has {len(roots)} root entities "
            f"({', '.join(roots)}); exactly one is allowed"
        ),
        path=path,
        suggestion="Keep 'isRoot: true' on a single entity",
    )


def _with_method_imports(
    root: EntityDescriptor,
    imports: tuple[str, ...],
) -> EntityDescriptor:
    if not imports:
        return root
    return replace(root, required_imports=tuple(sorted({*root.required_imports, *imports})))


def resolve_aggregate(raw: AggregateDefinition, options: CompilerOptions) -> AggregateDescriptor:
    """Resolve one aggregate.

    Resolution order matters: enums and value objects come first because
    fields need their names, and inverse relationships are collected over
    every entity before any entity is resolved.

    Args:
    ----
        raw: The aggregate as declared.
        options: Compiler options.

    Returns:
    -------
        The resolved aggregate.

    Raises:
    ------
        StructuralError: If the aggregate does not have exactly one root, or
            an entity declaration is invalid.

    """
    _check_single_root(raw)

    enums = tuple(resolve_enum(e) for e in raw.enums)
    value_objects = tuple(resolve_value_object(vo, enums, options) for vo in raw.value_objects)
    value_object_names = tuple(vo.name for vo in value_objects)

    inverse = collect_inverse_relationships(raw.entities, options.persistence_suffix)
    logger.debug(
        "Aggregate %s: %d inverse relationship(s) synthesized",
        raw.name,
        sum(len(rels) for rels in inverse.values()),
    )

    entities = [
        resolve_entity(e, value_object_names, enums, inverse, options) for e in raw.entities
    ]
    root = next(e for e in entities if e.is_root)
    secondary = tuple(e for e in entities if not e.is_root)

    methods = generate_aggregate_methods(root, secondary)
    entity_enums = tuple(en for e in entities for en in e.enums)
    resolved_root = _with_method_imports(
        root,
        resolve_method_imports(methods, (*entity_enums, *enums), options),
    )

    return AggregateDescriptor(
        name=to_pascal_case(raw.name),
        root_entity=resolved_root,
        secondary_entities=secondary,
        value_objects=value_objects,
        enums=enums,
        aggregate_methods=methods,
        all_entities=tuple(resolved_root if e is root else e for e in entities),
        package=raw.package,
    )
