"""Resolve field declarations into field descriptors."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from yaml_to_domain.config import DEFAULT_PERSISTENCE_SUFFIX
from yaml_to_domain.ir.domain import (
    EnumDescriptor,
    FieldDescriptor,
    TransitionEdge,
    TransitionMeta,
)
from yaml_to_domain.models.fields import ConstraintValue, FieldDefinition, ValidationRule
from yaml_to_domain.naming import to_camel_case
from yaml_to_domain.transform.type_mapper import (
    collection_element,
    persistence_type,
    resolve_type,
)

_COLUMN_ANNOTATION = re.compile(r"@Column\((.*)\)")


def _format_literal(value: ConstraintValue | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_annotation(rule: ValidationRule) -> str:
    """Render a constraint annotation.

    Attributes are emitted in a fixed order with ``message`` last; a rule
    without attributes renders bare.

    Example:
    -------
        >>> build_annotation(ValidationRule(type="Size", min=5, max=100))
        '@Size(min = 5, max = 100)'
        >>> build_annotation(ValidationRule(type="NotBlank"))
        '@NotBlank'

    """
    params: list[str] = []

    if rule.value is not None:
        params.append(f"value = {_format_literal(rule.value)}")
    if rule.min is not None:
        params.append(f"min = {_format_literal(rule.min)}")
    if rule.max is not None:
        params.append(f"max = {_format_literal(rule.max)}")
    if rule.regexp is not None:
        params.append(f'regexp = "{rule.regexp}"')
    if rule.integer is not None:
        params.append(f"integer = {rule.integer}")
    if rule.fraction is not None:
        params.append(f"fraction = {rule.fraction}")
    if rule.inclusive is not None:
        params.append(f"inclusive = {_format_literal(rule.inclusive)}")
    if rule.message is not None:
        params.append(f'message = "{rule.message}"')

    if not params:
        return f"@{rule.kind}"
    return f"@{rule.kind}({', '.join(params)})"


def build_transition_map(
    transitions: Sequence[TransitionEdge],
    values: Sequence[str],
) -> dict[str, tuple[str, ...]]:
    """Build the allowed-targets adjacency map of a state machine.

    Every value starts with no allowed targets, so states that never appear
    as a source are terminal.

    Args:
    ----
        transitions: Declared edges.
        values: All enum values.

    Returns:
    -------
        Mapping of state to allowed target states, in declaration order.

    """
    allowed: dict[str, list[str]] = {v: [] for v in values}
    for edge in transitions:
        for source in edge.from_states:
            targets = allowed.setdefault(source, [])
            if edge.to not in targets:
                targets.append(edge.to)
    return {state: tuple(targets) for state, targets in allowed.items()}


def _column_annotation(annotations: Iterable[str]) -> str | None:
    for annotation in annotations:
        if "@Column" in annotation:
            return annotation if _COLUMN_ANNOTATION.search(annotation) else None
    return None


def resolve_field(
    raw: FieldDefinition,
    value_object_names: Sequence[str] = (),
    aggregate_enums: Sequence[EnumDescriptor] = (),
    persistence_suffix: str = DEFAULT_PERSISTENCE_SUFFIX,
    synthetic: bool = False,
) -> FieldDescriptor:
    """Resolve one field declaration.

    Resolution never fails: unknown type names stay user-defined types and
    simply are not flagged as value objects or enums.

    Args:
    ----
        raw: The field as declared.
        value_object_names: Value object names of the aggregate.
        aggregate_enums: Enums of the aggregate.
        persistence_suffix: Suffix of embeddable companion types.
        synthetic: The field is injected by audit configuration.

    Returns:
    -------
        The resolved field descriptor.

    """
    type_ref = resolve_type(raw.type, raw.enum_values)
    resolved = type_ref.render()
    element = collection_element(type_ref)

    detected_value_object = resolved in value_object_names or (
        element is not None and element in value_object_names
    )
    is_value_object = raw.is_value_object or detected_value_object

    matching_enum = next((e for e in aggregate_enums if e.name == resolved), None)

    transition_meta: TransitionMeta | None = None
    if matching_enum is not None and matching_enum.transitions:
        transition_meta = TransitionMeta(
            transitions=matching_enum.transitions,
            initial_value=matching_enum.initial_value,
            transition_map=tuple(
                build_transition_map(matching_enum.transitions, matching_enum.values).items()
            ),
            enum_values=matching_enum.values,
        )

    auto_init_value = matching_enum.initial_value if matching_enum is not None else None
    auto_init = auto_init_value is not None

    return FieldDescriptor(
        name=to_camel_case(raw.name),
        original_name=raw.name,
        declared_type=raw.type,
        type_ref=type_ref,
        resolved_type=resolved,
        persistence_type=persistence_type(
            type_ref,
            value_object_names,
            persistence_suffix,
            force_value_object=raw.is_value_object,
        ),
        is_collection=element is not None,
        collection_element_type=element,
        is_value_object=is_value_object,
        is_embedded=raw.is_embedded,
        is_enum=raw.enum_values is not None or matching_enum is not None,
        # A value seeded from the state machine start state is never an input
        read_only=raw.read_only or auto_init,
        hidden=raw.hidden,
        validation_annotations=tuple(build_annotation(rule) for rule in raw.validations),
        annotations=tuple(raw.annotations),
        column_annotation=_column_annotation(raw.annotations),
        transition_meta=transition_meta,
        auto_init=auto_init,
        auto_init_value=auto_init_value,
        is_synthetic=synthetic,
    )
