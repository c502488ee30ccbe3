"""Map declared YAML type names to resolved IR types."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from yaml_to_domain.ir.types import CollectionType, KnownType, ResolvedType, UserDefinedType
from yaml_to_domain.naming import to_pascal_case

# Built-in scalars; each maps to itself
SCALAR_TYPES: frozenset[str] = frozenset(
    {
        "String",
        "Integer",
        "Long",
        "Double",
        "BigDecimal",
        "Boolean",
        "LocalDate",
        "LocalDateTime",
        "LocalTime",
        "UUID",
    }
)

_LIST_TYPE = re.compile(r"^List<(.+)>$")


def resolve_type(
    declared_type: str,
    inline_enum_values: Sequence[str] | None = None,
) -> ResolvedType:
    """Resolve a declared type name.

    Args:
    ----
        declared_type: Type as written in YAML (``BigDecimal``, ``List<Money>``,
            ``orderStatus``...).
        inline_enum_values: Enum values declared on the field itself.

    Returns:
    -------
        The resolved type. Unknown names become PascalCase user-defined
        types; they are never rejected here.

    """
    if inline_enum_values is not None:
        return UserDefinedType(to_pascal_case(declared_type), inline_enum=True)

    match = _LIST_TYPE.match(declared_type)
    if match:
        return CollectionType(element=_resolve_element(match.group(1)))

    if declared_type in SCALAR_TYPES:
        return KnownType(declared_type)

    return UserDefinedType(to_pascal_case(declared_type))


def _resolve_element(element: str) -> ResolvedType:
    # Collection types pass through unchanged, element names included
    match = _LIST_TYPE.match(element)
    if match:
        return CollectionType(element=_resolve_element(match.group(1)))
    if element in SCALAR_TYPES:
        return KnownType(element)
    return UserDefinedType(element)


def collection_element(resolved: ResolvedType) -> str | None:
    """Return the rendered element type of a collection, else None."""
    if isinstance(resolved, CollectionType):
        return resolved.element.render()
    return None


def persistence_type(
    resolved: ResolvedType,
    value_object_names: Iterable[str],
    suffix: str,
    force_value_object: bool = False,
) -> str:
    """Return the embeddable companion type for value-object typed fields.

    ``Money`` becomes ``MoneyJpa`` and ``List<Money>`` becomes
    ``List<MoneyJpa>`` when ``Money`` is a value object; any other type is
    returned as rendered.

    Args:
    ----
        resolved: The resolved field type.
        value_object_names: Value object names of the aggregate.
        suffix: Companion class suffix.
        force_value_object: The field was explicitly flagged as a value object.

    Returns:
    -------
        The companion type string.

    """
    names = set(value_object_names)

    if isinstance(resolved, CollectionType):
        element = resolved.element.render()
        if force_value_object or element in names:
            return f"{resolved.container}<{element}{suffix}>"
        return resolved.render()

    rendered = resolved.render()
    if force_value_object or rendered in names:
        return f"{rendered}{suffix}"
    return rendered
