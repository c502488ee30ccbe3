"""Compute the import identifiers required by generated sources."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from yaml_to_domain.config import CompilerOptions
from yaml_to_domain.ir.domain import EnumDescriptor, FieldDescriptor, RelationshipDescriptor
from yaml_to_domain.ir.methods import MethodDescriptor

# Simple type name -> fully-qualified import; matched anywhere in a type string
TYPE_IMPORTS: dict[str, str] = {
    "BigDecimal": "java.math.BigDecimal",
    "LocalDate": "java.time.LocalDate",
    "LocalDateTime": "java.time.LocalDateTime",
    "LocalTime": "java.time.LocalTime",
    "Instant": "java.time.Instant",
    "UUID": "java.util.UUID",
}

LIST_IMPORT = "java.util.List"
ARRAY_LIST_IMPORT = "java.util.ArrayList"
COLLECTIONS_IMPORT = "java.util.Collections"
VALIDATION_IMPORT = "jakarta.validation.constraints.*"

_TYPE_PATTERNS = {name: re.compile(rf"\b{re.escape(name)}\b") for name in TYPE_IMPORTS}
_LIST_WRAPPER = re.compile(r"^List<(.+)>$")


def type_imports(type_string: str) -> set[str]:
    """Return the imports triggered by the simple names inside a type string."""
    return {
        TYPE_IMPORTS[name]
        for name, pattern in _TYPE_PATTERNS.items()
        if pattern.search(type_string)
    }


def _enum_imports(
    type_strings: Iterable[str],
    enums: Sequence[EnumDescriptor],
    options: CompilerOptions,
) -> set[str]:
    if not options.qualifies_enums or not enums:
        return set()

    enum_names = {e.name for e in enums}
    imports: set[str] = set()
    for type_string in type_strings:
        match = _LIST_WRAPPER.match(type_string)
        base = match.group(1) if match else type_string
        if base in enum_names:
            imports.add(options.enum_import(base))
    return imports


def resolve_entity_imports(
    fields: Sequence[FieldDescriptor],
    relationships: Sequence[RelationshipDescriptor],
    enums: Sequence[EnumDescriptor],
    options: CompilerOptions,
) -> tuple[str, ...]:
    """Return the sorted imports of an entity.

    Args:
    ----
        fields: Resolved fields, audit fields included.
        relationships: Resolved relationships.
        enums: Every enum visible to the entity (entity- and aggregate-scoped).
        options: Compiler options used to qualify enum imports.

    Returns:
    -------
        De-duplicated, alphabetically sorted import identifiers.

    """
    imports: set[str] = set()

    for f in fields:
        imports |= type_imports(f.resolved_type)

    imports |= _enum_imports((f.resolved_type for f in fields), enums, options)

    if any(f.is_collection for f in fields) or any(r.is_collection for r in relationships):
        imports |= {LIST_IMPORT, ARRAY_LIST_IMPORT, COLLECTIONS_IMPORT}

    return tuple(sorted(imports))


def resolve_value_object_imports(
    fields: Sequence[FieldDescriptor],
    enums: Sequence[EnumDescriptor],
    options: CompilerOptions,
) -> tuple[str, ...]:
    """Return the sorted imports of a value object."""
    imports: set[str] = set()

    for f in fields:
        imports |= type_imports(f.resolved_type)

    imports |= _enum_imports((f.resolved_type for f in fields), enums, options)

    if any(f.is_collection for f in fields):
        imports |= {LIST_IMPORT, ARRAY_LIST_IMPORT}

    return tuple(sorted(imports))


def resolve_method_imports(
    methods: Sequence[MethodDescriptor],
    enums: Sequence[EnumDescriptor],
    options: CompilerOptions,
) -> tuple[str, ...]:
    """Return the imports needed by the parameters of synthesized methods."""
    parameter_types = [p.type for method in methods for p in method.parameters]

    imports: set[str] = set()
    for type_string in parameter_types:
        imports |= type_imports(type_string)
    imports |= _enum_imports(parameter_types, enums, options)

    return tuple(sorted(imports))


def resolve_validation_imports(fields: Sequence[FieldDescriptor]) -> tuple[str, ...]:
    """Return the constraint wildcard import if any field carries a constraint."""
    if any(f.validation_annotations for f in fields):
        return (VALIDATION_IMPORT,)
    return ()
