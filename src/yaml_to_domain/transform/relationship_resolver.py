"""Resolve declared relationships and synthesize their inverse sides.

Inverse synthesis is a two-stage pipeline:

1. :func:`collect_inverse_relationships` scans every entity of an
   aggregate and builds a read-only map from target entity name to the
   relationships implied by ``mappedBy`` declarations.
2. Entity resolution consumes that map through
   :func:`merge_relationships` without modifying it.

Running stage 1 over all entities first makes the result independent of
the order in which entities appear in the document.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from yaml_to_domain.config import DEFAULT_PERSISTENCE_SUFFIX
from yaml_to_domain.ir.domain import FetchMode, RelationshipDescriptor, RelationshipKind
from yaml_to_domain.models.entities import EntityDefinition
from yaml_to_domain.models.relationships import (
    FetchType,
    RelationshipDefinition,
    RelationshipType,
)
from yaml_to_domain.naming import pluralize, to_camel_case, to_pascal_case
from yaml_to_domain.validation.errors import ConfigurationError, ErrorCodes

RELATIONSHIP_TYPE_TO_KIND: dict[RelationshipType, RelationshipKind] = {
    RelationshipType.ONE_TO_MANY: RelationshipKind.ONE_TO_MANY,
    RelationshipType.MANY_TO_ONE: RelationshipKind.MANY_TO_ONE,
    RelationshipType.ONE_TO_ONE: RelationshipKind.ONE_TO_ONE,
    RelationshipType.MANY_TO_MANY: RelationshipKind.MANY_TO_MANY,
}

FETCH_TYPE_TO_MODE: dict[FetchType, FetchMode] = {
    FetchType.LAZY: FetchMode.LAZY,
    FetchType.EAGER: FetchMode.EAGER,
}

# Declared kind -> kind synthesized on the target. ManyToOne is already the
# owning scalar side and ManyToMany would need a join table.
INVERSE_KINDS: dict[RelationshipKind, RelationshipKind] = {
    RelationshipKind.ONE_TO_MANY: RelationshipKind.MANY_TO_ONE,
    RelationshipKind.ONE_TO_ONE: RelationshipKind.ONE_TO_ONE,
}

InverseRelationships = Mapping[str, tuple[RelationshipDescriptor, ...]]


def _relationship_types(
    kind: RelationshipKind,
    target: str,
    persistence_suffix: str,
) -> tuple[str, str]:
    if kind.is_collection:
        return f"List<{target}>", f"List<{target}{persistence_suffix}>"
    return target, f"{target}{persistence_suffix}"


def resolve_relationship(
    raw: RelationshipDefinition,
    owner_entity_name: str,
    persistence_suffix: str = DEFAULT_PERSISTENCE_SUFFIX,
) -> RelationshipDescriptor:
    """Resolve one declared relationship.

    Args:
    ----
        raw: The relationship as declared.
        owner_entity_name: Entity declaring it (used in error messages).
        persistence_suffix: Suffix of persistence companion types.

    Returns:
    -------
        The resolved relationship.

    Raises:
    ------
        ConfigurationError: If the relationship names no target.

    """
    if not raw.target:
        raise ConfigurationError.single(
            code=ErrorCodes.E003_MISSING_RELATIONSHIP_TARGET,
            message=(
                f"Relationship in entity '{owner_entity_name}' is missing "
                "'target' or 'targetEntity' field"
            ),
            path=f"entities.{owner_entity_name}.relationships",
            suggestion="Name the target entity with 'target: <EntityName>'",
        )

    kind = RELATIONSHIP_TYPE_TO_KIND[raw.type]
    target = to_pascal_case(raw.target)
    field_name = to_camel_case(pluralize(raw.target) if kind.is_to_many else raw.target)
    resolved_type, jpa_type = _relationship_types(kind, target, persistence_suffix)

    join_column = raw.join_column
    if join_column is None and raw.mapped_by:
        join_column = f"{raw.mapped_by}_id"

    return RelationshipDescriptor(
        kind=kind,
        target=target,
        field_name=field_name,
        resolved_type=resolved_type,
        persistence_type=jpa_type,
        mapped_by=raw.mapped_by,
        join_column_name=join_column,
        cascade_ops=tuple(raw.cascade),
        fetch_mode=FETCH_TYPE_TO_MODE[raw.fetch],
        is_inverse=False,
        is_collection=kind.is_collection,
    )


def collect_inverse_relationships(
    entities: Sequence[EntityDefinition],
    persistence_suffix: str = DEFAULT_PERSISTENCE_SUFFIX,
) -> InverseRelationships:
    """Collect the inverse sides implied by every ``mappedBy`` declaration.

    Args:
    ----
        entities: All entities of the aggregate, in any order.
        persistence_suffix: Suffix of persistence companion types.

    Returns:
    -------
        Read-only mapping of target entity name to synthesized relationships.

    """
    collected: dict[str, list[RelationshipDescriptor]] = {}

    for entity in entities:
        owner = to_pascal_case(entity.name)
        for rel in entity.relationships:
            if not rel.mapped_by or not rel.target:
                continue

            inverse_kind = INVERSE_KINDS.get(RELATIONSHIP_TYPE_TO_KIND[rel.type])
            if inverse_kind is None:
                continue

            resolved_type, jpa_type = _relationship_types(inverse_kind, owner, persistence_suffix)
            collected.setdefault(to_pascal_case(rel.target), []).append(
                RelationshipDescriptor(
                    kind=inverse_kind,
                    target=owner,
                    field_name=rel.mapped_by,
                    resolved_type=resolved_type,
                    persistence_type=jpa_type,
                    join_column_name=rel.join_column or f"{rel.mapped_by}_id",
                    fetch_mode=FETCH_TYPE_TO_MODE[rel.fetch],
                    is_inverse=True,
                    is_collection=False,
                )
            )

    return MappingProxyType({name: tuple(rels) for name, rels in collected.items()})


def merge_relationships(
    declared: Sequence[RelationshipDescriptor],
    inverse: Sequence[RelationshipDescriptor],
) -> tuple[RelationshipDescriptor, ...]:
    """Append inverse relationships whose field name is not declared explicitly.

    Args:
    ----
        declared: Relationships written on the entity.
        inverse: Relationships synthesized for the entity.

    Returns:
    -------
        Declared relationships followed by the surviving inverse ones.

    """
    declared_names = {rel.field_name for rel in declared}
    return (*declared, *(rel for rel in inverse if rel.field_name not in declared_names))
