"""Generate aggregate-root methods from the relationship graph.

The aggregate root is the single mutation entry point of its aggregate, so
every child collection and one-to-one child gets mutators on the root:

- ``add<Child>(scalar fields...)`` builds the child (and its one-to-one
  grandchildren) and appends it
- ``add<Child>(Child)`` appends a pre-built child
- ``remove<Child>(id)`` removes the first child with that id
- ``get<Children>()`` returns an unmodifiable view of the collection
- ``assign<Child>(scalar fields...)`` / ``assign<Child>(Child)`` for
  ``mappedBy`` one-to-one relationships
"""

from __future__ import annotations

from collections.abc import Sequence

from yaml_to_domain.ir.domain import (
    EntityDescriptor,
    RelationshipDescriptor,
    RelationshipKind,
)
from yaml_to_domain.ir.methods import (
    AppendToCollection,
    AssignField,
    ConstructEntity,
    DelegateCall,
    InvokeAssign,
    MethodDescriptor,
    MethodKind,
    NestedParameterGroup,
    ParameterDescriptor,
    RemoveFromCollectionById,
    ReturnUnmodifiableView,
    Statement,
)
from yaml_to_domain.naming import singularize, to_camel_case, to_pascal_case

DEFAULT_ID_TYPE = "Long"
ENTITY_VARIABLE = "entity"


def _find_entity(entities: Sequence[EntityDescriptor], name: str) -> EntityDescriptor | None:
    return next((e for e in entities if e.name == name), None)


def constructor_parameters(
    entity: EntityDescriptor,
    prefix: str = "",
) -> tuple[ParameterDescriptor, ...]:
    """Return the creation parameters of an entity.

    Ids, audit fields and read-only fields are never parameters. With a
    ``prefix`` the names become ``prefix + PascalName``
    (``returnRequest`` + ``reason`` -> ``returnRequestReason``).
    """
    return tuple(
        ParameterDescriptor(
            name=f"{prefix}{to_pascal_case(f.name)}" if prefix else f.name,
            type=f.resolved_type,
        )
        for f in entity.constructor_fields
    )


def _nested_groups(
    child: EntityDescriptor,
    secondary_entities: Sequence[EntityDescriptor],
) -> tuple[NestedParameterGroup, ...]:
    groups: list[NestedParameterGroup] = []
    for rel in child.relationships:
        if rel.is_inverse or rel.kind != RelationshipKind.ONE_TO_ONE:
            continue
        grandchild = _find_entity(secondary_entities, rel.target)
        if grandchild is None:
            continue
        groups.append(
            NestedParameterGroup(
                entity_name=rel.target,
                field_name=rel.field_name,
                assign_method=f"assign{to_pascal_case(rel.field_name)}",
                parameters=constructor_parameters(grandchild, prefix=to_camel_case(rel.field_name)),
            )
        )
    return tuple(groups)


def generate_collection_methods(
    rel: RelationshipDescriptor,
    secondary_entities: Sequence[EntityDescriptor],
) -> list[MethodDescriptor]:
    """Generate add/remove/get methods for a one-to-many relationship of the root.

    Args:
    ----
        rel: A OneToMany relationship of the root entity.
        secondary_entities: Non-root entities of the aggregate.

    Returns:
    -------
        Methods in the order factory add, add, remove, getter. The factory
        add is omitted when the target is not an entity of the aggregate.

    """
    singular = singularize(rel.field_name)
    add_name = f"add{to_pascal_case(singular)}"
    item_param = to_camel_case(singular)
    child = _find_entity(secondary_entities, rel.target)

    methods: list[MethodDescriptor] = []

    if child is not None:
        parameters = constructor_parameters(child)
        groups = _nested_groups(child, secondary_entities)

        body: list[Statement] = [
            ConstructEntity(ENTITY_VARIABLE, rel.target, tuple(p.name for p in parameters))
        ]
        for group in groups:
            variable = to_camel_case(group.field_name)
            arguments = tuple(p.name for p in group.parameters)
            body.append(ConstructEntity(variable, group.entity_name, arguments))
            body.append(InvokeAssign(ENTITY_VARIABLE, group.assign_method, variable))
        body.append(AppendToCollection(rel.field_name, ENTITY_VARIABLE))

        methods.append(
            MethodDescriptor(
                name=add_name,
                kind=MethodKind.FACTORY_ADD,
                return_type="void",
                parameters=(*parameters, *(p for g in groups for p in g.parameters)),
                body=tuple(body),
                relationship_field=rel.field_name,
                target_entity=rel.target,
                nested_groups=groups,
            )
        )

    methods.append(
        MethodDescriptor(
            name=add_name,
            kind=MethodKind.ADD,
            return_type="void",
            parameters=(ParameterDescriptor(item_param, rel.target),),
            body=(AppendToCollection(rel.field_name, item_param),),
            relationship_field=rel.field_name,
            target_entity=rel.target,
            is_overload=child is not None,
        )
    )

    id_field = child.id_field if child is not None else None
    methods.append(
        MethodDescriptor(
            name=f"remove{to_pascal_case(singular)}",
            kind=MethodKind.REMOVE,
            return_type="void",
            parameters=(
                ParameterDescriptor("id", id_field.resolved_type if id_field else DEFAULT_ID_TYPE),
            ),
            body=(RemoveFromCollectionById(rel.field_name, "id"),),
            relationship_field=rel.field_name,
            target_entity=rel.target,
        )
    )

    methods.append(
        MethodDescriptor(
            name=f"get{to_pascal_case(rel.field_name)}",
            kind=MethodKind.GETTER,
            return_type=f"List<{rel.target}>",
            parameters=(),
            body=(ReturnUnmodifiableView(rel.field_name),),
            relationship_field=rel.field_name,
            target_entity=rel.target,
        )
    )

    return methods


def generate_assign_methods(
    rel: RelationshipDescriptor,
    secondary_entities: Sequence[EntityDescriptor],
) -> list[MethodDescriptor]:
    """Generate assign methods for a ``mappedBy`` one-to-one relationship of the root.

    Args:
    ----
        rel: A OneToOne relationship of the root entity declaring ``mappedBy``.
        secondary_entities: Non-root entities of the aggregate.

    Returns:
    -------
        The factory assign (when the target is an entity of the aggregate)
        followed by the plain assign it delegates to.

    """
    assign_name = f"assign{to_pascal_case(rel.field_name)}"
    child = _find_entity(secondary_entities, rel.target)

    methods: list[MethodDescriptor] = []

    if child is not None:
        parameters = constructor_parameters(child)
        methods.append(
            MethodDescriptor(
                name=assign_name,
                kind=MethodKind.FACTORY_ASSIGN,
                return_type="void",
                parameters=parameters,
                body=(
                    ConstructEntity(ENTITY_VARIABLE, rel.target, tuple(p.name for p in parameters)),
                    DelegateCall(assign_name, ENTITY_VARIABLE),
                ),
                relationship_field=rel.field_name,
                target_entity=rel.target,
                is_overload=True,
            )
        )

    methods.append(
        MethodDescriptor(
            name=assign_name,
            kind=MethodKind.ASSIGN,
            return_type="void",
            parameters=(ParameterDescriptor(rel.field_name, rel.target),),
            body=(AssignField(rel.field_name, rel.field_name),),
            relationship_field=rel.field_name,
            target_entity=rel.target,
            is_overload=child is not None,
        )
    )

    return methods


def generate_aggregate_methods(
    root: EntityDescriptor,
    secondary_entities: Sequence[EntityDescriptor],
) -> tuple[MethodDescriptor, ...]:
    """Generate every synthesized method of an aggregate root.

    Args:
    ----
        root: The resolved root entity.
        secondary_entities: Non-root entities of the aggregate.

    Returns:
    -------
        Collection methods for each OneToMany relationship, then assign
        methods for each ``mappedBy`` OneToOne relationship.

    """
    methods: list[MethodDescriptor] = []

    for rel in root.relationships:
        if rel.kind == RelationshipKind.ONE_TO_MANY:
            methods.extend(generate_collection_methods(rel, secondary_entities))

    for rel in root.relationships:
        if rel.kind == RelationshipKind.ONE_TO_ONE and rel.mapped_by:
            methods.extend(generate_assign_methods(rel, secondary_entities))

    return tuple(methods)
