"""IR models for synthesized aggregate-root methods.

Method bodies are small statement lists rather than source text, so the
renderer decides the concrete syntax. For an ``Order`` root owning
``OrderItem`` children, the factory ``addOrderItem`` body is::

    (ConstructEntity("entity", "OrderItem", ("productName", "quantity")),
     AppendToCollection("orderItems", "entity"))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MethodKind(Enum):
    """Role of a synthesized method on the aggregate root."""

    FACTORY_ADD = "factory_add"  # builds the child from scalar parameters
    ADD = "add"  # accepts a pre-built child
    REMOVE = "remove"
    GETTER = "getter"
    FACTORY_ASSIGN = "factory_assign"  # builds a one-to-one child
    ASSIGN = "assign"  # accepts a pre-built one-to-one child


@dataclass(frozen=True)
class ConstructEntity:
    """``Target variable = new Target(arguments...)``."""

    variable: str
    entity: str
    arguments: tuple[str, ...] = ()


@dataclass(frozen=True)
class InvokeAssign:
    """``receiver.method(argument)`` on a freshly built child."""

    receiver: str
    method: str
    argument: str


@dataclass(frozen=True)
class DelegateCall:
    """``this.method(argument)`` on the aggregate root itself."""

    method: str
    argument: str


@dataclass(frozen=True)
class AssignField:
    """``this.field = value``."""

    field: str
    value: str


@dataclass(frozen=True)
class AppendToCollection:
    """``this.collection.add(value)``."""

    collection: str
    value: str


@dataclass(frozen=True)
class RemoveFromCollectionById:
    """Remove the first element of ``collection`` whose id equals ``id_parameter``."""

    collection: str
    id_parameter: str


@dataclass(frozen=True)
class ReturnUnmodifiableView:
    """Return a read-only view of ``collection``, never the backing list."""

    collection: str


Statement = (
    ConstructEntity
    | InvokeAssign
    | DelegateCall
    | AssignField
    | AppendToCollection
    | RemoveFromCollectionById
    | ReturnUnmodifiableView
)


@dataclass(frozen=True)
class ParameterDescriptor:
    """A method parameter."""

    name: str
    type: str


@dataclass(frozen=True)
class NestedParameterGroup:
    """Flattened parameters of a one-to-one grandchild built inside an add method.

    Attributes
    ----------
        entity_name: Entity built from the group (e.g. ``ReturnRequest``).
        field_name: Relationship field on the child (e.g. ``returnRequest``).
        assign_method: Child method that attaches it (``assignReturnRequest``).
        parameters: Prefixed parameters (``returnRequestReason``, ...).

    """

    entity_name: str
    field_name: str
    assign_method: str
    parameters: tuple[ParameterDescriptor, ...]


@dataclass(frozen=True)
class MethodDescriptor:
    """A mutator or accessor synthesized on the aggregate root.

    Attributes
    ----------
        name: Method name (``addOrderItem``, ``getOrderItems``...).
        kind: Role of the method.
        return_type: Return type as written in generated source.
        parameters: Ordered parameters.
        body: Structured statements.
        relationship_field: Root field the method operates on.
        target_entity: Entity type held by that field.
        nested_groups: One-to-one grandchild groups (factory add only).
        is_overload: True when another method shares the name.

    """

    name: str
    kind: MethodKind
    return_type: str
    parameters: tuple[ParameterDescriptor, ...]
    body: tuple[Statement, ...]
    relationship_field: str
    target_entity: str
    nested_groups: tuple[NestedParameterGroup, ...] = ()
    is_overload: bool = False

    @property
    def is_factory(self) -> bool:
        """Whether the method builds the child from its parameters."""
        return self.kind in (MethodKind.FACTORY_ADD, MethodKind.FACTORY_ASSIGN)

