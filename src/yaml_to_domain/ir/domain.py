"""IR models for entities, value objects, enums and relationships.

Every descriptor is built once during a compilation pass and never
mutated afterwards; sequences are tuples so whole trees compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yaml_to_domain.ir.methods import MethodDescriptor
    from yaml_to_domain.ir.types import ResolvedType

# Fields injected by audit configuration, in injection order
AUDIT_TIMESTAMP_FIELDS = ("createdAt", "updatedAt")
AUDIT_USER_FIELDS = ("createdBy", "updatedBy")
AUDIT_FIELD_NAMES = frozenset(AUDIT_TIMESTAMP_FIELDS + AUDIT_USER_FIELDS)

ID_FIELD_NAME = "id"


class RelationshipKind(Enum):
    """Relationship cardinality."""

    ONE_TO_MANY = "OneToMany"
    MANY_TO_ONE = "ManyToOne"
    ONE_TO_ONE = "OneToOne"
    MANY_TO_MANY = "ManyToMany"

    @property
    def is_to_many(self) -> bool:
        """Whether the owning side names its field in the plural."""
        return self in (RelationshipKind.ONE_TO_MANY, RelationshipKind.MANY_TO_MANY)

    @property
    def is_collection(self) -> bool:
        """Whether the owning side holds a collection."""
        return self.is_to_many


class FetchMode(Enum):
    """Relationship fetch strategy."""

    LAZY = "LAZY"
    EAGER = "EAGER"


@dataclass(frozen=True)
class AuditConfig:
    """Audit configuration of an entity."""

    enabled: bool = False
    track_user: bool = False


@dataclass(frozen=True)
class TransitionEdge:
    """One state machine edge; several sources may share a target."""

    from_states: tuple[str, ...]
    to: str


@dataclass(frozen=True)
class EnumDescriptor:
    """An enum, either aggregate-scoped or declared inline on a field.

    Attributes
    ----------
        name: PascalCase enum name.
        values: Ordered, unique constants.
        transitions: State machine edges, None when not a state machine.
        initial_value: Start state.

    """

    name: str
    values: tuple[str, ...]
    transitions: tuple[TransitionEdge, ...] | None = None
    initial_value: str | None = None

    @property
    def has_transitions(self) -> bool:
        """Whether the enum declares at least one transition."""
        return bool(self.transitions)


@dataclass(frozen=True)
class TransitionMeta:
    """State machine data attached to a field typed with a transition enum.

    Attributes
    ----------
        transitions: Declared edges.
        initial_value: Start state, if any.
        transition_map: (state, allowed targets) pairs in value order;
            terminal states have no targets.
        enum_values: Every constant of the enum.

    """

    transitions: tuple[TransitionEdge, ...]
    initial_value: str | None
    transition_map: tuple[tuple[str, tuple[str, ...]], ...]
    enum_values: tuple[str, ...]

    def allowed_targets(self, state: str) -> tuple[str, ...]:
        """Return the states reachable from ``state``."""
        return dict(self.transition_map).get(state, ())


@dataclass(frozen=True)
class FieldDescriptor:
    """A fully resolved field.

    Attributes
    ----------
        name: camelCase field name.
        original_name: Name as declared.
        declared_type: Type as declared.
        type_ref: Structured resolved type.
        resolved_type: Rendered resolved type (``BigDecimal``, ``List<Money>``).
        persistence_type: Embeddable companion type for value objects
            (``MoneyJpa``, ``List<MoneyJpa>``), else the resolved type.
        is_collection: True for ``List<...>`` types.
        collection_element_type: Rendered element type of a collection.
        is_value_object: Resolved (element) type names a value object.
        is_embedded: Declared ``isEmbedded``.
        is_enum: Inline enum values or resolved type names a known enum.
        read_only: Declared read-only or seeded from an enum initial value.
        hidden: Excluded from response projections.
        validation_annotations: Rendered constraint annotations.
        annotations: Raw annotations, passed through.
        column_annotation: The raw ``@Column(...)`` annotation, if any.
        transition_meta: Present when the enum type declares transitions.
        auto_init: True when initialised from the enum initial value.
        auto_init_value: That initial value.
        is_synthetic: Injected by audit configuration.

    """

    name: str
    original_name: str
    declared_type: str
    type_ref: ResolvedType
    resolved_type: str
    persistence_type: str
    is_collection: bool = False
    collection_element_type: str | None = None
    is_value_object: bool = False
    is_embedded: bool = False
    is_enum: bool = False
    read_only: bool = False
    hidden: bool = False
    validation_annotations: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()
    column_annotation: str | None = None
    transition_meta: TransitionMeta | None = None
    auto_init: bool = False
    auto_init_value: str | None = None
    is_synthetic: bool = False

    @property
    def element_type(self) -> str:
        """Return the collection element type or the resolved type."""
        return self.collection_element_type or self.resolved_type


@dataclass(frozen=True)
class RelationshipDescriptor:
    """A declared or synthesized relationship.

    Attributes
    ----------
        kind: Cardinality.
        target: PascalCase target entity.
        field_name: camelCase field, plural for to-many kinds.
        mapped_by: Back-reference field on the target.
        join_column_name: Explicit, or ``{mapped_by}_id``.
        cascade_ops: Cascade operations.
        fetch_mode: Fetch strategy.
        is_inverse: Synthesized from another entity's ``mappedBy``.
        is_collection: True for OneToMany and ManyToMany.
        resolved_type: ``Target`` or ``List<Target>``.
        persistence_type: ``TargetJpa`` or ``List<TargetJpa>``.

    """

    kind: RelationshipKind
    target: str
    field_name: str
    resolved_type: str
    persistence_type: str
    mapped_by: str | None = None
    join_column_name: str | None = None
    cascade_ops: tuple[str, ...] = ()
    fetch_mode: FetchMode = FetchMode.LAZY
    is_inverse: bool = False
    is_collection: bool = False


def _is_input_field(f: FieldDescriptor) -> bool:
    return f.name != ID_FIELD_NAME and not f.is_synthetic and f.name not in AUDIT_FIELD_NAMES


@dataclass(frozen=True)
class EntityDescriptor:
    """A fully resolved entity.

    Attributes
    ----------
        name: PascalCase class name.
        field_name: camelCase form of the name.
        table_name: Explicit, or snake_case of the pluralized name.
        is_root: Aggregate root flag.
        audit: Effective audit configuration.
        auditable: The deprecated ``auditable`` flag was set.
        fields: Declared fields followed by audit fields.
        relationships: Declared relationships followed by surviving inverse ones.
        enums: Inline enums declared on this entity's fields.
        required_imports: Sorted, de-duplicated import identifiers.
        validation_imports: Constraint import for input projections.

    """

    name: str
    field_name: str
    table_name: str
    is_root: bool
    audit: AuditConfig
    fields: tuple[FieldDescriptor, ...]
    relationships: tuple[RelationshipDescriptor, ...]
    enums: tuple[EnumDescriptor, ...] = ()
    required_imports: tuple[str, ...] = ()
    validation_imports: tuple[str, ...] = ()
    auditable: bool = False

    @property
    def declared_fields(self) -> tuple[FieldDescriptor, ...]:
        """Fields written in the YAML, without audit fields."""
        return tuple(f for f in self.fields if not f.is_synthetic)

    @property
    def command_fields(self) -> tuple[FieldDescriptor, ...]:
        """Fields accepted by create/update commands (no id, no audit fields)."""
        return tuple(f for f in self.fields if _is_input_field(f))

    @property
    def constructor_fields(self) -> tuple[FieldDescriptor, ...]:
        """Parameters of the creation constructor (command fields minus read-only)."""
        return tuple(f for f in self.command_fields if not f.read_only)

    @property
    def response_fields(self) -> tuple[FieldDescriptor, ...]:
        """Fields exposed in responses."""
        return tuple(f for f in self.fields if not f.hidden)

    @property
    def id_field(self) -> FieldDescriptor | None:
        """The declared ``id`` field, if any."""
        return next((f for f in self.fields if f.name == ID_FIELD_NAME), None)

    def relationship(self, field_name: str) -> RelationshipDescriptor | None:
        """Look up a relationship by field name."""
        return next((r for r in self.relationships if r.field_name == field_name), None)


@dataclass(frozen=True)
class ValueObjectMethod:
    """A hand-written value object method, passed through opaquely."""

    name: str
    return_type: str
    parameters: tuple[object, ...] = ()
    body: str = ""


@dataclass(frozen=True)
class ValueObjectDescriptor:
    """An immutable composite value without identity."""

    name: str
    fields: tuple[FieldDescriptor, ...]
    methods: tuple[ValueObjectMethod, ...] = ()
    validation: tuple[object, ...] = ()
    enums: tuple[EnumDescriptor, ...] = ()
    required_imports: tuple[str, ...] = ()


@dataclass(frozen=True)
class AggregateDescriptor:
    """A resolved aggregate.

    Attributes
    ----------
        name: PascalCase aggregate name.
        root_entity: The single root entity.
        secondary_entities: Non-root entities, in declaration order.
        value_objects: Value objects, in declaration order.
        enums: Aggregate-scoped enums.
        aggregate_methods: Methods synthesized on the root.
        all_entities: Every entity, in declaration order.
        package: Optional package override, passed through.

    """

    name: str
    root_entity: EntityDescriptor
    secondary_entities: tuple[EntityDescriptor, ...]
    value_objects: tuple[ValueObjectDescriptor, ...]
    enums: tuple[EnumDescriptor, ...]
    aggregate_methods: tuple[MethodDescriptor, ...]
    all_entities: tuple[EntityDescriptor, ...]
    package: str | None = None

    def entity(self, name: str) -> EntityDescriptor | None:
        """Look up an entity by class name."""
        return next((e for e in self.all_entities if e.name == name), None)

    def value_object(self, name: str) -> ValueObjectDescriptor | None:
        """Look up a value object by class name."""
        return next((v for v in self.value_objects if v.name == name), None)


@dataclass(frozen=True)
class DomainModel:
    """Result of compiling one document.

    Attributes
    ----------
        aggregates: Resolved aggregates, in declaration order.
        all_enums: Document-wide enum registry, first declaration wins.
        package_name: Package used for enum imports.
        module_name: Module used for enum imports.

    """

    aggregates: tuple[AggregateDescriptor, ...]
    all_enums: tuple[EnumDescriptor, ...] = field(default_factory=tuple)
    package_name: str = ""
    module_name: str = ""

    def aggregate(self, name: str) -> AggregateDescriptor | None:
        """Look up an aggregate by name."""
        return next((a for a in self.aggregates if a.name == name), None)

    def enum(self, name: str) -> EnumDescriptor | None:
        """Look up an enum of the registry by name."""
        return next((e for e in self.all_enums if e.name == name), None)
