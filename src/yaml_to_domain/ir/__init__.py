"""Intermediate Representation (IR) of a compiled domain description.

The IR is what template renderers consume:

1. Every type name is resolved (scalar, user-defined or collection)
2. Value objects and enums referenced by fields are flagged
3. Inverse relationships implied by ``mappedBy`` are present on their targets
4. Aggregate-root mutators are synthesized as structured statement lists
5. Uses frozen dataclasses, so equal inputs give equal trees
"""

from yaml_to_domain.ir.domain import (
    AUDIT_FIELD_NAMES,
    AggregateDescriptor,
    AuditConfig,
    DomainModel,
    EntityDescriptor,
    EnumDescriptor,
    FetchMode,
    FieldDescriptor,
    RelationshipDescriptor,
    RelationshipKind,
    TransitionEdge,
    TransitionMeta,
    ValueObjectDescriptor,
    ValueObjectMethod,
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
from yaml_to_domain.ir.types import (
    CollectionType,
    KnownType,
    ResolvedType,
    UserDefinedType,
)

__all__ = [
    # Types
    "CollectionType",
    "KnownType",
    "ResolvedType",
    "UserDefinedType",
    # Descriptors
    "AUDIT_FIELD_NAMES",
    "AggregateDescriptor",
    "AuditConfig",
    "DomainModel",
    "EntityDescriptor",
    "EnumDescriptor",
    "FetchMode",
    "FieldDescriptor",
    "RelationshipDescriptor",
    "RelationshipKind",
    "TransitionEdge",
    "TransitionMeta",
    "ValueObjectDescriptor",
    "ValueObjectMethod",
    # Methods
    "AppendToCollection",
    "AssignField",
    "ConstructEntity",
    "DelegateCall",
    "InvokeAssign",
    "MethodDescriptor",
    "MethodKind",
    "NestedParameterGroup",
    "ParameterDescriptor",
    "RemoveFromCollectionById",
    "ReturnUnmodifiableView",
    "Statement",
]
