"""Tests for domain descriptor IR."""

from __future__ import annotations

import dataclasses

import pytest
from yaml_to_domain.ir import (
    AuditConfig,
    EntityDescriptor,
    FieldDescriptor,
    KnownType,
    MethodDescriptor,
    MethodKind,
    RelationshipDescriptor,
    RelationshipKind,
)


def make_field(name: str, type_name: str = "String", **kwargs: object) -> FieldDescriptor:
    """Build a scalar field descriptor."""
    return FieldDescriptor(
        name=name,
        original_name=name,
        declared_type=type_name,
        type_ref=KnownType(type_name),
        resolved_type=type_name,
        persistence_type=type_name,
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.fixture
def entity() -> EntityDescriptor:
    """Return an entity with id, regular, read-only, hidden and audit fields."""
    return EntityDescriptor(
        name="User",
        field_name="user",
        table_name="users",
        is_root=True,
        audit=AuditConfig(enabled=True),
        fields=(
            make_field("id", "Long"),
            make_field("email"),
            make_field("status", read_only=True),
            make_field("passwordHash", hidden=True),
            make_field("createdAt", "LocalDateTime", is_synthetic=True),
            make_field("updatedAt", "LocalDateTime", is_synthetic=True),
        ),
        relationships=(
            RelationshipDescriptor(
                kind=RelationshipKind.ONE_TO_MANY,
                target="Address",
                field_name="addresses",
                resolved_type="List<Address>",
                persistence_type="List<AddressJpa>",
                is_collection=True,
            ),
        ),
    )


class TestRelationshipKind:
    """Tests for RelationshipKind."""

    @pytest.mark.parametrize(
        ("kind", "to_many"),
        [
            (RelationshipKind.ONE_TO_MANY, True),
            (RelationshipKind.MANY_TO_MANY, True),
            (RelationshipKind.MANY_TO_ONE, False),
            (RelationshipKind.ONE_TO_ONE, False),
        ],
    )
    def test_is_to_many(self, kind: RelationshipKind, to_many: bool) -> None:
        """Only OneToMany and ManyToMany hold collections."""
        assert kind.is_to_many is to_many
        assert kind.is_collection is to_many


class TestEntityDescriptor:
    """Tests for EntityDescriptor projections."""

    def test_declared_fields(self, entity: EntityDescriptor) -> None:
        """Should drop synthetic audit fields."""
        assert [f.name for f in entity.declared_fields] == [
            "id",
            "email",
            "status",
            "passwordHash",
        ]

    def test_command_fields(self, entity: EntityDescriptor) -> None:
        """Should drop id and audit fields."""
        assert [f.name for f in entity.command_fields] == ["email", "status", "passwordHash"]

    def test_constructor_fields(self, entity: EntityDescriptor) -> None:
        """Should also drop read-only fields."""
        assert [f.name for f in entity.constructor_fields] == ["email", "passwordHash"]

    def test_response_fields(self, entity: EntityDescriptor) -> None:
        """Should drop hidden fields only."""
        names = [f.name for f in entity.response_fields]

        assert "passwordHash" not in names
        assert "createdAt" in names

    def test_id_field(self, entity: EntityDescriptor) -> None:
        """Should find the id field."""
        assert entity.id_field is not None
        assert entity.id_field.resolved_type == "Long"

    def test_relationship_lookup(self, entity: EntityDescriptor) -> None:
        """Should look relationships up by field name."""
        rel = entity.relationship("addresses")

        assert rel is not None
        assert rel.target == "Address"
        assert entity.relationship("missing") is None

    def test_frozen(self, entity: EntityDescriptor) -> None:
        """Should reject mutation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            entity.name = "Other"  # type: ignore[misc]


class TestMethodDescriptor:
    """Tests for MethodDescriptor."""

    @pytest.mark.parametrize(
        ("kind", "factory"),
        [
            (MethodKind.FACTORY_ADD, True),
            (MethodKind.FACTORY_ASSIGN, True),
            (MethodKind.ADD, False),
            (MethodKind.GETTER, False),
        ],
    )
    def test_is_factory(self, kind: MethodKind, factory: bool) -> None:
        """Only factory kinds build the child."""
        method = MethodDescriptor(
            name="m",
            kind=kind,
            return_type="void",
            parameters=(),
            body=(),
            relationship_field="items",
            target_entity="Item",
        )
        assert method.is_factory is factory
