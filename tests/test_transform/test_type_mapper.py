"""Tests for declared type resolution."""

import pytest
from yaml_to_domain.ir.types import CollectionType, KnownType, UserDefinedType
from yaml_to_domain.transform.type_mapper import (
    SCALAR_TYPES,
    collection_element,
    persistence_type,
    resolve_type,
)


class TestResolveType:
    """Tests for resolve_type."""

    @pytest.mark.parametrize("scalar", sorted(SCALAR_TYPES))
    def test_scalars_map_to_themselves(self, scalar: str) -> None:
        """Should keep every built-in scalar."""
        assert resolve_type(scalar) == KnownType(scalar)

    def test_unknown_name_becomes_user_defined(self) -> None:
        """Should PascalCase unknown names without failing."""
        assert resolve_type("orderStatus") == UserDefinedType("OrderStatus")
        assert resolve_type("shipping_address") == UserDefinedType("ShippingAddress")

    def test_inline_enum(self) -> None:
        """Should name an inline enum after the PascalCase declared type."""
        resolved = resolve_type("category", ["BOOKS", "MUSIC"])

        assert resolved == UserDefinedType("Category", inline_enum=True)
        assert resolved.render() == "Category"

    def test_inline_enum_wins_over_scalar_name(self) -> None:
        """Should treat enum values as authoritative even for a scalar name."""
        assert resolve_type("String", ["A"]) == UserDefinedType("String", inline_enum=True)

    def test_list_of_value_objects(self) -> None:
        """Should flag List<X> as a collection of X."""
        resolved = resolve_type("List<Money>")

        assert resolved == CollectionType(UserDefinedType("Money"))
        assert resolved.render() == "List<Money>"

    def test_list_of_scalars(self) -> None:
        """Should resolve scalar elements as known types."""
        assert resolve_type("List<LocalDateTime>") == CollectionType(KnownType("LocalDateTime"))

    def test_list_passes_through_unchanged(self) -> None:
        """Should not PascalCase collection elements."""
        assert resolve_type("List<money>").render() == "List<money>"

    def test_non_list_generic_is_user_defined(self) -> None:
        """Should only recognise List<...> as a collection."""
        assert isinstance(resolve_type("Set<Money>"), UserDefinedType)


class TestCollectionElement:
    """Tests for collection_element."""

    def test_collection(self) -> None:
        """Should return the rendered element type."""
        assert collection_element(resolve_type("List<Money>")) == "Money"

    def test_scalar(self) -> None:
        """Should return None for non-collections."""
        assert collection_element(resolve_type("String")) is None


class TestPersistenceType:
    """Tests for persistence_type."""

    def test_value_object(self) -> None:
        """Should suffix value object types."""
        assert persistence_type(resolve_type("Money"), ["Money"], "Jpa") == "MoneyJpa"

    def test_value_object_collection(self) -> None:
        """Should suffix value object elements."""
        assert persistence_type(resolve_type("List<Money>"), ["Money"], "Jpa") == "List<MoneyJpa>"

    def test_other_types_unchanged(self) -> None:
        """Should return scalars and unknown names as rendered."""
        assert persistence_type(resolve_type("String"), ["Money"], "Jpa") == "String"
        assert persistence_type(resolve_type("Address"), ["Money"], "Jpa") == "Address"

    def test_forced_value_object(self) -> None:
        """Should suffix explicitly flagged value objects."""
        resolved = resolve_type("Address")
        assert persistence_type(resolved, [], "Embeddable", force_value_object=True) == (
            "AddressEmbeddable"
        )
