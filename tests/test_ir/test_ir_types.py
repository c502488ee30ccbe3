"""Tests for resolved type IR."""

import dataclasses

import pytest
from yaml_to_domain.ir.types import CollectionType, KnownType, UserDefinedType, element_of


class TestResolvedTypes:
    """Tests for KnownType, UserDefinedType and CollectionType."""

    def test_render_known(self) -> None:
        """Should render scalars as their name."""
        assert KnownType("BigDecimal").render() == "BigDecimal"

    def test_render_user_defined(self) -> None:
        """Should render user types as their name."""
        assert UserDefinedType("Money").render() == "Money"

    def test_render_collection(self) -> None:
        """Should render collections with their container."""
        assert CollectionType(UserDefinedType("Money")).render() == "List<Money>"

    def test_render_nested_collection(self) -> None:
        """Should render nested collections recursively."""
        nested = CollectionType(CollectionType(KnownType("String")))
        assert nested.render() == "List<List<String>>"

    def test_element_of(self) -> None:
        """Should unwrap one collection level only."""
        money = UserDefinedType("Money")

        assert element_of(CollectionType(money)) == money
        assert element_of(money) == money

    def test_equality(self) -> None:
        """Should compare by value."""
        assert CollectionType(KnownType("Long")) == CollectionType(KnownType("Long"))
        assert UserDefinedType("Status") != UserDefinedType("Status", inline_enum=True)

    def test_frozen(self) -> None:
        """Should reject mutation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            KnownType("Long").name = "Integer"  # type: ignore[misc]
