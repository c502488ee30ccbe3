"""Tests for import computation."""

from __future__ import annotations

import pytest
from yaml_to_domain.config import CompilerOptions
from yaml_to_domain.ir.domain import EnumDescriptor, FieldDescriptor
from yaml_to_domain.ir.methods import MethodDescriptor, MethodKind, ParameterDescriptor
from yaml_to_domain.models.fields import FieldDefinition
from yaml_to_domain.transform.imports import (
    resolve_entity_imports,
    resolve_method_imports,
    resolve_validation_imports,
    type_imports,
)
from yaml_to_domain.transform.property_resolver import resolve_field

STATUS = EnumDescriptor("OrderStatus", ("NEW", "DONE"))
SALES = CompilerOptions(package_name="com.acme", module_name="sales")


def fields(*declarations: tuple[str, str]) -> list[FieldDescriptor]:
    """Resolve (name, type) pairs into field descriptors."""
    return [resolve_field(FieldDefinition(name=n, type=t)) for n, t in declarations]


class TestTypeImports:
    """Tests for type_imports."""

    @pytest.mark.parametrize(
        ("type_string", "expected"),
        [
            ("BigDecimal", {"java.math.BigDecimal"}),
            ("LocalDate", {"java.time.LocalDate"}),
            ("LocalDateTime", {"java.time.LocalDateTime"}),
            ("List<LocalDateTime>", {"java.time.LocalDateTime"}),
            ("UUID", {"java.util.UUID"}),
            ("String", set()),
            ("Money", set()),
        ],
    )
    def test_matches(self, type_string: str, expected: set[str]) -> None:
        """Should match whole simple names only."""
        assert type_imports(type_string) == expected

    def test_no_prefix_match(self) -> None:
        """Should not import LocalDate for LocalDateTime."""
        assert "java.time.LocalDate" not in type_imports("LocalDateTime")

    def test_no_match_inside_user_type(self) -> None:
        """Should ignore names embedded in longer identifiers."""
        assert type_imports("BigDecimalRange") == set()


class TestResolveEntityImports:
    """Tests for resolve_entity_imports."""

    def test_sorted_and_unique(self) -> None:
        """Should de-duplicate and sort."""
        imports = resolve_entity_imports(
            fields(("placedAt", "LocalDateTime"), ("total", "BigDecimal"), ("at", "LocalDateTime")),
            (),
            (),
            CompilerOptions(),
        )
        assert imports == ("java.math.BigDecimal", "java.time.LocalDateTime")

    def test_collection_field_triple(self) -> None:
        """Should import List, ArrayList and Collections for collection fields."""
        imports = resolve_entity_imports(
            fields(("tags", "List<String>")),
            (),
            (),
            CompilerOptions(),
        )
        assert imports == ("java.util.ArrayList", "java.util.Collections", "java.util.List")

    def test_enum_import_requires_package_and_module(self) -> None:
        """Should only qualify enums with both names set."""
        status = fields(("status", "OrderStatus"))

        assert resolve_entity_imports(status, (), (STATUS,), CompilerOptions()) == ()
        assert (
            resolve_entity_imports(
                status, (), (STATUS,), CompilerOptions(package_name="com.acme")
            )
            == ()
        )
        assert resolve_entity_imports(status, (), (STATUS,), SALES) == (
            "com.acme.sales.domain.models.enums.OrderStatus",
        )

    def test_enum_collection(self) -> None:
        """Should import the element enum of a collection."""
        imports = resolve_entity_imports(
            fields(("history", "List<OrderStatus>")),
            (),
            (STATUS,),
            SALES,
        )
        assert "com.acme.sales.domain.models.enums.OrderStatus" in imports

    def test_unknown_type_has_no_import(self) -> None:
        """Should not import user types that are not enums."""
        assert resolve_entity_imports(fields(("total", "Money")), (), (STATUS,), SALES) == ()


class TestResolveMethodImports:
    """Tests for resolve_method_imports."""

    def test_parameter_types(self) -> None:
        """Should import the types used by method parameters."""
        method = MethodDescriptor(
            name="addLine",
            kind=MethodKind.FACTORY_ADD,
            return_type="void",
            parameters=(
                ParameterDescriptor("price", "BigDecimal"),
                ParameterDescriptor("status", "OrderStatus"),
            ),
            body=(),
            relationship_field="lines",
            target_entity="Line",
        )

        assert resolve_method_imports((method,), (STATUS,), SALES) == (
            "com.acme.sales.domain.models.enums.OrderStatus",
            "java.math.BigDecimal",
        )


class TestResolveValidationImports:
    """Tests for resolve_validation_imports."""

    def test_constrained_field(self) -> None:
        """Should return the wildcard constraint import."""
        constrained = resolve_field(
            FieldDefinition.model_validate(
                {"name": "email", "type": "String", "validations": [{"type": "Email"}]}
            )
        )
        assert resolve_validation_imports([constrained]) == ("jakarta.validation.constraints.*",)

    def test_unconstrained(self) -> None:
        """Should return nothing without constraints."""
        assert resolve_validation_imports(fields(("email", "String"))) == ()
