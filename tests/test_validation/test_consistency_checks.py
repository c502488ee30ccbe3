"""Tests for consistency validators."""

from __future__ import annotations

from typing import Any

import pytest
from yaml_to_domain.models.root import DomainDescription
from yaml_to_domain.validation.base import BaseValidator
from yaml_to_domain.validation.consistency_validators import (
    AuditConfigValidator,
    EnumStateValidator,
    RootEntityValidator,
    UniqueAggregateNameValidator,
    UniqueEntityNameValidator,
    UniqueEnumValueValidator,
    UniqueFieldNameValidator,
)
from yaml_to_domain.validation.errors import ErrorCodes, ValidationResult, ValidationSeverity

from tests.fixtures.sample_yamls import NO_ROOT_DOMAIN, ORDER_DOMAIN


def run(validator: BaseValidator, data: dict[str, Any]) -> ValidationResult:
    """Run one validator over a raw document."""
    result = ValidationResult()
    validator.validate(DomainDescription.model_validate(data), result)
    return result


def single_aggregate(**aggregate: Any) -> dict[str, Any]:
    """Wrap one aggregate in a document."""
    return {"aggregates": [{"name": "Shop", **aggregate}]}


def root(**extra: Any) -> dict[str, Any]:
    """Return a root entity declaration."""
    return {"name": "shop", "isRoot": True, "fields": [{"name": "id", "type": "Long"}], **extra}


class TestRootEntityValidator:
    """Tests for RootEntityValidator."""

    def test_valid(self) -> None:
        """Should accept the order fixture."""
        assert run(RootEntityValidator(), ORDER_DOMAIN).issues == []

    def test_missing_root(self) -> None:
        """Should report E001."""
        result = run(RootEntityValidator(), NO_ROOT_DOMAIN)

        assert [i.code for i in result.errors] == [ErrorCodes.E001_MISSING_ROOT]
        assert "Broken" in result.errors[0].message

    def test_multiple_roots(self) -> None:
        """Should report E002 with the root names."""
        data = single_aggregate(entities=[root(), root(name="other")])

        result = run(RootEntityValidator(), data)

        assert [i.code for i in result.errors] == [ErrorCodes.E002_MULTIPLE_ROOTS]
        assert result.errors[0].context["roots"] == ["shop", "other"]


class TestAuditConfigValidator:
    """Tests for AuditConfigValidator."""

    def test_track_user_without_enabled(self) -> None:
        """Should report E004."""
        data = single_aggregate(entities=[root(audit={"trackUser": True})])

        result = run(AuditConfigValidator(), data)

        assert [i.code for i in result.errors] == [ErrorCodes.E004_TRACK_USER_WITHOUT_AUDIT]
        assert result.errors[0].location is not None
        assert result.errors[0].location.path.endswith(".audit")

    def test_enabled_with_track_user(self) -> None:
        """Should accept a full audit block."""
        data = single_aggregate(entities=[root(audit={"enabled": True, "trackUser": True})])
        assert run(AuditConfigValidator(), data).issues == []

    def test_deprecated_auditable(self) -> None:
        """Should warn about auditable: true."""
        result = run(AuditConfigValidator(), single_aggregate(entities=[root(auditable=True)]))

        assert result.is_valid
        (warning,) = result.warnings
        assert warning.code == ErrorCodes.W004_DEPRECATED_FEATURE
        assert warning.severity == ValidationSeverity.WARNING

    def test_auditable_false_is_silent(self) -> None:
        """Should not warn about auditable: false."""
        data = single_aggregate(entities=[root(auditable=False)])
        assert run(AuditConfigValidator(), data).issues == []

    def test_auditable_enables_track_user(self) -> None:
        """Should accept trackUser when auditable: true is the enabled flag."""
        entity = root(auditable=True, audit={"trackUser": True})

        result = run(AuditConfigValidator(), single_aggregate(entities=[entity]))

        assert result.errors == []
        assert [i.code for i in result.warnings] == [ErrorCodes.W004_DEPRECATED_FEATURE]

    def test_explicit_disabled_overrides_auditable(self) -> None:
        """Should report E004 when audit.enabled: false overrides auditable: true."""
        entity = root(auditable=True, audit={"enabled": False, "trackUser": True})

        result = run(AuditConfigValidator(), single_aggregate(entities=[entity]))

        assert [i.code for i in result.errors] == [ErrorCodes.E004_TRACK_USER_WITHOUT_AUDIT]


class TestEnumStateValidator:
    """Tests for EnumStateValidator."""

    def enum_document(self, **enum: Any) -> dict[str, Any]:
        """Return a document with a Status enum."""
        return single_aggregate(
            entities=[root()],
            enums=[{"name": "Status", "values": ["NEW", "DONE"], **enum}],
        )

    def test_valid_state_machine(self) -> None:
        """Should accept declared states."""
        data = self.enum_document(
            initialValue="NEW",
            transitions=[{"from": "NEW", "to": "DONE"}],
        )
        assert run(EnumStateValidator(), data).issues == []

    def test_unknown_initial_value(self) -> None:
        """Should reject an initial value outside the values."""
        result = run(EnumStateValidator(), self.enum_document(initialValue="OPEN"))

        assert [i.code for i in result.errors] == [ErrorCodes.E005_UNDEFINED_ENUM_STATE]
        assert "OPEN" in result.errors[0].message

    def test_unknown_transition_states(self) -> None:
        """Should report every unknown source and target."""
        data = self.enum_document(transitions=[{"from": ["NEW", "LOST"], "to": "GONE"}])

        result = run(EnumStateValidator(), data)

        assert [i.context["state"] for i in result.errors] == ["LOST", "GONE"]


class TestUniquenessValidators:
    """Tests for the uniqueness validators."""

    def test_duplicate_aggregates(self) -> None:
        """Should compare aggregate names in PascalCase."""
        data = {
            "aggregates": [
                {"name": "order", "entities": [root()]},
                {"name": "Order", "entities": [root()]},
            ]
        }

        result = run(UniqueAggregateNameValidator(), data)

        assert [i.code for i in result.errors] == [ErrorCodes.E100_DUPLICATE_AGGREGATE]

    def test_duplicate_entities(self) -> None:
        """Should report an entity declared twice."""
        data = single_aggregate(entities=[root(), {"name": "item"}, {"name": "Item"}])

        result = run(UniqueEntityNameValidator(), data)

        assert [i.code for i in result.errors] == [ErrorCodes.E101_DUPLICATE_ENTITY]
        assert "Item" in result.errors[0].message

    @pytest.mark.parametrize(
        "aggregate",
        [
            {"entities": [root()], "enums": [{"name": "Color", "values": ["RED", "RED"]}]},
            {
                "entities": [
                    root(
                        fields=[{"name": "c", "type": "Color", "enumValues": ["RED", "RED"]}]
                    )
                ]
            },
            {
                "entities": [root()],
                "valueObjects": [
                    {
                        "name": "Paint",
                        "fields": [{"name": "c", "type": "Color", "enumValues": ["RED", "RED"]}],
                    }
                ],
            },
        ],
        ids=["named", "inline-entity", "inline-value-object"],
    )
    def test_duplicate_enum_values(self, aggregate: dict[str, Any]) -> None:
        """Should report duplicate values of named and inline enums."""
        result = run(UniqueEnumValueValidator(), single_aggregate(**aggregate))

        assert [i.code for i in result.errors] == [ErrorCodes.E102_DUPLICATE_ENUM_VALUE]

    def test_duplicate_fields_after_case_conversion(self) -> None:
        """Should treat unit_price and unitPrice as the same field."""
        data = single_aggregate(
            entities=[
                root(
                    fields=[
                        {"name": "unit_price", "type": "BigDecimal"},
                        {"name": "unitPrice", "type": "BigDecimal"},
                    ]
                )
            ]
        )

        result = run(UniqueFieldNameValidator(), data)

        assert [i.code for i in result.errors] == [ErrorCodes.E103_DUPLICATE_FIELD]
        assert "unitPrice" in result.errors[0].message

    def test_declared_field_clashes_with_audit(self) -> None:
        """Should report a declared createdAt when audit adds one."""
        fields = [{"name": "id", "type": "Long"}, {"name": "created_at", "type": "LocalDateTime"}]
        entity = root(audit={"enabled": True}, fields=fields)

        result = run(UniqueFieldNameValidator(), single_aggregate(entities=[entity]))

        assert [i.code for i in result.errors] == [ErrorCodes.E103_DUPLICATE_FIELD]
        assert "createdAt" in result.errors[0].message

    def test_user_fields_only_clash_when_tracked(self) -> None:
        """Should allow createdBy unless audit tracks users."""
        fields = [{"name": "id", "type": "Long"}, {"name": "createdBy", "type": "String"}]
        untracked = root(audit={"enabled": True}, fields=fields)
        tracked = root(audit={"enabled": True, "trackUser": True}, fields=fields)

        assert run(UniqueFieldNameValidator(), single_aggregate(entities=[untracked])).issues == []
        result = run(UniqueFieldNameValidator(), single_aggregate(entities=[tracked]))
        assert [i.code for i in result.errors] == [ErrorCodes.E103_DUPLICATE_FIELD]

    def test_audit_fields_ignored_when_disabled(self) -> None:
        """Should accept a declared createdAt without audit."""
        fields = [{"name": "id", "type": "Long"}, {"name": "createdAt", "type": "LocalDateTime"}]
        data = single_aggregate(entities=[root(fields=fields)])
        assert run(UniqueFieldNameValidator(), data).issues == []
