"""Tests for model serialization."""

from __future__ import annotations

import json

import pytest
import yaml
from yaml_to_domain.cli.ir_export import dump_model, to_plain
from yaml_to_domain.ir import DomainModel
from yaml_to_domain.ir.types import CollectionType, KnownType, UserDefinedType


class TestToPlain:
    """Tests for to_plain."""

    def test_tags_resolved_types(self) -> None:
        """Should tag each type shape."""
        assert to_plain(CollectionType(UserDefinedType("Money"))) == {
            "kind": "collection",
            "element": {"kind": "user_defined", "name": "Money", "inline_enum": False},
            "container": "List",
        }
        assert to_plain(KnownType("Long")) == {"kind": "known", "name": "Long"}

    def test_enums_and_transition_pairs(self, order_model: DomainModel) -> None:
        """Should convert enum members and transition pairs."""
        data = to_plain(order_model)

        status = next(
            f for f in data["aggregates"][0]["root_entity"]["fields"] if f["name"] == "status"
        )
        assert status["transition_meta"]["transition_map"] == [
            ["PENDING", ["CONFIRMED", "CANCELLED"]],
            ["CONFIRMED", ["CANCELLED"]],
            ["CANCELLED", []],
        ]
        relationship = data["aggregates"][0]["root_entity"]["relationships"][0]
        assert relationship["kind"] == "OneToMany"
        assert relationship["fetch_mode"] == "LAZY"


class TestDumpModel:
    """Tests for dump_model."""

    def test_yaml_and_json_agree(self, order_model: DomainModel) -> None:
        """Should serialize the same data in both formats."""
        from_yaml = yaml.safe_load(dump_model(order_model, "yaml"))
        from_json = json.loads(dump_model(order_model, "json"))

        assert from_yaml == from_json
        assert from_yaml["aggregates"][0]["name"] == "Order"

    def test_unknown_format(self, order_model: DomainModel) -> None:
        """Should reject unknown formats."""
        with pytest.raises(ValueError, match="xml"):
            dump_model(order_model, "xml")
