"""Convert the IR into plain data for YAML/JSON output."""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

import yaml

from yaml_to_domain.ir.domain import DomainModel
from yaml_to_domain.ir.types import CollectionType, KnownType, UserDefinedType

# Tag written next to structured types so the union stays distinguishable
_TYPE_TAGS = {KnownType: "known", UserDefinedType: "user_defined", CollectionType: "collection"}

OUTPUT_FORMATS = ("yaml", "json")


def to_plain(value: Any) -> Any:
    """Recursively convert dataclasses, enums and tuples to plain data."""
    if is_dataclass(value) and not isinstance(value, type):
        data = {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
        tag = _TYPE_TAGS.get(type(value))
        return {"kind": tag, **data} if tag else data
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def dump_model(model: DomainModel, output_format: str = "yaml") -> str:
    """Serialize a compiled model as YAML or JSON text.

    Raises
    ------
        ValueError: If the format is not one of ``OUTPUT_FORMATS``.

    """
    data = to_plain(model)

    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if output_format == "json":
        return json.dumps(data, indent=2) + "\n"
    raise ValueError(f"Unsupported output format: {output_format}")
