"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml
from yaml_to_domain.compiler import compile_document
from yaml_to_domain.ir import AggregateDescriptor, DomainModel
from yaml_to_domain.models import DomainDescription

from tests.fixtures.sample_yamls import MINIMAL_DOMAIN, ORDER_DOMAIN


@pytest.fixture
def minimal_domain() -> dict[str, Any]:
    """Return a fresh copy of the minimal document."""
    return copy.deepcopy(MINIMAL_DOMAIN)


@pytest.fixture
def order_domain() -> dict[str, Any]:
    """Return a fresh copy of the order document."""
    return copy.deepcopy(ORDER_DOMAIN)


@pytest.fixture
def order_doc(order_domain: dict[str, Any]) -> DomainDescription:
    """Return the order document as a validated model."""
    return DomainDescription.model_validate(order_domain)


@pytest.fixture
def order_model(order_domain: dict[str, Any]) -> DomainModel:
    """Return the order document compiled with package and module names."""
    return compile_document(order_domain, package_name="com.acme", module_name="sales")


@pytest.fixture
def order_aggregate(order_model: DomainModel) -> AggregateDescriptor:
    """Return the compiled Order aggregate."""
    return order_model.aggregates[0]


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Return a helper that dumps a document to a YAML file in tmp_path."""

    def _write(data: dict[str, Any], name: str = "domain.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return path

    return _write
