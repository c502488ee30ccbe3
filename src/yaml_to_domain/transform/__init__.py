"""YAML to IR (Intermediate Representation) transformation module.

This module turns validated Pydantic models (from YAML/JSON) into the
frozen descriptor tree consumed by code renderers.

The transformation process, per aggregate:
    1. Resolve aggregate-scoped enums
    2. Resolve value objects (entities need their names)
    3. Collect inverse relationships implied by ``mappedBy`` over all entities
    4. Resolve entities: fields, audit fields, relationships, imports
    5. Synthesize aggregate-root methods and merge their imports

Primary Class:
    YamlToDomainTransformer: Main transformer class

Example:
-------
    >>> from yaml_to_domain.models import load_domain_description
    >>> from yaml_to_domain.transform import YamlToDomainTransformer
    >>>
    >>> doc = load_domain_description("orders.yaml")
    >>> model = YamlToDomainTransformer().transform(doc)
    >>> print(model.aggregates[0].root_entity.name)

"""

from yaml_to_domain.transform.aggregate_resolver import (
    resolve_aggregate,
    resolve_enum,
    resolve_value_object,
)
from yaml_to_domain.transform.entity_resolver import resolve_entity
from yaml_to_domain.transform.method_generator import generate_aggregate_methods
from yaml_to_domain.transform.property_resolver import build_annotation, resolve_field
from yaml_to_domain.transform.relationship_resolver import (
    collect_inverse_relationships,
    resolve_relationship,
)
from yaml_to_domain.transform.transformer import YamlToDomainTransformer, build_enum_registry
from yaml_to_domain.transform.type_mapper import resolve_type

__all__ = [
    "YamlToDomainTransformer",
    "build_annotation",
    "build_enum_registry",
    "collect_inverse_relationships",
    "generate_aggregate_methods",
    "resolve_aggregate",
    "resolve_entity",
    "resolve_enum",
    "resolve_field",
    "resolve_relationship",
    "resolve_type",
    "resolve_value_object",
]
