"""Pydantic models for domain description YAML documents.

These models mirror the YAML input format and are used for:

- Parsing and schema-validating YAML/JSON domain descriptions
- Normalising accepted spellings (``properties``/``fields``,
  ``targetEntity``/``target``)
- Type-safe access to every declared element

Primary Entry Points:
    load_domain_description(path): Load and validate a YAML/JSON file
    validate_domain_description(path): Validate and return list of errors
    DomainDescription: Root model for the entire document

Model Hierarchy:
    DomainDescription (root)
    └── AggregateDefinition
        ├── EntityDefinition
        │   ├── AuditSettings
        │   ├── FieldDefinition
        │   │   └── ValidationRule
        │   └── RelationshipDefinition
        ├── ValueObjectDefinition
        │   └── MethodDefinition
        └── EnumDefinition
            └── Transition
"""

from yaml_to_domain.models.entities import AuditSettings, EntityDefinition
from yaml_to_domain.models.enums import EnumDefinition, Transition
from yaml_to_domain.models.fields import FieldDefinition, ValidationRule
from yaml_to_domain.models.loader import (
    LoaderError,
    load_domain_description,
    load_yaml_file,
    validate_domain_description,
)
from yaml_to_domain.models.relationships import (
    FetchType,
    RelationshipDefinition,
    RelationshipType,
)
from yaml_to_domain.models.root import AggregateDefinition, DomainDescription
from yaml_to_domain.models.value_objects import MethodDefinition, ValueObjectDefinition

__all__ = [
    # Models
    "DomainDescription",
    "AggregateDefinition",
    "EntityDefinition",
    "AuditSettings",
    "FieldDefinition",
    "ValidationRule",
    "RelationshipDefinition",
    "RelationshipType",
    "FetchType",
    "ValueObjectDefinition",
    "MethodDefinition",
    "EnumDefinition",
    "Transition",
    # Loader utilities
    "LoaderError",
    "load_domain_description",
    "load_yaml_file",
    "validate_domain_description",
]
