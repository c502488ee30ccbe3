"""yaml-to-domain: Compiler from declarative aggregate YAML to a resolved domain model.

This package provides tools for:
- Loading and validating YAML/JSON domain descriptions
- Resolving types, value objects, enums and relationships
- Producing an Intermediate Representation (IR) ready for code emission

Quick Start:
    >>> from yaml_to_domain.compiler import compile_file
    >>>
    >>> model = compile_file("domain.yaml", package_name="com.acme", module_name="orders")
    >>> for aggregate in model.aggregates:
    ...     print(aggregate.name, aggregate.root_entity.name)

Modules:
    models: Pydantic models for the domain YAML schema
    ir: Intermediate Representation data structures
    transform: YAML model to IR resolution
    validation: Structural and semantic checks
    compiler: Top-level compile entry points
    cli: Command-line interface
"""

__version__ = "0.1.0"
