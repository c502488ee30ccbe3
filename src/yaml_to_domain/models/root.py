"""Root model for domain description documents."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from yaml_to_domain.models.entities import EntityDefinition
from yaml_to_domain.models.enums import EnumDefinition
from yaml_to_domain.models.value_objects import ValueObjectDefinition


class AggregateDefinition(BaseModel):
    """One cluster of entities sharing a lifecycle.

    Example:
    -------
        ```yaml
        - name: Order
          entities: [...]
          valueObjects: [...]
          enums: [...]
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Annotated[str, Field(min_length=1, description="Aggregate name")]
    package: Annotated[
        str | None,
        Field(default=None, description="Optional package override, passed through"),
    ]
    entities: Annotated[list[EntityDefinition], Field(default_factory=list)]
    value_objects: Annotated[
        list[ValueObjectDefinition],
        Field(default_factory=list, alias="valueObjects"),
    ]
    enums: Annotated[list[EnumDefinition], Field(default_factory=list)]
    description: Annotated[str | None, Field(default=None)]


class DomainDescription(BaseModel):
    """Root model for domain YAML/JSON files.

    Example:
    -------
        ```yaml
        aggregates:
          - name: Order
            entities:
              - name: order
                isRoot: true
                fields:
                  - name: id
                    type: Long
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    aggregates: Annotated[
        list[AggregateDefinition],
        Field(description="Aggregates declared in this document"),
    ]
