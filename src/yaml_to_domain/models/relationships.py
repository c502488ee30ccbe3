"""Models for relationship declarations."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from yaml_to_domain.models.common import merge_key_alias


class RelationshipType(str, Enum):
    """Relationship cardinalities accepted in YAML."""

    ONE_TO_MANY = "OneToMany"
    MANY_TO_ONE = "ManyToOne"
    ONE_TO_ONE = "OneToOne"
    MANY_TO_MANY = "ManyToMany"


class FetchType(str, Enum):
    """Fetch strategy of a relationship."""

    LAZY = "LAZY"
    EAGER = "EAGER"


class RelationshipDefinition(BaseModel):
    """A relationship declared on an entity.

    ``targetEntity`` is accepted as an alias of ``target``. The target is
    optional at schema level so the validator can report it together with
    the owning aggregate and entity.

    Example:
    -------
        ```yaml
        relationships:
          - type: OneToMany
            target: OrderItem
            mappedBy: order
            cascade: [PERSIST, MERGE]
            fetch: LAZY
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Annotated[RelationshipType, Field(description="Relationship cardinality")]
    target: Annotated[
        str | None,
        Field(default=None, min_length=1, description="Target entity name"),
    ]
    mapped_by: Annotated[
        str | None,
        Field(
            default=None,
            alias="mappedBy",
            min_length=1,
            description="Field on the target that owns the inverse side",
        ),
    ]
    join_column: Annotated[
        str | None,
        Field(default=None, alias="joinColumn", min_length=1),
    ]
    cascade: Annotated[list[str], Field(default_factory=list)]
    fetch: Annotated[FetchType, Field(default=FetchType.LAZY)]
    description: Annotated[str | None, Field(default=None)]

    @model_validator(mode="before")
    @classmethod
    def merge_target_alias(cls, data: Any) -> Any:
        """Accept ``targetEntity`` as a spelling of ``target``."""
        return merge_key_alias(data, "target", "targetEntity")
