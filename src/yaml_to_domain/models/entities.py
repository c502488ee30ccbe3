"""Models for entity declarations."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, model_validator

from yaml_to_domain.models.common import merge_key_alias
from yaml_to_domain.models.fields import FieldDefinition
from yaml_to_domain.models.relationships import RelationshipDefinition


class AuditSettings(BaseModel):
    """Structured audit configuration.

    Example:
    -------
        ```yaml
        audit:
          enabled: true
          trackUser: true
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    enabled: Annotated[
        StrictBool,
        Field(default=False, description="Inject createdAt/updatedAt"),
    ]
    track_user: Annotated[
        StrictBool,
        Field(
            default=False,
            alias="trackUser",
            description="Also inject createdBy/updatedBy; requires enabled",
        ),
    ]


class EntityDefinition(BaseModel):
    """A persistable concept inside an aggregate.

    Example:
    -------
        ```yaml
        - name: order
          isRoot: true
          tableName: orders
          audit:
            enabled: true
          fields:
            - name: id
              type: Long
          relationships:
            - type: OneToMany
              target: OrderItem
              mappedBy: order
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Annotated[str, Field(min_length=1)]
    is_root: Annotated[
        StrictBool,
        Field(default=False, alias="isRoot", description="Aggregate root flag"),
    ]
    table_name: Annotated[
        str | None,
        Field(default=None, alias="tableName", min_length=1),
    ]
    audit: Annotated[AuditSettings | None, Field(default=None)]
    auditable: Annotated[
        StrictBool | None,
        Field(default=None, description="Deprecated; use audit.enabled"),
    ]
    fields: Annotated[list[FieldDefinition], Field(default_factory=list)]
    relationships: Annotated[list[RelationshipDefinition], Field(default_factory=list)]
    description: Annotated[str | None, Field(default=None)]

    @model_validator(mode="before")
    @classmethod
    def merge_properties_alias(cls, data: Any) -> Any:
        """Accept ``properties`` as a spelling of ``fields``."""
        return merge_key_alias(data, "fields", "properties")

    @property
    def audit_enabled(self) -> bool:
        """Effective audit flag; an explicit ``audit.enabled`` overrides ``auditable``."""
        if self.audit is not None and "enabled" in self.audit.model_fields_set:
            return self.audit.enabled
        return self.auditable is True

    @property
    def audit_track_user(self) -> bool:
        return self.audit is not None and self.audit.track_user
