"""Models for value object declarations."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from yaml_to_domain.models.common import merge_key_alias
from yaml_to_domain.models.fields import FieldDefinition


class MethodDefinition(BaseModel):
    """A hand-written behaviour method; passed through uninterpreted."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Annotated[str, Field(min_length=1)]
    return_type: Annotated[str, Field(default="void", alias="returnType")]
    parameters: Annotated[list[Any], Field(default_factory=list)]
    body: Annotated[str, Field(default="")]

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        """Trim surrounding whitespace of block scalars."""
        return v.strip()


class ValueObjectDefinition(BaseModel):
    """An immutable, identity-less composite value.

    Example:
    -------
        ```yaml
        valueObjects:
          - name: Money
            fields:
              - name: amount
                type: BigDecimal
              - name: currency
                type: String
            methods:
              - name: isZero
                returnType: boolean
                body: "return amount.signum() == 0;"
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Annotated[str, Field(min_length=1)]
    fields: Annotated[list[FieldDefinition], Field(default_factory=list)]
    methods: Annotated[list[MethodDefinition], Field(default_factory=list)]
    validation: Annotated[
        list[Any],
        Field(default_factory=list, description="Opaque validation rules"),
    ]
    description: Annotated[str | None, Field(default=None)]

    @model_validator(mode="before")
    @classmethod
    def merge_properties_alias(cls, data: Any) -> Any:
        """Accept ``properties`` as a spelling of ``fields``."""
        return merge_key_alias(data, "fields", "properties")
