"""Models for field (property) declarations."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

ConstraintValue = int | float | str


class ValidationRule(BaseModel):
    """A single bean-validation constraint attached to a field.

    ``type`` names the constraint annotation; every other key becomes an
    annotation attribute.

    Example:
    -------
        ```yaml
        validations:
          - type: Size
            min: 5
            max: 100
          - type: Email
            message: "Invalid email"
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    kind: Annotated[
        str,
        Field(
            alias="type",
            min_length=1,
            description="Constraint annotation name",
            examples=["NotBlank", "Size", "Email", "DecimalMin"],
        ),
    ]
    message: Annotated[str | None, Field(default=None)]
    value: Annotated[ConstraintValue | None, Field(default=None)]
    min: Annotated[ConstraintValue | None, Field(default=None)]
    max: Annotated[ConstraintValue | None, Field(default=None)]
    regexp: Annotated[str | None, Field(default=None)]
    integer: Annotated[int | None, Field(default=None)]
    fraction: Annotated[int | None, Field(default=None)]
    inclusive: Annotated[bool | None, Field(default=None)]


class FieldDefinition(BaseModel):
    """A field of an entity or value object.

    Example:
    -------
        ```yaml
        - name: status
          type: OrderStatus
          readOnly: true
        - name: category
          type: ProductCategory
          enumValues: [BOOKS, MUSIC]
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Annotated[
        str,
        Field(min_length=1, description="Field name, converted to camelCase"),
    ]
    type: Annotated[
        str,
        Field(
            min_length=1,
            description="Declared type name",
            examples=["String", "BigDecimal", "List<Money>", "OrderStatus"],
        ),
    ]
    enum_values: Annotated[
        list[str] | None,
        Field(
            default=None,
            alias="enumValues",
            description="Inline enum values; the field then defines its own enum",
        ),
    ]
    is_value_object: Annotated[
        bool,
        Field(default=False, alias="isValueObject", description="Force value-object typing"),
    ]
    is_embedded: Annotated[
        bool,
        Field(default=False, alias="isEmbedded", description="Embed the value in the owner"),
    ]
    read_only: Annotated[
        bool,
        Field(default=False, alias="readOnly", description="Exclude from input projections"),
    ]
    hidden: Annotated[
        bool,
        Field(default=False, description="Exclude from response projections"),
    ]
    validations: Annotated[
        list[ValidationRule],
        Field(default_factory=list, description="Constraint annotations"),
    ]
    annotations: Annotated[
        list[str],
        Field(default_factory=list, description="Raw annotations passed through as-is"),
    ]
    description: Annotated[str | None, Field(default=None)]
