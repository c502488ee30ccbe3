"""Models for aggregate-scoped enum declarations."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Transition(BaseModel):
    """One edge of an enum state machine.

    ``from`` may name a single state or a list of source states.

    Example:
    -------
        ```yaml
        - from: [PENDING, CONFIRMED]
          to: CANCELLED
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    from_states: Annotated[
        tuple[str, ...],
        Field(alias="from", min_length=1, description="Source state(s)"),
    ]
    to: Annotated[str, Field(min_length=1, description="Target state")]

    @field_validator("from_states", mode="before")
    @classmethod
    def wrap_single_state(cls, v: Any) -> Any:
        """Accept a bare state name as a one-element list."""
        if isinstance(v, str):
            return (v,)
        return v


class EnumDefinition(BaseModel):
    """An enum declared at aggregate level.

    Example:
    -------
        ```yaml
        enums:
          - name: OrderStatus
            values: [PENDING, CONFIRMED, CANCELLED]
            initialValue: PENDING
            transitions:
              - from: PENDING
                to: CONFIRMED
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Annotated[str, Field(min_length=1)]
    values: Annotated[list[str], Field(min_length=1, description="Ordered enum constants")]
    transitions: Annotated[
        list[Transition] | None,
        Field(default=None, description="State machine edges"),
    ]
    initial_value: Annotated[
        str | None,
        Field(default=None, alias="initialValue", description="Start state"),
    ]
    description: Annotated[str | None, Field(default=None)]
