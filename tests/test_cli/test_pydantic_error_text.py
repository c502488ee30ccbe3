"""Tests for pydantic error translation."""

import pytest
from pydantic import ValidationError
from yaml_to_domain.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from yaml_to_domain.models.relationships import RelationshipDefinition


class TestTranslatePydanticError:
    """Tests for translate_pydantic_error."""

    def test_missing_field(self) -> None:
        """Should translate missing field errors."""
        error = {"type": "missing", "msg": "Field required", "loc": ("name",)}

        assert "required" in translate_pydantic_error(error).lower()  # type: ignore[arg-type]

    def test_extra_field(self) -> None:
        """Should translate extra forbidden errors."""
        error = {"type": "extra_forbidden", "msg": "Extra inputs", "loc": ("colour",)}

        assert "not allowed" in translate_pydantic_error(error)  # type: ignore[arg-type]

    def test_enum_lists_expected(self) -> None:
        """Should include the allowed values."""
        error = {
            "type": "enum",
            "msg": "Input should be...",
            "loc": ("type",),
            "ctx": {"expected": "'OneToMany' or 'ManyToOne'"},
        }

        result = translate_pydantic_error(error)  # type: ignore[arg-type]

        assert result == "Must be one of: 'OneToMany' or 'ManyToOne'"

    def test_too_short(self) -> None:
        """Should include the minimum number of items."""
        error = {"type": "too_short", "msg": "...", "loc": ("values",), "ctx": {"min_length": 1}}

        result = translate_pydantic_error(error)  # type: ignore[arg-type]

        assert result == "Must contain at least 1 item(s)"

    def test_alias_conflict(self) -> None:
        """Should surface the message of model validators."""
        with pytest.raises(ValidationError) as exc_info:
            RelationshipDefinition.model_validate(
                {"type": "OneToMany", "target": "A", "targetEntity": "B"}
            )

        (error,) = exc_info.value.errors()
        assert "not both" in translate_pydantic_error(error)

    def test_unknown_type_keeps_message(self) -> None:
        """Should fall back to the pydantic message."""
        error = {"type": "something_new", "msg": "Original message", "loc": ()}

        assert translate_pydantic_error(error) == "Original message"  # type: ignore[arg-type]


class TestFormatPydanticLocation:
    """Tests for format_pydantic_location."""

    def test_nested(self) -> None:
        """Should render list indices in brackets."""
        loc = ("aggregates", 0, "entities", 1, "isRoot")
        assert format_pydantic_location(loc) == "aggregates[0].entities[1].isRoot"

    def test_empty(self) -> None:
        """Should render an empty location as an empty string."""
        assert format_pydantic_location(()) == ""


class TestGetSuggestion:
    """Tests for get_suggestion_for_error."""

    def test_known(self) -> None:
        """Should suggest a fix for bool errors."""
        error = {"type": "bool_type", "msg": "...", "loc": ("isRoot",)}
        suggestion = get_suggestion_for_error(error)  # type: ignore[arg-type]
        assert suggestion == "Use an unquoted true or false"

    def test_unknown(self) -> None:
        """Should return None for unknown errors."""
        error = {"type": "something_new", "msg": "...", "loc": ()}
        assert get_suggestion_for_error(error) is None  # type: ignore[arg-type]
