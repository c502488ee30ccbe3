"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This field is not allowed in this context",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "bool_type": "Must be true or false",
    "list_type": "Must be a list",
    "dict_type": "Must be an object/dictionary",
    "model_type": "Must be an object/dictionary",
    "enum": "Must be one of the allowed values",
    "value_error": "Invalid value",
    "string_too_short": "String is too short",
    "too_short": "List is too short",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    msg = error["msg"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, msg)

    if error_type == "enum":
        base_msg = f"Must be one of: {ctx.get('expected', 'unknown')}"

    elif error_type == "string_too_short":
        base_msg = f"Must be at least {ctx.get('min_length', 0)} characters"

    elif error_type == "too_short":
        base_msg = f"Must contain at least {ctx.get('min_length', 0)} item(s)"

    elif error_type == "value_error":
        # Alias conflicts raised from model validators
        base_msg = str(ctx.get("error", msg))

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string, e.g. ``aggregates[0].entities[1].isRoot``.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error."""
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    suggestions: dict[str, str] = {
        "missing": "Add the required field to your YAML",
        "extra_forbidden": "Remove this field or check for typos",
        "bool_type": "Use an unquoted true or false",
        "enum": f"Use one of the allowed values: {ctx.get('expected', 'check documentation')}",
        "too_short": "Add at least one entry",
    }

    return suggestions.get(error_type)
