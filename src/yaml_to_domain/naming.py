"""String case conversions and English pluralization."""

from __future__ import annotations

import re

import inflection

_SEPARATED_CHAR = re.compile(r"[-_\s]+(.)?")
_UPPER = re.compile(r"([A-Z])")
_DASH_OR_SPACE = re.compile(r"[-\s]+")
_UNDERSCORE_OR_SPACE = re.compile(r"[\s_]+")


def to_pascal_case(value: str) -> str:
    """Convert ``order_item``, ``order-item`` or ``orderItem`` to ``OrderItem``."""
    joined = _SEPARATED_CHAR.sub(lambda m: m.group(1).upper() if m.group(1) else "", value)
    return joined[:1].upper() + joined[1:]


def to_camel_case(value: str) -> str:
    """Convert a name to ``camelCase``."""
    pascal = to_pascal_case(value)
    return pascal[:1].lower() + pascal[1:]


def to_snake_case(value: str) -> str:
    """Convert ``OrderItems`` to ``order_items``."""
    result = _UPPER.sub(r"_\1", value)
    result = _DASH_OR_SPACE.sub("_", result)
    return result.removeprefix("_").lower()


def to_kebab_case(value: str) -> str:
    """Convert ``OrderItems`` to ``order-items``."""
    result = _UPPER.sub(r"-\1", value)
    result = _UNDERSCORE_OR_SPACE.sub("-", result)
    return result.removeprefix("-").lower()


def pluralize(word: str) -> str:
    """Return the English plural of ``word``.

    Irregular and uncountable nouns come from the inflection tables, so
    ``person`` becomes ``people`` and ``salesPerson`` becomes ``salesPeople``.
    Words that are already plural are returned unchanged.
    """
    return inflection.pluralize(word)


def singularize(word: str) -> str:
    """Return the English singular of ``word``."""
    return inflection.singularize(word)


def to_package_path(package_name: str) -> str:
    """Convert ``com.acme.shop`` to ``com/acme/shop``."""
    return package_name.replace(".", "/")
