"""IR model for resolved field types.

A declared type name resolves to one of three shapes:

- ``KnownType``: one of the built-in scalars (``String``, ``BigDecimal``, ...)
- ``UserDefinedType``: any other name, assumed to be an entity, value
  object or enum declared somewhere in the document
- ``CollectionType``: ``List<X>``, with ``X`` resolved recursively

User-defined names are not checked at resolution time; the linking step in
the validator reports names that match nothing in the aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KnownType:
    """A built-in scalar type."""

    name: str

    def render(self) -> str:
        """Return the type as written in generated source."""
        return self.name


@dataclass(frozen=True)
class UserDefinedType:
    """A reference to a type declared in the document.

    Attributes
    ----------
        name: PascalCase type name.
        inline_enum: True when the field declares the enum values itself.

    """

    name: str
    inline_enum: bool = False

    def render(self) -> str:
        """Return the type as written in generated source."""
        return self.name


@dataclass(frozen=True)
class CollectionType:
    """An ordered collection of another resolved type."""

    element: ResolvedType
    container: str = "List"

    def render(self) -> str:
        """Return the type as written in generated source."""
        return f"{self.container}<{self.element.render()}>"


ResolvedType = KnownType | UserDefinedType | CollectionType


def element_of(resolved: ResolvedType) -> ResolvedType:
    """Return the element type of a collection, or the type itself."""
    if isinstance(resolved, CollectionType):
        return resolved.element
    return resolved
