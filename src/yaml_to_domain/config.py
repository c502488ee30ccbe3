"""Compiler configuration."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENUM_PACKAGE = "domain.models.enums"
DEFAULT_PERSISTENCE_SUFFIX = "Jpa"


class CompilerOptions(BaseModel):
    """Options threaded through a single compilation.

    ``package_name`` and ``module_name`` are only used to build
    fully-qualified enum imports; they never change how types or
    relationships resolve.

    Example:
    -------
        >>> options = CompilerOptions(package_name="com.acme", module_name="orders")
        >>> options.enum_import("OrderStatus")
        'com.acme.orders.domain.models.enums.OrderStatus'

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    package_name: Annotated[
        str,
        Field(default="", description="Base package of the generated sources"),
    ]
    module_name: Annotated[
        str,
        Field(default="", description="Module the aggregates belong to"),
    ]
    enum_package: Annotated[
        str,
        Field(
            default=DEFAULT_ENUM_PACKAGE,
            min_length=1,
            description="Package suffix under which enums are generated",
        ),
    ]
    persistence_suffix: Annotated[
        str,
        Field(
            default=DEFAULT_PERSISTENCE_SUFFIX,
            min_length=1,
            description="Suffix of the embeddable/persistence companion class",
        ),
    ]
    strict: Annotated[
        bool,
        Field(default=False, description="Treat validation warnings as errors"),
    ]

    @property
    def qualifies_enums(self) -> bool:
        """Whether enough context is present to build enum imports."""
        return bool(self.package_name and self.module_name)

    def enum_import(self, enum_name: str) -> str:
        """Return the fully-qualified import of an enum."""
        return f"{self.package_name}.{self.module_name}.{self.enum_package}.{enum_name}"
