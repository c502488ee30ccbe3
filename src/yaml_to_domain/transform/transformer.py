"""Main YAML to IR transformer."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from yaml_to_domain.config import CompilerOptions
from yaml_to_domain.ir.domain import AggregateDescriptor, DomainModel, EnumDescriptor
from yaml_to_domain.models.root import AggregateDefinition, DomainDescription
from yaml_to_domain.transform.aggregate_resolver import resolve_aggregate

logger = logging.getLogger(__name__)


def build_enum_registry(aggregates: Iterable[AggregateDescriptor]) -> tuple[EnumDescriptor, ...]:
    """Collect every enum of the document, keeping the first declaration of a name.

    Per aggregate, aggregate-scoped enums come first, then inline enums of
    entity fields, then inline enums of value object fields.
    """
    registry: dict[str, EnumDescriptor] = {}

    for aggregate in aggregates:
        candidates = [
            *aggregate.enums,
            *(en for entity in aggregate.all_entities for en in entity.enums),
            *(en for vo in aggregate.value_objects for en in vo.enums),
        ]
        for enum in candidates:
            if enum.name in registry:
                if registry[enum.name] != enum:
                    logger.debug("Enum %s declared more than once; first wins", enum.name)
                continue
            registry[enum.name] = enum

    return tuple(registry.values())


class YamlToDomainTransformer:
    """Transform a validated domain description into the IR.

    The transformer holds no state besides its options, so one instance can
    compile any number of documents and equal inputs give equal models.

    Usage:
        transformer = YamlToDomainTransformer(CompilerOptions(package_name="com.acme"))
        model = transformer.transform(domain_description)
    """

    def __init__(self, options: CompilerOptions | None = None) -> None:
        """Initialize the transformer.

        Args:
        ----
            options: Compiler options; defaults apply when omitted.

        """
        self.options = options or CompilerOptions()

    def transform(self, doc: DomainDescription) -> DomainModel:
        """Transform a DomainDescription to a DomainModel.

        Args:
        ----
            doc: Validated Pydantic model from YAML/JSON.

        Returns:
        -------
            DomainModel with one descriptor per aggregate and the enum registry.

        Raises:
        ------
            StructuralError: If an aggregate cannot be resolved.

        """
        aggregates = tuple(self._process_aggregate(raw) for raw in doc.aggregates)

        return DomainModel(
            aggregates=aggregates,
            all_enums=build_enum_registry(aggregates),
            package_name=self.options.package_name,
            module_name=self.options.module_name,
        )

    def _process_aggregate(self, raw: AggregateDefinition) -> AggregateDescriptor:
        """Resolve one aggregate and log a summary."""
        aggregate = resolve_aggregate(raw, self.options)
        logger.debug(
            "Resolved aggregate %s: root=%s, %d secondary entities, %d method(s)",
            aggregate.name,
            aggregate.root_entity.name,
            len(aggregate.secondary_entities),
            len(aggregate.aggregate_methods),
        )
        return aggregate
