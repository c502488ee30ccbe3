"""Top-level compiler entry points.

``compile_document`` turns an already-parsed document (a mapping or a
:class:`DomainDescription`) into a :class:`DomainModel`; ``compile_file``
loads YAML/JSON from disk first. Both run schema validation, semantic
validation and resolution in that order, so an invalid document never
produces partial output.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from yaml_to_domain.config import CompilerOptions
from yaml_to_domain.ir.domain import DomainModel
from yaml_to_domain.models.loader import load_yaml_file
from yaml_to_domain.models.root import DomainDescription
from yaml_to_domain.transform.transformer import YamlToDomainTransformer
from yaml_to_domain.validation.errors import ErrorCodes, StructuralError, ValidationResult
from yaml_to_domain.validation.validator import DomainValidator

logger = logging.getLogger(__name__)


def _build_options(
    options: CompilerOptions | None,
    package_name: str,
    module_name: str,
) -> CompilerOptions:
    if options is None:
        return CompilerOptions(package_name=package_name, module_name=module_name)

    overrides = {}
    if package_name:
        overrides["package_name"] = package_name
    if module_name:
        overrides["module_name"] = module_name
    return options.model_copy(update=overrides) if overrides else options


def parse_document(data: Mapping[str, Any] | DomainDescription) -> DomainDescription:
    """Schema-validate a raw document.

    Args:
    ----
        data: Parsed YAML/JSON mapping, or an already validated model.

    Returns:
    -------
        The validated DomainDescription.

    Raises:
    ------
        StructuralError: E301 when ``aggregates`` is missing, E300 for any
            other schema violation.

    """
    if isinstance(data, DomainDescription):
        return data

    if not isinstance(data, Mapping) or not isinstance(data.get("aggregates"), list):
        raise StructuralError.single(
            code=ErrorCodes.E301_MISSING_AGGREGATES,
            message="Invalid domain document: missing 'aggregates' array",
            path="aggregates",
            suggestion="Add a top-level 'aggregates:' list",
        )

    try:
        return DomainDescription.model_validate(data)
    except ValidationError as e:
        result = ValidationResult()
        for error in e.errors():
            result.add_error(
                code=ErrorCodes.E300_SCHEMA_ERROR,
                message=error["msg"],
                path=".".join(str(x) for x in error["loc"]),
                error_type=error["type"],
            )
        raise StructuralError(result) from e


def _log_warnings(result: ValidationResult) -> None:
    for issue in result.warnings:
        logger.warning("%s", issue)


def compile_document(
    data: Mapping[str, Any] | DomainDescription,
    package_name: str = "",
    module_name: str = "",
    options: CompilerOptions | None = None,
) -> DomainModel:
    """Compile one domain document into the IR.

    Args:
    ----
        data: Parsed YAML/JSON mapping, or a DomainDescription.
        package_name: Base package for enum imports; overrides ``options``.
        module_name: Module for enum imports; overrides ``options``.
        options: Compiler options.

    Returns:
    -------
        The resolved DomainModel.

    Raises:
    ------
        StructuralError: If the document is invalid. Warnings are logged and
            only raise when ``options.strict`` is set.

    """
    opts = _build_options(options, package_name, module_name)

    doc = parse_document(data)
    logger.debug("Schema validation passed: %d aggregate(s)", len(doc.aggregates))

    result = DomainValidator(strict=opts.strict).validate_and_raise(doc)
    _log_warnings(result)

    model = YamlToDomainTransformer(opts).transform(doc)
    logger.debug(
        "Compiled %d aggregate(s), %d enum(s) in registry",
        len(model.aggregates),
        len(model.all_enums),
    )
    return model


def compile_file(
    path: Path | str,
    package_name: str = "",
    module_name: str = "",
    options: CompilerOptions | None = None,
) -> DomainModel:
    """Load a YAML/JSON file and compile it.

    Raises
    ------
        LoaderError: If the file cannot be read or parsed.
        StructuralError: If the document is invalid.

    """
    path = Path(path)
    logger.debug("Loading %s", path)
    return compile_document(load_yaml_file(path), package_name, module_name, options)
