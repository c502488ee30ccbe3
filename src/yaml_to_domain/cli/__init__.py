"""CLI module for yaml-to-domain."""

from yaml_to_domain.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
from yaml_to_domain.cli.exception_handler import handle_exceptions
from yaml_to_domain.cli.ir_export import dump_model, to_plain
from yaml_to_domain.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)

__all__ = [
    "ErrorFormatter",
    "ErrorTable",
    "ErrorTree",
    "dump_model",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "handle_exceptions",
    "to_plain",
    "translate_pydantic_error",
]
