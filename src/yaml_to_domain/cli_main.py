"""Command-line interface for the yaml-to-domain compiler."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.tree import Tree

from yaml_to_domain import __version__
from yaml_to_domain.cli.exception_handler import handle_exceptions
from yaml_to_domain.config import CompilerOptions
from yaml_to_domain.ir.domain import AggregateDescriptor, DomainModel

# Create Typer app
app = typer.Typer(
    name="yaml-to-domain",
    help="Compile DDD aggregate descriptions (YAML/JSON) into a resolved domain model.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")

InputFile = Annotated[
    Path,
    typer.Argument(
        help="Input YAML/JSON domain description.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"yaml-to-domain version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compile DDD aggregate descriptions into a resolved domain model.

    The model resolves types, synthesizes inverse relationships and
    aggregate-root methods, and is meant to be consumed by code renderers.
    """


@app.command()
@handle_exceptions()
def validate(
    input_file: InputFile,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only output errors, no success messages."),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for validation results: text, table, tree.",
        ),
    ] = "text",
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Treat warnings as errors."),
    ] = False,
) -> None:
    """Validate a YAML/JSON domain description file.

    Runs schema validation, then the semantic checks (aggregate roots,
    audit settings, enum states, relationship targets, type references).

    Examples
    --------
        yaml-to-domain validate orders.yaml
        yaml-to-domain validate orders.yaml --format table
        yaml-to-domain validate orders.yaml --strict

    """
    from yaml_to_domain.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
    from yaml_to_domain.compiler import parse_document
    from yaml_to_domain.models.loader import load_yaml_file
    from yaml_to_domain.validation.validator import DomainValidator

    doc = parse_document(load_yaml_file(input_file))
    result = DomainValidator(strict=strict).validate(doc)

    if not result.is_valid or result.warnings:
        if output_format == "table":
            ErrorTable(error_console).print_result(result)
        elif output_format == "tree":
            ErrorTree(error_console).print_result(result)
        else:
            ErrorFormatter(error_console).format_validation_result(result, input_file)

        if not result.is_valid or (strict and result.warnings):
            raise typer.Exit(code=1)

    if not quiet:
        if result.warnings:
            console.print(
                f"\n[bold yellow]⚠ {input_file.name} is valid with warnings[/bold yellow]\n"
            )
        else:
            console.print(f"\n[bold green]✓ {input_file.name} is valid[/bold green]\n")


@app.command("compile")
@handle_exceptions()
def compile_command(
    input_file: InputFile,
    package_name: Annotated[
        str,
        typer.Option("--package", "-p", help="Base package used for enum imports."),
    ] = "",
    module_name: Annotated[
        str,
        typer.Option("--module", "-m", help="Module name used for enum imports."),
    ] = "",
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: yaml or json."),
    ] = "yaml",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the model to this file instead of stdout.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite output file if it exists."),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Treat warnings as errors."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Show compilation progress."),
    ] = False,
) -> None:
    """Compile a domain description and print the resolved model.

    Examples
    --------
        yaml-to-domain compile orders.yaml -p com.acme -m sales
        yaml-to-domain compile orders.yaml --format json -o orders.json

    """
    from yaml_to_domain.cli.ir_export import OUTPUT_FORMATS, dump_model
    from yaml_to_domain.compiler import compile_file

    configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        error_console.print(
            f"\n✗ Invalid format: {output_format}\nSupported: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(code=1)

    if output is not None and output.exists() and not force:
        error_console.print(
            f"\n✗ Output file already exists: {output}\nUse --force to overwrite."
        )
        raise typer.Exit(code=1)

    options = CompilerOptions(package_name=package_name, module_name=module_name, strict=strict)
    model = compile_file(input_file, options=options)
    text = dump_model(model, output_format)

    if output is None:
        typer.echo(text, nl=False)
        return

    output.write_text(text, encoding="utf-8")
    console.print(
        f"\n[bold green]✓ Wrote {len(model.aggregates)} aggregate(s) to {output}[/bold green]\n"
    )


@app.command()
@handle_exceptions()
def info(input_file: InputFile) -> None:
    """Display the aggregates, entities, value objects and enums of a file.

    Examples
    --------
        yaml-to-domain info orders.yaml

    """
    from yaml_to_domain.compiler import compile_file

    configure_logging()
    model = compile_file(input_file)

    console.print(
        Panel.fit(f"[bold]Domain Description[/bold]\nFile: {input_file}", title="File Info")
    )
    console.print(_build_tree(model))


def _build_tree(model: DomainModel) -> Tree:
    """Build a rich tree of a compiled model."""
    tree = Tree("[bold]Aggregates[/bold]")
    for aggregate in model.aggregates:
        _add_aggregate(tree, aggregate)

    if model.all_enums:
        enums = tree.add("[bold]Enum registry[/bold]")
        for enum in model.all_enums:
            enums.add(f"[magenta]{enum.name}[/magenta] {', '.join(enum.values)}")
    return tree


def _add_aggregate(tree: Tree, aggregate: AggregateDescriptor) -> None:
    node = tree.add(f"[cyan bold]{aggregate.name}[/cyan bold]")

    for entity in aggregate.all_entities:
        label = f"[green]{entity.name}[/green] ({entity.table_name})"
        if entity.is_root:
            label += " [bold]root[/bold]"
        entity_node = node.add(label)
        entity_node.add(f"{len(entity.fields)} field(s)")
        for rel in entity.relationships:
            marker = " [dim]inverse[/dim]" if rel.is_inverse else ""
            entity_node.add(f"{rel.kind.value} {rel.field_name} -> {rel.target}{marker}")

    for vo in aggregate.value_objects:
        node.add(f"[yellow]{vo.name}[/yellow] value object, {len(vo.fields)} field(s)")

    for enum in aggregate.enums:
        node.add(f"[magenta]{enum.name}[/magenta] enum, {len(enum.values)} value(s)")

    if aggregate.aggregate_methods:
        methods = node.add("[bold]Root methods[/bold]")
        for method in aggregate.aggregate_methods:
            params = ", ".join(f"{p.type} {p.name}" for p in method.parameters)
            methods.add(f"{method.return_type} {method.name}({params})", highlight=False)


if __name__ == "__main__":
    app()
