"""Error message formatting with Rich."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from yaml_to_domain.validation.errors import ValidationIssue, ValidationResult


def _severity_color(issue: ValidationIssue) -> str:
    return "red" if issue.severity.value == "error" else "yellow"


class ErrorFormatter:
    """Formats validation issues for terminal display."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def format_validation_result(
        self,
        result: ValidationResult,
        source_path: Path | None = None,
    ) -> None:
        """Format and print validation result.

        Args:
        ----
            result: The validation result to format.
            source_path: Path to source file (for display).

        """
        if result.is_valid and not result.warnings:
            self.console.print("[green]✓ Validation passed[/green]")
            return

        error_count = len(result.errors)
        warning_count = len(result.warnings)

        self.console.print(self._build_summary(error_count, warning_count, source_path))
        self.console.print()

        for issue in result.errors:
            self._print_issue(issue)

        for issue in result.warnings:
            self._print_issue(issue)

        counts = []
        if error_count:
            counts.append(f"[red bold]✗ {error_count} error(s)[/red bold]")
        if warning_count:
            counts.append(f"[yellow]{warning_count} warning(s)[/yellow]")
        self.console.print(", ".join(counts))

    def _build_summary(
        self,
        errors: int,
        warnings: int,
        source_path: Path | None,
    ) -> Panel:
        """Build summary panel."""
        title = "Validation Failed" if errors > 0 else "Validation Warnings"
        style = "red" if errors > 0 else "yellow"

        content = Text()
        if source_path:
            content.append(f"File: {source_path}\n", style="dim")

        if errors > 0:
            content.append(f"Errors: {errors}", style="red bold")
        if warnings > 0:
            if errors > 0:
                content.append("  ")
            content.append(f"Warnings: {warnings}", style="yellow")

        return Panel(content, title=title, border_style=style)

    def _print_issue(self, issue: ValidationIssue) -> None:
        """Print a single issue."""
        color = _severity_color(issue)
        severity = issue.severity.value.upper()
        self.console.print(
            f"[{color} bold]{severity}[/{color} bold] "
            f"[{color}]\\[{issue.code}][/{color}] "
            f"{issue.message}",
            highlight=False,
        )

        if issue.location:
            self.console.print(f"  [dim]at {issue.location}[/dim]")

        if issue.suggestion:
            self.console.print(f"  [green]💡 {issue.suggestion}[/green]")

        self.console.print()


class ErrorTree:
    """Display issues as a tree grouped by aggregate."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error tree formatter."""
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as tree."""
        tree = Tree("[bold]Validation Issues[/bold]")

        by_aggregate: dict[str, list[ValidationIssue]] = {}

        for issue in result.issues:
            parts = issue.location.path.split(".") if issue.location else []
            section = parts[1] if len(parts) > 1 and parts[0] == "aggregates" else "document"
            by_aggregate.setdefault(section, []).append(issue)

        for section, issues in sorted(by_aggregate.items()):
            section_node = tree.add(f"[cyan]{section}[/cyan] ({len(issues)} issues)")

            for issue in issues:
                color = _severity_color(issue)
                section_node.add(f"[{color}]{issue.code}[/{color}] {issue.message}")

        self.console.print(tree)


class ErrorTable:
    """Display issues as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error table formatter."""
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as table."""
        table = Table(title="Validation Issues")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in result.issues:
            color = _severity_color(issue)
            table.add_row(
                issue.code,
                f"[{color}]{issue.severity.value.upper()}[/{color}]",
                str(issue.location) if issue.location else "-",
                issue.message,
            )

        self.console.print(table)
