"""Rich console output for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from stringmetrics.cli.context import CLIContext

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stringmetrics.modules.fuzz.process import ExtractResult
    from stringmetrics.modules.suggest.service import Suggestion
    from stringmetrics.modules.validation.validator import ValidationReport

__all__ = [
    "console",
    "error_console",
    "format_score",
    "print_did_you_mean",
    "print_error",
    "print_extract_table",
    "print_info",
    "print_metric_table",
    "print_success",
    "print_suggestion_table",
    "print_validation_report",
    "print_warning",
]

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def print_did_you_mean(suggestions: Sequence[str]) -> None:
    """Print 'Did you mean?' hints, if there are any."""
    if not suggestions:
        return

    error_console.print()
    error_console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        error_console.print(f"  [cyan]{name}[/cyan]")


def format_score(value: float) -> str:
    """Format a similarity score with four decimals."""
    return f"{value:.4f}"


def _format_range(value: tuple[int, int] | None) -> str:
    if value is None:
        return "-"
    return f"{value[0]}..{value[1]}"


def print_metric_table(s1: str, s2: str, rows: Sequence[tuple[str, str, str]]) -> None:
    """Print every metric for one pair of strings.

    Args:
        s1: First string.
        s2: Second string.
        rows: ``(metric, distance, similarity)`` display strings.
    """
    table = Table(title=escape(f"{s1!r} vs {s2!r}"))
    table.add_column("Metric", style="cyan")
    table.add_column("Distance", justify="right")
    table.add_column("Similarity", justify="right", style="green")

    for metric, dist, sim in rows:
        table.add_row(metric, dist, sim)

    console.print(table)


def print_suggestion_table(query: str, suggestions: Sequence[Suggestion]) -> None:
    """Print ranked suggestions for a query."""
    if not suggestions:
        print_info(f"No suggestions for: {escape(query)}")
        return

    table = Table(title=escape(f"Suggestions for {query!r}"))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Value", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Match", justify="right", style="dim")
    table.add_column("Reason", style="dim")

    for rank, item in enumerate(suggestions, start=1):
        table.add_row(
            str(rank),
            escape(item.value),
            format_score(item.score),
            _format_range(item.matched_range),
            escape(item.reason or ""),
        )

    console.print(table)


def print_extract_table(query: str, results: Sequence[ExtractResult]) -> None:
    """Print extraction results for a query."""
    if not results:
        print_info(f"No matches for: {escape(query)}")
        return

    table = Table(title=escape(f"Matches for {query!r}"))
    table.add_column("Choice", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Index", justify="right", style="dim")

    for result in results:
        table.add_row(
            escape(result.choice), format_score(result.score), str(result.index)
        )

    console.print(table)


def print_validation_report(report: ValidationReport) -> None:
    """Print a summary panel followed by any failures."""
    border = "green" if report.ok else "red"
    lines = [
        f"[bold]Files processed:[/bold] {report.files_processed}",
        f"[bold]Total tests:[/bold]     {report.total}",
        f"[bold]Passed:[/bold]          [green]{report.passed}[/green]",
        f"[bold]Failed:[/bold]          [red]{report.failed}[/red]",
    ]
    if report.file_errors:
        errors = len(report.file_errors)
        lines.append(f"[bold]File errors:[/bold]     [red]{errors}[/red]")

    console.print(
        Panel(
            "\n".join(lines),
            title=f"[{border}]Summary[/{border}]",
            border_style=border,
        )
    )

    for file, message in report.file_errors:
        print_error(escape(f"{file}: {message}"))

    for result in report.failures:
        label = escape(f"[{result.category}] {result.description}")
        console.print("  [red]✗[/red] " + label)
        console.print(f"    File: {result.file}")
        if result.expected is not None:
            console.print("    Expected: " + escape(result.expected))
        if result.actual is not None:
            console.print("    Actual:   " + escape(result.actual))
        if result.error is not None:
            console.print("    Error: " + escape(result.error))
