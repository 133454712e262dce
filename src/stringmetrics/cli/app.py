"""Main CLI application."""

from __future__ import annotations

import typer

from stringmetrics import __version__
from stringmetrics.cli import fixtures, metrics, search
from stringmetrics.cli.context import CLIContext
from stringmetrics.infrastructure.logging import configure_logging

app = typer.Typer(
    name="stringmetrics",
    help="String similarity metrics, fuzzy matching and suggestions.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("distance")(metrics.distance)
app.command("score")(metrics.score)
app.command("compare")(metrics.compare)
app.command("normalize")(metrics.normalize_text)
app.command("suggest")(search.suggest_command)
app.command("extract")(search.extract_command)

app.add_typer(fixtures.app, name="fixtures")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"stringmetrics {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Hide informational messages.",
    ),
) -> None:
    """stringmetrics: compare, rank and normalize strings."""
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    configure_logging(debug=verbose)
