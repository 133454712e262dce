"""Fixture validation commands."""

from __future__ import annotations

from typing import Annotated

import typer

from stringmetrics.cli.formatters import (
    print_info,
    print_success,
    print_validation_report,
    print_warning,
)
from stringmetrics.modules.validation.validator import validate_fixtures

app = typer.Typer(
    name="fixtures",
    help="Check recorded metric fixtures.",
    no_args_is_help=True,
)


@app.command("validate")
def validate(
    pattern: Annotated[
        str,
        typer.Argument(help="Glob pattern for fixture files (quote it)"),
    ],
) -> None:
    """Validate YAML fixtures against the metric engines.

    Exits with status 1 if any case fails, any file cannot be loaded, or
    nothing matches the pattern.

    \b
    Examples:
        stringmetrics fixtures validate "tests/fixtures/*.yaml"
        stringmetrics fixtures validate "fixtures/**/*.yaml"
    """
    print_info(f"Validating fixtures matching: {pattern}")
    report = validate_fixtures(pattern)

    if report.files_processed == 0:
        print_warning(f"No fixture files match: {pattern}")
        raise typer.Exit(1)

    print_validation_report(report)

    if not report.ok:
        raise typer.Exit(1)

    print_success("All tests passed!")
