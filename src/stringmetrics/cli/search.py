"""List ranking commands: suggest and extract."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Annotated, Any

import typer

from stringmetrics.cli.context import CLIContext
from stringmetrics.cli.formatters import (
    print_extract_table,
    print_info,
    print_suggestion_table,
)
from stringmetrics.cli.metrics import fail
from stringmetrics.errors import StringMetricsError
from stringmetrics.modules.fuzz.process import ExtractOptions, extract, extract_one
from stringmetrics.modules.suggest.service import suggest
from stringmetrics.modules.text.normalization import normalize, parse_preset


def suggest_command(
    query: Annotated[str, typer.Argument(help="What the user typed")],
    candidates: Annotated[list[str], typer.Argument(help="Candidates to rank")],
    metric: Annotated[
        str | None,
        typer.Option("--metric", "-m", help="Similarity metric or 'substring'"),
    ] = None,
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="none, minimal, default, aggressive"),
    ] = None,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Case folding locale: tr, az, lt"),
    ] = None,
    min_score: Annotated[
        float | None,
        typer.Option("--min-score", help="Drop candidates scoring below this"),
    ] = None,
    max_suggestions: Annotated[
        int | None,
        typer.Option("--max", "-n", min=0, help="Maximum suggestions to show"),
    ] = None,
    prefer_prefix: Annotated[
        bool | None,
        typer.Option(
            "--prefer-prefix/--no-prefer-prefix",
            help="Boost candidates that start with the query",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file with suggest defaults"),
    ] = None,
) -> None:
    """Rank candidates by similarity to a query.

    Unset options fall back to the config file, then to built-in defaults.

    \b
    Examples:
        stringmetrics suggest pythn python java javascript
        stringmetrics suggest abc xxabcxx abcxxxx -m substring --prefer-prefix
    """
    overrides: dict[str, Any] = {
        "metric": metric,
        "preset": preset,
        "locale": locale,
        "min_score": min_score,
        "max_suggestions": max_suggestions,
        "prefer_prefix": prefer_prefix,
    }

    try:
        settings = CLIContext.get().get_config(config)
        options = dataclasses.replace(
            settings.suggest,
            **{k: v for k, v in overrides.items() if v is not None},
        )
        if options.locale is None and settings.locale is not None:
            options = dataclasses.replace(options, locale=settings.locale)
        results = suggest(query, candidates, options)
    except StringMetricsError as e:
        fail(e)

    print_info(f"Metric: {options.metric.value}, min score: {options.min_score}")
    print_suggestion_table(query, results)


def extract_command(
    query: Annotated[str, typer.Argument(help="String to match")],
    choices: Annotated[list[str], typer.Argument(help="Choices to search")],
    scorer: Annotated[
        str,
        typer.Option("--scorer", "-s", help="Similarity metric used as scorer"),
    ] = "ratio",
    cutoff: Annotated[
        float,
        typer.Option("--cutoff", help="Minimum 0-1 score for a match"),
    ] = 0.0,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", min=0, help="Maximum matches to show"),
    ] = None,
    best: Annotated[
        bool,
        typer.Option("--best", "-b", help="Show only the single best match"),
    ] = False,
    preset: Annotated[
        str,
        typer.Option("--preset", "-p", help="Normalize query and choices first"),
    ] = "none",
) -> None:
    """Score choices against a query and list the matches.

    Scores use the 0-1 scale of the named scorer.

    \b
    Examples:
        stringmetrics extract jets "New York Jets" "Dallas Cowboys"
        stringmetrics extract "new york" "York New" "Boston" -s token_sort_ratio --best
    """
    try:
        resolved = parse_preset(preset)
        options = ExtractOptions.from_mapping(
            {
                "scorer": scorer,
                "score_cutoff": cutoff,
                "limit": limit,
                "processor": lambda text: normalize(text, resolved),
            }
        )
        if best:
            match = extract_one(query, choices, options)
            results = [match] if match is not None else []
        else:
            results = extract(query, choices, options)
    except StringMetricsError as e:
        fail(e)

    print_extract_table(query, results)
