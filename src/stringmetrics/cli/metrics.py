"""Pairwise metric commands: distance, score, compare, normalize."""

from __future__ import annotations

from typing import Annotated, NoReturn

import typer

from stringmetrics.cli.context import CLIContext
from stringmetrics.cli.formatters import (
    format_score,
    print_did_you_mean,
    print_error,
    print_metric_table,
)
from stringmetrics.errors import StringMetricsError, UnknownMetricError
from stringmetrics.modules.dispatch.router import (
    DISTANCE_METRICS,
    SIMILARITY_METRICS,
    SUGGEST_METRICS,
    Metric,
    distance_function,
    similarity_function,
)
from stringmetrics.modules.metrics.substring import substring_similarity
from stringmetrics.modules.suggest.service import SuggestOptions, suggest
from stringmetrics.modules.text.normalization import normalize

_FAMILY_METRICS: dict[str, frozenset[Metric]] = {
    "distance": DISTANCE_METRICS,
    "similarity": SIMILARITY_METRICS,
    "suggestion": SUGGEST_METRICS,
}

# Hints for a mistyped metric name
_HINT_OPTIONS = SuggestOptions(min_score=0.7, max_suggestions=3)


def metric_hints(error: UnknownMetricError) -> list[str]:
    """Names from the error's metric family that resemble the bad name."""
    allowed = _FAMILY_METRICS.get(error.family, SUGGEST_METRICS)
    names = sorted(m.value for m in allowed)
    return [s.value for s in suggest(str(error.metric), names, _HINT_OPTIONS)]


def fail(error: StringMetricsError) -> NoReturn:
    """Report a library error and exit with status 1."""
    print_error(str(error))
    if isinstance(error, UnknownMetricError):
        print_did_you_mean(metric_hints(error))
    raise typer.Exit(1) from error


def distance(
    s1: Annotated[str, typer.Argument(help="First string")],
    s2: Annotated[str, typer.Argument(help="Second string")],
    metric: Annotated[
        str,
        typer.Option(
            "--metric",
            "-m",
            help="levenshtein, damerau_levenshtein, osa, indel, lcs_seq",
        ),
    ] = Metric.LEVENSHTEIN.value,
) -> None:
    """Print the edit distance between two strings.

    \b
    Examples:
        stringmetrics distance kitten sitting
        stringmetrics distance ca abc --metric damerau_levenshtein
    """
    try:
        result = distance_function(metric)(s1, s2)
    except StringMetricsError as e:
        fail(e)

    typer.echo(str(result))


def score(
    s1: Annotated[str, typer.Argument(help="First string")],
    s2: Annotated[str, typer.Argument(help="Second string")],
    metric: Annotated[
        str,
        typer.Option("--metric", "-m", help="Any similarity metric"),
    ] = Metric.JARO_WINKLER.value,
) -> None:
    """Print the 0-1 similarity of two strings.

    \b
    Examples:
        stringmetrics score martha marhta
        stringmetrics score "new york mets" "mets york new" -m token_sort_ratio
    """
    try:
        result = similarity_function(metric)(s1, s2)
    except StringMetricsError as e:
        fail(e)

    typer.echo(format_score(result))


def compare(
    s1: Annotated[str, typer.Argument(help="First string")],
    s2: Annotated[str, typer.Argument(help="Second string")],
) -> None:
    """Show every metric for a pair of strings in one table."""
    rows: list[tuple[str, str, str]] = []
    for metric in Metric:
        if metric is Metric.SUBSTRING:
            match = substring_similarity(s1, s2)
            rows.append((metric.value, "-", format_score(match.score)))
            continue
        dist = "-"
        if metric in DISTANCE_METRICS:
            dist = str(distance_function(metric)(s1, s2))
        similarity = similarity_function(metric)(s1, s2)
        rows.append((metric.value, dist, format_score(similarity)))

    print_metric_table(s1, s2, rows)


def normalize_text(
    text: Annotated[str, typer.Argument(help="Text to normalize")],
    preset: Annotated[
        str,
        typer.Option("--preset", "-p", help="none, minimal, default, aggressive"),
    ] = "default",
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Case folding locale: tr, az, lt"),
    ] = None,
) -> None:
    """Print text after normalization.

    The locale defaults to the one in the config file, if any.

    \b
    Examples:
        stringmetrics normalize "  Straße  "
        stringmetrics normalize "Café!" --preset aggressive
        stringmetrics normalize "DIYARBAKIR" --locale tr
    """
    try:
        if locale is None:
            locale = CLIContext.get().get_config().locale
        result = normalize(text, preset, locale)
    except StringMetricsError as e:
        fail(e)

    typer.echo(result)
