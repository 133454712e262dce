"""Metric name resolution and routing.

Every external spelling of a metric (snake_case, camelCase and the older
``damerau_*`` names) maps onto one canonical :class:`Metric`. Alias
handling stays here so the engines only ever see plain strings.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from stringmetrics.errors import UnknownMetricError
from stringmetrics.modules.fuzz.ratios import (
    partial_ratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
)
from stringmetrics.modules.metrics.edit import (
    damerau_levenshtein,
    indel_distance,
    indel_normalized_similarity,
    lcs_seq_distance,
    lcs_seq_normalized_similarity,
    levenshtein,
    normalized_damerau_levenshtein,
    normalized_levenshtein,
    normalized_osa_similarity,
    osa_distance,
)
from stringmetrics.modules.metrics.jaro import jaro, jaro_winkler

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "DISTANCE_METRICS",
    "METRIC_ALIASES",
    "SIMILARITY_METRICS",
    "SUGGEST_METRICS",
    "Metric",
    "distance",
    "distance_function",
    "resolve_distance_metric",
    "resolve_similarity_metric",
    "resolve_suggest_metric",
    "score",
    "similarity_function",
]


class Metric(str, Enum):
    """Canonical metric identifiers."""

    LEVENSHTEIN = "levenshtein"
    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    OSA = "osa"
    JARO = "jaro"
    JARO_WINKLER = "jaro_winkler"
    INDEL = "indel"
    LCS_SEQ = "lcs_seq"
    RATIO = "ratio"
    PARTIAL_RATIO = "partial_ratio"
    TOKEN_SORT_RATIO = "token_sort_ratio"
    TOKEN_SET_RATIO = "token_set_ratio"
    SUBSTRING = "substring"


METRIC_ALIASES: dict[str, Metric] = {
    "levenshtein": Metric.LEVENSHTEIN,
    "damerau_levenshtein": Metric.DAMERAU_LEVENSHTEIN,
    "damerauLevenshtein": Metric.DAMERAU_LEVENSHTEIN,
    "damerau_unrestricted": Metric.DAMERAU_LEVENSHTEIN,
    "damerauUnrestricted": Metric.DAMERAU_LEVENSHTEIN,
    "osa": Metric.OSA,
    "damerau_osa": Metric.OSA,
    "damerauOsa": Metric.OSA,
    "jaro": Metric.JARO,
    "jaro_winkler": Metric.JARO_WINKLER,
    "jaroWinkler": Metric.JARO_WINKLER,
    "indel": Metric.INDEL,
    "lcs_seq": Metric.LCS_SEQ,
    "lcsSeq": Metric.LCS_SEQ,
    "ratio": Metric.RATIO,
    "partial_ratio": Metric.PARTIAL_RATIO,
    "partialRatio": Metric.PARTIAL_RATIO,
    "token_sort_ratio": Metric.TOKEN_SORT_RATIO,
    "tokenSortRatio": Metric.TOKEN_SORT_RATIO,
    "token_set_ratio": Metric.TOKEN_SET_RATIO,
    "tokenSetRatio": Metric.TOKEN_SET_RATIO,
    "substring": Metric.SUBSTRING,
}

DISTANCE_METRICS: frozenset[Metric] = frozenset(
    {
        Metric.LEVENSHTEIN,
        Metric.DAMERAU_LEVENSHTEIN,
        Metric.OSA,
        Metric.INDEL,
        Metric.LCS_SEQ,
    }
)

SIMILARITY_METRICS: frozenset[Metric] = DISTANCE_METRICS | {
    Metric.JARO,
    Metric.JARO_WINKLER,
    Metric.RATIO,
    Metric.PARTIAL_RATIO,
    Metric.TOKEN_SORT_RATIO,
    Metric.TOKEN_SET_RATIO,
}

# The suggestion engine can also rank by longest common substring
SUGGEST_METRICS: frozenset[Metric] = SIMILARITY_METRICS | {Metric.SUBSTRING}

_DISTANCE_FUNCTIONS: dict[Metric, Callable[[str, str], int]] = {
    Metric.LEVENSHTEIN: levenshtein,
    Metric.DAMERAU_LEVENSHTEIN: damerau_levenshtein,
    Metric.OSA: osa_distance,
    Metric.INDEL: indel_distance,
    Metric.LCS_SEQ: lcs_seq_distance,
}


def _percent(func: Callable[[str, str], float]) -> Callable[[str, str], float]:
    """Wrap a 0-100 ratio so it reports on the 0-1 scale."""

    def scaled(s1: str, s2: str) -> float:
        return func(s1, s2) / 100

    scaled.__name__ = func.__name__
    scaled.__doc__ = func.__doc__
    return scaled


_SIMILARITY_FUNCTIONS: dict[Metric, Callable[[str, str], float]] = {
    Metric.LEVENSHTEIN: normalized_levenshtein,
    Metric.DAMERAU_LEVENSHTEIN: normalized_damerau_levenshtein,
    Metric.OSA: normalized_osa_similarity,
    Metric.JARO: jaro,
    Metric.JARO_WINKLER: jaro_winkler,
    Metric.INDEL: indel_normalized_similarity,
    Metric.LCS_SEQ: lcs_seq_normalized_similarity,
    Metric.RATIO: _percent(ratio),
    Metric.PARTIAL_RATIO: _percent(partial_ratio),
    Metric.TOKEN_SORT_RATIO: _percent(token_sort_ratio),
    Metric.TOKEN_SET_RATIO: _percent(token_set_ratio),
}


def _resolve(value: Metric | str, family: str, allowed: frozenset[Metric]) -> Metric:
    if isinstance(value, Metric):
        metric: Metric | None = value
    elif isinstance(value, str):
        metric = METRIC_ALIASES.get(value)
    else:
        metric = None
    if metric is None or metric not in allowed:
        raise UnknownMetricError(family, value)
    return metric


def resolve_distance_metric(value: Metric | str = Metric.LEVENSHTEIN) -> Metric:
    """Resolve a distance metric name.

    Raises:
        UnknownMetricError: If the name is not a distance metric.
    """
    return _resolve(value, "distance", DISTANCE_METRICS)


def resolve_similarity_metric(value: Metric | str = Metric.JARO_WINKLER) -> Metric:
    """Resolve a similarity metric name.

    Raises:
        UnknownMetricError: If the name is not a similarity metric.
    """
    return _resolve(value, "similarity", SIMILARITY_METRICS)


def resolve_suggest_metric(value: Metric | str = Metric.JARO_WINKLER) -> Metric:
    """Resolve a suggestion metric name (similarity metrics plus substring).

    Raises:
        UnknownMetricError: If the name is not a suggestion metric.
    """
    return _resolve(value, "suggestion", SUGGEST_METRICS)


def distance_function(metric: Metric | str) -> Callable[[str, str], int]:
    """Look up the raw distance function for a metric name."""
    return _DISTANCE_FUNCTIONS[resolve_distance_metric(metric)]


def similarity_function(metric: Metric | str) -> Callable[[str, str], float]:
    """Look up the 0-1 similarity function for a similarity metric name."""
    return _SIMILARITY_FUNCTIONS[resolve_similarity_metric(metric)]


def distance(s1: str, s2: str, metric: Metric | str = Metric.LEVENSHTEIN) -> int:
    """Calculate edit distance between two strings using the chosen metric.

    Args:
        s1: First string.
        s2: Second string.
        metric: Distance metric (default: levenshtein).

    Returns:
        Raw edit distance.

    Raises:
        UnknownMetricError: If the metric is not a distance metric.
    """
    return distance_function(metric)(s1, s2)


def score(s1: str, s2: str, metric: Metric | str = Metric.JARO_WINKLER) -> float:
    """Calculate similarity between two strings on the 0-1 scale.

    Ratio based metrics, natively 0-100, are divided by 100.

    Args:
        s1: First string.
        s2: Second string.
        metric: Similarity metric (default: jaro_winkler).

    Returns:
        Similarity where 1.0 means identical.

    Raises:
        UnknownMetricError: If the metric is not a similarity metric.
    """
    return similarity_function(metric)(s1, s2)
