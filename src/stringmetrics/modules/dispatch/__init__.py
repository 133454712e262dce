"""Unified distance and score entry points keyed by metric name."""

from stringmetrics.modules.dispatch.router import (
    Metric,
    distance,
    resolve_distance_metric,
    resolve_similarity_metric,
    resolve_suggest_metric,
    score,
)

__all__ = [
    "Metric",
    "distance",
    "resolve_distance_metric",
    "resolve_similarity_metric",
    "resolve_suggest_metric",
    "score",
]
