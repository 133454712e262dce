"""Exception types shared across the string metrics engines."""

from __future__ import annotations

__all__ = [
    "InvalidArgumentError",
    "StringMetricsError",
    "UnknownMetricError",
]


class StringMetricsError(Exception):
    """Base exception for string metrics operations."""


class InvalidArgumentError(StringMetricsError, ValueError):
    """Raised when a preset, locale or option value is not recognized."""


class UnknownMetricError(StringMetricsError, ValueError):
    """Raised when a metric identifier cannot be resolved."""

    def __init__(self, family: str, metric: object) -> None:
        self.family = family
        self.metric = metric
        super().__init__(f"Unknown {family} metric: {metric}")
