"""Token based fuzzy ratios and best-match extraction."""

from stringmetrics.modules.fuzz.process import (
    ExtractOptions,
    ExtractResult,
    extract,
    extract_one,
)
from stringmetrics.modules.fuzz.ratios import (
    partial_ratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
)

__all__ = [
    "ExtractOptions",
    "ExtractResult",
    "extract",
    "extract_one",
    "partial_ratio",
    "ratio",
    "token_set_ratio",
    "token_sort_ratio",
]
