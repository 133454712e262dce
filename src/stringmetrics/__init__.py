"""stringmetrics: string similarity metrics, fuzzy matching and suggestions."""

from stringmetrics.errors import (
    InvalidArgumentError,
    StringMetricsError,
    UnknownMetricError,
)
from stringmetrics.modules.dispatch import Metric, distance, score
from stringmetrics.modules.fuzz import (
    ExtractOptions,
    ExtractResult,
    extract,
    extract_one,
    partial_ratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
)
from stringmetrics.modules.metrics import (
    JaroWinklerParams,
    SubstringMatch,
    damerau_levenshtein,
    indel_distance,
    indel_normalized_similarity,
    jaro,
    jaro_winkler,
    jaro_winkler_custom,
    lcs_seq_distance,
    lcs_seq_normalized_similarity,
    lcs_seq_similarity,
    levenshtein,
    normalized_damerau_levenshtein,
    normalized_levenshtein,
    normalized_osa_similarity,
    osa_distance,
    substring_similarity,
)
from stringmetrics.modules.suggest import SuggestOptions, Suggestion, suggest
from stringmetrics.modules.text import Locale, NormalizationPreset, normalize

__version__ = "0.1.0"

__all__ = [
    "ExtractOptions",
    "ExtractResult",
    "InvalidArgumentError",
    "JaroWinklerParams",
    "Locale",
    "Metric",
    "NormalizationPreset",
    "StringMetricsError",
    "SubstringMatch",
    "SuggestOptions",
    "Suggestion",
    "UnknownMetricError",
    "__version__",
    "damerau_levenshtein",
    "distance",
    "extract",
    "extract_one",
    "indel_distance",
    "indel_normalized_similarity",
    "jaro",
    "jaro_winkler",
    "jaro_winkler_custom",
    "lcs_seq_distance",
    "lcs_seq_normalized_similarity",
    "lcs_seq_similarity",
    "levenshtein",
    "normalize",
    "normalized_damerau_levenshtein",
    "normalized_levenshtein",
    "normalized_osa_similarity",
    "osa_distance",
    "partial_ratio",
    "ratio",
    "score",
    "substring_similarity",
    "suggest",
    "token_set_ratio",
    "token_sort_ratio",
]
