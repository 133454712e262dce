"""Edit distance, Jaro and substring similarity engines."""

from stringmetrics.modules.metrics.edit import (
    damerau_levenshtein,
    indel_distance,
    indel_normalized_similarity,
    lcs_seq_distance,
    lcs_seq_normalized_similarity,
    lcs_seq_similarity,
    levenshtein,
    normalized_damerau_levenshtein,
    normalized_levenshtein,
    normalized_osa_similarity,
    osa_distance,
)
from stringmetrics.modules.metrics.jaro import (
    JaroWinklerParams,
    jaro,
    jaro_winkler,
    jaro_winkler_custom,
)
from stringmetrics.modules.metrics.substring import (
    SubstringMatch,
    substring_similarity,
)

__all__ = [
    "JaroWinklerParams",
    "SubstringMatch",
    "damerau_levenshtein",
    "indel_distance",
    "indel_normalized_similarity",
    "jaro",
    "jaro_winkler",
    "jaro_winkler_custom",
    "lcs_seq_distance",
    "lcs_seq_normalized_similarity",
    "lcs_seq_similarity",
    "levenshtein",
    "normalized_damerau_levenshtein",
    "normalized_levenshtein",
    "normalized_osa_similarity",
    "osa_distance",
    "substring_similarity",
]
