"""Text normalization."""

from stringmetrics.modules.text.normalization import (
    Locale,
    NormalizationPreset,
    case_fold,
    normalize,
)

__all__ = [
    "Locale",
    "NormalizationPreset",
    "case_fold",
    "normalize",
]
