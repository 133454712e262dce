"""Suggestion engine."""

from stringmetrics.modules.suggest.service import SuggestOptions, Suggestion, suggest

__all__ = [
    "SuggestOptions",
    "Suggestion",
    "suggest",
]
