"""Fuzzy ratios on a 0-100 scale.

All ratios are built on the Indel normalized similarity. Token based ratios
split on runs of whitespace; tokens are compared case-sensitively, so
callers that want case-insensitive matching normalize first.
"""

from __future__ import annotations

from stringmetrics.modules.metrics.edit import indel_normalized_similarity

__all__ = [
    "partial_ratio",
    "ratio",
    "token_set_ratio",
    "token_sort_ratio",
    "tokenize",
]


def tokenize(text: str) -> list[str]:
    """Split text on whitespace runs, dropping empty tokens."""
    return text.split()


def ratio(s1: str, s2: str) -> float:
    """Indel similarity of two strings as a percentage.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Score in [0, 100]; two empty strings score 100.
    """
    return indel_normalized_similarity(s1, s2) * 100


def partial_ratio(s1: str, s2: str) -> float:
    """Best ratio of the shorter string against any equal-length window.

    If the shorter string occurs verbatim inside the longer one the result
    is 100 without scanning. Otherwise every window of the shorter string's
    length is scored and the maximum kept.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Score in [0, 100]. Both empty scores 100; exactly one empty scores 0.
    """
    if not s1 or not s2:
        return 100.0 if s1 == s2 else 0.0

    shorter, longer = (s1, s2) if len(s1) <= len(s2) else (s2, s1)

    if shorter in longer:
        return ratio(shorter, shorter)

    width = len(shorter)
    best = 0.0
    for start in range(len(longer) - width + 1):
        best = max(best, ratio(shorter, longer[start : start + width]))
    return best


def token_sort_ratio(s1: str, s2: str) -> float:
    """Ratio after sorting each string's tokens.

    ``token_sort_ratio("new york mets", "mets york new") == 100``.
    """
    sorted1 = " ".join(sorted(tokenize(s1)))
    sorted2 = " ".join(sorted(tokenize(s2)))
    return ratio(sorted1, sorted2)


def token_set_ratio(s1: str, s2: str) -> float:
    """Ratio over the token sets, insensitive to order and duplicates.

    The shared tokens ``I`` and the tokens unique to each side ``D1``/``D2``
    are each sorted and joined. The strings ``I D1`` and ``I D2`` are
    compared with each other and, when ``I`` is non-empty, with ``I``
    itself; the best ratio wins.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Score in [0, 100]. Both token lists empty scores 100; exactly one
        empty scores 0.
    """
    tokens1 = set(tokenize(s1))
    tokens2 = set(tokenize(s2))

    if not tokens1 and not tokens2:
        return 100.0
    if not tokens1 or not tokens2:
        return 0.0

    intersection = " ".join(sorted(tokens1 & tokens2))
    diff1 = " ".join(sorted(tokens1 - tokens2))
    diff2 = " ".join(sorted(tokens2 - tokens1))

    combined1 = intersection + (f" {diff1}" if diff1 else "")
    combined2 = intersection + (f" {diff2}" if diff2 else "")

    scores = [ratio(combined1, combined2)]
    if intersection:
        scores.extend(
            [
                ratio(intersection, intersection),
                ratio(intersection, combined1),
                ratio(intersection, combined2),
            ]
        )
    return max(scores)
