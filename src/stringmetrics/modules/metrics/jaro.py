"""Jaro and Jaro-Winkler similarity."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_MAX_PREFIX",
    "DEFAULT_PREFIX_SCALE",
    "WINKLER_BOOST_THRESHOLD",
    "JaroWinklerParams",
    "common_prefix_length",
    "jaro",
    "jaro_winkler",
    "jaro_winkler_custom",
]

DEFAULT_PREFIX_SCALE = 0.1
DEFAULT_MAX_PREFIX = 4

# Winkler only boosts pairs that are already similar
WINKLER_BOOST_THRESHOLD = 0.7


@dataclass(frozen=True)
class JaroWinklerParams:
    """Prefix weighting for Jaro-Winkler.

    Attributes:
        prefix_scale: Weight per shared prefix character. Values above 0.25
            can push the score above 1.0; they are not clamped.
        max_prefix: Maximum number of shared prefix characters counted.
    """

    prefix_scale: float = DEFAULT_PREFIX_SCALE
    max_prefix: int = DEFAULT_MAX_PREFIX


def jaro(s1: str, s2: str) -> float:
    """Calculate Jaro similarity between two strings.

    Characters match when equal and no further apart than
    ``max(len1, len2) // 2 - 1`` positions. The score combines the share of
    matched characters on each side with the share of matches that are in
    the same order.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Similarity in [0, 1]; 1.0 for identical strings (including two
        empty ones), 0.0 when one side is empty or nothing matches.
    """
    len1, len2 = len(s1), len(s2)
    if not len1 and not len2:
        return 1.0
    if not len1 or not len2:
        return 0.0

    window = max(max(len1, len2) // 2 - 1, 0)
    matched1 = [False] * len1
    matched2 = [False] * len2
    matches = 0

    for i, c1 in enumerate(s1):
        low = max(0, i - window)
        high = min(len2, i + window + 1)
        for j in range(low, high):
            if not matched2[j] and s2[j] == c1:
                matched1[i] = True
                matched2[j] = True
                matches += 1
                break

    if not matches:
        return 0.0

    # Matched characters that appear in a different order, counted in halves
    half_transpositions = 0
    j = 0
    for i, c1 in enumerate(s1):
        if not matched1[i]:
            continue
        while not matched2[j]:
            j += 1
        if c1 != s2[j]:
            half_transpositions += 1
        j += 1
    transpositions = half_transpositions // 2

    return (
        matches / len1 + matches / len2 + (matches - transpositions) / matches
    ) / 3.0


def common_prefix_length(s1: str, s2: str, limit: int) -> int:
    """Count leading characters shared by both strings, up to ``limit``."""
    length = 0
    for c1, c2 in zip(s1, s2):
        if length >= limit or c1 != c2:
            break
        length += 1
    return length


def jaro_winkler(
    s1: str,
    s2: str,
    *,
    prefix_scale: float = DEFAULT_PREFIX_SCALE,
    max_prefix: int = DEFAULT_MAX_PREFIX,
    boost_threshold: float | None = WINKLER_BOOST_THRESHOLD,
) -> float:
    """Calculate Jaro-Winkler similarity.

    ``jaro + L * prefix_scale * (1 - jaro)`` where ``L`` is the shared prefix
    length capped at ``max_prefix``. With the default ``boost_threshold`` the
    prefix bonus applies only when the Jaro score exceeds 0.7, which is how
    the reference fixtures were produced.

    Args:
        s1: First string.
        s2: Second string.
        prefix_scale: Weight per shared prefix character.
        max_prefix: Maximum prefix length counted.
        boost_threshold: Minimum Jaro score (exclusive) for the prefix
            bonus, or None to always apply it.

    Returns:
        Jaro-Winkler similarity (not clamped).
    """
    similarity = jaro(s1, s2)
    if boost_threshold is not None and similarity <= boost_threshold:
        return similarity

    prefix = common_prefix_length(s1, s2, max_prefix)
    return similarity + prefix * prefix_scale * (1.0 - similarity)


def jaro_winkler_custom(
    s1: str,
    s2: str,
    prefix_scale: float = DEFAULT_PREFIX_SCALE,
    max_prefix: int = DEFAULT_MAX_PREFIX,
) -> float:
    """Jaro-Winkler with caller-chosen prefix weighting.

    The prefix bonus is applied regardless of the Jaro score, and neither
    parameter is range checked: ``prefix_scale > 0.25`` with a long shared
    prefix yields scores above 1.0.
    """
    return jaro_winkler(
        s1,
        s2,
        prefix_scale=prefix_scale,
        max_prefix=max_prefix,
        boost_threshold=None,
    )
