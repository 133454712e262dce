"""Edit distance metrics over code point sequences.

Python strings already index by code point, so a character outside the
Basic Multilingual Plane counts as a single edit unit everywhere here.

Normalized similarities follow one convention: ``1 - distance / maximum``,
where ``maximum`` is the largest distance the metric can report for the
pair. Two empty strings are identical (similarity 1.0).
"""

from __future__ import annotations

__all__ = [
    "damerau_levenshtein",
    "indel_distance",
    "indel_normalized_similarity",
    "lcs_seq_distance",
    "lcs_seq_normalized_similarity",
    "lcs_seq_similarity",
    "levenshtein",
    "normalized_damerau_levenshtein",
    "normalized_levenshtein",
    "normalized_osa_similarity",
    "osa_distance",
]


def _normalized_similarity(distance: int, maximum: int) -> float:
    if maximum == 0:
        return 1.0
    return 1.0 - distance / maximum


def levenshtein(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform s1 into s2.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The edit distance between the strings.
    """
    if len(s1) < len(s2):
        return levenshtein(s2, s1)

    if len(s2) == 0:
        return len(s1)

    # Use two rows instead of full matrix for space efficiency
    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def normalized_levenshtein(s1: str, s2: str) -> float:
    """Levenshtein similarity scaled to [0, 1] by the longer length."""
    return _normalized_similarity(levenshtein(s1, s2), max(len(s1), len(s2)))


def osa_distance(s1: str, s2: str) -> int:
    """Calculate Optimal String Alignment distance.

    Levenshtein plus transposition of two adjacent characters, with the
    restriction that no substring is edited more than once. OSA does not
    satisfy the triangle inequality: ``osa("ca", "abc") == 3`` although the
    unrestricted Damerau-Levenshtein distance is 2.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The restricted edit distance.
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    width = len(s2) + 1
    # Transposition looks two rows back
    before_previous: list[int] = []
    previous_row = list(range(width))

    for i in range(1, len(s1) + 1):
        c1 = s1[i - 1]
        current_row = [i] + [0] * (width - 1)
        for j in range(1, width):
            c2 = s2[j - 1]
            best = min(
                previous_row[j] + 1,
                current_row[j - 1] + 1,
                previous_row[j - 1] + (c1 != c2),
            )
            if i > 1 and j > 1 and c1 == s2[j - 2] and s1[i - 2] == c2:
                best = min(best, before_previous[j - 2] + 1)
            current_row[j] = best
        before_previous, previous_row = previous_row, current_row

    return previous_row[-1]


def normalized_osa_similarity(s1: str, s2: str) -> float:
    """OSA similarity scaled to [0, 1] by the longer length."""
    return _normalized_similarity(osa_distance(s1, s2), max(len(s1), len(s2)))


def damerau_levenshtein(s1: str, s2: str) -> int:
    """Calculate unrestricted Damerau-Levenshtein distance.

    Tracks the last row in which every character of s1 was seen, so a
    transposition may span characters that were inserted in between.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The unrestricted edit distance with transpositions.
    """
    len1, len2 = len(s1), len(s2)
    if not len1:
        return len2
    if not len2:
        return len1

    sentinel = len1 + len2
    # Flat (len1 + 2) x (len2 + 2) matrix, row-major; row/col 0 hold sentinels
    width = len2 + 2
    d = [0] * ((len1 + 2) * width)
    d[0] = sentinel
    for i in range(len1 + 1):
        d[(i + 1) * width] = sentinel
        d[(i + 1) * width + 1] = i
    for j in range(len2 + 1):
        d[j + 1] = sentinel
        d[width + j + 1] = j

    last_row: dict[str, int] = {}
    for i in range(1, len1 + 1):
        c1 = s1[i - 1]
        last_match_col = 0
        for j in range(1, len2 + 1):
            c2 = s2[j - 1]
            k = last_row.get(c2, 0)
            col = last_match_col
            if c1 == c2:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            d[(i + 1) * width + j + 1] = min(
                d[i * width + j] + cost,
                d[(i + 1) * width + j] + 1,
                d[i * width + j + 1] + 1,
                d[k * width + col] + (i - k - 1) + 1 + (j - col - 1),
            )
        last_row[c1] = i

    return d[(len1 + 1) * width + len2 + 1]


def normalized_damerau_levenshtein(s1: str, s2: str) -> float:
    """Damerau-Levenshtein similarity scaled to [0, 1] by the longer length."""
    return _normalized_similarity(
        damerau_levenshtein(s1, s2), max(len(s1), len(s2))
    )


def lcs_seq_similarity(s1: str, s2: str) -> int:
    """Length of the longest common subsequence of two strings.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Number of characters in the longest common subsequence.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return 0

    previous_row = [0] * (len(s2) + 1)
    for c1 in s1:
        current_row = [0]
        for j, c2 in enumerate(s2):
            if c1 == c2:
                current_row.append(previous_row[j] + 1)
            else:
                current_row.append(max(previous_row[j + 1], current_row[j]))
        previous_row = current_row

    return previous_row[-1]


def lcs_seq_distance(s1: str, s2: str) -> int:
    """Characters of the longer string outside the longest common subsequence.

    ``lcs_seq_distance("AGGTAB", "GXTXAYB") == 7 - 4 == 3``.
    """
    return max(len(s1), len(s2)) - lcs_seq_similarity(s1, s2)


def lcs_seq_normalized_similarity(s1: str, s2: str) -> float:
    """LCS length relative to the longer string, in [0, 1]."""
    return _normalized_similarity(lcs_seq_distance(s1, s2), max(len(s1), len(s2)))


def indel_distance(s1: str, s2: str) -> int:
    """Edit distance using only insertions and deletions.

    Equal to ``len(s1) + len(s2) - 2 * lcs``.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Minimum number of insertions and deletions.
    """
    return len(s1) + len(s2) - 2 * lcs_seq_similarity(s1, s2)


def indel_normalized_similarity(s1: str, s2: str) -> float:
    """Indel similarity scaled to [0, 1] by the combined length."""
    return _normalized_similarity(indel_distance(s1, s2), len(s1) + len(s2))
