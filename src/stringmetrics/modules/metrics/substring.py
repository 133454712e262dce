"""Longest common contiguous substring similarity."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "SubstringMatch",
    "substring_similarity",
]


@dataclass(frozen=True)
class SubstringMatch:
    """Longest common substring of a query and a candidate.

    Ranges are half-open ``(start, end)`` code point offsets. When nothing
    matches both ranges are ``(0, 0)``.
    """

    score: float
    query_range: tuple[int, int]
    candidate_range: tuple[int, int]

    @property
    def length(self) -> int:
        """Length of the matched run."""
        return self.query_range[1] - self.query_range[0]


def substring_similarity(query: str, candidate: str) -> SubstringMatch:
    """Find the longest common contiguous substring of two strings.

    Scored Dice style as ``2 * length / (len(query) + len(candidate))``.
    Among several runs of maximal length the first one reached in
    row-major scan order (query outer, candidate inner) is reported.

    Args:
        query: String being searched for.
        candidate: String being searched in.

    Returns:
        SubstringMatch with the score and the run's range in both inputs.
    """
    len_q, len_c = len(query), len(candidate)

    # Only the previous DP row is needed to extend a run diagonally
    previous_row = [0] * (len_c + 1)
    best = 0
    end_q = 0
    end_c = 0

    for i in range(1, len_q + 1):
        current_row = [0] * (len_c + 1)
        cq = query[i - 1]
        for j in range(1, len_c + 1):
            if cq == candidate[j - 1]:
                run = previous_row[j - 1] + 1
                current_row[j] = run
                if run > best:
                    best = run
                    end_q = i
                    end_c = j
        previous_row = current_row

    score = 0.0 if best == 0 else 2 * best / (len_q + len_c)
    return SubstringMatch(
        score=score,
        query_range=(end_q - best, end_q),
        candidate_range=(end_c - best, end_c),
    )
