"""Best-match extraction from a list of choices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from stringmetrics.errors import InvalidArgumentError
from stringmetrics.infrastructure.logging import get_logger
from stringmetrics.modules.fuzz.ratios import ratio

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

__all__ = [
    "ExtractOptions",
    "ExtractResult",
    "extract",
    "extract_one",
]

logger = get_logger(__name__)


def _identity(value: str) -> str:
    return value


@dataclass(frozen=True)
class ExtractOptions:
    """Immutable options for extract and extract_one.

    Attributes:
        scorer: Pairwise scoring function. Defaults to ``ratio`` (0-100).
        processor: Applied to the query and every choice before scoring.
        score_cutoff: Minimum score (inclusive) for a choice to qualify.
        limit: Maximum number of results from extract; None means all.
    """

    scorer: Callable[[str, str], float] = field(default=ratio)
    processor: Callable[[str], str] = field(default=_identity)
    score_cutoff: float = 0
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise InvalidArgumentError(f"limit must be non-negative, got {self.limit}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ExtractOptions:
        """Build options from a loosely typed mapping.

        Accepts ``scoreCutoff``/``score_cutoff``. A string ``scorer`` is
        resolved as a similarity metric name (0-1 scale). Malformed cutoff
        or limit values fall back to their defaults.

        Raises:
            UnknownMetricError: If ``scorer`` names no similarity metric.
        """
        scorer = data.get("scorer")
        if isinstance(scorer, str):
            from stringmetrics.modules.dispatch.router import similarity_function

            scorer = similarity_function(scorer)

        cutoff = data.get("scoreCutoff", data.get("score_cutoff"))
        if cutoff is not None and not _is_number(cutoff):
            logger.warning(
                "extract_option_ignored", option="score_cutoff", value=cutoff
            )
            cutoff = None

        limit = data.get("limit")
        if limit is not None and not _is_count(limit):
            logger.warning("extract_option_ignored", option="limit", value=limit)
            limit = None

        return cls(
            scorer=scorer or ratio,
            processor=data.get("processor") or _identity,
            score_cutoff=cutoff if cutoff is not None else 0,
            limit=limit,
        )


@dataclass(frozen=True)
class ExtractResult:
    """A scored choice and its position in the original list."""

    choice: str
    score: float
    index: int


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _score_choices(
    query: str, choices: Sequence[str], options: ExtractOptions
) -> list[ExtractResult]:
    processed_query = options.processor(query)
    return [
        ExtractResult(
            choice=choice,
            score=options.scorer(processed_query, options.processor(choice)),
            index=index,
        )
        for index, choice in enumerate(choices)
    ]


def extract_one(
    query: str,
    choices: Sequence[str],
    options: ExtractOptions | None = None,
) -> ExtractResult | None:
    """Find the best match for a query.

    On equal scores the earliest choice wins.

    Args:
        query: String to match.
        choices: Candidate strings.
        options: Scorer, processor and cutoff.

    Returns:
        The best qualifying match, or None if there are no choices or none
        reaches the cutoff.
    """
    options = options or ExtractOptions()
    if not choices:
        return None

    best: ExtractResult | None = None
    best_score = -math.inf
    for result in _score_choices(query, choices, options):
        if result.score >= options.score_cutoff and result.score > best_score:
            best = result
            best_score = result.score

    logger.debug(
        "extract_one_complete",
        choices=len(choices),
        match=best.choice if best else None,
        score=best.score if best else None,
    )
    return best


def extract(
    query: str,
    choices: Sequence[str],
    options: ExtractOptions | None = None,
) -> list[ExtractResult]:
    """Rank every qualifying choice by score, best first.

    Choices with equal scores keep their original relative order.

    Args:
        query: String to match.
        choices: Candidate strings.
        options: Scorer, processor, cutoff and limit.

    Returns:
        Matches sorted by descending score, truncated to ``options.limit``.
    """
    options = options or ExtractOptions()
    if not choices:
        return []

    qualifying = [
        result
        for result in _score_choices(query, choices, options)
        if result.score >= options.score_cutoff
    ]
    # list.sort is stable, so ties stay in input order
    qualifying.sort(key=lambda result: result.score, reverse=True)

    if options.limit is not None:
        qualifying = qualifying[: options.limit]

    logger.debug(
        "extract_complete",
        choices=len(choices),
        matches=len(qualifying),
        limit=options.limit,
    )
    return qualifying
