"""Ranked suggestions for a query against a list of candidates.

Each call runs a single pass: normalize the query and every candidate,
score each pair with the chosen metric, optionally reward candidates that
start with the query, then filter, rank and truncate.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from stringmetrics.errors import InvalidArgumentError
from stringmetrics.infrastructure.logging import get_logger
from stringmetrics.modules.dispatch.router import (
    Metric,
    resolve_suggest_metric,
    similarity_function,
)
from stringmetrics.modules.metrics.jaro import (
    DEFAULT_MAX_PREFIX,
    DEFAULT_PREFIX_SCALE,
    JaroWinklerParams,
    jaro_winkler_custom,
)
from stringmetrics.modules.metrics.substring import substring_similarity
from stringmetrics.modules.text.normalization import (
    Locale,
    NormalizationPreset,
    normalize,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "DEFAULT_MAX_SUGGESTIONS",
    "DEFAULT_MIN_SCORE",
    "PREFIX_BONUS_WEIGHT",
    "SuggestOptions",
    "Suggestion",
    "suggest",
]

logger = get_logger(__name__)

DEFAULT_MIN_SCORE = 0.6
DEFAULT_MAX_SUGGESTIONS = 5

# Share of the remaining gap to 1.0 closed by the prefix bonus
PREFIX_BONUS_WEIGHT = 0.1

# Explanation labels for metrics scored through the similarity dispatcher
_EXPLANATION_LABELS: dict[Metric, str] = {
    Metric.LEVENSHTEIN: "normalized_levenshtein",
    Metric.OSA: "normalized_osa_similarity",
    Metric.DAMERAU_LEVENSHTEIN: "normalized_damerau_levenshtein",
    Metric.JARO: "jaro",
    Metric.RATIO: "ratio",
    Metric.PARTIAL_RATIO: "partial_ratio",
    Metric.TOKEN_SORT_RATIO: "token_sort_ratio",
    Metric.TOKEN_SET_RATIO: "token_set_ratio",
    Metric.INDEL: "indel_normalized_similarity",
    Metric.LCS_SEQ: "lcs_seq_normalized_similarity",
}

# External spellings accepted by SuggestOptions.from_mapping
_OPTION_KEYS: dict[str, tuple[str, ...]] = {
    "metric": ("metric",),
    "preset": ("preset",),
    "normalize_preset": ("normalizePreset", "normalize_preset"),
    "locale": ("locale",),
    "min_score": ("minScore", "min_score"),
    "max_suggestions": ("maxSuggestions", "max_suggestions"),
    "prefer_prefix": ("preferPrefix", "prefer_prefix"),
    "jaro_prefix_scale": ("jaroPrefixScale", "jaro_prefix_scale"),
    "jaro_max_prefix": ("jaroMaxPrefix", "jaro_max_prefix"),
}


@dataclass(frozen=True)
class SuggestOptions:
    """Immutable options for a suggest call.

    Attributes:
        metric: Scoring metric; any similarity metric or ``substring``.
        preset: Normalization preset applied to query and candidates.
        normalize_preset: Secondary spelling of ``preset``, used only when
            ``preset`` is unset.
        locale: Optional locale for case folding.
        min_score: Candidates scoring below this are dropped.
        max_suggestions: Maximum number of suggestions returned.
        prefer_prefix: Reward candidates that start with the query.
        jaro_prefix_scale: Prefix weight for the jaro_winkler metric.
        jaro_max_prefix: Prefix cap for the jaro_winkler metric.
    """

    metric: Metric = Metric.JARO_WINKLER
    preset: NormalizationPreset | str | None = None
    normalize_preset: NormalizationPreset | str | None = None
    locale: Locale | str | None = None
    min_score: float = DEFAULT_MIN_SCORE
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    prefer_prefix: bool = False
    jaro_prefix_scale: float = DEFAULT_PREFIX_SCALE
    jaro_max_prefix: int = DEFAULT_MAX_PREFIX

    def __post_init__(self) -> None:
        object.__setattr__(self, "metric", resolve_suggest_metric(self.metric))
        if self.max_suggestions < 0:
            raise InvalidArgumentError(
                f"max_suggestions must be non-negative, got {self.max_suggestions}"
            )

    @property
    def effective_preset(self) -> NormalizationPreset | str:
        """Preset actually applied: ``preset``, then ``normalize_preset``.

        Only None counts as unset, so an empty string still reaches preset
        validation.
        """
        if self.preset is not None:
            return self.preset
        if self.normalize_preset is not None:
            return self.normalize_preset
        return NormalizationPreset.DEFAULT

    @property
    def jaro_params(self) -> JaroWinklerParams:
        """Prefix weighting used when the metric is jaro_winkler."""
        return JaroWinklerParams(
            prefix_scale=self.jaro_prefix_scale,
            max_prefix=self.jaro_max_prefix,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SuggestOptions:
        """Build options from camelCase or snake_case keys.

        Values of the wrong type or out of range fall back to the default
        with a warning. Preset and locale strings are validated later, when
        normalization runs.

        Raises:
            UnknownMetricError: If ``metric`` names no suggestion metric.
        """
        raw: dict[str, Any] = {}
        for name, keys in _OPTION_KEYS.items():
            for key in keys:
                if data.get(key) is not None:
                    raw[name] = data[key]
                    break

        values: dict[str, Any] = {}
        if "metric" in raw:
            values["metric"] = resolve_suggest_metric(raw["metric"])

        for name in ("preset", "normalize_preset", "locale"):
            if name in raw:
                if isinstance(raw[name], str):
                    values[name] = raw[name]
                else:
                    _warn_ignored(name, raw[name])

        if "min_score" in raw:
            if _is_number(raw["min_score"]):
                values["min_score"] = float(raw["min_score"])
            else:
                _warn_ignored("min_score", raw["min_score"])

        if "jaro_prefix_scale" in raw:
            if _is_number(raw["jaro_prefix_scale"]):
                values["jaro_prefix_scale"] = float(raw["jaro_prefix_scale"])
            else:
                _warn_ignored("jaro_prefix_scale", raw["jaro_prefix_scale"])

        for name in ("max_suggestions", "jaro_max_prefix"):
            if name in raw:
                if _is_count(raw[name]):
                    values[name] = int(raw[name])
                else:
                    _warn_ignored(name, raw[name])

        if "prefer_prefix" in raw:
            if isinstance(raw["prefer_prefix"], bool):
                values["prefer_prefix"] = raw["prefer_prefix"]
            else:
                _warn_ignored("prefer_prefix", raw["prefer_prefix"])

        return cls(**values)


@dataclass(frozen=True)
class Suggestion:
    """A ranked candidate.

    Attributes:
        value: The candidate exactly as supplied.
        score: Final score, including any prefix bonus.
        normalized_value: The candidate after normalization.
        matched_range: Half-open candidate range of the longest common
            substring; only set by the ``substring`` metric.
        reason: Comma separated explanation of how the score was reached.
    """

    value: str
    score: float
    normalized_value: str | None = None
    matched_range: tuple[int, int] | None = None
    reason: str | None = None


@dataclass
class _Scored:
    score: float
    reasons: list[str] = field(default_factory=list)
    matched_range: tuple[int, int] | None = None


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _warn_ignored(option: str, value: object) -> None:
    logger.warning("suggest_option_ignored", option=option, value=value)


def _score_candidate(query: str, candidate: str, options: SuggestOptions) -> _Scored:
    metric = options.metric

    if metric is Metric.SUBSTRING:
        match = substring_similarity(query, candidate)
        return _Scored(
            score=match.score,
            reasons=[f"substring score={match.score:.4f}"],
            matched_range=match.candidate_range,
        )

    if metric is Metric.JARO_WINKLER:
        params = options.jaro_params
        value = jaro_winkler_custom(
            query, candidate, params.prefix_scale, params.max_prefix
        )
        return _Scored(
            score=value,
            reasons=[
                f"jaro_winkler(prefix_scale={params.prefix_scale}, "
                f"max_prefix={params.max_prefix})={value:.4f}"
            ],
        )

    value = similarity_function(metric)(query, candidate)
    return _Scored(score=value, reasons=[f"{_EXPLANATION_LABELS[metric]}={value:.4f}"])


def suggest(
    query: str,
    candidates: Sequence[str],
    options: SuggestOptions | Mapping[str, Any] | None = None,
) -> list[Suggestion]:
    """Rank candidates by similarity to a query.

    Args:
        query: The user's input.
        candidates: Strings to rank.
        options: SuggestOptions, or a mapping accepted by
            ``SuggestOptions.from_mapping``.

    Returns:
        Suggestions scoring at least ``min_score``, best first, at most
        ``max_suggestions`` long. Equal scores keep candidate order.

    Raises:
        UnknownMetricError: If the metric is not a suggestion metric.
        InvalidArgumentError: If the preset or locale is not recognized.
    """
    if options is None:
        options = SuggestOptions()
    elif isinstance(options, Mapping):
        options = SuggestOptions.from_mapping(options)

    preset = options.effective_preset
    normalized_query = normalize(query, preset, options.locale)

    suggestions: list[Suggestion] = []
    for candidate in candidates:
        normalized_candidate = normalize(candidate, preset, options.locale)
        scored = _score_candidate(normalized_query, normalized_candidate, options)

        if options.prefer_prefix and normalized_candidate.startswith(normalized_query):
            scored.score = min(
                1.0, scored.score + (1.0 - scored.score) * PREFIX_BONUS_WEIGHT
            )
            scored.reasons.append("prefix_bonus")

        if scored.score < options.min_score:
            continue

        suggestions.append(
            Suggestion(
                value=candidate,
                score=scored.score,
                normalized_value=normalized_candidate,
                matched_range=scored.matched_range,
                reason=", ".join(scored.reasons),
            )
        )

    # list.sort is stable, so ties stay in candidate order
    suggestions.sort(key=lambda s: s.score, reverse=True)
    suggestions = suggestions[: options.max_suggestions]

    logger.debug(
        "suggest_complete",
        metric=options.metric.value,
        candidates=len(candidates),
        suggestions=len(suggestions),
    )
    return suggestions
