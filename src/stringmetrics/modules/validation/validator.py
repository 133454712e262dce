"""Check recorded fixture expectations against the metric engines."""

from __future__ import annotations

import glob
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from stringmetrics.errors import StringMetricsError
from stringmetrics.infrastructure.fixtures import FixtureError, load_fixture
from stringmetrics.infrastructure.logging import get_logger
from stringmetrics.modules.metrics.edit import (
    damerau_levenshtein,
    levenshtein,
    normalized_damerau_levenshtein,
    normalized_levenshtein,
    normalized_osa_similarity,
    osa_distance,
)
from stringmetrics.modules.metrics.jaro import jaro_winkler
from stringmetrics.modules.metrics.substring import substring_similarity
from stringmetrics.modules.suggest.service import suggest
from stringmetrics.modules.text.normalization import normalize

__all__ = [
    "SCORE_TOLERANCE",
    "ValidationReport",
    "ValidationResult",
    "validate_case",
    "validate_file",
    "validate_fixtures",
]

logger = get_logger(__name__)

SCORE_TOLERANCE = 1e-10


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one fixture case."""

    file: str
    category: str
    description: str
    passed: bool
    expected: str | None = None
    actual: str | None = None
    error: str | None = None


@dataclass
class ValidationReport:
    """Aggregate outcome of a validation run.

    Attributes:
        files_processed: Files matched by the pattern, readable or not.
        results: One entry per case, in file then case order.
        file_errors: ``(file, message)`` for files that could not be loaded.
    """

    files_processed: int = 0
    results: list[ValidationResult] = field(default_factory=list)
    file_errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failures(self) -> list[ValidationResult]:
        return [r for r in self.results if not r.passed]

    @property
    def ok(self) -> bool:
        """True when every case passed and every file loaded."""
        return self.failed == 0 and not self.file_errors


@dataclass(frozen=True)
class _Check:
    passed: bool
    expected: str | None = None
    actual: str | None = None


def _close(expected: float | None, actual: float) -> bool:
    return expected is None or abs(expected - actual) < SCORE_TOLERANCE


def _text(case: Mapping[str, Any], key: str) -> str:
    value = case.get(key)
    return value if isinstance(value, str) else ""


def _range(value: Any) -> tuple[int, int]:
    """Accept ``{start, end}`` mappings or two-item sequences."""
    if isinstance(value, Mapping):
        return int(value["start"]), int(value["end"])
    start, end = value
    return int(start), int(end)


def _edit_checker(
    distance_fn: Callable[[str, str], int],
    score_fn: Callable[[str, str], float],
) -> Callable[[Mapping[str, Any]], _Check]:
    def check(case: Mapping[str, Any]) -> _Check:
        a, b = _text(case, "input_a"), _text(case, "input_b")
        actual_distance = distance_fn(a, b)
        actual_score = score_fn(a, b)
        expected_distance = case.get("expected_distance")
        expected_score = case.get("expected_score")
        passed = (
            expected_distance is None or expected_distance == actual_distance
        ) and _close(expected_score, actual_score)
        return _Check(
            passed=passed,
            expected=f"distance={expected_distance}, score={expected_score}",
            actual=f"distance={actual_distance}, score={actual_score}",
        )

    return check


def _check_jaro_winkler(case: Mapping[str, Any]) -> _Check:
    actual = jaro_winkler(_text(case, "input_a"), _text(case, "input_b"))
    expected = case.get("expected_score")
    return _Check(
        passed=_close(expected, actual),
        expected=f"score={expected}",
        actual=f"score={actual}",
    )


def _check_substring(case: Mapping[str, Any]) -> _Check:
    match = substring_similarity(_text(case, "needle"), _text(case, "haystack"))
    expected_score = case.get("expected_score")
    raw_range = case.get("expected_range")
    # No recorded range means nothing should have matched
    expected_range = _range(raw_range) if raw_range else (0, 0)
    return _Check(
        passed=_close(expected_score, match.score)
        and match.candidate_range == expected_range,
        expected=f"score={expected_score}, range={expected_range}",
        actual=f"score={match.score}, range={match.candidate_range}",
    )


def _check_normalization(case: Mapping[str, Any]) -> _Check:
    actual = normalize(
        _text(case, "input"), case.get("preset", "none"), case.get("locale")
    )
    expected = case.get("expected")
    return _Check(
        passed=actual == expected, expected=repr(expected), actual=repr(actual)
    )


def _check_suggestions(case: Mapping[str, Any]) -> _Check:
    options = dict(case.get("options") or {})
    preset = options.pop("normalize_preset", None) or options.get("preset")
    if preset is not None:
        options["preset"] = preset

    candidates = list(case.get("candidates") or [])
    results = suggest(_text(case, "input"), candidates, options)
    expected = list(case.get("expected") or [])

    passed = len(results) == len(expected)
    for got, want in zip(results, expected):
        if got.value != want.get("value") or not _close(want.get("score"), got.score):
            passed = False
        want_range = want.get("matched_range")
        if want_range and got.matched_range != _range(want_range):
            passed = False
        want_normalized = want.get("normalized_value")
        if want_normalized and got.normalized_value != want_normalized:
            passed = False

    return _Check(
        passed=passed,
        expected=", ".join(f"{w.get('value')}={w.get('score')}" for w in expected),
        actual=", ".join(f"{r.value}={r.score}" for r in results),
    )


_CHECKERS: dict[str, Callable[[Mapping[str, Any]], _Check]] = {
    "levenshtein": _edit_checker(levenshtein, normalized_levenshtein),
    "damerau_osa": _edit_checker(osa_distance, normalized_osa_similarity),
    "damerau_unrestricted": _edit_checker(
        damerau_levenshtein, normalized_damerau_levenshtein
    ),
    "jaro_winkler": _check_jaro_winkler,
    "substring": _check_substring,
    "normalization_presets": _check_normalization,
    "suggestions": _check_suggestions,
}


def validate_case(
    file: str, category: str, case: Mapping[str, Any]
) -> ValidationResult:
    """Validate a single fixture case.

    Library errors raised while evaluating the case (for example an unknown
    preset) and malformed case data are reported as a failed result.

    Args:
        file: File name recorded in the result.
        category: Fixture category.
        case: Raw case mapping.

    Returns:
        ValidationResult for the case.
    """
    description = str(case.get("description", ""))
    checker = _CHECKERS.get(category)
    if checker is None:
        return ValidationResult(
            file=file,
            category=category,
            description=description,
            passed=False,
            error=f"Unknown category: {category}",
        )

    try:
        check = checker(case)
    except (StringMetricsError, KeyError, TypeError, ValueError) as e:
        return ValidationResult(
            file=file,
            category=category,
            description=description,
            passed=False,
            error=str(e),
        )

    return ValidationResult(
        file=file,
        category=category,
        description=description,
        passed=check.passed,
        expected=check.expected,
        actual=check.actual,
    )


def validate_file(path: Path) -> list[ValidationResult]:
    """Validate every case in one fixture file.

    Raises:
        FixtureError: If the file cannot be loaded.
    """
    document = load_fixture(path)
    results = [
        validate_case(path.name, group.category, case)
        for group in document.categories
        for case in group.cases
    ]
    logger.debug(
        "fixture_validated",
        file=str(path),
        cases=len(results),
        failed=sum(1 for r in results if not r.passed),
    )
    return results


def validate_fixtures(pattern: str) -> ValidationReport:
    """Validate all fixture files matching a glob pattern.

    Files that fail to load are recorded in ``file_errors`` and the run
    continues with the next file.

    Args:
        pattern: Glob pattern; ``**`` matches recursively.

    Returns:
        ValidationReport covering every matched file.
    """
    report = ValidationReport()
    for name in sorted(glob.glob(pattern, recursive=True)):
        path = Path(name)
        if not path.is_file():
            continue
        report.files_processed += 1
        try:
            report.results.extend(validate_file(path))
        except FixtureError as e:
            logger.warning("fixture_load_failed", file=str(path), error=str(e))
            report.file_errors.append((str(path), str(e)))

    logger.debug(
        "fixtures_validated",
        pattern=pattern,
        files=report.files_processed,
        total=report.total,
        failed=report.failed,
    )
    return report
