"""Tests for fixture validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stringmetrics.modules.validation.validator import (
    ValidationReport,
    ValidationResult,
    validate_case,
    validate_file,
    validate_fixtures,
)

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


FAILING_FIXTURE = """\
version: "1"
test_cases:
  - category: levenshtein
    cases:
      - description: wrong distance
        input_a: kitten
        input_b: sitting
        expected_distance: 2
"""


class TestValidateCase:
    """Tests for validate_case function."""

    def test_levenshtein_pass(self) -> None:
        """Matching distance and score pass."""
        result = validate_case(
            "f.yaml",
            "levenshtein",
            {
                "description": "classic",
                "input_a": "kitten",
                "input_b": "sitting",
                "expected_distance": 3,
                "expected_score": 4 / 7,
            },
        )

        assert result.passed is True
        assert result.file == "f.yaml"
        assert result.description == "classic"
        assert result.actual is not None
        assert "distance=3" in result.actual

    def test_expectations_are_optional(self) -> None:
        """Missing expectations are not checked."""
        case = {"input_a": "ca", "input_b": "abc"}
        result = validate_case("f.yaml", "damerau_osa", case)

        assert result.passed is True

    def test_distance_mismatch(self) -> None:
        """Wrong distance fails with both values recorded."""
        result = validate_case(
            "f.yaml",
            "damerau_unrestricted",
            {
                "description": "d",
                "input_a": "ca",
                "input_b": "abc",
                "expected_distance": 3,
            },
        )

        assert result.passed is False
        assert result.expected == "distance=3, score=None"
        assert result.actual is not None
        assert result.actual.startswith("distance=2")

    def test_score_tolerance(self) -> None:
        """Scores must agree to within 1e-10."""
        case = {"input_a": "MARTHA", "input_b": "MARHTA"}

        exact = {**case, "expected_score": 0.9611111111111111}
        rounded = {**case, "expected_score": 0.9611}

        assert validate_case("f", "jaro_winkler", exact).passed
        assert not validate_case("f", "jaro_winkler", rounded).passed

    def test_substring_range(self) -> None:
        """Ranges may be a mapping or a pair."""
        case = {"needle": "abc", "haystack": "xxabcxx", "expected_score": 0.6}

        as_mapping = {**case, "expected_range": {"start": 2, "end": 5}}
        as_pair = {**case, "expected_range": [2, 5]}

        assert validate_case("f", "substring", as_mapping).passed
        assert validate_case("f", "substring", as_pair).passed

    def test_substring_missing_range_means_empty(self) -> None:
        """Without a recorded range the match must be empty."""
        matched = {"needle": "abc", "haystack": "xxabcxx", "expected_score": 0.6}
        unmatched = {"needle": "abc", "haystack": "xyz", "expected_score": 0.0}

        assert not validate_case("f", "substring", matched).passed
        assert validate_case("f", "substring", unmatched).passed

    def test_normalization(self) -> None:
        """Normalization cases compare exact strings."""
        case = {
            "input": "DIYARBAKIR",
            "preset": "default",
            "locale": "tr",
            "expected": "dıyarbakır",
        }

        assert validate_case("f", "normalization_presets", case).passed

    def test_library_error_reported(self) -> None:
        """A bad preset becomes a failed result with the error message."""
        result = validate_case(
            "f",
            "normalization_presets",
            {"description": "bad", "input": "x", "preset": "fancy", "expected": "x"},
        )

        assert result.passed is False
        assert result.error is not None
        assert "fancy" in result.error

    def test_suggestions(self) -> None:
        """Suggestion lists are compared element by element."""
        case = {
            "input": "abc",
            "candidates": ["xxabcxx", "zzz"],
            "options": {"metric": "substring", "min_score": 0.5},
            "expected": [
                {
                    "value": "xxabcxx",
                    "score": 0.6,
                    "matched_range": {"start": 2, "end": 5},
                }
            ],
        }

        assert validate_case("f", "suggestions", case).passed

    def test_suggestions_length_mismatch(self) -> None:
        """Extra or missing suggestions fail."""
        case = {
            "input": "abc",
            "candidates": ["xxabcxx"],
            "options": {"metric": "substring", "min_score": 0.5},
            "expected": [],
        }

        assert not validate_case("f", "suggestions", case).passed

    def test_unknown_category(self) -> None:
        """Unknown categories fail with an explanation."""
        result = validate_case("f", "soundex", {"description": "x"})

        assert result == ValidationResult(
            file="f",
            category="soundex",
            description="x",
            passed=False,
            error="Unknown category: soundex",
        )


class TestValidateFixtures:
    """Tests for validate_file and validate_fixtures."""

    def test_sample_fixtures_pass(self, fixtures_dir: Path) -> None:
        """The bundled sample fixture is consistent with the engines."""
        report = validate_fixtures(str(fixtures_dir / "*.yaml"))

        assert report.files_processed >= 1
        assert report.total > 0
        assert report.failures == []
        assert report.ok

    def test_failures_counted(self, tmp_path: Path) -> None:
        """Failing cases appear in the report."""
        _write(tmp_path / "bad.yaml", FAILING_FIXTURE)

        report = validate_fixtures(str(tmp_path / "*.yaml"))

        assert report.files_processed == 1
        assert report.total == 1
        assert report.failed == 1
        assert report.failures[0].file == "bad.yaml"
        assert not report.ok

    def test_unreadable_file_does_not_abort(self, tmp_path: Path) -> None:
        """Malformed files are recorded and the run continues."""
        _write(tmp_path / "a_broken.yaml", "test_cases: [unclosed")
        _write(tmp_path / "b_bad.yaml", FAILING_FIXTURE)

        report = validate_fixtures(str(tmp_path / "*.yaml"))

        assert report.files_processed == 2
        assert len(report.file_errors) == 1
        assert report.file_errors[0][0].endswith("a_broken.yaml")
        assert report.total == 1

    def test_no_matches(self, tmp_path: Path) -> None:
        """An empty match gives an empty report."""
        report = validate_fixtures(str(tmp_path / "*.yaml"))

        assert report == ValidationReport()
        assert report.ok

    def test_validate_file_raises_on_missing(self, tmp_path: Path) -> None:
        """validate_file reports load problems to the caller."""
        from stringmetrics.infrastructure.fixtures import FixtureError

        with pytest.raises(FixtureError):
            validate_file(tmp_path / "missing.yaml")
