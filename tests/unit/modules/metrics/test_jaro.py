"""Tests for Jaro and Jaro-Winkler similarity."""

from __future__ import annotations

import pytest

from stringmetrics.modules.metrics.jaro import (
    JaroWinklerParams,
    common_prefix_length,
    jaro,
    jaro_winkler,
    jaro_winkler_custom,
)


class TestJaro:
    """Tests for jaro function."""

    def test_identical(self) -> None:
        """Identical strings score 1."""
        assert jaro("python", "python") == 1.0

    def test_transposition(self) -> None:
        """MARTHA/MARHTA is the textbook example."""
        assert jaro("MARTHA", "MARHTA") == pytest.approx(0.944444, abs=1e-6)

    def test_partial_match(self) -> None:
        """DWAYNE/DUANE shares four characters."""
        assert jaro("DWAYNE", "DUANE") == pytest.approx(0.822222, abs=1e-6)

    def test_no_common_characters(self) -> None:
        """Disjoint strings score 0."""
        assert jaro("abc", "xyz") == 0.0

    def test_empty(self) -> None:
        """Both empty is identical, one empty scores 0."""
        assert jaro("", "") == 1.0
        assert jaro("abc", "") == 0.0
        assert jaro("", "abc") == 0.0

    def test_single_characters(self) -> None:
        """Search window never goes negative."""
        assert jaro("a", "a") == 1.0
        assert jaro("a", "b") == 0.0


class TestJaroWinkler:
    """Tests for jaro_winkler and jaro_winkler_custom."""

    def test_prefix_boost(self) -> None:
        """Shared prefix raises the Jaro score."""
        assert jaro_winkler("MARTHA", "MARHTA") == pytest.approx(0.961111, abs=1e-6)
        assert jaro_winkler("DWAYNE", "DUANE") == pytest.approx(0.84, abs=1e-6)
        assert jaro_winkler("DIXON", "DICKSONX") == pytest.approx(0.813333, abs=1e-6)

    def test_no_boost_below_threshold(self) -> None:
        """Low Jaro scores are returned unchanged."""
        assert jaro("abcdefgh", "abxxxxxx") == pytest.approx(0.5)
        assert jaro_winkler("abcdefgh", "abxxxxxx") == pytest.approx(0.5)

    def test_custom_always_boosts(self) -> None:
        """The custom variant ignores the threshold."""
        assert jaro_winkler_custom("abcdefgh", "abxxxxxx") == pytest.approx(0.6)

    def test_custom_parameters(self) -> None:
        """Prefix scale and cap change the boost."""
        assert jaro_winkler_custom("MARTHA", "MARHTA", 0.2, 2) == pytest.approx(
            17 / 18 + 2 * 0.2 * (1 / 18)
        )

    def test_custom_not_clamped(self) -> None:
        """Large prefix scales can exceed 1."""
        assert jaro_winkler_custom("abcdx", "abcdy", prefix_scale=0.5) > 1.0

    def test_default_params(self) -> None:
        """Params default to Winkler's standard values."""
        params = JaroWinklerParams()
        assert params.prefix_scale == 0.1
        assert params.max_prefix == 4


class TestCommonPrefixLength:
    """Tests for common_prefix_length."""

    def test_counts_shared_prefix(self) -> None:
        """Stops at the first difference."""
        assert common_prefix_length("abcdef", "abcxyz", 4) == 3

    def test_respects_limit(self) -> None:
        """Never counts past the limit."""
        assert common_prefix_length("abcdef", "abcdef", 2) == 2

    def test_no_shared_prefix(self) -> None:
        """Different first characters give 0."""
        assert common_prefix_length("abc", "xbc", 4) == 0


class TestSymmetry:
    """Argument order never changes Jaro based scores."""

    @pytest.mark.parametrize("metric", [jaro, jaro_winkler, jaro_winkler_custom])
    @pytest.mark.parametrize(
        ("s1", "s2"),
        [
            ("MARTHA", "MARHTA"),
            ("DWAYNE", "DUANE"),
            ("pythn", "python"),
            ("crate", "trace"),
            ("", "abc"),
        ],
    )
    def test_symmetric(self, metric, s1: str, s2: str) -> None:
        """metric(a, b) equals metric(b, a)."""
        assert metric(s1, s2) == pytest.approx(metric(s2, s1))
