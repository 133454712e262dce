"""Tests for text normalization."""

from __future__ import annotations

import pytest

from stringmetrics.errors import InvalidArgumentError
from stringmetrics.modules.text.normalization import (
    Locale,
    NormalizationPreset,
    case_fold,
    normalize,
    parse_locale,
    parse_preset,
)

DOT_ABOVE = "\u0307"


class TestPresets:
    """Tests for each normalization preset."""

    def test_none_is_identity(self) -> None:
        """The none preset leaves text untouched."""
        assert normalize("  MiXeD  ") == "  MiXeD  "
        assert normalize("  MiXeD  ", "none") == "  MiXeD  "

    def test_minimal_composes_and_trims(self) -> None:
        """Minimal composes to NFC and trims, keeping case."""
        assert normalize("  Cafe\u0301  ", "minimal") == "Café"

    def test_default_folds_and_trims(self) -> None:
        """Default lowercases, folds sharp s and trims."""
        assert normalize("  HeLLo  ", "default") == "hello"
        assert normalize("Straße", NormalizationPreset.DEFAULT) == "strasse"

    def test_default_composes(self) -> None:
        """Decomposed accents are recomposed."""
        assert normalize("E\u0301", "default") == "é"

    def test_aggressive_strips_marks_and_punctuation(self) -> None:
        """Aggressive keeps only base letters, digits and spaces."""
        assert normalize("Café!", "aggressive") == "cafe"
        assert normalize("  Crème brûlée, 2x! ", "aggressive") == "creme brulee 2x"

    def test_aggressive_compatibility_forms(self) -> None:
        """Ligatures decompose to plain letters."""
        assert normalize("\ufb01le", "aggressive") == "file"

    def test_empty_string(self) -> None:
        """Empty input stays empty for every preset."""
        for preset in NormalizationPreset:
            assert normalize("", preset) == ""

    @pytest.mark.parametrize("preset", ["minimal", "default", "aggressive"])
    @pytest.mark.parametrize("text", ["  Straße Café ", "Ångström", "NEW  York!"])
    def test_idempotent(self, preset: str, text: str) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize(text, preset)
        assert normalize(once, preset) == once

    @pytest.mark.parametrize("preset", ["minimal", "default", "aggressive"])
    @pytest.mark.parametrize(
        ("text", "locale"),
        [
            ("İSTANBUL IĞDIR", "tr"),
            ("DİYARBAKIR Ilık", "az"),
            ("ÌÍĨ Į\u0301 I\u0300", "lt"),
        ],
    )
    def test_idempotent_with_locale(self, preset: str, text: str, locale: str) -> None:
        """Locale folding is stable when applied twice."""
        once = normalize(text, preset, locale)
        assert normalize(once, preset, locale) == once


class TestLocales:
    """Tests for locale-aware case folding."""

    def test_default_dotted_capital_i(self) -> None:
        """Without a locale dotted I keeps its dot as a combining mark."""
        assert normalize("İstanbul", "default") == "i" + DOT_ABOVE + "stanbul"

    def test_turkish_dotted_capital_i(self) -> None:
        """Turkish maps dotted I to plain i."""
        assert normalize("İstanbul", "default", "tr") == "istanbul"

    def test_turkish_dotless_i(self) -> None:
        """Turkish maps plain I to dotless i."""
        assert normalize("DIYARBAKIR", "default", "tr") == "dıyarbakır"

    def test_azerbaijani_matches_turkish(self) -> None:
        """Azerbaijani shares the Turkic rules."""
        azerbaijani = normalize("IĞDIR", "default", Locale.AZ)
        assert azerbaijani == normalize("IĞDIR", "default", "tr")

    def test_turkish_decomposed_dotted_i(self) -> None:
        """I followed by a combining dot is treated as dotted I."""
        assert case_fold("I" + DOT_ABOVE, "tr") == "i"

    def test_lithuanian_accented_i(self) -> None:
        """Accented capital I keeps a dot under the accent."""
        assert normalize("Ì", "default", "lt") == "i" + DOT_ABOVE + "\u0300"
        assert normalize("Í", "default", "lt") == "i" + DOT_ABOVE + "\u0301"
        assert normalize("Ĩ", "default", "lt") == "i" + DOT_ABOVE + "\u0303"

    def test_lithuanian_soft_dotted_before_accent(self) -> None:
        """I and J followed by an accent above gain a dot."""
        assert case_fold("I\u0301", "lt") == "i" + DOT_ABOVE + "\u0301"
        assert case_fold("J\u0303", "lt") == "j" + DOT_ABOVE + "\u0303"

    def test_lithuanian_plain_i_unchanged(self) -> None:
        """Without a following accent I lowercases normally."""
        assert case_fold("IS", "lt") == "is"

    def test_locale_ignored_by_minimal(self) -> None:
        """Minimal never folds case."""
        assert normalize("I", "minimal", "tr") == "I"


class TestValidation:
    """Tests for preset and locale parsing."""

    def test_parse_preset(self) -> None:
        """Strings resolve to enum members."""
        assert parse_preset("aggressive") is NormalizationPreset.AGGRESSIVE

    def test_invalid_preset(self) -> None:
        """Unknown presets raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="preset"):
            normalize("abc", "fancy")

    def test_parse_locale(self) -> None:
        """None passes through, strings resolve."""
        assert parse_locale(None) is None
        assert parse_locale("lt") is Locale.LT

    def test_invalid_locale(self) -> None:
        """Unknown locales raise even when the preset ignores them."""
        with pytest.raises(InvalidArgumentError, match="locale"):
            normalize("abc", "none", "xx")

    def test_invalid_argument_is_value_error(self) -> None:
        """Callers can catch ValueError."""
        with pytest.raises(ValueError):
            parse_preset("loud")
