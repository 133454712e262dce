"""Unicode text normalization with presets and locale-aware case folding.

Presets, from least to most invasive:

- ``none``: identity.
- ``minimal``: NFC composition and surrounding whitespace trim.
- ``default``: case fold, trim, then NFC composition.
- ``aggressive``: NFKD decomposition, case fold, strip non-spacing marks,
  drop everything that is not alphanumeric or whitespace, trim.

Locale tags only change the case folding step, so they have no effect on
the ``none`` and ``minimal`` presets (they are still validated).
"""

from __future__ import annotations

import unicodedata
from enum import Enum

from stringmetrics.errors import InvalidArgumentError

__all__ = [
    "Locale",
    "NormalizationPreset",
    "case_fold",
    "normalize",
    "parse_locale",
    "parse_preset",
]


class NormalizationPreset(str, Enum):
    """Named bundles of canonicalization rules."""

    NONE = "none"
    MINIMAL = "minimal"
    DEFAULT = "default"
    AGGRESSIVE = "aggressive"


class Locale(str, Enum):
    """Locales with case folding rules that differ from the Unicode default."""

    TR = "tr"
    AZ = "az"
    LT = "lt"


COMBINING_DOT_ABOVE = "\u0307"

# Canonical combining class of marks rendered above the base letter
_CCC_ABOVE = 230

_TURKIC_RULES: tuple[tuple[str, str], ...] = (
    # Decomposed dotted capital I must be handled before bare I
    ("I" + COMBINING_DOT_ABOVE, "i"),
    ("\u0130", "i"),
    ("I", "\u0131"),
)

# Substitutions applied before lowercasing, keyed by locale
LOCALE_RULES: dict[Locale, tuple[tuple[str, str], ...]] = {
    Locale.TR: _TURKIC_RULES,
    Locale.AZ: _TURKIC_RULES,
    Locale.LT: (
        ("\u00cc", "i" + COMBINING_DOT_ABOVE + "\u0300"),
        ("\u00cd", "i" + COMBINING_DOT_ABOVE + "\u0301"),
        ("\u0128", "i" + COMBINING_DOT_ABOVE + "\u0303"),
    ),
}

# Lithuanian capitals that keep their dot when followed by an accent above
_LITHUANIAN_SOFT_DOTTED = frozenset("IJ\u012e")


def parse_preset(value: NormalizationPreset | str) -> NormalizationPreset:
    """Resolve a preset name to its enum member.

    Args:
        value: Preset member or its string value.

    Returns:
        The matching NormalizationPreset.

    Raises:
        InvalidArgumentError: If the value names no preset.
    """
    try:
        return NormalizationPreset(value)
    except ValueError:
        valid = ", ".join(p.value for p in NormalizationPreset)
        raise InvalidArgumentError(
            f"Invalid normalization preset: {value!r} (expected one of: {valid})"
        ) from None


def parse_locale(value: Locale | str | None) -> Locale | None:
    """Resolve a locale tag to its enum member, passing None through.

    Raises:
        InvalidArgumentError: If the value names no supported locale.
    """
    if value is None:
        return None
    try:
        return Locale(value)
    except ValueError:
        valid = ", ".join(loc.value for loc in Locale)
        raise InvalidArgumentError(
            f"Invalid normalization locale: {value!r} (expected one of: {valid})"
        ) from None


def _fold_char(ch: str) -> str:
    if ch == "ß":
        return "ss"
    # Per code point, so no context-sensitive final sigma
    return ch.lower()


def _mark_lithuanian_dots(text: str) -> str:
    """Insert a dot above lowercase i/j/į that carry a further accent above."""
    out: list[str] = []
    last = len(text) - 1
    for i, ch in enumerate(text):
        if (
            ch in _LITHUANIAN_SOFT_DOTTED
            and i < last
            and unicodedata.combining(text[i + 1]) == _CCC_ABOVE
        ):
            out.append(ch.lower() + COMBINING_DOT_ABOVE)
        else:
            out.append(ch)
    return "".join(out)


def case_fold(text: str, locale: Locale | str | None = None) -> str:
    """Lowercase text with full folding of sharp s and locale overrides.

    Without a locale, dotted capital I becomes ``i`` followed by a combining
    dot above, matching the Unicode default mapping.

    Args:
        text: Text to fold.
        locale: Optional locale whose rules apply first.

    Returns:
        Folded text.
    """
    loc = parse_locale(locale)
    if loc is not None:
        if loc is Locale.LT:
            text = _mark_lithuanian_dots(text)
        for source, target in LOCALE_RULES[loc]:
            text = text.replace(source, target)
    return "".join(_fold_char(ch) for ch in text)


def normalize(
    text: str,
    preset: NormalizationPreset | str = NormalizationPreset.NONE,
    locale: Locale | str | None = None,
) -> str:
    """Normalize a string using a preset and an optional locale.

    Normalization is idempotent: applying it twice with the same preset and
    locale yields the same string as applying it once.

    Args:
        text: The string to normalize.
        preset: Normalization preset (none, minimal, default, aggressive).
        locale: Optional locale for case folding (tr, az, lt).

    Returns:
        Normalized string.

    Raises:
        InvalidArgumentError: If the preset or locale is not recognized.
    """
    resolved = parse_preset(preset)
    loc = parse_locale(locale)

    if resolved is NormalizationPreset.NONE:
        return text

    if resolved is NormalizationPreset.MINIMAL:
        return unicodedata.normalize("NFC", text).strip()

    if resolved is NormalizationPreset.DEFAULT:
        return unicodedata.normalize("NFC", case_fold(text, loc).strip())

    # Decompose first so locale rules see base letters, again after folding
    decomposed = unicodedata.normalize(
        "NFKD", case_fold(unicodedata.normalize("NFKD", text), loc)
    )
    without_marks = "".join(
        ch for ch in decomposed if unicodedata.category(ch) != "Mn"
    )
    kept = "".join(ch for ch in without_marks if ch.isalnum() or ch.isspace())
    return kept.strip()
