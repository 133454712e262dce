"""YAML fixture file parsing.

A fixture file records expected metric outputs produced by a reference
implementation::

    $schema: ./schema.json
    version: "1"
    generator:
      tool: stringmetrics
      source_library: rapidfuzz
    test_cases:
      - category: levenshtein
        cases:
          - description: classic
            input_a: kitten
            input_b: sitting
            expected_distance: 3
            expected_score: 0.5714285714285714
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import yaml

from stringmetrics.errors import StringMetricsError

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "FixtureCategory",
    "FixtureDocument",
    "FixtureError",
    "load_fixture",
    "parse_fixture",
]

# Fixture files are small; refuse anything that is clearly not one
MAX_FIXTURE_SIZE = 10 * 1024 * 1024


class FixtureError(StringMetricsError):
    """Raised when a fixture file is missing, unreadable or malformed."""


@dataclass(frozen=True)
class FixtureCategory:
    """One category block: a name and its raw case mappings."""

    category: str
    cases: tuple[dict[str, Any], ...]


@dataclass(frozen=True)
class FixtureDocument:
    """Parsed fixture file."""

    version: str
    categories: tuple[FixtureCategory, ...]
    schema: str | None = None
    generator: dict[str, Any] | str | None = None
    notes: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def case_count(self) -> int:
        return sum(len(c.cases) for c in self.categories)


def parse_fixture(content: str, source: str = "<string>") -> FixtureDocument:
    """Parse fixture YAML text.

    Args:
        content: YAML document.
        source: Name used in error messages.

    Returns:
        The parsed FixtureDocument.

    Raises:
        FixtureError: If the YAML is invalid or the document has the wrong
            shape.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise FixtureError(f"Invalid YAML in {source}: {e}") from e

    if not isinstance(data, dict):
        raise FixtureError(
            f"{source}: fixture must be a YAML mapping, got {type(data).__name__}"
        )

    raw_cases = data.get("test_cases")
    if not isinstance(raw_cases, list):
        raise FixtureError(f"{source}: 'test_cases' must be a list")

    categories: list[FixtureCategory] = []
    for position, block in enumerate(raw_cases):
        if not isinstance(block, dict) or not isinstance(block.get("category"), str):
            raise FixtureError(
                f"{source}: test_cases[{position}] needs a string 'category'"
            )
        cases = block.get("cases") or []
        if not isinstance(cases, list) or not all(isinstance(c, dict) for c in cases):
            raise FixtureError(
                f"{source}: cases of '{block['category']}' must be a list of mappings"
            )
        categories.append(FixtureCategory(block["category"], tuple(cases)))

    known = {"$schema", "version", "generator", "notes", "test_cases"}
    return FixtureDocument(
        version=str(data.get("version", "")),
        categories=tuple(categories),
        schema=data.get("$schema"),
        generator=data.get("generator"),
        notes=data.get("notes"),
        extra={k: v for k, v in data.items() if k not in known},
    )


def load_fixture(path: Path) -> FixtureDocument:
    """Read and parse a fixture file.

    Raises:
        FixtureError: If the file cannot be read or parsed.
    """
    try:
        size = path.stat().st_size
        if size > MAX_FIXTURE_SIZE:
            raise FixtureError(
                f"{path}: fixture too large ({size} bytes, max {MAX_FIXTURE_SIZE})"
            )
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FixtureError(f"Cannot read fixture {path}: {e}") from e

    return parse_fixture(content, source=str(path))
