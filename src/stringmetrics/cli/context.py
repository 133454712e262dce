"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from pathlib import Path

    from stringmetrics.infrastructure.config import MetricsConfig

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Process-wide CLI state shared by every command.

    Mutable so the root callback can set flags after parsing. The CLI is
    single-threaded.
    """

    verbose: bool = False
    quiet: bool = False
    config: MetricsConfig | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_config(self, path: Path | None = None) -> MetricsConfig:
        """Load CLI defaults once and cache them.

        An explicit ``path`` always reloads and replaces the cached config.

        Raises:
            ConfigError: If an explicit ``path`` does not exist.
        """
        if self.config is None or path is not None:
            from stringmetrics.infrastructure.config import load_config

            self.config = load_config(path)

        assert self.config is not None
        return self.config

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance (used by tests)."""
        cls._instance = None
