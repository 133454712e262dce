"""Tests for CLI context module."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

from stringmetrics.cli.context import CLIContext
from stringmetrics.infrastructure.config import MetricsConfig

if TYPE_CHECKING:
    from pathlib import Path


class TestCLIContext:
    """Tests for CLIContext singleton."""

    def setup_method(self) -> None:
        """Reset context before each test."""
        CLIContext.reset()

    def teardown_method(self) -> None:
        """Reset context after each test."""
        CLIContext.reset()

    def test_get_returns_same_instance(self) -> None:
        """get() should return the same singleton instance."""
        assert CLIContext.get() is CLIContext.get()

    def test_default_values(self) -> None:
        """Flags default to False and config is not loaded."""
        ctx = CLIContext.get()

        assert ctx.verbose is False
        assert ctx.quiet is False
        assert ctx.config is None

    def test_flags_persist(self) -> None:
        """Flags set on the instance are visible through get()."""
        CLIContext.get().quiet = True

        assert CLIContext.get().quiet is True

    def test_reset_clears_instance(self) -> None:
        """reset() should give a fresh instance."""
        ctx1 = CLIContext.get()
        ctx1.verbose = True

        CLIContext.reset()

        ctx2 = CLIContext.get()
        assert ctx2 is not ctx1
        assert ctx2.verbose is False

    def test_get_config_caches_result(self) -> None:
        """get_config() should load once."""
        ctx = CLIContext.get()

        with patch("stringmetrics.infrastructure.config.load_config") as mock_load:
            mock_load.return_value = MetricsConfig(locale="lt")

            config1 = ctx.get_config()
            config2 = ctx.get_config()

            assert mock_load.call_count == 1
            assert config2 is config1
            assert config1.locale == "lt"

    def test_explicit_path_reloads(self, tmp_path: Path) -> None:
        """Passing a path always loads that file."""
        ctx = CLIContext.get()
        path = tmp_path / "config.json"

        with patch("stringmetrics.infrastructure.config.load_config") as mock_load:
            mock_load.return_value = MetricsConfig()

            ctx.get_config()
            ctx.get_config(path)

            assert mock_load.call_count == 2
            mock_load.assert_called_with(path)

    def test_config_is_lazy_loaded(self) -> None:
        """Config should not be loaded until get_config() is called."""
        with patch("stringmetrics.infrastructure.config.load_config") as mock_load:
            mock_load.return_value = MetricsConfig()

            ctx = CLIContext.get()
            assert mock_load.call_count == 0

            ctx.get_config()
            assert mock_load.call_count == 1
