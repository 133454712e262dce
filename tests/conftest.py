"""Shared test fixtures for stringmetrics tests."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

from stringmetrics.cli.context import CLIContext
from stringmetrics.infrastructure.config import CONFIG_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Generator

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample YAML fixtures."""
    return FIXTURES_DIR


@pytest.fixture(autouse=True)
def isolated_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep user config, CLI singleton and logging setup out of tests.

    Points the config lookup at a file that does not exist and restores
    structlog defaults. configure_logging attaches a stderr handler to the
    root logger bound to the captured stream of the test that ran it, so
    that handler is removed again.
    """
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "no-config.json"))
    root_level = logging.root.level
    CLIContext.reset()
    yield
    CLIContext.reset()
    structlog.reset_defaults()
    for handler in logging.root.handlers[:]:
        # pytest capture handlers are subclasses and stay in place
        if type(handler) is logging.StreamHandler:
            logging.root.removeHandler(handler)
    logging.root.setLevel(root_level)
