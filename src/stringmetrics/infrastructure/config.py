"""CLI defaults file.

Reads an optional JSON config.json holding default suggestion options and
a default locale. The file is read-only from the library's point of view.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from stringmetrics.errors import StringMetricsError
from stringmetrics.infrastructure.logging import get_logger
from stringmetrics.modules.suggest.service import SuggestOptions
from stringmetrics.modules.text.normalization import parse_locale

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "MetricsConfig",
    "default_config_path",
    "load_config",
]

logger = get_logger(__name__)

# v1: suggest section and top-level locale
SCHEMA_VERSION = "1"

MAX_CONFIG_SIZE = 1 * 1024 * 1024

CONFIG_ENV_VAR = "STRINGMETRICS_CONFIG"


class ConfigError(StringMetricsError):
    """Raised when an explicitly requested config file cannot be used."""


@dataclass(frozen=True)
class MetricsConfig:
    """Immutable CLI defaults.

    Attributes:
        suggest: Default options for the suggest command.
        locale: Default case folding locale, or None.
    """

    suggest: SuggestOptions = field(default_factory=SuggestOptions)
    locale: str | None = None


def default_config_path() -> Path:
    """Location of the config file: ``$STRINGMETRICS_CONFIG`` or the home default."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".stringmetrics" / "config.json"


def load_config(path: Path | None = None) -> MetricsConfig:
    """Load CLI defaults from a JSON file.

    A missing, oversized or unparsable file at the default location yields
    the built-in defaults with a logged warning.

    Args:
        path: Explicit config file. Defaults to ``default_config_path()``.

    Returns:
        MetricsConfig (defaults if the file is missing or invalid).

    Raises:
        ConfigError: If an explicit ``path`` does not exist.
    """
    explicit = path is not None
    if path is None:
        path = default_config_path()

    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("config_not_found", path=str(path))
        return MetricsConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return MetricsConfig()

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        version = data.get("version")
        if version and str(version) != SCHEMA_VERSION:
            # Newer files are still read field by field
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        config = _dict_to_config(data)
        logger.debug("config_loaded", path=str(path))
        return config

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return MetricsConfig()
    except (KeyError, TypeError, ValueError) as e:
        # UnknownMetricError and InvalidArgumentError are ValueErrors
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return MetricsConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return MetricsConfig()


def _dict_to_config(data: dict[str, Any]) -> MetricsConfig:
    """Build a MetricsConfig from decoded JSON.

    Raises:
        TypeError: If the suggest section is not an object.
        UnknownMetricError: If the suggest metric is unknown.
        InvalidArgumentError: If the locale is unknown.
    """
    section = data.get("suggest") or {}
    if not isinstance(section, dict):
        raise TypeError("'suggest' must be a JSON object")

    locale = data.get("locale")
    if locale is not None:
        locale = parse_locale(locale).value

    return MetricsConfig(
        suggest=SuggestOptions.from_mapping(section),
        locale=locale,
    )
