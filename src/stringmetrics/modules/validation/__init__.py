"""Fixture validation."""

from stringmetrics.modules.validation.validator import (
    ValidationReport,
    ValidationResult,
    validate_fixtures,
)

__all__ = [
    "ValidationReport",
    "ValidationResult",
    "validate_fixtures",
]
