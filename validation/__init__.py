"""
Validation Framework for the Series Expansion Engine.

This module provides numerical consistency checks for the coefficient
tables and their evaluators.
"""

from validation.series_checks import (
    ValidationResult,
    SeriesConsistencyChecker,
    DEFAULT_EPS,
)

__all__ = [
    "ValidationResult",
    "SeriesConsistencyChecker",
    "DEFAULT_EPS",
]
