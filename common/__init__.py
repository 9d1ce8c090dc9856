"""
Common utilities and infrastructure for the geodesic series engine.

This package provides foundational components used across all modules:
- Ellipsoid constants and series settings
- Typed coefficient sequences
- Logging and check audit trail infrastructure
"""

from common.constants import Constant, PhysicalConstants, SeriesSettings
from common.types import SeriesFamily, SeriesCoefficients, CoefficientsLike
from common.logging_config import get_logger, SeriesAuditLog

__all__ = [
    "Constant",
    "PhysicalConstants",
    "SeriesSettings",
    "SeriesFamily",
    "SeriesCoefficients",
    "CoefficientsLike",
    "get_logger",
    "SeriesAuditLog",
]
