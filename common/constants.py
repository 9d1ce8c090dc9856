"""
Constants for Geodesic Series Expansions.

This module provides the reference-ellipsoid constants and the settings that
govern the truncated series used for ellipsoidal geodesics. All constants are
defined with SI units and traceable to authoritative sources.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A physical constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class PhysicalConstants:
    """Registry of physical constants used throughout the system.

    Earth Geometry (WGS84)
    ----------------------
    These constants define the default reference ellipsoid for the
    geodesic consumers of the series engine.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )


class SeriesSettings:
    """Settings for the truncated geodesic series.

    The truncation order fixes the length of every coefficient sequence.
    Orders above ``MAX_SERIES_ORDER`` have no tabulated expansion and are
    rejected rather than clamped.
    """

    # Highest order with tabulated expansions
    MAX_SERIES_ORDER: Final[int] = 8

    # Order giving full double precision for terrestrial ellipsoids
    DEFAULT_SERIES_ORDER: Final[int] = 6

    # Absolute tolerance between Clenshaw and direct summation
    CLENSHAW_TOLERANCE: Final[float] = 1e-12

    # Absolute tolerance between series and numerical quadrature
    QUADRATURE_TOLERANCE: Final[float] = 1e-12
