"""
Geospatial Consumers of the Series Expansion Engine.

All geodesic computations in this package draw their series coefficients
from ``series_expansion``; no module here carries its own expansion tables.

This module provides:
- Ellipsoid parameters and the small parameters n and eps
- Geodesic lines evaluated from precomputed series (direct problem)
- Meridian arc length and equally spaced points along a geodesic
"""

from geospatial.coordinate_models import (
    EllipsoidParameters,
    WGS84Ellipsoid,
    ellipsoid_from_name,
    small_parameter_eps,
    reduced_latitude,
    radius_of_curvature_meridian,
)

from geospatial.geodesic_series import (
    GeodesicPosition,
    GeodesicLineSeries,
    geodesic_direct,
    meridian_arc_length,
    interpolate_geodesic,
)

__all__ = [
    # Coordinate models
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    "ellipsoid_from_name",
    "small_parameter_eps",
    "reduced_latitude",
    "radius_of_curvature_meridian",
    # Geodesic series
    "GeodesicPosition",
    "GeodesicLineSeries",
    "geodesic_direct",
    "meridian_arc_length",
    "interpolate_geodesic",
]
