"""
Ellipsoid Models and Small Parameters for Geodesic Series.

This module describes the reference ellipsoid and derives the small
parameters that drive the series expansions of the geodesic integrals.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Ellipsoid of revolution (not spherical approximation)

Small Parameters
----------------
1. Third flattening n = f / (2 - f) = (a - b) / (a + b). For WGS84,
   n ~ 1.68e-3, so power series in n converge quickly.

2. For a geodesic with equatorial azimuth alpha0, k^2 = e'^2 cos^2(alpha0)
   and eps = k^2 / (2 (1 + sqrt(1 + k^2)) + k^2), which satisfies
   k^2 = 4 eps / (1 - eps)^2 and is roughly k^2 / 4.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Karney, C.F.F. (2013). Algorithms for geodesics. J. Geodesy 87(1), 43-55.
"""

from dataclasses import dataclass
from typing import Tuple, Union
import numpy as np
from numpy.typing import NDArray

from pyproj import Geod, get_ellps_map

from common.constants import PhysicalConstants


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    ep2 : float
        Second eccentricity squared: e'² = (a² - b²) / b²
    n : float
        Third flattening: n = (a - b) / (a + b)
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1 - self.e2)

    @property
    def n(self) -> float:
        """Third flattening."""
        return self.f / (2 - self.f)

    def to_geod(self) -> Geod:
        """Return a ``pyproj.Geod`` for the same ellipsoid."""
        return Geod(a=self.a, f=self.f)


# WGS84 ellipsoid - the default reference for this system
WGS84Ellipsoid = EllipsoidParameters(
    a=PhysicalConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=PhysicalConstants.EARTH_FLATTENING.value,
    name="WGS84"
)


def ellipsoid_from_name(name: str) -> EllipsoidParameters:
    """Look up a named ellipsoid in the PROJ ellipsoid list.

    Parameters
    ----------
    name : str
        PROJ ellipsoid identifier, e.g. 'WGS84', 'GRS80', 'clrk66'.

    Returns
    -------
    EllipsoidParameters
        Semi-major axis and flattening as reported by ``pyproj.Geod``.

    Raises
    ------
    KeyError
        If PROJ does not know the ellipsoid.
    """
    if name not in get_ellps_map():
        raise KeyError(f"Unknown ellipsoid {name!r}")
    geod = Geod(ellps=name)
    return EllipsoidParameters(a=float(geod.a), f=float(geod.f), name=name)


def small_parameter_eps(k2: Union[float, NDArray[np.float64]]) -> Union[float, NDArray[np.float64]]:
    """Convert k^2 into the series parameter eps.

    Parameters
    ----------
    k2 : float or ndarray
        k^2 = e'^2 cos^2(alpha0), non-negative for oblate ellipsoids.

    Returns
    -------
    float or ndarray
        eps = k2 / (2 (1 + sqrt(1 + k2)) + k2), the inverse of
        k2 = 4 eps / (1 - eps)^2.

    Examples
    --------
    >>> float(small_parameter_eps(0.0))
    0.0
    """
    return k2 / (2 * (1 + np.sqrt(1 + k2)) + k2)


def reduced_latitude(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> Tuple[float, float]:
    """Sine and cosine of the reduced (parametric) latitude.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    Tuple[float, float]
        (sin(beta), cos(beta)) normalized to unit length,
        with tan(beta) = (1 - f) tan(phi).
    """
    sbet = (1 - ellipsoid.f) * np.sin(latitude_rad)
    cbet = np.cos(latitude_rad)
    norm = np.hypot(sbet, cbet)
    return sbet / norm, cbet / norm


def radius_of_curvature_meridian(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the meridian plane.

    This is the derivative of meridian arc length with respect to
    geodetic latitude.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature M in meters.

    Notes
    -----
    M = a(1 - e²) / (1 - e² sin²φ)^(3/2)

    At the equator (φ=0): M ≈ 6,335,439 m
    At the poles (φ=±90°): M ≈ 6,399,594 m
    """
    sin_lat = np.sin(latitude_rad)
    denominator = (1 - ellipsoid.e2 * sin_lat**2) ** 1.5
    return ellipsoid.a * (1 - ellipsoid.e2) / denominator
