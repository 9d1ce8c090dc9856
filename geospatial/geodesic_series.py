"""
Geodesic Lines Evaluated with Precomputed Series.

This module is the consumer of the series expansion engine. A geodesic line
is fixed by its starting latitude and azimuth; all series coefficients that
describe it are computed once in the constructor and then evaluated for as
many distances as needed.

Scientific Context
------------------
Domain: Geodesy, differential geometry on curved surfaces
Model: Geodesic on an ellipsoid of revolution, mapped onto a great circle
on the auxiliary sphere with arc length sigma

For a geodesic with equatorial azimuth alpha0 the three integrals are

    s / b      = I1(sigma)                      (distance)
    lambda     = omega - f sin(alpha0) I3(sigma) (longitude)
    J(sigma)   = I1(sigma) - I2(sigma)          (reduced length)

each expressed as a mean-value factor times (sigma + Fourier-sine series).

Implementation
--------------
The formulation follows GeographicLib's ``GeodesicLine``. The direct problem
is solved without iteration: the distance is converted to tau with A1, and
tau to sigma with the reverted series C1p.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

from dataclasses import dataclass
from typing import Tuple, Union
import numpy as np
from numpy.typing import NDArray

from common.constants import SeriesSettings
from common.logging_config import get_logger
from geospatial.coordinate_models import (
    EllipsoidParameters,
    WGS84Ellipsoid,
    reduced_latitude,
    small_parameter_eps,
)
from series_expansion import (
    evaluate_A1,
    evaluate_A2,
    evaluate_A3,
    evaluate_A3_coeffs,
    evaluate_C1_coeffs,
    evaluate_C1p_coeffs,
    evaluate_C2_coeffs,
    evaluate_C3_coeffs,
    evaluate_C3x_coeffs,
    sin_cos_series,
    validate_series_order,
)

logger = get_logger(__name__)

ArrayOrFloat = Union[float, NDArray[np.float64]]

_TINY = float(np.sqrt(np.finfo(np.float64).tiny))


@dataclass
class GeodesicPosition:
    """A point on a geodesic line.

    Attributes
    ----------
    lat2_rad : float or ndarray
        Geodetic latitude of the point in radians.
    lon12_rad : float or ndarray
        Longitude difference from the start point in radians (unwrapped).
    azi2_rad : float or ndarray
        Forward azimuth at the point in radians, clockwise from north.
    sigma12_rad : float or ndarray
        Arc length on the auxiliary sphere in radians.
    reduced_length_m : float or ndarray
        Reduced length m12 in meters.
    """
    lat2_rad: ArrayOrFloat
    lon12_rad: ArrayOrFloat
    azi2_rad: ArrayOrFloat
    sigma12_rad: ArrayOrFloat
    reduced_length_m: ArrayOrFloat


class GeodesicLineSeries:
    """Series representation of one geodesic line.

    Parameters
    ----------
    lat1_rad : float
        Starting latitude in radians.
    azi1_rad : float
        Starting azimuth in radians, clockwise from north.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    order : int
        Truncation order of every series (default: DEFAULT_SERIES_ORDER).

    Notes
    -----
    The object is immutable after construction and may be shared between
    threads. All evaluation methods accept numpy arrays.

    Examples
    --------
    >>> import numpy as np
    >>> line = GeodesicLineSeries(0.0, 0.0)
    >>> round(float(line.arc_length(np.pi / 2)) / 1000, 3)
    10001.966
    """

    def __init__(
        self,
        lat1_rad: float,
        azi1_rad: float,
        ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
        order: int = SeriesSettings.DEFAULT_SERIES_ORDER
    ):
        self.order = validate_series_order(order)
        self.ellipsoid = ellipsoid
        f = ellipsoid.f
        self._b = ellipsoid.b

        sbet1, cbet1 = reduced_latitude(lat1_rad, ellipsoid)
        cbet1 = max(_TINY, float(cbet1))
        sbet1 = float(sbet1)
        salp1 = float(np.sin(azi1_rad))
        calp1 = float(np.cos(azi1_rad))

        # Azimuth at the equator crossing
        self._salp0 = salp1 * cbet1
        self._calp0 = float(np.hypot(calp1, salp1 * sbet1))

        # sigma1 and omega1 are measured from the equator crossing
        self._ssig1 = sbet1
        self._somg1 = self._salp0 * sbet1
        csig1 = cbet1 * calp1 if (sbet1 != 0 or calp1 != 0) else 1.0
        self._comg1 = csig1
        norm = float(np.hypot(self._ssig1, csig1))
        self._ssig1 /= norm
        self._csig1 = csig1 / norm

        self._k2 = self._calp0 ** 2 * ellipsoid.ep2
        self.eps = float(small_parameter_eps(self._k2))

        # Precompute every family once
        self._A1m1 = evaluate_A1(self.order, self.eps)
        self._C1 = evaluate_C1_coeffs(self.order, self.eps)
        self._C1p = evaluate_C1p_coeffs(self.order, self.eps)
        self._A2m1 = evaluate_A2(self.order, self.eps)
        self._C2 = evaluate_C2_coeffs(self.order, self.eps)
        a3 = evaluate_A3(evaluate_A3_coeffs(self.order, ellipsoid.n), self.eps)
        self._C3 = evaluate_C3_coeffs(evaluate_C3x_coeffs(self.order, ellipsoid.n), self.eps)
        self._A3c = -f * self._salp0 * a3

        self._B11 = sin_cos_series(self._ssig1, self._csig1, self._C1)
        s, c = np.sin(self._B11), np.cos(self._B11)
        self._stau1 = self._ssig1 * c + self._csig1 * s
        self._ctau1 = self._csig1 * c - self._ssig1 * s
        self._B21 = sin_cos_series(self._ssig1, self._csig1, self._C2)
        self._B31 = sin_cos_series(self._ssig1, self._csig1, self._C3)
        self._dn1 = float(np.sqrt(1 + self._k2 * self._ssig1 ** 2))

        logger.debug(
            f"Geodesic line on {ellipsoid.name}: order={self.order}, "
            f"eps={self.eps:.6e}, A1-1={self._A1m1:.6e}"
        )

    @property
    def distance_scale_m(self) -> float:
        """b * A1, meters of geodesic per radian of tau."""
        return self._b * (1 + self._A1m1)

    def arc_length(self, sigma12_rad: ArrayOrFloat) -> ArrayOrFloat:
        """Distance along the line for an auxiliary-sphere arc sigma12.

        Parameters
        ----------
        sigma12_rad : float or ndarray
            Arc length on the auxiliary sphere from the start point.

        Returns
        -------
        float or ndarray
            Geodesic distance s12 in meters.
        """
        ssig2, csig2 = self._sigma2(sigma12_rad)
        b12 = sin_cos_series(ssig2, csig2, self._C1)
        return self.distance_scale_m * (sigma12_rad + (b12 - self._B11))

    def sigma12_from_distance(self, distance_m: ArrayOrFloat) -> ArrayOrFloat:
        """Invert ``arc_length`` using the reverted series C1p.

        Parameters
        ----------
        distance_m : float or ndarray
            Geodesic distance s12 in meters.

        Returns
        -------
        float or ndarray
            Auxiliary-sphere arc sigma12 in radians.
        """
        tau12 = distance_m / self.distance_scale_m
        s, c = np.sin(tau12), np.cos(tau12)
        b12 = -sin_cos_series(
            self._stau1 * c + self._ctau1 * s,
            self._ctau1 * c - self._stau1 * s,
            self._C1p
        )
        return tau12 - (b12 - self._B11)

    def position_at(self, distance_m: ArrayOrFloat) -> GeodesicPosition:
        """Solve the direct problem for a distance along the line.

        Parameters
        ----------
        distance_m : float or ndarray
            Geodesic distance s12 in meters (may be negative).

        Returns
        -------
        GeodesicPosition
            Latitude, longitude difference, azimuth, arc and reduced length.
        """
        sig12 = self.sigma12_from_distance(distance_m)
        ssig2, csig2 = self._sigma2(sig12)

        sbet2 = self._calp0 * ssig2
        cbet2 = np.maximum(np.hypot(self._salp0, self._calp0 * csig2), _TINY)

        somg2 = self._salp0 * ssig2
        comg2 = csig2
        salp2 = self._salp0
        calp2 = self._calp0 * csig2

        omg12 = np.arctan2(
            somg2 * self._comg1 - comg2 * self._somg1,
            comg2 * self._comg1 + somg2 * self._somg1
        )
        b32 = sin_cos_series(ssig2, csig2, self._C3)
        lam12 = omg12 + self._A3c * (sig12 + (b32 - self._B31))

        lat2 = np.arctan2(sbet2, (1 - self.ellipsoid.f) * cbet2)
        azi2 = np.arctan2(salp2, calp2)

        return GeodesicPosition(
            lat2_rad=lat2,
            lon12_rad=lam12,
            azi2_rad=azi2,
            sigma12_rad=sig12,
            reduced_length_m=self._reduced_length(sig12, ssig2, csig2),
        )

    def _sigma2(self, sig12: ArrayOrFloat) -> Tuple[ArrayOrFloat, ArrayOrFloat]:
        ssig12, csig12 = np.sin(sig12), np.cos(sig12)
        ssig2 = self._ssig1 * csig12 + self._csig1 * ssig12
        csig2 = self._csig1 * csig12 - self._ssig1 * ssig12
        return ssig2, csig2

    def _reduced_length(
        self,
        sig12: ArrayOrFloat,
        ssig2: ArrayOrFloat,
        csig2: ArrayOrFloat
    ) -> ArrayOrFloat:
        # J12 = I1(sigma12) - I2(sigma12) relative to the start point
        a1 = 1 + self._A1m1
        a2 = 1 + self._A2m1
        b12 = sin_cos_series(ssig2, csig2, self._C1) - self._B11
        b22 = sin_cos_series(ssig2, csig2, self._C2) - self._B21
        j12 = (self._A1m1 - self._A2m1) * sig12 + (a1 * b12 - a2 * b22)
        dn2 = np.sqrt(1 + self._k2 * ssig2 ** 2)
        m12b = (
            dn2 * (self._csig1 * ssig2) - self._dn1 * (self._ssig1 * csig2)
            - self._csig1 * csig2 * j12
        )
        return self._b * m12b


def _normalize_lon(lon_rad: ArrayOrFloat) -> ArrayOrFloat:
    return (lon_rad + np.pi) % (2 * np.pi) - np.pi


def geodesic_direct(
    lat1_rad: float,
    lon1_rad: float,
    azimuth_rad: float,
    distance_m: ArrayOrFloat,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    order: int = SeriesSettings.DEFAULT_SERIES_ORDER
) -> Tuple[ArrayOrFloat, ArrayOrFloat, ArrayOrFloat]:
    """Solve the direct geodesic problem.

    Given a starting point, azimuth, and distance, find the endpoint.

    Parameters
    ----------
    lat1_rad, lon1_rad : float
        Starting point in radians.
    azimuth_rad : float
        Forward azimuth in radians (clockwise from north).
    distance_m : float or ndarray
        Distance to travel in meters.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    order : int
        Series truncation order.

    Returns
    -------
    Tuple[float, float, float]
        (lat2_rad, lon2_rad, azi2_rad) - endpoint, longitude normalized to
        [-π, π), and forward azimuth at the endpoint.

    Examples
    --------
    >>> # Travel 1000 km due east from the equator
    >>> import numpy as np
    >>> lat, lon, az = geodesic_direct(0.0, 0.0, np.pi/2, 1_000_000)
    >>> print(f"Endpoint: {np.degrees(lat):.4f}°, {np.degrees(lon):.4f}°")
    Endpoint: 0.0000°, 8.9832°
    """
    line = GeodesicLineSeries(lat1_rad, azimuth_rad, ellipsoid=ellipsoid, order=order)
    pos = line.position_at(distance_m)
    return pos.lat2_rad, _normalize_lon(lon1_rad + pos.lon12_rad), pos.azi2_rad


def meridian_arc_length(
    latitude_rad: ArrayOrFloat,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    order: int = SeriesSettings.DEFAULT_SERIES_ORDER
) -> ArrayOrFloat:
    """Distance from the equator to ``latitude_rad`` along a meridian.

    Parameters
    ----------
    latitude_rad : float or ndarray
        Geodetic latitude in radians, in [-π/2, π/2].
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    order : int
        Series truncation order.

    Returns
    -------
    float or ndarray
        Signed meridian distance in meters.

    Notes
    -----
    Along a meridian alpha0 = 0, k^2 = e'^2 and the auxiliary-sphere arc
    from the equator equals the reduced latitude beta.
    """
    line = GeodesicLineSeries(0.0, 0.0, ellipsoid=ellipsoid, order=order)
    sbet, cbet = reduced_latitude(latitude_rad, ellipsoid)
    return line.arc_length(np.arctan2(sbet, cbet))


def interpolate_geodesic(
    lat1_rad: float,
    lon1_rad: float,
    azimuth_rad: float,
    distance_m: float,
    num_points: int,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    order: int = SeriesSettings.DEFAULT_SERIES_ORDER
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Points equally spaced in distance along a geodesic.

    The line's coefficients are computed once and evaluated for every
    point in a single vectorized call.

    Parameters
    ----------
    lat1_rad, lon1_rad : float
        Starting point in radians.
    azimuth_rad : float
        Starting azimuth in radians.
    distance_m : float
        Total distance in meters.
    num_points : int
        Number of points including both endpoints.

    Returns
    -------
    Tuple[ndarray, ndarray]
        (latitudes_rad, longitudes_rad) of the points.
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    distances = np.linspace(0.0, distance_m, num_points)
    lats, lons, _ = geodesic_direct(
        lat1_rad, lon1_rad, azimuth_rad, distances, ellipsoid=ellipsoid, order=order
    )
    return np.asarray(lats), np.asarray(lons)
