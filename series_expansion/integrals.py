"""
Geodesic integrals assembled from precomputed series coefficients.

Each integral has the form scale * (sigma + B(sigma)) where B is a
Fourier-sine series evaluated with ``sin_cos_series``.
"""

import numpy as np

from common.types import SeriesCoefficients, SeriesFamily
from series_expansion.clenshaw import ArrayOrFloat, sin_cos_series


def series_integral(
    scale_m1: float,
    coeffs: SeriesCoefficients,
    sigma: ArrayOrFloat
) -> ArrayOrFloat:
    """Evaluate (1 + scale_m1) * (sigma + B(sigma)).

    With (A1 - 1, C1) this is I1, with (A2 - 1, C2) it is I2.

    Parameters
    ----------
    scale_m1 : float
        Mean-value factor minus one, from ``evaluate_A1`` or ``evaluate_A2``.
    coeffs : SeriesCoefficients
        Matching C1 or C2 coefficients.
    sigma : float or ndarray
        Upper limit of integration (spherical arc length) in radians.
    """
    if coeffs.family not in (SeriesFamily.C1, SeriesFamily.C2):
        raise ValueError(
            f"series_integral needs C1 or C2 coefficients, got {coeffs.family.value}"
        )
    return (1 + scale_m1) * (sigma + sin_cos_series(np.sin(sigma), np.cos(sigma), coeffs))


def longitude_integral(
    a3: float,
    c3: SeriesCoefficients,
    sigma: ArrayOrFloat
) -> ArrayOrFloat:
    """Evaluate I3(sigma) = A3 * (sigma + B3(sigma)).

    Parameters
    ----------
    a3 : float
        Mean-value factor from ``evaluate_A3``.
    c3 : SeriesCoefficients
        C3 coefficients at the same eps.
    sigma : float or ndarray
        Upper limit of integration in radians.
    """
    c3.require(SeriesFamily.C3)
    return a3 * (sigma + sin_cos_series(np.sin(sigma), np.cos(sigma), c3))
