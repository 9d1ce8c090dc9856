"""
Coefficient Generators for the Geodesic Series.

This module builds the truncated series coefficients for the three integrals
of an ellipsoidal geodesic (Karney 2013, section 3):

    I1(sigma) = integrate(sqrt(1 + k2 sin^2 s), s, 0, sigma)
              = A1 (sigma + sum(C1[l] sin(2 l sigma)))
    I2(sigma) = integrate(1 / sqrt(1 + k2 sin^2 s), s, 0, sigma)
              = A2 (sigma + sum(C2[l] sin(2 l sigma)))
    I3(sigma) = integrate((2 - f) / (1 + (1 - f) sqrt(1 + k2 sin^2 s)), s, 0, sigma)
              = A3 (sigma + sum(C3[l] sin(2 l sigma)))

with k2 = 4 eps / (1 - eps)^2 and f = 2 n / (1 + n). C1p holds the reverted
series that maps tau = sigma + B1(sigma) back to sigma.

Scientific Context
------------------
Domain: Geodesy, elliptic integrals
Model: Fourier-sine series truncated at order N in the small parameters

Each generator is cheap and is meant to run once per (order, parameter)
pair; the resulting ``SeriesCoefficients`` are then evaluated many times with
``sin_cos_series``.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. J. Geodesy 87(1), 43-55.
- GeographicLib 1.49, Geodesic.cpp
"""

from numbers import Integral
from typing import List, Sequence, Tuple
import numpy as np

from common.constants import SeriesSettings
from common.logging_config import get_logger
from common.types import SeriesCoefficients, SeriesFamily
from series_expansion.clenshaw import horner_evaluate
from series_expansion.tables import (
    A1_TABLE,
    A2_TABLE,
    A3_TABLE,
    C1_TABLE,
    C1P_TABLE,
    C2_TABLE,
    C3X_TABLE,
    PolyEntry,
)

logger = get_logger(__name__)


def validate_series_order(order: int) -> int:
    """Check that ``order`` is a tabulated truncation order.

    Parameters
    ----------
    order : int
        Truncation order.

    Returns
    -------
    int
        The order as a plain int.

    Raises
    ------
    ValueError
        If order is not an integer or lies outside [0, MAX_SERIES_ORDER].
        Out-of-range orders are rejected, never clamped.
    """
    if isinstance(order, bool) or not isinstance(order, Integral):
        raise ValueError(f"Series order must be an integer, got {order!r}")
    if not 0 <= order <= SeriesSettings.MAX_SERIES_ORDER:
        raise ValueError(
            f"Series order {order} out of range "
            f"[0, {SeriesSettings.MAX_SERIES_ORDER}]"
        )
    return int(order)


def _entry_value(entry: PolyEntry, x: float) -> float:
    """Evaluate one table entry: polynomial (highest degree first) / denominator."""
    return np.polyval(entry[:-1], x) / entry[-1]


def _harmonic_coeffs(rows: Tuple[PolyEntry, ...], eps: float) -> List[float]:
    # c[l] = eps^l * P_l(eps^2) / q_l, index 0 unused
    eps2 = eps * eps
    d = eps
    c = [0.0]
    for l, entry in enumerate(rows, start=1):
        if l > 1:
            d *= eps
        c.append(float(d * np.polyval(entry[:-1], eps2) / entry[-1]))
    return c


# =============================================================================
# SCALAR SERIES A1, A2
# =============================================================================


def evaluate_A1(order: int, eps: float) -> float:
    """Compute A1 - 1, the mean-value deviation of the distance integral I1.

    Parameters
    ----------
    order : int
        Truncation order; the polynomial is selected by ``order // 2``.
    eps : float
        Small parameter, eps = k2 / (2 (1 + sqrt(1 + k2)) + k2).

    Returns
    -------
    float
        A1 - 1 = (t + eps) / (1 - eps), exactly 0 for eps = 0.

    Examples
    --------
    >>> evaluate_A1(6, 0.0)
    0.0
    """
    order = validate_series_order(order)
    eps = float(eps)
    t = float(_entry_value(A1_TABLE[order // 2], eps * eps))
    return (t + eps) / (1 - eps)


def evaluate_A2(order: int, eps: float) -> float:
    """Compute A2 - 1, the mean-value deviation of the integral I2.

    Parameters
    ----------
    order : int
        Truncation order; the polynomial is selected by ``order // 2``.
    eps : float
        Small parameter.

    Returns
    -------
    float
        A2 - 1 = (t - eps) / (1 + eps), exactly 0 for eps = 0.
    """
    order = validate_series_order(order)
    eps = float(eps)
    t = float(_entry_value(A2_TABLE[order // 2], eps * eps))
    return (t - eps) / (1 + eps)


# =============================================================================
# A3 FAMILY
# =============================================================================


def evaluate_A3_coeffs(order: int, n: float) -> SeriesCoefficients:
    """Compute the coefficients of A3 as a power series in eps.

    Parameters
    ----------
    order : int
        Truncation order; the result has ``order`` entries.
    n : float
        Third flattening, n = f / (2 - f).

    Returns
    -------
    SeriesCoefficients
        Family A3; entry j is the (n-dependent) coefficient of eps^j.
    """
    order = validate_series_order(order)
    n = float(n)
    values = [float(_entry_value(entry, n)) for entry in A3_TABLE[order]]
    return SeriesCoefficients(SeriesFamily.A3, order, values)


def evaluate_A3(a3_coeffs: SeriesCoefficients, eps: float) -> float:
    """Evaluate the longitude-integral factor A3 at ``eps``.

    Parameters
    ----------
    a3_coeffs : SeriesCoefficients
        Output of ``evaluate_A3_coeffs``.
    eps : float
        Small parameter.

    Returns
    -------
    float
        A3 = sum(a3[j] eps^j); 0 for order 0.
    """
    a3_coeffs.require(SeriesFamily.A3)
    return float(horner_evaluate(float(eps), a3_coeffs.values))


# =============================================================================
# PER-HARMONIC FAMILIES C1, C1p, C2
# =============================================================================


def evaluate_C1_coeffs(order: int, eps: float) -> SeriesCoefficients:
    """Compute the Fourier coefficients C1[l] of B1 (distance integral).

    Parameters
    ----------
    order : int
        Truncation order N.
    eps : float
        Small parameter.

    Returns
    -------
    SeriesCoefficients
        Family C1 of length N + 1, index 0 equal to 0, C1[l] = O(eps^l).

    Examples
    --------
    >>> evaluate_C1_coeffs(2, 0.1).to_list()[1]
    -0.05
    """
    order = validate_series_order(order)
    values = _harmonic_coeffs(C1_TABLE[order], float(eps))
    return SeriesCoefficients(SeriesFamily.C1, order, values)


def evaluate_C1p_coeffs(order: int, eps: float) -> SeriesCoefficients:
    """Compute the coefficients C1p[l] of the reverted distance series.

    With tau = sigma + B1(sigma), sigma = tau + sum(C1p[l] sin(2 l tau)).

    Parameters
    ----------
    order : int
        Truncation order N.
    eps : float
        Small parameter.

    Returns
    -------
    SeriesCoefficients
        Family C1p of length N + 1, index 0 equal to 0.
    """
    order = validate_series_order(order)
    values = _harmonic_coeffs(C1P_TABLE[order], float(eps))
    return SeriesCoefficients(SeriesFamily.C1P, order, values)


def evaluate_C2_coeffs(order: int, eps: float) -> SeriesCoefficients:
    """Compute the Fourier coefficients C2[l] of B2 (reduced-length integral).

    Parameters
    ----------
    order : int
        Truncation order N.
    eps : float
        Small parameter.

    Returns
    -------
    SeriesCoefficients
        Family C2 of length N + 1, index 0 equal to 0.
    """
    order = validate_series_order(order)
    values = _harmonic_coeffs(C2_TABLE[order], float(eps))
    return SeriesCoefficients(SeriesFamily.C2, order, values)


# =============================================================================
# TWO-STAGE FAMILY C3
# =============================================================================


def evaluate_C3x_coeffs(order: int, n: float) -> SeriesCoefficients:
    """Compute the packed polynomial-in-n table used to build C3.

    Parameters
    ----------
    order : int
        Truncation order N.
    n : float
        Third flattening.

    Returns
    -------
    SeriesCoefficients
        Family C3x of length N (N - 1) / 2. Harmonic l (1 <= l < N) owns
        N - l consecutive entries, the ascending eps-power coefficients of
        C3[l] / eps^l. Empty for N = 0 and N = 1.
    """
    order = validate_series_order(order)
    n = float(n)
    rows = C3X_TABLE[order]
    expected = SeriesFamily.C3X.expected_length(order)
    if len(rows) != expected:
        raise RuntimeError(
            f"C3x table for order {order} has {len(rows)} rows, expected {expected}"
        )
    values = [float(_entry_value(entry, n)) for entry in rows]
    return SeriesCoefficients(SeriesFamily.C3X, order, values)


def evaluate_C3_coeffs(c3x: SeriesCoefficients, eps: float) -> SeriesCoefficients:
    """Combine a C3x table into the Fourier coefficients C3[l] at ``eps``.

    Parameters
    ----------
    c3x : SeriesCoefficients
        Output of ``evaluate_C3x_coeffs`` for the desired order N.
    eps : float
        Small parameter.

    Returns
    -------
    SeriesCoefficients
        Family C3 of length N; index 0 equal to 0 and, for 1 <= i < N,
        C3[i] = eps^i * horner(eps, segment_i).

    Raises
    ------
    ValueError
        If ``c3x`` is not a C3x sequence.
    RuntimeError
        If the segments do not consume the C3x table exactly.
    """
    c3x.require(SeriesFamily.C3X)
    order = c3x.order
    eps = float(eps)

    values = [0.0] * order
    mult = 1.0
    offset = 0
    # i is the index of C3[i]
    for i in range(1, order):
        m = order - i
        mult *= eps
        values[i] = float(mult * horner_evaluate(eps, c3x.values[offset:offset + m]))
        offset += m

    if offset != len(c3x):
        raise RuntimeError(
            f"C3 combination consumed {offset} of {len(c3x)} C3x coefficients"
        )
    return SeriesCoefficients(SeriesFamily.C3, order, values)


def coeffs_C3(order: int, n: float, eps: float) -> SeriesCoefficients:
    """Build C3 coefficients for (order, n, eps) in one call.

    Callers evaluating many eps values for one ellipsoid should keep the
    ``evaluate_C3x_coeffs(order, n)`` result and call ``evaluate_C3_coeffs``.
    """
    return evaluate_C3_coeffs(evaluate_C3x_coeffs(order, n), eps)


def precompute_families(
    order: int,
    eps: float,
    n: float,
    families: Sequence[SeriesFamily] = tuple(SeriesFamily)
) -> dict:
    """Generate several families for one (order, eps, n) configuration.

    Parameters
    ----------
    order : int
        Truncation order shared by every family.
    eps : float
        Small parameter for C1, C1p, C2 and C3.
    n : float
        Third flattening for A3, C3x and C3.
    families : sequence of SeriesFamily
        Families to build (default: all).

    Returns
    -------
    dict
        Mapping SeriesFamily -> SeriesCoefficients.
    """
    order = validate_series_order(order)
    builders = {
        SeriesFamily.A3: lambda: evaluate_A3_coeffs(order, n),
        SeriesFamily.C1: lambda: evaluate_C1_coeffs(order, eps),
        SeriesFamily.C1P: lambda: evaluate_C1p_coeffs(order, eps),
        SeriesFamily.C2: lambda: evaluate_C2_coeffs(order, eps),
        SeriesFamily.C3X: lambda: evaluate_C3x_coeffs(order, n),
        SeriesFamily.C3: lambda: coeffs_C3(order, n, eps),
    }
    result = {family: builders[family]() for family in families}
    logger.debug(
        f"Precomputed {len(result)} coefficient families "
        f"(order={order}, eps={eps:.6e}, n={n:.6e})"
    )
    return result
