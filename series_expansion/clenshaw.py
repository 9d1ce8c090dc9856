"""
Evaluation of Truncated Trigonometric and Power Series.

This module evaluates the series produced by the coefficient generators:

* ``sin_cos_series`` sums y = sum(c[l] * sin(2 l x), l = 1..n) with
  Clenshaw's recurrence, given only sin(x) and cos(x).
* ``horner_evaluate`` evaluates a polynomial stored in ascending powers.

Numerical Context
-----------------
Summing sin(2 l x) term by term needs n trigonometric evaluations whose
rounding errors accumulate. Clenshaw's recurrence for the Chebyshev-like
basis sin(2 l x) uses the identity

    sin(2(l+1)x) = 2 cos(2x) sin(2 l x) - sin(2(l-1)x)

so the whole sum costs O(n) multiply-adds and no trigonometric calls
beyond the (sin x, cos x) pair supplied by the caller. The loop below is
unrolled by two so the accumulators return to their original roles after
every step.

References
----------
- Clenshaw, C.W. (1955). A note on the summation of Chebyshev series.
  Math. Tables Aids Comput. 9(51), 118-120.
- Karney, C.F.F. (2013). Algorithms for geodesics, eq. (25).
"""

from typing import Sequence, Union
import numpy as np
from numpy.typing import NDArray

from common.types import CoefficientsLike, SeriesCoefficients

ArrayOrFloat = Union[float, NDArray[np.float64]]


def _as_float_list(coeffs: CoefficientsLike) -> list:
    if isinstance(coeffs, SeriesCoefficients):
        return coeffs.values.tolist()
    return np.asarray(coeffs, dtype=np.float64).ravel().tolist()


def _zeros_like_angle(sinx: ArrayOrFloat, cosx: ArrayOrFloat) -> ArrayOrFloat:
    if np.ndim(sinx) == 0 and np.ndim(cosx) == 0:
        return 0.0
    return np.zeros(np.broadcast(sinx, cosx).shape, dtype=np.float64)


def sin_cos_series(
    sinx: ArrayOrFloat,
    cosx: ArrayOrFloat,
    coeffs: CoefficientsLike
) -> ArrayOrFloat:
    """Evaluate sum(c[l] * sin(2 l x), l = 1..n) using Clenshaw summation.

    Parameters
    ----------
    sinx, cosx : float or ndarray
        Sine and cosine of the angle x. Arrays broadcast against each other,
        so one coefficient sequence can be evaluated at many angles at once.
        The pair must satisfy sin^2 + cos^2 = 1; this is not checked.
    coeffs : SeriesCoefficients or sequence of float
        Coefficients c[0..n]; c[0] is ignored and n = len(coeffs) - 1.

    Returns
    -------
    float or ndarray
        The series value. Zero when n < 1.

    Examples
    --------
    >>> import numpy as np
    >>> x = 0.3
    >>> y = sin_cos_series(np.sin(x), np.cos(x), [0.0, 5.0])
    >>> bool(np.isclose(y, 5 * np.sin(2 * x)))
    True
    """
    c = _as_float_list(coeffs)
    n = len(c) - 1
    if n < 1:
        return _zeros_like_angle(sinx, cosx)

    # Point to one beyond last element
    index = n + 1
    ar = 2 * (cosx - sinx) * (cosx + sinx)

    # If n is odd, seed with the last element
    if n & 1:
        index -= 1
        k0 = c[index]
    else:
        k0 = 0.0
    k1 = 0.0

    for _ in range(n // 2):
        index -= 1
        k1 = ar * k0 - k1 + c[index]
        index -= 1
        k0 = ar * k1 - k0 + c[index]

    return 2 * sinx * cosx * k0


def horner_evaluate(
    x: ArrayOrFloat,
    coeffs: Union[Sequence[float], NDArray[np.float64]]
) -> ArrayOrFloat:
    """Evaluate a polynomial whose coefficients are in ascending powers.

    Parameters
    ----------
    x : float or ndarray
        Evaluation point.
    coeffs : sequence of float
        c[0] + c[1] x + ... + c[m-1] x^(m-1). An empty sequence gives 0.

    Returns
    -------
    float or ndarray
        Polynomial value.

    Examples
    --------
    >>> horner_evaluate(2.0, [1.0, 0.0, 3.0])
    13.0
    """
    result = 0.0
    for c in reversed(np.asarray(coeffs, dtype=np.float64).tolist()):
        result = result * x + c
    return result


def direct_sin_series(
    x: ArrayOrFloat,
    coeffs: CoefficientsLike
) -> ArrayOrFloat:
    """Reference summation of sum(c[l] * sin(2 l x)) term by term.

    This calls ``np.sin`` once per harmonic and exists only as an oracle for
    checking ``sin_cos_series``; it is not used on any evaluation path.

    Parameters
    ----------
    x : float or ndarray
        Angle in radians.
    coeffs : SeriesCoefficients or sequence of float
        Coefficients c[0..n]; c[0] is ignored.

    Returns
    -------
    float or ndarray
        The series value.
    """
    c = _as_float_list(coeffs)
    total = np.zeros_like(np.asarray(x, dtype=np.float64))
    for l in range(1, len(c)):
        total = total + c[l] * np.sin(2 * l * np.asarray(x, dtype=np.float64))
    if np.ndim(total) == 0:
        return float(total)
    return total
