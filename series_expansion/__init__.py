"""
Series Expansion Engine for Ellipsoidal Geodesics.

This is the numerical core of the system. Every truncated series used by
the geodesic and projection code MUST be generated and evaluated through
this package.

This package provides:
- Flat per-order coefficient tables (A1, A2, A3, C1, C1p, C2, C3x)
- Coefficient generators returning typed, fixed-length sequences
- Clenshaw summation of Fourier-sine series and Horner evaluation
"""

from common.types import SeriesCoefficients, SeriesFamily

from series_expansion.coefficients import (
    validate_series_order,
    evaluate_A1,
    evaluate_A2,
    evaluate_A3_coeffs,
    evaluate_A3,
    evaluate_C1_coeffs,
    evaluate_C1p_coeffs,
    evaluate_C2_coeffs,
    evaluate_C3x_coeffs,
    evaluate_C3_coeffs,
    coeffs_C3,
    precompute_families,
)

from series_expansion.clenshaw import (
    sin_cos_series,
    horner_evaluate,
    direct_sin_series,
)

from series_expansion.integrals import (
    series_integral,
    longitude_integral,
)

__all__ = [
    # Types
    "SeriesCoefficients",
    "SeriesFamily",
    # Generators
    "validate_series_order",
    "evaluate_A1",
    "evaluate_A2",
    "evaluate_A3_coeffs",
    "evaluate_A3",
    "evaluate_C1_coeffs",
    "evaluate_C1p_coeffs",
    "evaluate_C2_coeffs",
    "evaluate_C3x_coeffs",
    "evaluate_C3_coeffs",
    "coeffs_C3",
    "precompute_families",
    # Evaluators
    "sin_cos_series",
    "horner_evaluate",
    "direct_sin_series",
    # Integrals
    "series_integral",
    "longitude_integral",
]
