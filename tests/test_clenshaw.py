"""
Tests for Clenshaw summation and Horner evaluation.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from common.types import SeriesCoefficients, SeriesFamily
from series_expansion import (
    direct_sin_series,
    evaluate_C1_coeffs,
    evaluate_C1p_coeffs,
    evaluate_C2_coeffs,
    horner_evaluate,
    sin_cos_series,
)


class TestSinCosSeries:
    """Clenshaw summation of sum(c[l] sin(2 l x))."""

    def test_single_harmonic(self):
        x = 0.3
        y = sin_cos_series(np.sin(x), np.cos(x), [0.0, 5.0])
        assert y == pytest.approx(5 * np.sin(0.6), rel=1e-14)
        assert y == pytest.approx(2.8232, abs=1e-4)

    def test_two_harmonics_match_closed_form(self, sample_angles):
        coeffs = [0.0, 3.0, 2.0]
        for x in sample_angles:
            s, c = np.sin(x), np.cos(x)
            clenshaw = sin_cos_series(s, c, coeffs)
            # sin(2x) (3 + 4 cos(2x)) = 3 sin(2x) + 2 sin(4x)
            closed = np.sin(2 * x) * (3 + 2 * 2 * np.cos(2 * x))
            direct = 3 * np.sin(2 * x) + 2 * np.sin(4 * x)
            assert clenshaw == pytest.approx(closed, rel=1e-12, abs=1e-12)
            assert clenshaw == pytest.approx(direct, rel=1e-12, abs=1e-12)

    def test_c0_is_ignored(self):
        x = 1.1
        a = sin_cos_series(np.sin(x), np.cos(x), [0.0, 1.0, -0.5, 0.25])
        b = sin_cos_series(np.sin(x), np.cos(x), [123.0, 1.0, -0.5, 0.25])
        assert a == b

    @pytest.mark.parametrize("coeffs", [[], [0.0], [7.0]])
    def test_no_harmonics_gives_zero(self, coeffs):
        for x in (0.0, 0.4, 2.0, -3.0):
            assert sin_cos_series(np.sin(x), np.cos(x), coeffs) == 0.0

    def test_all_zero_coefficients_give_exact_zero(self, sample_angles):
        coeffs = [0.0] * 9
        for x in sample_angles:
            assert sin_cos_series(np.sin(x), np.cos(x), coeffs) == 0.0

    @pytest.mark.parametrize("n_harmonics", [1, 2, 3, 6, 7, 8])
    def test_matches_direct_summation(self, n_harmonics, sample_angles):
        rng = np.random.default_rng(n_harmonics)
        coeffs = np.concatenate([[0.0], rng.normal(size=n_harmonics)])
        clenshaw = sin_cos_series(np.sin(sample_angles), np.cos(sample_angles), coeffs)
        assert_allclose(clenshaw, direct_sin_series(sample_angles, coeffs), atol=1e-12)

    def test_generated_coefficients(self, wgs84_eps, sample_angles):
        s, c = np.sin(sample_angles), np.cos(sample_angles)
        for generator in (evaluate_C1_coeffs, evaluate_C1p_coeffs, evaluate_C2_coeffs):
            coeffs = generator(6, wgs84_eps)
            assert_allclose(
                sin_cos_series(s, c, coeffs),
                direct_sin_series(sample_angles, coeffs),
                atol=1e-15
            )

    def test_array_input_matches_scalar(self, sample_angles):
        coeffs = [0.0, 0.3, -0.2, 0.1]
        values = sin_cos_series(np.sin(sample_angles), np.cos(sample_angles), coeffs)
        assert values.shape == sample_angles.shape
        for x, v in zip(sample_angles, values):
            assert v == pytest.approx(sin_cos_series(np.sin(x), np.cos(x), coeffs), rel=1e-14, abs=1e-15)

    def test_array_input_with_no_harmonics(self, sample_angles):
        values = sin_cos_series(np.sin(sample_angles), np.cos(sample_angles), [0.0])
        assert_allclose(values, np.zeros_like(sample_angles))

    def test_odd_function_of_angle(self):
        coeffs = [0.0, 0.4, 0.3, -0.1, 0.05, 0.01]
        for x in (0.2, 1.3, 2.9):
            y = sin_cos_series(np.sin(x), np.cos(x), coeffs)
            assert sin_cos_series(np.sin(-x), np.cos(-x), coeffs) == pytest.approx(-y, rel=1e-15)

    def test_accepts_series_coefficients(self):
        c = SeriesCoefficients(SeriesFamily.C1, 2, [0.0, 3.0, 2.0])
        x = 0.7
        assert sin_cos_series(np.sin(x), np.cos(x), c) == sin_cos_series(
            np.sin(x), np.cos(x), [0.0, 3.0, 2.0]
        )


class TestHornerEvaluate:
    """Ascending-power polynomial evaluation."""

    def test_polynomial(self):
        assert horner_evaluate(2.0, [1.0, 0.0, 3.0]) == 13.0

    def test_empty_is_zero(self):
        assert horner_evaluate(0.5, []) == 0.0

    def test_constant(self):
        assert horner_evaluate(123.0, [4.5]) == 4.5

    def test_array_argument(self):
        x = np.array([0.0, 1.0, -1.0, 0.5])
        assert_allclose(horner_evaluate(x, [1.0, -2.0, 1.0]), (1 - x) ** 2)


class TestDirectSinSeries:
    """Term-by-term oracle."""

    def test_scalar_returns_float(self):
        y = direct_sin_series(0.25, [0.0, 1.0])
        assert isinstance(y, float)
        assert y == pytest.approx(np.sin(0.5))

    def test_empty(self):
        assert direct_sin_series(0.25, []) == 0.0
