"""
Tests for the series integrals I1, I2 and I3 against numerical quadrature.
"""

import numpy as np
import pytest
from scipy import integrate

from series_expansion import (
    evaluate_A1,
    evaluate_A2,
    evaluate_A3,
    evaluate_A3_coeffs,
    evaluate_C1_coeffs,
    evaluate_C2_coeffs,
    coeffs_C3,
    longitude_integral,
    series_integral,
)

SIGMAS = [0.1, 0.7, 1.5, 2.4, 3.1]


def _quad(integrand, sigma):
    return integrate.quad(integrand, 0.0, sigma, epsabs=1e-14, epsrel=1e-13)[0]


class TestDistanceIntegrals:
    """I1 and I2 from A1/C1 and A2/C2."""

    @pytest.mark.parametrize("sigma", SIGMAS)
    @pytest.mark.parametrize("order", [6, 8])
    def test_i1_matches_quadrature(self, sigma, order, wgs84_eps):
        k2 = 4 * wgs84_eps / (1 - wgs84_eps) ** 2
        expected = _quad(lambda s: np.sqrt(1 + k2 * np.sin(s) ** 2), sigma)
        value = series_integral(
            evaluate_A1(order, wgs84_eps), evaluate_C1_coeffs(order, wgs84_eps), sigma
        )
        assert value == pytest.approx(expected, abs=1e-12)

    @pytest.mark.parametrize("sigma", SIGMAS)
    @pytest.mark.parametrize("order", [6, 8])
    def test_i2_matches_quadrature(self, sigma, order, wgs84_eps):
        k2 = 4 * wgs84_eps / (1 - wgs84_eps) ** 2
        expected = _quad(lambda s: 1 / np.sqrt(1 + k2 * np.sin(s) ** 2), sigma)
        value = series_integral(
            evaluate_A2(order, wgs84_eps), evaluate_C2_coeffs(order, wgs84_eps), sigma
        )
        assert value == pytest.approx(expected, abs=1e-12)

    def test_higher_order_is_more_accurate(self):
        eps = 0.05
        k2 = 4 * eps / (1 - eps) ** 2
        expected = _quad(lambda s: np.sqrt(1 + k2 * np.sin(s) ** 2), 1.2)
        errors = [
            abs(series_integral(evaluate_A1(order, eps), evaluate_C1_coeffs(order, eps), 1.2) - expected)
            for order in (2, 4, 6, 8)
        ]
        assert errors == sorted(errors, reverse=True)
        assert errors[-1] < 1e-10

    def test_vectorized_sigma(self, wgs84_eps):
        sigmas = np.array(SIGMAS)
        a1 = evaluate_A1(6, wgs84_eps)
        c1 = evaluate_C1_coeffs(6, wgs84_eps)
        values = series_integral(a1, c1, sigmas)
        assert values.shape == sigmas.shape
        np.testing.assert_allclose(
            values, [series_integral(a1, c1, s) for s in SIGMAS], rtol=1e-14
        )

    def test_rejects_other_families(self, wgs84_eps, wgs84_n):
        with pytest.raises(ValueError, match="C1 or C2"):
            series_integral(0.0, coeffs_C3(6, wgs84_n, wgs84_eps), 1.0)


class TestLongitudeIntegral:
    """I3 from A3/C3."""

    @pytest.mark.parametrize("sigma", SIGMAS)
    @pytest.mark.parametrize("order", [6, 8])
    def test_i3_matches_quadrature(self, sigma, order, wgs84_eps, wgs84_n):
        k2 = 4 * wgs84_eps / (1 - wgs84_eps) ** 2
        f = 2 * wgs84_n / (1 + wgs84_n)
        expected = _quad(
            lambda s: (2 - f) / (1 + (1 - f) * np.sqrt(1 + k2 * np.sin(s) ** 2)), sigma
        )
        a3 = evaluate_A3(evaluate_A3_coeffs(order, wgs84_n), wgs84_eps)
        value = longitude_integral(a3, coeffs_C3(order, wgs84_n, wgs84_eps), sigma)
        assert value == pytest.approx(expected, abs=1e-12)

    def test_rejects_c1(self, wgs84_eps):
        with pytest.raises(ValueError):
            longitude_integral(1.0, evaluate_C1_coeffs(6, wgs84_eps), 1.0)
