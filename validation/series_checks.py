"""
Numerical Consistency Checks for the Series Expansion Engine.

This module verifies that the tabulated series and the evaluators built on
them agree with independent computations.

Check Categories
----------------
1. Structural invariants (sequence lengths per family and order)
2. Zero-parameter limits (every correction vanishes at eps = 0)
3. Summation consistency (Clenshaw versus direct sine summation)
4. Integral agreement (series integrals versus adaptive quadrature)
5. Series reversion (C1p undoes B1)

Every check is recorded in the ``SeriesAuditLog``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional
import numpy as np
from scipy import integrate

from common.constants import SeriesSettings
from common.logging_config import SeriesAuditLog, get_logger
from common.types import SeriesFamily
from geospatial.coordinate_models import WGS84Ellipsoid, small_parameter_eps
from series_expansion import (
    direct_sin_series,
    evaluate_A1,
    evaluate_A2,
    evaluate_A3,
    evaluate_A3_coeffs,
    evaluate_C1_coeffs,
    evaluate_C1p_coeffs,
    evaluate_C2_coeffs,
    evaluate_C3_coeffs,
    evaluate_C3x_coeffs,
    longitude_integral,
    precompute_families,
    series_integral,
    sin_cos_series,
)

logger = get_logger(__name__)

# Largest eps for WGS84 (alpha0 = 0, k2 = e'^2)
DEFAULT_EPS = float(small_parameter_eps(WGS84Ellipsoid.ep2))


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the test.
    passed : bool
        Whether the test passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class SeriesConsistencyChecker:
    """Checker for numerical consistency of the coefficient tables.

    Parameters
    ----------
    strict_mode : bool
        If True, raise RuntimeError on the first failed check.
    log_violations : bool
        Whether to log failed checks.
    eps : float, optional
        Small parameter used by the checks (default: WGS84 meridian value).
    n : float, optional
        Third flattening used by the checks (default: WGS84).
    """

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True,
        eps: Optional[float] = None,
        n: Optional[float] = None
    ):
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self.eps = DEFAULT_EPS if eps is None else float(eps)
        self.n = WGS84Ellipsoid.n if n is None else float(n)
        self._angles = np.linspace(-np.pi, np.pi, 37)
        self._sigmas = np.linspace(0.1, 3.0, 7)
        self._audit = SeriesAuditLog()
        self._logger = get_logger("SeriesConsistencyChecker")

    def check_all(
        self,
        orders: Iterable[int] = range(SeriesSettings.MAX_SERIES_ORDER + 1)
    ) -> List[ValidationResult]:
        """Run every check for each truncation order.

        Parameters
        ----------
        orders : iterable of int
            Truncation orders to check (default: all tabulated orders).

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        results = []
        for order in orders:
            results.append(self.check_lengths(order))
            results.append(self.check_zero_parameter(order))
            results.append(self.check_clenshaw_vs_direct(order))
            results.append(self.check_quadrature(order))
            results.append(self.check_reversion(order))

        failed = sum(1 for r in results if not r.passed)
        logger.info(f"Series consistency: {len(results)} checks, {failed} failed")
        return results

    def check_lengths(self, order: int) -> ValidationResult:
        """Check that every family has its required length."""
        families = precompute_families(order, self.eps, self.n)
        mismatches = {
            family.value: len(coeffs)
            for family, coeffs in families.items()
            if len(coeffs) != family.expected_length(order)
        }
        return self._finish(
            "family_lengths", order, float(len(mismatches)), 0.0,
            f"Length check: {len(mismatches)} mismatched families",
            {"mismatches": mismatches}
        )

    def check_zero_parameter(self, order: int) -> ValidationResult:
        """Check that all eps-dependent corrections vanish at eps = 0."""
        residual = max(abs(evaluate_A1(order, 0.0)), abs(evaluate_A2(order, 0.0)))
        for coeffs in (
            evaluate_C1_coeffs(order, 0.0),
            evaluate_C1p_coeffs(order, 0.0),
            evaluate_C2_coeffs(order, 0.0),
            evaluate_C3_coeffs(evaluate_C3x_coeffs(order, self.n), 0.0),
        ):
            if len(coeffs):
                residual = max(residual, float(np.max(np.abs(coeffs.values))))
        return self._finish(
            "zero_parameter", order, residual, 0.0,
            f"Zero-parameter check: max |value| = {residual:.3e}",
            {}
        )

    def check_clenshaw_vs_direct(self, order: int) -> ValidationResult:
        """Compare Clenshaw summation with direct sine summation."""
        sinx, cosx = np.sin(self._angles), np.cos(self._angles)
        worst: Dict[str, float] = {}
        for family, coeffs in precompute_families(
            order, self.eps, self.n,
            (SeriesFamily.C1, SeriesFamily.C1P, SeriesFamily.C2, SeriesFamily.C3)
        ).items():
            diff = sin_cos_series(sinx, cosx, coeffs) - direct_sin_series(self._angles, coeffs)
            worst[family.value] = float(np.max(np.abs(diff)))
        residual = max(worst.values())
        return self._finish(
            "clenshaw_vs_direct", order, residual, SeriesSettings.CLENSHAW_TOLERANCE,
            f"Clenshaw check: max residual {residual:.3e}",
            {"residual_by_family": worst}
        )

    def check_quadrature(self, order: int) -> ValidationResult:
        """Compare I1, I2 and I3 series with adaptive quadrature."""
        eps = self.eps
        k2 = 4 * eps / (1 - eps) ** 2
        f = 2 * self.n / (1 + self.n)

        integrands = {
            "I1": lambda s: np.sqrt(1 + k2 * np.sin(s) ** 2),
            "I2": lambda s: 1 / np.sqrt(1 + k2 * np.sin(s) ** 2),
            "I3": lambda s: (2 - f) / (1 + (1 - f) * np.sqrt(1 + k2 * np.sin(s) ** 2)),
        }
        a3 = evaluate_A3(evaluate_A3_coeffs(order, self.n), eps)
        c3 = evaluate_C3_coeffs(evaluate_C3x_coeffs(order, self.n), eps)
        series = {
            "I1": series_integral(evaluate_A1(order, eps), evaluate_C1_coeffs(order, eps), self._sigmas),
            "I2": series_integral(evaluate_A2(order, eps), evaluate_C2_coeffs(order, eps), self._sigmas),
            "I3": longitude_integral(a3, c3, self._sigmas),
        }

        worst: Dict[str, float] = {}
        for name, integrand in integrands.items():
            reference = np.array([
                integrate.quad(integrand, 0.0, s, epsabs=1e-14, epsrel=1e-13)[0]
                for s in self._sigmas
            ])
            worst[name] = float(np.max(np.abs(series[name] - reference)))

        residual = max(worst.values())
        return self._finish(
            "quadrature", order, residual, self._truncation_tolerance(order),
            f"Quadrature check: max residual {residual:.3e}",
            {"residual_by_integral": worst, "eps": eps}
        )

    def check_reversion(self, order: int) -> ValidationResult:
        """Check that C1p inverts tau = sigma + B1(sigma)."""
        c1 = evaluate_C1_coeffs(order, self.eps)
        c1p = evaluate_C1p_coeffs(order, self.eps)
        sigma = self._angles
        tau = sigma + sin_cos_series(np.sin(sigma), np.cos(sigma), c1)
        recovered = tau + sin_cos_series(np.sin(tau), np.cos(tau), c1p)
        residual = float(np.max(np.abs(recovered - sigma)))
        return self._finish(
            "c1p_reversion", order, residual, self._truncation_tolerance(order),
            f"Reversion check: max residual {residual:.3e}",
            {}
        )

    def _truncation_tolerance(self, order: int) -> float:
        # Omitted terms are O(eps^order) with coefficients below one
        return SeriesSettings.QUADRATURE_TOLERANCE + 10 * self.eps ** order

    def _finish(
        self,
        name: str,
        order: int,
        residual: float,
        tolerance: float,
        message: str,
        details: Dict[str, Any]
    ) -> ValidationResult:
        record = self._audit.log_check(
            name, order=order, residual=residual, tolerance=tolerance,
            context={"eps": self.eps, "n": self.n}
        )
        result = ValidationResult(
            test_name=name,
            passed=record.passed,
            message=message,
            details={"order": order, "tolerance": tolerance, **details}
        )
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"{name} failed at order {order}: {message}")
            if self.strict_mode:
                raise RuntimeError(f"Series check {name} failed at order {order}: {message}")
        return result
