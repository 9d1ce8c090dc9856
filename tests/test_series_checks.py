"""Tests for the numerical consistency checker."""

import pytest

from common.constants import SeriesSettings
from common.logging_config import SeriesAuditLog
from validation import SeriesConsistencyChecker, ValidationResult


class TestSeriesConsistencyChecker:

    def test_all_orders_pass(self):
        results = SeriesConsistencyChecker().check_all()
        assert len(results) == 5 * (SeriesSettings.MAX_SERIES_ORDER + 1)
        failed = [(r.test_name, r.details["order"]) for r in results if not r.passed]
        assert failed == []

    def test_result_shape(self):
        results = SeriesConsistencyChecker().check_all(orders=[6])
        assert {r.test_name for r in results} == {
            "family_lengths",
            "zero_parameter",
            "clenshaw_vs_direct",
            "quadrature",
            "c1p_reversion",
        }
        assert all(isinstance(r, ValidationResult) for r in results)

    def test_larger_eps(self):
        # A noticeably flatter ellipsoid than WGS84
        checker = SeriesConsistencyChecker(eps=0.02, n=0.02)
        assert all(r.passed for r in checker.check_all(orders=[6, 8]))

    def test_failure_is_reported(self, monkeypatch):
        monkeypatch.setattr(SeriesSettings, "CLENSHAW_TOLERANCE", -1.0)
        result = SeriesConsistencyChecker().check_clenshaw_vs_direct(4)
        assert not result.passed
        assert result.details["tolerance"] == -1.0

    def test_strict_mode_raises(self, monkeypatch):
        monkeypatch.setattr(SeriesSettings, "CLENSHAW_TOLERANCE", -1.0)
        checker = SeriesConsistencyChecker(strict_mode=True, log_violations=False)
        with pytest.raises(RuntimeError, match="clenshaw_vs_direct"):
            checker.check_clenshaw_vs_direct(4)

    def test_checks_are_audited(self):
        audit = SeriesAuditLog()
        with audit.run_context("checker_audit_test"):
            SeriesConsistencyChecker().check_all(orders=[2, 3])
        summary = audit.get_run_summary("checker_audit_test")
        assert summary["total_checks"] == 10
        assert summary["failed_checks"] == 0
        assert "quadrature" in summary["worst_residual_by_check"]
