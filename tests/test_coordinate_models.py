"""Tests for ellipsoid parameters and small parameters."""

import numpy as np
import pytest

from geospatial import (
    EllipsoidParameters,
    WGS84Ellipsoid,
    ellipsoid_from_name,
    radius_of_curvature_meridian,
    reduced_latitude,
    small_parameter_eps,
)


class TestEllipsoidParameters:

    def test_wgs84_derived_values(self):
        assert WGS84Ellipsoid.b == pytest.approx(6_356_752.314245, abs=1e-6)
        assert WGS84Ellipsoid.e2 == pytest.approx(6.69437999014e-3, rel=1e-11)
        assert WGS84Ellipsoid.n == pytest.approx(1.679220386383705e-3, rel=1e-14)

    def test_third_flattening_identity(self):
        e = WGS84Ellipsoid
        assert e.n == pytest.approx((e.a - e.b) / (e.a + e.b), rel=1e-12)

    def test_from_pyproj_name(self):
        wgs84 = ellipsoid_from_name("WGS84")
        assert wgs84.a == WGS84Ellipsoid.a
        assert wgs84.f == pytest.approx(WGS84Ellipsoid.f, rel=1e-14)

        grs80 = ellipsoid_from_name("GRS80")
        assert grs80.f == pytest.approx(1 / 298.257222101, rel=1e-12)
        assert grs80.name == "GRS80"

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            ellipsoid_from_name("not-an-ellipsoid")

    def test_to_geod_round_trip(self):
        geod = WGS84Ellipsoid.to_geod()
        assert geod.a == WGS84Ellipsoid.a
        assert geod.f == pytest.approx(WGS84Ellipsoid.f, rel=1e-14)

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            WGS84Ellipsoid.a = 1.0


class TestSmallParameter:

    def test_zero(self):
        assert small_parameter_eps(0.0) == 0.0

    @pytest.mark.parametrize("k2", [1e-6, 6.7e-3, 0.5, 3.0])
    def test_inverts_k2(self, k2):
        eps = small_parameter_eps(k2)
        assert 4 * eps / (1 - eps) ** 2 == pytest.approx(k2, rel=1e-13)

    def test_vectorized(self):
        k2 = np.array([0.0, 0.01, 0.1])
        np.testing.assert_allclose(small_parameter_eps(k2), [small_parameter_eps(k) for k in k2])


class TestReducedLatitude:

    @pytest.mark.parametrize("lat", [-1.2, -0.3, 0.0, 0.4, 1.5])
    def test_definition(self, lat):
        sbet, cbet = reduced_latitude(lat)
        assert sbet ** 2 + cbet ** 2 == pytest.approx(1.0, rel=1e-14)
        assert np.arctan2(sbet, cbet) == pytest.approx(
            np.arctan((1 - WGS84Ellipsoid.f) * np.tan(lat)), abs=1e-14
        )

    def test_sphere(self):
        sphere = EllipsoidParameters(a=1.0, f=0.0, name="unit")
        sbet, cbet = reduced_latitude(0.7, sphere)
        assert sbet == pytest.approx(np.sin(0.7))
        assert cbet == pytest.approx(np.cos(0.7))


class TestMeridianCurvature:

    def test_equator_and_pole(self):
        assert radius_of_curvature_meridian(0.0) == pytest.approx(6_335_439.327, abs=1e-3)
        assert radius_of_curvature_meridian(np.pi / 2) == pytest.approx(6_399_593.626, abs=1e-3)
