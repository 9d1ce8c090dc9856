"""Shared fixtures for the series engine tests."""

import numpy as np
import pytest

from geospatial.coordinate_models import WGS84Ellipsoid, small_parameter_eps


@pytest.fixture
def wgs84_eps() -> float:
    """Largest eps on WGS84 (a meridian geodesic)."""
    return float(small_parameter_eps(WGS84Ellipsoid.ep2))


@pytest.fixture
def wgs84_n() -> float:
    return WGS84Ellipsoid.n


@pytest.fixture
def sample_angles() -> np.ndarray:
    """Twenty angles spread over [0, 2π)."""
    return np.linspace(0.0, 2 * np.pi, 20, endpoint=False) + 0.05
