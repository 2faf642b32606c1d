"""Tests for geographic <-> Cartesian conversion."""

from __future__ import annotations

import math

import numpy as np
import pytest

from common.types import CartesianPoint, GeographicPoint
from geospatial.coordinate_models import (
    cartesian_to_geographic,
    geo_to_cartesian,
    geo_to_unit_vector,
)


class TestGeographicPoint:
    def test_valid_point(self):
        geo = GeographicPoint(latitude=47.5, longitude=19.0)
        assert geo.latitude == 47.5
        assert geo.longitude == 19.0

    def test_latitude_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            GeographicPoint(latitude=91.0, longitude=0.0)

    def test_nan_latitude_rejected(self):
        with pytest.raises(ValueError):
            GeographicPoint(latitude=float("nan"), longitude=0.0)

    def test_immutable(self):
        geo = GeographicPoint(latitude=1.0, longitude=2.0)
        with pytest.raises(AttributeError):
            geo.latitude = 3.0

    def test_to_radians(self):
        lat, lon = GeographicPoint(90.0, -180.0).to_radians()
        assert lat == pytest.approx(math.pi / 2)
        assert lon == pytest.approx(-math.pi)


class TestGeoToCartesian:
    @pytest.mark.parametrize(
        "lat, lon, expected",
        [
            (0.0, 0.0, (1.0, 0.0, 0.0)),
            (0.0, 90.0, (0.0, 1.0, 0.0)),
            (0.0, -90.0, (0.0, -1.0, 0.0)),
            (90.0, 0.0, (0.0, 0.0, 1.0)),
            (-90.0, 45.0, (0.0, 0.0, -1.0)),
        ],
    )
    def test_axes(self, lat, lon, expected):
        point = geo_to_cartesian(GeographicPoint(lat, lon))
        assert (point.x, point.y, point.z) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize("lat, lon", [(12.3, 45.6), (-33.9, 151.2), (64.1, -21.9), (0.0, 179.0)])
    def test_unit_length(self, lat, lon):
        assert geo_to_cartesian(GeographicPoint(lat, lon)).norm == pytest.approx(1.0, abs=1e-6)

    def test_single_precision_by_default(self):
        assert geo_to_unit_vector(GeographicPoint(10.0, 20.0)).dtype == np.float32

    def test_double_precision_on_request(self):
        vector = geo_to_unit_vector(GeographicPoint(10.0, 20.0), dtype=np.float64)
        assert vector.dtype == np.float64
        assert np.dot(vector, vector) == pytest.approx(1.0, abs=1e-15)


class TestCartesianToGeographic:
    @pytest.mark.parametrize(
        "lat, lon",
        [(0.0, 0.0), (47.4979, 19.0402), (-33.8688, 151.2093), (40.7128, -74.006), (-85.0, -179.0)],
    )
    def test_round_trip(self, lat, lon):
        geo = cartesian_to_geographic(geo_to_cartesian(GeographicPoint(lat, lon)))
        assert geo.latitude == pytest.approx(lat, abs=1e-4)
        assert geo.longitude == pytest.approx(lon, abs=1e-4)

    def test_latitude_from_z(self):
        geo = cartesian_to_geographic(CartesianPoint(0.0, 0.0, 1.0))
        assert geo.latitude == pytest.approx(90.0)

    def test_longitude_from_atan2(self):
        geo = cartesian_to_geographic(CartesianPoint(-1.0, 0.0, 0.0))
        assert abs(geo.longitude) == pytest.approx(180.0)

    def test_overshoot_does_not_produce_nan(self):
        geo = cartesian_to_geographic(CartesianPoint(0.0, 0.0, 1.0000001))
        assert geo.latitude == pytest.approx(90.0)

    def test_does_not_renormalize(self):
        # A vector of length 2 along x still reads as (0, 0): only direction
        # enters atan2, and z = 0.
        geo = cartesian_to_geographic(CartesianPoint(2.0, 0.0, 0.0))
        assert (geo.latitude, geo.longitude) == (0.0, 0.0)
