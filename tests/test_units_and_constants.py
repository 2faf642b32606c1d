"""Tests for the model constants and distance unit conversion."""

import math

import pytest

from common.constants import GeometryConstants
from common.units import Q_, convert_distance, ensure_quantity


class TestGeometryConstants:
    def test_earth_radius_matches_circumference(self):
        radius = GeometryConstants.EARTH_RADIUS.value
        assert 2.0 * math.pi * radius == pytest.approx(GeometryConstants.EARTH_CIRCUMFERENCE.value)
        assert radius == pytest.approx(6366.1977, abs=1e-4)

    def test_quarter_turn_is_ten_thousand_km(self):
        assert GeometryConstants.arc_length_km(math.pi / 2) == pytest.approx(10_000.0)

    def test_thresholds_are_ordered(self):
        assert GeometryConstants.ANTIPODAL_DOT_THRESHOLD.value < 0.0
        assert GeometryConstants.COINCIDENT_DOT_THRESHOLD.value < GeometryConstants.DISTANCE_DOT_CLAMP.value


class TestConvertDistance:
    @pytest.mark.parametrize(
        "unit, expected",
        [("km", 10_000.0), ("m", 10_000_000.0), ("mi", 6213.7119), ("nmi", 5399.5680)],
    )
    def test_units(self, unit, expected):
        assert convert_distance(10_000.0, unit) == pytest.approx(expected, rel=1e-6)

    def test_bare_number_is_kilometers(self):
        assert str(ensure_quantity(1.0).units) == "kilometer"

    def test_quantity_passes_through(self):
        distance = Q_(3.0, "mile")
        assert ensure_quantity(distance) is distance

    def test_converts_quantity_input(self):
        assert convert_distance(Q_(1.0, "nautical_mile"), "m") == pytest.approx(1852.0)

    def test_unknown_unit(self):
        with pytest.raises(ValueError, match="Unsupported distance unit"):
            convert_distance(1.0, "furlong")
