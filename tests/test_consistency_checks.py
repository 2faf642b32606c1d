"""Tests for the geometric consistency checker."""

from __future__ import annotations

import pytest

from common.types import GeographicPoint, NormalizedMapPoint, Path
from validation.consistency_checks import GeometryConsistencyChecker


class TestGeometryConsistencyChecker:
    @pytest.mark.parametrize(
        "start, end",
        [
            (GeographicPoint(10.0, 20.0), GeographicPoint(40.0, 100.0)),
            (GeographicPoint(-33.8688, 151.2093), GeographicPoint(51.5074, -0.1278)),
            (GeographicPoint(0.0, 0.0), GeographicPoint(0.0, 0.5)),
            (GeographicPoint(-85.0, -170.0), GeographicPoint(85.0, 170.0)),
        ],
    )
    def test_all_checks_pass(self, start, end):
        results = GeometryConsistencyChecker().check_all(start, end)
        assert len(results) == 6
        assert all(r.passed for r in results), [r.message for r in results if not r.passed]

    def test_detects_bad_endpoints(self):
        start, end = GeographicPoint(0.0, 0.0), GeographicPoint(0.0, 90.0)
        wrong = Path(points=(NormalizedMapPoint(0.2, 0.0), NormalizedMapPoint(0.5, 0.0)))
        result = GeometryConsistencyChecker().check_path_endpoints(wrong, start, end)
        assert not result.passed
        assert result.details["first_error"] == pytest.approx(0.2, abs=1e-6)

    def test_detects_wrong_point_count(self):
        path = Path(points=(NormalizedMapPoint(0.0, 0.0),))
        assert not GeometryConsistencyChecker().check_path_point_count(path, 100).passed

    def test_strict_mode_raises(self):
        path = Path(points=(NormalizedMapPoint(0.0, 0.0),))
        with pytest.raises(AssertionError, match="path_point_count"):
            GeometryConsistencyChecker(strict_mode=True).check_path_point_count(path, 100)

    def test_round_trip_limited_by_precision(self):
        # single precision cannot recover 89.9° to within a nanodegree
        result = GeometryConsistencyChecker(round_trip_tolerance_deg=1e-9).check_round_trip(
            [GeographicPoint(89.9, 0.0)]
        )
        assert not result.passed
