"""Tests for the scene layer: viewport, base map, drawables and station map."""

from __future__ import annotations

import json

import numpy as np
import pytest

from common.logging_config import RouteAuditLog
from common.types import GeographicPoint
from geospatial.interpolation import AntipodalPointsError
from geospatial.path_builder import build_path
from geospatial.projections import geo_to_normalized_map
from scene.basemap import PALETTE, WORLD_MAP_RLE, decode_run_length, decode_world_map
from scene.config import SceneConfig
from scene.drawables import Drawable, DrawMode, map_quad, path_drawable, station_drawable
from scene.station_map import StationMap
from scene.viewport import Viewport, day_night_factor


# ── Viewport ─────────────────────────────────────────────────────────────


class TestViewport:
    def test_corners(self):
        viewport = Viewport(600, 600)
        top_left = viewport.pixel_to_normalized(0, 0)
        bottom_right = viewport.pixel_to_normalized(600, 600)
        assert (top_left.x, top_left.y) == (-1.0, 1.0)
        assert (bottom_right.x, bottom_right.y) == (1.0, -1.0)

    def test_centre_is_null_island(self):
        geo = Viewport(600, 600).pixel_to_geographic(300, 300)
        assert geo.latitude == pytest.approx(0.0, abs=1e-5)
        assert geo.longitude == pytest.approx(0.0, abs=1e-5)

    def test_top_edge_is_band_edge(self):
        geo = Viewport(800, 400).pixel_to_geographic(800, 0)
        assert geo.latitude == pytest.approx(85.0, abs=1e-4)
        assert geo.longitude == pytest.approx(180.0, abs=1e-4)

    def test_pixel_round_trip(self):
        viewport = Viewport(640, 480)
        assert viewport.normalized_to_pixel(viewport.pixel_to_normalized(123, 456)) == pytest.approx((123, 456))

    @pytest.mark.parametrize("width, height", [(0, 600), (600, -1)])
    def test_invalid_size(self, width, height):
        with pytest.raises(ValueError):
            Viewport(width, height)


class TestDayNightFactor:
    @pytest.mark.parametrize(
        "hour, expected",
        [(12.0, 1.0), (0.0, 0.0), (24.0, 0.0), (6.0, 0.5), (18.0, 0.5)],
    )
    def test_values(self, hour, expected):
        assert day_night_factor(hour) == pytest.approx(expected, abs=1e-12)


# ── Base map ─────────────────────────────────────────────────────────────


class TestRunLengthDecoding:
    def test_single_run(self):
        # (4 - 1) << 2 | 1 -> four blue pixels, the rest padded black
        pixels = decode_run_length([(3 << 2) | 1], size=4)
        assert pixels.shape == (16, 3)
        assert np.array_equal(pixels[:4], np.tile(PALETTE[1], (4, 1)))
        assert np.array_equal(pixels[4:], np.tile(PALETTE[3], (12, 1)))

    def test_runs_in_order(self):
        pixels = decode_run_length([(1 << 2) | 2, (0 << 2) | 0], size=2)
        assert np.array_equal(pixels, np.array([PALETTE[2], PALETTE[2], PALETTE[0], PALETTE[3]]))

    def test_overflow_truncated(self):
        pixels = decode_run_length([252, 252, 253], size=8)
        assert pixels.shape == (64, 3)
        assert np.array_equal(pixels, np.tile(PALETTE[0], (64, 1)))

    def test_empty_input_is_black(self):
        pixels = decode_run_length([], size=2)
        assert np.array_equal(pixels, np.tile(PALETTE[3], (4, 1)))

    def test_world_map(self):
        texture = decode_world_map()
        assert texture.shape == (64, 64, 3)
        assert texture.dtype == np.float32

        pixels = texture.reshape(-1, 3)
        counts = [int((pixels == color).all(axis=1).sum()) for color in PALETTE]
        assert sum(counts) == 64 * 64
        assert counts[1] > 0 and counts[2] > 0

    def test_world_map_covers_texture(self):
        covered = sum(((b >> 2) & 0x3F) + 1 for b in WORLD_MAP_RLE)
        assert covered >= 64 * 64


# ── Drawables ────────────────────────────────────────────────────────────


class TestDrawables:
    def test_map_quad(self):
        quad = map_quad()
        assert quad.mode is DrawMode.TEXTURED_QUAD
        assert quad.is_textured
        assert quad.vertex_count == 4
        assert quad.tex_coords.shape == (4, 2)

    def test_textured_needs_tex_coords(self):
        with pytest.raises(ValueError):
            Drawable(mode=DrawMode.TEXTURED_QUAD, vertices=np.zeros((4, 2)))

    def test_path_drawable(self):
        path = build_path(GeographicPoint(10.0, 20.0), GeographicPoint(40.0, 100.0))
        drawable = path_drawable(path)
        assert drawable.mode is DrawMode.LINE_STRIP
        assert drawable.vertex_count == 101
        assert drawable.color == (1.0, 1.0, 0.0)
        assert drawable.line_width == 3.0
        assert len(drawable.vertex_bytes()) == 101 * 2 * 4

    def test_station_drawable(self):
        station = GeographicPoint(47.5, 19.0)
        drawable = station_drawable(station, SceneConfig(station_color=(0.0, 1.0, 1.0)))
        expected = geo_to_normalized_map(station)
        assert drawable.mode is DrawMode.POINTS
        assert drawable.point_size == 10.0
        assert drawable.color == (0.0, 1.0, 1.0)
        assert drawable.vertices[0] == pytest.approx([expected.x, expected.y])


# ── Station map ──────────────────────────────────────────────────────────


class TestStationMap:
    def test_first_station_has_no_path(self):
        station_map = StationMap()
        assert station_map.add_station(GeographicPoint(0.0, 0.0)) is None
        assert station_map.paths == []
        assert station_map.total_distance_km == 0.0

    def test_consecutive_stations_are_joined(self):
        station_map = StationMap()
        station_map.add_station(GeographicPoint(0.0, 0.0))
        path = station_map.add_station(GeographicPoint(0.0, 90.0))
        station_map.add_station(GeographicPoint(45.0, 90.0))

        assert len(path) == 101
        assert len(station_map.stations) == 3
        assert len(station_map.paths) == 2
        assert station_map.segment_distances == pytest.approx([10_000.0, 5_000.0], abs=1e-6)
        assert station_map.total_distance_km == pytest.approx(15_000.0, abs=1e-6)

    def test_distances_reach_audit_log(self):
        audit = RouteAuditLog("test_session")
        station_map = StationMap(audit=audit)
        station_map.add_station(GeographicPoint(0.0, 0.0))
        station_map.add_station(GeographicPoint(0.0, 90.0))

        records = audit.records
        assert len(records) == 1
        assert records[0].distance_km == pytest.approx(10_000.0, abs=1e-6)
        assert records[0].num_segments == 100
        assert records[0].context == {"from_station": 0, "to_station": 1}

    def test_click_places_station(self):
        station_map = StationMap(SceneConfig(width=600, height=600))
        station_map.click(300, 300)
        station = station_map.stations[0]
        assert station.latitude == pytest.approx(0.0, abs=1e-5)
        assert station.longitude == pytest.approx(0.0, abs=1e-5)

    def test_custom_resolution(self):
        station_map = StationMap(SceneConfig(num_segments=8))
        station_map.add_station(GeographicPoint(0.0, 0.0))
        assert len(station_map.add_station(GeographicPoint(30.0, 30.0))) == 9

    def test_antipodal_station_rejected(self):
        station_map = StationMap()
        station_map.add_station(GeographicPoint(10.0, 20.0))
        with pytest.raises(AntipodalPointsError):
            station_map.add_station(GeographicPoint(-10.0, -160.0))
        assert len(station_map.stations) == 1
        assert station_map.paths == []

    def test_drawables_back_to_front(self):
        station_map = StationMap()
        station_map.add_station(GeographicPoint(0.0, 0.0))
        station_map.add_station(GeographicPoint(20.0, 40.0))

        modes = [d.mode for d in station_map.drawables()]
        assert modes == [DrawMode.TEXTURED_QUAD, DrawMode.LINE_STRIP, DrawMode.POINTS, DrawMode.POINTS]

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            SceneConfig(num_segments=0)


class TestRouteAuditLog:
    def test_summary(self):
        audit = RouteAuditLog("summary")
        audit.log_path((0.0, 0.0), (0.0, 90.0), 100, 10_000.0)
        audit.log_path((0.0, 90.0), (45.0, 90.0), 100, 5_000.0)

        summary = audit.get_summary()
        assert summary["session_id"] == "summary"
        assert summary["num_paths"] == 2
        assert summary["total_distance_km"] == 15_000.0
        assert summary["longest_path_km"] == 10_000.0

    def test_empty_summary(self):
        assert RouteAuditLog().get_summary()["longest_path_km"] == 0.0

    def test_export_json(self, tmp_path):
        audit = RouteAuditLog("export")
        audit.log_path((1.0, 2.0), (3.0, 4.0), 50, 314.0, context={"note": "x"})

        output = tmp_path / "nested" / "audit.json"
        audit.export_json(output)

        data = json.loads(output.read_text())
        assert data["summary"]["num_paths"] == 1
        assert data["paths"][0]["start"] == [1.0, 2.0]
        assert data["paths"][0]["distance_km"] == 314.0
        assert data["paths"][0]["context"] == {"note": "x"}
