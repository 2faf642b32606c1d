"""
Scene layer of the station map.

Turns user input (window clicks) into stations, builds the paths between
them through the geospatial module, and describes everything as
renderer-agnostic drawables.
"""

from scene.config import SceneConfig
from scene.viewport import Viewport, day_night_factor
from scene.basemap import decode_run_length, decode_world_map, WORLD_MAP_RLE
from scene.drawables import DrawMode, Drawable, map_quad, path_drawable, station_drawable
from scene.station_map import StationMap

__all__ = [
    "SceneConfig",
    "Viewport",
    "day_night_factor",
    "decode_run_length",
    "decode_world_map",
    "WORLD_MAP_RLE",
    "DrawMode",
    "Drawable",
    "map_quad",
    "path_drawable",
    "station_drawable",
    "StationMap",
]
