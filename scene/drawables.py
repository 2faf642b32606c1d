"""
Renderer-agnostic drawable geometry.

Every visible element of the map (the textured base map, the paths and
the stations) is a :class:`Drawable`: a block of float32 vertices in
normalized map space plus the draw parameters of its :class:`DrawMode`.
The elements differ only in those parameters, so one type covers all of
them; the rendering backend switches on ``mode``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from common.constants import GeometryConstants
from common.types import GeographicPoint, Path
from geospatial.projections import geo_to_normalized_map
from scene.config import Color, SceneConfig


class DrawMode(Enum):
    """Primitive used to draw a vertex block."""
    TEXTURED_QUAD = "triangle_fan"
    LINE_STRIP = "line_strip"
    POINTS = "points"


@dataclass
class Drawable:
    """Vertex data and draw parameters for one map element.

    Attributes
    ----------
    mode : DrawMode
        Primitive type.
    vertices : ndarray
        (N, 2) float32 positions in normalized map space.
    color : Color, optional
        Flat RGB colour; None for textured geometry.
    tex_coords : ndarray, optional
        (N, 2) float32 texture coordinates for TEXTURED_QUAD.
    line_width : float
        Used by LINE_STRIP.
    point_size : float
        Used by POINTS.
    """
    mode: DrawMode
    vertices: NDArray
    color: Optional[Color] = None
    tex_coords: Optional[NDArray] = None
    line_width: float = 1.0
    point_size: float = 1.0

    def __post_init__(self):
        self.vertices = np.ascontiguousarray(
            self.vertices, dtype=GeometryConstants.VERTEX_DTYPE
        ).reshape(-1, 2)
        if self.mode is DrawMode.TEXTURED_QUAD:
            if self.tex_coords is None or len(self.tex_coords) != len(self.vertices):
                raise ValueError("Textured geometry needs one texture coordinate per vertex")
        if self.tex_coords is not None:
            self.tex_coords = np.ascontiguousarray(
                self.tex_coords, dtype=GeometryConstants.VERTEX_DTYPE
            ).reshape(-1, 2)

    @property
    def is_textured(self) -> bool:
        return self.mode is DrawMode.TEXTURED_QUAD

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def vertex_bytes(self) -> bytes:
        """Packed vertex positions, ready for a vertex buffer upload."""
        return self.vertices.tobytes()


def map_quad() -> Drawable:
    """The base map: a quad covering the whole normalized square."""
    vertices = [(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)]
    tex_coords = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    return Drawable(
        mode=DrawMode.TEXTURED_QUAD,
        vertices=np.array(vertices),
        tex_coords=np.array(tex_coords),
    )


def path_drawable(path: Path, config: SceneConfig = SceneConfig()) -> Drawable:
    return Drawable(
        mode=DrawMode.LINE_STRIP,
        vertices=path.as_array(),
        color=config.path_color,
        line_width=config.line_width,
    )


def station_drawable(station: GeographicPoint, config: SceneConfig = SceneConfig()) -> Drawable:
    return Drawable(
        mode=DrawMode.POINTS,
        vertices=geo_to_normalized_map(station).as_array(),
        color=config.station_color,
        point_size=config.point_size,
    )
