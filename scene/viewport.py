"""
Viewport mapping between window pixels and the map square.

The map fills the whole window, so normalized device coordinates and
normalized map coordinates coincide. Pixel rows grow downwards while map
y grows upwards.
"""

import math

from common.types import GeographicPoint, NormalizedMapPoint
from geospatial.projections import map_coordinates_to_geographic


class Viewport:
    """A window of ``width`` x ``height`` pixels showing the whole map."""

    def __init__(self, width: int = 600, height: int = 600):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def pixel_to_normalized(self, px: float, py: float) -> NormalizedMapPoint:
        """Convert a pixel position (origin top-left) to map coordinates."""
        ndc_x = 2.0 * px / self.width - 1.0
        ndc_y = 1.0 - 2.0 * py / self.height
        return NormalizedMapPoint(x=ndc_x, y=ndc_y)

    def pixel_to_geographic(self, px: float, py: float) -> GeographicPoint:
        """Geographic position under a pixel, e.g. for a mouse click."""
        return map_coordinates_to_geographic(self.pixel_to_normalized(px, py))

    def normalized_to_pixel(self, point: NormalizedMapPoint):
        """Inverse of :meth:`pixel_to_normalized`, returns (px, py)."""
        px = (point.x + 1.0) * self.width / 2.0
        py = (1.0 - point.y) * self.height / 2.0
        return px, py


def day_night_factor(hour: float) -> float:
    """Brightness of the base map for a local time of day.

    Parameters
    ----------
    hour : float
        Local time in hours, e.g. 13.5 for 13:30.

    Returns
    -------
    float
        1.0 at noon, 0.0 at midnight, following a cosine in between.
    """
    factor = math.cos((hour - 12.0) / 12.0 * math.pi)
    return (factor + 1.0) / 2.0
