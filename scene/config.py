"""Scene configuration: window size, colours and primitive sizes."""

from dataclasses import dataclass
from typing import Tuple

from common.constants import GeometryConstants

Color = Tuple[float, float, float]


@dataclass(frozen=True)
class SceneConfig:
    """Presentation defaults for the station map.

    Attributes
    ----------
    width, height : int
        Window size in pixels.
    path_color : Color
        RGB colour of path line strips (yellow).
    station_color : Color
        RGB colour of station points (red).
    line_width : float
        Line width of paths in pixels.
    point_size : float
        Point size of stations in pixels.
    num_segments : int
        Segments per great-circle path.
    """
    width: int = 600
    height: int = 600
    path_color: Color = (1.0, 1.0, 0.0)
    station_color: Color = (1.0, 0.0, 0.0)
    line_width: float = 3.0
    point_size: float = 10.0
    num_segments: int = GeometryConstants.DEFAULT_NUM_SEGMENTS

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}")
        if self.num_segments < 1:
            raise ValueError(f"num_segments must be at least 1, got {self.num_segments}")
