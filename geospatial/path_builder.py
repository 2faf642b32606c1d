"""
Discretized Great-Circle Paths for the Map.

A path between two stations is drawn as a line strip whose vertices are
equally spaced in arc angle along the great circle. On the flattened map
this produces the familiar curved flight-route look; the curvature is a
property of the projection, not an error.

Pipeline per vertex
-------------------
t = i / N  ->  slerp on the unit sphere  ->  geographic  ->  normalized map
"""

from common.constants import GeometryConstants
from common.logging_config import get_logger
from common.types import GeographicPoint, Path
from geospatial.coordinate_models import geo_to_cartesian, cartesian_to_geographic
from geospatial.interpolation import slerp
from geospatial.projections import geo_to_normalized_map

logger = get_logger(__name__)


def build_path(
    start: GeographicPoint,
    end: GeographicPoint,
    num_segments: int = GeometryConstants.DEFAULT_NUM_SEGMENTS
) -> Path:
    """Build the map-space polyline of the great-circle arc between two points.

    Parameters
    ----------
    start, end : GeographicPoint
        Endpoints in degrees.
    num_segments : int
        Number of line segments (default: 100). The path has
        ``num_segments + 1`` vertices.

    Returns
    -------
    Path
        Vertices in normalized map space, ordered from ``start`` to ``end``.

    Raises
    ------
    ValueError
        If ``num_segments`` is less than 1.
    AntipodalPointsError
        If ``start`` and ``end`` are antipodal (propagated from slerp).
    """
    if num_segments < 1:
        raise ValueError(f"num_segments must be at least 1, got {num_segments}")

    start_cart = geo_to_cartesian(start)
    end_cart = geo_to_cartesian(end)

    # Endpoints are projected from the stations themselves; recovering
    # them through atan2 can flip a longitude of ±180 to the other map edge.
    points = []
    for i in range(num_segments + 1):
        t = i / num_segments
        interpolated = slerp(start_cart, end_cart, t)
        if i == 0:
            points.append(geo_to_normalized_map(start))
        elif i == num_segments:
            points.append(geo_to_normalized_map(end))
        else:
            points.append(geo_to_normalized_map(cartesian_to_geographic(interpolated)))

    logger.debug(
        f"Built path ({start.latitude:.4f}, {start.longitude:.4f}) -> "
        f"({end.latitude:.4f}, {end.longitude:.4f}) with {len(points)} vertices"
    )
    return Path(points=tuple(points))
