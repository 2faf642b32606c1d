"""
Great-Circle Distance on the Spherical Earth.

Scientific Context
------------------
Domain: Spherical geometry
Model: Sphere with a 40,000 km circumference (radius 40000/2π km)

The distance between two points is the central angle between their unit
vectors times the sphere's radius:

    d = R · acos(a · b)

Rounding can push the dot product of nearly identical or nearly opposite
vectors just past ±1, so it is clamped before ``acos``. The unit vectors
are built in double precision here: in single precision the dot product
of a vector with itself can come out as 1 - 6e-8, which ``acos`` turns
into a spurious 2 km.

Cross-check
-----------
:func:`reference_distance_km` solves the same problem with `pyproj`
(GeographicLib) on a sphere of the same radius. It is an independent
implementation used by the consistency checks, not by the map itself.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
"""

from typing import List, Sequence
import numpy as np

from pyproj import Geod

from common.constants import GeometryConstants
from common.types import GeographicPoint
from geospatial.coordinate_models import geo_to_unit_vector


# Geodesic solver on the model sphere (flattening 0), lengths in meters
_sphere_geod = Geod(a=GeometryConstants.EARTH_RADIUS.value * 1000.0, f=0.0)


def great_circle_angle(start: GeographicPoint, end: GeographicPoint) -> float:
    """Central angle between two geographic points.

    Parameters
    ----------
    start, end : GeographicPoint
        Positions in degrees.

    Returns
    -------
    float
        Angle in radians, in [0, π].
    """
    a = geo_to_unit_vector(start, dtype=np.float64)
    b = geo_to_unit_vector(end, dtype=np.float64)

    clamp = GeometryConstants.DISTANCE_DOT_CLAMP.value
    cos_angle = np.clip(np.dot(a, b), -clamp, clamp)

    return float(np.arccos(cos_angle))


def great_circle_distance(start: GeographicPoint, end: GeographicPoint) -> float:
    """Great-circle distance between two geographic points.

    Parameters
    ----------
    start, end : GeographicPoint
        Positions in degrees.

    Returns
    -------
    float
        Distance in kilometers. Symmetric in its arguments, non-negative,
        and zero for identical points.

    Examples
    --------
    >>> round(great_circle_distance(GeographicPoint(0, 0), GeographicPoint(0, 90)), 3)
    10000.0
    """
    return GeometryConstants.arc_length_km(great_circle_angle(start, end))


def route_distances(stations: Sequence[GeographicPoint]) -> List[float]:
    """Distances between consecutive stations, in kilometers.

    A route of N stations has N - 1 legs; fewer than two stations yield
    an empty list.
    """
    return [
        great_circle_distance(stations[i - 1], stations[i])
        for i in range(1, len(stations))
    ]


def reference_distance_km(start: GeographicPoint, end: GeographicPoint) -> float:
    """Distance on the model sphere computed by `pyproj`.

    Parameters
    ----------
    start, end : GeographicPoint
        Positions in degrees.

    Returns
    -------
    float
        Geodesic distance in kilometers.
    """
    _, _, distance_m = _sphere_geod.inv(
        start.longitude, start.latitude, end.longitude, end.latitude
    )
    return float(distance_m) / 1000.0


def initial_bearing_deg(start: GeographicPoint, end: GeographicPoint) -> float:
    """Forward azimuth at ``start`` towards ``end``.

    Returns
    -------
    float
        Degrees clockwise from north, in [0, 360).
    """
    az_forward, _, _ = _sphere_geod.inv(
        start.longitude, start.latitude, end.longitude, end.latitude
    )
    return float(az_forward) % 360.0
