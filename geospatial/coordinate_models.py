"""
Coordinate Models for the Spherical Earth.

This module converts between geographic coordinates and unit vectors on
the model sphere. All angles cross the public boundary in degrees and
are converted to radians internally.

Precision
---------
Vertex-producing conversions run in single precision, matching the
vertex buffers of the renderer. Callers that need a more accurate
vector (the distance code) pass ``dtype=np.float64``.

Frame
-----
- Origin at the sphere's centre
- X-axis through (0°, 0°)
- Y-axis through (0°, 90°E)
- Z-axis through the North Pole
"""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from common.constants import GeometryConstants
from common.types import GeographicPoint, CartesianPoint


def geo_to_unit_vector(
    geo: GeographicPoint,
    dtype=GeometryConstants.VERTEX_DTYPE
) -> NDArray:
    """Convert a geographic point to a unit vector array.

    Parameters
    ----------
    geo : GeographicPoint
        Position in degrees.
    dtype : numpy dtype
        Precision of the computation (default: float32).

    Returns
    -------
    ndarray
        Array ``[x, y, z]`` of the given dtype.

    Notes
    -----
    x = cos φ cos λ, y = cos φ sin λ, z = sin φ
    """
    lat_rad = np.radians(np.asarray(geo.latitude, dtype=dtype))
    lon_rad = np.radians(np.asarray(geo.longitude, dtype=dtype))

    cos_lat = np.cos(lat_rad)

    return np.array(
        [cos_lat * np.cos(lon_rad), cos_lat * np.sin(lon_rad), np.sin(lat_rad)],
        dtype=dtype
    )


def geo_to_cartesian(
    geo: GeographicPoint,
    dtype=GeometryConstants.VERTEX_DTYPE
) -> CartesianPoint:
    """Convert geographic coordinates to a point on the unit sphere.

    Parameters
    ----------
    geo : GeographicPoint
        Position in degrees.
    dtype : numpy dtype
        Precision of the computation (default: float32).

    Returns
    -------
    CartesianPoint
        Unit vector pointing at ``geo``.
    """
    return CartesianPoint.from_array(geo_to_unit_vector(geo, dtype))


def unit_vector_to_geo(
    vector: NDArray,
    dtype=GeometryConstants.VERTEX_DTYPE
) -> Tuple[float, float]:
    """Convert a unit vector array to (latitude, longitude) in degrees.

    The vector is not renormalized. Only z is clipped to [-1, 1] so that
    rounding overshoot cannot leave the domain of asin.
    """
    x, y, z = np.asarray(vector, dtype=dtype)
    z = np.asarray(np.clip(z, -1.0, 1.0), dtype=dtype)

    latitude = np.clip(np.degrees(np.arcsin(z)), -90.0, 90.0)
    longitude = np.degrees(np.arctan2(y, x))

    return float(latitude), float(longitude)


def cartesian_to_geographic(
    point: CartesianPoint,
    dtype=GeometryConstants.VERTEX_DTYPE
) -> GeographicPoint:
    """Convert a point on the unit sphere to geographic coordinates.

    Parameters
    ----------
    point : CartesianPoint
        Approximately unit-length vector. The caller guarantees the
        length; this function does not renormalize.
    dtype : numpy dtype
        Precision of the computation (default: float32).

    Returns
    -------
    GeographicPoint
        latitude = asin(z), longitude = atan2(y, x), both in degrees.
    """
    latitude, longitude = unit_vector_to_geo(point.as_array(dtype), dtype)
    return GeographicPoint(latitude=latitude, longitude=longitude)
