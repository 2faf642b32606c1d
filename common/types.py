"""
Type Definitions for the Station Map Geometry.

This module defines the value types exchanged between the geometry core
and the scene layer. Each type lives in exactly one coordinate space, so
a function signature tells the reader which space it consumes and
produces.

Coordinate Spaces
-----------------
1. Geographic: latitude/longitude in DEGREES (user-facing).
2. Cartesian: unit vector on the sphere (transient, internal).
3. Normalized map: [-1, 1] x [-1, 1] projection space (vertex data).
"""

from dataclasses import dataclass
from typing import Iterator, Tuple
import math

import numpy as np
from numpy.typing import NDArray

from common.constants import GeometryConstants


@dataclass(frozen=True)
class GeographicPoint:
    """A position on the sphere in geographic coordinates.

    Attributes
    ----------
    latitude : float
        Latitude in DEGREES. Range: [-90, 90].
    longitude : float
        Longitude in DEGREES. Nominal range: [-180, 180].

    Notes
    -----
    - Latitude is positive north, negative south.
    - Longitude is stored as given; it is not wrapped.
    - Projection round-trips are lossless only for |latitude| <= 85.

    Examples
    --------
    >>> budapest = GeographicPoint(latitude=47.4979, longitude=19.0402)
    >>> budapest.as_array()
    array([47.4979, 19.0402], dtype=float32)
    """
    latitude: float  # degrees
    longitude: float  # degrees

    def __post_init__(self):
        """Validate the latitude range."""
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(
                f"Latitude {self.latitude} out of range [-90, 90]. "
                f"Did you pass radians or swap latitude and longitude?"
            )

    def to_radians(self) -> Tuple[float, float]:
        """Return (latitude, longitude) in radians."""
        return math.radians(self.latitude), math.radians(self.longitude)

    def as_array(self, dtype=GeometryConstants.VERTEX_DTYPE) -> NDArray:
        """Return ``[latitude, longitude]`` as a numpy array."""
        return np.array([self.latitude, self.longitude], dtype=dtype)


@dataclass(frozen=True)
class CartesianPoint:
    """A point on the unit sphere.

    The frame has its origin at the sphere's centre, X through
    (0°, 0°), Y through (0°, 90°E) and Z through the North Pole.
    """
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, values: NDArray) -> 'CartesianPoint':
        return cls(x=float(values[0]), y=float(values[1]), z=float(values[2]))

    def as_array(self, dtype=GeometryConstants.VERTEX_DTYPE) -> NDArray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    @property
    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


@dataclass(frozen=True)
class NormalizedMapPoint:
    """A point in normalized map space.

    Attributes
    ----------
    x : float
        Normalized longitude, -1 at 180°W and 1 at 180°E.
    y : float
        Normalized Mercator latitude, -1 at the southern band edge and
        1 at the northern band edge. Values beyond ±1 are legal and mean
        the latitude lies outside the projection band.
    """
    x: float
    y: float

    @property
    def in_bounds(self) -> bool:
        """Whether the point falls inside the visible map square."""
        return -1.0 <= self.x <= 1.0 and -1.0 <= self.y <= 1.0

    def as_array(self, dtype=GeometryConstants.VERTEX_DTYPE) -> NDArray:
        return np.array([self.x, self.y], dtype=dtype)


@dataclass(frozen=True)
class Path:
    """A discretized great-circle arc in normalized map space.

    Attributes
    ----------
    points : Tuple[NormalizedMapPoint, ...]
        Vertices ordered by the interpolation parameter t in [0, 1].
        Consecutive vertices are equally spaced in arc angle, not in
        screen distance.
    """
    points: Tuple[NormalizedMapPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[NormalizedMapPoint]:
        return iter(self.points)

    @property
    def num_segments(self) -> int:
        return len(self.points) - 1

    @property
    def first(self) -> NormalizedMapPoint:
        return self.points[0]

    @property
    def last(self) -> NormalizedMapPoint:
        return self.points[-1]

    def as_array(self, dtype=GeometryConstants.VERTEX_DTYPE) -> NDArray:
        """Return the vertices as an (N, 2) array."""
        return np.array([(p.x, p.y) for p in self.points], dtype=dtype).reshape(-1, 2)
