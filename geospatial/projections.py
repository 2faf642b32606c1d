"""
Normalized Mercator Map Projection.

This module maps geographic coordinates onto the [-1, 1] x [-1, 1] square
the renderer draws the world map into, and back.

Scientific Context
------------------
Domain: Cartography
Model: Spherical Mercator (conformal), restricted to a fixed latitude band

Projection
----------
- x is linear in longitude: x = λ / 180.
- y is the Mercator ordinate ``ln(tan φ + sec φ)`` rescaled affinely so
  that the band edges -85° and +85° land on -1 and +1.

Because the band is fixed, the mapping is stateless and invertible: two
points normalize consistently no matter which other points are plotted.
Latitudes beyond the band produce |y| > 1 and are not clamped; clipping
is left to the rendering layer. The poles themselves are singular.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

import numpy as np

from common.constants import GeometryConstants
from common.types import GeographicPoint, NormalizedMapPoint


def mercator_ordinate(latitude_deg: float, dtype=GeometryConstants.VERTEX_DTYPE):
    """Compute the Mercator ordinate ``ln(tan φ + sec φ)``.

    Parameters
    ----------
    latitude_deg : float
        Latitude in degrees, strictly inside (-90, 90).
    dtype : numpy dtype
        Precision of the computation.

    Returns
    -------
    numpy scalar
        Unscaled Mercator y on the unit sphere.

    Notes
    -----
    The ordinate is odd in φ. It is evaluated on |φ| and the sign restored
    afterwards, because for southern latitudes tan φ + sec φ cancels
    catastrophically in single precision (≈ 1e-4° error at -85°).
    """
    lat_rad = np.radians(np.asarray(latitude_deg, dtype=dtype))
    abs_lat = np.abs(lat_rad)
    return np.sign(lat_rad) * np.log(np.tan(abs_lat) + dtype(1.0) / np.cos(abs_lat))


class BandedMercatorProjection:
    """Mercator projection normalized to a symmetric latitude band.

    Parameters
    ----------
    band_deg : float
        Half-width of the latitude band in degrees. The band [-band, band]
        is mapped onto y in [-1, 1].
    dtype : numpy dtype
        Precision of the computation (default: float32).

    Notes
    -----
    Both directions use the band ordinates computed once here, so the
    forward and inverse transforms always share the same constants.
    """

    def __init__(
        self,
        band_deg: float = GeometryConstants.PROJECTION_LATITUDE_BAND.value,
        dtype=GeometryConstants.VERTEX_DTYPE
    ):
        if not 0.0 < band_deg < 90.0:
            raise ValueError(f"Latitude band {band_deg}° must lie in (0, 90)")

        self._band_deg = band_deg
        self._dtype = dtype
        self._y_min = mercator_ordinate(-band_deg, dtype)
        self._y_max = mercator_ordinate(band_deg, dtype)

    @property
    def name(self) -> str:
        return f"Normalized Mercator (±{self._band_deg}°)"

    @property
    def band_deg(self) -> float:
        return self._band_deg

    def contains(self, geo: GeographicPoint) -> bool:
        """Whether ``geo`` lies inside the lossless latitude band."""
        return -self._band_deg <= geo.latitude <= self._band_deg

    def forward(self, geo: GeographicPoint) -> NormalizedMapPoint:
        """Project geographic coordinates into normalized map space."""
        dtype = self._dtype
        y_merc = mercator_ordinate(geo.latitude, dtype)

        y = dtype(-1.0) + dtype(2.0) * (y_merc - self._y_min) / (self._y_max - self._y_min)
        x = np.asarray(geo.longitude, dtype=dtype) / dtype(180.0)

        return NormalizedMapPoint(x=float(x), y=float(y))

    def inverse(self, point: NormalizedMapPoint) -> GeographicPoint:
        """Recover geographic coordinates from normalized map space."""
        dtype = self._dtype
        longitude = np.asarray(point.x, dtype=dtype) * dtype(180.0)

        y_merc = self._y_min + (np.asarray(point.y, dtype=dtype) + dtype(1.0)) / dtype(2.0) * (
            self._y_max - self._y_min
        )
        latitude = np.degrees(np.arctan(np.sinh(y_merc)))

        return GeographicPoint(latitude=float(latitude), longitude=float(longitude))

    def scale_factor(self, latitude_deg: float) -> float:
        """Local Mercator scale factor sec φ relative to the equator.

        Useful for judging how stretched a station marker or path segment
        appears at a given latitude.
        """
        return float(1.0 / np.cos(np.radians(latitude_deg)))


# The projection shared by every caller; the band is fixed at 85°.
MAP_PROJECTION = BandedMercatorProjection()


def geo_to_normalized_map(geo: GeographicPoint) -> NormalizedMapPoint:
    """Project geographic coordinates into normalized map coordinates.

    Parameters
    ----------
    geo : GeographicPoint
        Position in degrees. Latitudes beyond ±85° yield |y| > 1.

    Returns
    -------
    NormalizedMapPoint
        x = longitude / 180, y = band-normalized Mercator ordinate.

    Examples
    --------
    >>> geo_to_normalized_map(GeographicPoint(0.0, 90.0))
    NormalizedMapPoint(x=0.5, y=0.0)
    """
    return MAP_PROJECTION.forward(geo)


def map_coordinates_to_geographic(point: NormalizedMapPoint) -> GeographicPoint:
    """Invert :func:`geo_to_normalized_map`.

    Round-trips are lossless within single precision for |latitude| <= 85.
    """
    return MAP_PROJECTION.inverse(point)
