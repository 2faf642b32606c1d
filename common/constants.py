"""
Geometric Constants for the Station Map.

This module provides the constants shared by the projection, interpolation
and distance code, together with their units and provenance. Every
threshold used by the geometry core is defined here once so that forward
and inverse transforms cannot drift apart.

Model
-----
The Earth is a perfect sphere whose equatorial circumference is taken to
be exactly 40,000 km (the original metre definition). This is a
simplification and not WGS84.
"""

from dataclasses import dataclass
from typing import Final
import numpy as np


@dataclass(frozen=True)
class Constant:
    """A constant with its unit and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The unit of the constant.
    source : str
        Where the value comes from.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


class GeometryConstants:
    """Registry of constants used by the geometry core.

    Earth Model
    -----------
    A sphere with a 40,000 km circumference. The radius is derived,
    never typed in separately.

    Numerical Thresholds
    --------------------
    Dot-product thresholds that select the numerically stable branch of
    spherical interpolation and guard ``acos`` against rounding.
    """

    # =========================================================================
    # Spherical Earth
    # =========================================================================

    EARTH_CIRCUMFERENCE: Final[Constant] = Constant(
        value=40_000.0,
        unit="km",
        source="Historical metre definition (meridian quadrant = 10,000 km)",
        description="Circumference of the spherical Earth model"
    )

    EARTH_RADIUS: Final[Constant] = Constant(
        value=40_000.0 / (2.0 * np.pi),
        unit="km",
        source="Derived: circumference / 2π",
        description="Radius of the spherical Earth model (≈ 6366.2 km)"
    )

    # =========================================================================
    # Map Projection
    # =========================================================================

    PROJECTION_LATITUDE_BAND: Final[Constant] = Constant(
        value=85.0,
        unit="degree",
        source="Web Mercator convention (≈ 85.05° cut-off, rounded)",
        description="Latitude band ±φ mapped onto the normalized range [-1, 1]"
    )

    # =========================================================================
    # Interpolation and Distance Guards
    # =========================================================================

    COINCIDENT_DOT_THRESHOLD: Final[Constant] = Constant(
        value=0.9995,
        unit="dimensionless",
        source="Common slerp practice (angle below ≈ 1.8°)",
        description="Above this dot product slerp falls back to normalized lerp"
    )

    ANTIPODAL_DOT_THRESHOLD: Final[Constant] = Constant(
        value=-0.99999,
        unit="dimensionless",
        source="Single precision resolution of sin(angle) near π",
        description="At or below this dot product the great circle is undefined"
    )

    DISTANCE_DOT_CLAMP: Final[Constant] = Constant(
        value=1.0,
        unit="dimensionless",
        source="Domain of acos",
        description="Dot products are clamped to ±this value before acos"
    )

    DEFAULT_NUM_SEGMENTS: Final[int] = 100

    # Vertex data handed to the renderer is single precision
    VERTEX_DTYPE: Final[type] = np.float32

    @staticmethod
    def arc_length_km(angle_rad: float) -> float:
        """Convert a central angle into a surface distance.

        Parameters
        ----------
        angle_rad : float
            Central angle in radians.

        Returns
        -------
        float
            Arc length in kilometers on the model sphere.
        """
        return float(angle_rad) * GeometryConstants.EARTH_RADIUS.value
