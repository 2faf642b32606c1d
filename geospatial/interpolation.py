"""
Spherical Linear Interpolation on the Unit Sphere.

Scientific Context
------------------
Domain: Spherical geometry
Model: Great-circle arc between two unit vectors, parameterized by t

For unit vectors a and b subtending angle Ω:

    slerp(a, b, t) = sin((1 - t) Ω) / sin Ω · a + sin(t Ω) / sin Ω · b

Two configurations are numerically delicate:

1. Nearly coincident vectors (Ω → 0): sin Ω in the denominator vanishes.
   Above a dot product of 0.9995 (Ω below ≈ 1.8°) the arc is
   indistinguishable from its chord, so the chord is interpolated and
   renormalized instead.
2. Antipodal vectors (Ω → π): every great circle through a passes through
   b, so the arc is undefined. This is detected and reported with
   :class:`AntipodalPointsError`; no arbitrary great circle is chosen.
"""

import numpy as np
from numpy.typing import NDArray

from common.constants import GeometryConstants
from common.types import CartesianPoint


class AntipodalPointsError(ValueError):
    """Raised when interpolating between (nearly) opposite unit vectors."""

    def __init__(self, cos_angle: float):
        self.cos_angle = float(cos_angle)
        super().__init__(
            f"Cannot interpolate between antipodal points (dot={self.cos_angle:.7f}): "
            f"the great circle through them is undefined"
        )


def slerp_vectors(
    start: NDArray,
    end: NDArray,
    t: float,
    dtype=GeometryConstants.VERTEX_DTYPE
) -> NDArray:
    """Array form of :func:`slerp`.

    Parameters
    ----------
    start, end : ndarray
        Unit vectors of shape (3,).
    t : float
        Interpolation parameter in [0, 1].
    dtype : numpy dtype
        Precision of the returned vector. The inputs are renormalized and
        combined in double precision.

    Returns
    -------
    ndarray
        Interpolated unit vector of shape (3,).

    Raises
    ------
    AntipodalPointsError
        If the dot product is at or below the antipodal threshold.
    """
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    a = a / np.linalg.norm(a)
    b = b / np.linalg.norm(b)
    t = float(t)

    cos_angle = float(np.dot(a, b))

    if cos_angle > GeometryConstants.COINCIDENT_DOT_THRESHOLD.value:
        mixed = a + t * (b - a)
        return (mixed / np.linalg.norm(mixed)).astype(dtype)

    if cos_angle <= GeometryConstants.ANTIPODAL_DOT_THRESHOLD.value:
        raise AntipodalPointsError(cos_angle)

    # Weights grow like 1/sin Ω, about 220 at the antipodal threshold
    angle = np.arccos(cos_angle)
    sin_angle = np.sin(angle)

    weight_start = np.sin((1.0 - t) * angle) / sin_angle
    weight_end = np.sin(t * angle) / sin_angle

    mixed = weight_start * a + weight_end * b
    return (mixed / np.linalg.norm(mixed)).astype(dtype)


def slerp(
    start: CartesianPoint,
    end: CartesianPoint,
    t: float
) -> CartesianPoint:
    """Interpolate along the great-circle arc from ``start`` to ``end``.

    Parameters
    ----------
    start, end : CartesianPoint
        Unit vectors.
    t : float
        Interpolation parameter in [0, 1]; 0 returns ``start`` and 1
        returns ``end``.

    Returns
    -------
    CartesianPoint
        Unit vector on the arc, at fraction ``t`` of the arc angle.

    Raises
    ------
    AntipodalPointsError
        If ``start`` and ``end`` are antipodal.
    """
    return CartesianPoint.from_array(
        slerp_vectors(start.as_array(), end.as_array(), t)
    )
