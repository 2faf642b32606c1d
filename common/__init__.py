"""
Common utilities and infrastructure for the station map.

This package provides foundational components used across all modules:
- Geometric constants with provenance
- Value types for the three coordinate spaces
- Unit conversion for reported distances
- Logging and the route audit trail
"""

from common.constants import Constant, GeometryConstants
from common.units import ureg, Q_, convert_distance, ensure_quantity
from common.types import (
    GeographicPoint,
    CartesianPoint,
    NormalizedMapPoint,
    Path,
)
from common.logging_config import get_logger, RouteAuditLog, PathRecord

__all__ = [
    "Constant",
    "GeometryConstants",
    "ureg",
    "Q_",
    "convert_distance",
    "ensure_quantity",
    "GeographicPoint",
    "CartesianPoint",
    "NormalizedMapPoint",
    "Path",
    "get_logger",
    "RouteAuditLog",
    "PathRecord",
]
