"""
Geospatial Module for the Station Map.

All Earth-surface calculations of the application originate from this
module: the scene layer never does trigonometry of its own.

This module provides:
- Conversion between geographic and unit-sphere Cartesian coordinates
- The normalized Mercator projection of the map square
- Spherical linear interpolation along great circles
- Great-circle distance on a 40,000 km sphere
- Discretized great-circle paths for rendering
"""

from geospatial.coordinate_models import (
    geo_to_unit_vector,
    geo_to_cartesian,
    unit_vector_to_geo,
    cartesian_to_geographic,
)

from geospatial.projections import (
    BandedMercatorProjection,
    MAP_PROJECTION,
    mercator_ordinate,
    geo_to_normalized_map,
    map_coordinates_to_geographic,
)

from geospatial.interpolation import (
    AntipodalPointsError,
    slerp,
    slerp_vectors,
)

from geospatial.distance_calculations import (
    great_circle_angle,
    great_circle_distance,
    route_distances,
    reference_distance_km,
    initial_bearing_deg,
)

from geospatial.path_builder import build_path

__all__ = [
    # Coordinate models
    "geo_to_unit_vector",
    "geo_to_cartesian",
    "unit_vector_to_geo",
    "cartesian_to_geographic",
    # Projections
    "BandedMercatorProjection",
    "MAP_PROJECTION",
    "mercator_ordinate",
    "geo_to_normalized_map",
    "map_coordinates_to_geographic",
    # Interpolation
    "AntipodalPointsError",
    "slerp",
    "slerp_vectors",
    # Distance calculations
    "great_circle_angle",
    "great_circle_distance",
    "route_distances",
    "reference_distance_km",
    "initial_bearing_deg",
    # Paths
    "build_path",
]
