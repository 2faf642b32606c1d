"""
Geometric Consistency Checks for the Station Map.

This module verifies that the three coordinate spaces stay mutually
consistent in single precision, and that distances agree with an
independent geodesic solver.

Test Categories
---------------
1. Round-trip (projection forward then inverse)
2. Path fidelity (vertex count, endpoints)
3. Interpolation (unit norm along the arc)
4. Distance (symmetry, agreement with pyproj)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np

from common.constants import GeometryConstants
from common.logging_config import get_logger
from common.types import GeographicPoint, Path
from geospatial.coordinate_models import geo_to_cartesian
from geospatial.distance_calculations import great_circle_distance, reference_distance_km
from geospatial.interpolation import slerp
from geospatial.path_builder import build_path
from geospatial.projections import geo_to_normalized_map, map_coordinates_to_geographic


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the test.
    passed : bool
        Whether the test passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class GeometryConsistencyChecker:
    """Checker for consistency between the coordinate spaces.

    Parameters
    ----------
    round_trip_tolerance_deg : float
        Allowed projection round-trip error in degrees.
    endpoint_tolerance : float
        Allowed path endpoint error in normalized map units.
    norm_tolerance : float
        Allowed deviation of interpolated vectors from unit length.
    distance_tolerance_km : float
        Allowed disagreement with the reference geodesic.
    strict_mode : bool
        If True, raise ``AssertionError`` on the first failed check.
    """

    _logger = get_logger("GeometryConsistencyChecker")

    def __init__(
        self,
        round_trip_tolerance_deg: float = 1e-4,
        endpoint_tolerance: float = 1e-3,
        norm_tolerance: float = 1e-3,
        distance_tolerance_km: float = 0.01,
        strict_mode: bool = False
    ):
        self.round_trip_tolerance_deg = round_trip_tolerance_deg
        self.endpoint_tolerance = endpoint_tolerance
        self.norm_tolerance = norm_tolerance
        self.distance_tolerance_km = distance_tolerance_km
        self.strict_mode = strict_mode

    def _report(self, result: ValidationResult) -> ValidationResult:
        if result.passed:
            self._logger.debug(f"CHECK | {result.test_name} | PASS | {result.message}")
        else:
            self._logger.warning(f"CHECK | {result.test_name} | FAIL | {result.message}")
            if self.strict_mode:
                raise AssertionError(f"{result.test_name}: {result.message}")
        return result

    def check_all(
        self,
        start: GeographicPoint,
        end: GeographicPoint,
        num_segments: int = GeometryConstants.DEFAULT_NUM_SEGMENTS
    ) -> List[ValidationResult]:
        """Run every check on one pair of stations.

        Parameters
        ----------
        start, end : GeographicPoint
            Non-antipodal endpoints inside the projection band.
        num_segments : int
            Path resolution.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        path = build_path(start, end, num_segments)

        return [
            self.check_round_trip([start, end]),
            self.check_path_point_count(path, num_segments),
            self.check_path_endpoints(path, start, end),
            self.check_slerp_unit_norm(start, end),
            self.check_distance_symmetry(start, end),
            self.check_distance_reference(start, end),
        ]

    def check_round_trip(self, points: Sequence[GeographicPoint]) -> ValidationResult:
        """Check that forward then inverse projection recovers each point."""
        errors = []
        for geo in points:
            recovered = map_coordinates_to_geographic(geo_to_normalized_map(geo))
            errors.append(max(
                abs(recovered.latitude - geo.latitude),
                abs(recovered.longitude - geo.longitude),
            ))

        max_error = float(max(errors)) if errors else 0.0

        return self._report(ValidationResult(
            test_name="projection_round_trip",
            passed=max_error <= self.round_trip_tolerance_deg,
            message=f"Round-trip check: max error {max_error:.2e}°",
            details={
                'num_points': len(errors),
                'max_error_deg': max_error,
                'tolerance_deg': self.round_trip_tolerance_deg,
            }
        ))

    def check_path_point_count(self, path: Path, num_segments: int) -> ValidationResult:
        expected = num_segments + 1

        return self._report(ValidationResult(
            test_name="path_point_count",
            passed=len(path) == expected,
            message=f"Path point count: {len(path)} (expected {expected})",
            details={'count': len(path), 'expected': expected}
        ))

    def check_path_endpoints(
        self,
        path: Path,
        start: GeographicPoint,
        end: GeographicPoint
    ) -> ValidationResult:
        """Check that the path starts and ends on the projected stations."""
        first_error = float(np.max(np.abs(
            path.first.as_array(np.float64) - geo_to_normalized_map(start).as_array(np.float64)
        )))
        last_error = float(np.max(np.abs(
            path.last.as_array(np.float64) - geo_to_normalized_map(end).as_array(np.float64)
        )))

        return self._report(ValidationResult(
            test_name="path_endpoints",
            passed=max(first_error, last_error) <= self.endpoint_tolerance,
            message=f"Endpoint check: first={first_error:.2e}, last={last_error:.2e}",
            details={
                'first_error': first_error,
                'last_error': last_error,
                'tolerance': self.endpoint_tolerance,
            }
        ))

    def check_slerp_unit_norm(
        self,
        start: GeographicPoint,
        end: GeographicPoint,
        num_samples: int = 11
    ) -> ValidationResult:
        """Check that interpolated vectors stay on the unit sphere."""
        a = geo_to_cartesian(start)
        b = geo_to_cartesian(end)

        norms = np.array([slerp(a, b, t).norm for t in np.linspace(0.0, 1.0, num_samples)])
        max_deviation = float(np.max(np.abs(norms - 1.0)))

        return self._report(ValidationResult(
            test_name="slerp_unit_norm",
            passed=max_deviation <= self.norm_tolerance,
            message=f"Unit norm check: max deviation {max_deviation:.2e}",
            details={
                'max_deviation': max_deviation,
                'num_samples': num_samples,
                'tolerance': self.norm_tolerance,
            }
        ))

    def check_distance_symmetry(
        self,
        start: GeographicPoint,
        end: GeographicPoint
    ) -> ValidationResult:
        forward = great_circle_distance(start, end)
        backward = great_circle_distance(end, start)

        return self._report(ValidationResult(
            test_name="distance_symmetry",
            passed=forward == backward,
            message=f"Symmetry check: {forward:.6f} km vs {backward:.6f} km",
            details={'forward_km': forward, 'backward_km': backward}
        ))

    def check_distance_reference(
        self,
        start: GeographicPoint,
        end: GeographicPoint
    ) -> ValidationResult:
        """Compare against pyproj's geodesic on the same sphere."""
        distance = great_circle_distance(start, end)
        reference = reference_distance_km(start, end)
        difference = abs(distance - reference)

        return self._report(ValidationResult(
            test_name="distance_reference",
            passed=difference <= self.distance_tolerance_km,
            message=f"Reference distance check: difference {difference:.4f} km",
            details={
                'distance_km': distance,
                'reference_km': reference,
                'tolerance_km': self.distance_tolerance_km,
            }
        ))
