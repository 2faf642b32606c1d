"""
The station map: stations placed by the user and the paths between them.

Each new station is joined to the previous one by a great-circle path;
the distance of every new path is reported to the map's route audit log.
"""

from typing import List, Optional

from common.logging_config import get_logger, RouteAuditLog
from common.types import GeographicPoint, Path
from geospatial.distance_calculations import great_circle_distance
from geospatial.path_builder import build_path
from scene.config import SceneConfig
from scene.drawables import Drawable, map_quad, path_drawable, station_drawable
from scene.viewport import Viewport

logger = get_logger(__name__)


class StationMap:
    """Ordered stations and the great-circle paths joining them.

    Parameters
    ----------
    config : SceneConfig, optional
        Window size, colours and path resolution.
    audit : RouteAuditLog, optional
        Sink for path distances. A fresh log is created if omitted.

    Examples
    --------
    >>> station_map = StationMap()
    >>> station_map.add_station(GeographicPoint(47.5, 19.0))
    >>> path = station_map.add_station(GeographicPoint(40.7, -74.0))
    >>> len(path)
    101
    """

    def __init__(
        self,
        config: Optional[SceneConfig] = None,
        audit: Optional[RouteAuditLog] = None
    ):
        self.config = config or SceneConfig()
        self.viewport = Viewport(self.config.width, self.config.height)
        self.audit = audit or RouteAuditLog()

        self._stations: List[GeographicPoint] = []
        self._paths: List[Path] = []
        self._distances: List[float] = []

    @property
    def stations(self) -> List[GeographicPoint]:
        return list(self._stations)

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    @property
    def segment_distances(self) -> List[float]:
        """Distance in kilometers of each path, in placement order."""
        return list(self._distances)

    @property
    def total_distance_km(self) -> float:
        return float(sum(self._distances))

    def add_station(self, station: GeographicPoint) -> Optional[Path]:
        """Place a station and connect it to the previous one.

        Parameters
        ----------
        station : GeographicPoint
            Position of the new station.

        Returns
        -------
        Path or None
            The new path, or None if this is the first station.

        Raises
        ------
        AntipodalPointsError
            If the station is antipodal to the previous one. The station
            is not added in that case.
        """
        if not self._stations:
            self._stations.append(station)
            logger.info(f"Placed first station at ({station.latitude:.4f}, {station.longitude:.4f})")
            return None

        previous = self._stations[-1]
        path = build_path(previous, station, self.config.num_segments)
        distance_km = great_circle_distance(previous, station)

        self._stations.append(station)
        self._paths.append(path)
        self._distances.append(distance_km)

        self.audit.log_path(
            (previous.latitude, previous.longitude),
            (station.latitude, station.longitude),
            path.num_segments,
            distance_km,
            context={"from_station": len(self._stations) - 2, "to_station": len(self._stations) - 1}
        )
        return path

    def click(self, px: float, py: float) -> Optional[Path]:
        """Place a station at a window pixel (origin top-left)."""
        return self.add_station(self.viewport.pixel_to_geographic(px, py))

    def drawables(self) -> List[Drawable]:
        """Everything to draw this frame, back to front."""
        items = [map_quad()]
        items.extend(path_drawable(path, self.config) for path in self._paths)
        items.extend(station_drawable(station, self.config) for station in self._stations)
        return items
