"""
Logging Configuration and Route Audit Trail.

This module provides the package logger factory and the sink that every
computed path distance is reported to. A session of station placement
can be summarised or exported afterwards for inspection.
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
import threading


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the station map.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


@dataclass
class PathRecord:
    """Record of one path placed between two consecutive stations.

    Attributes
    ----------
    timestamp : datetime
        When the path was built.
    start : tuple of float
        (latitude, longitude) of the first station in degrees.
    end : tuple of float
        (latitude, longitude) of the second station in degrees.
    num_segments : int
        Number of line segments in the discretized arc.
    distance_km : float
        Great-circle distance between the stations.
    context : dict
        Additional context (station indices, etc.).
    """
    timestamp: datetime
    start: tuple
    end: tuple
    num_segments: int
    distance_km: float
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "start": list(self.start),
            "end": list(self.end),
            "num_segments": self.num_segments,
            "distance_km": self.distance_km,
            "context": self.context,
        }


class RouteAuditLog:
    """Collects path records for one station-placement session.

    Each map owns its own log; there is no process-wide instance.

    Thread Safety
    -------------
    Recording and reading are guarded by a lock.

    Examples
    --------
    >>> audit = RouteAuditLog("session_001")
    >>> audit.log_path((0.0, 0.0), (0.0, 90.0), 100, 10000.0)
    >>> audit.get_summary()["total_distance_km"]
    10000.0
    """

    _logger = get_logger("route_audit")

    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id or datetime.now().strftime('%Y%m%d_%H%M%S')
        self.start_time = datetime.now()
        self._records: List[PathRecord] = []
        self._lock = threading.Lock()

    @property
    def records(self) -> List[PathRecord]:
        with self._lock:
            return list(self._records)

    def log_path(
        self,
        start: tuple,
        end: tuple,
        num_segments: int,
        distance_km: float,
        context: Optional[Dict[str, Any]] = None
    ) -> PathRecord:
        """Record a newly built path and report its distance.

        Parameters
        ----------
        start, end : tuple of float
            (latitude, longitude) endpoints in degrees.
        num_segments : int
            Segment count of the discretized arc.
        distance_km : float
            Great-circle distance in kilometers.
        context : dict, optional
            Additional context for the record.

        Returns
        -------
        PathRecord
            The stored record.
        """
        record = PathRecord(
            timestamp=datetime.now(),
            start=tuple(float(v) for v in start),
            end=tuple(float(v) for v in end),
            num_segments=num_segments,
            distance_km=float(distance_km),
            context=context or {}
        )

        with self._lock:
            self._records.append(record)

        self._logger.info(
            f"PATH | ({record.start[0]:.4f}, {record.start[1]:.4f}) -> "
            f"({record.end[0]:.4f}, {record.end[1]:.4f}) | "
            f"distance={record.distance_km:.1f} km"
        )
        return record

    def get_summary(self) -> Dict[str, Any]:
        """Summarise the session.

        Returns
        -------
        dict
            Path count, total and longest distance.
        """
        records = self.records
        distances = [r.distance_km for r in records]

        return {
            "session_id": self.session_id,
            "start_time": self.start_time.isoformat(),
            "num_paths": len(records),
            "total_distance_km": float(sum(distances)),
            "longest_path_km": float(max(distances)) if distances else 0.0,
        }

    def export_json(self, output_path: Path) -> None:
        """Export the summary and every path record to a JSON file.

        Parameters
        ----------
        output_path : Path
            Path to write the JSON file. Parent directories are created.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        artifacts = {
            "summary": self.get_summary(),
            "paths": [r.to_dict() for r in self.records],
        }

        with open(output_path, 'w') as f:
            json.dump(artifacts, f, indent=2)

        self._logger.info(f"Exported route audit to {output_path}")
