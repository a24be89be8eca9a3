"""Great-circle distance helpers."""

from __future__ import annotations

from dataclasses import replace
import math
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from ..models import TrackPoint

EARTH_RADIUS_KM = 6371.0


def _to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def haversine_distance(a: TrackPoint, b: TrackPoint) -> float:
    """Return the great-circle distance between two points in kilometres.

    Identical coordinates yield exactly ``0.0``.
    """

    d_lat = _to_rad(b.lat - a.lat)
    d_lon = _to_rad(b.lon - a.lon)
    sin_lat = math.sin(d_lat / 2.0)
    sin_lon = math.sin(d_lon / 2.0)
    h = (
        sin_lat * sin_lat
        + math.cos(_to_rad(a.lat)) * math.cos(_to_rad(b.lat)) * sin_lon * sin_lon
    )
    h = min(max(h, 0.0), 1.0)
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def segment_distances_km(points: Sequence[TrackPoint]) -> NDArray[np.float64]:
    """Return haversine lengths (km) of every consecutive pair of points."""

    if len(points) < 2:
        return np.zeros(0, dtype=float)
    lats = np.radians(np.asarray([p.lat for p in points], dtype=float))
    lons = np.radians(np.asarray([p.lon for p in points], dtype=float))
    d_lat = np.diff(lats)
    d_lon = np.diff(lons)
    sin_lat = np.sin(d_lat / 2.0)
    sin_lon = np.sin(d_lon / 2.0)
    h = sin_lat * sin_lat + np.cos(lats[:-1]) * np.cos(lats[1:]) * sin_lon * sin_lon
    # Rounding can push h a hair above 1 for antipodal pairs.
    h = np.clip(h, 0.0, 1.0)
    return 2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(h))


def with_cumulative_distance(points: Sequence[TrackPoint]) -> List[TrackPoint]:
    """Return copies of ``points`` whose ``distance`` is the running total in km."""

    if not points:
        return []
    cumulative = np.concatenate(([0.0], np.cumsum(segment_distances_km(points))))
    return [
        replace(point, distance=float(total))
        for point, total in zip(points, cumulative)
    ]


__all__ = [
    "EARTH_RADIUS_KM",
    "haversine_distance",
    "segment_distances_km",
    "with_cumulative_distance",
]
