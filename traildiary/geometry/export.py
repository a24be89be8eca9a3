"""Convert track points into map-layer friendly geometry."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from polyline import encode as polyline_encode
from shapely.geometry import LineString, mapping

from ..models import TrackPoint

Bounds = Tuple[float, float, float, float]


def to_linestring(points: Sequence[TrackPoint]) -> Optional[LineString]:
    """Return a shapely ``LineString`` in (lon, lat) order, or None for < 2 points."""

    if len(points) < 2:
        return None
    return LineString([(point.lon, point.lat) for point in points])


def track_bounds(points: Sequence[TrackPoint]) -> Optional[Bounds]:
    """Return ``(min_lat, min_lon, max_lat, max_lon)`` covering ``points``."""

    if not points:
        return None
    if len(points) == 1:
        only = points[0]
        return only.lat, only.lon, only.lat, only.lon
    line = to_linestring(points)
    min_lon, min_lat, max_lon, max_lat = line.bounds
    return min_lat, min_lon, max_lat, max_lon


def encode_polyline(points: Sequence[TrackPoint], precision: int = 5) -> str:
    """Encode points as a Google polyline string."""

    if not points:
        return ""
    return polyline_encode(
        [(point.lat, point.lon) for point in points], precision=precision
    )


def to_geojson_feature(
    points: Sequence[TrackPoint],
    properties: Optional[Mapping[str, Any]] = None,
) -> Optional[Dict[str, Any]]:
    """Return a GeoJSON ``Feature`` for the track, or None for < 2 points."""

    line = to_linestring(points)
    if line is None:
        return None
    return {
        "type": "Feature",
        "geometry": mapping(line),
        "properties": dict(properties or {}),
    }


__all__ = ["encode_polyline", "to_geojson_feature", "to_linestring", "track_bounds"]
