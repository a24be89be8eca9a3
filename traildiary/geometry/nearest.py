"""Cursor-to-track lookups used for hover and crosshair interaction."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from ..models import TrackPoint
from .distance import EARTH_RADIUS_KM, haversine_distance


def _closest_point_on_segment(
    cursor: TrackPoint, point_a: TrackPoint, point_b: TrackPoint
) -> Tuple[TrackPoint, float]:
    """Project ``cursor`` onto the segment A→B.

    Uses an equirectangular approximation centred on the cursor with a
    ``cos`` correction at the segment's mean latitude. Returns the closest
    point (with elevation, timestamp and distance interpolated along the
    segment) and its distance from the cursor in km.
    """

    lat_a = math.radians(point_a.lat)
    lat_b = math.radians(point_b.lat)
    lat_c = math.radians(cursor.lat)
    lon_c = math.radians(cursor.lon)
    cos_lat_mid = math.cos((lat_a + lat_b) / 2.0)

    # Local x/y with the cursor at the origin.
    x1 = (math.radians(point_a.lon) - lon_c) * cos_lat_mid
    y1 = lat_a - lat_c
    x2 = (math.radians(point_b.lon) - lon_c) * cos_lat_mid
    y2 = lat_b - lat_c

    dx = x2 - x1
    dy = y2 - y1
    len2 = dx * dx + dy * dy
    t = -x1 * dx - y1 * dy
    if len2 > 0:
        t /= len2
    t = max(0.0, min(1.0, t))

    closest_x = x1 + t * dx
    closest_y = y1 + t * dy
    distance_km = math.hypot(closest_x, closest_y) * EARTH_RADIUS_KM

    if t == 0.0:
        return point_a, distance_km
    if t == 1.0:
        return point_b, distance_km

    point = TrackPoint(
        lat=math.degrees(lat_c + closest_y),
        lon=math.degrees(lon_c + closest_x / cos_lat_mid),
        elevation=point_a.elevation + (point_b.elevation - point_a.elevation) * t,
        timestamp=point_a.timestamp + (point_b.timestamp - point_a.timestamp) * t,
        index=point_a.index if t < 0.5 else point_b.index,
        distance=point_a.distance + (point_b.distance - point_a.distance) * t,
    )
    return point, distance_km


def find_nearest_point(
    points: Sequence[TrackPoint], lat: float, lon: float
) -> Optional[TrackPoint]:
    """Return the point on the track polyline closest to ``(lat, lon)``.

    Every vertex is checked first (haversine), then every segment between
    consecutive vertices. A candidate only replaces the current best when it
    is strictly closer, so ties go to the earliest candidate evaluated.

    Returns:
        A vertex from ``points``, an interpolated point on one of its
        segments, or ``None`` when ``points`` is empty.
    """

    if not points:
        return None

    cursor = TrackPoint(lat=lat, lon=lon)
    nearest = points[0]
    min_distance = haversine_distance(cursor, nearest)

    for point in points[1:]:
        distance = haversine_distance(cursor, point)
        if distance < min_distance:
            min_distance = distance
            nearest = point

    for point_a, point_b in zip(points, points[1:]):
        candidate, distance = _closest_point_on_segment(cursor, point_a, point_b)
        if distance < min_distance:
            min_distance = distance
            nearest = candidate

    return nearest


def find_point_by_distance(
    points: Sequence[TrackPoint], target_distance: float
) -> Optional[TrackPoint]:
    """Return the point whose cumulative distance is closest to ``target_distance``.

    ``points`` must be sorted ascending by ``distance``. When two neighbours
    are equally close the earlier one wins.
    """

    if not points:
        return None

    low = 0
    high = len(points) - 1
    while low < high:
        mid = (low + high) // 2
        if points[mid].distance < target_distance:
            low = mid + 1
        else:
            high = mid

    if low > 0 and abs(points[low - 1].distance - target_distance) <= abs(
        points[low].distance - target_distance
    ):
        return points[low - 1]
    return points[low]


__all__ = ["find_nearest_point", "find_point_by_distance"]
