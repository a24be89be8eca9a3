"""Point-count reduction for elevation charts and overview geometry."""

from __future__ import annotations

import math
from typing import List, Sequence

from ..models import TrackPoint


def downsample_for_chart(
    points: Sequence[TrackPoint], target_count: int
) -> Sequence[TrackPoint]:
    """Reduce ``points`` to at most ``target_count`` using largest-triangle buckets.

    The first and last points are always kept. Every intermediate bucket
    contributes the point forming the largest (lat, elevation) triangle with
    the previously selected point and the average of the following bucket,
    which keeps elevation peaks that stride sampling would drop. Selected
    points are returned as-is so their cumulative distance still lines up
    with the full track.
    """

    count = len(points)
    if count <= target_count:
        return points
    if target_count < 3:
        return [points[0], points[-1]][: max(target_count, 0)]

    sampled: List[TrackPoint] = [points[0]]
    bucket_size = (count - 2) / (target_count - 2)
    prev_index = 0

    for i in range(target_count - 2):
        next_start = math.floor((i + 1) * bucket_size) + 1
        next_end = min(math.floor((i + 2) * bucket_size) + 1, count - 1)

        next_count = next_end - next_start
        avg_lat = 0.0
        avg_elevation = 0.0
        for j in range(next_start, next_end):
            avg_lat += points[j].lat
            avg_elevation += points[j].elevation
        avg_lat /= next_count or 1
        avg_elevation /= next_count or 1

        range_start = math.floor(i * bucket_size) + 1
        range_end = min(math.floor((i + 1) * bucket_size) + 1, count - 1)

        prev = points[prev_index]
        max_area = -1.0
        max_index = range_start
        for j in range(range_start, range_end):
            candidate = points[j]
            area = abs(
                (prev.lat - avg_lat) * (candidate.elevation - prev.elevation)
                - (prev.lat - candidate.lat) * (avg_elevation - prev.elevation)
            )
            if area > max_area:
                max_area = area
                max_index = j

        sampled.append(points[max_index])
        prev_index = max_index

    sampled.append(points[-1])
    return sampled


def sample_points(points: Sequence[TrackPoint], every: int) -> Sequence[TrackPoint]:
    """Keep points whose ``index`` is a multiple of ``every``.

    Mirrors how stored tracks are thinned before view simplification.
    ``every <= 1`` returns the input unchanged.
    """

    if every <= 1:
        return points
    return [point for point in points if point.index % every == 0]


__all__ = ["downsample_for_chart", "sample_points"]
