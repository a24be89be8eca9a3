"""Per-track statistics and aggregation across tracks, days and trails."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from ..config import ELEVATION_SMOOTHING_WINDOW, MOVING_SPEED_THRESHOLD_KMH
from ..models import TrackPoint, TrackStats
from .distance import segment_distances_km

_MS_PER_HOUR = 3_600_000


def smooth_elevations(
    points: Sequence[TrackPoint], window_size: int = ELEVATION_SMOOTHING_WINDOW
) -> List[float]:
    """Return a centered moving average of elevations.

    The window is clamped at both ends of the sequence, so the first and last
    values average over fewer samples instead of padding.
    """

    count = len(points)
    if count == 0:
        return []
    elevations = np.asarray([p.elevation for p in points], dtype=float)
    half = max(window_size, 1) // 2
    positions = np.arange(count)
    starts = np.maximum(positions - half, 0)
    ends = np.minimum(positions + half, count - 1)
    prefix = np.concatenate(([0.0], np.cumsum(elevations)))
    sums = prefix[ends + 1] - prefix[starts]
    return (sums / (ends - starts + 1)).tolist()


def _average_speed(distance_km: float, moving_time_ms: float) -> float:
    if moving_time_ms > 0:
        return distance_km / moving_time_ms * _MS_PER_HOUR
    return 0.0


def compute_stats(
    points: Sequence[TrackPoint],
    *,
    window_size: int = ELEVATION_SMOOTHING_WINDOW,
    moving_speed_threshold_kmh: float = MOVING_SPEED_THRESHOLD_KMH,
) -> TrackStats:
    """Compute distance, elevation, timing and speed statistics for a track.

    Args:
        points: Track points in recording order. Timestamps are not sorted or
            validated here.
        window_size: Elevation smoothing window in points.
        moving_speed_threshold_kmh: Steps at or below this speed are treated
            as stationary and excluded from moving time.

    Returns:
        A :class:`TrackStats`. Empty input yields all-zero stats.
    """

    if not points:
        return TrackStats()

    step_km = segment_distances_km(points)
    distance = float(step_km.sum())

    timestamps = np.asarray([p.timestamp for p in points], dtype=float)
    dt = np.diff(timestamps)
    forward = dt > 0
    speeds = np.zeros_like(dt)
    speeds[forward] = step_km[forward] / dt[forward] * _MS_PER_HOUR
    moving = forward & (speeds > moving_speed_threshold_kmh)
    moving_time = float(dt[moving].sum())

    smoothed = np.asarray(smooth_elevations(points, window_size), dtype=float)
    elevation_steps = np.diff(smoothed)
    elevation_gain = float(elevation_steps[elevation_steps > 0].sum())
    elevation_loss = float(-elevation_steps[elevation_steps < 0].sum())

    start_time = points[0].timestamp
    end_time = points[-1].timestamp
    return TrackStats(
        distance=distance,
        elevation_gain=elevation_gain,
        elevation_loss=elevation_loss,
        duration=end_time - start_time,
        moving_time=moving_time,
        avg_speed=_average_speed(distance, moving_time),
        start_time=start_time,
        end_time=end_time,
    )


def aggregate_stats(stats_list: Iterable[TrackStats]) -> TrackStats:
    """Combine several stats into one.

    Distances, elevations, durations and moving times are summed. The time
    span is widened to the earliest start and latest end. Average speed is
    recomputed from the totals, never averaged.
    """

    items = list(stats_list)
    if not items:
        return TrackStats()

    distance = sum(s.distance for s in items)
    moving_time = sum(s.moving_time for s in items)
    return TrackStats(
        distance=distance,
        elevation_gain=sum(s.elevation_gain for s in items),
        elevation_loss=sum(s.elevation_loss for s in items),
        duration=sum(s.duration for s in items),
        moving_time=moving_time,
        avg_speed=_average_speed(distance, moving_time),
        start_time=min(s.start_time for s in items),
        end_time=max(s.end_time for s in items),
    )


__all__ = ["aggregate_stats", "compute_stats", "smooth_elevations"]
