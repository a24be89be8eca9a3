"""Ramer–Douglas–Peucker simplification for track polylines.

Distances are planar: latitude and longitude are treated as Cartesian x/y,
so the tolerance is expressed in degrees rather than metres. Use
:func:`traildiary.geometry.zoom.tolerance_for_zoom` to pick one per map zoom.

The splitting is driven by an explicit stack instead of recursion so tracks
with tens of thousands of points cannot exhaust the interpreter's recursion
limit. Worst case remains O(n²) when every split peels off a single point
(e.g. a long, evenly curving line); interactive-scale tracks are fine.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from ..models import TrackPoint
from .distance import with_cumulative_distance


def _perpendicular_distances(
    lats: NDArray[np.float64],
    lons: NDArray[np.float64],
    start: int,
    end: int,
) -> NDArray[np.float64]:
    """Distances of points ``start+1 .. end-1`` from the chord start→end."""

    dx = lats[end] - lats[start]
    dy = lons[end] - lons[start]
    px = lats[start + 1 : end] - lats[start]
    py = lons[start + 1 : end] - lons[start]
    if dx == 0 and dy == 0:
        return np.hypot(px, py)
    t = (px * dx + py * dy) / (dx * dx + dy * dy)
    return np.hypot(px - t * dx, py - t * dy)


def _reindex(points: Sequence[TrackPoint]) -> List[TrackPoint]:
    return [
        replace(point, index=idx)
        for idx, point in enumerate(with_cumulative_distance(points))
    ]


def simplify_track(points: Sequence[TrackPoint], tolerance: float) -> List[TrackPoint]:
    """Return the RDP subset of ``points`` within ``tolerance`` degrees.

    The first and last points are always kept. Output points are re-indexed
    ``0..k-1`` and carry cumulative distance along the simplified line.
    """

    count = len(points)
    if count <= 2:
        return _reindex(points)

    lats = np.asarray([p.lat for p in points], dtype=float)
    lons = np.asarray([p.lon for p in points], dtype=float)
    keep = np.zeros(count, dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, count - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue
        distances = _perpendicular_distances(lats, lons, start, end)
        offset = int(np.argmax(distances))
        max_distance = float(distances[offset])
        if max_distance > tolerance and max_distance > 0:
            split = start + 1 + offset
            keep[split] = True
            stack.append((split, end))
            stack.append((start, split))

    return _reindex([points[idx] for idx in np.flatnonzero(keep)])


__all__ = ["simplify_track"]
