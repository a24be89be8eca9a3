"""Gate-keeping checks applied to parsed activities before stats are computed."""

from __future__ import annotations

from typing import Sequence

from ..models import TrackPoint


def validate_activity_timestamps(points: Sequence[TrackPoint]) -> bool:
    """Return True when ``points`` is non-empty and every timestamp is known.

    A single zero timestamp rejects the whole activity; partial salvage is
    left to the caller.
    """

    return len(points) > 0 and all(point.timestamp != 0 for point in points)


__all__ = ["validate_activity_timestamps"]
