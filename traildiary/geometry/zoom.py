"""Map zoom level to RDP tolerance lookup."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..models import TrackPoint
from .simplify import simplify_track

# (exclusive upper zoom bound, tolerance in degrees), checked in order.
ZOOM_TOLERANCE_STEPS: Tuple[Tuple[float, float], ...] = (
    (6, 0.05),
    (8, 0.01),
    (10, 0.003),
    (12, 0.001),
    (14, 0.0003),
)


def tolerance_for_zoom(zoom: float) -> Optional[float]:
    """Return the RDP tolerance for ``zoom``, or ``None`` at zoom 14 and above."""

    for upper, tolerance in ZOOM_TOLERANCE_STEPS:
        if zoom < upper:
            return tolerance
    return None


def simplify_points_for_zoom(
    points: Sequence[TrackPoint], zoom: float
) -> Sequence[TrackPoint]:
    """Return a zoom-appropriate subset of ``points``.

    At high zoom the input is returned unchanged (same object).
    """

    tolerance = tolerance_for_zoom(zoom)
    if tolerance is None:
        return points
    return simplify_track(points, tolerance)


__all__ = ["ZOOM_TOLERANCE_STEPS", "simplify_points_for_zoom", "tolerance_for_zoom"]
