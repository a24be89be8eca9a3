"""Trail assembly and view aggregation.

``build_trail`` turns a batch of GPX/FIT files into the in-memory
trail → day → activity hierarchy, gating every activity through the
timestamp validator. ``build_trail_view`` derives what a map/stats panel
shows: simplified geometry per activity and stats rolled up per day and for
the whole trail.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple
import uuid

from .config import VIEW_SAMPLE_RATE, VIEW_SIMPLIFICATION_TOLERANCE
from .geometry import (
    aggregate_stats,
    compute_stats,
    encode_polyline,
    sample_points,
    simplify_track,
    validate_activity_timestamps,
)
from .models import Activity, TrackPoint, TrackStats, Trail, TrailDay
from .parsers import DEFAULT_PARSERS, FileParser, find_parser

_LOG = logging.getLogger(__name__)
_TRACK_SUFFIX = re.compile(r"\.(gpx|fit)$", re.IGNORECASE)

TrackFile = Tuple[str, bytes]


@dataclass(slots=True)
class ActivityView:
    id: str
    name: str
    stats: TrackStats
    simplified_points: List[TrackPoint]
    encoded_polyline: str = ""


@dataclass(slots=True)
class TrailDayView:
    id: str
    name: str
    day_number: int
    activities: List[ActivityView] = field(default_factory=list)
    stats: TrackStats = field(default_factory=TrackStats)


@dataclass(slots=True)
class TrailView:
    id: str
    name: str
    days: List[TrailDayView] = field(default_factory=list)
    stats: TrackStats = field(default_factory=TrackStats)


def _new_id() -> str:
    return uuid.uuid4().hex


def build_trail(
    name: str,
    files: Iterable[TrackFile],
    parsers: Sequence[FileParser] = DEFAULT_PARSERS,
    *,
    trail_id: Optional[str] = None,
) -> Trail:
    """Parse ``files`` into a :class:`Trail`, one day per file.

    Files are handled in name order and numbered from 1. A day is only
    created once a file yields its first activity with valid timestamps, so
    files that contribute nothing leave a gap in the numbering rather than an
    empty day.

    Raises:
        TrackParseError: If a file matched by a parser cannot be decoded.
    """

    trail = Trail(id=trail_id or _new_id(), name=name)
    ordered = sorted(files, key=lambda item: item[0])
    for position, (file_name, data) in enumerate(ordered, start=1):
        parser = find_parser(parsers, file_name)
        if parser is None:
            _LOG.warning("Skipping %s: unsupported file type", file_name)
            continue

        day: Optional[TrailDay] = None
        for parsed in parser.parse(data, file_name):
            if not validate_activity_timestamps(parsed.points):
                _LOG.info(
                    "Skipping activity '%s' in %s: missing timestamps",
                    parsed.name,
                    file_name,
                )
                continue
            if day is None:
                day = TrailDay(
                    id=_new_id(),
                    trail_id=trail.id,
                    name=_TRACK_SUFFIX.sub("", file_name),
                    day_number=position,
                )
                trail.days.append(day)
            day.activities.append(
                Activity(
                    id=_new_id(),
                    trail_day_id=day.id,
                    name=parsed.name,
                    source_format=parsed.source_format,
                    points=parsed.points,
                    stats=compute_stats(parsed.points),
                    sort_order=len(day.activities) + 1,
                )
            )
        if day is None:
            _LOG.warning("No valid activities found in %s", file_name)

    _LOG.info(
        "Built trail '%s' with %d days and %d activities",
        trail.name,
        len(trail.days),
        sum(len(day.activities) for day in trail.days),
    )
    return trail


def build_activity_view(
    activity: Activity,
    *,
    sample_rate: int = VIEW_SAMPLE_RATE,
    tolerance: float = VIEW_SIMPLIFICATION_TOLERANCE,
) -> ActivityView:
    """Return the overview geometry and stats for a single activity."""

    simplified = simplify_track(sample_points(activity.points, sample_rate), tolerance)
    return ActivityView(
        id=activity.id,
        name=activity.name,
        stats=activity.stats,
        simplified_points=simplified,
        encoded_polyline=encode_polyline(simplified),
    )


def build_trail_view(
    trail: Trail,
    *,
    sample_rate: int = VIEW_SAMPLE_RATE,
    tolerance: float = VIEW_SIMPLIFICATION_TOLERANCE,
) -> TrailView:
    """Return per-activity views plus stats aggregated per day and per trail."""

    days: List[TrailDayView] = []
    for day in sorted(trail.days, key=lambda d: d.day_number):
        activities = [
            build_activity_view(act, sample_rate=sample_rate, tolerance=tolerance)
            for act in sorted(day.activities, key=lambda a: a.sort_order)
        ]
        days.append(
            TrailDayView(
                id=day.id,
                name=day.name,
                day_number=day.day_number,
                activities=activities,
                stats=aggregate_stats(view.stats for view in activities),
            )
        )
    return TrailView(
        id=trail.id,
        name=trail.name,
        days=days,
        stats=aggregate_stats(day.stats for day in days),
    )


__all__ = [
    "ActivityView",
    "TrailDayView",
    "TrailView",
    "build_activity_view",
    "build_trail",
    "build_trail_view",
]
