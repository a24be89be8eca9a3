"""Dataclasses describing track points, statistics and the trail hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Tuple

SourceFormat = Literal["gpx", "fit"]


@dataclass(frozen=True, slots=True)
class TrackPoint:
    """A single GPS sample.

    Attributes:
        lat: Latitude in decimal degrees (WGS84).
        lon: Longitude in decimal degrees (WGS84).
        elevation: Elevation in metres. 0.0 when the source has none.
        timestamp: Unix epoch milliseconds. 0 means unknown.
        index: Position within the sequence that produced this point.
        distance: Cumulative distance in km from the start of that sequence.
    """

    lat: float
    lon: float
    elevation: float = 0.0
    timestamp: float = 0
    index: int = 0
    distance: float = 0.0


@dataclass(frozen=True, slots=True)
class TrackStats:
    """Derived statistics for one track or an aggregate of several."""

    distance: float = 0.0
    elevation_gain: float = 0.0
    elevation_loss: float = 0.0
    duration: float = 0
    moving_time: float = 0
    avg_speed: float = 0.0
    start_time: float = 0
    end_time: float = 0


@dataclass(frozen=True, slots=True)
class ParsedActivity:
    """One activity extracted from a GPX or FIT file."""

    name: str
    source_format: SourceFormat
    points: Tuple[TrackPoint, ...]


@dataclass(slots=True)
class Activity:
    id: str
    trail_day_id: str
    name: str
    source_format: SourceFormat
    points: Tuple[TrackPoint, ...]
    stats: TrackStats
    sort_order: int


@dataclass(slots=True)
class TrailDay:
    id: str
    trail_id: str
    name: str
    day_number: int
    activities: List[Activity] = field(default_factory=list)


@dataclass(slots=True)
class Trail:
    id: str
    name: str
    days: List[TrailDay] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
