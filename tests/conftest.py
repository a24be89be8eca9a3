"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable point/track factories so the
geometry, parser and trail tests share the same fixtures.
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from traildiary.models import TrackPoint


# --- Factory helpers -------------------------------------------------
def make_point(lat, lon, elevation=0.0, timestamp=0, index=0, distance=0.0):
    return TrackPoint(
        lat=lat,
        lon=lon,
        elevation=elevation,
        timestamp=timestamp,
        index=index,
        distance=distance,
    )


def make_track(coords):
    """Build indexed points from ``(lat, lon[, elevation[, timestamp]])`` tuples."""
    points = []
    for idx, values in enumerate(coords):
        lat, lon, *rest = values
        elevation = rest[0] if len(rest) > 0 else 0.0
        timestamp = rest[1] if len(rest) > 1 else 0
        points.append(make_point(lat, lon, elevation, timestamp, index=idx))
    return points


TWO_TRACK_GPX = b"""<?xml version="1.0"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk><name>Track A</name><trkseg>
    <trkpt lat="47.0" lon="13.0"><ele>1000</ele><time>2024-01-01T08:00:00Z</time></trkpt>
    <trkpt lat="47.1" lon="13.1"><ele>1100</ele><time>2024-01-01T09:00:00Z</time></trkpt>
  </trkseg></trk>
  <trk><name>Track B</name><trkseg>
    <trkpt lat="48.0" lon="14.0"><ele>500</ele><time>2024-01-02T08:00:00Z</time></trkpt>
    <trkpt lat="48.1" lon="14.1"><ele>600</ele><time>2024-01-02T09:00:00Z</time></trkpt>
  </trkseg></trk>
</gpx>
"""

UNTIMED_GPX = b"""<?xml version="1.0"?>
<gpx version="1.1"><trk><name>No Clock</name><trkseg>
  <trkpt lat="46.0" lon="7.0"><ele>900</ele></trkpt>
  <trkpt lat="46.01" lon="7.01"><ele>950</ele></trkpt>
</trkseg></trk></gpx>
"""


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def climbing_track():
    """Six points heading north one second apart while climbing 20 m each."""
    return make_track(
        [
            (50.000, 14.0, 200, 1000),
            (50.001, 14.0, 220, 2000),
            (50.002, 14.0, 240, 3000),
            (50.003, 14.0, 260, 4000),
            (50.004, 14.0, 280, 5000),
            (50.005, 14.0, 300, 6000),
        ]
    )


@pytest.fixture
def two_track_gpx():
    return TWO_TRACK_GPX


@pytest.fixture
def untimed_gpx():
    return UNTIMED_GPX
