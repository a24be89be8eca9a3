"""Tests for map-layer geometry export."""

from __future__ import annotations

import pytest
from shapely.geometry import LineString

from traildiary.geometry.export import (
    encode_polyline,
    to_geojson_feature,
    to_linestring,
    track_bounds,
)

from conftest import make_point, make_track


def test_to_linestring_uses_lon_lat_order() -> None:
    line = to_linestring(make_track([(50.0, 14.0), (50.1, 14.2)]))
    assert isinstance(line, LineString)
    assert list(line.coords) == [(14.0, 50.0), (14.2, 50.1)]


def test_to_linestring_needs_two_points() -> None:
    assert to_linestring([]) is None
    assert to_linestring([make_point(1.0, 2.0)]) is None


def test_track_bounds() -> None:
    track = make_track([(50.0, 14.5), (49.5, 14.0), (50.2, 14.1)])
    assert track_bounds(track) == pytest.approx((49.5, 14.0, 50.2, 14.5))
    assert track_bounds([make_point(1.0, 2.0)]) == (1.0, 2.0, 1.0, 2.0)
    assert track_bounds([]) is None


def test_encode_polyline_matches_reference_string() -> None:
    track = make_track([(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)])
    assert encode_polyline(track) == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
    assert encode_polyline([]) == ""


def test_to_geojson_feature() -> None:
    feature = to_geojson_feature(
        make_track([(50.0, 14.0), (50.1, 14.2)]), {"name": "Day 1"}
    )
    assert feature["type"] == "Feature"
    assert feature["geometry"]["type"] == "LineString"
    coords = [list(c) for c in feature["geometry"]["coordinates"]]
    assert coords == [[14.0, 50.0], [14.2, 50.1]]
    assert feature["properties"] == {"name": "Day 1"}
    assert to_geojson_feature([make_point(0.0, 0.0)]) is None
