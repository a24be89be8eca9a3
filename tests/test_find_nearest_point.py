"""Tests for cursor lookups on a track polyline."""

from __future__ import annotations

import pytest

from traildiary.geometry.nearest import find_nearest_point, find_point_by_distance

from conftest import make_point, make_track


def test_find_nearest_point_empty_track() -> None:
    assert find_nearest_point([], 50.0, 14.0) is None


def test_find_nearest_point_single_point_is_returned_itself() -> None:
    only = make_point(50.0, 14.0, 300, 1000)
    assert find_nearest_point([only], 10.0, 10.0) is only


def test_find_nearest_point_exact_vertex_hit() -> None:
    track = make_track([(50.0, 14.0), (50.01, 14.0), (50.02, 14.0)])
    assert find_nearest_point(track, 50.01, 14.0) is track[1]


def test_find_nearest_point_beyond_segment_end_returns_vertex() -> None:
    track = make_track([(50.0, 14.0), (50.01, 14.0)])
    assert find_nearest_point(track, 50.05, 14.0) is track[1]
    assert find_nearest_point(track, 49.9, 14.0) is track[0]


def test_find_nearest_point_interpolates_along_segment() -> None:
    track = [
        make_point(0.0, 0.0, elevation=100, timestamp=1000, index=0, distance=0.0),
        make_point(0.0, 0.02, elevation=200, timestamp=5000, index=1, distance=2.0),
    ]
    nearest = find_nearest_point(track, 0.001, 0.005)
    assert nearest is not track[0]
    assert nearest is not track[1]
    assert nearest.lat == pytest.approx(0.0, abs=1e-9)
    assert nearest.lon == pytest.approx(0.005)
    assert nearest.elevation == pytest.approx(125.0)
    assert nearest.timestamp == pytest.approx(2000.0)
    assert nearest.distance == pytest.approx(0.5)
    assert nearest.index == 0


def test_find_nearest_point_interpolated_index_follows_closer_end() -> None:
    track = make_track([(0.0, 0.0), (0.0, 0.02)])
    nearest = find_nearest_point(track, 0.001, 0.015)
    assert nearest.index == 1


def test_find_nearest_point_prefers_earlier_vertex_on_ties() -> None:
    out_and_back = make_track([(50.0, 14.0), (50.01, 14.0), (50.0, 14.0)])
    assert find_nearest_point(out_and_back, 50.0, 14.0) is out_and_back[0]

    duplicated = make_track([(50.0, 14.0), (50.0, 14.0), (50.01, 14.0)])
    assert find_nearest_point(duplicated, 50.0, 14.0) is duplicated[0]


def test_find_nearest_point_picks_closest_of_several_segments() -> None:
    track = make_track([(0.0, 0.0), (0.0, 0.01), (0.01, 0.01), (0.01, 0.0)])
    nearest = find_nearest_point(track, 0.005, 0.0095)
    assert nearest.lat == pytest.approx(0.005, abs=1e-7)
    assert nearest.lon == pytest.approx(0.01, abs=1e-7)
    assert nearest.index in (1, 2)


def _distance_track():
    return [make_point(0.0, i * 0.01, index=i, distance=float(i)) for i in range(4)]


def test_find_point_by_distance_empty() -> None:
    assert find_point_by_distance([], 1.0) is None


@pytest.mark.parametrize(
    "target, expected_index",
    [
        (0.0, 0),
        (1.4, 1),
        (1.6, 2),
        (2.0, 2),
        (-5.0, 0),
        (99.0, 3),
    ],
)
def test_find_point_by_distance_returns_closest(target, expected_index) -> None:
    track = _distance_track()
    assert find_point_by_distance(track, target) is track[expected_index]


def test_find_point_by_distance_tie_goes_to_earlier_point() -> None:
    track = _distance_track()
    assert find_point_by_distance(track, 1.5) is track[1]
