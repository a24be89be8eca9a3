"""Tests for Ramer–Douglas–Peucker track simplification."""

from __future__ import annotations

import pytest

from traildiary.geometry.simplify import simplify_track

from conftest import make_point, make_track


def test_simplify_track_returns_short_inputs_unchanged() -> None:
    assert simplify_track([], 0.001) == []
    single = simplify_track([make_point(1.0, 2.0, index=7)], 0.001)
    assert [(p.lat, p.lon, p.index) for p in single] == [(1.0, 2.0, 0)]
    pair = simplify_track(make_track([(0, 0), (1, 1)]), 0.001)
    assert [(p.lat, p.lon) for p in pair] == [(0, 0), (1, 1)]


def test_simplify_track_drops_collinear_points() -> None:
    track = make_track([(0, 0), (1, 1), (2, 2), (3, 3)])
    result = simplify_track(track, 0.001)
    assert [(p.lat, p.lon) for p in result] == [(0, 0), (3, 3)]


def test_simplify_track_keeps_significant_corner() -> None:
    track = make_track([(0, 0), (1, 0), (1, 1), (2, 1)])
    result = simplify_track(track, 0.1)
    assert [(p.lat, p.lon) for p in result] == [(0, 0), (1, 0), (1, 1), (2, 1)]


def test_simplify_track_zero_tolerance_drops_only_exactly_collinear() -> None:
    track = make_track([(0, 0), (1, 1), (2, 2), (2, 3)])
    result = simplify_track(track, 0)
    assert [(p.lat, p.lon) for p in result] == [(0, 0), (2, 2), (2, 3)]


def test_simplify_track_large_tolerance_keeps_endpoints() -> None:
    track = make_track([(0, 0), (0.3, 0.9), (0.6, -0.4), (1.0, 0.2), (2.0, 0.0)])
    result = simplify_track(track, 10.0)
    assert [(p.lat, p.lon) for p in result] == [(0, 0), (2.0, 0.0)]


def test_simplify_track_output_is_ordered_subset() -> None:
    track = make_track(
        [(0, 0), (0.5, 0.02), (1, 0.5), (1.5, 0.03), (2, 0), (2.5, -0.6), (3, 0)]
    )
    result = simplify_track(track, 0.05)
    original = [(p.lat, p.lon) for p in track]
    kept = [(p.lat, p.lon) for p in result]
    assert kept[0] == original[0]
    assert kept[-1] == original[-1]
    positions = [original.index(coord) for coord in kept]
    assert positions == sorted(positions)
    assert (1, 0.5) in kept
    assert (2.5, -0.6) in kept


def test_simplify_track_reindexes_and_recomputes_distance() -> None:
    track = make_track([(50.0, 14.0), (50.01, 14.0), (50.02, 14.0), (50.02, 14.01)])
    result = simplify_track(track, 0.0001)
    assert [p.index for p in result] == list(range(len(result)))
    assert result[0].distance == 0.0
    assert result[1].distance == pytest.approx(2.2239, rel=1e-3)
    assert result[-1].distance > result[1].distance


def test_simplify_track_closed_loop_uses_distance_to_start() -> None:
    track = make_track([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
    result = simplify_track(track, 0.5)
    kept = [(p.lat, p.lon) for p in result]
    assert kept[0] == (0, 0)
    assert kept[-1] == (0, 0)
    assert (1, 1) in kept


def test_simplify_track_handles_long_zigzag_without_recursion() -> None:
    track = make_track(
        [(i * 0.0001, 0.001 if i % 2 else 0.0) for i in range(10_000)]
    )
    result = simplify_track(track, 0.0001)
    assert len(result) == len(track)
    assert result[-1].index == len(track) - 1
