"""End-to-end: parse a GPX file, validate, compute and aggregate stats."""

from __future__ import annotations

import pytest

from traildiary.geometry import aggregate_stats, compute_stats, validate_activity_timestamps
from traildiary.geometry.distance import haversine_distance
from traildiary.parsers import DEFAULT_PARSERS, find_parser


def test_gpx_import_pipeline(two_track_gpx) -> None:
    parser = find_parser(DEFAULT_PARSERS, "tour.gpx")
    assert parser is not None
    activities = list(parser.parse(two_track_gpx, "tour.gpx"))
    assert len(activities) == 2
    assert all(validate_activity_timestamps(a.points) for a in activities)

    stats = [compute_stats(a.points) for a in activities]
    for activity, item in zip(activities, stats):
        first, last = activity.points
        assert item.distance == pytest.approx(haversine_distance(first, last))
        assert item.distance > 0
        assert item.duration == last.timestamp - first.timestamp == 3_600_000
        assert item.moving_time == 3_600_000

    total = aggregate_stats(stats)
    assert total.distance == pytest.approx(stats[0].distance + stats[1].distance)
    assert total.moving_time == 7_200_000
    assert total.avg_speed == pytest.approx(total.distance / 2)
    assert total.start_time == activities[0].points[0].timestamp
    assert total.end_time == activities[1].points[-1].timestamp


def test_untimed_gpx_fails_validation(untimed_gpx) -> None:
    parser = find_parser(DEFAULT_PARSERS, "clock.gpx")
    (activity,) = list(parser.parse(untimed_gpx, "clock.gpx"))
    assert validate_activity_timestamps(activity.points) is False


def test_find_parser_unknown_extension() -> None:
    assert find_parser(DEFAULT_PARSERS, "photo.jpg") is None
    assert find_parser(DEFAULT_PARSERS, "ride.fit").source_format == "fit"
