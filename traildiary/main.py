"""Command line summary for a set of GPX/FIT files.

Usage:
    python -m traildiary.main day1.gpx day2.fit --name "Tour du Mont Blanc"
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .config import CHART_TARGET_POINTS, LOG_FORMAT, LOG_LEVEL
from .errors import TrailDiaryError
from .geometry import downsample_for_chart, simplify_points_for_zoom
from .models import TrackStats, Trail
from .trail_view import TrackFile, TrailView, build_trail, build_trail_view
from .utils import format_duration, json_dumps, to_jsonable


def _setup_logging() -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def _read_files(paths: Sequence[Path]) -> List[TrackFile]:
    return [(path.name, path.read_bytes()) for path in paths]


def _stats_line(label: str, stats: TrackStats) -> str:
    return (
        f"{label}: {stats.distance:.2f} km, "
        f"+{stats.elevation_gain:.0f} m / -{stats.elevation_loss:.0f} m, "
        f"moving {format_duration(stats.moving_time)} "
        f"of {format_duration(stats.duration)}, "
        f"avg {stats.avg_speed:.1f} km/h"
    )


def format_summary(view: TrailView) -> str:
    """Render a trail view as an indented plain-text report."""

    lines = [_stats_line(view.name, view.stats)]
    for day in view.days:
        lines.append("  " + _stats_line(f"Day {day.day_number} ({day.name})", day.stats))
        for activity in day.activities:
            lines.append("    " + _stats_line(activity.name, activity.stats))
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarise distance, elevation and timing for GPX/FIT tracks."
    )
    parser.add_argument("files", nargs="+", type=Path, help="GPX or FIT files")
    parser.add_argument("--name", help="Trail name (defaults to the first file stem)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the full trail view (with simplified geometry) as JSON",
    )
    parser.add_argument(
        "--zoom",
        type=float,
        help="Simplify the JSON geometry for this map zoom level",
    )
    parser.add_argument(
        "--chart-points",
        type=int,
        default=CHART_TARGET_POINTS,
        help=f"Elevation profile budget per activity (default: {CHART_TARGET_POINTS})",
    )
    return parser


def _json_payload(
    trail: Trail, view: TrailView, zoom: Optional[float], chart_points: int
) -> dict:
    full_points = {
        activity.id: activity.points for day in trail.days for activity in day.activities
    }
    data = to_jsonable(view)
    for day_data, day in zip(data["days"], view.days):
        for act_data, activity in zip(day_data["activities"], day.activities):
            if zoom is not None:
                points = simplify_points_for_zoom(activity.simplified_points, zoom)
                act_data["simplified_points"] = [
                    {"lat": p.lat, "lon": p.lon} for p in points
                ]
            # Profile uses the stored track so distances span the whole activity.
            act_data["elevation_profile"] = [
                [p.distance, p.elevation]
                for p in downsample_for_chart(full_points[activity.id], chart_points)
            ]
    return data


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point used via ``python -m traildiary.main``."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging()

    try:
        files = _read_files(args.files)
    except OSError as exc:
        logging.error("Failed to read input files: %s", exc)
        return 1

    trail_name = args.name or args.files[0].stem
    try:
        trail = build_trail(trail_name, files)
    except TrailDiaryError as exc:
        logging.error("Failed to build trail '%s': %s", trail_name, exc)
        return 1
    if not trail.days:
        logging.error("No activities with valid timestamps in the given files")
        return 1

    view = build_trail_view(trail)
    if args.json:
        print(json_dumps(_json_payload(trail, view, args.zoom, args.chart_points)))
    else:
        print(format_summary(view))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
