"""Render a GPX/FIT file as an interactive HTML map preview.

The preview draws each activity with the same zoom-dependent simplification
a map layer would use, and can mark the track point nearest to a cursor
position for checking hover behaviour.

Usage:
    python -m traildiary.tools.track_map day1.gpx --zoom 11 --cursor 45.83,6.86
"""

from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import folium

from ..config import (
    LOG_FORMAT,
    LOG_LEVEL,
    MAP_DEFAULT_ZOOM,
    MAP_OUTPUT_DIR,
    MAP_SHOW_RAW_TRACK,
)
from ..errors import TrailDiaryError
from ..geometry import (
    find_nearest_point,
    simplify_points_for_zoom,
    track_bounds,
)
from ..models import ParsedActivity, TrackPoint
from ..parsers import DEFAULT_PARSERS, FileParser, require_parser

LatLon = Tuple[float, float]
PathLike = Union[str, Path]

_ACTIVITY_COLORS = ("#2c7bb6", "#1a9641", "#fdae61", "#7b3294")
_RAW_COLOR = "#999999"
_CURSOR_COLOR = "#d73027"

LOGGER = logging.getLogger(__name__)


def _latlon(points: Sequence[TrackPoint]) -> List[LatLon]:
    return [(point.lat, point.lon) for point in points]


def create_track_map(
    activities: Sequence[ParsedActivity],
    *,
    zoom: float = MAP_DEFAULT_ZOOM,
    cursor: Optional[LatLon] = None,
    show_raw: bool = MAP_SHOW_RAW_TRACK,
    output_html_path: Optional[PathLike] = None,
) -> Tuple[folium.Map, Optional[TrackPoint]]:
    """Build a folium map for ``activities``.

    Args:
        activities: Parsed activities to draw, one polyline each.
        zoom: Map zoom used both for the initial view and for picking the
            simplification tolerance.
        cursor: Optional ``(lat, lon)``; the nearest point on the rendered
            geometry is marked and returned.
        show_raw: Also draw the unsimplified track underneath.
        output_html_path: Optional path where the HTML map is saved.

    Returns:
        The :class:`folium.Map` and the nearest point to ``cursor`` (or None).

    Raises:
        ValueError: If no activity has any points.
    """

    drawable = [activity for activity in activities if activity.points]
    if not drawable:
        raise ValueError("No track points to draw")

    all_points = [point for activity in drawable for point in activity.points]
    min_lat, min_lon, max_lat, max_lon = track_bounds(all_points)
    center = ((min_lat + max_lat) / 2.0, (min_lon + max_lon) / 2.0)
    folium_map = folium.Map(location=center, zoom_start=int(zoom), control_scale=True)

    rendered: List[TrackPoint] = []
    for idx, activity in enumerate(drawable):
        color = _ACTIVITY_COLORS[idx % len(_ACTIVITY_COLORS)]
        simplified = list(simplify_points_for_zoom(activity.points, zoom))
        LOGGER.debug(
            "Activity '%s': %d of %d points kept at zoom %s",
            activity.name,
            len(simplified),
            len(activity.points),
            zoom,
        )
        if show_raw:
            folium.PolyLine(
                _latlon(activity.points),
                color=_RAW_COLOR,
                weight=2,
                opacity=0.5,
                tooltip=f"{activity.name} (raw)",
            ).add_to(folium_map)
        folium.PolyLine(
            _latlon(simplified),
            color=color,
            weight=4,
            opacity=0.8,
            tooltip=activity.name,
        ).add_to(folium_map)
        rendered.extend(simplified)

    if (min_lat, min_lon) != (max_lat, max_lon):
        folium_map.fit_bounds([(min_lat, min_lon), (max_lat, max_lon)])

    nearest: Optional[TrackPoint] = None
    if cursor is not None:
        nearest = find_nearest_point(rendered, cursor[0], cursor[1])
    if nearest is not None:
        popup = folium.Popup(
            html=(
                f"<strong>{nearest.distance:.2f} km</strong>, "
                f"{nearest.elevation:.0f} m (sample {nearest.index})"
            ),
            max_width=300,
        )
        folium.CircleMarker(
            location=(nearest.lat, nearest.lon),
            radius=7,
            color=_CURSOR_COLOR,
            fill=True,
            fill_color=_CURSOR_COLOR,
            tooltip="Nearest track point",
            popup=popup,
        ).add_to(folium_map)

    if output_html_path is not None:
        output_path = Path(output_html_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        folium_map.save(str(output_path))

    return folium_map, nearest


def build_track_map_for_file(
    path: Path,
    *,
    zoom: float = MAP_DEFAULT_ZOOM,
    cursor: Optional[LatLon] = None,
    output_html: Optional[PathLike] = None,
    parsers: Sequence[FileParser] = DEFAULT_PARSERS,
) -> Tuple[folium.Map, Optional[TrackPoint]]:
    """Parse ``path`` and render it with :func:`create_track_map`.

    Raises:
        UnsupportedTrackFormatError: If no parser accepts the file name.
        TrackParseError: If the file cannot be decoded.
        ValueError: If the file contains no track points.
    """

    parser = require_parser(parsers, path.name)
    activities = list(parser.parse(path.read_bytes(), path.name))
    return create_track_map(
        activities, zoom=zoom, cursor=cursor, output_html_path=output_html
    )


def _parse_cursor(value: str) -> LatLon:
    try:
        lat_text, lon_text = value.split(",")
        return float(lat_text), float(lon_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected LAT,LON but got '{value}'"
        ) from exc


def _slugify(value: str) -> str:
    """Return a filesystem-friendly slug."""

    normalized = value.strip().lower()
    slug = re.sub(r"[^a-z0-9]+", "-", normalized)
    slug = slug.strip("-")
    return slug or "map"


def _default_output_path(path: Path, zoom: float) -> Path:
    return Path(MAP_OUTPUT_DIR) / f"{_slugify(path.stem)}-z{zoom:g}.html"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an interactive HTML preview of a GPX/FIT track."
    )
    parser.add_argument("file", type=Path)
    parser.add_argument(
        "--zoom",
        type=float,
        default=MAP_DEFAULT_ZOOM,
        help=f"Map zoom driving simplification (default: {MAP_DEFAULT_ZOOM})",
    )
    parser.add_argument(
        "--cursor",
        type=_parse_cursor,
        help="LAT,LON position whose nearest track point should be marked",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help=f"Optional output HTML path; defaults to {MAP_OUTPUT_DIR}/<slug>.html",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point used via ``python -m traildiary.tools.track_map``."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    output_path = args.output or _default_output_path(args.file, args.zoom)
    try:
        _map, nearest = build_track_map_for_file(
            args.file,
            zoom=args.zoom,
            cursor=args.cursor,
            output_html=output_path,
        )
    except (TrailDiaryError, OSError, ValueError) as exc:
        logging.error("Failed to build track map for %s: %s", args.file, exc)
        return 1

    if nearest is not None:
        logging.info(
            "Nearest point: %.6f, %.6f at %.2f km",
            nearest.lat,
            nearest.lon,
            nearest.distance,
        )
    logging.info("Track map written to %s", output_path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
