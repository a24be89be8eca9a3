"""FIT activity parser built on ``fitparse``."""

from __future__ import annotations

from datetime import datetime, timezone
import io
import logging
import re
from typing import Any, Iterator, List, Mapping, Optional

from fitparse import FitFile, FitParseError

from ..errors import TrackParseError
from ..geometry.distance import with_cumulative_distance
from ..models import ParsedActivity, TrackPoint

_FIT_SUFFIX = re.compile(r"\.fit$", re.IGNORECASE)
_SEMICIRCLE_TO_DEGREES = 180.0 / 2**31


def semicircles_to_degrees(value: float) -> float:
    return value * _SEMICIRCLE_TO_DEGREES


def _timestamp_ms(value: Any) -> int:
    """FIT timestamps decode as naive UTC datetimes."""

    if not isinstance(value, datetime):
        return 0
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(round(value.timestamp() * 1000))


def _elevation(values: Mapping[str, Any]) -> float:
    for key in ("enhanced_altitude", "altitude"):
        raw = values.get(key)
        if raw is not None:
            return float(raw)
    return 0.0


class FitParser:
    """Parse ``.fit`` files into a single activity built from ``record`` messages."""

    source_format = "fit"

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def can_parse(self, file_name: str) -> bool:
        return file_name.lower().endswith(".fit")

    def parse(self, data: bytes, file_name: str) -> Iterator[ParsedActivity]:
        """Yield the activity recorded in ``data`` when it has any positions.

        Raises:
            TrackParseError: If ``fitparse`` cannot decode the file.
        """

        self._log.debug("FitParser: start parsing %s (%d bytes)", file_name, len(data))
        try:
            records = [
                message.get_values()
                for message in FitFile(io.BytesIO(data)).get_messages("record")
            ]
        except FitParseError as exc:
            raise TrackParseError(f"Unable to parse FIT file '{file_name}'") from exc
        self._log.debug("FitParser: %d records found", len(records))

        points: List[TrackPoint] = []
        for values in records:
            point = self._record_to_point(values, len(points))
            if point is None:
                continue
            points.append(point)

        self._log.debug("FitParser: %d points collected", len(points))
        if points:
            yield ParsedActivity(
                name=_FIT_SUFFIX.sub("", file_name),
                source_format="fit",
                points=tuple(with_cumulative_distance(points)),
            )
        self._log.debug("FitParser: parsing complete for %s", file_name)

    def _record_to_point(
        self, values: Mapping[str, Any], index: int
    ) -> Optional[TrackPoint]:
        lat = values.get("position_lat")
        lon = values.get("position_long")
        if lat is None or lon is None:
            return None
        return TrackPoint(
            lat=semicircles_to_degrees(float(lat)),
            lon=semicircles_to_degrees(float(lon)),
            elevation=_elevation(values),
            timestamp=_timestamp_ms(values.get("timestamp")),
            index=index,
        )


__all__ = ["FitParser", "semicircles_to_degrees"]
