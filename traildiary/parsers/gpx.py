"""GPX track parser."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import re
from typing import Iterator, List, Optional
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from ..errors import TrackParseError
from ..geometry.distance import with_cumulative_distance
from ..models import ParsedActivity, TrackPoint

_GPX_SUFFIX = re.compile(r"\.gpx$", re.IGNORECASE)


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix so GPX 1.0 and 1.1 both match."""

    return tag.rsplit("}", 1)[-1]


def _children(element: Element, name: str) -> List[Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _descendants(element: Element, name: str) -> Iterator[Element]:
    return (node for node in element.iter() if _local_name(node.tag) == name)


def _child_text(element: Element, name: str) -> Optional[str]:
    for child in _children(element, name):
        if child.text is not None and child.text.strip():
            return child.text.strip()
    return None


def parse_iso8601_ms(value: str) -> int:
    """Return epoch milliseconds for an ISO 8601 string, or 0 when unparsable."""

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return 0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(round(parsed.timestamp() * 1000))


class GpxParser:
    """Parse ``.gpx`` files into one activity per ``<trk>`` element."""

    source_format = "gpx"

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def can_parse(self, file_name: str) -> bool:
        return file_name.lower().endswith(".gpx")

    def parse(self, data: bytes, file_name: str) -> Iterator[ParsedActivity]:
        """Yield a :class:`ParsedActivity` for every track that has points.

        Raises:
            TrackParseError: If the bytes are not well-formed (or unsafe) XML.
        """

        self._log.debug("GpxParser: start parsing %s (%d bytes)", file_name, len(data))
        try:
            root = ET.fromstring(data)
        except (ET.ParseError, DefusedXmlException) as exc:
            raise TrackParseError(f"Unable to parse GPX file '{file_name}'") from exc

        default_name = _GPX_SUFFIX.sub("", file_name)
        for track in _descendants(root, "trk"):
            name = _child_text(track, "name") or default_name
            points = self._parse_points(track)
            if not points:
                self._log.debug("GpxParser: track '%s' has no points", name)
                continue
            self._log.debug(
                "GpxParser: yielding activity '%s' with %d points", name, len(points)
            )
            yield ParsedActivity(
                name=name,
                source_format="gpx",
                points=tuple(with_cumulative_distance(points)),
            )

    def _parse_points(self, track: Element) -> List[TrackPoint]:
        points: List[TrackPoint] = []
        for trkpt in _descendants(track, "trkpt"):
            try:
                lat = float(trkpt.attrib["lat"])
                lon = float(trkpt.attrib["lon"])
            except (KeyError, ValueError):
                self._log.debug("GpxParser: skipping trkpt without coordinates")
                continue
            elevation = 0.0
            ele_text = _child_text(trkpt, "ele")
            if ele_text is not None:
                try:
                    elevation = float(ele_text)
                except ValueError:
                    elevation = 0.0
            time_text = _child_text(trkpt, "time")
            timestamp = parse_iso8601_ms(time_text) if time_text else 0
            points.append(
                TrackPoint(
                    lat=lat,
                    lon=lon,
                    elevation=elevation,
                    timestamp=timestamp,
                    index=len(points),
                )
            )
        return points


__all__ = ["GpxParser", "parse_iso8601_ms"]
