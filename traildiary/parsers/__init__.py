"""File parsers turning GPX/FIT bytes into :class:`ParsedActivity` values."""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, Sequence, Tuple

from ..errors import UnsupportedTrackFormatError
from ..models import ParsedActivity
from .fit import FitParser
from .gpx import GpxParser


class FileParser(Protocol):
    """Capability object selected by file name."""

    def can_parse(self, file_name: str) -> bool: ...

    def parse(self, data: bytes, file_name: str) -> Iterator[ParsedActivity]: ...


DEFAULT_PARSERS: Tuple[FileParser, ...] = (GpxParser(), FitParser())


def find_parser(
    parsers: Sequence[FileParser], file_name: str
) -> Optional[FileParser]:
    """Return the first parser accepting ``file_name``."""

    for parser in parsers:
        if parser.can_parse(file_name):
            return parser
    return None


def require_parser(parsers: Sequence[FileParser], file_name: str) -> FileParser:
    """Like :func:`find_parser` but raise when nothing accepts the file."""

    parser = find_parser(parsers, file_name)
    if parser is None:
        raise UnsupportedTrackFormatError(f"No parser accepts '{file_name}'")
    return parser


__all__ = [
    "DEFAULT_PARSERS",
    "FileParser",
    "FitParser",
    "GpxParser",
    "find_parser",
    "require_parser",
]
