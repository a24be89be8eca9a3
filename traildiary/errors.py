"""Central error types used across the application."""

from __future__ import annotations


class TrailDiaryError(RuntimeError):
    """Base error for failures outside the pure geometry core."""


class TrackParseError(TrailDiaryError):
    """Raised when GPX or FIT bytes cannot be decoded into track points."""


class UnsupportedTrackFormatError(TrailDiaryError):
    """Raised when no registered parser accepts a file name."""


__all__ = [
    "TrailDiaryError",
    "TrackParseError",
    "UnsupportedTrackFormatError",
]
