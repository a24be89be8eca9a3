"""Trail diary: GPS track statistics and map/chart geometry."""

from .main import main
from .models import ParsedActivity, TrackPoint, TrackStats, Trail, TrailDay, Activity
from .errors import TrailDiaryError, TrackParseError, UnsupportedTrackFormatError

__all__ = [
    "main",
    "Activity",
    "ParsedActivity",
    "TrackPoint",
    "TrackStats",
    "Trail",
    "TrailDay",
    "TrailDiaryError",
    "TrackParseError",
    "UnsupportedTrackFormatError",
]
