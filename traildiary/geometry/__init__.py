"""Track geometry processing core.

Pure functions over in-memory sequences of :class:`~traildiary.models.TrackPoint`:
statistics, simplification, nearest-point lookup and chart downsampling.
Nothing in this package performs I/O or keeps state between calls.
"""

from .distance import EARTH_RADIUS_KM, haversine_distance, with_cumulative_distance
from .downsample import downsample_for_chart, sample_points
from .export import encode_polyline, to_geojson_feature, to_linestring, track_bounds
from .nearest import find_nearest_point, find_point_by_distance
from .simplify import simplify_track
from .stats import aggregate_stats, compute_stats, smooth_elevations
from .validation import validate_activity_timestamps
from .zoom import simplify_points_for_zoom, tolerance_for_zoom

__all__ = [
    "EARTH_RADIUS_KM",
    "aggregate_stats",
    "compute_stats",
    "downsample_for_chart",
    "encode_polyline",
    "find_nearest_point",
    "find_point_by_distance",
    "haversine_distance",
    "sample_points",
    "simplify_points_for_zoom",
    "simplify_track",
    "smooth_elevations",
    "to_geojson_feature",
    "to_linestring",
    "tolerance_for_zoom",
    "track_bounds",
    "validate_activity_timestamps",
    "with_cumulative_distance",
]
