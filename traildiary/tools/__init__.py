"""Supplementary command line tooling."""

from .track_map import build_track_map_for_file, create_track_map

__all__ = ["build_track_map_for_file", "create_track_map"]
