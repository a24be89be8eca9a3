"""Benchmark the track geometry pipeline with large point counts."""

from __future__ import annotations

import argparse
import math
import statistics
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Late imports rely on the adjusted sys.path above.
from traildiary.config import (  # noqa: E402
    CHART_TARGET_POINTS,
    VIEW_SIMPLIFICATION_TOLERANCE,
)
from traildiary.geometry import (  # noqa: E402
    compute_stats,
    downsample_for_chart,
    find_nearest_point,
    simplify_track,
    with_cumulative_distance,
)
from traildiary.models import TrackPoint  # noqa: E402


@dataclass(slots=True)
class StageDurations:
    """Timing measurements (in seconds) for the geometry pipeline."""

    stats: float
    simplify: float
    downsample: float
    nearest: float

    @property
    def total(self) -> float:
        """Return the aggregate duration for this benchmark iteration."""

        return self.stats + self.simplify + self.downsample + self.nearest


@dataclass(slots=True)
class BenchmarkSummary:
    """Aggregated statistics for multiple benchmark iterations."""

    point_count: int
    iterations: int
    simplified_count: int
    mean_stats_ms: float
    mean_simplify_ms: float
    mean_downsample_ms: float
    mean_nearest_ms: float
    mean_total_ms: float
    worst_total_ms: float


def _build_track(point_count: int) -> List[TrackPoint]:
    """Generate a gently winding, climbing track sampled once per second."""

    base_lat = 45.83
    base_lon = 6.86
    step_deg = 1.2e-5
    points = [
        TrackPoint(
            lat=base_lat + idx * step_deg,
            lon=base_lon + 4e-4 * math.sin(idx / 150.0),
            elevation=1000.0 + 200.0 * math.sin(idx / 900.0),
            timestamp=1_700_000_000_000 + idx * 1000,
            index=idx,
        )
        for idx in range(point_count)
    ]
    return with_cumulative_distance(points)


def _run_iteration(track: List[TrackPoint], chart_points: int) -> StageDurations:
    """Execute one benchmark iteration and capture per-stage timings."""

    start = time.perf_counter()
    compute_stats(track)
    stats = time.perf_counter() - start

    start = time.perf_counter()
    simplify_track(track, VIEW_SIMPLIFICATION_TOLERANCE)
    simplify = time.perf_counter() - start

    start = time.perf_counter()
    downsample_for_chart(track, chart_points)
    downsample = time.perf_counter() - start

    middle = track[len(track) // 2]
    start = time.perf_counter()
    if find_nearest_point(track, middle.lat + 1e-4, middle.lon) is None:
        raise RuntimeError("Synthetic track produced no nearest point")
    nearest = time.perf_counter() - start

    return StageDurations(
        stats=stats,
        simplify=simplify,
        downsample=downsample,
        nearest=nearest,
    )


def run_benchmark(
    point_count: int,
    iterations: int,
    chart_points: int = CHART_TARGET_POINTS,
) -> BenchmarkSummary:
    """Benchmark the geometry pipeline and return aggregated timings."""

    if point_count < 1000:
        raise ValueError("point_count must be at least 1,000")
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    track = _build_track(point_count)
    durations = [_run_iteration(track, chart_points) for _ in range(iterations)]
    simplified_count = len(simplify_track(track, VIEW_SIMPLIFICATION_TOLERANCE))

    return BenchmarkSummary(
        point_count=point_count,
        iterations=iterations,
        simplified_count=simplified_count,
        mean_stats_ms=statistics.fmean(item.stats for item in durations) * 1000.0,
        mean_simplify_ms=statistics.fmean(item.simplify for item in durations) * 1000.0,
        mean_downsample_ms=statistics.fmean(item.downsample for item in durations)
        * 1000.0,
        mean_nearest_ms=statistics.fmean(item.nearest for item in durations) * 1000.0,
        mean_total_ms=statistics.fmean(item.total for item in durations) * 1000.0,
        worst_total_ms=max(item.total for item in durations) * 1000.0,
    )


def _format_summary(summary: BenchmarkSummary) -> Dict[str, float]:
    """Return a JSON-friendly representation of the benchmark summary."""

    return {
        "point_count": summary.point_count,
        "iterations": summary.iterations,
        "simplified_count": summary.simplified_count,
        "mean_stats_ms": summary.mean_stats_ms,
        "mean_simplify_ms": summary.mean_simplify_ms,
        "mean_downsample_ms": summary.mean_downsample_ms,
        "mean_nearest_ms": summary.mean_nearest_ms,
        "mean_total_ms": summary.mean_total_ms,
        "worst_total_ms": summary.worst_total_ms,
    }


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the benchmark utility."""

    parser = argparse.ArgumentParser(
        description="Benchmark stats, simplification, downsampling and hover lookup",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=20000,
        help="Number of points in the synthetic track",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of repetitions for averaging",
    )
    return parser.parse_args()


def main() -> None:
    """Entry point when running the module as a script."""

    args = _parse_args()
    summary = run_benchmark(args.points, args.iterations)
    for key, value in _format_summary(summary).items():
        if key in {"point_count", "iterations", "simplified_count"}:
            print(f"{key}: {value}")
        else:
            print(f"{key}: {value:.3f}")


if __name__ == "__main__":
    main()
