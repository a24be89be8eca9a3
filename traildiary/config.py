"""Central configuration for the trail diary toolkit.

All values are constants imported by the rest of the package. Each can be
overridden through an environment variable (optionally via a local `.env`).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Track statistics
# ---------------------------------------------------------------------------
# Steps slower than this (km/h) do not count towards moving time.
MOVING_SPEED_THRESHOLD_KMH = _env_float("TRAILDIARY_MOVING_SPEED_THRESHOLD_KMH", 0.5)

# Centered moving-average window (points) applied to elevations before
# gain/loss is classified. Suppresses GPS/barometer noise.
ELEVATION_SMOOTHING_WINDOW = _env_int("TRAILDIARY_ELEVATION_SMOOTHING_WINDOW", 5)


# ---------------------------------------------------------------------------
# Rendering budgets
# ---------------------------------------------------------------------------
# Maximum number of points handed to an elevation chart.
CHART_TARGET_POINTS = _env_int("TRAILDIARY_CHART_TARGET_POINTS", 500)

# Keep every Nth stored point before simplifying geometry for trail views.
VIEW_SAMPLE_RATE = _env_int("TRAILDIARY_VIEW_SAMPLE_RATE", 5)

# RDP tolerance (degrees) used for the per-activity overview polylines.
VIEW_SIMPLIFICATION_TOLERANCE = _env_float(
    "TRAILDIARY_VIEW_SIMPLIFICATION_TOLERANCE", 0.0001
)


# ---------------------------------------------------------------------------
# Map preview tool
# ---------------------------------------------------------------------------
MAP_OUTPUT_DIR = os.getenv("TRAILDIARY_MAP_OUTPUT_DIR", "maps")
MAP_DEFAULT_ZOOM = _env_int("TRAILDIARY_MAP_DEFAULT_ZOOM", 13)

# Draw the raw (unsimplified) track underneath the simplified polyline.
MAP_SHOW_RAW_TRACK = _env_bool("TRAILDIARY_MAP_SHOW_RAW_TRACK", False)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("TRAILDIARY_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
