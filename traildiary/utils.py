"""General utility helpers shared across modules."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
import json
from datetime import datetime, date
from typing import Any


def format_duration(milliseconds: float) -> str:
    """Format a millisecond duration as ``H:MM:SS``."""

    total_seconds = int(round(max(milliseconds, 0) / 1000.0))
    hours, remainder = divmod(total_seconds, 3600)
    mins, sec = divmod(remainder, 60)
    return f"{hours}:{mins:02d}:{sec:02d}"


def to_jsonable(value: Any) -> Any:
    """Convert objects to JSON-friendly representations."""

    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="ignore")
    if isinstance(value, set):
        return sorted(to_jsonable(item) for item in value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_jsonable(val) for key, val in value.items()}
    return value


def json_dumps(value: Any, *, indent: int | None = 2) -> str:
    """Return JSON for dataclasses, datetimes and plain containers."""

    return json.dumps(to_jsonable(value), sort_keys=True, indent=indent)
