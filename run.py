#!/usr/bin/env python3
"""Convenience runner for the trail diary summary.

Usage:
    python run.py day1.gpx day2.fit --name "My Trail"
"""
import logging

from traildiary.config import LOG_FORMAT, LOG_LEVEL
from traildiary.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    raise SystemExit(main())
