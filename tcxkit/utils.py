"""Shared formatting helpers for the tcxkit CLI."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

import pytz


def format_hms(duration: timedelta | float) -> str:
    """Format a duration as ``HH:MM:SS``.

    Args:
        duration: A timedelta or a number of seconds. Fractions are dropped.
    """
    if isinstance(duration, timedelta):
        duration = duration.total_seconds()
    total = int(duration)
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_pace(seconds_per_km: float) -> str:
    """Format a pace as ``M:SS min/km`` (``H:MM:SS min/km`` from one hour up).

    Non-finite paces, e.g. from a lap without distance, render as
    ``--:-- min/km``.
    """
    if not math.isfinite(seconds_per_km):
        return "--:-- min/km"
    total = int(seconds_per_km)
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    if hours == 0:
        return f"{minutes}:{seconds:02d} min/km"
    return f"{hours}:{minutes:02d}:{seconds:02d} min/km"


def format_local_time(dt: datetime | None, home_timezone: str = "UTC") -> str:
    """Render an aware datetime in the configured home timezone."""
    if dt is None:
        return "—"
    tz = pytz.timezone(home_timezone)
    return dt.astimezone(tz).strftime("%Y-%m-%d %H:%M:%S %Z")
