"""Time parsing helpers for booking windows."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple

import pytz

MINUTES_PER_DAY = 24 * 60


def parse_time_string(time_str: str) -> Tuple[int, int]:
    """Parse ``HH:MM`` or ``HH:MM:SS``; ``24:00`` is accepted as end of day."""

    if ":" not in time_str:
        raise ValueError(f"Time string '{time_str}' missing colon separator")

    parts = time_str.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Time string '{time_str}' has unexpected format")

    hour = int(parts[0])
    minute = int(parts[1])

    if hour == 24 and minute == 0:
        return hour, minute
    if not (0 <= hour <= 23):
        raise ValueError(f"Hour {hour} out of valid range 0-23")
    if not (0 <= minute <= 59):
        raise ValueError(f"Minute {minute} out of valid range 0-59")

    return hour, minute


def to_minutes(time_str: str) -> int:
    hour, minute = parse_time_string(time_str)
    return hour * 60 + minute


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM`` (1440 becomes ``24:00``)."""
    hour, minute = divmod(minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def now_in_timezone(timezone: str) -> datetime:
    return datetime.now(pytz.timezone(timezone))


def parse_iso_date(value: str) -> date:
    return datetime.strptime(value, "%Y-%m-%d").date()


def booking_dates(days_ahead: int, reference: Optional[date] = None) -> List[date]:
    """Return today plus the following ``days_ahead - 1`` days."""

    start = reference or date.today()
    return [start + timedelta(days=offset) for offset in range(days_ahead)]


def filter_future_times_for_today(
    times: List[str],
    current_time: Optional[datetime] = None,
) -> List[str]:
    """Filter out times that have already started for the current day."""

    reference = current_time or datetime.now()
    current_hour = reference.hour
    current_minute = reference.minute

    future_times: List[str] = []

    for time_str in times:
        try:
            hour, minute = parse_time_string(time_str)
        except ValueError:
            future_times.append(time_str)
            continue

        if hour > current_hour or (hour == current_hour and minute > current_minute):
            future_times.append(time_str)

    return future_times


__all__ = [
    'MINUTES_PER_DAY',
    'booking_dates',
    'filter_future_times_for_today',
    'format_minutes',
    'now_in_timezone',
    'parse_iso_date',
    'parse_time_string',
    'to_minutes',
]
