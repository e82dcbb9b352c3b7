"""Wall-clock helpers shared by the simulator and the planner."""

from __future__ import annotations

from datetime import datetime, time
from zoneinfo import ZoneInfo

MINUTES_PER_DAY = 24 * 60


def parse_hhmm(value: str) -> time:
    """Parse an ``HH:MM`` string (24h clock) into a ``datetime.time``."""

    parts = value.strip().split(":") if value else []
    if len(parts) != 2:
        raise ValueError(f"Expected HH:MM time, got '{value}'")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"Expected HH:MM time, got '{value}'") from exc
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Time '{value}' is out of range")
    return time(hours, minutes)


def minutes_of_day(value: time | datetime) -> int:
    return value.hour * 60 + value.minute


def format_hhmm(total_minutes: int) -> str:
    """Format minutes since midnight as zero-padded ``HH:MM``, wrapping past 24:00."""

    wrapped = total_minutes % MINUTES_PER_DAY
    return f"{wrapped // 60:02d}:{wrapped % 60:02d}"


def add_minutes(value: str, minutes: int) -> str:
    """Add minutes to an ``HH:MM`` string; 23:40 + 45 gives 00:25."""

    return format_hhmm(minutes_of_day(parse_hhmm(value)) + minutes)


def coerce_time(value: str | time | datetime) -> time:
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    return parse_hhmm(value)


def current_time(timezone: str) -> time:
    """Read the host clock; only call sites at the service boundary use this."""

    return datetime.now(ZoneInfo(timezone)).time().replace(second=0, microsecond=0)
