"""Conversion between tool-facing date strings and Calendar.app date literals.

Tools accept ``YYYY-MM-DD HH:MM`` (or a bare ``YYYY-MM-DD`` meaning midnight).
Calendar.app expects ``M/D/YYYY h:mm:ss AM|PM``. Both are naive local times.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Callable, Tuple

from ..domain import InvalidDateFormat, InvalidDateRange

Clock = Callable[[], datetime]

INPUT_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)
_TIME_PATTERN = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})$")
_HOST_PATTERN = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4}) "
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2}) (?P<meridiem>AM|PM)$"
)


def parse_input(value: str) -> datetime:
    text = (value or "").strip()
    for fmt in INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise InvalidDateFormat(value)


def parse_day(value: str) -> date:
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidDateFormat(value, expected="YYYY-MM-DD") from exc


def format_host_date(moment: datetime) -> str:
    # Built by hand so the output never depends on the process locale.
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment.month}/{moment.day}/{moment.year} "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )


def normalize(value: str) -> str:
    """Render a tool-facing date string as a Calendar.app date literal."""

    return format_host_date(parse_input(value))


def parse_host_date(literal: str) -> datetime:
    match = _HOST_PATTERN.match((literal or "").strip())
    if not match:
        raise InvalidDateFormat(literal, expected="M/D/YYYY h:mm:ss AM|PM")
    hour = int(match.group("hour"))
    if not 1 <= hour <= 12:
        raise InvalidDateFormat(literal, expected="M/D/YYYY h:mm:ss AM|PM")
    hour = hour % 12
    if match.group("meridiem") == "PM":
        hour += 12
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            hour,
            int(match.group("minute")),
            int(match.group("second")),
        )
    except ValueError as exc:
        raise InvalidDateFormat(literal, expected="M/D/YYYY h:mm:ss AM|PM") from exc


def combine(date_pattern: str, clock_time: str) -> str:
    """Join ``YYYY-MM-DD`` and ``HH:MM`` into a tool-facing datetime string."""

    day = parse_day(date_pattern)
    match = _TIME_PATTERN.match((clock_time or "").strip())
    if not match:
        raise InvalidDateFormat(clock_time, expected="HH:MM")
    try:
        moment = time(int(match.group("hour")), int(match.group("minute")))
    except ValueError as exc:
        raise InvalidDateFormat(clock_time, expected="HH:MM") from exc
    return f"{day.isoformat()} {moment.strftime('%H:%M')}"


def ensure_ordered(start: str, end: str) -> Tuple[datetime, datetime]:
    start_at = parse_input(start)
    end_at = parse_input(end)
    if start_at >= end_at:
        raise InvalidDateRange(start, end)
    return start_at, end_at


def day_window(clock: Clock) -> Tuple[datetime, datetime]:
    """Return ``[midnight today, midnight tomorrow)`` for the given clock."""

    midnight = datetime.combine(clock().date(), time.min)
    return midnight, midnight + timedelta(days=1)


def week_window(week_start: str) -> Tuple[str, str]:
    """Return the half-open week boundaries as tool-facing strings."""

    start = parse_day(week_start)
    end = start + timedelta(days=7)
    return f"{start.isoformat()} 00:00", f"{end.isoformat()} 00:00"


__all__ = [
    "Clock",
    "combine",
    "day_window",
    "ensure_ordered",
    "format_host_date",
    "normalize",
    "parse_day",
    "parse_host_date",
    "parse_input",
    "week_window",
]
