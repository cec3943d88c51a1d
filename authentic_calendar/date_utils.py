"""Local calendar-date helpers.

Dates are handled as plain calendar dates: ISO strings are read for their
date part as written, without converting between timezones, so that a row
saved as ``2025-06-01T23:30:00-07:00`` stays on June 1st.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

from dateutil.parser import isoparse

from .config_loader import get_config
from .exceptions import InvalidDateError

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

CYCLE_WEEKS = 12
CYCLE_DAYS = CYCLE_WEEKS * 7


class WeekStart(str, Enum):
    """First day of the week used when aligning week windows."""

    SUNDAY = "sunday"
    MONDAY = "monday"


@dataclass(frozen=True)
class CycleWeek:
    """One week of a 12-week cycle."""

    week_number: int
    start_date: str
    end_date: str


def format_local_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_local_date(value: Optional[DateLike]) -> date:
    """Read a calendar date from a date, datetime or ISO string.

    Args:
        value: ``date``/``datetime`` instance, ``YYYY-MM-DD`` string, or an ISO
            datetime string with optional ``Z`` or UTC offset suffix

    Returns:
        The calendar date as written, with no timezone shift applied

    Raises:
        InvalidDateError: If the value is empty or not a recognizable date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"Not a calendar date: {value!r}", value)

    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Unable to parse date: {value!r}", value) from exc


def _week_start_index(week_start: Optional[WeekStart]) -> int:
    # Sunday-based weekday index of the first day of the week; None reads the config
    resolved = WeekStart(week_start or get_config().week_start)
    return 0 if resolved is WeekStart.SUNDAY else 1


def sunday_index(value: date) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7


def get_week_start(value: date, week_start: Optional[WeekStart] = None) -> date:
    """Return the first day of the week containing ``value``."""
    days_back = (sunday_index(value) - _week_start_index(week_start)) % 7
    return value - timedelta(days=days_back)


def get_week_end(value: date, week_start: Optional[WeekStart] = None) -> date:
    """Return the last day of the week containing ``value``."""
    return get_week_start(value, week_start) + timedelta(days=6)


def generate_cycle_weeks(
    start_date: DateLike, week_start: Optional[WeekStart] = None
) -> list[CycleWeek]:
    """Split a 12-week cycle into week windows.

    The first week is aligned back to the configured week start, so a cycle
    started mid-week still yields whole weeks.
    """
    aligned = get_week_start(parse_local_date(start_date), week_start)
    weeks = []
    for index in range(CYCLE_WEEKS):
        week_begin = aligned + timedelta(days=index * 7)
        weeks.append(
            CycleWeek(
                week_number=index + 1,
                start_date=format_local_date(week_begin),
                end_date=format_local_date(week_begin + timedelta(days=6)),
            )
        )
    return weeks


def format_date_range(start_date: DateLike, end_date: DateLike) -> str:
    """Format a date range for display.

    Examples:
        >>> format_date_range("2025-08-31", "2025-09-06")
        '31 Aug - 6 Sep'
        >>> format_date_range("2024-12-29", "2025-03-22")
        '29 Dec 2024 - 22 Mar 2025'
    """
    start = parse_local_date(start_date)
    end = parse_local_date(end_date)
    start_month = start.strftime("%b")
    end_month = end.strftime("%b")

    if start.year == end.year:
        return f"{start.day} {start_month} - {end.day} {end_month}"
    return f"{start.day} {start_month} {start.year} - {end.day} {end_month} {end.year}"


def get_available_week_starts(
    week_start: Optional[WeekStart] = None,
    today: Optional[date] = None,
    count: int = 8,
) -> list[dict[str, str]]:
    """List upcoming start dates for a new 12-week cycle.

    Today is offered first when it already falls on the week-start day;
    otherwise the options begin at the next week-start day. Each option spans
    84 days.

    Returns:
        List of ``{"start", "end", "label"}`` mappings
    """
    today = today or date.today()
    current = sunday_index(today)
    target = _week_start_index(week_start)
    include_today = current == target

    days_ahead = (target - current) % 7 or 7
    options = []
    for index in range(count):
        if include_today:
            offset = 0 if index == 0 else days_ahead + (index - 1) * 7
        else:
            offset = days_ahead + index * 7

        option_start = today + timedelta(days=offset)
        option_end = option_start + timedelta(days=CYCLE_DAYS - 1)
        start_str = format_local_date(option_start)
        end_str = format_local_date(option_end)
        options.append(
            {"start": start_str, "end": end_str, "label": format_date_range(start_str, end_str)}
        )

    logger.debug("Generated %d cycle start options from %s", len(options), today)
    return options
