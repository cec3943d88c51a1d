"""Visible date windows and whole-list expansion for calendar views."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from typing import Any, Optional, Union

from dateutil.relativedelta import SU, relativedelta
from pydantic import ValidationError

from .config_loader import get_config
from .date_utils import DateLike, parse_local_date
from .event_instances import coerce_event
from .exceptions import InvalidViewModeError
from .recurrence_expander import expand_recurrence
from .recurrence_models import CalendarItem, DateWindow, SourceEvent, ViewMode

logger = logging.getLogger(__name__)

EventRow = Union[SourceEvent, dict[str, Any]]


def _view_mode(mode: Union[ViewMode, str]) -> ViewMode:
    try:
        return ViewMode(mode)
    except ValueError:
        raise InvalidViewModeError(
            f"Unknown view mode {mode!r}; expected daily, weekly or monthly", mode
        ) from None


def compute_window(
    mode: Union[ViewMode, str],
    reference_date: DateLike,
    padding_days: Optional[int] = None,
) -> DateWindow:
    """Compute the visible date window for a calendar view.

    Args:
        mode: ``daily``, ``weekly`` or ``monthly``
        reference_date: Date the view is centered on
        padding_days: Days added around the month in monthly view; defaults
            to the configured padding (7)

    Returns:
        DateWindow: the day itself, its Sunday..Saturday week, or the month
        padded on both sides for the overflow days of a month grid

    Raises:
        InvalidViewModeError: If the mode is not recognized
    """
    view = _view_mode(mode)
    reference = parse_local_date(reference_date)

    if view is ViewMode.DAILY:
        return DateWindow(start=reference, end=reference)

    if view is ViewMode.WEEKLY:
        week_start = reference + relativedelta(weekday=SU(-1))
        return DateWindow(start=week_start, end=week_start + timedelta(days=6))

    padding = get_config().monthly_padding_days if padding_days is None else padding_days
    first_of_month = reference + relativedelta(day=1)
    last_of_month = reference + relativedelta(day=31)
    return DateWindow(
        start=first_of_month - timedelta(days=padding),
        end=last_of_month + timedelta(days=padding),
    )


def _coerce_rows(events: Iterable[EventRow]) -> Iterable[SourceEvent]:
    for row in events:
        try:
            yield coerce_event(row)
        except ValidationError as exc:
            row_id = row.get("id") if isinstance(row, dict) else None
            logger.warning("Skipping unreadable event row %r: %s", row_id, exc)


def expand_events_in_window(
    events: Iterable[EventRow],
    window_start: date,
    window_end: date,
) -> list[CalendarItem]:
    """Expand recurring events and filter single events against a window.

    Recurring events contribute one instance per occurrence in
    ``[window_start, window_end]``; other events are returned unchanged when
    their start (or due) date lies in the window. Input order is kept.
    """
    window = DateWindow(start=window_start, end=window_end)
    expanded: list[CalendarItem] = []

    for event in _coerce_rows(events):
        if event.is_recurring:
            expanded.extend(expand_recurrence(event, window.start, window.end))
            continue

        anchor = event.anchor_date
        if anchor is None:
            logger.warning("Event %s has no start or due date; skipping", event.id)
        elif window.contains(anchor):
            expanded.append(event)

    return expanded


def expand_events_with_recurrence(
    events: Iterable[EventRow],
    mode: Union[ViewMode, str],
    reference_date: DateLike,
) -> list[CalendarItem]:
    """Return everything visible in the calendar view around ``reference_date``."""
    window = compute_window(mode, reference_date)
    items = expand_events_in_window(events, window.start, window.end)
    logger.debug(
        "View %s around %s (%s..%s): %d items",
        _view_mode(mode).value,
        reference_date,
        window.start,
        window.end,
        len(items),
    )
    return items


def expand_events_for_date(events: Iterable[EventRow], target_date: DateLike) -> list[CalendarItem]:
    """Return everything that falls on one day.

    The day is treated as ``[date, date + 1)``, so only occurrences on the
    target date itself are returned.
    """
    day = parse_local_date(target_date)
    return expand_events_in_window(events, day, day)
