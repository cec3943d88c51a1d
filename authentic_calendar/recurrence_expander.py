"""Recurrence expansion for stored task/event rows.

Walks a cursor forward from the event's anchor date and yields the dates that
fall inside a caller-supplied window. All arithmetic is on local calendar
dates. The walk is bounded by an iteration cap, so a pathological rule returns
a truncated result instead of running away.
"""

import logging
from collections.abc import Iterator
from datetime import date, timedelta
from typing import Any, Callable, Optional, Union

from .config_loader import get_config
from .date_utils import sunday_index
from .event_instances import coerce_event, create_event_instance
from .recurrence_models import EventInstance, Frequency, RecurrenceRule, SourceEvent, Weekday
from .recurrence_parser import parse_rule

logger = logging.getLogger(__name__)


def add_months_with_rollover(value: date, months: int) -> date:
    """Add calendar months, letting an overflowing day spill into the next month.

    2024-01-31 + 1 month is 2024-03-02 and 2023-01-31 + 1 month is 2023-03-03.
    The day is not clamped to the end of the shorter month.
    """
    total = value.month - 1 + months
    first_of_month = date(value.year + total // 12, total % 12 + 1, 1)
    return first_of_month + timedelta(days=value.day - 1)


def _advance_daily(cursor: date, rule: RecurrenceRule) -> date:
    return cursor + timedelta(days=rule.interval)


def _advance_weekly(cursor: date, rule: RecurrenceRule) -> date:
    weekdays = rule.weekday_indexes
    if not weekdays:
        return cursor + timedelta(days=7 * rule.interval)

    current = sunday_index(cursor)
    for target in weekdays:
        if target > current:
            return cursor + timedelta(days=target - current)

    # No matching day left this week: first matching day `interval` weeks on
    next_week_sunday = cursor + timedelta(days=7 * rule.interval - current)
    return next_week_sunday + timedelta(days=weekdays[0])


def _advance_monthly(cursor: date, rule: RecurrenceRule) -> date:
    return add_months_with_rollover(cursor, rule.interval)


def _advance_yearly(cursor: date, rule: RecurrenceRule) -> date:
    return add_months_with_rollover(cursor, 12 * rule.interval)


_ADVANCE: dict[Frequency, Callable[[date, RecurrenceRule], date]] = {
    Frequency.DAILY: _advance_daily,
    Frequency.WEEKLY: _advance_weekly,
    Frequency.MONTHLY: _advance_monthly,
    Frequency.YEARLY: _advance_yearly,
}


def with_default_weekday(rule: RecurrenceRule, anchor: date) -> RecurrenceRule:
    """Give a WEEKLY rule without BYDAY the weekday of its anchor date."""
    if rule.frequency is Frequency.WEEKLY and not rule.by_weekday:
        return rule.model_copy(update={"by_weekday": (Weekday.from_date(anchor),)})
    return rule


def _matches(cursor: date, rule: RecurrenceRule) -> bool:
    if rule.frequency is Frequency.WEEKLY and rule.by_weekday:
        return Weekday.from_date(cursor) in rule.by_weekday
    return True


def iter_occurrence_dates(
    rule: RecurrenceRule,
    anchor: date,
    window_start: date,
    window_end: date,
    max_iterations: Optional[int] = None,
) -> Iterator[date]:
    """Yield occurrence dates of ``rule`` inside ``[window_start, window_end]``.

    Args:
        rule: Parsed recurrence rule
        anchor: Start date of the recurring event
        window_start: First date of the window (inclusive)
        window_end: Last date of the window (inclusive)
        max_iterations: Cursor advances allowed; defaults to the configured cap

    Yields:
        Occurrence dates in chronological order
    """
    limit = max_iterations if max_iterations is not None else get_config().max_iterations
    rule = with_default_weekday(rule, anchor)
    advance = _ADVANCE[rule.frequency]

    cursor = anchor
    iterations = 0
    while cursor <= window_end and iterations < limit:
        iterations += 1

        if window_start <= cursor and (rule.until is None or cursor <= rule.until):
            if _matches(cursor, rule):
                yield cursor

        try:
            next_cursor = advance(cursor, rule)
        except (OverflowError, ValueError):
            logger.debug("Recurrence cursor ran past the calendar range at %s", cursor)
            return
        if next_cursor <= cursor:
            logger.warning("Recurrence rule %r stopped advancing at %s", rule, cursor)
            return
        cursor = next_cursor

        if rule.until is not None and cursor > rule.until:
            return

    if iterations >= limit and cursor <= window_end:
        logger.warning(
            "Recurrence expansion hit the %d iteration cap at %s before window end %s",
            limit,
            cursor,
            window_end,
        )


def expand_recurrence(
    event: Union[SourceEvent, dict[str, Any]],
    window_start: date,
    window_end: date,
    max_iterations: Optional[int] = None,
) -> list[EventInstance]:
    """Expand a recurring event into instances inside the window.

    Events without a rule, with a rule that does not parse, or without an
    anchor date produce no instances.
    """
    source = coerce_event(event)
    if not source.recurrence_rule:
        return []

    rule = parse_rule(source.recurrence_rule)
    if rule is None:
        return []

    anchor = source.anchor_date
    if anchor is None:
        logger.warning("Recurring event %s has no start date; skipping", source.id)
        return []

    instances = [
        create_event_instance(source, occurrence)
        for occurrence in iter_occurrence_dates(
            rule, anchor, window_start, window_end, max_iterations
        )
    ]
    logger.debug(
        "Expanded event %s (%s) into %d instances for %s..%s",
        source.id,
        source.recurrence_rule,
        len(instances),
        window_start,
        window_end,
    )
    return instances
