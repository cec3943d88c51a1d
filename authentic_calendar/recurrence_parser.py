"""Recurrence rule parsing for stored task/event rows.

Rules are stored as ``RRULE:FREQ=WEEKLY;INTERVAL=1;BYDAY=MO,WE;UNTIL=20240131``.
Parsing is forgiving: unknown keys and bad values are skipped, and a rule
without a usable FREQ parses to ``None``, meaning "does not recur".
"""

import logging
import re
from datetime import date
from typing import Optional

from .config_loader import get_config
from .recurrence_models import Frequency, RecurrenceRule, Weekday

logger = logging.getLogger(__name__)

_FREQUENCIES = {freq.value: freq for freq in Frequency}
_WEEKDAYS = {day.value: day for day in Weekday}
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def strip_rule_prefix(rule_string: Optional[str], prefixes: tuple[str, ...]) -> Optional[str]:
    """Return the rule body after a recognized prefix, or None."""
    if not rule_string:
        return None
    for prefix in prefixes:
        if rule_string.startswith(prefix):
            return rule_string[len(prefix) :]
    return None


def _parse_interval(value: str) -> Optional[int]:
    # Leading digits count, so "2abc" and "1.5" read as 2 and 1
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    interval = int(match.group(1))
    return interval if interval > 0 else None


def _parse_byday(value: str) -> tuple[Weekday, ...]:
    days: list[Weekday] = []
    for token in value.split(","):
        day = _WEEKDAYS.get(token)
        if day is None:
            logger.debug("Ignoring unrecognized BYDAY token %r", token)
        elif day not in days:
            days.append(day)
    return tuple(days)


def _parse_until(value: str) -> Optional[date]:
    # Only the compact YYYYMMDD form is stored
    if len(value) != 8 or not value.isdigit():
        return None
    try:
        return date(int(value[:4]), int(value[4:6]), int(value[6:8]))
    except ValueError:
        return None


def parse_rule(
    rule_string: Optional[str], prefixes: Optional[tuple[str, ...]] = None
) -> Optional[RecurrenceRule]:
    """Parse a stored recurrence rule string.

    Args:
        rule_string: Rule such as ``"RRULE:FREQ=DAILY;INTERVAL=2"``
        prefixes: Accepted prefixes; defaults to the configured ones

    Returns:
        RecurrenceRule, or None when the string is empty, lacks a prefix, or
        has no recognized FREQ
    """
    body = strip_rule_prefix(rule_string, prefixes or get_config().rule_prefixes)
    if body is None:
        return None

    frequency: Optional[Frequency] = None
    interval = 1
    by_weekday: tuple[Weekday, ...] = ()
    until: Optional[date] = None

    for part in body.split(";"):
        if "=" not in part:
            continue
        key, value = part.split("=", 1)

        if key == "FREQ":
            if value in _FREQUENCIES:
                frequency = _FREQUENCIES[value]
            else:
                logger.debug("Ignoring unsupported FREQ %r", value)
        elif key == "INTERVAL":
            parsed_interval = _parse_interval(value)
            if parsed_interval is None:
                logger.debug("Ignoring invalid INTERVAL %r; keeping %d", value, interval)
            else:
                interval = parsed_interval
        elif key == "BYDAY":
            by_weekday = _parse_byday(value)
        elif key == "UNTIL":
            parsed_until = _parse_until(value)
            if parsed_until is None:
                logger.debug("Ignoring malformed UNTIL %r", value)
            else:
                until = parsed_until

    if frequency is None:
        logger.debug("Rule %r has no recognized FREQ; treating event as non-recurring", rule_string)
        return None

    return RecurrenceRule(frequency=frequency, interval=interval, by_weekday=by_weekday, until=until)
