"""Unit tests for authentic_calendar.recurrence_parser."""

from datetime import date

import pytest
from pydantic import ValidationError

from authentic_calendar.config_loader import Config, set_config
from authentic_calendar.recurrence_models import Frequency, Weekday
from authentic_calendar.recurrence_parser import parse_rule, strip_rule_prefix

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "rule_string,expected_freq,expected_interval",
    [
        ("RRULE:FREQ=DAILY", Frequency.DAILY, 1),
        ("RRULE:FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE", Frequency.WEEKLY, 2),
        ("RRULE:FREQ=MONTHLY;INTERVAL=3", Frequency.MONTHLY, 3),
        ("RRULE:FREQ=YEARLY;INTERVAL=5", Frequency.YEARLY, 5),
        ("RECUR:FREQ=WEEKLY;INTERVAL=1", Frequency.WEEKLY, 1),
    ],
)
def test_parse_rule_valid_various(rule_string, expected_freq, expected_interval):
    """parse_rule should read the frequency and interval of common rules."""
    rule = parse_rule(rule_string)
    assert rule is not None
    assert rule.frequency is expected_freq
    assert rule.interval == expected_interval


@pytest.mark.parametrize(
    "rule_string",
    [
        None,
        "",
        "FREQ=DAILY",
        "rrule:FREQ=DAILY",
        "RRULE:",
        "RRULE:INTERVAL=2",
        "RRULE:FREQ=HOURLY",
        "RECUR:FREQ=HOURLY",
        "RRULE:FREQ=daily",
    ],
)
def test_parse_rule_returns_none_without_prefix_or_freq(rule_string):
    """Missing prefix or unrecognized FREQ yields the absent-rule sentinel."""
    assert parse_rule(rule_string) is None


@pytest.mark.parametrize("raw_interval", ["0", "-3", "abc", "", "x2"])
def test_invalid_interval_keeps_default(raw_interval):
    rule = parse_rule(f"RRULE:FREQ=DAILY;INTERVAL={raw_interval}")
    assert rule is not None
    assert rule.interval == 1


@pytest.mark.parametrize("raw_interval,expected", [("2abc", 2), ("3.9", 3), (" 4", 4), ("+5", 5)])
def test_interval_reads_leading_digits(raw_interval, expected):
    rule = parse_rule(f"RRULE:FREQ=DAILY;INTERVAL={raw_interval}")
    assert rule is not None
    assert rule.interval == expected


def test_byday_drops_unknown_and_duplicate_tokens():
    rule = parse_rule("RRULE:FREQ=WEEKLY;BYDAY=MO,XX,we,FR,MO,1MO")
    assert rule is not None
    assert rule.by_weekday == (Weekday.MO, Weekday.FR)


def test_byday_order_does_not_affect_weekday_indexes():
    rule = parse_rule("RRULE:FREQ=WEEKLY;BYDAY=FR,SU,WE")
    assert rule is not None
    assert rule.weekday_indexes == [0, 3, 5]


def test_until_is_decoded_to_date():
    rule = parse_rule("RRULE:FREQ=DAILY;INTERVAL=2;UNTIL=20240110")
    assert rule is not None
    assert rule.until == date(2024, 1, 10)


@pytest.mark.parametrize("raw_until", ["2024011", "202401100", "2024-01-10", "20241301", "20240230", "abcdefgh"])
def test_malformed_until_is_ignored(raw_until):
    rule = parse_rule(f"RRULE:FREQ=DAILY;UNTIL={raw_until}")
    assert rule is not None
    assert rule.until is None


def test_unknown_keys_and_bare_tokens_are_ignored():
    rule = parse_rule("RRULE:FREQ=MONTHLY;COUNT=4;WKST=MO;junk;INTERVAL=2")
    assert rule is not None
    assert rule.frequency is Frequency.MONTHLY
    assert rule.interval == 2
    assert rule.by_weekday == ()
    assert rule.until is None


def test_later_freq_token_wins():
    rule = parse_rule("RRULE:FREQ=DAILY;FREQ=YEARLY")
    assert rule is not None
    assert rule.frequency is Frequency.YEARLY


def test_unrecognized_freq_does_not_clear_earlier_value():
    rule = parse_rule("RRULE:FREQ=WEEKLY;FREQ=HOURLY")
    assert rule is not None
    assert rule.frequency is Frequency.WEEKLY


def test_prefixes_come_from_config():
    set_config(Config(rule_prefixes=("RECUR:",)))
    assert parse_rule("RRULE:FREQ=DAILY") is None
    assert parse_rule("RECUR:FREQ=DAILY") is not None


def test_explicit_prefixes_override_config():
    assert parse_rule("X-RULE:FREQ=DAILY", prefixes=("X-RULE:",)) is not None


def test_strip_rule_prefix():
    assert strip_rule_prefix("RRULE:FREQ=DAILY", ("RRULE:",)) == "FREQ=DAILY"
    assert strip_rule_prefix("FREQ=DAILY", ("RRULE:",)) is None
    assert strip_rule_prefix(None, ("RRULE:",)) is None


def test_parsed_rule_is_immutable():
    rule = parse_rule("RRULE:FREQ=DAILY")
    assert rule is not None
    with pytest.raises(ValidationError):
        rule.interval = 3
