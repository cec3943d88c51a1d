"""Unit tests for authentic_calendar.calendar_locale."""

from datetime import date

import pytest

from authentic_calendar.calendar_locale import (
    EN,
    EN_SHORT,
    CalendarLocale,
    get_locale,
    weekday_name,
    weekday_short_name,
)

pytestmark = pytest.mark.unit


def test_en_short_uses_single_letters():
    assert EN_SHORT.day_names_short == ("S", "M", "T", "W", "T", "F", "S")
    assert EN_SHORT.day_names == EN.day_names


def test_weekday_labels_follow_the_given_locale():
    monday = date(2024, 1, 8)
    assert weekday_name(monday) == "Monday"
    assert weekday_short_name(monday) == "M"
    assert weekday_short_name(monday, EN) == "Mon"
    assert weekday_short_name(date(2024, 1, 7), EN) == "Sun"


def test_get_locale():
    assert get_locale("en-short") is EN_SHORT
    with pytest.raises(ValueError):
        get_locale("fr")


def test_custom_locale_must_have_seven_days():
    with pytest.raises(ValueError):
        CalendarLocale(name="bad", day_names=("a",) * 6, day_names_short=("a",) * 7)


def test_locales_are_immutable():
    with pytest.raises(AttributeError):
        EN_SHORT.name = "changed"
