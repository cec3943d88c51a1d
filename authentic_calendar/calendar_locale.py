"""Day-name configuration for calendar rendering.

A locale is a plain immutable value handed to whatever formats weekday labels.
Nothing here registers or switches a process-wide default.
"""

from dataclasses import dataclass
from datetime import date

from .date_utils import sunday_index


@dataclass(frozen=True)
class CalendarLocale:
    """Weekday names for one calendar locale, Sunday first."""

    name: str
    day_names: tuple[str, ...]
    day_names_short: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.day_names) != 7 or len(self.day_names_short) != 7:
            raise ValueError(f"Locale {self.name!r} must define exactly 7 day names")


EN = CalendarLocale(
    name="en",
    day_names=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    day_names_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
)

# Single-letter headers used by the month grid
EN_SHORT = CalendarLocale(
    name="en-short",
    day_names=EN.day_names,
    day_names_short=("S", "M", "T", "W", "T", "F", "S"),
)

LOCALES = {locale.name: locale for locale in (EN, EN_SHORT)}


def get_locale(name: str) -> CalendarLocale:
    """Look up a bundled locale by name, e.g. ``"en-short"``."""
    try:
        return LOCALES[name]
    except KeyError:
        raise ValueError(f"Unknown calendar locale: {name!r}") from None


def weekday_name(value: date, locale: CalendarLocale = EN_SHORT) -> str:
    return locale.day_names[sunday_index(value)]


def weekday_short_name(value: date, locale: CalendarLocale = EN_SHORT) -> str:
    return locale.day_names_short[sunday_index(value)]
