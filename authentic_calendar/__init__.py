"""authentic_calendar - recurring event expansion for the Authentic Investment System.

Task and event rows fetched from the data store may carry a recurrence rule
(``RRULE:FREQ=WEEKLY;BYDAY=MO,WE``). This package parses those rules and expands
rows into the concrete instances shown on daily, weekly and monthly calendar
views. All functions are pure: they read their arguments and return new values.
"""

__version__ = "0.1.0"

from .calendar_locale import EN, EN_SHORT, CalendarLocale, get_locale, weekday_name, weekday_short_name
from .config_loader import Config, get_config, load_config, set_config
from .date_utils import (
    CycleWeek,
    WeekStart,
    format_date_range,
    format_local_date,
    generate_cycle_weeks,
    get_available_week_starts,
    get_week_end,
    get_week_start,
    parse_local_date,
)
from .event_instances import create_event_instance
from .event_window import (
    compute_window,
    expand_events_for_date,
    expand_events_in_window,
    expand_events_with_recurrence,
)
from .exceptions import AuthenticCalendarError, ConfigError, InvalidDateError, InvalidViewModeError
from .logging_config import configure_logging, init_logging
from .recurrence_expander import expand_recurrence, iter_occurrence_dates
from .recurrence_models import (
    DateWindow,
    EventInstance,
    Frequency,
    RecurrenceRule,
    SourceEvent,
    ViewMode,
    Weekday,
)
from .recurrence_parser import parse_rule

__all__ = [
    "EN",
    "EN_SHORT",
    "AuthenticCalendarError",
    "CalendarLocale",
    "Config",
    "ConfigError",
    "CycleWeek",
    "DateWindow",
    "EventInstance",
    "Frequency",
    "InvalidDateError",
    "InvalidViewModeError",
    "RecurrenceRule",
    "SourceEvent",
    "ViewMode",
    "WeekStart",
    "Weekday",
    "compute_window",
    "configure_logging",
    "create_event_instance",
    "expand_events_for_date",
    "expand_events_in_window",
    "expand_events_with_recurrence",
    "expand_recurrence",
    "format_date_range",
    "format_local_date",
    "generate_cycle_weeks",
    "get_available_week_starts",
    "get_config",
    "get_locale",
    "get_week_end",
    "get_week_start",
    "init_logging",
    "iter_occurrence_dates",
    "load_config",
    "parse_local_date",
    "parse_rule",
    "set_config",
    "weekday_name",
    "weekday_short_name",
]
