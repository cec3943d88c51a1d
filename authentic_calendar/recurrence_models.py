"""Data models for recurring calendar events."""

from datetime import date
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .date_utils import parse_local_date, sunday_index


class Frequency(str, Enum):
    """Supported recurrence frequencies."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class Weekday(str, Enum):
    """Two-letter weekday codes used by BYDAY."""

    SU = "SU"
    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"

    @property
    def day_index(self) -> int:
        """Sunday-based weekday index (SU=0 .. SA=6)."""
        return _WEEKDAY_ORDER.index(self)

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        return _WEEKDAY_ORDER[sunday_index(value)]


_WEEKDAY_ORDER = (
    Weekday.SU,
    Weekday.MO,
    Weekday.TU,
    Weekday.WE,
    Weekday.TH,
    Weekday.FR,
    Weekday.SA,
)


class ViewMode(str, Enum):
    """Calendar display granularity."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class RecurrenceRule(BaseModel):
    """Parsed recurrence rule."""

    frequency: Frequency
    interval: int = Field(default=1, ge=1, description="Step size in units of frequency")
    by_weekday: tuple[Weekday, ...] = Field(
        default=(), description="Weekday filter, only used for WEEKLY rules"
    )
    until: Optional[date] = Field(default=None, description="Inclusive end bound")

    model_config = ConfigDict(frozen=True)

    @property
    def weekday_indexes(self) -> list[int]:
        """Sorted Sunday-based indexes of the BYDAY filter."""
        return sorted({day.day_index for day in self.by_weekday})


def _coerce_optional_date(value: Any) -> Any:
    if value is None or value == "":
        return None
    return parse_local_date(value)


def _coerce_clock_time(value: Any) -> Any:
    # YAML 1.1 loaders read an unquoted 10:30 as the base-60 integer 630
    if isinstance(value, bool) or not isinstance(value, int):
        return value
    if not 0 <= value < 24 * 60:
        raise ValueError(f"Not a clock time: {value!r}")
    hours, minutes = divmod(value, 60)
    return f"{hours:02d}:{minutes:02d}"


class SourceEvent(BaseModel):
    """Task or event row as fetched from the data store.

    Unknown columns are kept as extra fields and travel with the event into
    every instance expanded from it.
    """

    id: str
    title: Optional[str] = None
    type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    due_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_all_day: Optional[bool] = None
    role_color: Optional[str] = Field(default=None, alias="roleColor")
    recurrence_rule: Optional[str] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_times(cls, value: Any) -> Any:
        return _coerce_clock_time(value)

    @field_validator("start_date", "end_date", "due_date", mode="before")
    @classmethod
    def _parse_dates(cls, value: Any) -> Any:
        return _coerce_optional_date(value)

    @property
    def anchor_date(self) -> Optional[date]:
        """Date the event starts on, falling back to its due date."""
        return self.start_date or self.due_date

    @property
    def is_recurring(self) -> bool:
        return bool(self.recurrence_rule)


class EventInstance(SourceEvent):
    """One materialized occurrence of a recurring source event."""

    source_id: str = Field(alias="sourceId")
    occurrence_date: date = Field(alias="date")
    is_recurring_instance: bool = True
    original_event: SourceEvent


class DateWindow(BaseModel):
    """Inclusive range of calendar dates."""

    start: date
    end: date

    model_config = ConfigDict(frozen=True)

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    @property
    def days(self) -> int:
        """Number of calendar days covered by the window."""
        return max((self.end - self.start).days + 1, 0)


CalendarItem = Union[SourceEvent, EventInstance]
