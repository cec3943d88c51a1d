"""Materialize occurrence dates into render-ready event instances."""

from datetime import date
from typing import Any, Union

from .date_utils import format_local_date
from .recurrence_models import EventInstance, SourceEvent


def coerce_event(event: Union[SourceEvent, dict[str, Any]]) -> SourceEvent:
    """Accept either a SourceEvent or a raw row mapping from the data store."""
    if isinstance(event, SourceEvent):
        return event
    return SourceEvent.model_validate(event)


def instance_id(source_id: str, occurrence_date: date) -> str:
    """Synthetic id of one occurrence, e.g. ``"e1::2024-01-08"``."""
    return f"{source_id}::{format_local_date(occurrence_date)}"


def create_event_instance(event: SourceEvent, occurrence_date: date) -> EventInstance:
    """Build the instance of ``event`` that falls on ``occurrence_date``.

    Every field of the source event, extra columns included, is copied onto the
    instance. Identity and date fields are then overridden for the occurrence,
    and ``original_event`` points back at the source row.
    """
    fields = event.model_dump(by_alias=True)
    fields.update(
        {
            "id": instance_id(event.id, occurrence_date),
            "sourceId": event.id,
            "date": occurrence_date,
            "start_date": occurrence_date,
            "end_date": event.end_date or occurrence_date,
            "due_date": occurrence_date,
            "is_recurring_instance": True,
            "original_event": event,
        }
    )
    return EventInstance.model_validate(fields)
