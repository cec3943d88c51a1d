"""Command-line entry for authentic_calendar.

Expands an exported list of task/event rows (YAML or JSON) for one calendar
view or one day and prints the resulting items as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional

import yaml

from .calendar_locale import CalendarLocale, get_locale, weekday_short_name
from .config_loader import load_config, set_config
from .event_window import expand_events_for_date, expand_events_with_recurrence
from .exceptions import AuthenticCalendarError
from .logging_config import configure_logging, init_logging
from .recurrence_models import CalendarItem, EventInstance, ViewMode

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the authentic_calendar CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="authentic_calendar",
        description="Expand recurring tasks and events for a calendar view",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m authentic_calendar events.yaml                          # this week
  python -m authentic_calendar events.yaml --mode monthly --date 2024-01-15
  python -m authentic_calendar events.json --on 2024-01-08          # one day
        """,
    )
    parser.add_argument("events_file", metavar="EVENTS", help="YAML or JSON file of event rows")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ViewMode],
        default=ViewMode.WEEKLY.value,
        help="Calendar view to expand for (default: weekly)",
    )
    when = parser.add_mutually_exclusive_group()
    when.add_argument("--date", metavar="YYYY-MM-DD", help="Reference date of the view (default: today)")
    when.add_argument("--on", metavar="YYYY-MM-DD", help="Expand a single day instead of a view")
    parser.add_argument("--config", metavar="PATH", help="Path to authentic_calendar.yaml")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _load_events(path: Path) -> list[dict[str, Any]]:
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if isinstance(loaded, dict):
        loaded = loaded.get("events", [])
    if loaded is None:
        return []
    if not isinstance(loaded, list):
        raise AuthenticCalendarError(f"{path} must contain a list of events", str(path))
    return loaded


def _serialize(item: CalendarItem, locale: CalendarLocale) -> dict[str, Any]:
    if isinstance(item, EventInstance):
        data = item.model_dump(mode="json", by_alias=True, exclude={"original_event"})
        day: Optional[date] = item.occurrence_date
    else:
        data = item.model_dump(mode="json", by_alias=True)
        day = item.anchor_date
    if day is not None:
        data["weekday"] = weekday_short_name(day, locale)
    return data


def main(argv: Optional[list[str]] = None) -> int:
    """Run the authentic_calendar CLI and return the process exit code."""
    args = _create_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        set_config(config)
        init_logging("DEBUG" if args.debug else config.log_level)
        configure_logging(debug_mode=args.debug)

        events = _load_events(Path(args.events_file))
        if args.on:
            items = expand_events_for_date(events, args.on)
        else:
            items = expand_events_with_recurrence(events, args.mode, args.date or date.today())
        locale = get_locale(config.locale)
    except (AuthenticCalendarError, ValueError, OSError, yaml.YAMLError) as exc:
        print(f"authentic_calendar: error: {exc}", file=sys.stderr)
        return 2

    logger.debug("Printing %d items", len(items))
    print(json.dumps([_serialize(item, locale) for item in items], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
