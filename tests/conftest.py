"""Shared fixtures for authentic_calendar tests."""

from collections.abc import Generator
from typing import Any

import pytest

from authentic_calendar.config_loader import set_config


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Clear config environment overrides and reset the process default config.

    The module-level default in config_loader would otherwise carry settings
    from one test to the next.
    """
    for name in ("AUTHENTIC_MAX_ITERATIONS", "AUTHENTIC_LOG_LEVEL", "AUTHENTIC_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def weekly_monday_event() -> dict[str, Any]:
    """Recurring row anchored on Monday 2024-01-01 with no explicit BYDAY."""
    return {
        "id": "e1",
        "title": "Weekly review",
        "type": "task",
        "start_date": "2024-01-01",
        "start_time": "09:00",
        "end_time": "09:30",
        "is_all_day": False,
        "roleColor": "#3b82f6",
        "recurrence_rule": "RRULE:FREQ=WEEKLY;INTERVAL=1",
        "role_ids": ["r1", "r2"],
    }


@pytest.fixture
def single_event() -> dict[str, Any]:
    """Non-recurring row on Wednesday 2024-01-10."""
    return {
        "id": "s1",
        "title": "Dentist",
        "type": "event",
        "start_date": "2024-01-10",
        "is_all_day": True,
    }
