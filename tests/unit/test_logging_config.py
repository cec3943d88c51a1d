"""Unit tests for authentic_calendar.logging_config."""

import logging
from collections.abc import Generator
from typing import Any

import pytest
from colorlog import ColoredFormatter

from authentic_calendar.logging_config import (
    PACKAGE_MODULES,
    configure_logging,
    get_logging_status,
    init_logging,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def isolated_root_logger() -> Generator[logging.Logger, Any, None]:
    """Detach root handlers for the test and restore them afterwards."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_levels = {name: logging.getLogger(name).level for name in PACKAGE_MODULES}
    root.handlers = []
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


def test_init_logging_installs_one_colored_handler(isolated_root_logger):
    init_logging("warning")
    init_logging("warning")
    assert len(isolated_root_logger.handlers) == 1
    assert isinstance(isolated_root_logger.handlers[0].formatter, ColoredFormatter)
    assert isolated_root_logger.level == logging.WARNING


def test_init_logging_unknown_level_defaults_to_info(isolated_root_logger):
    init_logging("chatty")
    assert isolated_root_logger.level == logging.INFO


def test_init_logging_debug_env(isolated_root_logger, monkeypatch):
    monkeypatch.setenv("AUTHENTIC_DEBUG", "yes")
    init_logging("ERROR")
    assert isolated_root_logger.level == logging.DEBUG


def test_configure_logging_levels(isolated_root_logger):
    configure_logging(debug_mode=True)
    assert logging.getLogger("authentic_calendar.recurrence_expander").level == logging.DEBUG
    configure_logging(debug_mode=False)
    assert logging.getLogger("authentic_calendar.recurrence_expander").level == logging.INFO


def test_configure_logging_env_level(isolated_root_logger, monkeypatch):
    monkeypatch.setenv("AUTHENTIC_LOG_LEVEL", "error")
    configure_logging()
    assert logging.getLogger("authentic_calendar").level == logging.ERROR


def test_force_debug_wins_over_environment(isolated_root_logger, monkeypatch):
    monkeypatch.setenv("AUTHENTIC_LOG_LEVEL", "ERROR")
    configure_logging(force_debug=True)
    assert logging.getLogger("authentic_calendar.event_window").level == logging.DEBUG


def test_get_logging_status(isolated_root_logger):
    configure_logging(force_debug=False)
    status = get_logging_status()
    assert "root" in status
    assert status["authentic_calendar.recurrence_parser"] == "INFO"
