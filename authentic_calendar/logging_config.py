"""
Central logging configuration for authentic_calendar.

Console output goes through a colorlog formatter. Package module levels can be
raised to DEBUG through environment variables for troubleshooting expansion
results without code changes.
"""

import logging
import os
import sys
from typing import Optional

from colorlog import ColoredFormatter

PACKAGE_MODULES = [
    "authentic_calendar",
    "authentic_calendar.recurrence_parser",
    "authentic_calendar.recurrence_expander",
    "authentic_calendar.event_window",
    "authentic_calendar.event_instances",
    "authentic_calendar.config_loader",
]

_TRUTHY = ("1", "true", "yes", "on")


def _env_debug() -> bool:
    return os.getenv("AUTHENTIC_DEBUG", "").strip().lower() in _TRUTHY


def init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to console.

    Installs a single stderr handler when the root logger has none, so repeated
    calls never duplicate output. AUTHENTIC_DEBUG forces DEBUG verbosity.
    """
    if _env_debug():
        level_name = "DEBUG"

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        # HH:MM:SS  LEVEL   logger.name: message
        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors))
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )


def configure_logging(debug_mode: bool = False, force_debug: Optional[bool] = None) -> None:
    """
    Set log levels for authentic_calendar modules.

    Args:
        debug_mode: Whether to enable debug logging for package modules
        force_debug: Override debug mode setting (None to use env var detection)

    Environment Variables:
        AUTHENTIC_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        AUTHENTIC_LOG_LEVEL: Override package log level (DEBUG, INFO, WARNING, ERROR)
    """
    if force_debug is not None:
        final_debug = force_debug
    else:
        final_debug = debug_mode or _env_debug()

    package_level = logging.DEBUG if final_debug else logging.INFO
    env_log_level = os.getenv("AUTHENTIC_LOG_LEVEL", "").upper()
    if force_debug is None and env_log_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        package_level = getattr(logging, env_log_level)

    for module in PACKAGE_MODULES:
        logging.getLogger(module).setLevel(package_level)

    logging.getLogger(__name__).debug(
        "Package log level set to %s", logging.getLevelName(package_level)
    )


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}
    for logger_name in PACKAGE_MODULES:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)
    return status
