"""authentic_calendar.config_loader

Lightweight config loader for authentic_calendar.

- Reads YAML with PyYAML (JSON documents are valid YAML too).
- Exposes a typed dataclass `Config`, a `load_config()` helper that accepts an
  optional path override, and a process default via `get_config()`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_RULE_PREFIXES = ("RRULE:", "RECUR:")

_config: Config | None = None


@dataclass
class Config:
    """Typed configuration for authentic_calendar.

    Fields:
        max_iterations: cursor advances allowed per recurring event (1..100000)
        rule_prefixes: accepted recurrence-rule prefixes
        monthly_padding_days: days shown before/after the month in monthly view (0..31)
        week_start: first day of the week for cycle helpers ("sunday" or "monday")
        log_level: logging level name
        locale: calendar locale name used for weekday labels
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    rule_prefixes: tuple[str, ...] = field(default=DEFAULT_RULE_PREFIXES)
    monthly_padding_days: int = 7
    week_start: str = "sunday"
    log_level: str = "INFO"
    locale: str = "en-short"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Numeric-like values are coerced to int and clamped into their allowed
        range, logging warnings when coercions occur.
        """
        if data is None:
            data = {}

        def _coerce_int(key: str, default: int, low: int, high: int) -> int:
            raw = data.get(key, default)
            try:
                value = int(raw)
            except (TypeError, ValueError):
                logger.warning("Config %s=%r is not an int; using default %d", key, raw, default)
                return default
            if value < low:
                logger.warning("Config %s=%d below minimum; coercing to %d", key, value, low)
                return low
            if value > high:
                logger.warning("Config %s=%d above maximum; coercing to %d", key, value, high)
                return high
            return value

        max_iterations = _coerce_int("max_iterations", DEFAULT_MAX_ITERATIONS, 1, 100000)
        padding = _coerce_int("monthly_padding_days", 7, 0, 31)

        prefixes_raw = data.get("rule_prefixes", DEFAULT_RULE_PREFIXES)
        if isinstance(prefixes_raw, str):
            prefixes_raw = [prefixes_raw]
        if not isinstance(prefixes_raw, (list, tuple)) or not prefixes_raw:
            logger.warning("Config `rule_prefixes` is not a non-empty list; using defaults")
            prefixes_raw = DEFAULT_RULE_PREFIXES
        rule_prefixes = tuple(str(p) for p in prefixes_raw)

        week_start = str(data.get("week_start") or "sunday").lower()
        if week_start not in ("sunday", "monday"):
            logger.warning("Config week_start=%r not recognized; using sunday", week_start)
            week_start = "sunday"

        log_level = str(data.get("log_level") or "INFO").upper()
        locale = str(data.get("locale") or "en-short")

        return cls(
            max_iterations=max_iterations,
            rule_prefixes=rule_prefixes,
            monthly_padding_days=padding,
            week_start=week_start,
            log_level=log_level,
            locale=locale,
        )


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    merged = dict(data)
    env_iterations = os.getenv("AUTHENTIC_MAX_ITERATIONS")
    if env_iterations:
        merged["max_iterations"] = env_iterations
    env_level = os.getenv("AUTHENTIC_LOG_LEVEL")
    if env_level:
        merged["log_level"] = env_level
    return merged


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file and return a Config instance.

    Args:
        path: Optional path to the config file. If not provided the default is
              ./authentic_calendar.yaml (relative to current working dir).

    Behavior:
    - If file is missing: returns defaults (environment overrides still apply).
    - If the file cannot be parsed or its top level is not a mapping: raises ConfigError.
    """
    p = Path(path) if path else Path.cwd() / "authentic_calendar.yaml"
    logger.debug("Attempting to load config from %s", p)

    if not p.exists():
        logger.info("Config file %s not found; using defaults", p)
        return Config.from_dict(_apply_env_overrides({}))

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Unable to read config file {p}: {exc}", str(p)) from exc

    # safe_load returns None for empty files
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        logger.warning("Config file %s parsed but top-level is not a mapping: %r", p, raw)
        raise ConfigError("Config file must contain a mapping at top level", str(p))

    cfg = Config.from_dict(_apply_env_overrides(raw))
    logger.info("Loaded configuration from %s", p)
    logger.debug("Configuration values: %s", cfg)
    return cfg


def get_config() -> Config:
    """Return the process default configuration, built from defaults on first use."""
    global _config
    if _config is None:
        _config = Config.from_dict(_apply_env_overrides({}))
    return _config


def set_config(config: Config | None) -> None:
    """Replace the process default configuration (None resets it)."""
    global _config
    _config = config
