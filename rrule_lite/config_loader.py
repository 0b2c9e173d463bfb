"""rrule_lite.config_loader

Lightweight config loader for rrule_lite.

- Prefers YAML (PyYAML) if available, falls back to JSON.
- Minimal imports at module import time to keep startup light.
- Exposes a typed dataclass `Config` and a `load_config()` helper that accepts
  an optional path override. Environment variables override file values.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"
DEFAULT_WINDOW_DAYS = 30

ENV_OVERRIDES: dict[str, str] = {
    "RRULE_LITE_TIMEZONE": "default_timezone",
    "RRULE_LITE_WINDOW_DAYS": "window_days",
    "RRULE_LITE_LOG_LEVEL": "log_level",
}


@dataclass
class Config:
    """Typed configuration for rrule_lite.

    Fields:
        default_timezone: IANA zone used to render UNTIL dates when none is given
        window_days: length of the default query window (1..3660)
        log_level: logging level name
    """

    default_timezone: str = DEFAULT_TIMEZONE
    window_days: int = DEFAULT_WINDOW_DAYS
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Coerces window_days to an int within 1..3660 and falls back to UTC for
        unknown timezones, logging a warning whenever a value is replaced.
        """
        if data is None:
            data = {}

        raw_window = data.get("window_days", DEFAULT_WINDOW_DAYS)
        try:
            window_days = int(raw_window)
        except (TypeError, ValueError):
            logger.warning(
                "Config window_days=%r is not an int; using default %d", raw_window, DEFAULT_WINDOW_DAYS
            )
            window_days = DEFAULT_WINDOW_DAYS
        if window_days < 1:
            logger.warning("window_days %d below minimum; coercing to 1", window_days)
            window_days = 1
        elif window_days > 3660:
            logger.warning("window_days %d above maximum; coercing to 3660", window_days)
            window_days = 3660

        default_timezone = str(data.get("default_timezone") or DEFAULT_TIMEZONE)
        try:
            ZoneInfo(default_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                "Config default_timezone=%r is not a known zone; using %s",
                default_timezone,
                DEFAULT_TIMEZONE,
            )
            default_timezone = DEFAULT_TIMEZONE

        log_level = data.get("log_level", "INFO")
        log_level = str(log_level).upper() if log_level is not None else "INFO"

        return cls(
            default_timezone=default_timezone,
            window_days=window_days,
            log_level=log_level,
        )


def _load_yaml_or_json(path: Path) -> Any:
    """
    Load a mapping from a YAML or JSON file.

    `.json` files are read with the json module; anything else goes through
    PyYAML, which is imported lazily to keep package import cheap.
    """
    text = path.read_text()
    if path.suffix.lower() == ".json":
        return json.loads(text)

    import yaml  # noqa: PLC0415

    loaded = yaml.safe_load(text)
    # safe_load returns None for empty files
    if loaded is None:
        return {}
    return loaded


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    merged = dict(data)
    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            logger.debug("Config %s overridden by %s", key, env_name)
            merged[key] = value
    return merged


def load_config(path: str | None = None) -> Config:
    """Load configuration from a YAML/JSON file and return a Config instance.

    Args:
        path: Optional path to the config file. If not provided the default is
              ./rrule_lite.yaml (relative to current working dir).

    Returns:
        Config dataclass instance with values from file (or defaults), with
        RRULE_LITE_* environment variables applied on top.

    Behavior:
    - If file is missing: returns defaults (plus environment overrides).
    - If file exists but top-level is not a mapping: raises ValueError.
    """
    p = Path(path) if path else Path.cwd() / "rrule_lite.yaml"
    logger.debug("Attempting to load config from %s", p)
    if not p.exists():
        logger.info("Config file %s not found; using defaults", p)
        return Config.from_dict(_apply_env_overrides({}))

    raw = _load_yaml_or_json(p)
    if not isinstance(raw, dict):
        logger.warning("Config file %s parsed but top-level is not a mapping: %r", p, raw)
        raise ValueError("Config file must contain a mapping at top level")  # noqa: TRY004
    cfg = Config.from_dict(_apply_env_overrides(raw))
    logger.info("Loaded configuration from %s", p)
    logger.debug("Configuration values: %s", cfg)
    return cfg
