"""
Central logging configuration for rrule_lite.

Sets package logger levels and keeps third-party libraries quiet, with
environment overrides for troubleshooting.
"""

import logging
import os
from typing import Optional

PACKAGE_MODULES = [
    "rrule_lite",
    "rrule_lite.__main__",
    "rrule_lite.lite_datetime_utils",
    "rrule_lite.lite_rule_table",
    "rrule_lite.lite_frequency",
    "rrule_lite.lite_expression_builder",
    "rrule_lite.lite_enumerator",
    "rrule_lite.lite_rrule_parser",
    "rrule_lite.config_loader",
]

SUPPRESSED_LOGGERS = [
    "dateutil",
    "pydantic",
]

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_lite_logging(
    debug_mode: bool = False,
    force_debug: Optional[bool] = None,
    level_name: Optional[str] = None,
) -> None:
    """
    Configure logging levels for rrule_lite.

    Args:
        debug_mode: Whether to enable debug logging for rrule_lite modules
        force_debug: Override debug mode setting (None to use env var detection)
        level_name: Level used outside debug mode (e.g. the configured log_level);
                    unknown names fall back to INFO

    Environment Variables:
        RRULE_LITE_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        RRULE_LITE_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)
    """
    env_debug = os.getenv("RRULE_LITE_DEBUG", "").lower() in ("1", "true", "yes")
    env_log_level = os.getenv("RRULE_LITE_LOG_LEVEL", "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif env_debug:
        final_debug = True
    else:
        final_debug = debug_mode

    base_level = logging.INFO
    if level_name and level_name.upper() in LEVEL_NAMES:
        base_level = getattr(logging, level_name.upper())

    root_level = logging.DEBUG if final_debug else base_level
    if env_log_level in LEVEL_NAMES:
        root_level = getattr(logging, env_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(root_level)
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s - %(name)s - %(message)s"))
        root_logger.addHandler(handler)

    logger_config: dict[str, int] = {name: logging.WARNING for name in SUPPRESSED_LOGGERS}

    package_level = logging.DEBUG if final_debug else root_level
    for module in PACKAGE_MODULES:
        logger_config[module] = package_level

    for logger_name, level in logger_config.items():
        logging.getLogger(logger_name).setLevel(level)

    if final_debug:
        root_logger.debug("Debug logging enabled for rrule_lite modules.")


def reset_logging_to_debug() -> None:
    """
    Reset all loggers to DEBUG level for troubleshooting.
    """
    logging.getLogger().setLevel(logging.DEBUG)

    for logger_name in SUPPRESSED_LOGGERS + PACKAGE_MODULES:
        logging.getLogger(logger_name).setLevel(logging.DEBUG)

    logging.getLogger().info("All loggers reset to DEBUG level for troubleshooting")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in ["rrule_lite", *SUPPRESSED_LOGGERS]:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)

    return status
