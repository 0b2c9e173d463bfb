"""rrule_lite - recurrence rule parsing, expansion and formatting.

Turns RRULE strings (FREQ, INTERVAL, BYDAY, BYMONTH, BYMONTHDAY, UNTIL, COUNT)
into a date expression, enumerates occurrence dates for a query range, and
renders rules as canonical strings or English phrases.
"""

__version__ = "1.0.0"
VERSION = __version__

from typing import Optional

from .lite_byday import OrdinalWeekdayOfMonth, WeekdayOnly, parse_byday
from .lite_enumerator import enumerate_dates
from .lite_exceptions import (
    InvalidDateError,
    MalformedRuleError,
    RRuleLiteError,
    UnknownWeekdayError,
)
from .lite_expression_builder import build_expression
from .lite_formatter import human_phrase
from .lite_frequency import Frequency
from .lite_models import DateRange, LiteRecurringEvent
from .lite_rrule_parser import RRuleParser
from .lite_rule_table import RuleKey, RuleTable, parse_rules, serialize_rules

__all__ = [
    "VERSION",
    "DateRange",
    "Frequency",
    "InvalidDateError",
    "LiteRecurringEvent",
    "MalformedRuleError",
    "OrdinalWeekdayOfMonth",
    "RRuleLiteError",
    "RRuleParser",
    "RuleKey",
    "RuleTable",
    "UnknownWeekdayError",
    "WeekdayOnly",
    "build_expression",
    "enumerate_dates",
    "human_phrase",
    "parse_byday",
    "parse_rules",
    "serialize_rules",
]


def _init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to console.

    Honors the RRULE_LITE_DEBUG environment variable (truthy values: "1",
    "true", "yes", "on"), which forces DEBUG verbosity.
    """
    import logging
    import os
    import sys

    debug_env = os.environ.get("RRULE_LITE_DEBUG", "")
    if debug_env.strip().lower() in ("1", "true", "yes", "on"):
        level_name = "DEBUG"

    root = logging.getLogger()
    # Only configure a handler if none are present to avoid duplicate output.
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        from colorlog import ColoredFormatter

        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        formatter = ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors)

        handler.setFormatter(formatter)
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
    root.setLevel(level)
    logging.getLogger(__name__).debug("Logging initialized at level %s", logging.getLevelName(level))
