"""Command-line entry for rrule_lite.

Expands recurrence rules for a start date and prints the canonical rule, its
English phrase and the occurrence dates in the query window.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import timedelta
from typing import Optional, Sequence

from . import _init_logging
from .config_loader import load_config
from .lite_datetime_utils import parse_rule_datetime
from .lite_exceptions import RRuleLiteError
from .lite_logging import configure_lite_logging
from .lite_models import DateRange, LiteRecurringEvent
from .lite_rrule_parser import RRuleParser

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the rrule_lite CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="rrule_lite",
        description="Expand and describe RRULE recurrence rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m rrule_lite --rule "FREQ=WEEKLY;BYDAY=MO,WE" --start 2025-01-06
  python -m rrule_lite --rule "FREQ=DAILY;INTERVAL=2;COUNT=3" --start 2025-03-01 --to 2025-03-30
        """,
    )
    parser.add_argument(
        "--rule",
        action="append",
        required=True,
        metavar="RRULE",
        help="Recurrence rule string (repeatable)",
    )
    parser.add_argument("--start", required=True, help="Start of the first occurrence")
    parser.add_argument("--from", dest="range_start", help="First date to list (default: --start)")
    parser.add_argument(
        "--to", dest="range_end", help="Last date to list (default: start + window_days from config)"
    )
    parser.add_argument(
        "--exdate", action="append", default=[], metavar="TIMESTAMP", help="Excluded occurrence (repeatable)"
    )
    parser.add_argument("--timezone", help="Timezone for the UNTIL date in the phrase (default from config)")
    parser.add_argument("--config", metavar="PATH", help="YAML or JSON config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    args = _create_parser().parse_args(argv)

    config = load_config(args.config)
    _init_logging("DEBUG" if args.debug else config.log_level)
    configure_lite_logging(debug_mode=args.debug, level_name=config.log_level)

    try:
        start = parse_rule_datetime(args.start)
        range_start = parse_rule_datetime(args.range_start).date() if args.range_start else start.date()
        if args.range_end:
            range_end = parse_rule_datetime(args.range_end).date()
        else:
            range_end = range_start + timedelta(days=config.window_days)

        event = LiteRecurringEvent(
            start=start,
            recurrence_rules=args.rule,
            exception_dates=args.exdate,
        )
        parser = RRuleParser(event)
        phrase = parser.human_phrase(args.timezone or config.default_timezone)
        dates = parser.dates(DateRange(start=range_start, end=range_end))
    except RRuleLiteError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(parser.serialize())
    print(phrase)
    for day in dates:
        print(day.isoformat())
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
