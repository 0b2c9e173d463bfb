"""Build the composite expression for a rule table."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from .lite_datetime_utils import parse_rule_datetime
from .lite_expressions import Expression, Primitive, all_of
from .lite_frequency import Frequency, frequency_expression, rule_frequency, rule_interval
from .lite_rule_table import RuleKey, RuleTable
from .temporal import After, Before, EveryNUnits

logger = logging.getLogger(__name__)


def start_bound(start: datetime) -> Expression:
    # After() is exclusive; anchoring a day early keeps the start date itself.
    return Primitive(After(start.date() - timedelta(days=1)))


def until_date(table: RuleTable) -> Optional[date]:
    """The UNTIL value as a calendar date, or None if the rule has no UNTIL.

    Raises:
        InvalidDateError: If UNTIL cannot be parsed
    """
    value = table.scalar(RuleKey.UNTIL)
    if value is None:
        return None
    return parse_rule_datetime(value).date()


def build_subexpressions(table: RuleTable, start: datetime) -> list[Expression]:
    """The parts that ``build_expression`` intersects, in order.

    Start bound, every-N-units (not for DAILY, whose handler already carries
    the interval), the frequency-specific part, and the UNTIL bound.
    """
    expressions: list[Expression] = [start_bound(start)]

    frequency = rule_frequency(table)
    if frequency is not None:
        interval = rule_interval(table)
        if frequency is not Frequency.DAILY:
            expressions.append(Primitive(EveryNUnits(start.date(), interval, frequency.unit)))
        expressions.append(frequency_expression(frequency, table, start, interval))

    until = until_date(table)
    if until is not None:
        expressions.append(Primitive(Before(until)))

    return expressions


def build_expression(table: RuleTable, start: datetime) -> Expression:
    """Intersect the sub-expressions for ``table`` anchored at ``start``.

    Raises:
        MalformedRuleError: Unsupported FREQ or a non-integer numeric field
        UnknownWeekdayError: A BYDAY token has an unknown weekday code
        InvalidDateError: UNTIL cannot be parsed
    """
    expressions = build_subexpressions(table, start)
    if rule_frequency(table) is None:
        logger.debug("Rule has no FREQ; expression only bounds the start/until dates")
    expression = all_of(expressions)
    logger.debug("Built expression for %s: %r", table, expression)
    return expression
