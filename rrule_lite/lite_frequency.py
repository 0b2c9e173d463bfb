"""Frequency-specific sub-expressions.

One handler per supported FREQ value, selected through ``FREQUENCY_HANDLERS``.
Each handler returns the expression describing which days inside a matching
day/week/month/year are occurrences.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Optional

from .lite_byday import ByDaySpec, OrdinalWeekdayOfMonth, parse_byday
from .lite_exceptions import MalformedRuleError
from .lite_expressions import Expression, Primitive, all_of, any_of
from .lite_rule_table import RuleKey, RuleTable
from .temporal import (
    DayInterval,
    DayOfMonthEquals,
    DayOfMonthRange,
    MonthEquals,
    TemporalExpression,
    TimeUnit,
)
from .temporal import OrdinalWeekdayOfMonth as OrdinalWeekdayMatcher
from .temporal import WeekdayOfWeek

logger = logging.getLogger(__name__)


class Frequency(str, Enum):
    """Supported FREQ values."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @property
    def unit(self) -> TimeUnit:
        return _UNITS[self]

    @classmethod
    def from_rule(cls, value: str) -> "Frequency":
        try:
            return cls(value.strip().upper())
        except ValueError as e:
            raise MalformedRuleError(f"Unsupported FREQ value: {value!r}") from e


_UNITS: dict[Frequency, TimeUnit] = {
    Frequency.DAILY: TimeUnit.DAY,
    Frequency.WEEKLY: TimeUnit.WEEK,
    Frequency.MONTHLY: TimeUnit.MONTH,
    Frequency.YEARLY: TimeUnit.YEAR,
}


def rule_frequency(table: RuleTable) -> Optional[Frequency]:
    """The table's FREQ as a Frequency, or None when FREQ is absent."""
    value = table.scalar(RuleKey.FREQ)
    if value is None:
        return None
    return Frequency.from_rule(value)


def parse_int(value: str, key: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise MalformedRuleError(f"{key} value {value!r} is not an integer") from e


def rule_interval(table: RuleTable) -> int:
    """INTERVAL as a positive integer.

    Missing INTERVAL means 1. Zero or negative values are treated as 1.
    """
    value = table.scalar(RuleKey.INTERVAL)
    if value is None:
        return 1
    interval = parse_int(value, RuleKey.INTERVAL.value)
    if interval < 1:
        logger.warning("INTERVAL=%d is not positive; using 1", interval)
        return 1
    return interval


def rule_count(table: RuleTable) -> int:
    """COUNT as an integer; 0 when absent (unbounded)."""
    value = table.scalar(RuleKey.COUNT)
    if value is None:
        return 0
    return parse_int(value, RuleKey.COUNT.value)


def byday_matcher(spec: ByDaySpec) -> TemporalExpression:
    if isinstance(spec, OrdinalWeekdayOfMonth):
        return OrdinalWeekdayMatcher(spec.ordinal, spec.weekday)
    return WeekdayOfWeek(spec.weekday)


def _byday_union(table: RuleTable) -> Expression:
    return any_of(byday_matcher(parse_byday(token)) for token in table.values_of(RuleKey.BYDAY))


def _int_union(table: RuleTable, key: RuleKey, factory: Callable[[int], TemporalExpression]) -> Expression:
    return any_of(factory(parse_int(value, key.value)) for value in table.values_of(key))


def daily_expression(table: RuleTable, start: datetime, interval: int) -> Expression:
    return Primitive(DayInterval(start.date(), interval))


def weekly_expression(table: RuleTable, start: datetime, interval: int) -> Expression:
    if RuleKey.BYDAY in table:
        return _byday_union(table)
    # Recur on the weekday of the original event.
    return Primitive(WeekdayOfWeek(start.weekday()))


def monthly_expression(table: RuleTable, start: datetime, interval: int) -> Expression:
    if RuleKey.BYDAY in table:
        return _byday_union(table)
    if RuleKey.BYMONTHDAY in table:
        return _int_union(table, RuleKey.BYMONTHDAY, DayOfMonthEquals)
    return Primitive(DayOfMonthRange(start.day, start.day))


def yearly_expression(table: RuleTable, start: datetime, interval: int) -> Expression:
    if RuleKey.BYMONTH in table:
        months = _int_union(table, RuleKey.BYMONTH, MonthEquals)
    else:
        months = Primitive(MonthEquals(start.month))

    if RuleKey.BYDAY in table:
        days = _byday_union(table)
    else:
        # Day of the month, not day of the year.
        days = Primitive(DayOfMonthEquals(start.day))

    return all_of([months, days])


FrequencyHandler = Callable[[RuleTable, datetime, int], Expression]

FREQUENCY_HANDLERS: dict[Frequency, FrequencyHandler] = {
    Frequency.DAILY: daily_expression,
    Frequency.WEEKLY: weekly_expression,
    Frequency.MONTHLY: monthly_expression,
    Frequency.YEARLY: yearly_expression,
}


def frequency_expression(
    frequency: Frequency, table: RuleTable, start: datetime, interval: int
) -> Expression:
    """Dispatch to the handler for ``frequency``."""
    return FREQUENCY_HANDLERS[frequency](table, start, interval)
