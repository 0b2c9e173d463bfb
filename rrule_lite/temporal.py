"""Temporal expression primitives.

Each primitive is a predicate over calendar dates. The rule layer combines
them (see ``lite_expressions``) and never does calendar arithmetic itself:
month lengths, leap years and week boundaries are handled here.

Weeks start on Monday.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from itertools import islice
from typing import Optional, Union

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta
from dateutil.rrule import DAILY, rrule

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


# Indexed by datetime.weekday() (Monday == 0).
_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)


def _last_day_of_month(day: date) -> date:
    return day + relativedelta(day=31)


def _shift(day: date, delta: relativedelta) -> Optional[date]:
    """Apply ``delta``; None when the result falls outside the supported date range."""
    try:
        return day + delta
    except (OverflowError, ValueError):
        return None


class TimeUnit(str, Enum):
    """Granularity for EveryNUnits."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class TemporalExpression(ABC):
    """A predicate over calendar dates."""

    @abstractmethod
    def includes(self, day: date) -> bool:
        """Return True if ``day`` matches this expression."""


@dataclass(frozen=True)
class After(TemporalExpression):
    """Dates strictly after ``boundary``."""

    boundary: date

    def includes(self, day: date) -> bool:
        return day > self.boundary


@dataclass(frozen=True)
class Before(TemporalExpression):
    """Dates on or before ``boundary``."""

    boundary: date

    def includes(self, day: date) -> bool:
        return day <= self.boundary


def _units_between(anchor: date, day: date, unit: TimeUnit) -> int:
    """Whole units from the unit holding ``anchor`` to the unit holding ``day``."""
    if unit is TimeUnit.DAY:
        return (day - anchor).days
    if unit is TimeUnit.WEEK:
        # Compare the Mondays that open each week.
        start_of_week = relativedelta(weekday=MO(-1))
        return ((day + start_of_week) - (anchor + start_of_week)).days // 7
    if unit is TimeUnit.MONTH:
        delta = relativedelta(day + relativedelta(day=1), anchor + relativedelta(day=1))
        return delta.years * 12 + delta.months
    delta = relativedelta(day + relativedelta(month=1, day=1), anchor + relativedelta(month=1, day=1))
    return delta.years


@dataclass(frozen=True)
class EveryNUnits(TemporalExpression):
    """Every ``interval``-th day/week/month/year counted from ``anchor``.

    Any date inside a matching unit is included, so "every 2 weeks" matches
    all seven days of every other week.
    """

    anchor: date
    interval: int
    unit: TimeUnit

    def __post_init__(self) -> None:
        object.__setattr__(self, "anchor", _as_date(self.anchor))
        if self.interval < 1:
            raise ValueError(f"interval must be >= 1, got {self.interval}")

    def includes(self, day: date) -> bool:
        return _units_between(self.anchor, day, self.unit) % self.interval == 0


@dataclass(frozen=True)
class DayInterval(TemporalExpression):
    """Every ``interval`` days counted from ``anchor``."""

    anchor: date
    interval: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "anchor", _as_date(self.anchor))
        if self.interval < 1:
            raise ValueError(f"interval must be >= 1, got {self.interval}")

    def includes(self, day: date) -> bool:
        return (day - self.anchor).days % self.interval == 0


@dataclass(frozen=True)
class WeekdayOfWeek(TemporalExpression):
    """A fixed weekday, 0=Monday .. 6=Sunday."""

    weekday: int

    def includes(self, day: date) -> bool:
        return day.weekday() == self.weekday


@dataclass(frozen=True)
class OrdinalWeekdayOfMonth(TemporalExpression):
    """The ``ordinal``-th ``weekday`` of the month; -1 is the last one."""

    ordinal: int
    weekday: int

    def includes(self, day: date) -> bool:
        if day.weekday() != self.weekday:
            return False
        if self.ordinal == 0:
            return False
        weekday = _WEEKDAYS[self.weekday](self.ordinal)
        # Count forward from the 1st, or back from the last day of the month.
        origin = 1 if self.ordinal > 0 else 31
        return _shift(day, relativedelta(day=origin, weekday=weekday)) == day


@dataclass(frozen=True)
class DayOfMonthEquals(TemporalExpression):
    """A fixed day of the month. Negative values count back from the month's end.

    Days that a month does not have (e.g. 31 in April) never match.
    """

    day: int

    def includes(self, day: date) -> bool:
        if self.day < 0:
            return _last_day_of_month(day).day + self.day + 1 == day.day
        return day.day == self.day


@dataclass(frozen=True)
class DayOfMonthRange(TemporalExpression):
    """Days of the month from ``first`` through ``last`` inclusive."""

    first: int
    last: int

    def includes(self, day: date) -> bool:
        return self.first <= day.day <= self.last


@dataclass(frozen=True)
class MonthEquals(TemporalExpression):
    """A fixed month, 1=January .. 12=December."""

    month: int

    def includes(self, day: date) -> bool:
        return day.month == self.month


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield each date from ``start`` through ``end`` inclusive."""
    days = rrule(
        DAILY,
        dtstart=datetime.fromordinal(_as_date(start).toordinal()),
        until=datetime.fromordinal(_as_date(end).toordinal()),
    )
    for occurrence in days:
        yield occurrence.date()


def select_dates(
    predicate: Callable[[date], bool],
    start: DateLike,
    end: DateLike,
    limit: Optional[int] = None,
) -> list[date]:
    """Return the dates in ``[start, end]`` matching ``predicate``, ascending.

    Args:
        predicate: Date matcher
        start: First date of the range
        end: Last date of the range (inclusive)
        limit: Stop after this many matches (None for no limit)
    """
    if limit is not None and limit <= 0:
        return []
    return list(islice(filter(predicate, iter_days(start, end)), limit))
