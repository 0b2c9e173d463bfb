"""Unit tests for the rrule_lite.temporal primitives."""

from datetime import date, datetime

import pytest

from rrule_lite.temporal import (
    After,
    Before,
    DayInterval,
    DayOfMonthEquals,
    DayOfMonthRange,
    EveryNUnits,
    MonthEquals,
    OrdinalWeekdayOfMonth,
    TimeUnit,
    WeekdayOfWeek,
    iter_days,
    select_dates,
)

pytestmark = pytest.mark.unit


class TestBounds:
    def test_after_is_exclusive(self):
        bound = After(date(2025, 1, 5))
        assert not bound.includes(date(2025, 1, 5))
        assert bound.includes(date(2025, 1, 6))

    def test_before_is_inclusive(self):
        bound = Before(date(2025, 1, 10))
        assert bound.includes(date(2025, 1, 10))
        assert not bound.includes(date(2025, 1, 11))


class TestEveryNUnits:
    def test_every_two_weeks_matches_whole_calendar_weeks(self):
        # Wednesday anchor; its week runs Monday 6 .. Sunday 12 January.
        every = EveryNUnits(date(2025, 1, 8), 2, TimeUnit.WEEK)
        assert every.includes(date(2025, 1, 6))
        assert every.includes(date(2025, 1, 12))
        assert not every.includes(date(2025, 1, 13))
        assert every.includes(date(2025, 1, 20))

    def test_weeks_across_year_boundary(self):
        every = EveryNUnits(date(2024, 12, 30), 2, TimeUnit.WEEK)
        assert every.includes(date(2025, 1, 13))
        assert not every.includes(date(2025, 1, 6))

    def test_every_three_months(self):
        every = EveryNUnits(date(2024, 11, 15), 3, TimeUnit.MONTH)
        assert every.includes(date(2025, 2, 1))
        assert not every.includes(date(2025, 1, 15))
        assert every.includes(date(2025, 5, 31))

    def test_every_other_year(self):
        every = EveryNUnits(datetime(2024, 2, 29, 9, 0), 2, TimeUnit.YEAR)
        assert every.anchor == date(2024, 2, 29)
        assert every.includes(date(2026, 7, 1))
        assert not every.includes(date(2025, 7, 1))

    def test_every_day(self):
        every = EveryNUnits(date(2025, 1, 1), 3, TimeUnit.DAY)
        assert every.includes(date(2025, 1, 4))
        assert not every.includes(date(2025, 1, 5))

    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError):
            EveryNUnits(date(2025, 1, 1), 0, TimeUnit.WEEK)


class TestDayLevelPrimitives:
    def test_day_interval(self):
        every = DayInterval(date(2025, 3, 1), 2)
        assert [d.day for d in iter_days(date(2025, 3, 1), date(2025, 3, 6)) if every.includes(d)] == [1, 3, 5]

    def test_day_interval_rejects_zero(self):
        with pytest.raises(ValueError):
            DayInterval(date(2025, 3, 1), 0)

    def test_weekday_of_week(self):
        assert WeekdayOfWeek(0).includes(date(2025, 1, 6))
        assert not WeekdayOfWeek(0).includes(date(2025, 1, 7))

    @pytest.mark.parametrize(
        "ordinal,weekday,day,expected",
        [
            (2, 1, date(2025, 1, 14), True),
            (2, 1, date(2025, 1, 7), False),
            (1, 1, date(2025, 1, 7), True),
            (-1, 4, date(2025, 1, 31), True),
            (-1, 4, date(2025, 1, 24), False),
            (-2, 4, date(2025, 1, 24), True),
            (5, 4, date(2025, 1, 31), True),
            (0, 4, date(2025, 1, 31), False),
        ],
    )
    def test_ordinal_weekday_of_month(self, ordinal, weekday, day, expected):
        assert OrdinalWeekdayOfMonth(ordinal, weekday).includes(day) is expected

    def test_day_of_month_skips_short_months(self):
        day31 = DayOfMonthEquals(31)
        matches = select_dates(day31.includes, date(2025, 1, 1), date(2025, 5, 31))
        assert matches == [date(2025, 1, 31), date(2025, 3, 31), date(2025, 5, 31)]

    def test_negative_day_of_month_counts_from_end(self):
        last = DayOfMonthEquals(-1)
        assert last.includes(date(2024, 2, 29))
        assert not last.includes(date(2024, 2, 28))
        assert last.includes(date(2025, 2, 28))

    def test_day_of_month_range(self):
        window = DayOfMonthRange(10, 12)
        assert window.includes(date(2025, 4, 11))
        assert not window.includes(date(2025, 4, 13))

    def test_month_equals(self):
        assert MonthEquals(7).includes(date(2025, 7, 4))
        assert not MonthEquals(7).includes(date(2025, 8, 4))

    def test_ordinal_weekday_at_end_of_calendar(self):
        # 31 December 9999 is a Friday; a fifth Saturday would fall past the last date.
        assert OrdinalWeekdayOfMonth(5, 4).includes(date(9999, 12, 31))
        assert OrdinalWeekdayOfMonth(-1, 4).includes(date(9999, 12, 31))
        assert OrdinalWeekdayOfMonth(4, 5).includes(date(9999, 12, 25))
        assert not OrdinalWeekdayOfMonth(5, 5).includes(date(9999, 12, 25))

    def test_every_n_units_before_anchor(self):
        every = EveryNUnits(date(2025, 3, 15), 2, TimeUnit.MONTH)
        assert every.includes(date(2025, 1, 31))
        assert not every.includes(date(2025, 2, 1))


class TestQueries:
    def test_iter_days_inclusive(self):
        days = list(iter_days(date(2024, 2, 27), date(2024, 3, 1)))
        assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]

    def test_iter_days_empty_for_inverted_range(self):
        assert list(iter_days(date(2025, 1, 2), date(2025, 1, 1))) == []

    def test_iter_days_through_last_representable_date(self):
        assert list(iter_days(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date(9999, 12, 31)]

    def test_iter_days_accepts_datetimes(self):
        days = list(iter_days(datetime(2025, 1, 31, 18, 0), datetime(2025, 2, 1, 6, 0)))
        assert days == [date(2025, 1, 31), date(2025, 2, 1)]

    def test_select_dates_limit(self):
        matches = select_dates(WeekdayOfWeek(0).includes, date(2025, 1, 1), date(2025, 12, 31), limit=2)
        assert matches == [date(2025, 1, 6), date(2025, 1, 13)]

    def test_select_dates_zero_limit(self):
        assert select_dates(lambda d: True, date(2025, 1, 1), date(2025, 1, 5), limit=0) == []
