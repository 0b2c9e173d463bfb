"""Unit tests for rrule_lite.lite_expressions."""

from datetime import date

import pytest

from rrule_lite.lite_expressions import (
    And,
    Or,
    Primitive,
    all_of,
    any_of,
    evaluate,
    expression_dates,
)
from rrule_lite.temporal import After, Before, MonthEquals, WeekdayOfWeek

pytestmark = pytest.mark.unit

MONDAY = Primitive(WeekdayOfWeek(0))
FRIDAY = Primitive(WeekdayOfWeek(4))
JANUARY = Primitive(MonthEquals(1))


def test_primitive_delegates_to_matcher():
    assert evaluate(MONDAY, date(2025, 1, 6))
    assert not evaluate(MONDAY, date(2025, 1, 7))


def test_and_requires_both():
    expr = And(MONDAY, JANUARY)
    assert evaluate(expr, date(2025, 1, 6))
    assert not evaluate(expr, date(2025, 2, 3))


def test_or_requires_either():
    expr = Or(MONDAY, FRIDAY)
    assert evaluate(expr, date(2025, 1, 10))
    assert not evaluate(expr, date(2025, 1, 8))


def test_evaluate_rejects_non_expressions():
    with pytest.raises(TypeError):
        evaluate(WeekdayOfWeek(0), date(2025, 1, 6))  # type: ignore[arg-type]


def test_all_of_wraps_bare_primitives_and_folds_left():
    expr = all_of([After(date(2025, 1, 1)), Before(date(2025, 1, 31)), MONDAY])
    assert expr == And(
        And(Primitive(After(date(2025, 1, 1))), Primitive(Before(date(2025, 1, 31)))),
        MONDAY,
    )


def test_single_item_is_returned_unchanged():
    assert any_of([MONDAY]) is MONDAY


def test_empty_combination_raises():
    with pytest.raises(ValueError):
        any_of([])


def test_nested_expression_dates():
    # Mondays or Fridays in January 2025, after the 5th.
    expr = all_of([any_of([MONDAY, FRIDAY]), JANUARY, After(date(2025, 1, 5))])
    assert expression_dates(expr, date(2025, 1, 1), date(2025, 2, 28)) == [
        date(2025, 1, 6),
        date(2025, 1, 10),
        date(2025, 1, 13),
        date(2025, 1, 17),
        date(2025, 1, 20),
        date(2025, 1, 24),
        date(2025, 1, 27),
        date(2025, 1, 31),
    ]


def test_expression_dates_limit():
    assert expression_dates(MONDAY, date(2025, 1, 1), date(2025, 12, 31), limit=3) == [
        date(2025, 1, 6),
        date(2025, 1, 13),
        date(2025, 1, 20),
    ]
