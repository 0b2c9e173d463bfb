"""Occurrence date enumeration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime
from typing import Union

from .lite_datetime_utils import to_civil_date
from .lite_expressions import Expression, expression_dates
from .lite_models import DateRange

logger = logging.getLogger(__name__)


def enumerate_dates(
    date_range: Union[DateRange, tuple, list],
    expression: Expression,
    start: Union[date, datetime],
    occurrence_count: int = 0,
    exceptions: Iterable[Union[date, datetime]] = (),
) -> list[date]:
    """Occurrence dates of a series inside ``date_range``.

    With ``occurrence_count`` <= 0 the expression is evaluated over the range
    alone. Otherwise counting starts at the series start so the first
    ``occurrence_count`` matches are the same whatever range is queried; only
    those falling inside the range are kept.

    The start date is always included when it lies in the range, and
    exception dates are always removed.

    Args:
        date_range: Inclusive range, as a DateRange or ``(start, end)`` pair
        expression: Composite expression for the series
        start: Series start (anchor)
        occurrence_count: COUNT, 0 for unbounded
        exceptions: Dates (or datetimes) to exclude

    Returns:
        Ascending list of unique dates
    """
    query = DateRange.coerce(date_range)
    anchor = to_civil_date(start)

    if occurrence_count <= 0:
        candidates = set(expression_dates(expression, query.start, query.end))
    else:
        limited = expression_dates(expression, anchor, query.end, limit=occurrence_count)
        candidates = {day for day in limited if day in query}
        logger.debug(
            "COUNT=%d: %d of %d counted occurrences fall in %s..%s",
            occurrence_count,
            len(candidates),
            len(limited),
            query.start,
            query.end,
        )

    # Put the original date back in if the rule does not produce it.
    if anchor in query:
        candidates.add(anchor)

    excluded = {to_civil_date(day) for day in exceptions}
    return sorted(candidates - excluded)
