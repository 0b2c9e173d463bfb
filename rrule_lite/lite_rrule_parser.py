"""Event-level recurrence rule parser - rrule_lite.

``RRuleParser`` reads an event's recurrence rules and exception dates once
(and again on ``reload()``), and answers date, serialization and phrase
queries from that snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

from .lite_datetime_utils import parse_rule_datetime
from .lite_enumerator import enumerate_dates
from .lite_exceptions import RRuleLiteError
from .lite_expression_builder import build_expression, build_subexpressions
from .lite_expressions import Expression
from .lite_formatter import human_phrase
from .lite_frequency import Frequency, rule_count, rule_frequency, rule_interval
from .lite_models import DateRange
from .lite_rule_table import RuleTable, parse_rules, serialize_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedRules:
    """Everything derived from one read of an event."""

    start: datetime
    rules: RuleTable
    expression: Expression
    count: int
    exceptions: tuple[datetime, ...]


def _event_start(event: Any) -> datetime:
    start = event.start
    if isinstance(start, datetime):
        return start
    if isinstance(start, date):
        return datetime.combine(start, datetime.min.time())
    raise TypeError(f"Event start must be a date or datetime, got {type(start).__name__}")


def load_event(event: Any) -> ParsedRules:
    """Derive rules, expression, count and exceptions from ``event``.

    Raises:
        MalformedRuleError, UnknownWeekdayError, InvalidDateError
    """
    start = _event_start(event)
    rules = parse_rules(list(event.recurrence_rules or []))
    exceptions = tuple(parse_rule_datetime(value) for value in (event.exception_dates or []))
    expression = build_expression(rules, start)
    count = rule_count(rules)
    return ParsedRules(
        start=start,
        rules=rules,
        expression=expression,
        count=count,
        exceptions=exceptions,
    )


class RRuleParser:
    """Recurrence rules of one event.

    Construction parses the event's rules and exception dates. If either is
    invalid the constructor raises; ``reload()`` raises the same way but
    leaves the previously loaded state in place.
    """

    def __init__(self, event: Any):
        """Initialize parser for ``event``.

        Args:
            event: Object exposing ``start``, ``recurrence_rules`` and ``exception_dates``
                   (e.g. LiteRecurringEvent)
        """
        self.event = event
        self._state = self._load()

    def _load(self) -> ParsedRules:
        try:
            state = load_event(self.event)
        except RRuleLiteError as e:
            logger.warning("Failed to load recurrence rules %r: %s", self.event.recurrence_rules, e)
            raise
        logger.debug(
            "Loaded rules %s (count=%d, exceptions=%d)",
            state.rules,
            state.count,
            len(state.exceptions),
        )
        return state

    def reload(self) -> "RRuleParser":
        """Re-read the event. On error the previous state is kept and the error propagates."""
        self._state = self._load()
        return self

    @property
    def rules(self) -> RuleTable:
        return self._state.rules

    @property
    def expression(self) -> Expression:
        return self._state.expression

    @property
    def exceptions(self) -> tuple[datetime, ...]:
        return self._state.exceptions

    @property
    def count(self) -> int:
        return self._state.count

    @property
    def frequency(self) -> Optional[Frequency]:
        return rule_frequency(self._state.rules)

    @property
    def interval(self) -> int:
        return rule_interval(self._state.rules)

    def expressions(self) -> list[Expression]:
        """The sub-expressions that ``expression`` intersects."""
        return build_subexpressions(self._state.rules, self._state.start)

    def dates(self, date_range: Union[DateRange, tuple, list]) -> list[date]:
        """Occurrence dates within the inclusive ``date_range``, ascending."""
        state = self._state
        return enumerate_dates(
            date_range,
            state.expression,
            state.start,
            state.count,
            state.exceptions,
        )

    def serialize(self) -> str:
        """Canonical rule string (FREQ, INTERVAL, BYDAY first)."""
        return serialize_rules(self._state.rules)

    def human_phrase(self, zone: Union[str, ZoneInfo]) -> str:
        """English description of the rules, with UNTIL rendered in ``zone``."""
        return human_phrase(self._state.rules, zone)

    def __repr__(self) -> str:
        return f"RRuleParser({self.serialize()!r})"
