"""Human-readable rendering of recurrence rules.

Examples:
    FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE,FR  -> "Every 2 weeks on Monday, Wednesday, and Friday"
    FREQ=DAILY;INTERVAL=1;UNTIL=20251231   -> "Every day until December 31, 2025"
    (no FREQ, BYDAY or UNTIL)              -> "Never"
"""

from __future__ import annotations

from typing import Optional, Union
from zoneinfo import ZoneInfo

from .lite_byday import DAY_NAMES, OrdinalWeekdayOfMonth, parse_byday
from .lite_datetime_utils import localize, parse_rule_datetime, resolve_zone
from .lite_frequency import Frequency, rule_interval
from .lite_rule_table import RuleKey, RuleTable


def pluralize(count: int, word: str) -> str:
    if count == 1:
        return word
    return f"{count} {word}s"


def ordinal_suffix(number: int) -> str:
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    if 11 <= number % 100 <= 13:
        suffix = "th"
    return f"{number}{suffix}"


def join_names(names: list[str]) -> str:
    """Join names as "A", "A and B" or "A, B, and C"."""
    if len(names) <= 2:
        return " and ".join(names)
    return f"{', '.join(names[:-1])}, and {names[-1]}"


def _day_name(token: str) -> str:
    spec = parse_byday(token)
    name = DAY_NAMES[spec.code]
    if not isinstance(spec, OrdinalWeekdayOfMonth):
        return name
    if spec.ordinal == -1:
        return f"the last {name}"
    if spec.ordinal < 0:
        return f"the {ordinal_suffix(-spec.ordinal)} to last {name}"
    return f"the {ordinal_suffix(spec.ordinal)} {name}"


def freq_interval_clause(table: RuleTable) -> Optional[str]:
    freq = table.scalar(RuleKey.FREQ)
    if freq is None or RuleKey.INTERVAL not in table:
        return None
    unit = Frequency.from_rule(freq).unit.value
    return pluralize(rule_interval(table), unit)


def byday_clause(table: RuleTable) -> Optional[str]:
    tokens = table.values_of(RuleKey.BYDAY)
    if not tokens:
        return None
    return f"on {join_names([_day_name(token) for token in tokens])}"


def until_clause(table: RuleTable, zone: ZoneInfo) -> Optional[str]:
    value = table.scalar(RuleKey.UNTIL)
    if value is None:
        return None
    until = localize(parse_rule_datetime(value), zone)
    return f"until {until.strftime('%B %d, %Y')}"


def human_phrase(table: RuleTable, zone: Union[str, ZoneInfo]) -> str:
    """Describe ``table`` in English.

    Args:
        table: Parsed rules
        zone: Timezone (ZoneInfo or IANA name) used to render the UNTIL date

    Returns:
        Phrase starting with "Every", or "Never" when nothing recurs

    Raises:
        MalformedRuleError: Unsupported FREQ or non-integer INTERVAL
        UnknownWeekdayError: Unknown BYDAY weekday code
        InvalidDateError: Unparseable UNTIL or unknown zone
    """
    tz = resolve_zone(zone)
    clauses = [
        clause
        for clause in (freq_interval_clause(table), byday_clause(table), until_clause(table, tz))
        if clause
    ]
    if not clauses:
        return "Never"
    return f"Every {' '.join(clauses)}"
