"""BYDAY token parsing.

BYDAY tokens come in two formats: ``TU`` (every Tuesday) or ``2TU`` (the
second Tuesday of the month). A signed ordinal such as ``-1FR`` counts from
the end of the month.
"""

import re
from dataclasses import dataclass
from typing import Union

from .lite_exceptions import UnknownWeekdayError

# Two-letter codes mapped to datetime.weekday() numbers (Monday == 0).
WEEKDAY_CODES: dict[str, int] = {
    "MO": 0,
    "TU": 1,
    "WE": 2,
    "TH": 3,
    "FR": 4,
    "SA": 5,
    "SU": 6,
}

DAY_NAMES: dict[str, str] = {
    "SU": "Sunday",
    "MO": "Monday",
    "TU": "Tuesday",
    "WE": "Wednesday",
    "TH": "Thursday",
    "FR": "Friday",
    "SA": "Saturday",
}

_TOKEN_RE = re.compile(r"^(?P<ordinal>[+-]?\d+)?(?P<code>.*)$")


@dataclass(frozen=True)
class WeekdayOnly:
    """Every occurrence of ``weekday`` (0=Monday .. 6=Sunday)."""

    weekday: int

    @property
    def code(self) -> str:
        return weekday_code(self.weekday)


@dataclass(frozen=True)
class OrdinalWeekdayOfMonth:
    """The ``ordinal``-th ``weekday`` of a month; negative ordinals count back from its end."""

    ordinal: int
    weekday: int

    @property
    def code(self) -> str:
        return weekday_code(self.weekday)


ByDaySpec = Union[WeekdayOnly, OrdinalWeekdayOfMonth]


def weekday_code(weekday: int) -> str:
    for code, number in WEEKDAY_CODES.items():
        if number == weekday:
            return code
    raise UnknownWeekdayError(f"No weekday code for weekday number {weekday!r}")


def parse_byday(token: str) -> ByDaySpec:
    """Decode one BYDAY token.

    Args:
        token: ``MO`` style or ``2MO`` / ``-1MO`` style token

    Returns:
        WeekdayOnly or OrdinalWeekdayOfMonth

    Raises:
        UnknownWeekdayError: If the weekday code is not one of the seven
    """
    match = _TOKEN_RE.match(token.strip().upper())
    code = match.group("code") if match else ""
    if code not in WEEKDAY_CODES:
        raise UnknownWeekdayError(f"Unknown weekday in BYDAY token {token!r}")

    weekday = WEEKDAY_CODES[code]
    ordinal = match.group("ordinal")
    if ordinal is None:
        return WeekdayOnly(weekday)
    return OrdinalWeekdayOfMonth(int(ordinal), weekday)
