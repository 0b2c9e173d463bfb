"""Custom exception hierarchy for recurrence rule errors.

This module provides specific exception types for the three ways rule input
can be rejected, so callers can tell a malformed rule string apart from a bad
weekday code or an unparseable timestamp.
"""


class RRuleLiteError(Exception):
    """Base exception for all rrule_lite errors.

    All errors raised while parsing rules, building expressions or deriving
    exception dates inherit from this class.
    """


class MalformedRuleError(RRuleLiteError):
    """A rule string could not be interpreted.

    Raised when:
    - A ``key=value`` pair has no ``=``
    - A pair has an empty key
    - FREQ names a frequency that is not supported
    - A numeric field (INTERVAL, COUNT, BYMONTH, BYMONTHDAY) is not an integer
    """


class UnknownWeekdayError(RRuleLiteError):
    """A BYDAY token does not end in one of SU, MO, TU, WE, TH, FR, SA."""


class InvalidDateError(RRuleLiteError):
    """A date or timestamp string could not be parsed.

    Raised for UNTIL values while building an expression and for exception
    timestamps while an event is loaded.
    """
