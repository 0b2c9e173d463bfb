"""Tests for the rrule_lite exception hierarchy."""
import pytest
from rrule_lite.lite_exceptions import (
    InvalidDateError,
    MalformedRuleError,
    RRuleLiteError,
    UnknownWeekdayError,
)


class TestExceptionHierarchy:
    """Test the exception hierarchy is properly structured."""

    def test_all_exceptions_inherit_from_base(self):
        """All custom exceptions should inherit from RRuleLiteError."""
        for exc_class in (MalformedRuleError, UnknownWeekdayError, InvalidDateError):
            assert issubclass(exc_class, RRuleLiteError)
            assert issubclass(exc_class, Exception)

    def test_exceptions_are_distinguishable(self):
        """Each exception type should be distinguishable."""
        exceptions = [MalformedRuleError("rule"), UnknownWeekdayError("day"), InvalidDateError("date")]
        types = [type(e) for e in exceptions]
        assert len(set(types)) == len(types)

    def test_exception_messages_are_preserved(self):
        msg = "Malformed rule pair: 'FREQ'"
        assert str(MalformedRuleError(msg)) == msg

    def test_exceptions_can_be_raised_and_caught(self):
        """Exceptions can be caught through the base class."""
        with pytest.raises(RRuleLiteError):
            raise UnknownWeekdayError("XX")

        with pytest.raises(InvalidDateError):
            raise InvalidDateError("bad")

    def test_errors_are_not_value_errors(self):
        """Rule errors are not confused with unrelated ValueErrors."""
        assert not issubclass(RRuleLiteError, ValueError)
