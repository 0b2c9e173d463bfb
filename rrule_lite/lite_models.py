"""Data models for recurrence rule processing - rrule_lite."""

from datetime import date, datetime
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .lite_datetime_utils import to_civil_date


class LiteRecurringEvent(BaseModel):
    """A calendar event carrying recurrence rules.

    Only the fields the rule engine reads are modelled; any object exposing
    ``start``, ``recurrence_rules`` and ``exception_dates`` can be used instead.
    """

    start: datetime = Field(..., description="Start of the first occurrence (the series anchor)")
    recurrence_rules: list[str] = Field(
        default_factory=list, description="RRULE strings, e.g. 'FREQ=WEEKLY;BYDAY=MO'"
    )
    exception_dates: list[str] = Field(
        default_factory=list, description="Timestamps of occurrences to exclude"
    )

    @field_validator("start", mode="before")
    @classmethod
    def _promote_date(cls, value: Any) -> Any:
        """Accept all-day starts given as a plain date."""
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, datetime.min.time())
        return value


class DateRange(BaseModel):
    """Inclusive range of calendar dates."""

    start: date
    end: date

    model_config = ConfigDict(frozen=True)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _narrow_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        return value

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return self.start <= to_civil_date(day) <= self.end

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    @classmethod
    def coerce(cls, value: Union["DateRange", tuple, list]) -> "DateRange":
        """Build a DateRange from a DateRange or a ``(start, end)`` pair."""
        if isinstance(value, DateRange):
            return value
        start, end = value
        return cls(start=start, end=end)
