from collections.abc import Callable, Generator
from datetime import datetime
from typing import Any, Optional

import pytest

from rrule_lite import LiteRecurringEvent, RRuleParser


@pytest.fixture
def test_timezone() -> str:
    """Return a deterministic timezone identifier for tests.

    Using a fixed timezone string avoids host-local timezone differences
    which can make datetime-sensitive tests flaky.
    """
    return "America/Los_Angeles"


@pytest.fixture
def monday_start() -> datetime:
    """Monday 6 January 2025, 09:00 (naive)."""
    return datetime(2025, 1, 6, 9, 0)


@pytest.fixture
def make_parser() -> Callable[..., RRuleParser]:
    """Factory building an RRuleParser from rule strings, a start and optional exdates."""

    def _make(
        rules: list[str], start: datetime, exception_dates: Optional[list[str]] = None
    ) -> RRuleParser:
        event = LiteRecurringEvent(
            start=start,
            recurrence_rules=rules,
            exception_dates=exception_dates or [],
        )
        return RRuleParser(event)

    return _make


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Ensure RRULE_LITE_* environment variables do not leak into tests."""
    for name in (
        "RRULE_LITE_DEBUG",
        "RRULE_LITE_LOG_LEVEL",
        "RRULE_LITE_TIMEZONE",
        "RRULE_LITE_WINDOW_DAYS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
