"""RRULE string parsing and canonical serialization.

A rule string is a ``;``-separated list of ``KEY=VALUE`` pairs, e.g.
``FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE``. Parsing produces an immutable
RuleTable; ``serialize_rules`` turns a table back into a rule string with
FREQ, INTERVAL and BYDAY always leading, so two equivalent tables serialize
to comparable strings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Optional, Union

from .lite_exceptions import MalformedRuleError

logger = logging.getLogger(__name__)

RuleValue = Union[str, tuple[str, ...]]


class RuleKey(str, Enum):
    """Rule keys the expression builder and formatter understand."""

    FREQ = "FREQ"
    INTERVAL = "INTERVAL"
    BYDAY = "BYDAY"
    BYMONTH = "BYMONTH"
    BYMONTHDAY = "BYMONTHDAY"
    UNTIL = "UNTIL"
    COUNT = "COUNT"


# Serialization prefix; remaining keys follow in table order.
ORDERED_KEYS: tuple[RuleKey, ...] = (RuleKey.FREQ, RuleKey.INTERVAL, RuleKey.BYDAY)


def _canonical_key(key: Any) -> str:
    if isinstance(key, RuleKey):
        return key.value
    if not isinstance(key, str):
        raise KeyError(key)
    return key.strip().upper()


def _freeze(value: Any) -> RuleValue:
    if isinstance(value, str):
        return value
    return tuple(str(v) for v in value)


class RuleTable(Mapping[str, RuleValue]):
    """Immutable mapping of rule keys to scalar or list values.

    Keys are stored upper-case and looked up case-insensitively, so
    ``table["freq"]``, ``table["FREQ"]`` and ``table[RuleKey.FREQ]`` are the
    same entry. List values are tuples.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]] = ()) -> None:
        pairs = items.items() if isinstance(items, Mapping) else items
        data: dict[str, RuleValue] = {}
        for key, value in pairs:
            data[_canonical_key(key)] = _freeze(value)
        self._items = data

    def __getitem__(self, key: Any) -> RuleValue:
        return self._items[_canonical_key(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"RuleTable({self._items!r})"

    def __str__(self) -> str:
        return serialize_rules(self)

    def values_of(self, key: Any) -> tuple[str, ...]:
        """Return the value for ``key`` as a tuple, whether stored as a scalar or a list.

        Missing keys give an empty tuple.
        """
        value = self.get(key)
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return value

    def scalar(self, key: Any) -> Optional[str]:
        """Return the value for ``key`` as a single string (lists re-joined with ``,``)."""
        value = self.get(key)
        if value is None or isinstance(value, str):
            return value
        return ",".join(value)


def _split_pair(pair: str, rule: str) -> tuple[str, RuleValue]:
    if "=" not in pair:
        raise MalformedRuleError(f"Rule segment {pair!r} in {rule!r} has no '='")

    key, raw_value = pair.split("=", 1)
    key = key.strip()
    if not key:
        raise MalformedRuleError(f"Rule segment {pair!r} in {rule!r} has an empty key")

    raw_value = raw_value.strip()
    if "," in raw_value:
        return key, tuple(part.strip() for part in raw_value.split(","))
    return key, raw_value


def parse_rules(rule_strings: Union[str, Iterable[str]]) -> RuleTable:
    """Parse RRULE strings into one RuleTable.

    Pairs from all strings are merged; a later value for the same key
    replaces the earlier one. Blank segments such as a trailing ``;`` are
    ignored.

    Args:
        rule_strings: Rule strings (a single string is also accepted)

    Returns:
        RuleTable with one entry per key

    Raises:
        MalformedRuleError: If any pair lacks '=' or has an empty key
    """
    if isinstance(rule_strings, str):
        rule_strings = [rule_strings]

    pairs: list[tuple[str, RuleValue]] = []
    for rule in rule_strings:
        for pair in rule.split(";"):
            if not pair.strip():
                continue
            pairs.append(_split_pair(pair, rule))

    table = RuleTable(pairs)
    unknown = [key for key in table if key not in RuleKey.__members__]
    if unknown:
        logger.debug("Preserving uninterpreted rule keys: %s", unknown)
    return table


def _format_segment(key: str, value: RuleValue) -> str:
    if isinstance(value, str):
        return f"{key}={value}"
    return f"{key}={','.join(value)}"


def serialize_rules(table: Mapping[Any, Any]) -> str:
    """Render a rule table as a canonical RRULE string.

    FREQ, INTERVAL and BYDAY come first (when present), then every other key
    in table order.
    """
    if not isinstance(table, RuleTable):
        table = RuleTable(table)

    segments = [
        _format_segment(key.value, table[key]) for key in ORDERED_KEYS if key in table
    ]
    ordered_names = {key.value for key in ORDERED_KEYS}
    segments.extend(
        _format_segment(key, value) for key, value in table.items() if key not in ordered_names
    )
    return ";".join(segments)
