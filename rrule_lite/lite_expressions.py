"""Composite date expressions.

An expression is a tree of ``Primitive`` leaves (wrapping a temporal
primitive) joined by ``And`` / ``Or`` nodes. ``evaluate`` walks the tree;
only the leaves consult the temporal engine.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from .temporal import DateLike, TemporalExpression, select_dates


@dataclass(frozen=True)
class Primitive:
    matcher: TemporalExpression


@dataclass(frozen=True)
class And:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Or:
    left: "Expression"
    right: "Expression"


Expression = Union[Primitive, And, Or]


def evaluate(expression: Expression, day: date) -> bool:
    """Return True if ``day`` satisfies ``expression``."""
    if isinstance(expression, Primitive):
        return expression.matcher.includes(day)
    if isinstance(expression, And):
        return evaluate(expression.left, day) and evaluate(expression.right, day)
    if isinstance(expression, Or):
        return evaluate(expression.left, day) or evaluate(expression.right, day)
    raise TypeError(f"Not an expression: {expression!r}")


def _fold(expressions: Iterable[Union[Expression, TemporalExpression]], node: type) -> Expression:
    result: Optional[Expression] = None
    for expr in expressions:
        if isinstance(expr, TemporalExpression):
            expr = Primitive(expr)
        result = expr if result is None else node(result, expr)
    if result is None:
        raise ValueError(f"Cannot combine an empty list of expressions with {node.__name__}")
    return result


def all_of(expressions: Iterable[Union[Expression, TemporalExpression]]) -> Expression:
    """Intersection of ``expressions``; bare temporal primitives are wrapped."""
    return _fold(expressions, And)


def any_of(expressions: Iterable[Union[Expression, TemporalExpression]]) -> Expression:
    """Union of ``expressions``; bare temporal primitives are wrapped."""
    return _fold(expressions, Or)


def expression_dates(
    expression: Expression,
    start: DateLike,
    end: DateLike,
    limit: Optional[int] = None,
) -> list[date]:
    """Dates in ``[start, end]`` matching ``expression``, ascending, at most ``limit`` of them."""
    return select_dates(lambda day: evaluate(expression, day), start, end, limit)
