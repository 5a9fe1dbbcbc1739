"""Building blocks shared by the per-statement matchers."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from sqlglot import exp

from sql_redis.core.enums import TableKind
from sql_redis.pattern.combinators import Pattern, extract, is_match, predicate
from sql_redis.pattern.conditions import (
    extract_field_condition,
    extract_key_from_condition,
    extract_score_range,
)

StatementPredicate = Callable[[exp.Expression], bool]
NameAccessor = Callable[[exp.Expression], Optional[str]]
WhereAccessor = Callable[[exp.Expression], Optional[exp.Expression]]


def table_with_kind(kind: TableKind) -> Pattern[str, None]:
    """Pattern over a table name succeeding when it classifies as ``kind``."""
    return predicate(lambda name: bool(name) and TableKind.from_table_name(name) is kind)


key_equals: Pattern[exp.Expression, str] = extract(extract_key_from_condition)
score_range = extract(extract_score_range)


def field_equals(field_name: str) -> Pattern[exp.Expression, str]:
    return extract(lambda expr: extract_field_condition(expr, field_name))


def kind_check(get_name: NameAccessor, kind: TableKind) -> StatementPredicate:
    """Build an ``is_<kind>_table`` predicate for one statement kind."""
    pattern = table_with_kind(kind)

    def _check(stmt: exp.Expression) -> bool:
        name = get_name(stmt)
        return name is not None and is_match(pattern(name))

    return _check


def where_matches(get_where: WhereAccessor, pattern: Pattern[exp.Expression, object]) -> StatementPredicate:
    def _check(stmt: exp.Expression) -> bool:
        where = get_where(stmt)
        return where is not None and is_match(pattern(where))

    return _check


def columns_include(columns: Iterable[str], required: Iterable[str]) -> bool:
    """Case-insensitive superset test."""
    present = {c.lower() for c in columns}
    return all(r.lower() in present for r in required)


def columns_exactly(columns: Iterable[str], expected: Iterable[str]) -> bool:
    """Case-insensitive set equality, ignoring order."""
    columns = [c.lower() for c in columns]
    expected = [e.lower() for e in expected]
    return len(columns) == len(expected) and set(columns) == set(expected)
