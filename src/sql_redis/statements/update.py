"""Accessors for UPDATE statements."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlglot import exp

from sql_redis.pattern.conditions import column_name, literal_value
from sql_redis.statements.common import table_name, where_condition


def get_update(stmt: Optional[exp.Expression]) -> Optional[exp.Update]:
    return stmt if isinstance(stmt, exp.Update) else None


def get_table_name(stmt: exp.Expression) -> Optional[str]:
    update = get_update(stmt)
    return table_name(update.this) if update is not None else None


def get_where(stmt: exp.Expression) -> Optional[exp.Expression]:
    update = get_update(stmt)
    return where_condition(update) if update is not None else None


def get_assignments(stmt: exp.Expression) -> List[Tuple[str, str]]:
    """SET assignments as ordered ``(column, value)`` pairs.

    Assignments whose target is not a plain column or whose value is not a
    literal are skipped.
    """
    update = get_update(stmt)
    if update is None:
        return []
    pairs: List[Tuple[str, str]] = []
    for node in update.expressions:
        if not isinstance(node, exp.EQ):
            continue
        name = column_name(node.this)
        value = literal_value(node.expression)
        if name is not None and value is not None:
            pairs.append((name, value))
    return pairs


def get_assignment(stmt: exp.Expression, column: str) -> Optional[str]:
    for name, value in get_assignments(stmt):
        if name.lower() == column.lower():
            return value
    return None
