"""Accessors for INSERT statements."""

from __future__ import annotations

from typing import List, Optional

from sqlglot import exp

from sql_redis.pattern.conditions import literal_value
from sql_redis.statements.common import table_name


def get_insert(stmt: Optional[exp.Expression]) -> Optional[exp.Insert]:
    return stmt if isinstance(stmt, exp.Insert) else None


def get_table_name(stmt: exp.Expression) -> Optional[str]:
    insert = get_insert(stmt)
    return table_name(insert.this) if insert is not None else None


def get_columns(stmt: exp.Expression) -> List[str]:
    """Explicit column list in declaration order; empty when omitted."""
    insert = get_insert(stmt)
    if insert is None or not isinstance(insert.this, exp.Schema):
        return []
    return [col.name for col in insert.this.expressions]


def get_value_rows(stmt: exp.Expression) -> List[List[exp.Expression]]:
    """Rows of a VALUES source; empty for INSERT ... SELECT."""
    insert = get_insert(stmt)
    if insert is None or not isinstance(insert.expression, exp.Values):
        return []
    rows = []
    for row in insert.expression.expressions:
        rows.append(list(row.expressions) if isinstance(row, exp.Tuple) else [row])
    return rows


def get_literal_rows(stmt: exp.Expression) -> Optional[List[List[str]]]:
    """VALUES rows as raw text; None if any value is not a literal."""
    rows: List[List[str]] = []
    for row in get_value_rows(stmt):
        values = [literal_value(node) for node in row]
        if any(v is None for v in values):
            return None
        rows.append(values)  # type: ignore[arg-type]
    return rows


def get_column_value(stmt: exp.Expression, column: str, row: int = 0) -> Optional[str]:
    """Literal for a column (case-insensitive) in the given VALUES row."""
    columns = [c.lower() for c in get_columns(stmt)]
    rows = get_value_rows(stmt)
    if column.lower() not in columns or row >= len(rows):
        return None
    position = columns.index(column.lower())
    if position >= len(rows[row]):
        return None
    return literal_value(rows[row][position])
