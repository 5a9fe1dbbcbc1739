"""Context builders for INSERT shapes."""

from __future__ import annotations

from typing import List, Optional

from sqlglot import exp

from sql_redis.config import KEY_COLUMN, MEMBER_COLUMN, SCORE_COLUMN, VALUE_COLUMN
from sql_redis.context import TemplateContext
from sql_redis.statements import insert as ins


def _first_row(stmt: exp.Expression, *columns: str) -> Optional[TemplateContext]:
    """Named columns of the first VALUES row, all of which must be literals."""
    context: TemplateContext = {}
    for column in columns:
        value = ins.get_column_value(stmt, column)
        if value is None:
            return None
        context[column] = value
    return context


def build_string_set_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    return _first_row(stmt, KEY_COLUMN, VALUE_COLUMN)


def build_list_push_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    return _first_row(stmt, KEY_COLUMN, VALUE_COLUMN)


def build_zset_add_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    return _first_row(stmt, KEY_COLUMN, MEMBER_COLUMN, SCORE_COLUMN)


def build_hash_set_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    """``field_values`` lists the non-key columns of the first row in column order."""
    columns = ins.get_columns(stmt)
    rows = ins.get_literal_rows(stmt)
    if not rows or len(rows[0]) != len(columns):
        return None

    key: Optional[str] = None
    parts: List[str] = []
    for column, value in zip(columns, rows[0]):
        if column.lower() == KEY_COLUMN and key is None:
            key = value
        else:
            parts.extend([column, value])
    if key is None or not parts:
        return None
    return {"key": key, "field_values": " ".join(parts)}


def build_set_add_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    """``members`` collects every row sharing the first row's key."""
    columns = [c.lower() for c in ins.get_columns(stmt)]
    rows = ins.get_literal_rows(stmt)
    if not rows or KEY_COLUMN not in columns or MEMBER_COLUMN not in columns:
        return None
    key_pos = columns.index(KEY_COLUMN)
    member_pos = columns.index(MEMBER_COLUMN)
    if any(len(row) != len(columns) for row in rows):
        return None

    key = rows[0][key_pos]
    members = [row[member_pos] for row in rows if row[key_pos] == key]
    return {"key": key, "members": " ".join(members)}
