"""Info extractors for INSERT and DELETE statements."""

from __future__ import annotations

from typing import Optional

from sqlglot import exp

from sql_redis.config import FIELD_COLUMN, INDEX_COLUMN, KEY_COLUMN, MEMBER_COLUMN, VALUE_COLUMN
from sql_redis.pattern.conditions import (
    extract_field_condition,
    extract_key_from_condition,
)
from sql_redis.pattern.extractors.info import DeleteCommandInfo, InsertCommandInfo
from sql_redis.statements import delete as dele
from sql_redis.statements import insert as ins


def extract_insert_command(stmt: exp.Expression) -> Optional[InsertCommandInfo]:
    """Single-row INSERT with an explicit column list and literal values.

    The ``key`` column is required; the other columns keep their declared
    order in ``fields``.
    """
    table = ins.get_table_name(stmt)
    columns = ins.get_columns(stmt)
    rows = ins.get_literal_rows(stmt)
    if table is None or not columns or rows is None or len(rows) != 1:
        return None
    values = rows[0]
    if len(values) != len(columns):
        return None

    key: Optional[str] = None
    fields = []
    for column, value in zip(columns, values):
        if column.lower() == KEY_COLUMN and key is None:
            key = value
        else:
            fields.append((column, value))
    if key is None:
        return None
    return InsertCommandInfo(table=table, key=key, fields=fields)


def extract_delete_command(stmt: exp.Expression) -> Optional[DeleteCommandInfo]:
    """DELETE with a ``key`` condition and an optional element selector.

    The element is taken from the first of ``member``, ``field`` or ``value``
    found; ``index`` must be numeric.
    """
    table = dele.get_table_name(stmt)
    where = dele.get_where(stmt)
    key = extract_key_from_condition(where)
    if table is None or key is None:
        return None

    member = None
    for column in (MEMBER_COLUMN, FIELD_COLUMN, VALUE_COLUMN):
        member = extract_field_condition(where, column)
        if member is not None:
            break
    index = extract_field_condition(where, INDEX_COLUMN)
    if index is not None and not index.lstrip("-").isdigit():
        index = None
    return DeleteCommandInfo(table=table, key=key, member=member, index=index)

