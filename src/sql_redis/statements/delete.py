"""Accessors for DELETE statements."""

from __future__ import annotations

from typing import Optional

from sqlglot import exp

from sql_redis.statements.common import table_name, where_condition


def get_delete(stmt: Optional[exp.Expression]) -> Optional[exp.Delete]:
    return stmt if isinstance(stmt, exp.Delete) else None


def get_table_name(stmt: exp.Expression) -> Optional[str]:
    delete = get_delete(stmt)
    return table_name(delete.this) if delete is not None else None


def get_where(stmt: exp.Expression) -> Optional[exp.Expression]:
    delete = get_delete(stmt)
    return where_condition(delete) if delete is not None else None
