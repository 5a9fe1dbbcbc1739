"""Accessors for SELECT statements."""

from __future__ import annotations

from typing import List, Optional

from sqlglot import exp

from sql_redis.config import SCORE_COLUMN
from sql_redis.pattern.conditions import column_name, numeric_value
from sql_redis.statements.common import table_name, where_condition


def get_select(stmt: Optional[exp.Expression]) -> Optional[exp.Select]:
    return stmt if isinstance(stmt, exp.Select) else None


def get_from(select: exp.Select) -> Optional[exp.Expression]:
    """The FROM clause; newer sqlglot releases store it as ``from_``."""
    from_clause = select.args.get("from") or select.args.get("from_")
    return from_clause.this if isinstance(from_clause, exp.From) else None


def get_table_name(stmt: exp.Expression) -> Optional[str]:
    select = get_select(stmt)
    if select is None:
        return None
    return table_name(get_from(select))


def get_joins(stmt: exp.Expression) -> List[exp.Join]:
    select = get_select(stmt)
    if select is None:
        return []
    return list(select.args.get("joins") or [])


def get_projection(stmt: exp.Expression) -> List[exp.Expression]:
    select = get_select(stmt)
    return list(select.expressions) if select is not None else []


def is_wildcard(item: exp.Expression) -> bool:
    return isinstance(item, exp.Star) or (
        isinstance(item, exp.Column) and isinstance(item.this, exp.Star)
    )


def get_field_name(item: exp.Expression) -> Optional[str]:
    """Column name of a bare, unaliased projection item, else None."""
    return column_name(item)


def get_selected_fields(stmt: exp.Expression) -> List[str]:
    """Projected column names; ``["*"]`` for a wildcard, empty if any item is not a column."""
    projection = get_projection(stmt)
    if len(projection) == 1 and is_wildcard(projection[0]):
        return ["*"]
    fields: List[str] = []
    for item in projection:
        name = get_field_name(item)
        if name is None:
            return []
        fields.append(name)
    return fields


def get_where(stmt: exp.Expression) -> Optional[exp.Expression]:
    select = get_select(stmt)
    return where_condition(select) if select is not None else None


def get_limit(stmt: exp.Expression) -> Optional[str]:
    """Raw text of a numeric LIMIT, else None."""
    select = get_select(stmt)
    if select is None:
        return None
    limit = select.args.get("limit")
    if not isinstance(limit, exp.Limit):
        return None
    return numeric_value(limit.args.get("expression") or limit.this)


def has_limit_clause(stmt: exp.Expression) -> bool:
    select = get_select(stmt)
    return select is not None and select.args.get("limit") is not None


def get_order_by(stmt: exp.Expression) -> List[exp.Ordered]:
    select = get_select(stmt)
    if select is None:
        return []
    order = select.args.get("order")
    if not isinstance(order, exp.Order):
        return []
    return [o for o in order.expressions if isinstance(o, exp.Ordered)]


def is_order_by_score_desc(stmt: exp.Expression) -> bool:
    """True only if the first ORDER BY term is ``score`` and explicitly DESC."""
    terms = get_order_by(stmt)
    if not terms:
        return False
    first = terms[0]
    name = column_name(first.this)
    return name is not None and name.lower() == SCORE_COLUMN and bool(first.args.get("desc"))
