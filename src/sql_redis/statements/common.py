from __future__ import annotations

from typing import Optional

from sqlglot import exp


def table_name(node: Optional[exp.Expression]) -> Optional[str]:
    """Name of a plain table reference (``Schema`` wrappers are looked through)."""
    if isinstance(node, exp.Schema):
        node = node.this
    if isinstance(node, exp.Table) and node.name:
        return node.name
    return None


def where_condition(stmt: exp.Expression) -> Optional[exp.Expression]:
    where = stmt.args.get("where")
    return where.this if isinstance(where, exp.Where) else None
