"""JOIN inspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from sqlglot import exp

from sql_redis.pattern.combinators import Pattern, extract, is_match
from sql_redis.pattern.conditions import unwrap
from sql_redis.statements.select import get_from, get_joins


class JoinType(str, Enum):
    INNER = "INNER"
    LEFT_OUTER = "LEFT_OUTER"
    RIGHT_OUTER = "RIGHT_OUTER"
    FULL_OUTER = "FULL_OUTER"
    CROSS = "CROSS"
    NATURAL = "NATURAL"


@dataclass(frozen=True)
class JoinCondition:
    """ON expression, USING columns, NATURAL, or nothing (``kind`` says which)."""

    kind: str  # "on" | "using" | "natural" | "none"
    on: Optional[exp.Expression] = None
    using: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class TableInfo:
    name: str
    alias: Optional[str] = None
    is_derived: bool = False


@dataclass(frozen=True)
class JoinInfo:
    join_type: JoinType
    left: TableInfo
    right: TableInfo
    condition: JoinCondition


def table_info(node: Optional[exp.Expression]) -> TableInfo:
    if isinstance(node, exp.Table):
        return TableInfo(name=node.name, alias=node.alias or None)
    if isinstance(node, exp.Subquery):
        alias = node.alias or None
        return TableInfo(name=alias or "derived", alias=alias, is_derived=True)
    return TableInfo(name="unknown")


def join_type(join: exp.Join) -> JoinType:
    method = join.text("method").upper()
    side = join.text("side").upper()
    kind = join.text("kind").upper()
    if method == "NATURAL":
        return JoinType.NATURAL
    if side == "LEFT":
        return JoinType.LEFT_OUTER
    if side == "RIGHT":
        return JoinType.RIGHT_OUTER
    if side == "FULL":
        return JoinType.FULL_OUTER
    if kind == "CROSS":
        return JoinType.CROSS
    if not kind and join.args.get("on") is None and not join.args.get("using"):
        # comma join
        return JoinType.CROSS
    return JoinType.INNER


def join_condition(join: exp.Join) -> JoinCondition:
    if join.text("method").upper() == "NATURAL":
        return JoinCondition(kind="natural")
    on = join.args.get("on")
    if on is not None:
        return JoinCondition(kind="on", on=on)
    using = join.args.get("using")
    if using:
        return JoinCondition(kind="using", using=[col.name for col in using])
    return JoinCondition(kind="none")


def extract_all_joins(stmt: exp.Expression) -> List[JoinInfo]:
    """One record per JOIN, each paired with the FROM table on the left."""
    if not isinstance(stmt, exp.Select):
        return []
    left = table_info(get_from(stmt))
    return [
        JoinInfo(
            join_type=join_type(j),
            left=left,
            right=table_info(j.this),
            condition=join_condition(j),
        )
        for j in get_joins(stmt)
    ]


def _equi_join(expr: exp.Expression) -> Optional[Tuple[str, str, str, str]]:
    node = unwrap(expr)
    if not isinstance(node, exp.EQ):
        return None
    left, right = unwrap(node.this), unwrap(node.expression)
    if not (isinstance(left, exp.Column) and isinstance(right, exp.Column)):
        return None
    if not (left.table and right.table):
        return None
    return (left.table, left.name, right.table, right.name)


equi_join_condition: Pattern[exp.Expression, Tuple[str, str, str, str]] = extract(_equi_join)


def is_equi_join(info: JoinInfo) -> bool:
    """``ON a.col = b.col`` or any USING clause."""
    if info.condition.kind == "using":
        return True
    if info.condition.kind == "on" and info.condition.on is not None:
        return is_match(equi_join_condition(info.condition.on))
    return False
