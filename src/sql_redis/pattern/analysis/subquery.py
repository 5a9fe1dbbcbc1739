"""Subquery inspection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from sqlglot import exp

from sql_redis.config import MAX_CONDITION_DEPTH
from sql_redis.pattern.conditions import column_name
from sql_redis.statements.select import get_from, get_joins


class SubqueryContext(str, Enum):
    FROM_CLAUSE = "FROM_CLAUSE"
    WHERE_CLAUSE = "WHERE_CLAUSE"
    SELECT_CLAUSE = "SELECT_CLAUSE"
    EXISTS_PREDICATE = "EXISTS_PREDICATE"
    IN_PREDICATE = "IN_PREDICATE"
    QUANTIFIED = "QUANTIFIED"


@dataclass(frozen=True)
class SubqueryInfo:
    """A subquery and where it appears.

    ``alias`` is set for derived tables, ``column`` for IN and quantified
    predicates, ``operator``/``quantifier`` for quantified comparisons.
    """

    query: exp.Expression
    context: SubqueryContext
    negated: bool = False
    alias: Optional[str] = None
    column: Optional[str] = None
    operator: Optional[str] = None
    quantifier: Optional[str] = None


_OPERATORS = {
    exp.EQ: "=",
    exp.NEQ: "<>",
    exp.GT: ">",
    exp.GTE: ">=",
    exp.LT: "<",
    exp.LTE: "<=",
}


def _body(node: exp.Expression) -> exp.Expression:
    return node.this if isinstance(node, exp.Subquery) else node


def _match_subquery(
    node: exp.Expression, context: SubqueryContext, negated: bool = False
) -> Optional[SubqueryInfo]:
    if isinstance(node, exp.Not):
        inner = _match_subquery(node.this, context, negated=not negated)
        if inner is not None and inner.context in (
            SubqueryContext.EXISTS_PREDICATE,
            SubqueryContext.IN_PREDICATE,
        ):
            return inner
        return None
    if isinstance(node, exp.Exists):
        return SubqueryInfo(_body(node.this), SubqueryContext.EXISTS_PREDICATE, negated)
    if isinstance(node, exp.In) and node.args.get("query") is not None:
        return SubqueryInfo(
            _body(node.args["query"]),
            SubqueryContext.IN_PREDICATE,
            negated,
            column=column_name(node.this),
        )
    if type(node) in _OPERATORS and isinstance(node.expression, (exp.Any, exp.All)):
        quantified = node.expression
        return SubqueryInfo(
            _body(quantified.this),
            SubqueryContext.QUANTIFIED,
            column=column_name(node.this),
            operator=_OPERATORS[type(node)],
            quantifier="ANY" if isinstance(quantified, exp.Any) else "ALL",
        )
    if isinstance(node, exp.Subquery):
        return SubqueryInfo(_body(node), context)
    return None


def extract_subqueries_from_expr(
    expr: Optional[exp.Expression],
    context: SubqueryContext = SubqueryContext.WHERE_CLAUSE,
    _depth: int = 0,
) -> List[SubqueryInfo]:
    """Subqueries in an expression tree, without descending into their bodies."""
    if expr is None or _depth > MAX_CONDITION_DEPTH:
        return []
    info = _match_subquery(expr, context)
    if info is not None:
        return [info]
    found: List[SubqueryInfo] = []
    for child in expr.iter_expressions():
        found.extend(extract_subqueries_from_expr(child, context, _depth + 1))
    return found


def extract_all_subqueries(stmt: exp.Expression, _depth: int = 0) -> List[SubqueryInfo]:
    """Subqueries of a SELECT (FROM, JOIN, WHERE, projection, HAVING), then nested ones."""
    if not isinstance(stmt, exp.Select) or _depth > MAX_CONDITION_DEPTH:
        return []
    found: List[SubqueryInfo] = []
    for table in [get_from(stmt)] + [j.this for j in get_joins(stmt)]:
        if isinstance(table, exp.Subquery):
            found.append(
                SubqueryInfo(_body(table), SubqueryContext.FROM_CLAUSE, alias=table.alias or None)
            )

    where = stmt.args.get("where")
    if where is not None:
        found.extend(extract_subqueries_from_expr(where.this, SubqueryContext.WHERE_CLAUSE))
    for item in stmt.expressions:
        found.extend(extract_subqueries_from_expr(item, SubqueryContext.SELECT_CLAUSE))
    having = stmt.args.get("having")
    if having is not None:
        found.extend(extract_subqueries_from_expr(having.this, SubqueryContext.WHERE_CLAUSE))

    nested: List[SubqueryInfo] = []
    for info in found:
        nested.extend(extract_all_subqueries(info.query, _depth + 1))
    return found + nested
