"""Value extraction from WHERE clause condition trees.

All functions are pure and never raise on unsupported shapes: a node they
cannot interpret simply yields no value. Parenthesised groups and ``Where``
wrappers are transparent.

Recursion follows the condition tree and stops silently past
``MAX_CONDITION_DEPTH`` levels; WHERE trees are treated as trusted input.

Value sources accepted by ``literal_value``:
    - numeric literals, including negated ones (``-5``)
    - single-quoted strings
    - double-quoted strings (surfaced by sqlglot as quoted identifiers)
Booleans, NULL, placeholders and expressions are unsupported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from sqlglot import exp

from sql_redis.config import (
    EXCLUSIVE_PREFIX,
    KEY_COLUMN,
    MAX_CONDITION_DEPTH,
    NEG_INF,
    POS_INF,
    SCORE_COLUMN,
)

ScoreRange = Tuple[str, str]


def unwrap(node: Optional[exp.Expression]) -> Optional[exp.Expression]:
    """Strip ``Where`` and parenthesis wrappers."""
    while isinstance(node, (exp.Where, exp.Paren)):
        node = node.this
    return node


def column_name(node: Optional[exp.Expression]) -> Optional[str]:
    """Name of an unqualified column reference, else None."""
    node = unwrap(node)
    if isinstance(node, exp.Column) and not node.table and isinstance(node.this, exp.Identifier):
        return node.name
    return None


def numeric_value(node: Optional[exp.Expression]) -> Optional[str]:
    node = unwrap(node)
    if isinstance(node, exp.Literal) and not node.is_string:
        return node.this
    if isinstance(node, exp.Neg):
        inner = numeric_value(node.this)
        if inner is not None and not inner.startswith("-"):
            return f"-{inner}"
    return None


def string_value(node: Optional[exp.Expression]) -> Optional[str]:
    node = unwrap(node)
    if isinstance(node, exp.Literal) and node.is_string:
        return node.this
    # "double quoted" text parses as a quoted identifier
    if (
        isinstance(node, exp.Column)
        and not node.table
        and isinstance(node.this, exp.Identifier)
        and node.this.quoted
    ):
        return node.this.this
    return None


def literal_value(node: Optional[exp.Expression]) -> Optional[str]:
    """Raw text of a string or numeric literal, else None."""
    value = string_value(node)
    if value is not None:
        return value
    return numeric_value(node)


def extract_field_condition(
    expr: Optional[exp.Expression], field_name: str, _depth: int = 0
) -> Optional[str]:
    """Return the literal from a ``<field_name> = literal`` condition.

    The column name is matched case-insensitively. Conjunctions are searched
    depth-first, left branch before right; the leftmost match wins.

    Examples:
        >>> import sqlglot
        >>> where = sqlglot.parse_one("SELECT * FROM t WHERE key = 'a' AND member = 'm'").args["where"]
        >>> extract_field_condition(where, "member")
        'm'
    """
    if _depth > MAX_CONDITION_DEPTH:
        return None
    node = unwrap(expr)
    if isinstance(node, exp.EQ):
        name = column_name(node.this)
        if name is not None and name.lower() == field_name.lower():
            return literal_value(node.expression)
        return None
    if isinstance(node, exp.And):
        found = extract_field_condition(node.this, field_name, _depth + 1)
        if found is not None:
            return found
        return extract_field_condition(node.expression, field_name, _depth + 1)
    return None


def extract_key_from_condition(expr: Optional[exp.Expression]) -> Optional[str]:
    """Return the literal from the leftmost ``key = literal`` condition.

    An empty key names no Redis key and yields None.
    """
    return extract_field_condition(expr, KEY_COLUMN) or None


_SCORE_BOUNDS = {
    exp.GT: lambda n: (f"{EXCLUSIVE_PREFIX}{n}", POS_INF),
    exp.GTE: lambda n: (n, POS_INF),
    exp.LT: lambda n: (NEG_INF, f"{EXCLUSIVE_PREFIX}{n}"),
    exp.LTE: lambda n: (NEG_INF, n),
}


def extract_score_range(expr: Optional[exp.Expression], _depth: int = 0) -> Optional[ScoreRange]:
    """Return ``(min, max)`` in Redis range syntax for score comparisons.

    ``score > N`` gives ``("(N", "+inf")`` and ``score <= N`` gives
    ``("-inf", "N")``. For a conjunction where both branches yield a range,
    the result pairs the left branch's min with the right branch's max; this
    is a positional merge, not an interval intersection. A conjunction with a
    single ranged branch yields that branch's range.
    """
    if _depth > MAX_CONDITION_DEPTH:
        return None
    node = unwrap(expr)
    bound = _SCORE_BOUNDS.get(type(node))
    if bound is not None:
        name = column_name(node.this)
        number = numeric_value(node.expression)
        if name is not None and name.lower() == SCORE_COLUMN and number is not None:
            return bound(number)
        return None
    if isinstance(node, exp.And):
        left = extract_score_range(node.this, _depth + 1)
        right = extract_score_range(node.expression, _depth + 1)
        if left is not None and right is not None:
            return (left[0], right[1])
        return left if left is not None else right
    return None


def extract_conditions(expr: Optional[exp.Expression], _depth: int = 0) -> Dict[str, str]:
    """Flatten a conjunction of ``column = literal`` nodes into an ordered map.

    Other nodes are ignored. When a column repeats, the leftmost value wins.
    """
    conditions: Dict[str, str] = {}
    if _depth > MAX_CONDITION_DEPTH:
        return conditions
    node = unwrap(expr)
    if isinstance(node, exp.EQ):
        name = column_name(node.this)
        value = literal_value(node.expression)
        if name is not None and value is not None:
            conditions[name] = value
    elif isinstance(node, exp.And):
        conditions.update(extract_conditions(node.this, _depth + 1))
        for name, value in extract_conditions(node.expression, _depth + 1).items():
            conditions.setdefault(name, value)
    return conditions


# ============================================================================
# COMPLEX CONDITIONS (analysis only)
# ============================================================================

OR_CONDITION_KEY = "OR_CONDITION"


@dataclass(frozen=True)
class StringCondition:
    value: str


@dataclass(frozen=True)
class NumberCondition:
    value: str


@dataclass(frozen=True)
class Comparison:
    operator: str  # ">" | ">=" | "<" | "<="
    value: str


@dataclass(frozen=True)
class OrCondition:
    left: Dict[str, "ConditionValue"] = field(default_factory=dict)
    right: Dict[str, "ConditionValue"] = field(default_factory=dict)


@dataclass(frozen=True)
class UnknownCondition:
    pass


ConditionValue = Union[StringCondition, NumberCondition, Comparison, OrCondition, UnknownCondition]

_COMPARISON_SYMBOLS = {exp.GT: ">", exp.GTE: ">=", exp.LT: "<", exp.LTE: "<="}
_UNSUPPORTED_LITERALS = (exp.Boolean, exp.Null, exp.Placeholder)


def extract_complex_conditions(
    expr: Optional[exp.Expression], _depth: int = 0
) -> Dict[str, ConditionValue]:
    """Describe a WHERE tree with nested AND/OR groups.

    Equalities become String/Number conditions, numeric comparisons become
    ``Comparison``, AND merges both sides (right side overriding), and OR is
    stored under ``OR_CONDITION`` with each side described separately.
    This description is informational and never drives command generation.
    """
    conditions: Dict[str, ConditionValue] = {}
    if _depth > MAX_CONDITION_DEPTH:
        return conditions
    node = unwrap(expr)

    if isinstance(node, exp.EQ):
        name = column_name(node.this)
        if name is None:
            return conditions
        text = string_value(node.expression)
        if text is not None:
            conditions[name] = StringCondition(text)
        elif numeric_value(node.expression) is not None:
            conditions[name] = NumberCondition(numeric_value(node.expression))
        elif isinstance(unwrap(node.expression), _UNSUPPORTED_LITERALS):
            conditions[name] = UnknownCondition()
    elif type(node) in _COMPARISON_SYMBOLS:
        name = column_name(node.this)
        number = numeric_value(node.expression)
        if name is not None and number is not None:
            conditions[name] = Comparison(_COMPARISON_SYMBOLS[type(node)], number)
    elif isinstance(node, exp.And):
        conditions.update(extract_complex_conditions(node.this, _depth + 1))
        conditions.update(extract_complex_conditions(node.expression, _depth + 1))
    elif isinstance(node, exp.Or):
        conditions[OR_CONDITION_KEY] = OrCondition(
            extract_complex_conditions(node.this, _depth + 1),
            extract_complex_conditions(node.expression, _depth + 1),
        )
    return conditions


__all__ = [
    "unwrap",
    "column_name",
    "literal_value",
    "numeric_value",
    "string_value",
    "extract_field_condition",
    "extract_key_from_condition",
    "extract_score_range",
    "extract_conditions",
    "extract_complex_conditions",
    "StringCondition",
    "NumberCondition",
    "Comparison",
    "OrCondition",
    "UnknownCondition",
    "ConditionValue",
    "OR_CONDITION_KEY",
]
