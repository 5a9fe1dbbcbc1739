"""Ordered rule registry.

Rule sets are concatenated in the fixed order SELECT, INSERT, UPDATE, DELETE.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from sqlglot import exp

from sql_redis.context import TemplateContext
from sql_redis.rules.base import Rule
from sql_redis.rules.delete import DELETE_RULES
from sql_redis.rules.insert import INSERT_RULES
from sql_redis.rules.select import SELECT_RULES
from sql_redis.rules.update import UPDATE_RULES

ALL_RULES: Tuple[Rule, ...] = tuple(SELECT_RULES + INSERT_RULES + UPDATE_RULES + DELETE_RULES)


def build_rule_registry() -> Tuple[Rule, ...]:
    """Return the ordered, immutable registry."""
    names = [r.name for r in ALL_RULES]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"Duplicate rule names: {', '.join(duplicates)}")
    return ALL_RULES


def find_rule(
    rules: Sequence[Rule], stmt: exp.Expression
) -> Optional[Tuple[Rule, TemplateContext]]:
    """First rule that both matches ``stmt`` and builds a context."""
    for candidate in rules:
        context = candidate.apply(stmt)
        if context is not None:
            return candidate, context
    return None
