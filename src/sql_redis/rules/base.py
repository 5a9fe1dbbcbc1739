from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sqlglot import exp

from sql_redis.context import TemplateContext
from sql_redis.core.enums import StatementKind

Matcher = Callable[[exp.Expression], bool]
ContextBuilder = Callable[[exp.Expression], Optional[TemplateContext]]


@dataclass(frozen=True)
class Rule:
    """One SQL shape to Redis command mapping.

    Attributes:
        name: Unique rule identifier (e.g., "zset_get_score_range").
        statement: Statement kind the rule applies to.
        matcher: Shape predicate over a parsed statement.
        context_builder: Builds the template variables, or None if it cannot.
        template: Name of the command template to render.
        matcher_name: Name of the predicate, for pattern listings.
        sql_pattern: Example SQL shape.
        redis_pattern: Example command shape.
    """

    name: str
    statement: StatementKind
    matcher: Matcher
    context_builder: ContextBuilder
    template: str
    matcher_name: str = ""
    sql_pattern: str = ""
    redis_pattern: str = ""

    def matches(self, stmt: exp.Expression) -> bool:
        return self.matcher(stmt)

    def get_context(self, stmt: exp.Expression) -> Optional[TemplateContext]:
        return self.context_builder(stmt)

    def apply(self, stmt: exp.Expression) -> Optional[TemplateContext]:
        """Context for ``stmt`` if the rule both matches and builds, else None."""
        if not self.matches(stmt):
            return None
        return self.get_context(stmt)


def rule(
    name: str,
    statement: StatementKind,
    matcher: Matcher,
    context_builder: ContextBuilder,
    *,
    template: Optional[str] = None,
    sql: str = "",
    redis: str = "",
) -> Rule:
    """Build a rule; the template defaults to the rule name."""
    return Rule(
        name=name,
        statement=statement,
        matcher=matcher,
        context_builder=context_builder,
        template=template or name,
        matcher_name=getattr(matcher, "__name__", name),
        sql_pattern=sql,
        redis_pattern=redis,
    )
