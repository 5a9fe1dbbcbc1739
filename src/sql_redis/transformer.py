"""Transformer facade: SQL text in, one Redis command string out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Union

from sqlglot import exp

from sql_redis.commands import generate_command
from sql_redis.config import DEFAULT_DIALECT
from sql_redis.core.enums import StatementKind
from sql_redis.core.parser import parse_sql
from sql_redis.errors import NoMatchingPattern
from sql_redis.rules import Rule, build_rule_registry, find_rule
from sql_redis.templates import TemplateRenderer


@dataclass(frozen=True)
class PatternInfo:
    """Description of one supported SQL shape."""

    name: str
    statement: StatementKind
    matcher: str
    sql_pattern: str
    redis_pattern: str


class SqlToRedisTransformer:
    """Translate SQL statements into Redis commands.

    The rule registry is tried first (first match wins, rendered through the
    named template); the direct command generator is the fallback. The
    registry and templates are loaded once and never mutated, so a single
    instance can be shared across threads.

    Examples:
        >>> t = SqlToRedisTransformer()
        >>> t.transform("SELECT * FROM leaderboard__zset WHERE key = 'games:global' AND score > 1000")
        'ZRANGEBYSCORE games:global (1000 +inf'
    """

    def __init__(
        self,
        *,
        template_dir: Optional[Union[str, Path]] = None,
        dialect: Optional[str] = DEFAULT_DIALECT,
        rules: Optional[Sequence[Rule]] = None,
    ) -> None:
        """Load templates and build the rule registry.

        Args:
            template_dir: Directory holding ``commands.yaml`` (and optionally
                ``lua/``); defaults to the packaged templates.
            dialect: sqlglot dialect used to parse input.
            rules: Replacement registry, in dispatch order.

        Raises:
            InitializationFailure: If the templates cannot be loaded.
        """
        self.renderer = TemplateRenderer(template_dir)
        self.dialect = dialect
        self.rules = tuple(rules) if rules is not None else build_rule_registry()
        for r in self.rules:
            if not self.renderer.has_template(r.template):
                logging.warning("Rule '%s' names unknown template '%s'", r.name, r.template)

    def transform(self, sql: str) -> str:
        """Translate one SQL statement.

        Raises:
            ParseFailure: If the SQL cannot be parsed.
            NoMatchingPattern: If no strategy handles the statement.
            TemplateRenderFailure: If a matched rule's template fails to render.
        """
        stmt = parse_sql(sql, dialect=self.dialect)
        return self.transform_statement(stmt, sql=sql)

    def transform_statement(self, stmt: exp.Expression, *, sql: Optional[str] = None) -> str:
        """Translate an already parsed statement."""
        found = find_rule(self.rules, stmt)
        if found is not None:
            matched, context = found
            logging.debug("Rule '%s' matched; rendering '%s'", matched.name, matched.template)
            return self.renderer.render(matched.template, context).strip("\r\n")

        command = generate_command(stmt)
        if command is not None:
            return str(command)

        source = sql if sql is not None else stmt.sql()
        logging.debug("No pattern matched: %s", source)
        raise NoMatchingPattern(source)

    def list_supported_patterns(self) -> List[str]:
        return self.renderer.template_names()

    def get_pattern_details(self) -> List[PatternInfo]:
        """Rule metadata in dispatch order."""
        return [
            PatternInfo(
                name=r.name,
                statement=r.statement,
                matcher=r.matcher_name,
                sql_pattern=r.sql_pattern,
                redis_pattern=r.redis_pattern,
            )
            for r in self.rules
        ]

    def render_lua(self, category: str, operation: str, context: Mapping[str, str]) -> str:
        """Render a packaged Lua script, e.g. ``render_lua("zset", "zrangebyscore", {})``."""
        return self.renderer.render_lua(category, operation, context)
