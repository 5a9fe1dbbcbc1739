"""Thin adapter over sqlglot producing one statement tree per call."""

from __future__ import annotations

import logging
from typing import Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError, TokenError

from sql_redis.config import DEFAULT_DIALECT
from sql_redis.errors import ParseFailure


def parse_sql(sql: str, *, dialect: Optional[str] = DEFAULT_DIALECT) -> exp.Expression:
    """Parse SQL text and return its first statement.

    Args:
        sql: SQL text; only the first statement is used.
        dialect: sqlglot dialect name, or None for the generic dialect.

    Returns:
        The parsed statement tree.

    Raises:
        ParseFailure: If the text is empty, does not parse, or parses to a
            bare expression rather than a statement.
    """
    if not sql or not sql.strip():
        raise ParseFailure("Empty SQL statement")
    try:
        statements = sqlglot.parse(sql, read=dialect)
    except (ParseError, TokenError) as e:
        raise ParseFailure(str(e)) from e

    statements = [s for s in statements if s is not None]
    if not statements:
        raise ParseFailure("Empty SQL statement")
    if len(statements) > 1:
        logging.debug("Ignoring %d trailing statement(s)", len(statements) - 1)

    stmt = statements[0]
    if isinstance(stmt, (exp.Condition, exp.Alias)):
        raise ParseFailure(f"Not a SQL statement: {sql.strip()}")
    return stmt
