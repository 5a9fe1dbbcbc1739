"""Error taxonomy for SQL to Redis translation.

Only exhaustion of every strategy is reported as an error. A rule whose
predicate or context builder fails is a control-flow signal, never an
exception.
"""

from __future__ import annotations


class SqlToRedisError(Exception):
    """Base class for every error raised by the transformer."""

    prefix = "Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class ParseFailure(SqlToRedisError):
    """The SQL text could not be parsed into a single statement."""

    prefix = "SQL parse error"


class NoMatchingPattern(SqlToRedisError):
    """Neither the rule registry nor the direct generator handled the statement."""

    prefix = "No matching pattern for"

    def __init__(self, sql: str) -> None:
        super().__init__(sql)
        self.sql = sql


class TemplateRenderFailure(SqlToRedisError):
    """A matched rule named a template that is missing or malformed."""

    prefix = "Template error"

    def __init__(self, detail: str, template: str = "") -> None:
        super().__init__(detail)
        self.template = template


class InitializationFailure(SqlToRedisError):
    """The template collaborator could not be loaded."""

    prefix = "Initialization error"


__all__ = [
    "SqlToRedisError",
    "ParseFailure",
    "NoMatchingPattern",
    "TemplateRenderFailure",
    "InitializationFailure",
]
