"""SQL to Redis: translate SQL statements into Redis commands.

The target command is chosen from the shape of the parsed statement: the
table-name suffix selects the Redis data type, and the projection, WHERE,
SET, VALUES, ORDER BY and LIMIT clauses select the operation.

Public API:
    SqlToRedisTransformer: Facade translating one SQL statement at a time
    PatternInfo: Metadata describing one supported pattern
    TableKind: Redis data type derived from a table name
    RedisCommand: Command name plus ordered arguments
    SqlToRedisError and subclasses: Error taxonomy raised by the facade

Usage:
    >>> from sql_redis import SqlToRedisTransformer
    >>> SqlToRedisTransformer().transform("SELECT * FROM users__hash WHERE key = 'user:1001'")
    'HGETALL user:1001'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .commands import RedisCommand
from .core.enums import StatementKind, TableKind
from .errors import (
    InitializationFailure,
    NoMatchingPattern,
    ParseFailure,
    SqlToRedisError,
    TemplateRenderFailure,
)
from .transformer import PatternInfo, SqlToRedisTransformer

__all__ = [
    "__version__",
    # Facade
    "SqlToRedisTransformer",
    "PatternInfo",
    # Values
    "RedisCommand",
    "StatementKind",
    "TableKind",
    # Errors
    "SqlToRedisError",
    "ParseFailure",
    "NoMatchingPattern",
    "TemplateRenderFailure",
    "InitializationFailure",
]
