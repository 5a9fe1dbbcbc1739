from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlglot import exp

from sql_redis.config import TABLE_SUFFIXES


class TableKind(str, Enum):
    """Redis data type a table maps to, derived from its name suffix.

    Values are strings to ease serialization and CLI interchange.
    """

    STRING = "string"
    HASH = "hash"
    LIST = "list"
    SET = "set"
    ZSET = "zset"

    @classmethod
    def from_table_name(cls, name: str) -> "TableKind":
        """Classify a table name. Total: every name maps to exactly one kind."""
        for kind, suffix in TABLE_SUFFIXES.items():
            if name.endswith(suffix):
                return cls(kind)
        return cls.STRING


class StatementKind(str, Enum):
    """Statement kinds the translator dispatches on."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


_STATEMENT_TYPES = (
    (exp.Select, StatementKind.SELECT),
    (exp.Insert, StatementKind.INSERT),
    (exp.Update, StatementKind.UPDATE),
    (exp.Delete, StatementKind.DELETE),
)


def statement_kind(stmt: exp.Expression) -> Optional[StatementKind]:
    """Return the kind of a parsed statement, or None for anything else."""
    for node_type, kind in _STATEMENT_TYPES:
        if isinstance(stmt, node_type):
            return kind
    return None


__all__ = ["TableKind", "StatementKind", "statement_kind"]
