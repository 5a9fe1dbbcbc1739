"""Info records produced by the direct extractors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class StringGetInfo:
    key: str


@dataclass(frozen=True)
class HashGetAllInfo:
    key: str


@dataclass(frozen=True)
class HashGetInfo:
    key: str
    field: str


@dataclass(frozen=True)
class HashMultiGetInfo:
    key: str
    fields: List[str]


@dataclass(frozen=True)
class ListGetAllInfo:
    key: str


@dataclass(frozen=True)
class ListIndexInfo:
    key: str
    index: str


@dataclass(frozen=True)
class ListGetRangeInfo:
    key: str
    limit: int


@dataclass(frozen=True)
class SetGetAllInfo:
    key: str


@dataclass(frozen=True)
class SetMemberInfo:
    key: str
    member: str


@dataclass(frozen=True)
class ZSetGetAllInfo:
    key: str


@dataclass(frozen=True)
class ZSetScoreRangeInfo:
    key: str
    min: str
    max: str


@dataclass(frozen=True)
class ZSetGetReversedInfo:
    key: str


@dataclass(frozen=True)
class InsertCommandInfo:
    """A single-row INSERT.

    Attributes:
        table: Target table name.
        key: Value of the ``key`` column.
        fields: Remaining ``(column, value)`` pairs in column order.
    """

    table: str
    key: str
    fields: List[Tuple[str, str]] = field(default_factory=list)

    def get(self, column: str) -> Optional[str]:
        """Value of a column (case-insensitive), or None."""
        for name, value in self.fields:
            if name.lower() == column.lower():
                return value
        return None


@dataclass(frozen=True)
class DeleteCommandInfo:
    table: str
    key: str
    member: Optional[str] = None
    index: Optional[str] = None
