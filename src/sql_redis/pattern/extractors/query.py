"""Info extractors for SELECT statements."""

from __future__ import annotations

from typing import Optional

from sqlglot import exp

from sql_redis.config import INDEX_COLUMN, MAX_CONDITION_DEPTH, MEMBER_COLUMN
from sql_redis.core.enums import TableKind
from sql_redis.pattern.combinators import and_then, extract, run
from sql_redis.pattern.conditions import (
    extract_field_condition,
    extract_score_range,
    numeric_value,
    string_value,
    unwrap,
)
from sql_redis.pattern.extractors.info import (
    HashGetAllInfo,
    HashGetInfo,
    HashMultiGetInfo,
    ListGetAllInfo,
    ListGetRangeInfo,
    ListIndexInfo,
    SetGetAllInfo,
    SetMemberInfo,
    StringGetInfo,
    ZSetGetAllInfo,
    ZSetGetReversedInfo,
    ZSetScoreRangeInfo,
)
from sql_redis.pattern.matchers import select as sm
from sql_redis.pattern.matchers.common import key_equals
from sql_redis.statements import select as sel

_where_key = and_then(extract(sel.get_where), key_equals)


def _key_for(stmt: exp.Expression, kind: TableKind, *, wildcard: bool = True) -> Optional[str]:
    """Key of a SELECT on a table of ``kind``; optionally requires ``SELECT *``."""
    name = sel.get_table_name(stmt)
    if name is None or TableKind.from_table_name(name) is not kind:
        return None
    if wildcard and not sm.is_wildcard_select(stmt):
        return None
    return run(_where_key, stmt)


def _where_field(stmt: exp.Expression, field_name: str) -> Optional[exp.Expression]:
    """Raw right-hand node of ``<field_name> = ...`` in the WHERE clause."""
    return _find_eq(sel.get_where(stmt), field_name)


def _find_eq(
    node: Optional[exp.Expression], field_name: str, _depth: int = 0
) -> Optional[exp.Expression]:
    if _depth > MAX_CONDITION_DEPTH:
        return None
    node = unwrap(node)
    if isinstance(node, exp.EQ):
        left = unwrap(node.this)
        if isinstance(left, exp.Column) and left.name.lower() == field_name.lower():
            return node.expression
        return None
    if isinstance(node, exp.And):
        found = _find_eq(node.this, field_name, _depth + 1)
        if found is not None:
            return found
        return _find_eq(node.expression, field_name, _depth + 1)
    return None


def extract_string_get(stmt: exp.Expression) -> Optional[StringGetInfo]:
    if not (sm.is_wildcard_select(stmt) or sm.is_value_select(stmt)):
        return None
    key = _key_for(stmt, TableKind.STRING, wildcard=False)
    return StringGetInfo(key) if key is not None else None


def extract_hash_getall(stmt: exp.Expression) -> Optional[HashGetAllInfo]:
    key = _key_for(stmt, TableKind.HASH)
    return HashGetAllInfo(key) if key is not None else None


def extract_hash_get(stmt: exp.Expression) -> Optional[HashGetInfo]:
    if not sm.is_single_field_select(stmt):
        return None
    key = _key_for(stmt, TableKind.HASH, wildcard=False)
    if key is None:
        return None
    return HashGetInfo(key, sel.get_selected_fields(stmt)[0])


def extract_hash_multi_get(stmt: exp.Expression) -> Optional[HashMultiGetInfo]:
    if not sm.is_multi_field_select(stmt):
        return None
    key = _key_for(stmt, TableKind.HASH, wildcard=False)
    if key is None:
        return None
    return HashMultiGetInfo(key, sel.get_selected_fields(stmt))


def extract_list_getall(stmt: exp.Expression) -> Optional[ListGetAllInfo]:
    key = _key_for(stmt, TableKind.LIST)
    if key is None or _where_field(stmt, INDEX_COLUMN) is not None:
        return None
    return ListGetAllInfo(key)


def extract_list_index(stmt: exp.Expression) -> Optional[ListIndexInfo]:
    """Requires a numeric ``index`` condition."""
    key = _key_for(stmt, TableKind.LIST)
    if key is None:
        return None
    index = numeric_value(_where_field(stmt, INDEX_COLUMN))
    return ListIndexInfo(key, index) if index is not None else None


def extract_list_get_range(stmt: exp.Expression) -> Optional[ListGetRangeInfo]:
    key = _key_for(stmt, TableKind.LIST)
    limit = sel.get_limit(stmt)
    if key is None or limit is None or not limit.isdigit():
        return None
    return ListGetRangeInfo(key, int(limit))


def extract_set_getall(stmt: exp.Expression) -> Optional[SetGetAllInfo]:
    key = _key_for(stmt, TableKind.SET)
    if key is None or extract_field_condition(sel.get_where(stmt), MEMBER_COLUMN) is not None:
        return None
    return SetGetAllInfo(key)


def extract_set_member(stmt: exp.Expression) -> Optional[SetMemberInfo]:
    """Requires a quoted ``member`` condition."""
    key = _key_for(stmt, TableKind.SET)
    if key is None:
        return None
    member = string_value(_where_field(stmt, MEMBER_COLUMN))
    return SetMemberInfo(key, member) if member is not None else None


def extract_zset_getall(stmt: exp.Expression) -> Optional[ZSetGetAllInfo]:
    key = _key_for(stmt, TableKind.ZSET)
    if key is None or extract_score_range(sel.get_where(stmt)) is not None:
        return None
    return ZSetGetAllInfo(key)


def extract_zset_score_range(stmt: exp.Expression) -> Optional[ZSetScoreRangeInfo]:
    key = _key_for(stmt, TableKind.ZSET)
    if key is None:
        return None
    bounds = extract_score_range(sel.get_where(stmt))
    if bounds is None:
        return None
    return ZSetScoreRangeInfo(key, bounds[0], bounds[1])


def extract_zset_get_reversed(stmt: exp.Expression) -> Optional[ZSetGetReversedInfo]:
    key = _key_for(stmt, TableKind.ZSET)
    if key is None or not sel.is_order_by_score_desc(stmt):
        return None
    return ZSetGetReversedInfo(key)
