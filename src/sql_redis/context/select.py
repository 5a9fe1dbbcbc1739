"""Context builders for SELECT shapes."""

from __future__ import annotations

from typing import Optional

from sqlglot import exp

from sql_redis.config import INDEX_COLUMN, MEMBER_COLUMN, NEG_INF, POS_INF
from sql_redis.context import TemplateContext
from sql_redis.pattern.conditions import (
    extract_field_condition,
    extract_key_from_condition,
    extract_score_range,
)
from sql_redis.statements import select as sel


def _key(stmt: exp.Expression) -> Optional[str]:
    return extract_key_from_condition(sel.get_where(stmt))


def build_key_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    """``key`` only: string get, hash getall, set members."""
    key = _key(stmt)
    return {"key": key} if key is not None else None


build_string_get_context = build_key_context
build_string_get_value_context = build_key_context
build_hash_getall_context = build_key_context
build_set_getall_context = build_key_context


def build_hash_get_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    fields = sel.get_selected_fields(stmt)
    if key is None or len(fields) != 1 or fields[0] == "*":
        return None
    return {"key": key, "field": fields[0]}


def build_hash_hmget_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    fields = sel.get_selected_fields(stmt)
    if key is None or not fields or fields == ["*"]:
        return None
    return {
        "key": key,
        "fields": " ".join(fields),
        "fields_array": ", ".join(f"'{f}'" for f in fields),
    }


def build_list_getall_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    if key is None:
        return None
    return {"key": key, "start": "0", "stop": "-1"}


def build_list_get_index_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    index = extract_field_condition(sel.get_where(stmt), INDEX_COLUMN)
    if key is None or index is None:
        return None
    return {"key": key, "index": index}


def build_list_get_range_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    """LRANGE from 0 to ``limit - 1``; ``LIMIT 0`` gives stop ``-1``."""
    key = _key(stmt)
    limit = sel.get_limit(stmt)
    if key is None or limit is None or not limit.isdigit():
        return None
    return {"key": key, "start": "0", "stop": str(int(limit) - 1)}


def build_set_ismember_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    member = extract_field_condition(sel.get_where(stmt), MEMBER_COLUMN)
    if key is None or member is None:
        return None
    return {"key": key, "member": member}


def build_zset_getall_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    # Full range regardless of WHERE; the matcher already excluded score conditions.
    key = _key(stmt)
    if key is None:
        return None
    return {"key": key, "min": NEG_INF, "max": POS_INF}


def build_zset_score_range_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    bounds = extract_score_range(sel.get_where(stmt))
    if key is None or bounds is None:
        return None
    return {"key": key, "min": bounds[0], "max": bounds[1]}


def build_zset_reversed_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    if key is None:
        return None
    return {"key": key, "max": POS_INF, "min": NEG_INF}
