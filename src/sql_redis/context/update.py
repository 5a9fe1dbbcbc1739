"""Context builders for UPDATE shapes."""

from __future__ import annotations

from typing import Optional

from sqlglot import exp

from sql_redis.config import INDEX_COLUMN, MEMBER_COLUMN, SCORE_COLUMN, VALUE_COLUMN
from sql_redis.context import TemplateContext
from sql_redis.pattern.conditions import extract_field_condition, extract_key_from_condition
from sql_redis.statements import update as upd


def _key(stmt: exp.Expression) -> Optional[str]:
    return extract_key_from_condition(upd.get_where(stmt))


def build_string_update_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    value = upd.get_assignment(stmt, VALUE_COLUMN)
    if key is None or value is None:
        return None
    return {"key": key, "value": value}


def build_hash_update_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    """``field_values`` follows SET clause order."""
    key = _key(stmt)
    assignments = upd.get_assignments(stmt)
    if key is None or not assignments:
        return None
    parts = []
    for column, value in assignments:
        parts.extend([column, value])
    return {"key": key, "field_values": " ".join(parts)}


def build_list_update_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    index = extract_field_condition(upd.get_where(stmt), INDEX_COLUMN)
    value = upd.get_assignment(stmt, VALUE_COLUMN)
    if key is None or index is None or value is None:
        return None
    return {"key": key, "index": index, "value": value}


def build_zset_update_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    key = _key(stmt)
    member = extract_field_condition(upd.get_where(stmt), MEMBER_COLUMN)
    score = upd.get_assignment(stmt, SCORE_COLUMN)
    if key is None or member is None or score is None:
        return None
    return {"key": key, "member": member, "score": score}
