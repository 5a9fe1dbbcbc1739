"""Context builders for DELETE shapes."""

from __future__ import annotations

from typing import Optional

from sqlglot import exp

from sql_redis.config import FIELD_COLUMN, KEY_COLUMN, MEMBER_COLUMN, VALUE_COLUMN
from sql_redis.context import TemplateContext
from sql_redis.pattern.conditions import extract_conditions
from sql_redis.statements import delete as dele


def _conditions(stmt: exp.Expression, *required: str) -> Optional[TemplateContext]:
    """``key`` plus the required WHERE equalities, case-insensitively."""
    found = {name.lower(): value for name, value in extract_conditions(dele.get_where(stmt)).items()}
    context: TemplateContext = {}
    for name in (KEY_COLUMN,) + required:
        if name not in found:
            return None
        context[name] = found[name]
    return context


def build_delete_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    return _conditions(stmt)


def build_hash_delete_field_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    return _conditions(stmt, FIELD_COLUMN)


def build_list_delete_value_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    return _conditions(stmt, VALUE_COLUMN)


def build_member_delete_context(stmt: exp.Expression) -> Optional[TemplateContext]:
    return _conditions(stmt, MEMBER_COLUMN)
