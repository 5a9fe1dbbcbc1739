"""SELECT shape predicates.

Shapes of the same data type are kept disjoint: the general "get all" shapes
require the absence of the conditions that select a more specific shape
(``index``/LIMIT for lists, ``member`` for sets, a score range or
``ORDER BY score DESC`` for sorted sets).
"""

from __future__ import annotations

from sqlglot import exp

from sql_redis.config import INDEX_COLUMN, MEMBER_COLUMN, VALUE_COLUMN
from sql_redis.core.enums import TableKind
from sql_redis.pattern.matchers.common import (
    field_equals,
    key_equals,
    kind_check,
    score_range,
    where_matches,
)
from sql_redis.statements import select as sel

# --------------------------------
# Projection shape
# --------------------------------


def is_select(stmt: exp.Expression) -> bool:
    return sel.get_select(stmt) is not None


def is_wildcard_select(stmt: exp.Expression) -> bool:
    projection = sel.get_projection(stmt)
    return len(projection) == 1 and sel.is_wildcard(projection[0])


def is_single_field_select(stmt: exp.Expression) -> bool:
    """Exactly one projection, a bare column without an alias."""
    projection = sel.get_projection(stmt)
    return len(projection) == 1 and sel.get_field_name(projection[0]) is not None


def is_multi_field_select(stmt: exp.Expression) -> bool:
    """More than one projection, every item a bare column; any alias or expression fails it."""
    projection = sel.get_projection(stmt)
    return len(projection) > 1 and all(sel.get_field_name(item) is not None for item in projection)


def is_value_select(stmt: exp.Expression) -> bool:
    projection = sel.get_projection(stmt)
    if len(projection) != 1:
        return False
    name = sel.get_field_name(projection[0])
    return name is not None and name.lower() == VALUE_COLUMN


# --------------------------------
# Table kind
# --------------------------------

is_string_table = kind_check(sel.get_table_name, TableKind.STRING)
is_hash_table = kind_check(sel.get_table_name, TableKind.HASH)
is_list_table = kind_check(sel.get_table_name, TableKind.LIST)
is_set_table = kind_check(sel.get_table_name, TableKind.SET)
is_zset_table = kind_check(sel.get_table_name, TableKind.ZSET)


# --------------------------------
# WHERE / ORDER BY / LIMIT
# --------------------------------

has_key_equals = where_matches(sel.get_where, key_equals)
has_score_range = where_matches(sel.get_where, score_range)


def has_field_equals(stmt: exp.Expression, field_name: str) -> bool:
    return where_matches(sel.get_where, field_equals(field_name))(stmt)


def has_order_by_score_desc(stmt: exp.Expression) -> bool:
    return sel.is_order_by_score_desc(stmt)


def has_limit(stmt: exp.Expression) -> bool:
    return sel.has_limit_clause(stmt)


# --------------------------------
# Shapes
# --------------------------------


def is_string_get(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table> WHERE key = <value>"""
    return is_wildcard_select(stmt) and is_string_table(stmt) and has_key_equals(stmt)


def is_string_get_value(stmt: exp.Expression) -> bool:
    """SELECT value FROM <table> WHERE key = <value>"""
    return is_value_select(stmt) and is_string_table(stmt) and has_key_equals(stmt)


def is_hash_getall(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__hash WHERE key = <value>"""
    return is_wildcard_select(stmt) and is_hash_table(stmt) and has_key_equals(stmt)


def is_hash_get(stmt: exp.Expression) -> bool:
    """SELECT <field> FROM <table>__hash WHERE key = <value>"""
    return is_single_field_select(stmt) and is_hash_table(stmt) and has_key_equals(stmt)


def is_hash_hmget(stmt: exp.Expression) -> bool:
    """SELECT <field1>, <field2>... FROM <table>__hash WHERE key = <value>"""
    return is_multi_field_select(stmt) and is_hash_table(stmt) and has_key_equals(stmt)


def _list_base(stmt: exp.Expression) -> bool:
    return is_wildcard_select(stmt) and is_list_table(stmt) and has_key_equals(stmt)


def is_list_getall(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__list WHERE key = <value>"""
    return _list_base(stmt) and not has_field_equals(stmt, INDEX_COLUMN) and not has_limit(stmt)


def is_list_get_index(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__list WHERE key = <value> AND index = <n>"""
    return _list_base(stmt) and has_field_equals(stmt, INDEX_COLUMN)


def is_list_get_range(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__list WHERE key = <value> LIMIT <n>"""
    return _list_base(stmt) and has_limit(stmt) and not has_field_equals(stmt, INDEX_COLUMN)


def _set_base(stmt: exp.Expression) -> bool:
    return is_wildcard_select(stmt) and is_set_table(stmt) and has_key_equals(stmt)


def is_set_getall(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__set WHERE key = <value>"""
    return _set_base(stmt) and not has_field_equals(stmt, MEMBER_COLUMN)


def is_set_ismember(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__set WHERE key = <value> AND member = <value>"""
    return _set_base(stmt) and has_field_equals(stmt, MEMBER_COLUMN)


def _zset_base(stmt: exp.Expression) -> bool:
    return is_wildcard_select(stmt) and is_zset_table(stmt) and has_key_equals(stmt)


def is_zset_getall(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__zset WHERE key = <value>"""
    return _zset_base(stmt) and not has_score_range(stmt) and not has_order_by_score_desc(stmt)


def is_zset_get_score_range(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__zset WHERE key = <value> AND score <op> <n>"""
    return _zset_base(stmt) and has_score_range(stmt)


def is_zset_get_reversed(stmt: exp.Expression) -> bool:
    """SELECT * FROM <table>__zset WHERE key = <value> ORDER BY score DESC"""
    return _zset_base(stmt) and has_order_by_score_desc(stmt) and not has_score_range(stmt)
