"""DELETE shape predicates."""

from __future__ import annotations

from sqlglot import exp

from sql_redis.config import FIELD_COLUMN, MEMBER_COLUMN, VALUE_COLUMN
from sql_redis.core.enums import TableKind
from sql_redis.pattern.matchers.common import field_equals, key_equals, kind_check, where_matches
from sql_redis.statements import delete as dele


has_key_equals = where_matches(dele.get_where, key_equals)


def has_field_equals(stmt: exp.Expression, field_name: str) -> bool:
    return where_matches(dele.get_where, field_equals(field_name))(stmt)


is_string_table = kind_check(dele.get_table_name, TableKind.STRING)
is_hash_table = kind_check(dele.get_table_name, TableKind.HASH)
is_list_table = kind_check(dele.get_table_name, TableKind.LIST)
is_set_table = kind_check(dele.get_table_name, TableKind.SET)
is_zset_table = kind_check(dele.get_table_name, TableKind.ZSET)


def is_string_delete(stmt: exp.Expression) -> bool:
    """DELETE FROM <table> WHERE key = <k>"""
    return is_string_table(stmt) and has_key_equals(stmt)


def is_hash_delete(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__hash WHERE key = <k>"""
    return is_hash_table(stmt) and has_key_equals(stmt) and not has_field_equals(stmt, FIELD_COLUMN)


def is_hash_delete_field(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__hash WHERE key = <k> AND field = <f>"""
    return is_hash_table(stmt) and has_key_equals(stmt) and has_field_equals(stmt, FIELD_COLUMN)


def is_list_delete(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__list WHERE key = <k>"""
    return is_list_table(stmt) and has_key_equals(stmt) and not has_field_equals(stmt, VALUE_COLUMN)


def is_list_delete_value(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__list WHERE key = <k> AND value = <v>"""
    return is_list_table(stmt) and has_key_equals(stmt) and has_field_equals(stmt, VALUE_COLUMN)


def is_set_delete(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__set WHERE key = <k>"""
    return is_set_table(stmt) and has_key_equals(stmt) and not has_field_equals(stmt, MEMBER_COLUMN)


def is_set_delete_member(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__set WHERE key = <k> AND member = <m>"""
    return is_set_table(stmt) and has_key_equals(stmt) and has_field_equals(stmt, MEMBER_COLUMN)


def is_zset_delete(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__zset WHERE key = <k>"""
    return is_zset_table(stmt) and has_key_equals(stmt) and not has_field_equals(stmt, MEMBER_COLUMN)


def is_zset_delete_member(stmt: exp.Expression) -> bool:
    """DELETE FROM <table>__zset WHERE key = <k> AND member = <m>"""
    return is_zset_table(stmt) and has_key_equals(stmt) and has_field_equals(stmt, MEMBER_COLUMN)
