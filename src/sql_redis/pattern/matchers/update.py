"""UPDATE shape predicates."""

from __future__ import annotations

from sqlglot import exp

from sql_redis.config import INDEX_COLUMN, MEMBER_COLUMN, SCORE_COLUMN, VALUE_COLUMN
from sql_redis.core.enums import TableKind
from sql_redis.pattern.matchers.common import field_equals, key_equals, kind_check, where_matches
from sql_redis.statements import update as upd


def has_assignment(stmt: exp.Expression, column: str) -> bool:
    return upd.get_assignment(stmt, column) is not None


has_key_equals = where_matches(upd.get_where, key_equals)


def has_field_equals(stmt: exp.Expression, field_name: str) -> bool:
    return where_matches(upd.get_where, field_equals(field_name))(stmt)


is_string_table = kind_check(upd.get_table_name, TableKind.STRING)
is_hash_table = kind_check(upd.get_table_name, TableKind.HASH)
is_list_table = kind_check(upd.get_table_name, TableKind.LIST)
is_set_table = kind_check(upd.get_table_name, TableKind.SET)
is_zset_table = kind_check(upd.get_table_name, TableKind.ZSET)


def is_string_update(stmt: exp.Expression) -> bool:
    """UPDATE <table> SET value = <v> WHERE key = <k>"""
    return is_string_table(stmt) and has_key_equals(stmt) and has_assignment(stmt, VALUE_COLUMN)


def is_hash_update(stmt: exp.Expression) -> bool:
    """UPDATE <table>__hash SET <f> = <v>[, ...] WHERE key = <k>"""
    return is_hash_table(stmt) and has_key_equals(stmt) and len(upd.get_assignments(stmt)) > 0


def is_list_update(stmt: exp.Expression) -> bool:
    """UPDATE <table>__list SET value = <v> WHERE key = <k> AND index = <n>"""
    return (
        is_list_table(stmt)
        and has_key_equals(stmt)
        and has_field_equals(stmt, INDEX_COLUMN)
        and has_assignment(stmt, VALUE_COLUMN)
    )


def is_zset_update(stmt: exp.Expression) -> bool:
    """UPDATE <table>__zset SET score = <n> WHERE key = <k> AND member = <m>"""
    return (
        is_zset_table(stmt)
        and has_key_equals(stmt)
        and has_field_equals(stmt, MEMBER_COLUMN)
        and has_assignment(stmt, SCORE_COLUMN)
    )
