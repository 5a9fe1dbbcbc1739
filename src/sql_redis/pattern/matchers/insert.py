"""INSERT shape predicates."""

from __future__ import annotations

from typing import Iterable

from sqlglot import exp

from sql_redis.config import KEY_COLUMN, MEMBER_COLUMN, SCORE_COLUMN, VALUE_COLUMN
from sql_redis.core.enums import TableKind
from sql_redis.pattern.matchers.common import columns_exactly, columns_include, kind_check
from sql_redis.statements import insert as ins


def has_columns(stmt: exp.Expression, required: Iterable[str]) -> bool:
    """Column list contains every required column (case-insensitive)."""
    return columns_include(ins.get_columns(stmt), required)


def has_exact_columns(stmt: exp.Expression, expected: Iterable[str]) -> bool:
    return columns_exactly(ins.get_columns(stmt), expected)


def has_values(stmt: exp.Expression) -> bool:
    return len(ins.get_value_rows(stmt)) > 0


is_string_table = kind_check(ins.get_table_name, TableKind.STRING)
is_hash_table = kind_check(ins.get_table_name, TableKind.HASH)
is_list_table = kind_check(ins.get_table_name, TableKind.LIST)
is_set_table = kind_check(ins.get_table_name, TableKind.SET)
is_zset_table = kind_check(ins.get_table_name, TableKind.ZSET)


def is_string_set(stmt: exp.Expression) -> bool:
    """INSERT INTO <table> (key, value) VALUES (...)"""
    return (
        is_string_table(stmt)
        and has_exact_columns(stmt, [KEY_COLUMN, VALUE_COLUMN])
        and has_values(stmt)
    )


def is_hash_set(stmt: exp.Expression) -> bool:
    """INSERT INTO <table>__hash (key, <field>...) VALUES (...)"""
    return is_hash_table(stmt) and has_columns(stmt, [KEY_COLUMN]) and has_values(stmt)


def is_list_push(stmt: exp.Expression) -> bool:
    """INSERT INTO <table>__list (key, value) VALUES (...)"""
    return (
        is_list_table(stmt)
        and has_exact_columns(stmt, [KEY_COLUMN, VALUE_COLUMN])
        and has_values(stmt)
    )


def is_set_add(stmt: exp.Expression) -> bool:
    """INSERT INTO <table>__set (key, member) VALUES (...)[, (...)]"""
    return (
        is_set_table(stmt)
        and has_exact_columns(stmt, [KEY_COLUMN, MEMBER_COLUMN])
        and has_values(stmt)
    )


def is_zset_add(stmt: exp.Expression) -> bool:
    """INSERT INTO <table>__zset (key, member, score) VALUES (...)"""
    return (
        is_zset_table(stmt)
        and has_exact_columns(stmt, [KEY_COLUMN, MEMBER_COLUMN, SCORE_COLUMN])
        and has_values(stmt)
    )
