"""Tests for the statement shape predicates.

Each SQL sample lists the single shape it is expected to satisfy; every other
shape of the same statement kind must reject it.
"""

from __future__ import annotations

import pytest

from sql_redis.pattern.matchers import delete as dm
from sql_redis.pattern.matchers import insert as im
from sql_redis.pattern.matchers import select as sm
from sql_redis.pattern.matchers import update as um
from sql_redis.pattern.matchers.common import columns_exactly, columns_include

SELECT_SHAPES = {
    "string_get": sm.is_string_get,
    "string_get_value": sm.is_string_get_value,
    "hash_getall": sm.is_hash_getall,
    "hash_get": sm.is_hash_get,
    "hash_hmget": sm.is_hash_hmget,
    "list_getall": sm.is_list_getall,
    "list_get_index": sm.is_list_get_index,
    "list_get_range": sm.is_list_get_range,
    "set_getall": sm.is_set_getall,
    "set_ismember": sm.is_set_ismember,
    "zset_getall": sm.is_zset_getall,
    "zset_get_score_range": sm.is_zset_get_score_range,
    "zset_get_reversed": sm.is_zset_get_reversed,
}

INSERT_SHAPES = {
    "string_set": im.is_string_set,
    "hash_set": im.is_hash_set,
    "list_push": im.is_list_push,
    "set_add": im.is_set_add,
    "zset_add": im.is_zset_add,
}

UPDATE_SHAPES = {
    "string_update": um.is_string_update,
    "hash_update": um.is_hash_update,
    "list_update": um.is_list_update,
    "zset_update": um.is_zset_update,
}

DELETE_SHAPES = {
    "string_delete": dm.is_string_delete,
    "hash_delete": dm.is_hash_delete,
    "hash_delete_field": dm.is_hash_delete_field,
    "list_delete": dm.is_list_delete,
    "list_delete_value": dm.is_list_delete_value,
    "set_delete": dm.is_set_delete,
    "set_delete_member": dm.is_set_delete_member,
    "zset_delete": dm.is_zset_delete,
    "zset_delete_member": dm.is_zset_delete_member,
}


def _matching(shapes, stmt):
    return [name for name, check in shapes.items() if check(stmt)]


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("SELECT * FROM users WHERE key = 'user:1'", "string_get"),
        ("SELECT value FROM users WHERE key = 'user:1'", "string_get_value"),
        ("SELECT * FROM users__hash WHERE key = 'u'", "hash_getall"),
        ("SELECT name FROM users__hash WHERE key = 'u'", "hash_get"),
        ("SELECT name, email FROM users__hash WHERE key = 'u'", "hash_hmget"),
        ("SELECT * FROM q__list WHERE key = 'q'", "list_getall"),
        ("SELECT * FROM q__list WHERE key = 'q' AND index = 0", "list_get_index"),
        ("SELECT * FROM q__list WHERE key = 'q' LIMIT 10", "list_get_range"),
        ("SELECT * FROM s__set WHERE key = 's'", "set_getall"),
        ("SELECT * FROM s__set WHERE key = 's' AND member = 'm'", "set_ismember"),
        ("SELECT * FROM z__zset WHERE key = 'z'", "zset_getall"),
        ("SELECT * FROM z__zset WHERE key = 'z' AND score > 100", "zset_get_score_range"),
        ("SELECT * FROM z__zset WHERE key = 'z' ORDER BY score DESC", "zset_get_reversed"),
        ("SELECT * FROM z__zset WHERE key = 'z' ORDER BY score DESC LIMIT 10", "zset_get_reversed"),
        (
            "SELECT * FROM z__zset WHERE key = 'z' AND score > 1 ORDER BY score DESC",
            "zset_get_score_range",
        ),
    ],
)
def test_select_shapes_are_disjoint(parse, sql, expected):
    assert _matching(SELECT_SHAPES, parse(sql)) == [expected]


@pytest.mark.parametrize(
    "sql",
    [
        "SELECT * FROM users",
        "SELECT * FROM users WHERE name = 'x'",
        "SELECT * FROM users__hash WHERE key = 'a' OR key = 'b'",
        "SELECT COUNT(*) FROM users WHERE key = 'a'",
        "SELECT name, UPPER(email) FROM users__hash WHERE key = 'a'",
        "SELECT name AS n FROM users__hash WHERE key = 'a'",
        "SELECT name, email AS e FROM users__hash WHERE key = 'a'",
        "SELECT value AS v FROM users WHERE key = 'a'",
    ],
)
def test_select_without_shape(parse, sql):
    assert _matching(SELECT_SHAPES, parse(sql)) == []


@pytest.mark.parametrize("direction", ["", " ASC"])
def test_ascending_order_is_not_reversed(parse, direction):
    stmt = parse(f"SELECT * FROM z__zset WHERE key = 'z' ORDER BY score{direction}")
    assert _matching(SELECT_SHAPES, stmt) == ["zset_getall"]


def test_select_predicates_reject_other_statements(parse):
    stmt = parse("DELETE FROM users WHERE key = 'a'")
    assert not sm.is_select(stmt)
    assert _matching(SELECT_SHAPES, stmt) == []


def test_order_by_checks_first_term_only(parse):
    stmt = parse("SELECT * FROM z__zset WHERE key = 'z' ORDER BY member, score DESC")
    assert not sm.has_order_by_score_desc(stmt)


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("INSERT INTO users (key, value) VALUES ('k', 'v')", "string_set"),
        ("INSERT INTO users (value, key) VALUES ('v', 'k')", "string_set"),
        ("INSERT INTO u__hash (key, name, email) VALUES ('k', 'n', 'e')", "hash_set"),
        ("INSERT INTO q__list (key, value) VALUES ('q', 'job')", "list_push"),
        ("INSERT INTO s__set (key, member) VALUES ('s', 'a'), ('s', 'b')", "set_add"),
        ("INSERT INTO z__zset (key, member, score) VALUES ('z', 'p', 100)", "zset_add"),
    ],
)
def test_insert_shapes(parse, sql, expected):
    assert _matching(INSERT_SHAPES, parse(sql)) == [expected]


@pytest.mark.parametrize(
    "sql",
    [
        "INSERT INTO users (key, value, extra) VALUES ('k', 'v', 'x')",
        "INSERT INTO z__zset (key, member) VALUES ('z', 'p')",
        "INSERT INTO u__hash (name) VALUES ('n')",
        "INSERT INTO users SELECT * FROM other",
    ],
)
def test_insert_without_shape(parse, sql):
    assert _matching(INSERT_SHAPES, parse(sql)) == []


def test_insert_column_checks(parse):
    stmt = parse("INSERT INTO u__hash (KEY, Name) VALUES ('k', 'n')")
    assert im.has_columns(stmt, ["key", "name"])
    assert im.has_exact_columns(stmt, ["name", "key"])
    assert not im.has_exact_columns(stmt, ["key"])


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("UPDATE users SET value = 'v' WHERE key = 'k'", "string_update"),
        ("UPDATE u__hash SET name = 'n', age = 3 WHERE key = 'k'", "hash_update"),
        ("UPDATE q__list SET value = 'x' WHERE key = 'q' AND index = 2", "list_update"),
        ("UPDATE z__zset SET score = 9 WHERE key = 'z' AND member = 'p'", "zset_update"),
    ],
)
def test_update_shapes(parse, sql, expected):
    assert _matching(UPDATE_SHAPES, parse(sql)) == [expected]


@pytest.mark.parametrize(
    "sql",
    [
        "UPDATE users SET value = 'v'",
        "UPDATE users SET name = 'v' WHERE key = 'k'",
        "UPDATE q__list SET value = 'x' WHERE key = 'q'",
        "UPDATE z__zset SET score = 9 WHERE key = 'z'",
        "UPDATE s__set SET member = 'm' WHERE key = 's'",
    ],
)
def test_update_without_shape(parse, sql):
    assert _matching(UPDATE_SHAPES, parse(sql)) == []


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("DELETE FROM users WHERE key = 'k'", "string_delete"),
        ("DELETE FROM u__hash WHERE key = 'k'", "hash_delete"),
        ("DELETE FROM u__hash WHERE key = 'k' AND field = 'email'", "hash_delete_field"),
        ("DELETE FROM q__list WHERE key = 'q'", "list_delete"),
        ("DELETE FROM q__list WHERE key = 'q' AND value = 'job'", "list_delete_value"),
        ("DELETE FROM s__set WHERE key = 's'", "set_delete"),
        ("DELETE FROM s__set WHERE key = 's' AND member = 'm'", "set_delete_member"),
        ("DELETE FROM z__zset WHERE key = 'z'", "zset_delete"),
        ("DELETE FROM z__zset WHERE key = 'z' AND member = 'p'", "zset_delete_member"),
    ],
)
def test_delete_shapes(parse, sql, expected):
    assert _matching(DELETE_SHAPES, parse(sql)) == [expected]


def test_delete_requires_key(parse):
    assert _matching(DELETE_SHAPES, parse("DELETE FROM users")) == []
    assert _matching(DELETE_SHAPES, parse("DELETE FROM users WHERE name = 'x'")) == []


def test_column_helpers():
    assert columns_include(["Key", "NAME"], ["key"])
    assert not columns_include(["name"], ["key"])
    assert columns_exactly(["b", "A"], ["a", "B"])
    assert not columns_exactly(["a", "a"], ["a"])
