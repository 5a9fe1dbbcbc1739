"""Tests for table-kind classification and statement kinds."""

from __future__ import annotations

import pytest

from sql_redis.core.enums import StatementKind, TableKind, statement_kind


@pytest.mark.parametrize(
    "name,expected",
    [
        ("users", TableKind.STRING),
        ("users__hash", TableKind.HASH),
        ("messages__list", TableKind.LIST),
        ("followers__set", TableKind.SET),
        ("leaderboard__zset", TableKind.ZSET),
        ("", TableKind.STRING),
        ("hash", TableKind.STRING),
        ("users_hash", TableKind.STRING),
        ("users__HASH", TableKind.STRING),
        ("__zset", TableKind.ZSET),
        ("a__hash__list", TableKind.LIST),
        ("a__list__hash", TableKind.HASH),
    ],
)
def test_from_table_name(name, expected):
    assert TableKind.from_table_name(name) is expected


@pytest.mark.parametrize("base", ["users", "x", "users__hash", "strange name", "k:1:2"])
@pytest.mark.parametrize(
    "suffix,expected",
    [
        ("__hash", TableKind.HASH),
        ("__list", TableKind.LIST),
        ("__set", TableKind.SET),
        ("__zset", TableKind.ZSET),
    ],
)
def test_suffix_always_outranks_default(base, suffix, expected):
    """Appending a recognised suffix always decides the kind."""
    assert TableKind.from_table_name(base + suffix) is expected


def test_classification_is_total():
    """Every name maps to exactly one of the five kinds."""
    names = ["", "a", "__", "___set", "set", "zset__", "t__zse", "ü__set", "a b__list"]
    for name in names:
        assert TableKind.from_table_name(name) in set(TableKind)


def test_enum_values_are_strings():
    assert TableKind.ZSET.value == "zset"
    assert StatementKind.SELECT.value == "SELECT"


def test_statement_kind(parse):
    assert statement_kind(parse("SELECT * FROM t WHERE key = 'a'")) is StatementKind.SELECT
    assert statement_kind(parse("INSERT INTO t (key, value) VALUES ('a', 'b')")) is StatementKind.INSERT
    assert statement_kind(parse("UPDATE t SET value = 'b' WHERE key = 'a'")) is StatementKind.UPDATE
    assert statement_kind(parse("DELETE FROM t WHERE key = 'a'")) is StatementKind.DELETE
    assert statement_kind(parse("CREATE TABLE t (a INT)")) is None
