"""Tests for the info extractors used by the direct command generator."""

from __future__ import annotations

import pytest

from sql_redis.pattern.extractors import (
    DeleteCommandInfo,
    HashGetInfo,
    HashMultiGetInfo,
    InsertCommandInfo,
    ListGetRangeInfo,
    ListIndexInfo,
    SetMemberInfo,
    StringGetInfo,
    ZSetScoreRangeInfo,
    extract_delete_command,
    extract_hash_get,
    extract_hash_getall,
    extract_hash_multi_get,
    extract_insert_command,
    extract_list_get_range,
    extract_list_getall,
    extract_list_index,
    extract_set_getall,
    extract_set_member,
    extract_string_get,
    extract_zset_get_reversed,
    extract_zset_getall,
    extract_zset_score_range,
)


class TestSelectExtractors:
    def test_string_get(self, parse):
        assert extract_string_get(parse("SELECT * FROM users WHERE key = 'u1'")) == StringGetInfo("u1")
        assert extract_string_get(parse("SELECT value FROM users WHERE key = 'u1'")) == StringGetInfo("u1")
        assert extract_string_get(parse("SELECT name FROM users WHERE key = 'u1'")) is None
        assert extract_string_get(parse("SELECT * FROM users__hash WHERE key = 'u1'")) is None

    def test_hash(self, parse):
        assert extract_hash_getall(parse("SELECT * FROM u__hash WHERE key = 'k'")).key == "k"
        assert extract_hash_get(parse("SELECT email FROM u__hash WHERE key = 'k'")) == HashGetInfo(
            "k", "email"
        )
        assert extract_hash_multi_get(
            parse("SELECT name, email FROM u__hash WHERE key = 'k'")
        ) == HashMultiGetInfo("k", ["name", "email"])
        assert extract_hash_get(parse("SELECT * FROM u__hash WHERE key = 'k'")) is None

    def test_list(self, parse):
        assert extract_list_getall(parse("SELECT * FROM q__list WHERE key = 'q'")).key == "q"
        assert extract_list_getall(parse("SELECT * FROM q__list WHERE key = 'q' AND index = 1")) is None
        assert extract_list_index(
            parse("SELECT * FROM q__list WHERE key = 'q' AND index = -1")
        ) == ListIndexInfo("q", "-1")
        assert extract_list_index(parse("SELECT * FROM q__list WHERE key = 'q' AND index = 'a'")) is None
        assert extract_list_get_range(
            parse("SELECT * FROM q__list WHERE key = 'q' LIMIT 5")
        ) == ListGetRangeInfo("q", 5)

    def test_set(self, parse):
        assert extract_set_getall(parse("SELECT * FROM s__set WHERE key = 's'")).key == "s"
        assert extract_set_getall(parse("SELECT * FROM s__set WHERE key = 's' AND member = 'm'")) is None
        assert extract_set_member(
            parse("SELECT * FROM s__set WHERE key = 's' AND member = 'm'")
        ) == SetMemberInfo("s", "m")
        assert extract_set_member(parse("SELECT * FROM s__set WHERE key = 's' AND member = 5")) is None

    def test_zset(self, parse):
        assert extract_zset_getall(parse("SELECT * FROM z__zset WHERE key = 'z'")).key == "z"
        assert extract_zset_getall(parse("SELECT * FROM z__zset WHERE key = 'z' AND score > 1")) is None
        assert extract_zset_score_range(
            parse("SELECT * FROM z__zset WHERE key = 'z' AND score >= 1 AND score < 5")
        ) == ZSetScoreRangeInfo("z", "1", "(5")
        assert extract_zset_get_reversed(
            parse("SELECT * FROM z__zset WHERE key = 'z' ORDER BY score DESC")
        ).key == "z"
        assert extract_zset_get_reversed(parse("SELECT * FROM z__zset WHERE key = 'z'")) is None

    def test_missing_key(self, parse):
        assert extract_hash_getall(parse("SELECT * FROM u__hash WHERE name = 'x'")) is None
        assert extract_list_getall(parse("SELECT * FROM q__list")) is None


class TestInsertExtractor:
    def test_fields_keep_column_order(self, parse):
        info = extract_insert_command(
            parse("INSERT INTO u__hash (name, key, email) VALUES ('J', 'u1', 'j@x')")
        )
        assert info == InsertCommandInfo("u__hash", "u1", [("name", "J"), ("email", "j@x")])
        assert info.get("EMAIL") == "j@x"
        assert info.get("missing") is None

    def test_numeric_values_keep_raw_text(self, parse):
        info = extract_insert_command(parse("INSERT INTO z__zset (key, member, score) VALUES ('z', 'p', 1.50)"))
        assert info.get("score") == "1.50"

    @pytest.mark.parametrize(
        "sql",
        [
            "INSERT INTO users (name) VALUES ('x')",
            "INSERT INTO users (key, value) VALUES ('a', 'b'), ('c', 'd')",
            "INSERT INTO users (key, value) VALUES ('a')",
            "INSERT INTO users (key, value) VALUES ('a', NULL)",
            "INSERT INTO users VALUES ('a', 'b')",
        ],
    )
    def test_rejected(self, parse, sql):
        assert extract_insert_command(parse(sql)) is None


class TestDeleteExtractor:
    def test_key_only(self, parse):
        assert extract_delete_command(parse("DELETE FROM users WHERE key = 'k'")) == DeleteCommandInfo(
            "users", "k"
        )

    @pytest.mark.parametrize("column", ["member", "field", "value"])
    def test_member_sources(self, parse, column):
        info = extract_delete_command(parse(f"DELETE FROM t__set WHERE key = 'k' AND {column} = 'x'"))
        assert info.member == "x"

    def test_member_preferred_over_field(self, parse):
        info = extract_delete_command(
            parse("DELETE FROM t__set WHERE key = 'k' AND field = 'f' AND member = 'm'")
        )
        assert info.member == "m"

    def test_index(self, parse):
        assert extract_delete_command(parse("DELETE FROM q__list WHERE key = 'q' AND index = -2")).index == "-2"
        assert extract_delete_command(parse("DELETE FROM q__list WHERE key = 'q' AND index = 'x'")).index is None

    def test_without_key(self, parse):
        assert extract_delete_command(parse("DELETE FROM users")) is None
