"""Tests for template context builders."""

from __future__ import annotations

import pytest

from sql_redis.context import delete as dctx
from sql_redis.context import insert as ictx
from sql_redis.context import select as sctx
from sql_redis.context import update as uctx


class TestSelectContexts:
    def test_key_only(self, parse):
        assert sctx.build_key_context(parse("SELECT * FROM users WHERE key = 'u'")) == {"key": "u"}
        assert sctx.build_key_context(parse("SELECT * FROM users")) is None

    def test_hash_fields(self, parse):
        stmt = parse("SELECT name, email FROM u__hash WHERE key = 'k'")
        assert sctx.build_hash_hmget_context(stmt) == {
            "key": "k",
            "fields": "name email",
            "fields_array": "'name', 'email'",
        }
        assert sctx.build_hash_get_context(stmt) is None
        assert sctx.build_hash_get_context(parse("SELECT name FROM u__hash WHERE key = 'k'")) == {
            "key": "k",
            "field": "name",
        }

    def test_aliased_fields_build_nothing(self, parse):
        stmt = parse("SELECT name, email AS e FROM u__hash WHERE key = 'k'")
        assert sctx.build_hash_hmget_context(stmt) is None
        assert sctx.build_hash_get_context(parse("SELECT name AS n FROM u__hash WHERE key = 'k'")) is None

    def test_list_full_range(self, parse):
        stmt = parse("SELECT * FROM q__list WHERE key = 'q'")
        assert sctx.build_list_getall_context(stmt) == {"key": "q", "start": "0", "stop": "-1"}

    @pytest.mark.parametrize("limit,stop", [("10", "9"), ("1", "0"), ("0", "-1")])
    def test_list_range_stop(self, parse, limit, stop):
        stmt = parse(f"SELECT * FROM q__list WHERE key = 'q' LIMIT {limit}")
        assert sctx.build_list_get_range_context(stmt)["stop"] == stop

    def test_list_index_and_set_member(self, parse):
        stmt = parse("SELECT * FROM q__list WHERE key = 'q' AND index = 4")
        assert sctx.build_list_get_index_context(stmt) == {"key": "q", "index": "4"}
        stmt = parse("SELECT * FROM s__set WHERE key = 's' AND member = 'm'")
        assert sctx.build_set_ismember_context(stmt) == {"key": "s", "member": "m"}

    def test_zset_ranges(self, parse):
        full = parse("SELECT * FROM z__zset WHERE key = 'z'")
        assert sctx.build_zset_getall_context(full) == {"key": "z", "min": "-inf", "max": "+inf"}
        ranged = parse("SELECT * FROM z__zset WHERE key = 'z' AND score > 1000")
        assert sctx.build_zset_score_range_context(ranged) == {
            "key": "z",
            "min": "(1000",
            "max": "+inf",
        }
        assert sctx.build_zset_score_range_context(full) is None


class TestInsertContexts:
    def test_string_set_any_column_order(self, parse):
        stmt = parse("INSERT INTO users (value, key) VALUES ('v', 'k')")
        assert ictx.build_string_set_context(stmt) == {"key": "k", "value": "v"}

    def test_hash_field_values_in_column_order(self, parse):
        stmt = parse("INSERT INTO u__hash (key, name, email) VALUES ('u1', 'John', 'j@x.com')")
        assert ictx.build_hash_set_context(stmt) == {
            "key": "u1",
            "field_values": "name John email j@x.com",
        }

    def test_hash_requires_a_field(self, parse):
        assert ictx.build_hash_set_context(parse("INSERT INTO u__hash (key) VALUES ('u1')")) is None

    def test_set_members_share_first_key(self, parse):
        stmt = parse("INSERT INTO s__set (key, member) VALUES ('s', 'a'), ('s', 'b'), ('t', 'c')")
        assert ictx.build_set_add_context(stmt) == {"key": "s", "members": "a b"}

    def test_zset_first_row(self, parse):
        stmt = parse("INSERT INTO z__zset (key, member, score) VALUES ('z', 'p', 100)")
        assert ictx.build_zset_add_context(stmt) == {"key": "z", "member": "p", "score": "100"}

    def test_non_literal_value(self, parse):
        stmt = parse("INSERT INTO users (key, value) VALUES ('k', NOW())")
        assert ictx.build_string_set_context(stmt) is None


class TestUpdateContexts:
    def test_hash_set_clause_order(self, parse):
        stmt = parse("UPDATE u__hash SET email = 'e', name = 'n' WHERE key = 'k'")
        assert uctx.build_hash_update_context(stmt) == {"key": "k", "field_values": "email e name n"}

    def test_list_and_zset(self, parse):
        stmt = parse("UPDATE q__list SET value = 'x' WHERE key = 'q' AND index = 2")
        assert uctx.build_list_update_context(stmt) == {"key": "q", "index": "2", "value": "x"}
        stmt = parse("UPDATE z__zset SET score = 5 WHERE key = 'z' AND member = 'p'")
        assert uctx.build_zset_update_context(stmt) == {"key": "z", "member": "p", "score": "5"}

    def test_missing_value(self, parse):
        stmt = parse("UPDATE users SET name = 'n' WHERE key = 'k'")
        assert uctx.build_string_update_context(stmt) is None


class TestDeleteContexts:
    def test_key(self, parse):
        assert dctx.build_delete_context(parse("DELETE FROM users WHERE key = 'k'")) == {"key": "k"}

    def test_element_columns_are_case_insensitive(self, parse):
        stmt = parse("DELETE FROM s__set WHERE KEY = 's' AND Member = 'm'")
        assert dctx.build_member_delete_context(stmt) == {"key": "s", "member": "m"}

    def test_missing_element(self, parse):
        stmt = parse("DELETE FROM u__hash WHERE key = 'k'")
        assert dctx.build_hash_delete_field_context(stmt) is None
        assert dctx.build_list_delete_value_context(stmt) is None
