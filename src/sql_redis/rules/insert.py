"""INSERT rules."""

from __future__ import annotations

from sql_redis.context import insert as ctx
from sql_redis.core.enums import StatementKind
from sql_redis.pattern.matchers import insert as m
from sql_redis.rules.base import rule

I = StatementKind.INSERT

INSERT_RULES = [
    rule(
        "string_set",
        I,
        m.is_string_set,
        ctx.build_string_set_context,
        sql="INSERT INTO table (key, value) VALUES ('key1', 'value1')",
        redis="SET key1 value1",
    ),
    rule(
        "hash_set",
        I,
        m.is_hash_set,
        ctx.build_hash_set_context,
        sql="INSERT INTO table__hash (key, field1, field2) VALUES ('key1', 'value1', 'value2')",
        redis="HSET key1 field1 value1 field2 value2",
    ),
    rule(
        "list_push",
        I,
        m.is_list_push,
        ctx.build_list_push_context,
        sql="INSERT INTO table__list (key, value) VALUES ('key1', 'value1')",
        redis="RPUSH key1 value1",
    ),
    rule(
        "set_add",
        I,
        m.is_set_add,
        ctx.build_set_add_context,
        sql="INSERT INTO table__set (key, member) VALUES ('key1', 'member1')",
        redis="SADD key1 member1",
    ),
    rule(
        "zset_add",
        I,
        m.is_zset_add,
        ctx.build_zset_add_context,
        sql="INSERT INTO table__zset (key, member, score) VALUES ('key1', 'member1', 100)",
        redis="ZADD key1 100 member1",
    ),
]
