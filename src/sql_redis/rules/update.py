"""UPDATE rules."""

from __future__ import annotations

from sql_redis.context import update as ctx
from sql_redis.core.enums import StatementKind
from sql_redis.pattern.matchers import update as m
from sql_redis.rules.base import rule

U = StatementKind.UPDATE

UPDATE_RULES = [
    rule(
        "string_update",
        U,
        m.is_string_update,
        ctx.build_string_update_context,
        sql="UPDATE table SET value = 'new' WHERE key = 'key1'",
        redis="SET key1 new",
    ),
    rule(
        "hash_update",
        U,
        m.is_hash_update,
        ctx.build_hash_update_context,
        sql="UPDATE table__hash SET field1 = 'value1' WHERE key = 'key1'",
        redis="HSET key1 field1 value1",
    ),
    rule(
        "list_update",
        U,
        m.is_list_update,
        ctx.build_list_update_context,
        sql="UPDATE table__list SET value = 'new' WHERE key = 'key1' AND index = 0",
        redis="LSET key1 0 new",
    ),
    rule(
        "zset_update",
        U,
        m.is_zset_update,
        ctx.build_zset_update_context,
        sql="UPDATE table__zset SET score = 200 WHERE key = 'key1' AND member = 'member1'",
        redis="ZADD key1 200 member1",
    ),
]
