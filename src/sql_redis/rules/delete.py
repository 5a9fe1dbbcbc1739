"""DELETE rules."""

from __future__ import annotations

from sql_redis.context import delete as ctx
from sql_redis.core.enums import StatementKind
from sql_redis.pattern.matchers import delete as m
from sql_redis.rules.base import rule

D = StatementKind.DELETE

DELETE_RULES = [
    rule(
        "string_delete",
        D,
        m.is_string_delete,
        ctx.build_delete_context,
        sql="DELETE FROM table WHERE key = 'key1'",
        redis="DEL key1",
    ),
    rule(
        "hash_delete",
        D,
        m.is_hash_delete,
        ctx.build_delete_context,
        sql="DELETE FROM table__hash WHERE key = 'key1'",
        redis="DEL key1",
    ),
    rule(
        "hash_delete_field",
        D,
        m.is_hash_delete_field,
        ctx.build_hash_delete_field_context,
        sql="DELETE FROM table__hash WHERE key = 'key1' AND field = 'field1'",
        redis="HDEL key1 field1",
    ),
    rule(
        "list_delete",
        D,
        m.is_list_delete,
        ctx.build_delete_context,
        sql="DELETE FROM table__list WHERE key = 'key1'",
        redis="DEL key1",
    ),
    rule(
        "list_delete_value",
        D,
        m.is_list_delete_value,
        ctx.build_list_delete_value_context,
        sql="DELETE FROM table__list WHERE key = 'key1' AND value = 'value1'",
        redis="LREM key1 0 value1",
    ),
    rule(
        "set_delete",
        D,
        m.is_set_delete,
        ctx.build_delete_context,
        sql="DELETE FROM table__set WHERE key = 'key1'",
        redis="DEL key1",
    ),
    rule(
        "set_delete_member",
        D,
        m.is_set_delete_member,
        ctx.build_member_delete_context,
        sql="DELETE FROM table__set WHERE key = 'key1' AND member = 'member1'",
        redis="SREM key1 member1",
    ),
    rule(
        "zset_delete",
        D,
        m.is_zset_delete,
        ctx.build_delete_context,
        sql="DELETE FROM table__zset WHERE key = 'key1'",
        redis="DEL key1",
    ),
    rule(
        "zset_delete_member",
        D,
        m.is_zset_delete_member,
        ctx.build_member_delete_context,
        sql="DELETE FROM table__zset WHERE key = 'key1' AND member = 'member1'",
        redis="ZREM key1 member1",
    ),
]
