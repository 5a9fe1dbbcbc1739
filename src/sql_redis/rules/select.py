"""SELECT rules.

Within a data type the general wildcard shape comes first; the more specific
shapes are disjoint from it by construction of their predicates.
"""

from __future__ import annotations

from sql_redis.context import select as ctx
from sql_redis.core.enums import StatementKind
from sql_redis.pattern.matchers import select as m
from sql_redis.rules.base import rule

S = StatementKind.SELECT

SELECT_RULES = [
    # String
    rule(
        "string_get",
        S,
        m.is_string_get,
        ctx.build_string_get_context,
        sql="SELECT * FROM table WHERE key = 'value'",
        redis="GET value",
    ),
    rule(
        "string_get_value",
        S,
        m.is_string_get_value,
        ctx.build_string_get_value_context,
        template="string_get",
        sql="SELECT value FROM table WHERE key = 'value'",
        redis="GET value",
    ),
    # Hash
    rule(
        "hash_getall",
        S,
        m.is_hash_getall,
        ctx.build_hash_getall_context,
        sql="SELECT * FROM table__hash WHERE key = 'value'",
        redis="HGETALL value",
    ),
    rule(
        "hash_get",
        S,
        m.is_hash_get,
        ctx.build_hash_get_context,
        sql="SELECT field FROM table__hash WHERE key = 'value'",
        redis="HGET value field",
    ),
    rule(
        "hash_hmget",
        S,
        m.is_hash_hmget,
        ctx.build_hash_hmget_context,
        sql="SELECT field1, field2 FROM table__hash WHERE key = 'value'",
        redis="HMGET value field1 field2",
    ),
    # List
    rule(
        "list_getall",
        S,
        m.is_list_getall,
        ctx.build_list_getall_context,
        sql="SELECT * FROM table__list WHERE key = 'value'",
        redis="LRANGE value 0 -1",
    ),
    rule(
        "list_get_index",
        S,
        m.is_list_get_index,
        ctx.build_list_get_index_context,
        sql="SELECT * FROM table__list WHERE key = 'value' AND index = 0",
        redis="LINDEX value 0",
    ),
    rule(
        "list_get_range",
        S,
        m.is_list_get_range,
        ctx.build_list_get_range_context,
        sql="SELECT * FROM table__list WHERE key = 'value' LIMIT 10",
        redis="LRANGE value 0 9",
    ),
    # Set
    rule(
        "set_getall",
        S,
        m.is_set_getall,
        ctx.build_set_getall_context,
        sql="SELECT * FROM table__set WHERE key = 'value'",
        redis="SMEMBERS value",
    ),
    rule(
        "set_ismember",
        S,
        m.is_set_ismember,
        ctx.build_set_ismember_context,
        sql="SELECT * FROM table__set WHERE key = 'value' AND member = 'member'",
        redis="SISMEMBER value member",
    ),
    # Sorted set
    rule(
        "zset_getall",
        S,
        m.is_zset_getall,
        ctx.build_zset_getall_context,
        sql="SELECT * FROM table__zset WHERE key = 'value'",
        redis="ZRANGEBYSCORE value -inf +inf",
    ),
    rule(
        "zset_get_score_range",
        S,
        m.is_zset_get_score_range,
        ctx.build_zset_score_range_context,
        sql="SELECT * FROM table__zset WHERE key = 'value' AND score > 100",
        redis="ZRANGEBYSCORE value (100 +inf",
    ),
    rule(
        "zset_get_reversed",
        S,
        m.is_zset_get_reversed,
        ctx.build_zset_reversed_context,
        sql="SELECT * FROM table__zset WHERE key = 'value' ORDER BY score DESC",
        redis="ZREVRANGEBYSCORE value +inf -inf",
    ),
]
