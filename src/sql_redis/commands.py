"""Direct, template-free command generation.

This is the fallback strategy tried after the rule registry. Its output may
differ textually from the registry path for overlapping shapes (``HMSET``
here, ``HSET`` there); both are valid Redis commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from sqlglot import exp

from sql_redis.config import INDEX_COLUMN, MEMBER_COLUMN, NEG_INF, POS_INF, SCORE_COLUMN, VALUE_COLUMN
from sql_redis.core.enums import TableKind
from sql_redis.pattern import extractors as ext


@dataclass(frozen=True)
class RedisCommand:
    """A Redis command name and its arguments, in order.

    Examples:
        >>> str(RedisCommand("ZADD", ["board", "100", "alice"]))
        'ZADD board 100 alice'
    """

    name: str
    args: Tuple[str, ...] = ()

    def __init__(self, name: str, args: Sequence[str] = ()) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "args", tuple(args))

    def __str__(self) -> str:
        return " ".join([self.name, *self.args])


def _insert_command(info: ext.InsertCommandInfo) -> Optional[RedisCommand]:
    kind = TableKind.from_table_name(info.table)
    if kind is TableKind.STRING:
        value = info.get(VALUE_COLUMN)
        return RedisCommand("SET", [info.key, value]) if value is not None else None
    if kind is TableKind.HASH:
        args: List[str] = [info.key]
        for column, value in info.fields:
            args.extend([column, value])
        return RedisCommand("HMSET", args) if info.fields else None
    if kind is TableKind.LIST:
        value = info.get(VALUE_COLUMN)
        if value is None:
            return None
        index = info.get(INDEX_COLUMN)
        if index is not None:
            return RedisCommand("LSET", [info.key, index, value])
        return RedisCommand("RPUSH", [info.key, value])
    if kind is TableKind.SET:
        member = info.get(MEMBER_COLUMN)
        return RedisCommand("SADD", [info.key, member]) if member is not None else None
    member, score = info.get(MEMBER_COLUMN), info.get(SCORE_COLUMN)
    if member is None or score is None:
        return None
    return RedisCommand("ZADD", [info.key, score, member])


def _delete_command(info: ext.DeleteCommandInfo) -> Optional[RedisCommand]:
    if info.member is None and info.index is None:
        return RedisCommand("DEL", [info.key])
    kind = TableKind.from_table_name(info.table)
    if info.member is None:
        return None
    if kind is TableKind.HASH:
        return RedisCommand("HDEL", [info.key, info.member])
    if kind is TableKind.LIST:
        return RedisCommand("LREM", [info.key, "0", info.member])
    if kind is TableKind.SET:
        return RedisCommand("SREM", [info.key, info.member])
    if kind is TableKind.ZSET:
        return RedisCommand("ZREM", [info.key, info.member])
    return None


_Generator = Callable[[exp.Expression], Optional[RedisCommand]]


def _via(extractor: Callable, build: Callable) -> _Generator:
    def _generate(stmt: exp.Expression) -> Optional[RedisCommand]:
        info = extractor(stmt)
        return build(info) if info is not None else None

    return _generate


# Tried in order; the first extractor that yields a record decides.
GENERATORS: Tuple[_Generator, ...] = (
    _via(ext.extract_string_get, lambda i: RedisCommand("GET", [i.key])),
    _via(ext.extract_hash_getall, lambda i: RedisCommand("HGETALL", [i.key])),
    _via(ext.extract_hash_get, lambda i: RedisCommand("HGET", [i.key, i.field])),
    _via(ext.extract_hash_multi_get, lambda i: RedisCommand("HMGET", [i.key, *i.fields])),
    _via(ext.extract_list_index, lambda i: RedisCommand("LINDEX", [i.key, i.index])),
    _via(
        ext.extract_list_get_range,
        lambda i: RedisCommand("LRANGE", [i.key, "0", str(i.limit - 1)]),
    ),
    _via(ext.extract_list_getall, lambda i: RedisCommand("LRANGE", [i.key, "0", "-1"])),
    _via(ext.extract_set_member, lambda i: RedisCommand("SISMEMBER", [i.key, i.member])),
    _via(ext.extract_set_getall, lambda i: RedisCommand("SMEMBERS", [i.key])),
    _via(
        ext.extract_zset_get_reversed,
        lambda i: RedisCommand("ZREVRANGEBYSCORE", [i.key, POS_INF, NEG_INF]),
    ),
    _via(
        ext.extract_zset_score_range,
        lambda i: RedisCommand("ZRANGEBYSCORE", [i.key, i.min, i.max]),
    ),
    _via(
        ext.extract_zset_getall,
        lambda i: RedisCommand("ZRANGEBYSCORE", [i.key, NEG_INF, POS_INF]),
    ),
    _via(ext.extract_insert_command, _insert_command),
    _via(ext.extract_delete_command, _delete_command),
)


def generate_command(stmt: exp.Expression) -> Optional[RedisCommand]:
    """Build a command directly from the statement, or None if no shape fits."""
    for generate in GENERATORS:
        command = generate(stmt)
        if command is not None:
            logging.debug("Direct generator produced %s", command.name)
            return command
    return None


__all__ = ["RedisCommand", "GENERATORS", "generate_command"]
