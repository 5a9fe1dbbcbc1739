"""Structured extraction for the direct command generator.

Each ``extract_*`` function takes a parsed statement and returns an info
record, or None when the statement does not have the expected shape.
"""

from .info import (
    DeleteCommandInfo,
    HashGetAllInfo,
    HashGetInfo,
    HashMultiGetInfo,
    InsertCommandInfo,
    ListGetAllInfo,
    ListGetRangeInfo,
    ListIndexInfo,
    SetGetAllInfo,
    SetMemberInfo,
    StringGetInfo,
    ZSetGetAllInfo,
    ZSetGetReversedInfo,
    ZSetScoreRangeInfo,
)
from .modify import extract_delete_command, extract_insert_command
from .query import (
    extract_hash_get,
    extract_hash_getall,
    extract_hash_multi_get,
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

__all__ = [
    "StringGetInfo",
    "HashGetAllInfo",
    "HashGetInfo",
    "HashMultiGetInfo",
    "ListGetAllInfo",
    "ListIndexInfo",
    "ListGetRangeInfo",
    "SetGetAllInfo",
    "SetMemberInfo",
    "ZSetGetAllInfo",
    "ZSetScoreRangeInfo",
    "ZSetGetReversedInfo",
    "InsertCommandInfo",
    "DeleteCommandInfo",
    "extract_string_get",
    "extract_hash_getall",
    "extract_hash_get",
    "extract_hash_multi_get",
    "extract_list_getall",
    "extract_list_index",
    "extract_list_get_range",
    "extract_set_getall",
    "extract_set_member",
    "extract_zset_getall",
    "extract_zset_score_range",
    "extract_zset_get_reversed",
    "extract_insert_command",
    "extract_delete_command",
]
