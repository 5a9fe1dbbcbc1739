"""Translation configuration constants.

This module centralizes the naming conventions the translator relies on:
table-name suffixes, reserved column names, score-range bounds, parser
settings and template locations.

Table Kinds:
    - "string": any table without a recognised suffix
    - "hash": tables ending in ``__hash``
    - "list": tables ending in ``__list``
    - "set": tables ending in ``__set``
    - "zset": tables ending in ``__zset``
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

# ============================================================================
# TABLE NAMING
# ============================================================================

# Suffix per table kind. "string" has none and is the default.
TABLE_SUFFIXES: Dict[str, str] = {
    "hash": "__hash",
    "list": "__list",
    "set": "__set",
    "zset": "__zset",
}


# ============================================================================
# RESERVED COLUMN NAMES
# ============================================================================

KEY_COLUMN = "key"
VALUE_COLUMN = "value"
FIELD_COLUMN = "field"
INDEX_COLUMN = "index"
MEMBER_COLUMN = "member"
SCORE_COLUMN = "score"


# ============================================================================
# SCORE RANGE BOUNDS
# ============================================================================

NEG_INF = "-inf"
POS_INF = "+inf"
EXCLUSIVE_PREFIX = "("


# ============================================================================
# PARSER
# ============================================================================

# None selects sqlglot's generic dialect
DEFAULT_DIALECT: Optional[str] = None

# WHERE trees are trusted input; extractors stop descending past this depth
MAX_CONDITION_DEPTH = 256


# ============================================================================
# TEMPLATES
# ============================================================================

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
COMMAND_TEMPLATES_FILE = TEMPLATE_DIR / "commands.yaml"
LUA_TEMPLATE_DIR = TEMPLATE_DIR / "lua"
LUA_TEMPLATE_SUFFIX = ".lua"


def get_table_suffix(kind: str) -> str:
    """Return the table-name suffix for a table kind.

    Args:
        kind: Table kind value ("string", "hash", "list", "set", "zset").

    Returns:
        The suffix, or an empty string for "string" tables.

    Raises:
        ValueError: If the kind is unknown.
    """
    kind = str(getattr(kind, "value", kind))
    if kind == "string":
        return ""
    if kind not in TABLE_SUFFIXES:
        raise ValueError(f"Unknown table kind: {kind}")
    return TABLE_SUFFIXES[kind]

