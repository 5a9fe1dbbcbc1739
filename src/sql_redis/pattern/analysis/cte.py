"""Common table expression (WITH clause) inspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from sqlglot import exp

from sql_redis.pattern.combinators import Pattern, and_then, extract, run
from sql_redis.statements.common import table_name
from sql_redis.statements.select import get_from, get_joins


@dataclass(frozen=True)
class CteInfo:
    name: str
    query: exp.Expression
    column_names: List[str] = field(default_factory=list)
    recursive: bool = False


def _with_clause(stmt: exp.Expression) -> Optional[exp.With]:
    node = stmt.args.get("with") or stmt.args.get("with_")
    return node if isinstance(node, exp.With) else None


def _cte_info(cte: exp.CTE, recursive: bool) -> CteInfo:
    alias = cte.args.get("alias")
    columns = [c.name for c in alias.columns] if isinstance(alias, exp.TableAlias) else []
    return CteInfo(name=cte.alias, query=cte.this, column_names=columns, recursive=recursive)


def _ctes(with_: exp.With) -> Optional[List[CteInfo]]:
    recursive = bool(with_.args.get("recursive"))
    ctes = [_cte_info(c, recursive) for c in with_.expressions if isinstance(c, exp.CTE)]
    return ctes or None


statement_with_cte: Pattern[exp.Expression, exp.With] = extract(_with_clause)
extract_ctes: Pattern[exp.With, List[CteInfo]] = extract(_ctes)


def cte_by_name(name: str) -> Pattern[exp.With, CteInfo]:
    def _find(with_: exp.With) -> Optional[CteInfo]:
        for info in _ctes(with_) or []:
            if info.name == name:
                return info
        return None

    return extract(_find)


def extract_all_ctes(stmt: exp.Expression) -> List[CteInfo]:
    return run(and_then(statement_with_cte, extract_ctes), stmt) or []


def find_cte_references(query: exp.Expression, cte_names: Sequence[str]) -> List[str]:
    """CTE names referenced by the FROM and JOIN tables of ``query``."""
    if not isinstance(query, exp.Select):
        return []
    tables = [get_from(query)] + [j.this for j in get_joins(query)]
    references = []
    for node in tables:
        name = table_name(node)
        if name is not None and name in cte_names:
            references.append(name)
    return references


def is_recursive_cte(cte: CteInfo, all_ctes: Sequence[CteInfo]) -> bool:
    """Declared ``WITH RECURSIVE``, or the CTE's query references itself."""
    if cte.recursive:
        return True
    names = [c.name for c in all_ctes]
    return cte.name in find_cte_references(cte.query, names)
