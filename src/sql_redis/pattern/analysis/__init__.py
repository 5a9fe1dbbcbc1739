"""Structural inspection of CTEs, joins and subqueries.

These helpers describe a statement; none of them feed command generation.
"""

from .cte import CteInfo, extract_all_ctes, find_cte_references, is_recursive_cte
from .join import JoinCondition, JoinInfo, JoinType, TableInfo, extract_all_joins, is_equi_join
from .subquery import SubqueryContext, SubqueryInfo, extract_all_subqueries

__all__ = [
    "CteInfo",
    "extract_all_ctes",
    "find_cte_references",
    "is_recursive_cte",
    "JoinCondition",
    "JoinInfo",
    "JoinType",
    "TableInfo",
    "extract_all_joins",
    "is_equi_join",
    "SubqueryContext",
    "SubqueryInfo",
    "extract_all_subqueries",
]
