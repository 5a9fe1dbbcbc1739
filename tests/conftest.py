"""Shared pytest fixtures for SQL to Redis translation tests."""

from __future__ import annotations

from typing import Callable

import pytest
from sqlglot import exp

from sql_redis import SqlToRedisTransformer
from sql_redis.core.parser import parse_sql


@pytest.fixture(scope="session")
def transformer() -> SqlToRedisTransformer:
    """One transformer shared across the session; it is immutable after construction."""
    return SqlToRedisTransformer()


@pytest.fixture
def parse() -> Callable[[str], exp.Expression]:
    """Parse SQL text into a statement tree."""
    return parse_sql


@pytest.fixture
def where(parse) -> Callable[[str], exp.Expression]:
    """Parse ``SELECT * FROM t WHERE <condition>`` and return the condition."""

    def _where(condition: str) -> exp.Expression:
        return parse(f"SELECT * FROM t WHERE {condition}").args["where"].this

    return _where
