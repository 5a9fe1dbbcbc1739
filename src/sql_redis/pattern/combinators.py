"""Composable matchers.

A pattern is any callable taking an input and returning either ``Match(value)``
or the ``NO_MATCH`` singleton. Failure carries no information: callers that
need diagnostics build them outside this layer.

Laws:
    - ``or_`` is associative
    - ``never()`` is a left and right identity for ``or_``
    - ``always(v)`` ignores its input and succeeds with ``v``

Examples:
    >>> digits = extract(lambda s: int(s) if s.isdigit() else None)
    >>> map_(digits, lambda n: n * 2)("21")
    Match(value=42)
    >>> or_(digits, always(0))("abc")
    Match(value=0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar, Union

I = TypeVar("I")
O = TypeVar("O")
T = TypeVar("T")


@dataclass(frozen=True)
class Match(Generic[T]):
    """Successful match carrying its output."""

    value: T

    def __bool__(self) -> bool:
        return True


class _NoMatch:
    """Uninformative failure signal."""

    _instance: Optional["_NoMatch"] = None

    def __new__(cls) -> "_NoMatch":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = _NoMatch()

MatchResult = Union[Match[T], _NoMatch]
Pattern = Callable[[I], MatchResult[O]]


def is_match(result: MatchResult[Any]) -> bool:
    return isinstance(result, Match)


def run(pattern: Pattern[I, O], value: I) -> Optional[O]:
    """Apply a pattern and unwrap its value, returning None on no-match."""
    result = pattern(value)
    return result.value if isinstance(result, Match) else None


def always(value: T) -> Pattern[Any, T]:
    def _always(_: Any) -> MatchResult[T]:
        return Match(value)

    return _always


def never() -> Pattern[Any, Any]:
    def _never(_: Any) -> MatchResult[Any]:
        return NO_MATCH

    return _never


def extract(fn: Callable[[I], Optional[O]]) -> Pattern[I, O]:
    """Lift a partial function (None means absent) into a pattern."""

    def _extract(value: I) -> MatchResult[O]:
        out = fn(value)
        return NO_MATCH if out is None else Match(out)

    return _extract


def predicate(test: Callable[[I], bool]) -> Pattern[I, None]:
    """Lift a boolean test into a pattern succeeding with None."""

    def _predicate(value: I) -> MatchResult[None]:
        return Match(None) if test(value) else NO_MATCH

    return _predicate


def map_(pattern: Pattern[I, O], fn: Callable[[O], T]) -> Pattern[I, T]:
    def _map(value: I) -> MatchResult[T]:
        result = pattern(value)
        if isinstance(result, Match):
            return Match(fn(result.value))
        return NO_MATCH

    return _map


def and_then(first: Pattern[I, O], second: Pattern[O, T]) -> Pattern[I, T]:
    """Feed the output of ``first`` into ``second``; fail as soon as ``first`` fails."""

    def _and_then(value: I) -> MatchResult[T]:
        result = first(value)
        if isinstance(result, Match):
            return second(result.value)
        return NO_MATCH

    return _and_then


def or_(first: Pattern[I, O], second: Pattern[I, O]) -> Pattern[I, O]:
    """Try ``first``; only on failure try ``second`` against the same input."""

    def _or(value: I) -> MatchResult[O]:
        result = first(value)
        if isinstance(result, Match):
            return result
        return second(value)

    return _or


def first_of(*patterns: Pattern[I, O]) -> Pattern[I, O]:
    """Variadic ``or_``, folding from ``never()``."""
    combined: Pattern[I, O] = never()
    for pattern in patterns:
        combined = or_(combined, pattern)
    return combined


def optional(pattern: Pattern[I, O]) -> Pattern[I, Optional[O]]:
    """Never fails: wraps a success value, or yields None on absence."""

    def _optional(value: I) -> MatchResult[Optional[O]]:
        result = pattern(value)
        if isinstance(result, Match):
            return Match(result.value)
        return Match(None)

    return _optional


def pair(first: Pattern[I, O], second: Pattern[I, T]) -> Pattern[I, Tuple[O, T]]:
    """Both patterns must succeed on the same input."""

    def _pair(value: I) -> MatchResult[Tuple[O, T]]:
        left = first(value)
        if not isinstance(left, Match):
            return NO_MATCH
        right = second(value)
        if not isinstance(right, Match):
            return NO_MATCH
        return Match((left.value, right.value))

    return _pair


__all__ = [
    "Match",
    "NO_MATCH",
    "MatchResult",
    "Pattern",
    "is_match",
    "run",
    "always",
    "never",
    "extract",
    "predicate",
    "map_",
    "and_then",
    "or_",
    "first_of",
    "optional",
    "pair",
]
