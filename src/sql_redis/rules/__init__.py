"""Rule registry.

A rule binds a shape predicate, a context builder and a command template.
Rules are grouped per statement kind (see ``rules/select.py`` and friends)
and concatenated into one ordered registry by ``build_rule_registry()``.

Dispatch is first-match-wins in registry order: the first rule whose
predicate holds and whose context builder succeeds is the one rendered.
"""

from __future__ import annotations

from .base import Rule, rule
from .registry import ALL_RULES, build_rule_registry, find_rule

__all__ = ["Rule", "rule", "ALL_RULES", "build_rule_registry", "find_rule"]
