"""Statement shape predicates, one module per statement kind.

Every predicate takes a parsed statement and returns a bool; statements of
another kind never match. The ``is_<shape>`` predicates mirror one Redis
command pattern each and are what the rule registry binds to.
"""
