"""Read-only accessors over parsed statements, one module per statement kind.

Every accessor accepts any statement and returns None (or an empty
collection) when the statement is of another kind or lacks the clause.
"""
