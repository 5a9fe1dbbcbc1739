"""Pattern matching over parsed SQL statements.

- **combinators**: generic match/no-match primitives
- **conditions**: WHERE/SET clause value extraction
- **matchers**: per-statement-kind shape predicates
- **extractors**: structured info records for the direct command generator
- **analysis**: optional CTE/JOIN/subquery inspection
"""
