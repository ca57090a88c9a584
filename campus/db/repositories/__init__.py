"""
Per-entity repository modules for database access.

`students`, `addresses` and `schools` each own the queries for one aggregate;
`campus.db.crud` is a thin facade over them.
"""
