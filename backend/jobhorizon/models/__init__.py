"""ORM Models — one module per table.

Invariants:
    - Full documents live in a JSON column; filterable fields are mirrored into typed columns
"""
