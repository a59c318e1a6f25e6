"""Services — stores that translate document operations into SQL.

Invariants:
    - Stores receive an AsyncSession; they never create their own
    - Each write method owns its transaction (commit or rollback before returning)
"""
