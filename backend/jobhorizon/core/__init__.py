"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Token signing is CPU-only and lives here; cookie IO lives in api/
"""
