"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never touch the ORM directly (delegate to services/ stores)
"""
