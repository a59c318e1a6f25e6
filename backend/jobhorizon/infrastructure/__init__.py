"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - All SQLAlchemy exceptions mapped to DatabaseError before leaving this layer
"""
