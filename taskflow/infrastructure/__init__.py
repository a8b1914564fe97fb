"""Infrastructure Layer — database engine and logging setup.

Invariants:
    - Infrastructure never imports route modules
    - All SQLAlchemy failures leave this layer as DatabaseError
"""
