"""Database Package — SQLAlchemy declarative base shared by all ORM models.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py
"""
