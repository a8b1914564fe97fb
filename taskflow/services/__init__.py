"""Services Layer — async stores that translate typed requests into SQL.

Invariants:
    - Stores receive an AsyncSession; they never create their own
    - Stores commit their own writes (one statement per request, no cross-entity transactions)
    - Absent rows surface as None/False, never as exceptions
"""
