"""Core Layer — pure domain types, errors, and filter contracts.

Invariants:
    - Core never imports from api/, services/, or infrastructure/
    - No IO in this package

Design Decisions:
    - Boundary contracts expressed as Protocols (repository_protocols.py)
"""
