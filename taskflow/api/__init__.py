"""API Layer — FastAPI routers, dependencies, and global error handlers.

Invariants:
    - Routes validate input via schemas/ and delegate persistence to services/
    - Absent results are turned into ResourceNotFoundError here, nowhere else
"""
