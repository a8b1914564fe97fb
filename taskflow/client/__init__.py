"""Client Layer — HTTP client with an explicit query cache for TaskFlow consumers.

Invariants:
    - Reads go through QueryCache; writes invalidate, never patch, cached reads
    - No retries and no optimistic updates
"""
