"""Services Layer - orchestration between API routes and the record store.

Invariants:
    - Services call pure core functions, then the store; never the other way round
"""
