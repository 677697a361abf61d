"""Infrastructure Layer - record-store implementations and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - Every IO failure is mapped to StorageFaultError before leaving this layer
"""
