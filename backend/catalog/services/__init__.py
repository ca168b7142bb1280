"""Services Layer — imperative shell that orchestrates core logic around IO.

Invariants:
    - Services depend on core protocols, never on FastAPI request objects

Design Decisions:
    - Thin routes delegate here (ADR: impureim sandwich)
"""
