"""Infrastructure Layer — item stores, image resolution, database and logging.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All IO failures mapped to typed CatalogError subclasses

Design Decisions:
    - One module per backing medium (ADR: single responsibility)
"""
