"""Pydantic Schemas — API contracts and the JSON-file document format.

Invariants:
    - Schemas validate at system boundaries (HTTP responses, files on disk)

Design Decisions:
    - Separate from models: schemas are contracts, models are persistence (ADR: DDD boundary)
"""
