"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON except the image stream

Design Decisions:
    - Thin routes delegate to CatalogService (ADR: impureim sandwich)
"""
