"""API Layer - FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Arithmetic endpoints respond with text/plain bodies

Design Decisions:
    - Thin routes delegate parsing and computation to core/
"""
