"""API Layer: FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response is application/problem+json, except the handler's
      plain-text null-body message

Design Decisions:
    - Thin routes delegate to core/
"""
