"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, error bodies)
"""
