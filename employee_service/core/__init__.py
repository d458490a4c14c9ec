"""Core: pure validation logic and the error hierarchy.

Invariants:
    - Core never imports FastAPI/Starlette (framework-free, testable in isolation)
"""
