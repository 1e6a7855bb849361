"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints except the root greeting return JSON

Design Decisions:
    - Thin routes delegate to core rules and the contact store
"""
