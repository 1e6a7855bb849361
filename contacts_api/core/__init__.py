"""Core Layer - pure contact rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: routes and the store
      call these rules, the rules never call back
"""
