"""Infrastructure Layer - persistence and cross-cutting concerns.

Invariants:
    - Infrastructure applies core rules but core never imports infrastructure
    - All database failures mapped to the core error hierarchy

Design Decisions:
    - ContactStore wraps DatabaseSessionManager: one object with an explicit
      open/close lifecycle instead of a module-level handle
"""
