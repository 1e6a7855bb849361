"""Route Dependencies - hands the lifespan-created store to route handlers.

Invariants:
    - The store lives on app.state, created once in the lifespan
    - Routes type against ContactRepository, not ContactStore

Design Decisions:
    - FastAPI dependency over a module global: tests swap the store with
      app.dependency_overrides
"""

from fastapi import Request

from contacts_api.core.repository_protocols import ContactRepository


def get_contact_store(request: Request) -> ContactRepository:
    store = getattr(request.app.state, "contact_store", None)
    if store is None:
        raise RuntimeError("Contact store not initialized")
    return store
