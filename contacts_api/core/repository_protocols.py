"""Boundary Protocols - contracts between the route handlers and persistence.

Invariants:
    - Routes depend on ContactRepository, never on the concrete store class
    - Every method that can miss raises ContactNotFoundError (no None returns)
    - Unique violations raise DuplicateFieldError naming the colliding field

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can inject a fake store
    - Async in Protocol: implementations do IO; the pure rules they apply stay sync
"""

from datetime import datetime
from typing import Protocol, Sequence
from uuid import UUID

from contacts_api.core.domain_types import ContactId
from contacts_api.core.validate_contact import ContactFields


class ContactLike(Protocol):
    """Structural contract for contact records returned by the store."""
    id: UUID
    name: str
    email: str
    phone: str
    created_at: datetime
    last_updated_at: datetime | None
    is_deleted: bool
    deleted_at: datetime | None


class ContactRepository(Protocol):
    """Contract for contact persistence - implemented by infrastructure."""
    async def list(self, skip: int, limit: int) -> tuple[Sequence[ContactLike], int]: ...
    async def get_by_id(self, contact_id: ContactId) -> ContactLike: ...
    async def create(self, fields: ContactFields) -> ContactLike: ...
    async def update(
        self, contact_id: ContactId, fields: ContactFields,
    ) -> ContactLike: ...
    async def soft_delete(self, contact_id: ContactId) -> ContactLike: ...
