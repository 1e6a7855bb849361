"""Contact Schemas - Pydantic models for the contacts API boundary.

Invariants:
    - ContactPayload accepts only strings (or null) for name, email, phone
    - Presence is NOT enforced here: missing fields are a domain error
      (MissingFieldsError) so the response names them consistently
    - ContactResponse serializes camelCase and omits unset timestamps
      (lastUpdatedAt before the first update, deletedAt before soft delete)

Design Decisions:
    - alias_generator=to_camel: Python attributes stay snake_case, wire stays camelCase
    - from_attributes=True: responses validate straight from ORM rows
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from contacts_api.core.validate_contact import (
    ContactFields, normalize_contact_fields,
)


class ContactPayload(BaseModel):
    """Create/update request body."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None

    def to_fields(self) -> ContactFields:
        return normalize_contact_fields(self.name, self.email, self.phone)


class ContactResponse(BaseModel):
    """Public contact representation."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    name: str
    email: str
    phone: str
    created_at: datetime
    last_updated_at: datetime | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None


def serialize_contact(contact) -> dict:
    """ORM row (or any ContactLike) to the JSON shape clients receive."""
    return ContactResponse.model_validate(contact).model_dump(
        mode="json", by_alias=True, exclude_none=True,
    )
