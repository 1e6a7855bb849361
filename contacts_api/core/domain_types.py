"""Domain Types - identity and field types shared by the core and the store.

Invariants:
    - ContactId wraps a UUID; raw strings never reach the store unparsed
    - UNIQUE_FIELDS order is the duplicate detection order (email before phone)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID

from contacts_api.core.errors import InvalidIdentifierError


# ─── Identity Types ──────────────────────────────────────────────

ContactId = NewType("ContactId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ContactField(str, Enum):
    """Caller-supplied contact fields, in canonical order."""
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"


REQUIRED_FIELDS: tuple[ContactField, ...] = (
    ContactField.NAME, ContactField.EMAIL, ContactField.PHONE,
)
UNIQUE_FIELDS: tuple[ContactField, ...] = (ContactField.EMAIL, ContactField.PHONE)


def parse_contact_id(raw: str) -> ContactId:
    """Parse a path identifier. Raises InvalidIdentifierError when malformed."""
    try:
        return ContactId(UUID(raw))
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentifierError(str(raw))
