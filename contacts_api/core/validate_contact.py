"""Contact Validation - presence and normalization rules for contact payloads.

Invariants:
    - name, email and phone are trimmed; email is additionally lower-cased
    - A field that is blank after trimming counts as missing
    - Missing fields reported in canonical order: name, email, phone
    - Create and update apply the same rules (no partial updates)

Design Decisions:
    - Pure functions returning a frozen ContactFields: the store and routes
      share one normalization path, so create and update cannot drift apart
"""

from dataclasses import dataclass

from contacts_api.core.domain_types import REQUIRED_FIELDS
from contacts_api.core.errors import MissingFieldsError


@dataclass(frozen=True)
class ContactFields:
    """Normalized caller-supplied contact fields."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None

    def value_of(self, field: str) -> str | None:
        return getattr(self, field)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_contact_fields(
    name: str | None, email: str | None, phone: str | None,
) -> ContactFields:
    """Trim all fields and lower-case the email. Blank values become None."""
    email = _clean(email)
    return ContactFields(
        name=_clean(name),
        email=email.lower() if email else None,
        phone=_clean(phone),
    )


def missing_fields(fields: ContactFields) -> list[str]:
    return [f.value for f in REQUIRED_FIELDS if not fields.value_of(f.value)]


def require_contact_fields(fields: ContactFields) -> ContactFields:
    """Raise MissingFieldsError unless name, email and phone are all present."""
    missing = missing_fields(fields)
    if missing:
        raise MissingFieldsError(missing)
    return fields
