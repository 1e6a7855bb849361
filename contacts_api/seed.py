"""Database Seeding - replaces all contacts with a fixed sample set.

Invariants:
    - Existing contacts are removed first (physical delete, seeding only)
    - The store is always closed, even when seeding fails

Usage:
    python -m contacts_api.seed
"""

import asyncio
import logging
from datetime import datetime, timezone

from contacts_api.config import get_settings
from contacts_api.core.validate_contact import normalize_contact_fields
from contacts_api.infrastructure.contact_store import ContactStore
from contacts_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_CONTACTS: list[dict] = [
    {
        "name": "Rohit Verma",
        "email": "rohit.verma@example.com",
        "phone": "9876543210",
        "created_at": datetime(2025, 10, 20, 10, 15, tzinfo=timezone.utc),
    },
    {
        "name": "Priya Sharma",
        "email": "priya.sharma@example.com",
        "phone": "9123456780",
        "created_at": datetime(2025, 10, 21, 9, 30, tzinfo=timezone.utc),
    },
    {
        "name": "Rahul Mehta",
        "email": "rahul.mehta@example.com",
        "phone": "9871234567",
        "created_at": datetime(2025, 10, 22, 8, 0, tzinfo=timezone.utc),
    },
    {
        "name": "Sneha Reddy",
        "email": "sneha.reddy@example.com",
        "phone": "9765432180",
        "created_at": datetime(2025, 10, 19, 14, 45, tzinfo=timezone.utc),
    },
    {
        "name": "Arjun Patel",
        "email": "arjun.patel@example.com",
        "phone": "9812345678",
        "created_at": datetime(2025, 10, 18, 16, 10, tzinfo=timezone.utc),
    },
]


async def seed_contacts(store: ContactStore, records: list[dict] | None = None) -> list:
    """Clear the contacts table and insert records (SAMPLE_CONTACTS by default)."""
    if records is None:
        records = SAMPLE_CONTACTS
    await store.clear()
    created = []
    for record in records:
        fields = normalize_contact_fields(record["name"], record["email"], record["phone"])
        created.append(await store.create(fields, created_at=record.get("created_at")))
    logger.info(f"Added {len(created)} contacts", extra={"count": len(created)})
    for contact in created:
        logger.info(f"- {contact.name} ({contact.email})", extra={"contact_id": str(contact.id)})
    return created


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = ContactStore.from_settings(settings)
    try:
        await store.open(create_tables=True)
        await seed_contacts(store)
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
