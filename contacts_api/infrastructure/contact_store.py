"""Contact Store - persistence for contacts with unique email/phone enforcement.

Invariants:
    - list() returns live rows only (is_deleted false), in insertion order (seq)
    - get_by_id() returns any row, soft-deleted included
    - Uniqueness is store-wide: a soft-deleted contact still holds its email/phone
    - Duplicate detection order is email, then phone
    - update() only conflicts with OTHER rows; keeping one's own email/phone is fine
    - Every write is committed before the method returns

Design Decisions:
    - Pre-check queries name the colliding field; the UNIQUE constraints are
      the atomic guard. A commit-time IntegrityError (concurrent insert) is
      resolved back to a field by re-running the pre-check after rollback
    - One session per operation: no session outlives a request
    - open()/close() own the engine lifecycle; the FastAPI lifespan calls them
"""

import logging
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import delete, false, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.config import Settings
from contacts_api.core.domain_types import ContactId, UNIQUE_FIELDS
from contacts_api.core.errors import ContactNotFoundError, DuplicateFieldError
from contacts_api.core.validate_contact import ContactFields, require_contact_fields
from contacts_api.infrastructure.database import DatabaseSessionManager, engine_options
from contacts_api.models.contact import Contact

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ContactStore:
    """Contact persistence over a DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContactStore":
        url = settings.effective_database_url
        return cls(DatabaseSessionManager(
            url,
            **engine_options(
                url, settings.database_pool_size, settings.database_max_overflow,
            ),
        ))

    # ─── Lifecycle ───────────────────────────────────────────────

    async def open(self, create_tables: bool = False) -> None:
        if create_tables:
            await self._db.create_tables()
        if await self._db.health_check():
            logger.info("Connected to database")
        else:
            logger.error("Database unreachable at startup")

    async def close(self) -> None:
        await self._db.close()
        logger.info("Database connection closed")

    async def is_ready(self) -> bool:
        return await self._db.health_check()

    # ─── Reads ───────────────────────────────────────────────────

    async def list(self, skip: int, limit: int) -> tuple[Sequence[Contact], int]:
        """Window of live contacts plus the total live count."""
        live = Contact.is_deleted == false()
        async with self._db.session() as db:
            result = await db.execute(
                select(Contact).where(live)
                .order_by(Contact.seq).offset(skip).limit(limit),
            )
            contacts = result.scalars().all()
            total = await db.scalar(
                select(func.count()).select_from(Contact).where(live),
            )
        return contacts, total or 0

    async def get_by_id(self, contact_id: ContactId) -> Contact:
        async with self._db.session() as db:
            return await self._get_or_raise(db, contact_id)

    # ─── Writes ──────────────────────────────────────────────────

    async def create(
        self, fields: ContactFields, created_at: datetime | None = None,
    ) -> Contact:
        """Insert a contact. Raises MissingFieldsError or DuplicateFieldError."""
        fields = require_contact_fields(fields)
        async with self._db.session() as db:
            await self._ensure_unique(db, fields)
            contact = Contact(
                name=fields.name, email=fields.email, phone=fields.phone,
            )
            if created_at is not None:
                contact.created_at = created_at
            db.add(contact)
            await self._commit(db, fields)
        logger.info("Contact created", extra={"contact_id": str(contact.id)})
        return contact

    async def update(self, contact_id: ContactId, fields: ContactFields) -> Contact:
        """Overwrite name/email/phone and stamp last_updated_at."""
        fields = require_contact_fields(fields)
        async with self._db.session() as db:
            contact = await self._get_or_raise(db, contact_id)
            await self._ensure_unique(db, fields, exclude_id=contact.id)
            contact.name = fields.name
            contact.email = fields.email
            contact.phone = fields.phone
            contact.last_updated_at = _now()
            await self._commit(db, fields, exclude_id=contact.id)
        logger.info("Contact updated", extra={"contact_id": str(contact_id)})
        return contact

    async def soft_delete(self, contact_id: ContactId) -> Contact:
        """Flag the contact deleted. The row stays retrievable by id."""
        async with self._db.session() as db:
            contact = await self._get_or_raise(db, contact_id)
            contact.is_deleted = True
            contact.deleted_at = _now()
            await db.commit()
        logger.info("Contact soft-deleted", extra={"contact_id": str(contact_id)})
        return contact

    async def clear(self) -> int:
        """Physically remove every contact. Used by seeding only."""
        async with self._db.session() as db:
            result = await db.execute(delete(Contact))
            removed = result.rowcount or 0
            await db.commit()
        logger.info(f"Cleared {removed} contacts", extra={"count": removed})
        return removed

    # ─── Helpers ─────────────────────────────────────────────────

    async def _get_or_raise(self, db: AsyncSession, contact_id: ContactId) -> Contact:
        result = await db.execute(select(Contact).where(Contact.id == contact_id))
        contact = result.scalar_one_or_none()
        if contact is None:
            raise ContactNotFoundError(str(contact_id))
        return contact

    async def _ensure_unique(
        self,
        db: AsyncSession,
        fields: ContactFields,
        exclude_id: ContactId | None = None,
    ) -> None:
        for field in UNIQUE_FIELDS:
            column = getattr(Contact, field.value)
            query = select(Contact.id).where(column == fields.value_of(field.value))
            if exclude_id is not None:
                query = query.where(Contact.id != exclude_id)
            taken = await db.scalar(query.limit(1))
            if taken is not None:
                logger.warning(
                    f"Duplicate {field.value} rejected",
                    extra={"field": field.value, "error_code": "DUPLICATE_FIELD"},
                )
                raise DuplicateFieldError(
                    field.value, updating=exclude_id is not None,
                )

    async def _commit(
        self,
        db: AsyncSession,
        fields: ContactFields,
        exclude_id: ContactId | None = None,
    ) -> None:
        try:
            await db.commit()
        except IntegrityError:
            # Lost a race with a concurrent write; find out which field.
            await db.rollback()
            await self._ensure_unique(db, fields, exclude_id=exclude_id)
            raise
