"""Contact ORM - persists one contact record.

Invariants:
    - id is a UUID assigned once at insert, never reused
    - email and phone are UNIQUE across the whole table, soft-deleted rows included
    - seq is the insertion order; list queries sort by it
    - last_updated_at and deleted_at stay NULL until an update / soft delete
    - Timestamps are stored and read back as tz-aware UTC (UTCDateTime)

Design Decisions:
    - Integer seq primary key plus unique UUID id: random UUIDs carry no order,
      seq gives stable insertion order on both PostgreSQL and SQLite
    - Soft delete as is_deleted + deleted_at columns: rows are never removed
      through the API
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from contacts_api.db.base import Base
from contacts_api.db.types import UTCDateTime


class Contact(Base):
    """Contact entity."""
    __tablename__ = "contacts"
    __table_args__ = (
        UniqueConstraint("email", name="uq_contacts_email"),
        UniqueConstraint("phone", name="uq_contacts_phone"),
    )

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, unique=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    last_updated_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(), nullable=True,
    )
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(), nullable=True,
    )
