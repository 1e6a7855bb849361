"""Column Types - timezone-safe timestamps across PostgreSQL and SQLite.

Invariants:
    - Values written are converted to UTC; naive values are taken as UTC
    - Values read are always tz-aware UTC, even on SQLite (which drops tzinfo)

Design Decisions:
    - TypeDecorator over per-response fixes: every reader of the ORM row sees
      the same datetime that the writer held in memory
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that always round-trips as aware UTC."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
