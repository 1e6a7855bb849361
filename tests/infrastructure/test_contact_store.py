"""Contact Store - persistence rules against an in-memory SQLite database.

Tests cover:
    - create assigns id/created_at, normalizes fields, and is retrievable
    - duplicate email / phone rejected (email reported first), soft-deleted rows included
    - update conflicts only with other rows, stamps last_updated_at, 404 when absent
    - soft_delete hides from list but keeps get_by_id working
    - list window, ordering and live total
    - a UNIQUE violation at commit is reported as the colliding field
    - storage failures surface as StorageUnavailableError
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from contacts_api.core.errors import (
    ContactNotFoundError,
    DuplicateFieldError,
    MissingFieldsError,
    StorageUnavailableError,
)
from contacts_api.core.validate_contact import normalize_contact_fields


def _fields(name="New Person", email="new@example.com", phone="5550000"):
    return normalize_contact_fields(name, email, phone)


# ─── create ──────────────────────────────────────────────────────

async def test_create_assigns_identity_and_defaults(store):
    contact = await store.create(_fields(email="  New@Example.com "))
    assert contact.id is not None
    assert contact.created_at is not None
    assert contact.email == "new@example.com"
    assert contact.is_deleted is False
    assert contact.last_updated_at is None
    assert contact.deleted_at is None

    fetched = await store.get_by_id(contact.id)
    assert fetched.name == "New Person"


async def test_create_increments_count_by_one(store, seeded):
    _, before = await store.list(0, 10)
    await store.create(_fields())
    _, after = await store.list(0, 10)
    assert after == before + 1


async def test_create_rejects_missing_fields(store):
    with pytest.raises(MissingFieldsError):
        await store.create(_fields(name="  "))


async def test_create_duplicate_email_case_insensitive(store, seeded):
    with pytest.raises(DuplicateFieldError) as exc_info:
        await store.create(_fields(email="TEST.ONE@example.com"))
    assert exc_info.value.field == "email"


async def test_create_duplicate_phone(store, seeded):
    with pytest.raises(DuplicateFieldError) as exc_info:
        await store.create(_fields(phone="2222222222"))
    assert exc_info.value.field == "phone"


async def test_email_conflict_reported_before_phone(store, seeded):
    with pytest.raises(DuplicateFieldError) as exc_info:
        await store.create(_fields(email="test.one@example.com", phone="2222222222"))
    assert exc_info.value.field == "email"


async def test_soft_deleted_contact_still_blocks_reuse(store, seeded):
    await store.soft_delete(seeded[0].id)
    with pytest.raises(DuplicateFieldError):
        await store.create(_fields(email=seeded[0].email))


# ─── update ──────────────────────────────────────────────────────

async def test_update_overwrites_and_stamps(store, seeded):
    target = seeded[0]
    updated = await store.update(
        target.id, _fields(name=" Renamed ", email=target.email, phone="0000000000"),
    )
    assert updated.name == "Renamed"
    assert updated.phone == "0000000000"
    assert updated.last_updated_at is not None

    fetched = await store.get_by_id(target.id)
    assert fetched.phone == "0000000000"
    assert fetched.created_at is not None


async def test_update_with_own_values_succeeds(store, seeded):
    target = seeded[0]
    updated = await store.update(
        target.id, _fields(name=target.name, email=target.email, phone=target.phone),
    )
    assert updated.email == target.email


async def test_update_to_other_contacts_email_conflicts(store, seeded):
    with pytest.raises(DuplicateFieldError) as exc_info:
        await store.update(
            seeded[0].id, _fields(email=seeded[1].email, phone=seeded[0].phone),
        )
    assert exc_info.value.field == "email"
    assert "Another contact" in exc_info.value.message


async def test_update_conflict_leaves_record_untouched(store, seeded):
    with pytest.raises(DuplicateFieldError):
        await store.update(
            seeded[0].id,
            _fields(name="Changed", email=seeded[0].email, phone=seeded[1].phone),
        )
    fetched = await store.get_by_id(seeded[0].id)
    assert fetched.name == "Test User One"
    assert fetched.last_updated_at is None


async def test_update_missing_contact_raises_not_found(store, seeded):
    with pytest.raises(ContactNotFoundError):
        await store.update(uuid4(), _fields())


# ─── soft_delete / get_by_id ─────────────────────────────────────

async def test_soft_delete_hides_from_list_only(store, seeded):
    deleted = await store.soft_delete(seeded[0].id)
    assert deleted.is_deleted is True
    assert deleted.deleted_at is not None

    contacts, total = await store.list(0, 10)
    assert [c.id for c in contacts] == [seeded[1].id]
    assert total == 1

    fetched = await store.get_by_id(seeded[0].id)
    assert fetched.is_deleted is True
    assert fetched.deleted_at is not None


async def test_soft_delete_missing_contact_raises_not_found(store):
    with pytest.raises(ContactNotFoundError):
        await store.soft_delete(uuid4())


async def test_get_missing_contact_raises_not_found(store):
    with pytest.raises(ContactNotFoundError):
        await store.get_by_id(uuid4())


# ─── list ────────────────────────────────────────────────────────

async def test_list_orders_by_insertion_and_windows(store):
    created = [
        await store.create(_fields(name=f"P{i}", email=f"p{i}@x.io", phone=f"{i}"))
        for i in range(5)
    ]
    page, total = await store.list(skip=2, limit=2)
    assert [c.id for c in page] == [created[2].id, created[3].id]
    assert total == 5


async def test_list_beyond_range_is_empty(store, seeded):
    page, total = await store.list(skip=50, limit=10)
    assert list(page) == []
    assert total == 2


async def test_clear_removes_everything(store, seeded):
    assert await store.clear() == 2
    _, total = await store.list(0, 10)
    assert total == 0


# ─── commit-time uniqueness race ─────────────────────────────────

def _skip_first_uniqueness_check(store, monkeypatch):
    """Let the first pre-check pass, as if a concurrent insert landed after it."""
    original = store._ensure_unique
    calls = []

    async def racing_check(db, fields, exclude_id=None):
        calls.append(exclude_id)
        if len(calls) == 1:
            return None
        return await original(db, fields, exclude_id=exclude_id)

    monkeypatch.setattr(store, "_ensure_unique", racing_check)
    return calls


async def test_create_race_resolved_to_duplicate_field(store, seeded, monkeypatch):
    calls = _skip_first_uniqueness_check(store, monkeypatch)
    with pytest.raises(DuplicateFieldError) as exc_info:
        await store.create(_fields(email=seeded[0].email, phone="5551234"))
    assert exc_info.value.field == "email"
    assert exc_info.value.http_status == 409
    assert len(calls) == 2

    _, total = await store.list(0, 10)
    assert total == 2


async def test_update_race_resolved_to_duplicate_field(store, seeded, monkeypatch):
    calls = _skip_first_uniqueness_check(store, monkeypatch)
    with pytest.raises(DuplicateFieldError) as exc_info:
        await store.update(
            seeded[0].id,
            _fields(name="Changed", email=seeded[1].email, phone=seeded[0].phone),
        )
    assert exc_info.value.field == "email"
    assert "Another contact" in exc_info.value.message
    assert calls == [seeded[0].id, seeded[0].id]

    fetched = await store.get_by_id(seeded[0].id)
    assert fetched.name == "Test User One"
    assert fetched.email == seeded[0].email
    assert fetched.last_updated_at is None


# ─── storage failures ────────────────────────────────────────────

async def test_driver_failure_maps_to_storage_unavailable(store, monkeypatch):
    async def broken_execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(
        "sqlalchemy.ext.asyncio.AsyncSession.execute", broken_execute,
    )
    with pytest.raises(StorageUnavailableError):
        await store.list(0, 10)


async def test_is_ready_reports_connectivity(store):
    assert await store.is_ready() is True
