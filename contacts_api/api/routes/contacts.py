"""Contacts Routes - list, fetch, create, update and soft-delete contacts.

Invariants:
    - Request flow: parse id -> validate body -> call store -> serialize
    - Malformed ids rejected (400) before the store is touched
    - Create and update both require name, email and phone (no partial updates)
    - Store errors propagate to the global handlers; routes never build error bodies
    - Collection routes answer on both "/api/contacts" and "/api/contacts/"

Design Decisions:
    - page/limit read as raw strings: unparseable values fall back to defaults
      rather than failing validation
    - Thin routes: normalization and presence rules live in core/validate_contact
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from contacts_api.api.dependencies import get_contact_store
from contacts_api.core.domain_types import parse_contact_id
from contacts_api.core.pagination import build_page_metadata, resolve_page_window
from contacts_api.core.repository_protocols import ContactRepository
from contacts_api.core.validate_contact import require_contact_fields
from contacts_api.schemas.contact import ContactPayload, serialize_contact

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.get("")
@router.get("/", include_in_schema=False)
async def list_contacts(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    store: ContactRepository = Depends(get_contact_store),
):
    """List live contacts with pagination metadata."""
    window = resolve_page_window(page, limit)
    contacts, total = await store.list(window.skip, window.limit)
    return {
        "contacts": [serialize_contact(c) for c in contacts],
        "metadata": build_page_metadata(total, window),
    }


@router.get("/{contact_id}")
async def get_contact(
    contact_id: str, store: ContactRepository = Depends(get_contact_store),
):
    """Get one contact by id, soft-deleted ones included."""
    contact = await store.get_by_id(parse_contact_id(contact_id))
    return serialize_contact(contact)


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_contact(
    body: ContactPayload, store: ContactRepository = Depends(get_contact_store),
):
    """Create a contact."""
    fields = require_contact_fields(body.to_fields())
    contact = await store.create(fields)
    return serialize_contact(contact)


@router.put("/{contact_id}")
async def update_contact(
    contact_id: str,
    body: ContactPayload,
    store: ContactRepository = Depends(get_contact_store),
):
    """Replace a contact's name, email and phone."""
    parsed_id = parse_contact_id(contact_id)
    fields = require_contact_fields(body.to_fields())
    contact = await store.update(parsed_id, fields)
    return serialize_contact(contact)


@router.delete("/{contact_id}")
async def delete_contact(
    contact_id: str, store: ContactRepository = Depends(get_contact_store),
):
    """Soft-delete a contact and return it."""
    contact = await store.soft_delete(parse_contact_id(contact_id))
    return {
        "message": "Contact deleted successfully",
        "deletedContact": serialize_contact(contact),
    }
