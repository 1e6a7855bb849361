"""Root conftest - shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_contact_store dependency overridden to use the test store
    - app.state.contact_store set for routes that read it directly (readiness)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; UNIQUE constraints and
      ordering behave the same as on PostgreSQL for these queries
    - ASGITransport does not run the lifespan, so the fixtures wire the store
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from contacts_api.api.dependencies import get_contact_store  # noqa: E402
from contacts_api.core.validate_contact import normalize_contact_fields  # noqa: E402
from contacts_api.infrastructure.contact_store import ContactStore  # noqa: E402
from contacts_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from contacts_api.main import app  # noqa: E402

INITIAL_CONTACTS = [
    {"name": "Test User One", "email": "test.one@example.com", "phone": "1111111111"},
    {"name": "Test User Two", "email": "test.two@example.com", "phone": "2222222222"},
]


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
async def store(db_manager):
    return ContactStore(db_manager)


@pytest.fixture
async def seeded(store):
    """Two live contacts, in insertion order."""
    return [
        await store.create(normalize_contact_fields(**data))
        for data in INITIAL_CONTACTS
    ]


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_contact_store] = lambda: store
    app.state.contact_store = store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.contact_store = None
