"""Contacts API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContactsError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The contact store is opened on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store kept on app.state and injected with Depends: no process-wide handle
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contacts_api.api.error_handlers import register_error_handlers
from contacts_api.api.routes import contacts, health, home
from contacts_api.config import get_settings
from contacts_api.infrastructure.contact_store import ContactStore
from contacts_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = ContactStore.from_settings(settings)
    await store.open(create_tables=settings.database_create_tables)
    app.state.contact_store = store
    logger.info("Contacts API started")
    yield
    logger.info("Contacts API shutting down")
    await store.close()
    app.state.contact_store = None


app = FastAPI(
    title="Contacts API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(home.router)
app.include_router(health.router)
app.include_router(contacts.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
