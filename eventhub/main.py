"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from eventhub.config import settings
from eventhub.logging_setup import setup_logging
from eventhub.storage import build_storage
from eventhub.services.catalog_service import CatalogStore
from eventhub.services.session_service import SessionStore

# Import routers
from eventhub.routers import auth, events, dashboard

logger = logging.getLogger(__name__)

app = FastAPI(
    title="EventHub",
    description="Event discovery and registration: browse, book, and organize events",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])


@app.on_event("startup")
def on_startup():
    """Build the session and catalog stores once; handlers receive them via deps."""
    setup_logging(settings.LOG_LEVEL)
    storage = build_storage(settings)
    app.state.session_store = SessionStore(storage)
    app.state.catalog_store = CatalogStore(storage)
    logger.info("EventHub started with %s storage", settings.STORAGE_BACKEND)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
