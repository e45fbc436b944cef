"""Pytest fixtures: in-memory stores with a controllable clock, plus a SQLite engine."""
import os
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Keep app startup off the on-disk database
os.environ["STORAGE_BACKEND"] = "memory"

from eventhub.database import Base
from eventhub.deps import get_catalog_store, get_session_store
from eventhub.main import app
from eventhub.schemas.event import Event, EventDraft, EventStatus
from eventhub.schemas.registration import Registration, RegistrationStatus
from eventhub.services.catalog_service import CatalogStore
from eventhub.services.session_service import SessionStore
from eventhub.storage import MemoryKeyValueStore, SqlKeyValueStore

# Import all models so they register with Base.metadata
from eventhub.models.storage_slot import StorageSlot  # noqa: F401

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def storage():
    return MemoryKeyValueStore()


@pytest.fixture
def session_store(storage, clock):
    return SessionStore(storage, clock=clock)


@pytest.fixture
def catalog_store(storage, clock):
    return CatalogStore(storage, clock=clock)


@pytest.fixture
def empty_catalog(storage, clock):
    """A catalog seeded with nothing, for tests that build their own events."""
    return CatalogStore(storage, seed=[], clock=clock)


@pytest.fixture
def client(session_store, catalog_store):
    """FastAPI TestClient with the stores overridden to the in-memory fixtures."""
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_catalog_store] = lambda: catalog_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db_engine(tmp_path):
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def sql_storage(db_engine):
    return SqlKeyValueStore(sessionmaker(autocommit=False, autoflush=False, bind=db_engine))


# ---------------------------------------------------------------------------
# Helpers: build domain objects directly
# ---------------------------------------------------------------------------
def make_draft(**overrides) -> EventDraft:
    """Helper: an EventDraft with sensible defaults."""
    data = {
        "title": "Test Event",
        "description": "Something worth attending",
        "organizer_name": "Event Organizer",
        "organizer_id": "2",
        "date": NOW + timedelta(days=30),
        "time": "18:30",
        "location": "Town Hall",
        "capacity": 10,
        "price": 29.99,
        "category": "Community",
        "tags": ["test"],
        "image": "https://example.com/event.jpg",
        "status": EventStatus.active,
    }
    data.update(overrides)
    return EventDraft(**data)


def make_event(**overrides) -> Event:
    """Helper: a stored-looking Event without going through a catalog."""
    data = make_draft().model_dump()
    data.update(id="evt-1", booking_count=0, created_at=NOW)
    data.update(overrides)
    return Event(**data)


def make_registration(event, **overrides) -> Registration:
    """Helper: a confirmed Registration carrying a snapshot of event."""
    data = {
        "id": "reg-1",
        "event_id": event.id if event else "missing",
        "user_id": "3",
        "user_name": "John Doe",
        "user_email": "user@eventhub.com",
        "quantity": 1,
        "total_price": event.price if event else 0.0,
        "status": RegistrationStatus.confirmed,
        "registered_at": NOW,
        "event": event,
    }
    data.update(overrides)
    return Registration(**data)


# ---------------------------------------------------------------------------
# Helpers: drive the API
# ---------------------------------------------------------------------------
DEMO_CREDENTIALS = {
    "organizer": ("organizer@eventhub.com", "org123"),
    "user": ("user@eventhub.com", "user123"),
}


def login_as(client: TestClient, who: str = "user") -> dict:
    """Helper: POST /api/auth/login with a demo account and return the identity."""
    email, password = DEMO_CREDENTIALS[who]
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


def create_test_event(client: TestClient, **overrides) -> dict:
    """Helper: POST /api/events as the current identity and return response JSON."""
    payload = {
        "title": "Meetup",
        "description": "Monthly community meetup",
        "date": (NOW + timedelta(days=60)).date().isoformat(),
        "time": "19:00",
        "location": "Library",
        "capacity": 5,
        "price": 12.5,
        "category": "Community",
        "tags": "local, monthly",
    }
    payload.update(overrides)
    resp = client.post("/api/events/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()
