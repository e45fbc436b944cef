"""Event API routes: delegates to the catalog store for invariant enforcement."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from eventhub.config import settings
from eventhub.deps import get_catalog_store, get_current_identity, require_organizer
from eventhub.schemas.event import Event, EventCreate, EventDraft, EventOut, EventStatus
from eventhub.schemas.identity import Identity
from eventhub.schemas.registration import Registration, RegistrationCreate
from eventhub.seed_data import CATEGORIES, DEFAULT_EVENT_IMAGE
from eventhub.services.catalog_service import CatalogStore
from eventhub.services.stats_service import available_spots, is_full, local_midnight

logger = logging.getLogger(__name__)
router = APIRouter()


def to_event_out(event: Event) -> EventOut:
    return EventOut(**event.model_dump(), available_spots=available_spots(event), is_full=is_full(event))


def _matches(event: Event, search: str) -> bool:
    needle = search.lower()
    haystack = [event.title, event.description, event.location, *event.tags]
    return any(needle in text.lower() for text in haystack)


def _get_event_or_404(catalog: CatalogStore, event_id: str) -> Event:
    event = catalog.get_event(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.get("/", response_model=list[EventOut])
def list_events(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    status_filter: Optional[EventStatus] = Query(None, alias="status"),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """List the catalog in insertion order with optional filters."""
    events = catalog.events
    if category:
        events = [e for e in events if e.category == category]
    if search:
        events = [e for e in events if _matches(e, search)]
    if status_filter:
        events = [e for e in events if e.status == status_filter]
    return [to_event_out(e) for e in events]


@router.get("/categories", response_model=list[str])
def list_categories():
    """The fixed category list offered by the create-event form."""
    return CATEGORIES


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, catalog: CatalogStore = Depends(get_catalog_store)):
    """Fetch a single event by ID."""
    return to_event_out(_get_event_or_404(catalog, event_id))


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    organizer: Identity = Depends(require_organizer),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """Publish a new event owned by the logged-in organizer."""
    if payload.category not in CATEGORIES:
        raise HTTPException(status_code=400, detail=f"Unknown category: {payload.category}")

    draft = EventDraft(
        title=payload.title,
        description=payload.description,
        organizer_name=organizer.name,
        organizer_id=organizer.id,
        date=local_midnight(payload.date, settings.CALENDAR_TIMEZONE),
        time=payload.time,
        location=payload.location,
        capacity=payload.capacity,
        price=payload.price,
        category=payload.category,
        tags=payload.tags,
        image=payload.image or DEFAULT_EVENT_IMAGE,
        status=EventStatus.active,
    )
    return to_event_out(catalog.create_event(draft))


@router.post("/{event_id}/register", response_model=Registration, status_code=status.HTTP_201_CREATED)
def register_for_event(
    event_id: str,
    payload: RegistrationCreate = RegistrationCreate(),
    identity: Identity = Depends(get_current_identity),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """Book tickets for the logged-in user.

    Refusals are not broken down: a missing event, an existing registration
    and a full event all answer 409.
    """
    ok = catalog.register_for_event(event_id, identity.id, identity.name, identity.email, payload.quantity)
    if not ok:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Registration failed. The event may be full or you are already registered.",
        )
    return next(r for r in catalog.get_event_registrations(event_id) if r.user_id == identity.id)


@router.get("/{event_id}/registrations", response_model=list[Registration])
def list_event_registrations(
    event_id: str,
    organizer: Identity = Depends(require_organizer),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """Registrations for one of the organizer's own events."""
    event = _get_event_or_404(catalog, event_id)
    if event.organizer_id != organizer.id:
        raise HTTPException(status_code=403, detail="Only the event's organizer may view its registrations")
    return catalog.get_event_registrations(event_id)
