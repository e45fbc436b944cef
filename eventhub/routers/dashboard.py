"""Dashboard API routes: per-user bookings and per-organizer stats."""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Query

from eventhub.deps import get_catalog_store, get_current_identity, require_organizer
from eventhub.routers.events import to_event_out
from eventhub.schemas.dashboard import (
    CalendarDayOut,
    OrganizerDashboardOut,
    OrganizerStatsOut,
    UserDashboardOut,
)
from eventhub.schemas.identity import Identity
from eventhub.services import stats_service
from eventhub.services.catalog_service import CatalogStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/user", response_model=UserDashboardOut)
def user_dashboard(
    identity: Identity = Depends(get_current_identity),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """The current user's registrations split into upcoming and past."""
    registrations = catalog.get_user_registrations(identity.id)
    upcoming, past = stats_service.split_upcoming_past(registrations, datetime.now(timezone.utc))
    return UserDashboardOut(upcoming=upcoming, past=past, total_registrations=len(registrations))


@router.get("/user/calendar", response_model=list[CalendarDayOut])
def user_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    identity: Identity = Depends(get_current_identity),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """Days of one month on which the current user has a booked event."""
    buckets = stats_service.calendar_month(
        catalog.get_user_registrations(identity.id),
        year,
        month,
    )
    return [CalendarDayOut(day=day, registrations=regs) for day, regs in buckets.items()]


@router.get("/organizer", response_model=OrganizerDashboardOut)
def organizer_dashboard(
    organizer: Identity = Depends(require_organizer),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """The organizer's events, every registration on them, and headline stats."""
    events = catalog.get_organizer_events(organizer.id)
    registrations = [r for e in events for r in catalog.get_event_registrations(e.id)]
    return OrganizerDashboardOut(
        stats=OrganizerStatsOut(**stats_service.organizer_summary(events)),
        events=[to_event_out(e) for e in events],
        registrations=registrations,
    )
