"""Catalog store: owns the event catalog and the registration ledger.

Invariants enforced here:
- 0 <= booking_count <= capacity for every event
- at most one registration per (event_id, user_id), whatever its status
- every mutation is persisted before it becomes visible in memory

Failures are reported as a bare False; callers cannot tell a missing event
from a duplicate or a full one.
"""
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from eventhub.schemas.event import Event, EventDraft
from eventhub.schemas.registration import Registration, RegistrationStatus
from eventhub.seed_data import DEMO_EVENTS
from eventhub.storage import KeyValueStore

logger = logging.getLogger(__name__)

EVENTS_SLOT = "eventhub_events"
REGISTRATIONS_SLOT = "eventhub_registrations"

_events_adapter = TypeAdapter(list[Event])
_registrations_adapter = TypeAdapter(list[Registration])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class CatalogStore:
    """Event catalog plus registration ledger, each backed by one slot."""

    def __init__(
        self,
        storage: KeyValueStore,
        seed: Optional[Sequence[Event]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._storage = storage
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id
        self._lock = threading.RLock()
        self._events = self._load_events(list(DEMO_EVENTS if seed is None else seed))
        self._registrations = self._load_registrations()

    # ── Loading ────────────────────────────────────────────────────

    def _load_events(self, seed: list[Event]) -> list[Event]:
        raw = self._storage.get(EVENTS_SLOT)
        if raw is not None:
            try:
                events = _events_adapter.validate_json(raw)
                logger.info("Loaded %d events from storage", len(events))
                return events
            except ValidationError as exc:
                logger.error("Catalog slot is unreadable, reseeding: %s", exc)

        self._storage.set(EVENTS_SLOT, _events_adapter.dump_json(seed).decode())
        logger.info("Seeded catalog with %d demo events", len(seed))
        return seed

    def _load_registrations(self) -> list[Registration]:
        raw = self._storage.get(REGISTRATIONS_SLOT)
        if raw is None:
            return []
        try:
            registrations = _registrations_adapter.validate_json(raw)
        except ValidationError as exc:
            logger.error("Ledger slot is unreadable, starting empty: %s", exc)
            return []
        logger.info("Loaded %d registrations from storage", len(registrations))
        return registrations

    def _persist_events(self, events: list[Event]) -> None:
        self._storage.set(EVENTS_SLOT, _events_adapter.dump_json(events).decode())

    def _persist_registrations(self, registrations: list[Registration]) -> None:
        self._storage.set(REGISTRATIONS_SLOT, _registrations_adapter.dump_json(registrations).decode())

    # ── Read-only views ────────────────────────────────────────────

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    @property
    def registrations(self) -> list[Registration]:
        return list(self._registrations)

    def get_event(self, event_id: str) -> Optional[Event]:
        return next((e for e in self._events if e.id == event_id), None)

    def is_registered(self, event_id: str, user_id: str) -> bool:
        return any(r.event_id == event_id and r.user_id == user_id for r in self._registrations)

    def get_user_registrations(self, user_id: str) -> list[Registration]:
        return [r for r in self._registrations if r.user_id == user_id]

    def get_event_registrations(self, event_id: str) -> list[Registration]:
        return [r for r in self._registrations if r.event_id == event_id]

    def get_organizer_events(self, organizer_id: str) -> list[Event]:
        return [e for e in self._events if e.organizer_id == organizer_id]

    # ── Mutations ──────────────────────────────────────────────────

    def create_event(self, draft: EventDraft) -> Event:
        """Add an event to the catalog. Performs no validation of the draft."""
        with self._lock:
            data = draft.model_dump()
            data.update(id=self._id_factory(), booking_count=0, created_at=self._clock())
            event = Event(**data)
            events = self._events + [event]
            self._persist_events(events)
            self._events = events
        logger.info("Created event '%s' (%s) by organizer %s", event.title, event.id, event.organizer_id)
        return event

    def register_for_event(
        self,
        event_id: str,
        user_id: str,
        user_name: str,
        user_email: str,
        quantity: int,
    ) -> bool:
        """Book quantity tickets on an event for a user.

        Returns False, leaving catalog and ledger untouched, when the event does
        not exist, quantity is below one, the user already holds a
        registration for it, or the booking would exceed capacity.
        """
        with self._lock:
            event = self.get_event(event_id)
            if event is None:
                logger.info("Registration refused: event %s not found", event_id)
                return False

            if quantity < 1:
                logger.info("Registration refused: quantity %d for event %s", quantity, event_id)
                return False

            if self.is_registered(event_id, user_id):
                logger.info("Registration refused: user %s already registered for %s", user_id, event_id)
                return False

            if event.booking_count + quantity > event.capacity:
                logger.info(
                    "Registration refused: %d + %d exceeds capacity %d of event %s",
                    event.booking_count, quantity, event.capacity, event_id,
                )
                return False

            registration = Registration(
                id=self._id_factory(),
                event_id=event_id,
                user_id=user_id,
                user_name=user_name,
                user_email=user_email,
                quantity=quantity,
                total_price=event.price * quantity,
                status=RegistrationStatus.confirmed,
                registered_at=self._clock(),
                event=event,
            )
            registrations = self._registrations + [registration]
            self._persist_registrations(registrations)
            self._registrations = registrations

            booked = event.model_copy(update={"booking_count": event.booking_count + quantity})
            events = [booked if e.id == event_id else e for e in self._events]
            self._persist_events(events)
            self._events = events

        logger.info(
            "Registered user %s for event %s (%d tickets, %.2f total)",
            user_id, event_id, quantity, registration.total_price,
        )
        return True
