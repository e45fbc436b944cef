"""Session store: holds the identity of the current session.

There is no user directory: login checks a fixed table of demo accounts and
registration always succeeds. The store only remembers the last identity that
logged in, in a single persisted slot.
"""
import logging
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from eventhub.schemas.identity import Identity, Role
from eventhub.storage import KeyValueStore

logger = logging.getLogger(__name__)

IDENTITY_SLOT = "eventhub_user"


@dataclass(frozen=True)
class DemoAccount:
    password: str
    user_id: str
    name: str
    role: Role


# Plain-text stand-ins for a real auth backend.
DEMO_ACCOUNTS = {
    "organizer@eventhub.com": DemoAccount("org123", "2", "Event Organizer", Role.organizer),
    "user@eventhub.com": DemoAccount("user123", "3", "John Doe", Role.regular),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class SessionStore:
    """Current identity plus its persisted slot; the two never diverge."""

    def __init__(
        self,
        storage: KeyValueStore,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._storage = storage
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id
        self._lock = threading.RLock()
        self._current = self._restore()

    @property
    def current(self) -> Optional[Identity]:
        return self._current

    def _restore(self) -> Optional[Identity]:
        raw = self._storage.get(IDENTITY_SLOT)
        if raw is None:
            return None
        try:
            identity = Identity.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring unreadable identity slot: %s", exc)
            return None
        logger.info("Restored session for %s (%s)", identity.email, identity.role.value)
        return identity

    def _set_current(self, identity: Identity) -> None:
        with self._lock:
            self._storage.set(IDENTITY_SLOT, identity.model_dump_json())
            self._current = identity

    def login(self, email: str, password: str) -> bool:
        """Log in with one of the demo accounts. Returns False on any mismatch."""
        account = DEMO_ACCOUNTS.get(email)
        if account is None or account.password != password:
            logger.info("Rejected login for %s", email)
            return False

        self._set_current(Identity(
            id=account.user_id,
            name=account.name,
            email=email,
            role=account.role,
            created_at=self._clock(),
        ))
        logger.info("Logged in %s as %s", email, account.role.value)
        return True

    def register(self, name: str, email: str, password: str, role: Role = Role.regular) -> bool:
        """Start a session for a brand-new identity. Always succeeds."""
        identity = Identity(
            id=self._id_factory(),
            name=name,
            email=email,
            role=Role(role),
            created_at=self._clock(),
        )
        self._set_current(identity)
        logger.info("Registered %s (%s) as %s", identity.email, identity.id, identity.role.value)
        return True

    def logout(self) -> None:
        with self._lock:
            self._storage.remove(IDENTITY_SLOT)
            previous, self._current = self._current, None
        if previous:
            logger.info("Logged out %s", previous.email)
