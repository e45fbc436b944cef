"""Key-value persistence slots backing the session and catalog stores.

Stores only ever see the ``KeyValueStore`` interface, so the backend is
swappable: a SQL table in production, a plain dict in tests.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from sqlalchemy.orm import Session

from eventhub.config import Settings
from eventhub.database import Base, SessionLocal, engine
from eventhub.models.storage_slot import StorageSlot

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Synchronous string-keyed persistence facility."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if the slot is empty."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Empty the slot. Removing an empty slot is a no-op."""
        ...


class MemoryKeyValueStore(KeyValueStore):
    """Process-local dict; contents are lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class SqlKeyValueStore(KeyValueStore):
    """Slots kept as rows of the ``storage_slots`` table."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        db = self._session_factory()
        try:
            slot = db.query(StorageSlot).filter(StorageSlot.key == key).first()
            return slot.value if slot else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db = self._session_factory()
        try:
            slot = db.query(StorageSlot).filter(StorageSlot.key == key).first()
            if slot:
                slot.value = value
            else:
                db.add(StorageSlot(key=key, value=value))
            db.commit()
        finally:
            db.close()
        logger.debug("Wrote slot %s (%d bytes)", key, len(value))

    def remove(self, key: str) -> None:
        db = self._session_factory()
        try:
            db.query(StorageSlot).filter(StorageSlot.key == key).delete()
            db.commit()
        finally:
            db.close()
        logger.debug("Removed slot %s", key)


def build_storage(settings: Settings) -> KeyValueStore:
    """Pick the persistence backend named by ``STORAGE_BACKEND``."""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "memory":
        logger.info("Using in-memory storage; state will not survive a restart")
        return MemoryKeyValueStore()
    if backend == "sql":
        Base.metadata.create_all(bind=engine)
        logger.info("Using SQL storage at %s", engine.url.render_as_string(hide_password=True))
        return SqlKeyValueStore(SessionLocal)
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND!r}")
