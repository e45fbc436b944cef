"""FastAPI dependencies handing the startup-built stores to route handlers."""
from fastapi import Depends, HTTPException, Request, status

from eventhub.schemas.identity import Identity, Role
from eventhub.services.catalog_service import CatalogStore
from eventhub.services.session_service import SessionStore


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store


def get_current_identity(sessions: SessionStore = Depends(get_session_store)) -> Identity:
    """The logged-in identity, or 401.

    The session store is process-wide, so every client acts as whoever
    logged in last.
    """
    identity = sessions.current
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return identity


def require_organizer(identity: Identity = Depends(get_current_identity)) -> Identity:
    """The logged-in identity if it is an organizer, or 403."""
    if identity.role != Role.organizer:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only organizers can do this")
    return identity
