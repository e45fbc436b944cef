"""Session API routes for login, account registration and logout."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from eventhub.deps import get_current_identity, get_session_store
from eventhub.schemas.identity import Identity, LoginRequest, RegisterRequest
from eventhub.services.session_service import SessionStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=Identity)
def login(payload: LoginRequest, sessions: SessionStore = Depends(get_session_store)):
    """Log in with one of the demo accounts."""
    if not sessions.login(payload.email, payload.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    return sessions.current


@router.post("/register", response_model=Identity, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, sessions: SessionStore = Depends(get_session_store)):
    """Create an account and start a session for it."""
    sessions.register(payload.name, payload.email, payload.password, payload.role)
    return sessions.current


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(sessions: SessionStore = Depends(get_session_store)):
    """End the current session."""
    sessions.logout()


@router.get("/me", response_model=Identity)
def me(identity: Identity = Depends(get_current_identity)):
    """Return the identity of the current session."""
    return identity
