"""Pydantic schemas for the session identity."""
from __future__ import annotations
import enum
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class Role(str, enum.Enum):
    regular = "user"
    organizer = "organizer"


class Identity(BaseModel):
    """The actor of the current session. Persisted as-is in the identity slot."""

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime

    model_config = ConfigDict(frozen=True)


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str
    role: Role = Role.regular
