"""Pydantic schemas for Registrations."""
from __future__ import annotations
import enum
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from eventhub.schemas.event import Event


class RegistrationStatus(str, enum.Enum):
    confirmed = "confirmed"
    cancelled = "cancelled"


class Registration(BaseModel):
    id: str
    event_id: str
    user_id: str
    user_name: str
    user_email: str
    quantity: int
    total_price: float
    status: RegistrationStatus = RegistrationStatus.confirmed
    registered_at: datetime
    event: Optional[Event] = None  # snapshot taken when the registration was made

    model_config = ConfigDict(frozen=True)


class RegistrationCreate(BaseModel):
    quantity: int = Field(default=1, ge=1)
