"""Pydantic schemas for Events."""
from __future__ import annotations
import enum
from datetime import date as date_type, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventStatus(str, enum.Enum):
    active = "active"
    cancelled = "cancelled"
    completed = "completed"


class EventDraft(BaseModel):
    """Everything an organizer supplies; the catalog assigns the rest."""

    title: str
    description: str
    organizer_name: str
    organizer_id: str
    date: datetime
    time: str  # time of day as entered, e.g. "19:00"
    location: str
    capacity: int
    price: float
    category: str
    tags: list[str] = []
    image: str = ""
    status: EventStatus = EventStatus.active

    model_config = ConfigDict(frozen=True)


class Event(EventDraft):
    id: str
    booking_count: int = 0
    created_at: datetime


class EventCreate(BaseModel):
    """Organizer form payload. Organizer name and id come from the session."""

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    date: date_type
    time: str = Field(min_length=1)
    location: str = Field(min_length=1)
    capacity: int = Field(ge=1)
    price: float = Field(ge=0)
    category: str = Field(min_length=1)
    tags: list[str] = []
    image: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value):
        """Accept the form's comma-separated string as well as a list."""
        if isinstance(value, str):
            value = value.split(",")
        return [tag.strip() for tag in value if tag and tag.strip()]


class EventOut(Event):
    available_spots: int
    is_full: bool
