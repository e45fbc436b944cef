"""Pydantic schemas for the user and organizer dashboards."""
from __future__ import annotations
from datetime import date
from pydantic import BaseModel

from eventhub.schemas.event import EventOut
from eventhub.schemas.registration import Registration


class UserDashboardOut(BaseModel):
    upcoming: list[Registration] = []
    past: list[Registration] = []
    total_registrations: int


class CalendarDayOut(BaseModel):
    day: date
    registrations: list[Registration] = []


class OrganizerStatsOut(BaseModel):
    total_events: int
    total_registrations: int
    total_revenue: float
    active_events: int


class OrganizerDashboardOut(BaseModel):
    stats: OrganizerStatsOut
    events: list[EventOut] = []
    registrations: list[Registration] = []
