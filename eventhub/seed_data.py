"""Static configuration: event categories and the demo catalog seeded on first run."""
from datetime import datetime, timezone

from eventhub.schemas.event import Event, EventStatus

CATEGORIES = [
    "Technology",
    "Music",
    "Art",
    "Business",
    "Food & Drink",
    "Sports",
    "Education",
    "Health & Wellness",
    "Entertainment",
    "Community",
]

DEFAULT_EVENT_IMAGE = (
    "https://images.pexels.com/photos/2747449/pexels-photo-2747449.jpeg"
    "?auto=compress&cs=tinysrgb&w=800"
)

DEMO_ORGANIZER_ID = "2"
DEMO_ORGANIZER_NAME = "Event Organizer"

_SEEDED_AT = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


DEMO_EVENTS = [
    Event(
        id="1",
        title="Tech Innovation Summit",
        description="A full day of talks and demos on applied AI, cloud platforms and developer tooling.",
        organizer_name=DEMO_ORGANIZER_NAME,
        organizer_id=DEMO_ORGANIZER_ID,
        date=_utc(2027, 3, 15),
        time="09:00",
        location="San Francisco Convention Center",
        capacity=500,
        price=299.0,
        category="Technology",
        tags=["AI", "Cloud", "Networking"],
        image="https://images.pexels.com/photos/2774556/pexels-photo-2774556.jpeg?auto=compress&cs=tinysrgb&w=800",
        booking_count=342,
        status=EventStatus.active,
        created_at=_SEEDED_AT,
    ),
    Event(
        id="2",
        title="Summer Music Festival",
        description="Three stages of live bands and DJs, food trucks and an open-air night programme.",
        organizer_name="Harmony Events",
        organizer_id="4",
        date=_utc(2027, 7, 20),
        time="14:00",
        location="Golden Gate Park",
        capacity=2000,
        price=89.0,
        category="Music",
        tags=["Festival", "Outdoor", "Live"],
        image="https://images.pexels.com/photos/1190298/pexels-photo-1190298.jpeg?auto=compress&cs=tinysrgb&w=800",
        booking_count=1567,
        status=EventStatus.active,
        created_at=_SEEDED_AT,
    ),
    Event(
        id="3",
        title="Modern Art Exhibition",
        description="Guided evening tour of contemporary works by emerging Bay Area artists.",
        organizer_name="City Gallery",
        organizer_id="5",
        date=_utc(2027, 2, 10),
        time="18:00",
        location="Museum of Modern Art",
        capacity=150,
        price=25.0,
        category="Art",
        tags=["Exhibition", "Contemporary"],
        image="https://images.pexels.com/photos/1839919/pexels-photo-1839919.jpeg?auto=compress&cs=tinysrgb&w=800",
        booking_count=89,
        status=EventStatus.active,
        created_at=_SEEDED_AT,
    ),
    Event(
        id="4",
        title="Startup Pitch Night",
        description="Ten early-stage founders pitch to a panel of investors. Drinks and networking after.",
        organizer_name=DEMO_ORGANIZER_NAME,
        organizer_id=DEMO_ORGANIZER_ID,
        date=_utc(2027, 4, 8),
        time="19:00",
        location="Innovation Hub, Downtown",
        capacity=120,
        price=15.0,
        category="Business",
        tags=["Startups", "Investors", "Pitching"],
        image="https://images.pexels.com/photos/1181396/pexels-photo-1181396.jpeg?auto=compress&cs=tinysrgb&w=800",
        booking_count=64,
        status=EventStatus.active,
        created_at=_SEEDED_AT,
    ),
    Event(
        id="5",
        title="Farm-to-Table Cooking Class",
        description="Cook a four-course seasonal menu with ingredients from local farms.",
        organizer_name="Taste Collective",
        organizer_id="6",
        date=_utc(2027, 5, 22),
        time="11:00",
        location="The Culinary Studio",
        capacity=20,
        price=120.0,
        category="Food & Drink",
        tags=["Cooking", "Workshop"],
        image="https://images.pexels.com/photos/3338497/pexels-photo-3338497.jpeg?auto=compress&cs=tinysrgb&w=800",
        booking_count=18,
        status=EventStatus.active,
        created_at=_SEEDED_AT,
    ),
    Event(
        id="6",
        title="Community Wellness Morning",
        description="Outdoor yoga, a guided meditation and a short talk on sleep and recovery.",
        organizer_name=DEMO_ORGANIZER_NAME,
        organizer_id=DEMO_ORGANIZER_ID,
        date=_utc(2027, 6, 5),
        time="08:00",
        location="Marina Green",
        capacity=60,
        price=0.0,
        category="Health & Wellness",
        tags=["Yoga", "Meditation", "Free"],
        image="https://images.pexels.com/photos/3822622/pexels-photo-3822622.jpeg?auto=compress&cs=tinysrgb&w=800",
        booking_count=0,
        status=EventStatus.active,
        created_at=_SEEDED_AT,
    ),
]
