"""Tests for the event endpoints.

Covers:
- Catalog listing, filters, and derived availability fields
- Event creation: organizer-only gate and form validation
- Booking: login required, 409 on every store refusal without detail
- Per-event registration list for the owning organizer
"""
from tests.conftest import create_test_event, login_as


class TestEventList:

    def test_list_seeded_catalog(self, client):
        resp = client.get("/api/events/")
        assert resp.status_code == 200
        events = resp.json()
        assert [e["id"] for e in events] == ["1", "2", "3", "4", "5", "6"]
        first = events[0]
        assert first["available_spots"] == first["capacity"] - first["booking_count"]
        assert first["is_full"] is False

    def test_filter_by_category(self, client):
        resp = client.get("/api/events/", params={"category": "Music"})
        assert [e["title"] for e in resp.json()] == ["Summer Music Festival"]

    def test_search_is_case_insensitive(self, client):
        resp = client.get("/api/events/", params={"search": "PITCH"})
        assert [e["id"] for e in resp.json()] == ["4"]

    def test_search_matches_tags(self, client):
        resp = client.get("/api/events/", params={"search": "yoga"})
        assert [e["id"] for e in resp.json()] == ["6"]

    def test_filter_by_status(self, client):
        resp = client.get("/api/events/", params={"status": "cancelled"})
        assert resp.status_code == 200
        assert resp.json() == []

    def test_categories(self, client):
        resp = client.get("/api/events/categories")
        assert resp.status_code == 200
        assert "Food & Drink" in resp.json()
        assert len(resp.json()) == 10

    def test_get_event(self, client):
        resp = client.get("/api/events/3")
        assert resp.status_code == 200
        assert resp.json()["title"] == "Modern Art Exhibition"

    def test_get_event_not_found(self, client):
        assert client.get("/api/events/does-not-exist").status_code == 404


class TestEventCreate:
    """Only organizers publish events; the payload is validated here, not in the store."""

    def test_create_requires_login(self, client):
        resp = client.post("/api/events/", json={"title": "x"})
        assert resp.status_code == 401

    def test_create_forbidden_for_regular_user(self, client):
        login_as(client, "user")
        resp = client.post("/api/events/", json={
            "title": "Nope", "description": "d", "date": "2027-01-01", "time": "10:00",
            "location": "L", "capacity": 1, "price": 0, "category": "Art",
        })
        assert resp.status_code == 403

    def test_create_event(self, client):
        organizer = login_as(client, "organizer")
        data = create_test_event(client, title="Board Games Night")
        assert data["title"] == "Board Games Night"
        assert data["organizer_id"] == organizer["id"]
        assert data["organizer_name"] == organizer["name"]
        assert data["booking_count"] == 0
        assert data["status"] == "active"
        assert data["tags"] == ["local", "monthly"]
        assert data["image"].startswith("https://images.pexels.com/")
        assert data["date"].startswith("2026-12-18T00:00:00")

    def test_created_event_is_listed_last(self, client):
        login_as(client, "organizer")
        created = create_test_event(client)
        ids = [e["id"] for e in client.get("/api/events/").json()]
        assert ids[-1] == created["id"]

    def test_create_accepts_tag_list(self, client):
        login_as(client, "organizer")
        data = create_test_event(client, tags=[" a ", "", "b"])
        assert data["tags"] == ["a", "b"]

    def test_create_rejects_zero_capacity(self, client):
        login_as(client, "organizer")
        resp = client.post("/api/events/", json={
            "title": "T", "description": "d", "date": "2027-01-01", "time": "10:00",
            "location": "L", "capacity": 0, "price": 0, "category": "Art",
        })
        assert resp.status_code == 422

    def test_create_rejects_negative_price(self, client):
        login_as(client, "organizer")
        resp = client.post("/api/events/", json={
            "title": "T", "description": "d", "date": "2027-01-01", "time": "10:00",
            "location": "L", "capacity": 5, "price": -1, "category": "Art",
        })
        assert resp.status_code == 422

    def test_create_rejects_missing_title(self, client):
        login_as(client, "organizer")
        resp = client.post("/api/events/", json={
            "title": "", "description": "d", "date": "2027-01-01", "time": "10:00",
            "location": "L", "capacity": 5, "price": 1, "category": "Art",
        })
        assert resp.status_code == 422

    def test_create_rejects_unknown_category(self, client):
        login_as(client, "organizer")
        resp = client.post("/api/events/", json={
            "title": "T", "description": "d", "date": "2027-01-01", "time": "10:00",
            "location": "L", "capacity": 5, "price": 1, "category": "Knitting",
        })
        assert resp.status_code == 400


class TestEventRegistration:

    def test_register_requires_login(self, client):
        resp = client.post("/api/events/1/register", json={"quantity": 1})
        assert resp.status_code == 401

    def test_register(self, client):
        user = login_as(client, "user")
        resp = client.post("/api/events/3/register", json={"quantity": 2})
        assert resp.status_code == 201
        data = resp.json()
        assert data["event_id"] == "3"
        assert data["user_id"] == user["id"]
        assert data["user_email"] == user["email"]
        assert data["quantity"] == 2
        assert data["total_price"] == 50.0
        assert data["status"] == "confirmed"
        assert data["event"]["booking_count"] == 89

        event = client.get("/api/events/3").json()
        assert event["booking_count"] == 91
        assert event["available_spots"] == 59

    def test_register_defaults_to_one_ticket(self, client):
        login_as(client, "user")
        resp = client.post("/api/events/1/register", json={})
        assert resp.status_code == 201
        assert resp.json()["quantity"] == 1

    def test_register_twice_conflicts(self, client):
        login_as(client, "user")
        assert client.post("/api/events/1/register", json={"quantity": 1}).status_code == 201
        resp = client.post("/api/events/1/register", json={"quantity": 1})
        assert resp.status_code == 409

    def test_register_over_capacity_conflicts(self, client):
        """Seeded cooking class has 2 of 20 seats left."""
        login_as(client, "user")
        resp = client.post("/api/events/5/register", json={"quantity": 3})
        assert resp.status_code == 409
        assert client.get("/api/events/5").json()["booking_count"] == 18

    def test_refusals_share_one_message(self, client):
        login_as(client, "user")
        client.post("/api/events/1/register", json={"quantity": 1})
        duplicate = client.post("/api/events/1/register", json={"quantity": 1})
        full = client.post("/api/events/5/register", json={"quantity": 3})
        missing = client.post("/api/events/nope/register", json={"quantity": 1})
        assert duplicate.status_code == full.status_code == missing.status_code == 409
        assert duplicate.json() == full.json() == missing.json()

    def test_register_rejects_zero_quantity(self, client):
        login_as(client, "user")
        resp = client.post("/api/events/1/register", json={"quantity": 0})
        assert resp.status_code == 422

    def test_fill_event_then_refuse(self, client):
        login_as(client, "organizer")
        event = create_test_event(client, capacity=2)
        login_as(client, "user")
        assert client.post(f"/api/events/{event['id']}/register", json={"quantity": 2}).status_code == 201
        refreshed = client.get(f"/api/events/{event['id']}").json()
        assert refreshed["is_full"] is True
        assert refreshed["available_spots"] == 0


class TestEventRegistrationList:

    def test_organizer_sees_own_event_registrations(self, client):
        login_as(client, "user")
        client.post("/api/events/4/register", json={"quantity": 2})
        login_as(client, "organizer")
        resp = client.get("/api/events/4/registrations")
        assert resp.status_code == 200
        regs = resp.json()
        assert len(regs) == 1
        assert regs[0]["user_name"] == "John Doe"
        assert regs[0]["total_price"] == 30.0

    def test_other_organizers_event_forbidden(self, client):
        login_as(client, "organizer")
        resp = client.get("/api/events/2/registrations")
        assert resp.status_code == 403

    def test_regular_user_forbidden(self, client):
        login_as(client, "user")
        assert client.get("/api/events/4/registrations").status_code == 403

    def test_unknown_event(self, client):
        login_as(client, "organizer")
        assert client.get("/api/events/nope/registrations").status_code == 404
