"""Integration tests for the scheduling API.

Run with: pytest tests/test_api.py -v
"""

import uuid
from datetime import date

import pytest
from rest_framework.test import APIClient

from scheduling.handlers.serializers import SessionSerializer
from scheduling.models import Booking, BookingSession, Venue


def create_booking(number: str, **fields) -> Booking:
    defaults = {
        "booking_number": number,
        "client_name": f"Client {number}",
        "event_type": "wedding",
        "event_date": date(2025, 1, 10),
    }
    defaults.update(fields)
    return Booking.objects.create(**defaults)


def add_session(booking: Booking, position: int, **fields) -> BookingSession:
    defaults = {
        "session_name": f"Session {position}",
        "venue": "Grand Ballroom",
        "session_date": date(2025, 1, 10),
        "start_time": "09:00",
        "end_time": "11:00",
    }
    defaults.update(fields)
    return BookingSession.objects.create(booking=booking, position=position, **defaults)


@pytest.fixture
def wedding() -> Booking:
    booking = create_booking("BOOK-2025-001", event_end_date=date(2025, 1, 12), event_duration=3)
    add_session(booking, 0, session_name="Reception", session_label="Dinner",
                start_time="19:00", end_time="23:00")
    add_session(booking, 1, session_name="Muhurtham", session_label="Breakfast",
                start_time="07:00", end_time="10:00")
    add_session(booking, 2, session_name="Farewell Lunch", session_label="Lunch",
                session_date=date(2025, 1, 12), start_time="12:00", end_time="15:00")
    return booking


@pytest.fixture
def conference() -> Booking:
    booking = create_booking("BOOK-2025-002", client_name="Rao Conference")
    add_session(booking, 0, session_name="Keynote", start_time="09:00", end_time="12:00")
    return booking


@pytest.mark.django_db
class TestVenueList:
    """Tests for GET /api/venues"""

    def test_lists_venues_by_name(self, api_client: APIClient):
        Venue.objects.create(name="Terrace")
        Venue.objects.create(name="Grand Ballroom", capacity=400)
        response = api_client.get("/api/venues")
        assert response.status_code == 200
        assert [v["name"] for v in response.json()] == ["Grand Ballroom", "Terrace"]
        assert response.json()[0]["capacity"] == 400


@pytest.mark.django_db
class TestSessionValidation:
    """Tests for POST /api/sessions/validate"""

    def test_valid_session(self, api_client: APIClient):
        response = api_client.post(
            "/api/sessions/validate",
            {"name": "Lunch", "venue": "Lawn", "day": "2025-01-10",
             "start_time": "12:00", "end_time": "15:00"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json() == {"valid": True, "violations": []}

    def test_accepts_iso_datetime_day(self, api_client: APIClient):
        response = api_client.post(
            "/api/sessions/validate",
            {"name": "Lunch", "venue": "Lawn", "day": "2025-01-10T00:00:00.000Z",
             "start_time": "12:00", "end_time": "15:00"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json() == {"valid": True, "violations": []}

    def test_rejects_unusable_day(self, api_client: APIClient):
        response = api_client.post(
            "/api/sessions/validate", {"name": "Lunch", "day": "next friday"}, format="json"
        )
        assert response.status_code == 400
        assert "day" in response.json()

    def test_reports_violations(self, api_client: APIClient):
        response = api_client.post(
            "/api/sessions/validate",
            {"name": "Lunch", "start_time": "15:00", "end_time": "12:00"},
            format="json",
        )
        body = response.json()
        assert response.status_code == 200
        assert body["valid"] is False
        assert {v["code"] for v in body["violations"]} == {
            "VENUE_REQUIRED", "DATE_REQUIRED", "END_NOT_AFTER_START"
        }


@pytest.mark.django_db
class TestConflictCheck:
    """Tests for POST /api/conflicts/check"""

    def test_reports_overlap(self, api_client: APIClient, wedding, conference):
        response = api_client.post(
            "/api/conflicts/check",
            {"venue": "Grand Ballroom", "date": "2025-01-10", "start_time": "11:00", "end_time": "12:30"},
            format="json",
        )
        body = response.json()
        assert response.status_code == 200
        assert body["has_conflicts"] is True
        [conflict] = body["conflicts"]
        assert conflict["booking_number"] == "BOOK-2025-002"
        assert conflict["session_name"] == "Keynote"
        assert conflict["interval"] == {"start": "09:00", "end": "12:00"}
        assert conflict["day"] == "2025-01-10"

    def test_touching_is_free(self, api_client: APIClient, conference):
        response = api_client.post(
            "/api/conflicts/check",
            {"venue": "Grand Ballroom", "date": "2025-01-10", "start_time": "12:00", "end_time": "14:00"},
            format="json",
        )
        assert response.json() == {"has_conflicts": False, "conflicts": []}

    def test_exclude_booking(self, api_client: APIClient, conference):
        response = api_client.post(
            "/api/conflicts/check",
            {"venue": "Grand Ballroom", "date": "2025-01-10", "start_time": "10:00",
             "end_time": "11:00", "exclude_booking_id": str(conference.id)},
            format="json",
        )
        assert response.json()["has_conflicts"] is False

    def test_invalid_time_returns_400(self, api_client: APIClient):
        response = api_client.post(
            "/api/conflicts/check",
            {"venue": "Grand Ballroom", "date": "2025-01-10", "start_time": "25:00", "end_time": "26:00"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TIME"

    def test_missing_venue_returns_400(self, api_client: APIClient):
        response = api_client.post("/api/conflicts/check", {"date": "2025-01-10"}, format="json")
        assert response.status_code == 400


@pytest.mark.django_db
class TestBatchConflictCheck:
    """Tests for POST /api/conflicts/check-batch"""

    def test_reports_each_clash(self, api_client: APIClient, wedding, conference):
        response = api_client.post(
            "/api/conflicts/check-batch",
            {
                "dates": ["2025-01-10T00:00:00.000Z", "2025-01-12"],
                "venues": [{"venue": "Grand Ballroom", "start_time": "11:00", "end_time": "13:00"}],
            },
            format="json",
        )
        body = response.json()
        assert response.status_code == 200
        assert body["has_conflicts"] is True
        assert [(c["day"], c["conflict"]["session_name"]) for c in body["conflicts"]] == [
            ("2025-01-10", "Keynote"),
            ("2025-01-12", "Farewell Lunch"),
        ]
        assert body["conflicts"][0]["requested"] == {"start": "11:00", "end": "13:00"}
        assert body["conflicts"][1]["conflict"]["status"] == "booked"

    def test_no_clash(self, api_client: APIClient, conference):
        response = api_client.post(
            "/api/conflicts/check-batch",
            {"dates": ["2025-01-11"], "venues": [{"venue": "Grand Ballroom", "all_day": True}]},
            format="json",
        )
        assert response.json() == {"has_conflicts": False, "conflicts": []}

    def test_invalid_date_returns_400(self, api_client: APIClient):
        response = api_client.post(
            "/api/conflicts/check-batch",
            {"dates": ["tomorrow"], "venues": [{"venue": "Lawn", "all_day": True}]},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DATE"

    def test_requires_dates_and_venues(self, api_client: APIClient):
        response = api_client.post(
            "/api/conflicts/check-batch", {"dates": [], "venues": []}, format="json"
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestCalendar:
    """Tests for the calendar endpoints."""

    def test_venue_conflicts_for_date(self, api_client: APIClient, wedding, conference):
        response = api_client.get("/api/calendar/2025-01-10/venue-conflicts")
        assert response.status_code == 200
        assert response.json() == {"date": "2025-01-10", "venues": ["Grand Ballroom"]}

    def test_venue_conflicts_invalid_date(self, api_client: APIClient):
        response = api_client.get("/api/calendar/not-a-date/venue-conflicts")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DATE"

    def test_month_cells(self, api_client: APIClient, wedding, conference):
        response = api_client.get("/api/calendar/2025/1")
        assert response.status_code == 200
        cells = {cell["day"]: cell for cell in response.json()}
        roles = {p["client_name"]: p["role"] for p in cells["2025-01-10"]["placements"]}
        assert roles == {"Client BOOK-2025-001": "start", "Rao Conference": "morning"}
        assert cells["2025-01-11"]["placements"][0]["half"] == "whole"

    def test_month_search_filter(self, api_client: APIClient, wedding, conference):
        response = api_client.get("/api/calendar/2025/1", {"search": "rao"})
        cells = {cell["day"]: cell for cell in response.json()}
        assert [p["client_name"] for p in cells["2025-01-10"]["placements"]] == ["Rao Conference"]

    def test_month_out_of_range(self, api_client: APIClient):
        response = api_client.get("/api/calendar/2025/13")
        assert response.status_code == 400


@pytest.mark.django_db
class TestBookingEndpoints:
    """Tests for GET /api/bookings/{id}/..."""

    def test_occurrences(self, api_client: APIClient, wedding):
        response = api_client.get(f"/api/bookings/{wedding.id}/occurrences")
        assert response.status_code == 200
        assert [(o["day"], o["role"], o["day_index"]) for o in response.json()] == [
            ("2025-01-10", "start", 0),
            ("2025-01-11", "middle", 1),
            ("2025-01-12", "end", 2),
        ]

    def test_session_days(self, api_client: APIClient, wedding):
        response = api_client.get(f"/api/bookings/{wedding.id}/session-days")
        body = response.json()
        assert response.status_code == 200
        assert [g["day_number"] for g in body["groups"]] == [1, 3]
        first_day = [e["session"]["name"] for e in body["groups"][0]["entries"]]
        assert first_day == ["Muhurtham", "Reception"]
        assert sorted(body["session_numbers"].values()) == [1, 2, 3]

    def test_session_days_pad_single_digit_hours(self, api_client: APIClient):
        booking = create_booking("BOOK-2025-003")
        add_session(booking, 0, start_time="9:30", end_time="11:00")
        response = api_client.get(f"/api/bookings/{booking.id}/session-days")
        [entry] = response.json()["groups"][0]["entries"]
        assert entry["session"]["start_time"] == "09:30"

    def test_booking_conflicts(self, api_client: APIClient, wedding, conference):
        response = api_client.get(f"/api/bookings/{conference.id}/conflicts")
        [result] = response.json()
        assert result["session_name"] == "Keynote"
        assert [c["session_name"] for c in result["conflicts"]] == ["Muhurtham"]

    def test_date_conflicts(self, api_client: APIClient, wedding, conference):
        response = api_client.get(f"/api/bookings/{wedding.id}/date-conflicts")
        body = response.json()
        assert body["has_conflicts"] is True
        assert body["booking_ids"] == [str(conference.id)]
        assert body["days"] == ["2025-01-10"]

    def test_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/bookings/{uuid.uuid4()}/occurrences")
        assert response.status_code == 404
        assert response.json() == {"code": "BOOKING_NOT_FOUND", "message": "Booking not found"}

    def test_invalid_id(self, api_client: APIClient):
        response = api_client.get("/api/bookings/abc/session-days")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_BOOKING_ID"


class TestSessionSerializer:
    """Tests for reading session editor input."""

    def test_pads_single_digit_hours(self):
        serializer = SessionSerializer(data={"start_time": "7:05", "end_time": "9:00"})
        assert serializer.is_valid()
        assert serializer.validated_data["start_time"] == "07:05"
        assert serializer.to_session().end_time == "09:00"

    def test_keeps_malformed_time_for_validation(self):
        serializer = SessionSerializer(data={"start_time": "7.05"})
        assert serializer.is_valid()
        assert serializer.validated_data["start_time"] == "7.05"

    def test_day_from_iso_datetime(self):
        serializer = SessionSerializer(data={"day": "2025-01-10T00:00:00.000Z"})
        assert serializer.is_valid()
        assert serializer.to_session().day == date(2025, 1, 10)
