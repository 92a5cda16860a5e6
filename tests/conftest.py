"""Pytest configuration and shared fixtures."""

import itertools
from datetime import date

import pytest
from rest_framework.test import APIClient

from scheduling.domain import Booking, Session


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_session():
    """Build a complete, valid session; override any field by keyword."""
    counter = itertools.count(1)

    def _make(**overrides) -> Session:
        number = next(counter)
        fields = {
            "id": f"s{number}",
            "name": f"Session {number}",
            "venue": "Grand Ballroom",
            "day": date(2025, 1, 10),
            "start_time": "09:00",
            "end_time": "11:00",
        }
        fields.update(overrides)
        return Session(**fields)

    return _make


@pytest.fixture
def make_booking():
    """Build a single-day booking; override any field by keyword."""
    counter = itertools.count(1)

    def _make(**overrides) -> Booking:
        number = next(counter)
        fields = {
            "id": f"b{number}",
            "client_name": f"Client {number}",
            "booking_number": f"BOOK-2025-{number:03d}",
            "event_type": "wedding",
            "event_date": date(2025, 1, 10),
        }
        fields.update(overrides)
        return Booking(**fields)

    return _make
