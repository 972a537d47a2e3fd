"""Pytest configuration and shared fixtures."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from events import models as event_models
from tests.fakes import NOW, FakeClock



@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def organizer(db):
    return get_user_model().objects.create_user(username="organizer", password="pw")


@pytest.fixture
def attendee(db):
    return get_user_model().objects.create_user(username="attendee", password="pw")


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(
        username="staff", password="pw", is_staff=True
    )


@pytest.fixture
def event(organizer):
    return event_models.Event.objects.create(
        organizer=organizer,
        name="Summer Festival",
        status=event_models.Event.Status.PUBLISHED,
    )


@pytest.fixture
def ticket_type(event):
    return event_models.TicketType.objects.create(
        event=event, name="General Admission", price=Decimal("100.00"), total_available=5
    )


@pytest.fixture
def discount_window():
    """A validity window that contains the real current time."""
    from django.utils import timezone

    now = timezone.now()
    return now - timedelta(days=1), now + timedelta(days=1)
