"""Django ORM models (persistence layer).

These models handle database concerns. Scheduling logic lives in scheduling/domain/.
"""

import uuid

from django.db import models

from scheduling.domain.models import BookingStatus


class Venue(models.Model):
    """Persistence model for venues."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    capacity = models.PositiveIntegerField(blank=True, null=True)
    area = models.CharField(max_length=100, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Booking(models.Model):
    """Persistence model for bookings."""

    STATUS_CHOICES = [(status.value, status.value.replace("_", " ").title()) for status in BookingStatus]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    booking_number = models.CharField(max_length=50, unique=True)
    client_name = models.CharField(max_length=255)
    event_type = models.CharField(max_length=100, blank=True, default="")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=BookingStatus.BOOKED.value)
    event_date = models.DateField()
    event_end_date = models.DateField(blank=True, null=True)
    event_duration = models.PositiveSmallIntegerField(default=1)
    hall = models.CharField(max_length=255, blank=True, default="")
    event_start_time = models.CharField(max_length=5, blank=True, default="")
    event_end_time = models.CharField(max_length=5, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["event_date", "created_at"]
        indexes = [
            models.Index(fields=["event_date"]),
            models.Index(fields=["status"]),
        ]

    def __str__(self) -> str:
        return f"{self.booking_number} - {self.client_name}"


class BookingSession(models.Model):
    """Persistence model for booking sessions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="sessions")
    position = models.PositiveIntegerField(default=0)
    session_name = models.CharField(max_length=255)
    session_label = models.CharField(max_length=50, blank=True, default="")
    venue = models.CharField(max_length=255)
    session_date = models.DateField(blank=True, null=True)
    start_time = models.CharField(max_length=5, blank=True, default="")
    end_time = models.CharField(max_length=5, blank=True, default="")
    all_day = models.BooleanField(default=False)
    pax_count = models.PositiveIntegerField(blank=True, null=True)
    special_instructions = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["position", "created_at"]
        indexes = [
            models.Index(fields=["venue", "session_date"]),
        ]

    def __str__(self) -> str:
        return f"{self.booking.booking_number} - {self.session_name}"
