"""Django ORM models (persistence layer) for bookings."""

import uuid

from django.conf import settings
from django.db import models

from bookings.domain import BookingStatus


class Booking(models.Model):
    """Persistence model for bookings.

    ``event_id`` is a plain column rather than a foreign key: bookings keep
    their denormalized event name and start time after the event is deleted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="bookings"
    )
    event_id = models.UUIDField(db_index=True)
    event_name = models.CharField(max_length=255)
    event_starts_at = models.DateTimeField(blank=True, null=True)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)
    status = models.CharField(
        max_length=20,
        choices=[(status.value, status.value) for status in BookingStatus],
        default=BookingStatus.PAYMENT_PENDING.value,
    )
    payment_screenshot = models.CharField(max_length=500, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="booking_status_idx"),
            models.Index(fields=["-created_at"], name="booking_created_at_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event_name} ({self.status})"


class Ticket(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="tickets")
    category_name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)

    def __str__(self) -> str:
        return f"{self.category_name} - {self.price}"
