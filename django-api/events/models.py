"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    venue = models.CharField(max_length=255)
    category = models.CharField(max_length=100)
    starts_at = models.DateTimeField()
    booking_deadline = models.DateTimeField(blank=True, null=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["starts_at"], name="event_starts_at_idx"),
            models.Index(fields=["category"], name="event_category_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class TicketCategory(models.Model):
    """Persistence model for an event's ticket categories.

    ``sold`` has no database constraint against ``limit``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="ticket_categories"
    )
    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    limit = models.PositiveIntegerField()
    sold = models.PositiveIntegerField(default=0)
    position = models.PositiveSmallIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["position", "created_at"]
        verbose_name_plural = "ticket categories"
        indexes = [
            models.Index(fields=["event"], name="ticket_category_event_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
