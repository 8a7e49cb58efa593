"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from events.domain.value_objects import Capacity, EventId, Money, TicketCategoryId


@dataclass(frozen=True)
class TicketCategory:
    """A priced tier within an event with its own capacity.

    ``sold`` is expected to stay at or below ``limit`` but nothing enforces it
    at write time; ``remaining`` floors the difference at zero.
    """

    id: TicketCategoryId
    name: str
    price: Money
    limit: Capacity
    sold: Capacity

    @property
    def remaining(self) -> int:
        return self.limit.left_after(self.sold)

    @property
    def is_sold_out(self) -> bool:
        return self.remaining == 0

    @property
    def revenue(self) -> Decimal:
        return self.price.times(self.sold.value)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    venue: str
    category: str
    starts_at: datetime
    booking_deadline: datetime | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime
    ticket_categories: tuple[TicketCategory, ...] = ()

    def booking_closed(self, now: datetime) -> bool:
        """True once ``now`` is past the booking deadline. No deadline means open."""
        return self.booking_deadline is not None and now > self.booking_deadline

    def find_category(self, category_id: str) -> TicketCategory | None:
        for category in self.ticket_categories:
            if str(category.id) == category_id:
                return category
        return None

    @property
    def total_sold(self) -> int:
        return sum(category.sold.value for category in self.ticket_categories)

    @property
    def total_revenue(self) -> Decimal:
        return sum((category.revenue for category in self.ticket_categories), Decimal("0"))

    @property
    def is_sold_out(self) -> bool:
        return bool(self.ticket_categories) and all(
            category.is_sold_out for category in self.ticket_categories
        )
