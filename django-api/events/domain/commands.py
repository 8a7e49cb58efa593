"""Admin input for creating and editing events."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class TicketCategoryDraft:
    name: str
    price: Decimal
    limit: int
    # Set when editing an existing category; new categories start with sold=0.
    id: str | None = None


@dataclass(frozen=True)
class EventDraft:
    name: str
    description: str
    venue: str
    category: str
    starts_at: datetime
    ticket_categories: tuple[TicketCategoryDraft, ...]
    booking_deadline: datetime | None = None
    image_url: str | None = None
