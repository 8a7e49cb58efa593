"""Domain models for bookings and their tickets."""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from events.domain import Money
from events.domain.value_objects import UuidIdentifier


class BookingStatus(str, Enum):
    PAYMENT_PENDING = "PaymentPending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


# Statuses an administrator may set on a booking's payment.
PAYMENT_DECISIONS = frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED})


class BookingId(UuidIdentifier):
    pass


@dataclass(frozen=True)
class Ticket:
    """One admission unit; owned by its booking."""

    id: UUID
    category_name: str
    price: Money


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking.

    Event name and start time are copies taken when the booking was made;
    the event may since have changed or been deleted.
    """

    id: BookingId
    user_id: int
    event_id: UUID
    event_name: str
    event_starts_at: datetime | None
    tickets: tuple[Ticket, ...]
    total_amount: Money
    created_at: datetime
    status: BookingStatus
    payment_screenshot: str | None = None

    @property
    def number_of_tickets(self) -> int:
        return len(self.tickets)

    @property
    def is_downloadable(self) -> bool:
        return self.status is BookingStatus.CONFIRMED

    @property
    def is_cancelled(self) -> bool:
        return self.status is BookingStatus.CANCELLED

    def counts_by_category(self) -> dict[str, int]:
        return dict(Counter(ticket.category_name for ticket in self.tickets))


@dataclass(frozen=True)
class TicketDraft:
    category_name: str
    price: Decimal


@dataclass(frozen=True)
class NewBooking:
    """Everything needed to write a booking; status is always PaymentPending."""

    user_id: int
    event_id: UUID
    event_name: str
    event_starts_at: datetime | None
    tickets: tuple[TicketDraft, ...]
    total_amount: Decimal
    payment_screenshot: str | None = None
