"""Headline numbers for the admin console."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from accounts.stores.interfaces import AccountStore
from bookings.domain import Booking
from bookings.stores.interfaces import BookingStore
from events.services.event_service import EventService

RECENT_BOOKINGS = 5


@dataclass(frozen=True)
class DashboardStats:
    total_revenue: Decimal
    tickets_sold: int
    user_count: int
    upcoming_events: int
    sold_out_events: int
    recent_bookings: list[Booking]


class DashboardService:
    def __init__(
        self,
        events: EventService,
        accounts: AccountStore,
        bookings: BookingStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._events = events
        self._accounts = accounts
        self._bookings = bookings
        self._clock = clock

    def stats(self) -> DashboardStats:
        """Revenue and tickets count Confirmed bookings only."""
        now = self._clock()
        events = self._events.list_events()
        tickets_sold, revenue = self._bookings.confirmed_totals()
        return DashboardStats(
            total_revenue=revenue,
            tickets_sold=tickets_sold,
            user_count=self._accounts.count_accounts(),
            upcoming_events=sum(1 for event in events if event.starts_at > now),
            sold_out_events=sum(1 for event in events if event.is_sold_out),
            recent_bookings=self._bookings.list_bookings(limit=RECENT_BOOKINGS),
        )
