"""Store interfaces for bookings."""

from abc import ABC, abstractmethod
from decimal import Decimal

from bookings.domain import Booking, BookingId, BookingStatus, NewBooking
from common.results import WriteResult


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def create_booking(self, booking: NewBooking) -> WriteResult[Booking]:
        """Write the booking and one ticket row per ticket in a single transaction."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        ...

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[Booking]:
        """Return a user's bookings, newest first."""
        ...

    @abstractmethod
    def list_bookings(
        self, status: BookingStatus | None = None, limit: int | None = None
    ) -> list[Booking]:
        """Return all bookings, newest first."""
        ...

    @abstractmethod
    def set_status(self, booking_id: BookingId, status: BookingStatus) -> WriteResult[Booking]:
        """Write the status without checking the current one."""
        ...

    @abstractmethod
    def confirmed_totals(self) -> tuple[int, Decimal]:
        """Tickets and revenue across Confirmed bookings."""
        ...
