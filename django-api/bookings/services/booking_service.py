"""Booking history and owner actions."""

import logging

from audit.domain import AuditAction
from audit.services.audit_service import AuditService
from bookings.domain import Booking, BookingId, BookingStatus, Ticket
from bookings.domain.errors import (
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    InvalidBookingIdError,
    TicketsNotAvailableError,
)
from bookings.stores.interfaces import BookingStore
from common.results import WriteResult

logger = logging.getLogger(__name__)


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidBookingIdError() from None


class BookingService:
    def __init__(self, store: BookingStore, audit: AuditService) -> None:
        self._store = store
        self._audit = audit

    def list_for_user(self, user_id: int) -> list[Booking]:
        return self._store.list_for_user(user_id)

    def get_own_booking(self, user_id: int, booking_id: str) -> Booking:
        """Return one of the user's bookings.

        Raises:
            InvalidBookingIdError: If booking_id is not a valid UUID.
            BookingNotFoundError: If it does not exist or belongs to someone else.
        """
        booking = self._store.get_booking(parse_booking_id(booking_id))
        if booking is None or booking.user_id != user_id:
            raise BookingNotFoundError(booking_id)
        return booking

    def cancel_own_booking(self, user_id: int, booking_id: str) -> WriteResult[Booking]:
        """Cancel a booking on behalf of its owner. Sold counters are left as they are.

        Raises:
            BookingAlreadyCancelledError: If the booking is already Cancelled.
        """
        booking = self.get_own_booking(user_id, booking_id)
        if booking.is_cancelled:
            raise BookingAlreadyCancelledError(booking_id)

        result = self._store.set_status(booking.id, BookingStatus.CANCELLED)
        if result.ok:
            self._audit.record(
                user_id,
                AuditAction.CANCEL_BOOKING_USER,
                {"booking_id": str(booking.id), "event_id": str(booking.event_id)},
            )
            logger.info(
                "Booking cancelled by owner",
                extra={"user_id": user_id, "booking_id": str(booking.id)},
            )
        return result

    def tickets_for_download(self, user_id: int, booking_id: str) -> tuple[Booking, tuple[Ticket, ...]]:
        """Return the tickets of a Confirmed booking.

        Raises:
            TicketsNotAvailableError: If the booking is PaymentPending or Cancelled.
        """
        booking = self.get_own_booking(user_id, booking_id)
        if not booking.is_downloadable:
            raise TicketsNotAvailableError(booking.status.value)
        return booking, booking.tickets
