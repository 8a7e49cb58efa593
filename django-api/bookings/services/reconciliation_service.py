"""Administrator decisions on identity documents and payments.

Status writes here are conditionless: whatever the current status, the
requested one is written. Only the transition into Confirmed has a side
effect on the event's sold counters.
"""

import logging

from accounts.domain import DECISION_STATUSES, Account, VerificationStatus
from accounts.domain.errors import UserNotFoundError
from accounts.stores.interfaces import AccountStore
from audit.domain import AuditAction
from audit.services.audit_service import AuditService
from bookings.domain import PAYMENT_DECISIONS, Booking, BookingStatus
from bookings.domain.errors import BookingNotFoundError
from bookings.services.booking_service import parse_booking_id
from bookings.stores.interfaces import BookingStore
from common.errors import InvalidStatusError
from common.notifications import notify
from common.results import WriteResult
from events.domain import EventId
from events.services.event_service import EventService

logger = logging.getLogger(__name__)


def _parse(enum_class, value: str, allowed):
    try:
        parsed = enum_class(value)
    except ValueError:
        raise InvalidStatusError(value) from None
    if parsed not in allowed:
        raise InvalidStatusError(value)
    return parsed


class ReconciliationService:
    def __init__(
        self,
        bookings: BookingStore,
        accounts: AccountStore,
        events: EventService,
        audit: AuditService,
    ) -> None:
        self._bookings = bookings
        self._accounts = accounts
        self._events = events
        self._audit = audit

    def list_bookings(self, status: str | None = None) -> list[Booking]:
        parsed = _parse(BookingStatus, status, BookingStatus) if status else None
        return self._bookings.list_bookings(status=parsed)

    def set_identity_verification(self, user_id: int, status: str) -> WriteResult[Account]:
        """Record an identity decision and tell the user.

        Raises:
            InvalidStatusError: If status is not Verified or Rejected.
            UserNotFoundError: If the user does not exist.
        """
        decision = _parse(VerificationStatus, status, DECISION_STATUSES)
        if self._accounts.get_account(user_id) is None:
            raise UserNotFoundError(user_id)

        result = self._accounts.set_verification_status(user_id, decision)
        if not result.ok:
            return result

        account = result.value
        logger.info("Identity marked %s", decision.value, extra={"user_id": user_id})
        if decision is VerificationStatus.VERIFIED:
            body = "Your ID has been verified. You can now book tickets on TicketSwift."
        else:
            body = "Your ID could not be verified. Please upload a clearer photo of your ID."
        notify(account.email, f"Your ID verification status: {decision.value}", body)
        return result

    def set_payment_status(self, booking_id: str, status: str) -> WriteResult[Booking]:
        """Record a payment decision.

        Moving into Confirmed adds the booking's tickets to the event's sold
        counters without a capacity check.

        Raises:
            InvalidStatusError: If status is not Confirmed or Cancelled.
            BookingNotFoundError: If the booking does not exist.
        """
        decision = _parse(BookingStatus, status, PAYMENT_DECISIONS)
        booking = self._get(booking_id)

        result = self._bookings.set_status(booking.id, decision)
        if not result.ok:
            return result

        log_extra = {"booking_id": str(booking.id), "event_id": str(booking.event_id)}
        logger.info("Payment marked %s", decision.value, extra=log_extra)

        if decision is BookingStatus.CONFIRMED and booking.status is not BookingStatus.CONFIRMED:
            sold = self._events.add_sold(EventId(booking.event_id), booking.counts_by_category())
            if not sold.ok:
                logger.error("Sold counters not updated for confirmed booking", extra=log_extra)
            self._notify_owner(
                booking,
                "Your booking is confirmed",
                f'Your payment for "{booking.event_name}" has been confirmed. '
                "Your tickets are ready to download.",
            )
        elif decision is BookingStatus.CANCELLED:
            self._notify_owner(
                booking,
                "Your booking was cancelled",
                f'Your booking for "{booking.event_name}" has been cancelled.',
            )
        return result

    def cancel_booking(self, admin_id: int, booking_id: str) -> WriteResult[Booking]:
        """Cancel any booking, whatever its status. Sold counters are not decremented."""
        booking = self._get(booking_id)
        result = self._bookings.set_status(booking.id, BookingStatus.CANCELLED)
        if not result.ok:
            return result

        self._audit.record(
            admin_id,
            AuditAction.CANCEL_BOOKING_ADMIN,
            {
                "booking_id": str(booking.id),
                "event_id": str(booking.event_id),
                "booking_user_id": booking.user_id,
            },
        )
        self._notify_owner(
            booking,
            "Your booking was cancelled",
            f'Your booking for "{booking.event_name}" has been cancelled by an administrator.',
        )
        return result

    def _get(self, booking_id: str) -> Booking:
        booking = self._bookings.get_booking(parse_booking_id(booking_id))
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def _notify_owner(self, booking: Booking, subject: str, body: str) -> None:
        owner = self._accounts.get_account(booking.user_id)
        if owner is not None:
            notify(owner.email, subject, body)
