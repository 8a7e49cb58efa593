"""Django ORM implementation of the BookingStore."""

import logging
from decimal import Decimal

from django.db import DatabaseError, transaction
from django.db.models import Count, Sum

from bookings import models
from bookings.domain import Booking, BookingId, BookingStatus, NewBooking, Ticket
from bookings.stores.interfaces import BookingStore
from common.errors import PersistenceError
from common.results import WriteResult
from events.domain import Money

logger = logging.getLogger(__name__)


def to_domain(booking: models.Booking) -> Booking:
    return Booking(
        id=BookingId(booking.id),
        user_id=booking.user_id,
        event_id=booking.event_id,
        event_name=booking.event_name,
        event_starts_at=booking.event_starts_at,
        tickets=tuple(
            Ticket(id=ticket.id, category_name=ticket.category_name, price=Money(ticket.price))
            for ticket in booking.tickets.all()
        ),
        total_amount=Money(booking.total_amount),
        created_at=booking.created_at,
        status=BookingStatus(booking.status),
        payment_screenshot=booking.payment_screenshot or None,
    )


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def _queryset(self):
        return models.Booking.objects.prefetch_related("tickets")

    def create_booking(self, booking: NewBooking) -> WriteResult[Booking]:
        try:
            with transaction.atomic():
                row = models.Booking.objects.create(
                    user_id=booking.user_id,
                    event_id=booking.event_id,
                    event_name=booking.event_name,
                    event_starts_at=booking.event_starts_at,
                    total_amount=booking.total_amount,
                    status=BookingStatus.PAYMENT_PENDING.value,
                    payment_screenshot=booking.payment_screenshot or "",
                )
                models.Ticket.objects.bulk_create(
                    models.Ticket(booking=row, category_name=ticket.category_name, price=ticket.price)
                    for ticket in booking.tickets
                )
        except DatabaseError:
            logger.exception(
                "Booking write failed",
                extra={"user_id": booking.user_id, "event_id": str(booking.event_id)},
            )
            return WriteResult.failure(PersistenceError("create", "bookings"))
        return WriteResult.success(to_domain(self._queryset().get(id=row.id)))

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        booking = self._queryset().filter(id=booking_id.value).first()
        return to_domain(booking) if booking is not None else None

    def list_for_user(self, user_id: int) -> list[Booking]:
        return [to_domain(booking) for booking in self._queryset().filter(user_id=user_id)]

    def list_bookings(
        self, status: BookingStatus | None = None, limit: int | None = None
    ) -> list[Booking]:
        bookings = self._queryset()
        if status is not None:
            bookings = bookings.filter(status=status.value)
        if limit is not None:
            bookings = bookings[:limit]
        return [to_domain(booking) for booking in bookings]

    def set_status(self, booking_id: BookingId, status: BookingStatus) -> WriteResult[Booking]:
        try:
            models.Booking.objects.filter(id=booking_id.value).update(status=status.value)
        except DatabaseError:
            logger.exception("Booking status write failed", extra={"booking_id": str(booking_id)})
            return WriteResult.failure(PersistenceError("update", f"bookings/{booking_id}"))
        return WriteResult.success(self.get_booking(booking_id))

    def confirmed_totals(self) -> tuple[int, Decimal]:
        confirmed = models.Booking.objects.filter(status=BookingStatus.CONFIRMED.value)
        revenue = confirmed.aggregate(total=Sum("total_amount"))["total"] or Decimal("0")
        tickets = models.Ticket.objects.filter(
            booking__status=BookingStatus.CONFIRMED.value
        ).aggregate(count=Count("id"))["count"]
        return tickets, revenue
