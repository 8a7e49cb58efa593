"""In-memory store implementations for service unit tests."""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from django.utils import timezone

from accounts.domain import Account, VerificationStatus
from accounts.stores.interfaces import AccountStore
from audit.domain import AuditAction, AuditEvent
from audit.stores.interfaces import AuditStore
from bookings.domain import Booking, BookingId, BookingStatus, NewBooking, Ticket
from bookings.stores.interfaces import BookingStore
from common.errors import PersistenceError
from common.results import WriteResult
from events.domain import (
    Capacity,
    Event,
    EventDraft,
    EventId,
    Money,
    TicketCategory,
    TicketCategoryId,
)
from events.stores.interfaces import EventStore


def make_category(name: str = "General", price: str = "50.00", limit: int = 10, sold: int = 0) -> TicketCategory:
    return TicketCategory(
        id=TicketCategoryId(uuid.uuid4()),
        name=name,
        price=Money(Decimal(price)),
        limit=Capacity(limit),
        sold=Capacity(sold),
    )


def make_event(
    *categories: TicketCategory,
    name: str = "Summer Fest",
    starts_at: datetime | None = None,
    booking_deadline: datetime | None = None,
) -> Event:
    now = timezone.now()
    return Event(
        id=EventId(uuid.uuid4()),
        name=name,
        description="An evening of live music.",
        venue="Main Hall",
        category="Music",
        starts_at=starts_at or now + timedelta(days=30),
        booking_deadline=booking_deadline,
        image_url=None,
        created_at=now,
        updated_at=now,
        ticket_categories=categories or (make_category(),),
    )


def make_account(
    user_id: int = 1,
    status: VerificationStatus = VerificationStatus.VERIFIED,
    is_disabled: bool = False,
    email: str = "ada@example.com",
) -> Account:
    return Account(
        id=user_id,
        name="Ada",
        email=email,
        verification_status=status,
        is_admin=False,
        is_disabled=is_disabled,
        date_joined=timezone.now(),
    )


class FakeEventStore(EventStore):
    def __init__(self, *events: Event) -> None:
        self.events = {event.id: event for event in events}
        self.sold_calls: list[tuple[EventId, dict[str, int]]] = []

    def list_events(self, query=None, category=None) -> list[Event]:
        events = list(self.events.values())
        if query:
            events = [event for event in events if query.lower() in event.name.lower()]
        if category:
            events = [event for event in events if event.category.lower() == category.lower()]
        return events

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self.events

    def create_event(self, draft: EventDraft) -> WriteResult[Event]:
        event = make_event(
            *(
                make_category(category.name, str(category.price), category.limit)
                for category in draft.ticket_categories
            ),
            name=draft.name,
            starts_at=draft.starts_at,
            booking_deadline=draft.booking_deadline,
        )
        self.events[event.id] = event
        return WriteResult.success(event)

    def update_event(self, event_id: EventId, draft: EventDraft) -> WriteResult[Event]:
        event = replace(self.events[event_id], name=draft.name)
        self.events[event_id] = event
        return WriteResult.success(event)

    def delete_event(self, event_id: EventId) -> WriteResult[None]:
        self.events.pop(event_id, None)
        return WriteResult.success()

    def add_sold(self, event_id: EventId, counts_by_category: dict[str, int]) -> WriteResult[None]:
        self.sold_calls.append((event_id, counts_by_category))
        event = self.events.get(event_id)
        if event is not None:
            self.events[event_id] = replace(
                event,
                ticket_categories=tuple(
                    replace(
                        category,
                        sold=Capacity(category.sold.value + counts_by_category.get(category.name, 0)),
                    )
                    for category in event.ticket_categories
                ),
            )
        return WriteResult.success()


class FakeAccountStore(AccountStore):
    def __init__(self, *accounts: Account) -> None:
        self.accounts = {account.id: account for account in accounts}
        self.passwords: dict[int, str] = {}

    def get_account(self, user_id: int) -> Account | None:
        return self.accounts.get(user_id)

    def list_accounts(self) -> list[Account]:
        return list(self.accounts.values())

    def count_accounts(self) -> int:
        return len(self.accounts)

    def email_taken(self, email: str) -> bool:
        return any(account.email.lower() == email.lower() for account in self.accounts.values())

    def create_account(self, name: str, email: str, password: str) -> WriteResult[Account]:
        account = replace(
            make_account(len(self.accounts) + 1, VerificationStatus.NOT_SUBMITTED, email=email),
            name=name,
        )
        self.accounts[account.id] = account
        self.passwords[account.id] = password
        return WriteResult.success(account)

    def update_name(self, user_id: int, name: str) -> WriteResult[Account]:
        return self._update(user_id, name=name)

    def check_password(self, user_id: int, password: str) -> bool:
        return self.passwords.get(user_id) == password

    def set_password(self, user_id: int, password: str) -> WriteResult[Account]:
        self.passwords[user_id] = password
        return WriteResult.success(self.accounts[user_id])

    def submit_identity(self, user_id: int, document) -> WriteResult[Account]:
        return self._update(user_id, verification_status=VerificationStatus.PENDING)

    def set_verification_status(self, user_id: int, status: VerificationStatus) -> WriteResult[Account]:
        return self._update(user_id, verification_status=status)

    def set_admin(self, user_id: int, is_admin: bool) -> WriteResult[Account]:
        return self._update(user_id, is_admin=is_admin)

    def set_disabled(self, user_id: int, is_disabled: bool) -> WriteResult[Account]:
        return self._update(user_id, is_disabled=is_disabled)

    def announcement_recipients(self) -> list[str]:
        return [account.email for account in self.accounts.values() if not account.is_disabled]

    def _update(self, user_id: int, **fields) -> WriteResult[Account]:
        account = replace(self.accounts[user_id], **fields)
        self.accounts[user_id] = account
        return WriteResult.success(account)


class FakeBookingStore(BookingStore):
    def __init__(self, fail_writes: bool = False) -> None:
        self.bookings: dict[BookingId, Booking] = {}
        self.fail_writes = fail_writes

    def create_booking(self, booking: NewBooking) -> WriteResult[Booking]:
        if self.fail_writes:
            return WriteResult.failure(PersistenceError("create", "bookings"))
        created = Booking(
            id=BookingId(uuid.uuid4()),
            user_id=booking.user_id,
            event_id=booking.event_id,
            event_name=booking.event_name,
            event_starts_at=booking.event_starts_at,
            tickets=tuple(
                Ticket(id=uuid.uuid4(), category_name=ticket.category_name, price=Money(ticket.price))
                for ticket in booking.tickets
            ),
            total_amount=Money(booking.total_amount),
            created_at=timezone.now(),
            status=BookingStatus.PAYMENT_PENDING,
            payment_screenshot=booking.payment_screenshot,
        )
        self.bookings[created.id] = created
        return WriteResult.success(created)

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def list_for_user(self, user_id: int) -> list[Booking]:
        return [booking for booking in self.bookings.values() if booking.user_id == user_id]

    def list_bookings(self, status=None, limit=None) -> list[Booking]:
        bookings = sorted(self.bookings.values(), key=lambda booking: booking.created_at, reverse=True)
        if status is not None:
            bookings = [booking for booking in bookings if booking.status is status]
        return bookings[:limit] if limit is not None else bookings

    def set_status(self, booking_id: BookingId, status: BookingStatus) -> WriteResult[Booking]:
        if self.fail_writes:
            return WriteResult.failure(PersistenceError("update", f"bookings/{booking_id}"))
        booking = replace(self.bookings[booking_id], status=status)
        self.bookings[booking_id] = booking
        return WriteResult.success(booking)

    def confirmed_totals(self) -> tuple[int, Decimal]:
        confirmed = [booking for booking in self.bookings.values() if booking.status is BookingStatus.CONFIRMED]
        return (
            sum(booking.number_of_tickets for booking in confirmed),
            sum((booking.total_amount.amount for booking in confirmed), Decimal("0")),
        )


class FakeAuditStore(AuditStore):
    def __init__(self) -> None:
        self.events: list[AuditEvent] = []

    def append(self, user_id: int | None, action: AuditAction, details: dict[str, Any]) -> WriteResult[AuditEvent]:
        event = AuditEvent(
            id=uuid.uuid4(), user_id=user_id, action=action, timestamp=timezone.now(), details=details
        )
        self.events.insert(0, event)
        return WriteResult.success(event)

    def list_events(self, action: AuditAction | None = None) -> list[AuditEvent]:
        if action is None:
            return list(self.events)
        return [event for event in self.events if event.action is action]
