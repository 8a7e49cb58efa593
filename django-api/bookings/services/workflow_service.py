"""Booking workflow service: drives a BookingAttempt against live data.

The attempt itself is pure state; this service supplies the event, the
caller's account, the clock, receipt storage and the screening check, and
performs the single write at submission.
"""

import logging
import os
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.core.files.storage import Storage, default_storage
from django.core.files.uploadedfile import UploadedFile
from django.utils import timezone

from accounts.domain import Account
from accounts.domain.errors import InvalidUploadError
from accounts.stores.interfaces import AccountStore
from audit.domain import AuditAction
from audit.services.audit_service import AuditService
from bookings.domain import (
    MAX_TICKETS_PER_EVENT,
    AdjustOutcome,
    Booking,
    BookingAttempt,
    BookingStage,
    GateDecision,
    NewBooking,
    TicketDraft,
    gate_for,
)
from bookings.domain import workflow
from bookings.domain.errors import BookingNotAllowedError, InvalidTransitionError
from bookings.stores.interfaces import BookingStore
from common.results import WriteResult
from events.domain import Event
from events.services.event_service import EventService
from verification.flows import AIServiceError, ReceiptVerdict, to_data_uri, verify_payment_receipt

logger = logging.getLogger(__name__)

RECEIPT_UPLOAD_DIR = "receipts"


@dataclass(frozen=True)
class AttemptView:
    event: Event
    attempt: BookingAttempt
    gate: GateDecision


@dataclass(frozen=True)
class SubmitOutcome:
    attempt: BookingAttempt
    result: WriteResult[Booking]


class BookingWorkflowService:
    def __init__(
        self,
        events: EventService,
        accounts: AccountStore,
        bookings: BookingStore,
        audit: AuditService,
        storage: Storage = default_storage,
        receipt_checker: Callable[[str, Decimal], ReceiptVerdict] = verify_payment_receipt,
        max_tickets: int = MAX_TICKETS_PER_EVENT,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._events = events
        self._accounts = accounts
        self._bookings = bookings
        self._audit = audit
        self._storage = storage
        self._receipt_checker = receipt_checker
        self._max_tickets = max_tickets
        self._clock = clock

    def view(self, event_id: str, user_id: int | None, attempt: BookingAttempt | None) -> AttemptView:
        """Return the event, the attempt (a fresh one if none) and the current gate."""
        event = self._events.get_event(event_id)
        return AttemptView(
            event=event,
            attempt=attempt or BookingAttempt.start(str(event.id)),
            gate=self._gate(event, user_id),
        )

    def adjust_quantity(
        self, attempt: BookingAttempt, category_id: str, delta: int
    ) -> tuple[BookingAttempt, AdjustOutcome]:
        event = self._events.get_event(attempt.event_id)
        return workflow.adjust_quantity(
            attempt, event.ticket_categories, category_id, delta, cap=self._max_tickets
        )

    def proceed(self, attempt: BookingAttempt, user_id: int) -> BookingAttempt:
        event = self._events.get_event(attempt.event_id)
        return workflow.proceed_to_payment(attempt, self._gate(event, user_id))

    def back(self, attempt: BookingAttempt) -> BookingAttempt:
        updated = workflow.return_to_selection(attempt)
        self._discard_file(attempt.receipt.reference)
        return updated

    def upload_receipt(
        self, attempt: BookingAttempt, account: Account, upload: UploadedFile
    ) -> BookingAttempt:
        """Store a receipt image, replacing any earlier one, and screen it.

        Raises:
            InvalidTransitionError: If not awaiting payment.
            InvalidUploadError: If the file is not an image.
        """
        if not (upload.content_type or "").startswith("image/"):
            raise InvalidUploadError("Please upload an image of your payment receipt.")

        previous = attempt.receipt.reference
        _, extension = os.path.splitext(upload.name or "")
        name = f"{RECEIPT_UPLOAD_DIR}/{account.id}/{uuid.uuid4().hex}{extension.lower()}"
        reference = self._storage.save(name, upload)
        try:
            attempt = workflow.attach_receipt(attempt, reference)
        except InvalidTransitionError:
            self._discard_file(reference)
            raise
        self._discard_file(previous)

        expected = attempt.selection.total_price()
        try:
            verdict = self._receipt_checker(to_data_uri(upload), expected)
        except AIServiceError:
            logger.warning(
                "Receipt screening unavailable, accepting for manual review",
                extra={"user_id": account.id, "event_id": attempt.event_id},
            )
            return workflow.record_receipt_check_unavailable(attempt, reference)

        if not verdict.accepted:
            logger.info(
                "Receipt screening failed: %s",
                verdict.reason,
                extra={"user_id": account.id, "event_id": attempt.event_id},
            )
        return workflow.record_receipt_verdict(attempt, reference, verdict)

    def remove_receipt(self, attempt: BookingAttempt) -> BookingAttempt:
        updated = workflow.remove_receipt(attempt)
        self._discard_file(attempt.receipt.reference)
        return updated

    def submit(self, attempt: BookingAttempt, account: Account) -> SubmitOutcome:
        """Write the booking in PaymentPending from the attempt's snapshot.

        Capacity is not reserved and ``sold`` counters are not touched.

        Raises:
            BookingNotAllowedError: If the gate now refuses the user.
            InvalidTransitionError: If the attempt cannot be submitted.
        """
        event = self._events.get_event(attempt.event_id)
        gate = self._gate(event, account.id)
        if not gate.allowed:
            raise BookingNotAllowedError(gate.reason.value, gate.message)

        attempt = workflow.begin_submission(attempt)
        tickets = tuple(
            TicketDraft(category_name=line.category_name, price=line.unit_price)
            for line in attempt.selection.lines
            for _ in range(line.quantity)
        )
        new_booking = NewBooking(
            user_id=account.id,
            event_id=event.id.value,
            event_name=event.name,
            event_starts_at=event.starts_at,
            tickets=tickets,
            total_amount=attempt.selection.total_price(),
            payment_screenshot=attempt.receipt.reference,
        )

        result = self._bookings.create_booking(new_booking)
        if not result.ok:
            return SubmitOutcome(workflow.submission_failed(attempt, result.error.message), result)

        booking = result.value
        self._audit.record(
            account.id,
            AuditAction.CREATE_BOOKING,
            {
                "booking_id": str(booking.id),
                "event_id": str(booking.event_id),
                "number_of_tickets": booking.number_of_tickets,
                "total_price": str(booking.total_amount.amount),
            },
        )
        logger.info(
            "Booking submitted",
            extra={"user_id": account.id, "event_id": str(event.id), "booking_id": str(booking.id)},
        )
        return SubmitOutcome(workflow.submission_succeeded(attempt, str(booking.id)), result)

    def discard(self, attempt: BookingAttempt) -> None:
        """Drop an attempt; a receipt not yet attached to a booking is deleted."""
        if attempt.stage is not BookingStage.SUBMITTED:
            self._discard_file(attempt.receipt.reference)

    def _gate(self, event: Event, user_id: int | None) -> GateDecision:
        account = self._accounts.get_account(user_id) if user_id is not None else None
        return gate_for(account, event, self._clock())

    def _discard_file(self, reference: str | None) -> None:
        if reference and self._storage.exists(reference):
            self._storage.delete(reference)
