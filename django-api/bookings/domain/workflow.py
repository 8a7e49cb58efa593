"""Per-event booking attempt and the steps that move it forward.

An attempt lives for the duration of one user's checkout on one event:
choose quantities, attach a payment receipt, submit. Every step is a pure
function returning a new attempt, so the same attempt can be stored in a
session, inspected in tests, and replayed.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Self

from bookings.domain.errors import BookingNotAllowedError, InvalidTransitionError
from bookings.domain.gate import GateDecision
from bookings.domain.inventory import MAX_TICKETS_PER_EVENT, AdjustOutcome, TicketSelection
from events.domain import TicketCategory
from verification.flows import ReceiptVerdict

MANUAL_REVIEW_MESSAGE = "Could not verify the receipt automatically. It will be reviewed manually."
RECEIPT_VERIFIED_MESSAGE = "Payment receipt looks good."


class BookingStage(str, Enum):
    SELECTING_TICKETS = "selecting-tickets"
    AWAITING_PAYMENT = "awaiting-payment"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class ReceiptState(str, Enum):
    IDLE = "idle"
    VERIFYING = "verifying"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class ReceiptCheck:
    state: ReceiptState = ReceiptState.IDLE
    message: str | None = None
    # Storage name of the uploaded receipt image.
    reference: str | None = None


@dataclass(frozen=True)
class BookingAttempt:
    event_id: str
    stage: BookingStage = BookingStage.SELECTING_TICKETS
    selection: TicketSelection = TicketSelection()
    receipt: ReceiptCheck = ReceiptCheck()
    booking_id: str | None = None
    error: str | None = None

    @classmethod
    def start(cls, event_id: str) -> Self:
        return cls(event_id=event_id)

    @property
    def can_submit(self) -> bool:
        return (
            self.stage is BookingStage.AWAITING_PAYMENT
            and self.receipt.reference is not None
            and self.receipt.state not in (ReceiptState.VERIFYING, ReceiptState.FAILED)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_id": self.event_id,
            "stage": self.stage.value,
            "selection": self.selection.to_dict(),
            "receipt": {
                "state": self.receipt.state.value,
                "message": self.receipt.message,
                "reference": self.receipt.reference,
            },
            "booking_id": self.booking_id,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        receipt = data.get("receipt") or {}
        return cls(
            event_id=data["event_id"],
            stage=BookingStage(data.get("stage", BookingStage.SELECTING_TICKETS.value)),
            selection=TicketSelection.from_dict(data.get("selection") or {}),
            receipt=ReceiptCheck(
                state=ReceiptState(receipt.get("state", ReceiptState.IDLE.value)),
                message=receipt.get("message"),
                reference=receipt.get("reference"),
            ),
            booking_id=data.get("booking_id"),
            error=data.get("error"),
        )


def _require_stage(attempt: BookingAttempt, stage: BookingStage, action: str) -> None:
    if attempt.stage is not stage:
        raise InvalidTransitionError(f"Cannot {action} while {attempt.stage.value}.")


def adjust_quantity(
    attempt: BookingAttempt,
    categories: Sequence[TicketCategory],
    category_id: str,
    delta: int,
    cap: int = MAX_TICKETS_PER_EVENT,
) -> tuple[BookingAttempt, AdjustOutcome]:
    _require_stage(attempt, BookingStage.SELECTING_TICKETS, "change quantities")
    outcome = attempt.selection.adjust(categories, category_id, delta, cap)
    return replace(attempt, selection=outcome.selection, error=None), outcome


def proceed_to_payment(attempt: BookingAttempt, gate: GateDecision) -> BookingAttempt:
    """Move to the payment step.

    Raises:
        InvalidTransitionError: If not selecting tickets.
        BookingNotAllowedError: If the gate refuses or nothing is selected.
    """
    _require_stage(attempt, BookingStage.SELECTING_TICKETS, "proceed to payment")
    if not gate.allowed:
        raise BookingNotAllowedError(gate.reason.value, gate.message)
    if attempt.selection.is_empty:
        raise BookingNotAllowedError("empty-selection", "Please select at least one ticket.")
    return replace(attempt, stage=BookingStage.AWAITING_PAYMENT, error=None)


def return_to_selection(attempt: BookingAttempt) -> BookingAttempt:
    """Go back to quantities. The selection is kept, the receipt is dropped."""
    _require_stage(attempt, BookingStage.AWAITING_PAYMENT, "go back")
    return replace(
        attempt, stage=BookingStage.SELECTING_TICKETS, receipt=ReceiptCheck(), error=None
    )


def attach_receipt(attempt: BookingAttempt, reference: str) -> BookingAttempt:
    """Record a new receipt upload; its screening result is still unknown."""
    _require_stage(attempt, BookingStage.AWAITING_PAYMENT, "upload a receipt")
    return replace(
        attempt,
        receipt=ReceiptCheck(state=ReceiptState.VERIFYING, reference=reference),
        error=None,
    )


def record_receipt_verdict(
    attempt: BookingAttempt, reference: str, verdict: ReceiptVerdict
) -> BookingAttempt:
    """Apply a screening verdict to the receipt it was computed for.

    A verdict for a receipt that has since been replaced or removed is ignored.
    """
    if attempt.receipt.reference != reference:
        return attempt
    if verdict.accepted:
        receipt = ReceiptCheck(ReceiptState.PASSED, RECEIPT_VERIFIED_MESSAGE, reference)
    else:
        receipt = ReceiptCheck(ReceiptState.FAILED, verdict.reason, reference)
    return replace(attempt, receipt=receipt)


def record_receipt_check_unavailable(attempt: BookingAttempt, reference: str) -> BookingAttempt:
    """Screening could not run; the receipt goes through for manual review."""
    if attempt.receipt.reference != reference:
        return attempt
    return replace(
        attempt, receipt=ReceiptCheck(ReceiptState.PASSED, MANUAL_REVIEW_MESSAGE, reference)
    )


def remove_receipt(attempt: BookingAttempt) -> BookingAttempt:
    _require_stage(attempt, BookingStage.AWAITING_PAYMENT, "remove the receipt")
    return replace(attempt, receipt=ReceiptCheck(), error=None)


def begin_submission(attempt: BookingAttempt) -> BookingAttempt:
    """Lock the attempt while the booking is written.

    Raises:
        InvalidTransitionError: If not awaiting payment or the receipt is
            missing, still being checked, or failed screening.
    """
    _require_stage(attempt, BookingStage.AWAITING_PAYMENT, "submit")
    if attempt.receipt.reference is None:
        raise InvalidTransitionError("Please upload your payment receipt.")
    if attempt.receipt.state is ReceiptState.VERIFYING:
        raise InvalidTransitionError("The payment receipt is still being checked.")
    if attempt.receipt.state is ReceiptState.FAILED:
        raise InvalidTransitionError("Please upload a valid payment receipt.")
    return replace(attempt, stage=BookingStage.SUBMITTING, error=None)


def submission_failed(attempt: BookingAttempt, message: str) -> BookingAttempt:
    _require_stage(attempt, BookingStage.SUBMITTING, "fail a submission")
    return replace(attempt, stage=BookingStage.AWAITING_PAYMENT, error=message)


def submission_succeeded(attempt: BookingAttempt, booking_id: str) -> BookingAttempt:
    _require_stage(attempt, BookingStage.SUBMITTING, "complete a submission")
    return replace(attempt, stage=BookingStage.SUBMITTED, booking_id=booking_id, error=None)
