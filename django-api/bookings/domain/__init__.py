from bookings.domain.gate import GateDecision, GateReason, evaluate_gate, gate_for
from bookings.domain.inventory import (
    MAX_TICKETS_PER_EVENT,
    AdjustOutcome,
    SelectionWarning,
    TicketSelection,
)
from bookings.domain.models import (
    PAYMENT_DECISIONS,
    Booking,
    BookingId,
    BookingStatus,
    NewBooking,
    Ticket,
    TicketDraft,
)
from bookings.domain.workflow import BookingAttempt, BookingStage, ReceiptCheck, ReceiptState

__all__ = [
    "Booking",
    "BookingId",
    "BookingStatus",
    "PAYMENT_DECISIONS",
    "Ticket",
    "TicketDraft",
    "NewBooking",
    "GateDecision",
    "GateReason",
    "evaluate_gate",
    "gate_for",
    "MAX_TICKETS_PER_EVENT",
    "AdjustOutcome",
    "SelectionWarning",
    "TicketSelection",
    "BookingAttempt",
    "BookingStage",
    "ReceiptCheck",
    "ReceiptState",
]
