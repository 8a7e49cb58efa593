"""Decide whether a user may book tickets for an event.

Pure function of its inputs; callers re-evaluate it on every request since
authentication, verification status and the clock all change independently.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from accounts.domain import Account, VerificationStatus
from events.domain import Event


class GateReason(str, Enum):
    BOOKING_CLOSED = "booking-closed"
    LOGIN_REQUIRED = "login-required"
    ACCOUNT_DISABLED = "account-disabled"
    AWAITING_APPROVAL = "awaiting-approval"
    RESUBMIT_REQUIRED = "resubmit-required"
    VERIFICATION_REQUIRED = "verification-required"


REASON_MESSAGES = {
    GateReason.BOOKING_CLOSED: "Booking for this event has closed.",
    GateReason.LOGIN_REQUIRED: "Please log in to book tickets.",
    GateReason.ACCOUNT_DISABLED: "Your account has been deactivated.",
    GateReason.AWAITING_APPROVAL: "Your ID verification is pending. You can book tickets once approved.",
    GateReason.RESUBMIT_REQUIRED: "Your ID verification was rejected. Please resubmit your ID.",
    GateReason.VERIFICATION_REQUIRED: "Please complete your ID verification to book tickets.",
}


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    reason: GateReason | None = None

    @property
    def message(self) -> str | None:
        return REASON_MESSAGES[self.reason] if self.reason else None


ALLOWED = GateDecision(allowed=True)


def evaluate_gate(
    is_authenticated: bool,
    verification_status: VerificationStatus | None,
    deadline_passed: bool,
    is_disabled: bool = False,
) -> GateDecision:
    """First matching rule wins: deadline, login, disabled account, verification."""
    if deadline_passed:
        return GateDecision(False, GateReason.BOOKING_CLOSED)
    if not is_authenticated:
        return GateDecision(False, GateReason.LOGIN_REQUIRED)
    if is_disabled:
        return GateDecision(False, GateReason.ACCOUNT_DISABLED)
    if verification_status is not VerificationStatus.VERIFIED:
        match verification_status:
            case VerificationStatus.PENDING:
                return GateDecision(False, GateReason.AWAITING_APPROVAL)
            case VerificationStatus.REJECTED:
                return GateDecision(False, GateReason.RESUBMIT_REQUIRED)
            case _:
                return GateDecision(False, GateReason.VERIFICATION_REQUIRED)
    return ALLOWED


def gate_for(account: Account | None, event: Event, now: datetime) -> GateDecision:
    return evaluate_gate(
        is_authenticated=account is not None,
        verification_status=account.verification_status if account else None,
        deadline_passed=event.booking_closed(now),
        is_disabled=account.is_disabled if account else False,
    )
