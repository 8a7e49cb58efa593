"""Unit tests for the booking gate."""

from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.domain import VerificationStatus
from bookings.domain import GateReason, evaluate_gate, gate_for
from fakes import make_account, make_event


class TestEvaluateGate:
    def test_verified_user_before_deadline_is_allowed(self):
        decision = evaluate_gate(True, VerificationStatus.VERIFIED, deadline_passed=False)
        assert decision.allowed
        assert decision.reason is None
        assert decision.message is None

    def test_deadline_wins_over_everything(self):
        decision = evaluate_gate(False, None, deadline_passed=True, is_disabled=True)
        assert not decision.allowed
        assert decision.reason is GateReason.BOOKING_CLOSED
        assert decision.message == "Booking for this event has closed."

    def test_anonymous_user_must_log_in(self):
        decision = evaluate_gate(False, None, deadline_passed=False)
        assert decision.reason is GateReason.LOGIN_REQUIRED

    def test_disabled_account_is_refused(self):
        decision = evaluate_gate(True, VerificationStatus.VERIFIED, False, is_disabled=True)
        assert decision.reason is GateReason.ACCOUNT_DISABLED

    @pytest.mark.parametrize(
        ("status", "reason"),
        [
            (VerificationStatus.PENDING, GateReason.AWAITING_APPROVAL),
            (VerificationStatus.REJECTED, GateReason.RESUBMIT_REQUIRED),
            (VerificationStatus.NOT_SUBMITTED, GateReason.VERIFICATION_REQUIRED),
        ],
    )
    def test_unverified_statuses(self, status, reason):
        decision = evaluate_gate(True, status, deadline_passed=False)
        assert not decision.allowed
        assert decision.reason is reason


class TestGateFor:
    def test_uses_event_deadline_and_account(self):
        now = timezone.now()
        event = make_event(booking_deadline=now + timedelta(hours=1))

        assert gate_for(make_account(), event, now).allowed
        assert gate_for(make_account(), event, now + timedelta(hours=2)).reason is GateReason.BOOKING_CLOSED
        assert gate_for(None, event, now).reason is GateReason.LOGIN_REQUIRED
