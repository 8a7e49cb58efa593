"""Domain models for the append-only audit log."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID


class AuditAction(str, Enum):
    USER_LOGIN = "user-login"
    CREATE_BOOKING = "create-booking"
    CANCEL_BOOKING_USER = "cancel-booking-user"
    CANCEL_BOOKING_ADMIN = "cancel-booking-admin"


@dataclass(frozen=True)
class AuditEvent:
    """Immutable record of a significant user or admin action."""

    id: UUID
    user_id: int | None
    action: AuditAction
    timestamp: datetime
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def activity(self) -> str:
        """Human-readable description for the admin log viewer."""
        match self.action:
            case AuditAction.USER_LOGIN:
                return "User Logged In"
            case AuditAction.CREATE_BOOKING:
                return f"Booked {self.details.get('number_of_tickets')} ticket(s)"
            case AuditAction.CANCEL_BOOKING_USER:
                return "User Cancelled Booking"
            case AuditAction.CANCEL_BOOKING_ADMIN:
                return "Admin Cancelled Booking"
        return self.action.value
