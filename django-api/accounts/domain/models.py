"""Domain models for user accounts."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class VerificationStatus(str, Enum):
    """State of a user's identity-document review."""

    NOT_SUBMITTED = "NotSubmitted"
    PENDING = "Pending"
    VERIFIED = "Verified"
    REJECTED = "Rejected"


# Statuses from which a user may upload (or re-upload) an identity document.
UPLOADABLE_STATUSES = frozenset({VerificationStatus.NOT_SUBMITTED, VerificationStatus.REJECTED})

# Outcomes an administrator can record.
DECISION_STATUSES = frozenset({VerificationStatus.VERIFIED, VerificationStatus.REJECTED})


@dataclass(frozen=True)
class Account:
    """Domain representation of a user."""

    id: int
    name: str
    email: str
    verification_status: VerificationStatus
    is_admin: bool
    is_disabled: bool
    date_joined: datetime

    @property
    def is_verified(self) -> bool:
        return self.verification_status is VerificationStatus.VERIFIED
