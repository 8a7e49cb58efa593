from accounts.domain.models import (
    DECISION_STATUSES,
    UPLOADABLE_STATUSES,
    Account,
    VerificationStatus,
)

__all__ = [
    "Account",
    "VerificationStatus",
    "UPLOADABLE_STATUSES",
    "DECISION_STATUSES",
]
