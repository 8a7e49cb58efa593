"""Domain error codes shared by all apps."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT = "INVALID_EVENT"
    TICKET_CATEGORY_NOT_FOUND = "TICKET_CATEGORY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    WRONG_PASSWORD = "WRONG_PASSWORD"
    ACCOUNT_DISABLED = "ACCOUNT_DISABLED"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    INVALID_UPLOAD = "INVALID_UPLOAD"
    VERIFICATION_REJECTED = "VERIFICATION_REJECTED"
    VERIFICATION_NOT_ALLOWED = "VERIFICATION_NOT_ALLOWED"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    BOOKING_NOT_ALLOWED = "BOOKING_NOT_ALLOWED"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    BOOKING_ALREADY_CANCELLED = "BOOKING_ALREADY_CANCELLED"
    TICKETS_NOT_AVAILABLE = "TICKETS_NOT_AVAILABLE"
    INVALID_STATUS = "INVALID_STATUS"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PersistenceError(DomainError):
    """Raised (or returned) when a write is rejected by the backing store."""

    def __init__(self, operation: str, path: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILED,
            message="The change could not be saved. Please try again.",
        )
        self.operation = operation
        self.path = path


class InvalidStatusError(DomainError):
    """Raised when a requested target status is not one the action accepts."""

    def __init__(self, status: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS,
            message=f"Status '{status}' is not allowed here.",
        )
        self.status = status
