"""Domain errors for the bookings module."""

from common.errors import DomainError, ErrorCode


class BookingNotFoundError(DomainError):
    def __init__(self, booking_id: str) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")
        self.booking_id = booking_id


class InvalidBookingIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class BookingNotAllowedError(DomainError):
    """Raised when the verification gate blocks booking."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_ALLOWED, message=message)
        self.reason = reason


class InvalidTransitionError(DomainError):
    """Raised when a booking attempt cannot take the requested step."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TRANSITION, message=message)


class BookingAlreadyCancelledError(DomainError):
    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_ALREADY_CANCELLED,
            message="This booking has already been cancelled.",
        )
        self.booking_id = booking_id


class TicketsNotAvailableError(DomainError):
    """Raised when tickets are requested for a booking that is not confirmed."""

    def __init__(self, status: str) -> None:
        super().__init__(
            code=ErrorCode.TICKETS_NOT_AVAILABLE,
            message="Tickets can be downloaded once the payment is confirmed.",
        )
        self.status = status
