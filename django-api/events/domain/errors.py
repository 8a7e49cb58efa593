"""Domain errors for the events module."""

from common.errors import DomainError, ErrorCode


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class TicketCategoryNotFoundError(DomainError):
    """Raised when a ticket category does not belong to the event."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_CATEGORY_NOT_FOUND,
            message="Ticket category not found",
        )
        self.category_id = category_id


class InvalidEventError(DomainError):
    """Raised when admin input breaks an event invariant."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_EVENT, message=message)
