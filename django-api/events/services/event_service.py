"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable

from common.notifications import notify_many
from common.results import WriteResult
from events.domain import Event, EventDraft, EventId
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventError,
    InvalidEventIdError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidEventIdError() from None


class EventService:
    """Service for event catalog and admin event operations."""

    def __init__(
        self,
        store: EventStore,
        announcement_recipients: Callable[[], list[str]] | None = None,
    ) -> None:
        self._store = store
        self._announcement_recipients = announcement_recipients

    def list_events(self, query: str | None = None, category: str | None = None) -> list[Event]:
        """Return all events, optionally filtered by name and category."""
        return self._store.list_events(query=query or None, category=category or None)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, draft: EventDraft) -> WriteResult[Event]:
        """Create an event and announce it to every account with an email.

        Raises:
            InvalidEventError: If the draft breaks an event invariant.
        """
        self._validate(draft)
        result = self._store.create_event(draft)
        if result.ok:
            event = result.value
            logger.info("Event created", extra={"event_id": str(event.id)})
            self._announce(event)
        return result

    def update_event(self, event_id: str, draft: EventDraft) -> WriteResult[Event]:
        """Update an event, keeping sold counts of categories that survive.

        Raises:
            InvalidEventIdError, EventNotFoundError, InvalidEventError
        """
        existing = self.get_event(event_id)
        self._validate(draft)

        for category in draft.ticket_categories:
            if category.id is None:
                continue
            current = existing.find_category(category.id)
            if current is None:
                raise InvalidEventError("Ticket category does not belong to this event.")
            if category.limit < current.sold.value:
                raise InvalidEventError(
                    f"Limit for '{category.name}' cannot be lower than the {current.sold.value} already sold."
                )

        result = self._store.update_event(existing.id, draft)
        if result.ok:
            logger.info("Event updated", extra={"event_id": str(existing.id)})
        return result

    def delete_event(self, event_id: str) -> WriteResult[None]:
        """Hard-delete an event. Bookings keep their denormalized copy."""
        existing = self.get_event(event_id)
        result = self._store.delete_event(existing.id)
        if result.ok:
            logger.info("Event deleted", extra={"event_id": str(existing.id)})
        return result

    def add_sold(self, event_id: EventId, counts_by_category: dict[str, int]) -> WriteResult[None]:
        """Increment sold counters without checking capacity.

        Callers decide when tickets count as sold; overshooting ``limit`` is
        logged, not refused.
        """
        result = self._store.add_sold(event_id, counts_by_category)
        if not result.ok:
            return result

        event = self._store.get_event(event_id)
        if event is not None:
            for category in event.ticket_categories:
                if category.sold.value > category.limit.value:
                    logger.warning(
                        "Ticket category oversold: %s sold %d of %d",
                        category.name,
                        category.sold.value,
                        category.limit.value,
                        extra={"event_id": str(event_id)},
                    )
        return result

    @staticmethod
    def _validate(draft: EventDraft) -> None:
        if not draft.ticket_categories:
            raise InvalidEventError("At least one ticket category is required.")
        for category in draft.ticket_categories:
            if not category.name.strip():
                raise InvalidEventError("Category name is required.")
            if category.price < 0:
                raise InvalidEventError("Price must be a positive number.")
            if category.limit < 1:
                raise InvalidEventError("Limit must be at least 1.")
        if draft.booking_deadline is not None and draft.booking_deadline > draft.starts_at:
            raise InvalidEventError("Booking deadline must not be after the event starts.")

    def _announce(self, event: Event) -> None:
        if self._announcement_recipients is None:
            return
        notify_many(
            self._announcement_recipients(),
            f"New Event Added: {event.name}",
            f'Hi there,\n\nA new event, "{event.name}", has just been added to TicketSwift. '
            "Check it out!\n\nThanks,\nThe TicketSwift Team",
        )
