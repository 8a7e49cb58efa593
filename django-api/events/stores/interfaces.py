"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Writes return a
WriteResult instead of raising.
"""

from abc import ABC, abstractmethod

from common.results import WriteResult
from events.domain import Event, EventDraft, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, query: str | None = None, category: str | None = None) -> list[Event]:
        """Return events ordered by starts_at ascending, optionally filtered.

        ``query`` matches the event name case-insensitively; ``category`` is
        an exact, case-insensitive match on the category tag.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft) -> WriteResult[Event]:
        """Create an event with its ticket categories, all starting at sold=0."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, draft: EventDraft) -> WriteResult[Event]:
        """Replace event fields and upsert ticket categories.

        Categories in the draft with an id are updated (sold is kept), those
        without an id are created, and existing categories missing from the
        draft are deleted.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> WriteResult[None]:
        """Hard-delete an event and its ticket categories."""
        ...

    @abstractmethod
    def add_sold(self, event_id: EventId, counts_by_category: dict[str, int]) -> WriteResult[None]:
        """Increment sold counters, keyed by ticket category name."""
        ...
