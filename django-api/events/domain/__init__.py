from events.domain.commands import EventDraft, TicketCategoryDraft
from events.domain.models import Event, TicketCategory
from events.domain.value_objects import Capacity, EventId, Money, TicketCategoryId

__all__ = [
    "Event",
    "TicketCategory",
    "EventDraft",
    "TicketCategoryDraft",
    "EventId",
    "TicketCategoryId",
    "Money",
    "Capacity",
]
