from events.handlers.views import (
    AdminEventDetailView,
    AdminEventInsightsView,
    AdminEventListView,
    EventDetailView,
    EventListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "AdminEventListView",
    "AdminEventDetailView",
    "AdminEventInsightsView",
]
